"""Package marker for the DataCV API service."""

from version import __version__
