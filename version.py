"""
Version information for the DataCV document service.

This file is the single source of truth for version numbers.
Both the core package and the API service import from here.
"""

__version__ = "0.1.0"
__version_info__ = (0, 1, 0)

# Build metadata (set by CI/CD or manually)
BUILD_DATE = "2026-10-19"
GIT_COMMIT = None  # Will be set at runtime if available
