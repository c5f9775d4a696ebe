"""
DataCV API route modules.

Each module handles a specific area of functionality.
"""

from .documents import router as documents_router
from .templates import router as templates_router
from .sample_content import router as sample_content_router

__all__ = [
    "documents_router",
    "templates_router",
    "sample_content_router",
]
