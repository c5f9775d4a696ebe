"""
FastAPI service for DataCV.

Serves document initialization from templates, template browsing,
the caller's documents, and admin curation of sample content.
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from datacv.common.config import Config
from datacv.common.logger import setup_logging
from datacv.common.repositories import get_sample_content_repository
from version import __version__

from .config import settings, validate_config_on_startup
from .models import HealthResponse
from .routes import documents_router, sample_content_router, templates_router

# Configure logging
setup_logging(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT, debug_mode=Config.DEBUG_MODE)
logger = logging.getLogger(__name__)

# Validate configuration at startup
validate_config_on_startup()

app = FastAPI(title="DataCV API", version=__version__)

# Configure CORS using validated settings
if settings.cors_origins_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(documents_router)
app.include_router(templates_router)
app.include_router(sample_content_router)


@app.on_event("startup")
async def prepare_sample_content_store():
    """Create sample content indexes and backfill search_text on startup."""
    try:
        get_sample_content_repository().ensure_indexes()
    except Exception as e:
        logger.error(f"Failed to prepare sample content store: {e}")


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint for container orchestration.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )
