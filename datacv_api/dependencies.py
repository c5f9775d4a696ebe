"""
Service wiring for route handlers.

Each getter builds a service over the singleton Mongo repositories,
which connect with the settings in Config.
Tests replace these through app.dependency_overrides.
"""

import logging

from fastapi import HTTPException

from datacv.common.repositories import (
    get_document_repository,
    get_sample_content_repository,
    get_template_repository,
)
from datacv.services import (
    DocumentInitializationService,
    DocumentService,
    SampleContentService,
    TemplateService,
)

logger = logging.getLogger(__name__)


def _service_unavailable(error: Exception) -> HTTPException:
    logger.error(f"Failed to initialize repositories: {error}")
    return HTTPException(status_code=500, detail=f"Failed to initialize store: {error}")


def get_initialization_service() -> DocumentInitializationService:
    try:
        return DocumentInitializationService(
            template_repository=get_template_repository(),
            sample_content_repository=get_sample_content_repository(),
            document_repository=get_document_repository(),
        )
    except ValueError as e:
        raise _service_unavailable(e)


def get_template_service() -> TemplateService:
    try:
        return TemplateService(get_template_repository())
    except ValueError as e:
        raise _service_unavailable(e)


def get_sample_content_service() -> SampleContentService:
    try:
        return SampleContentService(get_sample_content_repository())
    except ValueError as e:
        raise _service_unavailable(e)


def get_document_service() -> DocumentService:
    try:
        return DocumentService(get_document_repository())
    except ValueError as e:
        raise _service_unavailable(e)
