"""
Repository Pattern for MongoDB Operations

Provides an abstraction layer over the DataCV collections so services can
be exercised against in-memory implementations in tests.

Public API:
- get_template_repository(): Factory for the document_templates repository
- get_sample_content_repository(): Factory for the sample_content repository
- get_document_repository(): Factory for the resumes/cvs/cover_letters repository
- reset_repositories(): Drop singletons and the pooled client

Usage:
    from datacv.common.repositories import get_template_repository

    template_repo = get_template_repository()
    template = template_repo.find_accessible_by_id(template_id)
"""

from .base import SampleContentQuery, WriteResult
from .template_repository import TemplateRepositoryInterface
from .sample_content_repository import SampleContentRepositoryInterface
from .document_repository import DocumentRepositoryInterface
from .config import (
    get_template_repository,
    get_sample_content_repository,
    get_document_repository,
    reset_repositories,
    RepositoryConfig,
)

__all__ = [
    "get_template_repository",
    "get_sample_content_repository",
    "get_document_repository",
    "reset_repositories",
    "TemplateRepositoryInterface",
    "SampleContentRepositoryInterface",
    "DocumentRepositoryInterface",
    "SampleContentQuery",
    "WriteResult",
    "RepositoryConfig",
]
