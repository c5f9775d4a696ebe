"""
Global fixtures for all unit tests.

Services are built over the in-memory repositories from tests.helpers so
no test reaches a real MongoDB.
"""

import pytest

from datacv.common.repositories import reset_repositories
from datacv.services import (
    DocumentInitializationService,
    DocumentService,
    SampleContentService,
    TemplateService,
)
from tests.fixtures.sample_content import make_template, sample_library
from tests.helpers.fake_repositories import (
    FakeDocumentRepository,
    FakeSampleContentRepository,
    FakeTemplateRepository,
)


@pytest.fixture(autouse=True)
def reset_repository_singletons():
    """Drop repository singletons and the pooled client between tests."""
    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def template_repo():
    return FakeTemplateRepository([make_template()])


@pytest.fixture
def sample_repo():
    return FakeSampleContentRepository(sample_library())


@pytest.fixture
def document_repo():
    return FakeDocumentRepository()


@pytest.fixture
def init_service(template_repo, sample_repo, document_repo):
    return DocumentInitializationService(
        template_repository=template_repo,
        sample_content_repository=sample_repo,
        document_repository=document_repo,
        match_limit=5,
        preview_limit=2,
    )


@pytest.fixture
def template_service(template_repo):
    return TemplateService(template_repo)


@pytest.fixture
def sample_content_service(sample_repo):
    return SampleContentService(sample_repo)


@pytest.fixture
def document_service(document_repo):
    return DocumentService(document_repo)
