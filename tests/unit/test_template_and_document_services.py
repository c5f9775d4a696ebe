"""
Tests for TemplateService and DocumentService.
"""

from datetime import datetime, timezone

import pytest

from datacv.common.error_handling import (
    DocumentNotFoundError,
    InvalidDocumentTypeError,
    TemplateNotFoundError,
)
from datacv.common.types import DocumentType
from datacv.services import TemplateService
from datacv.services.template_service import SUMMARY_FIELDS
from tests.fixtures.sample_content import make_template
from tests.helpers.fake_repositories import FakeTemplateRepository


class TestTemplateService:
    """Tests for template browsing."""

    @pytest.fixture
    def service(self):
        return TemplateService(FakeTemplateRepository([
            make_template(id="popular", usage_count=50),
            make_template(id="niche", usage_count=5, target_specialization=["frontend"]),
            make_template(id="draft", is_active=False),
            make_template(id="private", is_public=False),
            make_template(id="cv-1", document_type="cv"),
        ]))

    def test_lists_active_public_templates_most_used_first(self, service):
        templates = service.list_templates("resume")

        assert [t["id"] for t in templates] == ["popular", "niche"]
        assert set(templates[0]) == set(SUMMARY_FIELDS)

    def test_filters_by_specialization(self, service):
        assert [t["id"] for t in service.list_templates("resume", specialization="frontend")] == ["niche"]

    def test_filters_by_industry(self, service):
        assert service.list_templates("resume", industry="finance") == []

    def test_unknown_type_raises(self, service):
        with pytest.raises(InvalidDocumentTypeError):
            service.list_templates("portfolio")

    def test_get_template_returns_drafts(self, service):
        assert service.get_template("draft")["id"] == "draft"

    def test_get_missing_template_raises(self, service):
        with pytest.raises(TemplateNotFoundError):
            service.get_template("missing")


class TestDocumentService:
    """Tests for owner-scoped document access."""

    @pytest.fixture
    def seeded(self, document_repo):
        for doc_id, user_id, updated in [
            ("r1", "user-1", datetime(2026, 1, 1, tzinfo=timezone.utc)),
            ("r2", "user-1", datetime(2026, 2, 1, tzinfo=timezone.utc)),
            ("r3", "user-2", datetime(2026, 3, 1, tzinfo=timezone.utc)),
        ]:
            document_repo.insert_document(
                DocumentType.RESUME,
                {"id": doc_id, "user_id": user_id, "title": doc_id, "updated_at": updated},
            )
        return document_repo

    def test_lists_owned_documents_most_recent_first(self, document_service, seeded):
        documents = document_service.list_documents("resume", "user-1")

        assert [d["id"] for d in documents] == ["r2", "r1"]

    def test_get_owned_document(self, document_service, seeded):
        assert document_service.get_document("resume", "r1", "user-1")["title"] == "r1"

    def test_get_other_users_document_raises(self, document_service, seeded):
        with pytest.raises(DocumentNotFoundError):
            document_service.get_document("resume", "r3", "user-1")

    def test_delete_owned_document(self, document_service, seeded):
        document_service.delete_document("resume", "r1", "user-1")

        assert "r1" not in seeded.documents[DocumentType.RESUME]

    def test_delete_other_users_document_raises(self, document_service, seeded):
        with pytest.raises(DocumentNotFoundError):
            document_service.delete_document("resume", "r3", "user-1")
        assert "r3" in seeded.documents[DocumentType.RESUME]

    def test_unknown_type_raises(self, document_service):
        with pytest.raises(InvalidDocumentTypeError):
            document_service.list_documents("portfolio", "user-1")
