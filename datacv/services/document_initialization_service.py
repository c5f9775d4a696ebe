"""
Document initialization service.

Creates a new resume, CV or cover letter from a template, pre-populated
with sample content matched to the caller's target industry and
specialization. Also offers a read-only preview of what each section
would be filled with.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from datacv.common.config import Config
from datacv.common.error_handling import DocumentTypeMismatchError, TemplateNotFoundError
from datacv.common.logger import get_logger
from datacv.common.repositories import (
    DocumentRepositoryInterface,
    SampleContentRepositoryInterface,
    TemplateRepositoryInterface,
)
from datacv.common.types import ContentSource, DocumentType

from .content_resolver import ContentResolver
from .document_materializer import DocumentMaterializer, MaterializationContext

SUCCESS_MESSAGE = "Document initialized successfully with sample content"


def default_document_title(template_name: str, now: Optional[datetime] = None) -> str:
    """Title used when the caller gives none: "<template name> - M/D/YYYY"."""
    now = now or datetime.now(timezone.utc)
    return f"{template_name} - {now.month}/{now.day}/{now.year}"


def _type_value(document_type: Any) -> str:
    if isinstance(document_type, DocumentType):
        return document_type.value
    return str(document_type)


@dataclass
class InitializationResult:
    """Result of a successful document initialization."""

    document_id: str
    document_type: str
    template_id: str
    pre_populated_sections: List[str] = field(default_factory=list)
    success: bool = True
    message: str = SUCCESS_MESSAGE

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "document_id": self.document_id,
            "document_type": self.document_type,
            "template_id": self.template_id,
            "pre_populated_sections": list(self.pre_populated_sections),
            "message": self.message,
        }


class DocumentInitializationService:
    """Initializes documents from templates and previews their sample content."""

    def __init__(
        self,
        template_repository: TemplateRepositoryInterface,
        sample_content_repository: SampleContentRepositoryInterface,
        document_repository: DocumentRepositoryInterface,
        match_limit: Optional[int] = None,
        preview_limit: Optional[int] = None,
    ):
        self.template_repository = template_repository
        self.resolver = ContentResolver(sample_content_repository, match_limit=match_limit)
        self.materializer = DocumentMaterializer(document_repository)
        self.preview_limit = preview_limit if preview_limit is not None else Config.PREVIEW_SAMPLE_LIMIT

    def initialize(
        self,
        user_id: str,
        template_id: str,
        document_type: Any,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
        title: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> InitializationResult:
        """
        Create a document pre-populated from the template's sample content.

        Args:
            user_id: Owner of the new document
            template_id: Template to initialize from (must be active and public)
            document_type: "resume", "cv" or "cover_letter"
            target_industry: Optional industry used for generic sample matching
            target_specialization: Optional specialization used for generic sample matching
            title: Optional document title (defaults to template name + date)
            request_id: Optional id used to correlate log lines

        Returns:
            InitializationResult with the new document id and populated sections

        Raises:
            TemplateNotFoundError: Template missing, inactive or private
            DocumentTypeMismatchError: Template's document type differs from document_type
            InvalidDocumentTypeError: document_type is not a known type
        """
        log = get_logger(__name__, request_id=request_id or uuid.uuid4().hex, user_id=user_id)
        requested_type = _type_value(document_type)
        log.info(f"Initializing {requested_type} from template {template_id}")

        template = self.template_repository.find_accessible_by_id(template_id)
        if not template:
            log.warning(f"Template {template_id} not found or not accessible")
            raise TemplateNotFoundError(template_id, require_accessible=True)

        if template.get("document_type") != requested_type:
            log.warning(
                f"Template {template_id} is a {template.get('document_type')}, "
                f"requested {requested_type}"
            )
            raise DocumentTypeMismatchError(
                template_id, template.get("document_type"), requested_type
            )

        sample_data = self.resolver.resolve(
            template,
            target_industry=target_industry,
            target_specialization=target_specialization,
        )
        log.debug(f"Resolved sections: {list(sample_data)}")

        context = MaterializationContext(
            user_id=user_id,
            title=title or default_document_title(template.get("name", "Untitled")),
            template_id=template["id"],
            target_industry=target_industry,
            target_specialization=target_specialization,
            experience_level=template.get("target_experience_level"),
        )

        document_id = self.materializer.materialize(requested_type, sample_data, context)

        log.info(f"Initialized {requested_type} {document_id} ({len(sample_data)} sections pre-populated)")

        return InitializationResult(
            document_id=document_id,
            document_type=requested_type,
            template_id=template["id"],
            pre_populated_sections=list(sample_data.keys()),
        )

    def preview(
        self,
        template_id: str,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Report, per section, which sample content initialization would use.

        Unlike initialize(), this does not require the template to be active
        or public. Nothing is written.

        Returns:
            {"template": {...}, "sample_content_preview": {content_type: {...}}}

        Raises:
            TemplateNotFoundError: Template does not exist
        """
        template = self.template_repository.find_by_id(template_id)
        if not template:
            raise TemplateNotFoundError(template_id)

        preview_data: Dict[str, Any] = {}
        for resolution in self.resolver.resolve_sections(
            template,
            target_industry=target_industry,
            target_specialization=target_specialization,
        ):
            if resolution.source is ContentSource.SPECIFIC:
                sample_preview = list(resolution.samples)
            else:
                sample_preview = resolution.samples[: self.preview_limit]

            preview_data[resolution.content_type] = {
                "available_samples": len(resolution.samples),
                "sample_preview": sample_preview,
                "source": resolution.source.value,
            }

        return {
            "template": {
                "id": template["id"],
                "name": template.get("name"),
                "document_type": template.get("document_type"),
            },
            "sample_content_preview": preview_data,
        }
