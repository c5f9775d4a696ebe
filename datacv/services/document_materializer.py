"""
Document Materializer.

Turns resolved section content into one of the three persisted document
shapes (resume, CV, cover letter) and inserts exactly one row.

All three shapes are built by the same function from a per-type
field-mapping table: each entry names the document field, the resolved
content type it is filled from, and the default used when nothing resolved.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Tuple

from datacv.common.error_handling import InvalidDocumentTypeError, log_on_exception
from datacv.common.repositories import DocumentRepositoryInterface
from datacv.common.types import DocumentType, PersonalInfo

logger = logging.getLogger(__name__)


DEFAULT_HOOK_TYPE = "shared_values"
DEFAULT_OPENING_TEXT = "I am writing to express my interest in the position at your company."
DEFAULT_CLOSING_TEXT = "Thank you for considering my application."
DEFAULT_CALL_TO_ACTION = "I look forward to hearing from you."
PLACEHOLDER_COMPANY = "Target Company"
PLACEHOLDER_ROLE = "Target Role"


def default_personal_info() -> PersonalInfo:
    return {
        "first_name": "Your",
        "last_name": "Name",
        "email": "your.email@example.com",
    }


def default_opening() -> Dict[str, str]:
    return {"content": DEFAULT_OPENING_TEXT, "hook_type": DEFAULT_HOOK_TYPE}


def default_closing() -> Dict[str, str]:
    return {"content": DEFAULT_CLOSING_TEXT, "call_to_action": DEFAULT_CALL_TO_ACTION}


def _normalize_opening(value: Any) -> Any:
    # Narrative samples resolve to plain strings; the letter stores an object
    if isinstance(value, str):
        return {"content": value, "hook_type": DEFAULT_HOOK_TYPE}
    return value


def _normalize_closing(value: Any) -> Any:
    if isinstance(value, str):
        return {"content": value, "call_to_action": DEFAULT_CALL_TO_ACTION}
    return value


@dataclass(frozen=True)
class FieldMapping:
    """Fill `field` from resolved content `content_type`, else `default()`."""

    field: str
    content_type: str
    default: Callable[[], Any]
    normalize: Optional[Callable[[Any], Any]] = None


@dataclass
class MaterializationContext:
    """Caller and template attributes stamped onto the new document."""

    user_id: str
    title: str
    template_id: str
    target_industry: Optional[str] = None
    target_specialization: Optional[str] = None
    experience_level: Optional[str] = None


DOCUMENT_FIELD_MAPPINGS: Dict[DocumentType, Tuple[FieldMapping, ...]] = {
    DocumentType.RESUME: (
        FieldMapping("personal_info", "personal_info", default_personal_info),
        FieldMapping("professional_summary", "summary", str),
        FieldMapping("work_experience", "experience", list),
        FieldMapping("education", "education", list),
        FieldMapping("skills", "skills", list),
        FieldMapping("projects", "projects", list),
        FieldMapping("certifications", "certifications", list),
    ),
    DocumentType.CV: (
        FieldMapping("personal_info", "personal_info", default_personal_info),
        FieldMapping("research_statement", "summary", str),
        FieldMapping("education", "education", list),
        FieldMapping("academic_positions", "experience", list),
        FieldMapping("publications", "publications", list),
        FieldMapping("research_projects", "projects", list),
        FieldMapping("technical_skills", "skills", list),
    ),
    DocumentType.COVER_LETTER: (
        FieldMapping("personal_info", "personal_info", default_personal_info),
        FieldMapping("opening", "opening", default_opening, _normalize_opening),
        FieldMapping("body_paragraphs", "body_paragraphs", list),
        FieldMapping("closing", "closing", default_closing, _normalize_closing),
        FieldMapping("project_highlights", "projects", list),
    ),
}


def _targeting_fields(document_type: DocumentType, context: MaterializationContext) -> Dict[str, Any]:
    """Per-type targeting attributes that do not come from sample content."""
    if document_type is DocumentType.RESUME:
        return {
            "target_specialization": context.target_specialization,
            "target_industry": context.target_industry,
            "experience_level": context.experience_level,
        }
    if document_type is DocumentType.CV:
        return {
            "target_specialization": context.target_specialization,
            "research_area": context.target_specialization,
        }
    if document_type is DocumentType.COVER_LETTER:
        return {
            "target_company": PLACEHOLDER_COMPANY,
            "target_role": PLACEHOLDER_ROLE,
            "target_specialization": context.target_specialization,
            "target_industry": context.target_industry,
        }
    raise InvalidDocumentTypeError(document_type)


def parse_document_type(document_type: Any) -> DocumentType:
    """Coerce a string or DocumentType, raising InvalidDocumentTypeError if unknown."""
    try:
        return DocumentType(document_type)
    except ValueError:
        raise InvalidDocumentTypeError(document_type)


def build_document_fields(
    document_type: Any,
    sample_data: Dict[str, Any],
    context: MaterializationContext,
) -> Dict[str, Any]:
    """
    Build the type-specific content fields of a new document.

    Args:
        document_type: "resume", "cv" or "cover_letter"
        sample_data: Resolved content keyed by content type
        context: Caller/template attributes

    Returns:
        Field dict with every mapped field present (defaults where unresolved)

    Raises:
        InvalidDocumentTypeError: If the document type is unknown
    """
    doc_type = parse_document_type(document_type)

    fields: Dict[str, Any] = {}
    for mapping in DOCUMENT_FIELD_MAPPINGS[doc_type]:
        value = sample_data.get(mapping.content_type)
        if value:
            fields[mapping.field] = mapping.normalize(value) if mapping.normalize else value
        else:
            fields[mapping.field] = mapping.default()

    fields.update(_targeting_fields(doc_type, context))
    return fields


class DocumentMaterializer:
    """Builds and persists a pre-populated document."""

    def __init__(self, document_repository: DocumentRepositoryInterface):
        self.document_repository = document_repository

    def materialize(
        self,
        document_type: Any,
        sample_data: Dict[str, Any],
        context: MaterializationContext,
    ) -> str:
        """
        Build the document and insert it.

        Returns:
            The generated document id

        Raises:
            InvalidDocumentTypeError: If the document type is unknown (nothing inserted)
        """
        doc_type = parse_document_type(document_type)
        now = datetime.now(timezone.utc)

        record: Dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "user_id": context.user_id,
            "title": context.title,
            "template_id": context.template_id,
            "is_from_template": True,
        }
        record.update(build_document_fields(doc_type, sample_data, context))
        record.update({"version": 1, "created_at": now, "updated_at": now})

        with log_on_exception(logger, "document insert", level=logging.ERROR, include_traceback=True):
            result = self.document_repository.insert_document(doc_type, record)
        document_id = result.inserted_id or record["id"]
        logger.info(f"Created {doc_type.value} {document_id} from template {context.template_id}")
        return document_id
