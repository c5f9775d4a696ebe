"""
Template browsing service.

Read-only access to admin-authored templates for users choosing one to
start a document from.
"""

import logging
from typing import Any, Dict, List, Optional

from datacv.common.error_handling import TemplateNotFoundError
from datacv.common.repositories import TemplateRepositoryInterface

from .document_materializer import parse_document_type

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = (
    "id",
    "name",
    "description",
    "category",
    "document_type",
    "template_structure",
    "is_premium",
    "usage_count",
    "avg_rating",
)


def summarize_template(template: Dict[str, Any]) -> Dict[str, Any]:
    return {key: template.get(key) for key in SUMMARY_FIELDS}


class TemplateService:
    """Lists and fetches templates."""

    def __init__(self, template_repository: TemplateRepositoryInterface):
        self.template_repository = template_repository

    def list_templates(
        self,
        document_type: Any,
        specialization: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List active, public templates of a document type.

        Raises:
            InvalidDocumentTypeError: If document_type is unknown
        """
        doc_type = parse_document_type(document_type)
        templates = self.template_repository.find_templates(
            doc_type.value,
            specialization=specialization,
            industry=industry,
        )
        logger.debug(f"Found {len(templates)} {doc_type.value} templates")
        return [summarize_template(template) for template in templates]

    def get_template(self, template_id: str) -> Dict[str, Any]:
        """
        Fetch a full template by id.

        Raises:
            TemplateNotFoundError: If no template has that id
        """
        template = self.template_repository.find_by_id(template_id)
        if not template:
            raise TemplateNotFoundError(template_id)
        return template
