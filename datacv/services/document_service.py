"""
User document service.

Owner-scoped reads and deletes over the resumes, cvs and cover_letters
collections.
"""

import logging
from typing import Any, Dict, List

from datacv.common.error_handling import DocumentNotFoundError
from datacv.common.repositories import DocumentRepositoryInterface

from .document_materializer import parse_document_type

logger = logging.getLogger(__name__)


class DocumentService:
    """Lists, fetches and deletes a user's documents."""

    def __init__(self, document_repository: DocumentRepositoryInterface):
        self.document_repository = document_repository

    def list_documents(self, document_type: Any, user_id: str) -> List[Dict[str, Any]]:
        doc_type = parse_document_type(document_type)
        return self.document_repository.list_documents(doc_type, user_id)

    def get_document(self, document_type: Any, document_id: str, user_id: str) -> Dict[str, Any]:
        """
        Raises:
            InvalidDocumentTypeError: Unknown document type
            DocumentNotFoundError: Missing or owned by another user
        """
        doc_type = parse_document_type(document_type)
        document = self.document_repository.find_document(doc_type, document_id, user_id)
        if not document:
            raise DocumentNotFoundError(doc_type.value, document_id)
        return document

    def delete_document(self, document_type: Any, document_id: str, user_id: str) -> None:
        doc_type = parse_document_type(document_type)
        if not self.document_repository.delete_document(doc_type, document_id, user_id):
            raise DocumentNotFoundError(doc_type.value, document_id)
        logger.info(f"Deleted {doc_type.value} {document_id} for user {user_id}")
