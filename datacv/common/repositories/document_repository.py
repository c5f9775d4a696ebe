"""
Document Repository

Repository interface for the per-type document collections
(resumes, cvs, cover_letters). Every document is owned by one user and
every read or delete is scoped to that owner.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from datacv.common.config import Config
from datacv.common.error_handling import InvalidDocumentTypeError
from datacv.common.types import DocumentType

from .base import MongoRepositoryBase, WriteResult, to_record

logger = logging.getLogger(__name__)


DOCUMENT_COLLECTIONS: Dict[DocumentType, str] = {
    DocumentType.RESUME: Config.RESUMES_COLLECTION,
    DocumentType.CV: Config.CVS_COLLECTION,
    DocumentType.COVER_LETTER: Config.COVER_LETTERS_COLLECTION,
}

# Fields returned by list views
SUMMARY_FIELDS = (
    "title",
    "template_id",
    "is_from_template",
    "target_specialization",
    "target_industry",
    "experience_level",
    "version",
    "created_at",
    "updated_at",
)


class DocumentRepositoryInterface(ABC):
    """Abstract interface for the document collections."""

    @abstractmethod
    def insert_document(self, document_type: DocumentType, record: Dict[str, Any]) -> WriteResult:
        """
        Insert one document into the collection for its type.

        Args:
            document_type: Which collection to write to
            record: Document fields including "id"

        Returns:
            WriteResult with inserted_id set to the new document's id
        """
        pass

    @abstractmethod
    def find_document(
        self,
        document_type: DocumentType,
        document_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Find a document by id, only if owned by user_id."""
        pass

    @abstractmethod
    def list_documents(self, document_type: DocumentType, user_id: str) -> List[Dict[str, Any]]:
        """List summary records of a user's documents, most recently updated first."""
        pass

    @abstractmethod
    def delete_document(self, document_type: DocumentType, document_id: str, user_id: str) -> bool:
        """Delete a user's document. Returns True if a document was removed."""
        pass


class MongoDocumentRepository(MongoRepositoryBase, DocumentRepositoryInterface):
    """MongoDB implementation of DocumentRepository."""

    def __init__(self, mongodb_uri: str, database: str = "datacv"):
        super().__init__(mongodb_uri, database)

    def _collection_for(self, document_type: DocumentType):
        try:
            name = DOCUMENT_COLLECTIONS[DocumentType(document_type)]
        except (KeyError, ValueError):
            raise InvalidDocumentTypeError(document_type)
        return self._get_collection(name)

    def insert_document(self, document_type: DocumentType, record: Dict[str, Any]) -> WriteResult:
        collection = self._collection_for(document_type)
        document = {k: v for k, v in record.items() if k != "id"}
        document["_id"] = record["id"]
        result = collection.insert_one(document)

        return WriteResult(
            matched_count=0,
            modified_count=0,
            inserted_id=str(result.inserted_id) if result.inserted_id else None,
        )

    def find_document(
        self,
        document_type: DocumentType,
        document_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        collection = self._collection_for(document_type)
        return to_record(collection.find_one({"_id": document_id, "user_id": user_id}))

    def list_documents(self, document_type: DocumentType, user_id: str) -> List[Dict[str, Any]]:
        collection = self._collection_for(document_type)
        projection = {field: 1 for field in SUMMARY_FIELDS}
        cursor = collection.find({"user_id": user_id}, projection).sort([("updated_at", DESCENDING)])
        return [to_record(doc) for doc in cursor]

    def delete_document(self, document_type: DocumentType, document_id: str, user_id: str) -> bool:
        collection = self._collection_for(document_type)
        result = collection.delete_one({"_id": document_id, "user_id": user_id})
        return result.deleted_count > 0
