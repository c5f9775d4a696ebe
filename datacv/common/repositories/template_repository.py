"""
Template Repository

Repository interface for the document_templates collection.
Templates are authored by admins; the document services only read them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from datacv.common.config import Config
from datacv.common.types import TemplateRecord

from .base import MongoRepositoryBase, to_record

logger = logging.getLogger(__name__)


class TemplateRepositoryInterface(ABC):
    """Abstract interface for the document_templates collection."""

    @abstractmethod
    def find_by_id(self, template_id: str) -> Optional[TemplateRecord]:
        """
        Find a template by id regardless of its active/public flags.

        Returns:
            Template record if found, None otherwise
        """
        pass

    @abstractmethod
    def find_accessible_by_id(self, template_id: str) -> Optional[TemplateRecord]:
        """
        Find a template by id only if it is both active and public.

        Returns:
            Template record if found and accessible, None otherwise
        """
        pass

    @abstractmethod
    def find_templates(
        self,
        document_type: str,
        specialization: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> List[TemplateRecord]:
        """
        Find active, public templates of a document type.

        Args:
            document_type: Required document type
            specialization: Must be in the template's target_specialization list
            industry: Must be in the template's target_industries list

        Returns:
            Template records, most used first
        """
        pass


class MongoTemplateRepository(MongoRepositoryBase, TemplateRepositoryInterface):
    """MongoDB implementation of TemplateRepository."""

    def __init__(
        self,
        mongodb_uri: str,
        database: str = "datacv",
        collection: str = Config.TEMPLATES_COLLECTION,
    ):
        super().__init__(mongodb_uri, database)
        self._collection_name = collection

    def find_by_id(self, template_id: str) -> Optional[TemplateRecord]:
        collection = self._get_collection(self._collection_name)
        return to_record(collection.find_one({"_id": template_id}))

    def find_accessible_by_id(self, template_id: str) -> Optional[TemplateRecord]:
        collection = self._get_collection(self._collection_name)
        return to_record(
            collection.find_one({"_id": template_id, "is_active": True, "is_public": True})
        )

    def find_templates(
        self,
        document_type: str,
        specialization: Optional[str] = None,
        industry: Optional[str] = None,
    ) -> List[TemplateRecord]:
        query: Dict[str, Any] = {
            "document_type": document_type,
            "is_active": True,
            "is_public": True,
        }
        # Equality against an array field matches on membership
        if specialization:
            query["target_specialization"] = specialization
        if industry:
            query["target_industries"] = industry

        collection = self._get_collection(self._collection_name)
        cursor = collection.find(query).sort([("usage_count", DESCENDING)])
        return [to_record(doc) for doc in cursor]
