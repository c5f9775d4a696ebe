"""
Sample Content Repository

Repository interface for the sample_content collection.
Used by the content resolver (read-only) and by the admin sample content
service (CRUD).
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from datacv.common.config import Config
from datacv.common.types import SampleContentRecord

from .base import MongoRepositoryBase, SampleContentQuery, to_record

logger = logging.getLogger(__name__)

# Derived field kept alongside each sample so free-text search works on
# structured content. Never returned to callers.
SEARCH_TEXT_FIELD = "search_text"

# Raw string fields searched directly, for rows written without search_text
SEARCH_FIELDS = ("title", "description", "content", SEARCH_TEXT_FIELD)


def build_search_text(record: Dict[str, Any]) -> str:
    """Flatten title, description and content into one lowercase search string."""
    parts = [
        record.get("title") or "",
        record.get("description") or "",
        json.dumps(record.get("content"), default=str, sort_keys=True),
    ]
    return " ".join(parts).lower()


class SampleContentRepositoryInterface(ABC):
    """Abstract interface for the sample_content collection."""

    @abstractmethod
    def find_by_id(self, sample_id: str) -> Optional[Dict[str, Any]]:
        """Find a single sample by id."""
        pass

    @abstractmethod
    def find_by_ids(self, sample_ids: List[str]) -> List[SampleContentRecord]:
        """Find every sample whose id is in sample_ids (order not guaranteed)."""
        pass

    @abstractmethod
    def find_matching(self, query: SampleContentQuery, limit: int) -> List[SampleContentRecord]:
        """
        Find samples matching the query criteria in natural order.

        Args:
            query: Filter criteria
            limit: Maximum samples to return (0 = no limit)
        """
        pass

    @abstractmethod
    def list_samples(
        self,
        query: SampleContentQuery,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """Find samples matching the query, newest first, with pagination."""
        pass

    @abstractmethod
    def count_samples(self, query: SampleContentQuery) -> int:
        """Count samples matching the query."""
        pass

    @abstractmethod
    def distinct_content_types(self) -> List[str]:
        """Return every distinct content type, sorted ascending."""
        pass

    @abstractmethod
    def insert_sample(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new sample.

        Args:
            record: Sample fields including "id"

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    def update_sample(self, sample_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update to a sample.

        Returns:
            The updated record, or None if no sample has that id
        """
        pass

    @abstractmethod
    def delete_sample(self, sample_id: str) -> bool:
        """Delete a sample. Returns True if a sample was removed."""
        pass

    @abstractmethod
    def ensure_indexes(self) -> None:
        """Prepare the store for lookups (indexes, derived search fields)."""
        pass


class MongoSampleContentRepository(MongoRepositoryBase, SampleContentRepositoryInterface):
    """MongoDB implementation of SampleContentRepository."""

    _PROJECTION = {SEARCH_TEXT_FIELD: 0}

    def __init__(
        self,
        mongodb_uri: str,
        database: str = "datacv",
        collection: str = Config.SAMPLE_CONTENT_COLLECTION,
    ):
        super().__init__(mongodb_uri, database)
        self._collection_name = collection

    @staticmethod
    def build_filter(query: SampleContentQuery) -> Dict[str, Any]:
        """Translate query criteria into a MongoDB filter."""
        conditions: Dict[str, Any] = {}

        if query.content_type:
            conditions["content_type"] = query.content_type
        elif query.content_types:
            conditions["content_type"] = {"$in": list(query.content_types)}

        # Equality against an array field matches on membership
        if query.target_industry:
            conditions["target_industry"] = query.target_industry
        if query.target_specialization:
            conditions["target_specialization"] = query.target_specialization
        if query.experience_level:
            conditions["experience_level"] = query.experience_level
        if query.tags:
            conditions["tags"] = {"$all": list(query.tags)}
        if query.search:
            pattern = {"$regex": re.escape(query.search), "$options": "i"}
            conditions["$or"] = [{field: pattern} for field in SEARCH_FIELDS]

        return conditions

    def _collection(self):
        return self._get_collection(self._collection_name)

    def find_by_id(self, sample_id: str) -> Optional[Dict[str, Any]]:
        return to_record(self._collection().find_one({"_id": sample_id}, self._PROJECTION))

    def find_by_ids(self, sample_ids: List[str]) -> List[SampleContentRecord]:
        if not sample_ids:
            return []
        cursor = self._collection().find({"_id": {"$in": list(sample_ids)}}, self._PROJECTION)
        return [to_record(doc) for doc in cursor]

    def find_matching(self, query: SampleContentQuery, limit: int) -> List[SampleContentRecord]:
        cursor = self._collection().find(self.build_filter(query), self._PROJECTION)
        if limit > 0:
            cursor = cursor.limit(limit)
        return [to_record(doc) for doc in cursor]

    def list_samples(
        self,
        query: SampleContentQuery,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self._collection().find(self.build_filter(query), self._PROJECTION)
        cursor = cursor.sort([("created_at", DESCENDING)])
        if skip > 0:
            cursor = cursor.skip(skip)
        if limit > 0:
            cursor = cursor.limit(limit)
        return [to_record(doc) for doc in cursor]

    def count_samples(self, query: SampleContentQuery) -> int:
        return self._collection().count_documents(self.build_filter(query))

    def distinct_content_types(self) -> List[str]:
        return sorted(self._collection().distinct("content_type"))

    def insert_sample(self, record: Dict[str, Any]) -> Dict[str, Any]:
        document = {k: v for k, v in record.items() if k != "id"}
        document["_id"] = record["id"]
        document[SEARCH_TEXT_FIELD] = build_search_text(record)
        self._collection().insert_one(document)
        logger.info(f"Inserted sample content {record['id']} ({record.get('content_type')})")
        return dict(record)

    def update_sample(self, sample_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        collection = self._collection()
        existing = collection.find_one({"_id": sample_id})
        if existing is None:
            return None

        merged = to_record(existing)
        merged.update(fields)
        update = dict(fields)
        update[SEARCH_TEXT_FIELD] = build_search_text(merged)
        update.setdefault("updated_at", datetime.now(timezone.utc))

        collection.update_one({"_id": sample_id}, {"$set": update})
        return to_record(collection.find_one({"_id": sample_id}, self._PROJECTION))

    def delete_sample(self, sample_id: str) -> bool:
        result = self._collection().delete_one({"_id": sample_id})
        return result.deleted_count > 0

    def backfill_search_text(self) -> int:
        """
        Derive search_text for rows written by other tools.

        Returns:
            Number of samples updated
        """
        collection = self._collection()
        updated = 0
        for document in collection.find({SEARCH_TEXT_FIELD: {"$exists": False}}):
            collection.update_one(
                {"_id": document["_id"]},
                {"$set": {SEARCH_TEXT_FIELD: build_search_text(document)}},
            )
            updated += 1
        if updated:
            logger.info(f"Backfilled search text on {updated} samples")
        return updated

    def ensure_indexes(self) -> None:
        """Ensure the lookup indexes exist and every sample is searchable."""
        collection = self._collection()
        collection.create_index([("content_type", ASCENDING)])
        collection.create_index([("content_type", ASCENDING), ("experience_level", ASCENDING)])
        collection.create_index([("target_industry", ASCENDING)])
        collection.create_index([("target_specialization", ASCENDING)])
        collection.create_index([("created_at", DESCENDING)])
        logger.info("Sample content indexes ensured")
        self.backfill_search_text()
