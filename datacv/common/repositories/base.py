"""
Repository Base Definitions

Shared pieces for the MongoDB-backed repositories: the write result
dataclass, the sample content query criteria, and the connection base
class that pools a single MongoClient across repositories.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        matched_count: Number of documents that matched the filter
        modified_count: Number of documents actually modified
        inserted_id: ID of the inserted document (if any)
    """
    matched_count: int
    modified_count: int
    inserted_id: Optional[str] = None


@dataclass
class SampleContentQuery:
    """
    Filter criteria for sample content lookups.

    Attributes:
        content_type: Exact content type match
        content_types: Content type must be one of these
        target_industry: Must be a member of the sample's target_industry list
        target_specialization: Must be a member of the sample's target_specialization list
        experience_level: Exact experience level match
        tags: Every tag must be present on the sample
        search: Case-insensitive substring over title, description and content
    """
    content_type: Optional[str] = None
    content_types: Optional[List[str]] = None
    target_industry: Optional[str] = None
    target_specialization: Optional[str] = None
    experience_level: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    search: Optional[str] = None


def to_record(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert a raw Mongo document into a record keyed by "id" instead of "_id"."""
    if document is None:
        return None
    record = dict(document)
    if "_id" in record:
        record["id"] = str(record.pop("_id"))
    return record


class MongoRepositoryBase:
    """
    Connection handling shared by every Mongo repository.

    Connection Management:
    - Uses a class-level singleton MongoClient for connection pooling
    - PyMongo handles the connection pool internally

    Error Handling:
    - Fail-fast: All errors propagate to caller
    """

    _client: Optional[MongoClient] = None

    def __init__(self, mongodb_uri: str, database: str):
        """
        Args:
            mongodb_uri: MongoDB connection string
            database: Database name
        """
        if not mongodb_uri:
            raise ValueError("MongoDB URI is required")
        self._mongodb_uri = mongodb_uri
        self._database_name = database

    def _get_client(self) -> MongoClient:
        """Get or create the shared MongoDB client."""
        if MongoRepositoryBase._client is None:
            MongoRepositoryBase._client = MongoClient(self._mongodb_uri)
            logger.info(f"Created MongoDB client for database {self._database_name}")
        return MongoRepositoryBase._client

    def _get_collection(self, name: str) -> Collection:
        return self._get_client()[self._database_name][name]

    @classmethod
    def reset_connection(cls) -> None:
        """
        Reset the connection pool.

        Used for testing or connection recovery.
        """
        if MongoRepositoryBase._client is not None:
            MongoRepositoryBase._client.close()
        MongoRepositoryBase._client = None
        logger.info("MongoDB repository connection reset")
