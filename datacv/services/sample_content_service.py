"""
Sample content administration service.

CRUD and filtered listing over the sample_content collection, used by
admins to curate the snippets that pre-populate new documents.
"""

import logging
import math
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from datacv.common.error_handling import SampleContentNotFoundError
from datacv.common.repositories import SampleContentQuery, SampleContentRepositoryInterface

logger = logging.getLogger(__name__)

# Fields an admin may set on create/update
EDITABLE_FIELDS = (
    "content_type",
    "content",
    "target_industry",
    "target_specialization",
    "experience_level",
    "tags",
    "title",
    "description",
    "is_active",
)


class SampleContentService:
    """Admin operations over sample content."""

    def __init__(self, sample_repository: SampleContentRepositoryInterface):
        self.sample_repository = sample_repository

    def list_samples(
        self,
        query: SampleContentQuery,
        page: int = 1,
        limit: int = 20,
    ) -> Dict[str, Any]:
        """
        List samples matching the filters, newest first.

        Args:
            query: Filter criteria
            page: 1-based page number
            limit: Page size

        Returns:
            {"data": [...], "pagination": {page, limit, total, total_pages}}
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if limit < 1:
            raise ValueError("limit must be >= 1")

        skip = (page - 1) * limit
        samples = self.sample_repository.list_samples(query, skip=skip, limit=limit)
        total = self.sample_repository.count_samples(query)

        return {
            "data": samples,
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "total_pages": math.ceil(total / limit),
            },
        }

    def get_sample(self, sample_id: str) -> Dict[str, Any]:
        sample = self.sample_repository.find_by_id(sample_id)
        if not sample:
            raise SampleContentNotFoundError(sample_id)
        return sample

    def create_sample(self, data: Dict[str, Any], created_by: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a new sample.

        Raises:
            ValueError: If content_type is missing or empty
        """
        if not data.get("content_type"):
            raise ValueError("Content type is required")

        now = datetime.now(timezone.utc)
        record: Dict[str, Any] = {
            "id": str(uuid.uuid4()),
            "tags": [],
            "is_active": True,
        }
        record.update({key: data[key] for key in EDITABLE_FIELDS if key in data})
        record.update({"created_at": now, "updated_at": now, "created_by": created_by})

        stored = self.sample_repository.insert_sample(record)
        logger.info(f"Created sample content {record['id']} ({record['content_type']})")
        return stored

    def update_sample(self, sample_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply a partial update.

        Raises:
            SampleContentNotFoundError: If no sample has that id
            ValueError: If content_type is set to an empty value
        """
        fields = {key: data[key] for key in EDITABLE_FIELDS if key in data}
        if "content_type" in fields and not fields["content_type"]:
            raise ValueError("Content type is required")
        fields["updated_at"] = datetime.now(timezone.utc)

        updated = self.sample_repository.update_sample(sample_id, fields)
        if not updated:
            raise SampleContentNotFoundError(sample_id)
        logger.info(f"Updated sample content {sample_id}: {sorted(k for k in fields if k != 'updated_at')}")
        return updated

    def delete_sample(self, sample_id: str) -> None:
        if not self.sample_repository.delete_sample(sample_id):
            raise SampleContentNotFoundError(sample_id)
        logger.info(f"Deleted sample content {sample_id}")

    def content_types(self) -> List[str]:
        return self.sample_repository.distinct_content_types()

    def grouped_for_template_preview(
        self,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
        experience_level: Optional[str] = None,
        content_types: Optional[List[str]] = None,
    ) -> Dict[str, List[Dict[str, Any]]]:
        """
        Fetch every matching sample grouped by content type, newest first.

        Used by the template editor to show which samples a template would
        have available per section.
        """
        query = SampleContentQuery(
            content_types=content_types or None,
            target_industry=target_industry,
            target_specialization=target_specialization,
            experience_level=experience_level,
        )
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for sample in self.sample_repository.list_samples(query):
            grouped.setdefault(sample["content_type"], []).append(sample)
        return grouped
