"""
Content Resolver.

For every section in a template's structure, decides which sample content
pre-populates it. Resolution is a two-tier priority chain:

1. Specific: the template's specific_sample_content_map pins one sample id
   to the section's content type and that sample exists.
2. Generic: up to SAMPLE_MATCH_LIMIT samples of the content type matching
   the requested industry/specialization and the template's experience level.

Resolved samples are then "structured" according to the content type's
shape category (see datacv.common.types.ContentCategory).
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from datacv.common.config import Config
from datacv.common.repositories import SampleContentQuery, SampleContentRepositoryInterface
from datacv.common.types import (
    ContentCategory,
    ContentSource,
    SampleContentRecord,
    TemplateRecord,
    TemplateSection,
    content_category,
    empty_value,
)

logger = logging.getLogger(__name__)


def structure_sample_content(samples: List[SampleContentRecord], content_type: str) -> Any:
    """
    Collapse the samples for one section into the section's content shape.

    OBJECT and TEXT sections take the first sample's payload, LIST sections
    take every payload in order. With no usable payload the empty value of
    the right shape is returned.
    """
    category = content_category(content_type)

    if not samples:
        return empty_value(category)

    if category is ContentCategory.OBJECT or category is ContentCategory.TEXT:
        return samples[0].get("content") or empty_value(category)
    if category is ContentCategory.LIST:
        return [sample.get("content") for sample in samples]

    raise ValueError(f"Unhandled content category: {category}")


def template_sections(template: TemplateRecord) -> List[TemplateSection]:
    """Return the ordered section list from a template's structure (may be empty)."""
    structure = template.get("template_structure") or {}
    return list(structure.get("sections") or [])


@dataclass
class SectionResolution:
    """Outcome of resolving one template section."""

    content_type: str
    source: ContentSource
    samples: List[SampleContentRecord] = field(default_factory=list)
    content: Any = None

    @property
    def resolved(self) -> bool:
        """True when the section produced content to pre-populate."""
        return self.content is not None


class ContentResolver:
    """Resolves sample content for each section of a template."""

    def __init__(
        self,
        sample_repository: SampleContentRepositoryInterface,
        match_limit: Optional[int] = None,
    ):
        self.sample_repository = sample_repository
        self.match_limit = match_limit if match_limit is not None else Config.SAMPLE_MATCH_LIMIT

    def load_specific_samples(
        self, specific_map: Optional[Dict[str, str]]
    ) -> Dict[str, SampleContentRecord]:
        """
        Fetch every sample pinned by the template in one lookup.

        Returns:
            Mapping of sample id -> sample record for the ids that exist
        """
        sample_ids = [sample_id for sample_id in (specific_map or {}).values() if sample_id]
        if not sample_ids:
            return {}

        samples = self.sample_repository.find_by_ids(sample_ids)
        lookup = {sample["id"]: sample for sample in samples}

        missing = set(sample_ids) - set(lookup)
        if missing:
            logger.warning(f"Pinned sample content not found: {sorted(missing)}")

        return lookup

    def find_generic_samples(
        self,
        content_type: str,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> List[SampleContentRecord]:
        """Find generic samples for a content type, capped at match_limit."""
        query = SampleContentQuery(
            content_type=content_type,
            target_industry=target_industry,
            target_specialization=target_specialization,
            experience_level=experience_level,
        )
        return self.sample_repository.find_matching(query, limit=self.match_limit)

    def resolve_section(
        self,
        content_type: str,
        specific_map: Optional[Dict[str, str]],
        specific_lookup: Dict[str, SampleContentRecord],
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
        experience_level: Optional[str] = None,
    ) -> SectionResolution:
        """
        Resolve one section: specific sample first, generic matches second.

        A pinned sample that loaded always wins, even when its payload is
        empty; it is then structured to the empty value of the section's
        shape. Generic matching runs only when the content type has no pin
        or the pinned id no longer exists.
        """
        specific_id = (specific_map or {}).get(content_type)
        if specific_id and specific_id in specific_lookup:
            sample = specific_lookup[specific_id]
            return SectionResolution(
                content_type=content_type,
                source=ContentSource.SPECIFIC,
                samples=[sample],
                content=structure_sample_content([sample], content_type),
            )

        samples = self.find_generic_samples(
            content_type,
            target_industry=target_industry,
            target_specialization=target_specialization,
            experience_level=experience_level,
        )
        content = structure_sample_content(samples, content_type) if samples else None
        return SectionResolution(
            content_type=content_type,
            source=ContentSource.GENERIC,
            samples=samples,
            content=content,
        )

    def resolve_sections(
        self,
        template: TemplateRecord,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
    ) -> List[SectionResolution]:
        """Resolve every section of the template, in structure order."""
        specific_map = template.get("specific_sample_content_map") or {}
        specific_lookup = self.load_specific_samples(specific_map)
        experience_level = template.get("target_experience_level")

        resolutions = []
        for section in template_sections(template):
            content_type = section.get("type")
            if not content_type:
                continue
            resolution = self.resolve_section(
                content_type,
                specific_map,
                specific_lookup,
                target_industry=target_industry,
                target_specialization=target_specialization,
                experience_level=experience_level,
            )
            logger.debug(
                f"Section '{content_type}': source={resolution.source.value} "
                f"samples={len(resolution.samples)} resolved={resolution.resolved}"
            )
            resolutions.append(resolution)

        return resolutions

    def resolve(
        self,
        template: TemplateRecord,
        target_industry: Optional[str] = None,
        target_specialization: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Resolve the template into a content-type -> content mapping.

        Sections that resolved to nothing are omitted.
        """
        resolved: Dict[str, Any] = {}
        for resolution in self.resolve_sections(template, target_industry, target_specialization):
            if resolution.resolved:
                resolved[resolution.content_type] = resolution.content
        return resolved
