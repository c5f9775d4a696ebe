"""
Canonical Types and Schemas for the DataCV document service.

Defines the record shapes stored in MongoDB (templates, sample content,
documents) and the closed enumerations the resolver and materializer
dispatch on.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict
from typing_extensions import NotRequired


class DocumentType(str, Enum):
    """Document shapes a template can produce."""
    RESUME = "resume"
    CV = "cv"
    COVER_LETTER = "cover_letter"


class ExperienceLevel(str, Enum):
    """Experience levels shared by templates and sample content."""
    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"
    EXECUTIVE = "executive"


class ContentSource(str, Enum):
    """Where a section's resolved content came from."""
    SPECIFIC = "specific"
    GENERIC = "generic"


class ContentCategory(str, Enum):
    """
    Shape category of a section's content.

    OBJECT sections hold a single mapping, TEXT sections a single narrative
    string, LIST sections an ordered list of items.
    """
    OBJECT = "object"
    TEXT = "text"
    LIST = "list"


OBJECT_CONTENT_TYPES = frozenset({"personal_info"})
TEXT_CONTENT_TYPES = frozenset({"summary", "opening", "closing"})


def content_category(content_type: str) -> ContentCategory:
    """Map a section content type onto its shape category."""
    if content_type in OBJECT_CONTENT_TYPES:
        return ContentCategory.OBJECT
    if content_type in TEXT_CONTENT_TYPES:
        return ContentCategory.TEXT
    return ContentCategory.LIST


def empty_value(category: ContentCategory) -> Any:
    """Return a fresh empty value of the right shape for a category."""
    if category is ContentCategory.OBJECT:
        return {}
    if category is ContentCategory.TEXT:
        return ""
    if category is ContentCategory.LIST:
        return []
    raise ValueError(f"Unhandled content category: {category}")


class TemplateSection(TypedDict):
    """One slot in a template's structure."""
    type: str                          # Content type tag (e.g., "summary", "experience")
    id: NotRequired[str]
    name: NotRequired[str]
    order: NotRequired[int]
    is_required: NotRequired[bool]


class TemplateStructure(TypedDict):
    sections: List[TemplateSection]
    layout: NotRequired[Dict[str, Any]]


class TemplateRecord(TypedDict):
    """Template document as read from the document_templates collection."""
    id: str
    name: str
    document_type: str
    is_active: bool
    is_public: bool
    template_structure: TemplateStructure
    target_experience_level: Optional[str]
    specific_sample_content_map: Optional[Dict[str, str]]  # content type -> sample id
    description: NotRequired[Optional[str]]
    category: NotRequired[str]
    target_specialization: NotRequired[List[str]]
    target_industries: NotRequired[List[str]]
    is_premium: NotRequired[bool]
    usage_count: NotRequired[int]
    avg_rating: NotRequired[float]


class SampleContentRecord(TypedDict):
    """Sample content snippet as read from the sample_content collection."""
    id: str
    content_type: str
    content: Any                       # Object, string or list item depending on content type
    target_industry: Optional[List[str]]
    target_specialization: Optional[List[str]]
    experience_level: Optional[str]
    tags: NotRequired[List[str]]
    title: NotRequired[Optional[str]]
    description: NotRequired[Optional[str]]
    is_active: NotRequired[bool]


class PersonalInfo(TypedDict):
    first_name: str
    last_name: str
    email: str
    phone: NotRequired[str]
    location: NotRequired[str]
    linkedin: NotRequired[str]
    github: NotRequired[str]
    portfolio: NotRequired[str]
