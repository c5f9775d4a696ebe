"""
Shared Pydantic models for the DataCV API service.

These models define the structure for API requests and responses.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from datacv.common.types import DocumentType, ExperienceLevel


# === Document Initialization ===

class InitializeDocumentRequest(BaseModel):
    """Request body for initializing a document from a template."""

    template_id: str = Field(..., min_length=1, description="Template ID is required")
    target_industry: Optional[str] = Field(None, description="Industry used for sample matching.")
    target_specialization: Optional[str] = Field(
        None, description="Specialization used for sample matching."
    )
    document_type: DocumentType = Field(..., description="resume, cv or cover_letter.")
    title: Optional[str] = Field(None, description="Document title (defaults to template name and date).")


class InitializeDocumentResponse(BaseModel):
    """Response after a document was created."""

    success: bool
    document_id: str
    document_type: str
    template_id: str
    pre_populated_sections: List[str]
    message: str


class PreviewSampleContentRequest(BaseModel):
    """Request body for previewing a template's sample content."""

    template_id: str = Field(..., min_length=1)
    target_industry: Optional[str] = None
    target_specialization: Optional[str] = None


class TemplateRef(BaseModel):
    id: str
    name: Optional[str] = None
    document_type: Optional[str] = None


class SectionPreview(BaseModel):
    """What one section would be pre-populated with."""

    available_samples: int
    sample_preview: List[Dict[str, Any]] = Field(default_factory=list)
    source: str


class PreviewSampleContentResponse(BaseModel):
    template: TemplateRef
    sample_content_preview: Dict[str, SectionPreview] = Field(default_factory=dict)


# === Sample Content (admin) ===

class SampleContentCreateRequest(BaseModel):
    """Request body for creating sample content."""

    content_type: str = Field(..., min_length=1, description="Content type is required")
    content: Any = Field(None, description="Sample payload (object, string or list item).")
    target_industry: Optional[List[str]] = None
    target_specialization: Optional[List[str]] = None
    experience_level: Optional[ExperienceLevel] = None
    tags: List[str] = Field(default_factory=list)
    title: Optional[str] = None
    description: Optional[str] = None


class SampleContentUpdateRequest(BaseModel):
    """Partial update; only fields that are sent are changed."""

    content_type: Optional[str] = Field(None, min_length=1)
    content: Any = None
    target_industry: Optional[List[str]] = None
    target_specialization: Optional[List[str]] = None
    experience_level: Optional[ExperienceLevel] = None
    tags: Optional[List[str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class TemplatePreviewSamplesRequest(BaseModel):
    """Filters for fetching samples grouped by content type."""

    target_industry: Optional[str] = None
    target_specialization: Optional[str] = None
    experience_level: Optional[ExperienceLevel] = None
    content_types: Optional[List[str]] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class SampleContentListResponse(BaseModel):
    data: List[Dict[str, Any]] = Field(default_factory=list)
    pagination: Pagination


class DataResponse(BaseModel):
    """Generic {"data": ...} envelope."""

    data: Any


class SuccessResponse(BaseModel):
    """Generic success response."""

    success: bool
    message: str = ""


# === Health ===

class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: datetime
