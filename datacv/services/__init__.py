"""
Services built on top of the DataCV repositories.

- DocumentInitializationService: template -> pre-populated document, plus preview
- TemplateService: template browsing
- SampleContentService: admin sample content management
- DocumentService: owner-scoped document reads and deletes
"""

from .content_resolver import ContentResolver, SectionResolution, structure_sample_content
from .document_materializer import (
    DocumentMaterializer,
    MaterializationContext,
    build_document_fields,
)
from .document_initialization_service import DocumentInitializationService, InitializationResult
from .document_service import DocumentService
from .sample_content_service import SampleContentService
from .template_service import TemplateService

__all__ = [
    "ContentResolver",
    "SectionResolution",
    "structure_sample_content",
    "DocumentMaterializer",
    "MaterializationContext",
    "build_document_fields",
    "DocumentInitializationService",
    "InitializationResult",
    "DocumentService",
    "SampleContentService",
    "TemplateService",
]
