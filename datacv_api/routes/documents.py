"""
Document API Routes.

- Initialization: create a document from a template pre-populated with
  sample content, or preview what it would be populated with
- User documents: list, fetch and delete the caller's documents
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from datacv.common.error_handling import (
    DocumentNotFoundError,
    DocumentTypeMismatchError,
    InvalidDocumentTypeError,
    TemplateNotFoundError,
)
from datacv.services import DocumentInitializationService, DocumentService

from ..auth import UserContext, get_current_user
from ..dependencies import get_document_service, get_initialization_service
from ..models import (
    InitializeDocumentRequest,
    InitializeDocumentResponse,
    PreviewSampleContentRequest,
    PreviewSampleContentResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


# =============================================================================
# Initialization Endpoints
# =============================================================================


@router.post(
    "/init/initialize",
    response_model=InitializeDocumentResponse,
    summary="Initialize a document from a template",
)
async def initialize_document(
    request: InitializeDocumentRequest,
    user: UserContext = Depends(get_current_user),
    service: DocumentInitializationService = Depends(get_initialization_service),
):
    """
    Create a resume, CV or cover letter pre-populated with sample content.

    Returns:
        The new document id and the sections that were pre-populated
    """
    request_id = uuid.uuid4().hex
    logger.info(f"[{request_id[:8]}] Initialize {request.document_type.value} from {request.template_id}")

    try:
        result = service.initialize(
            user_id=user.user_id,
            template_id=request.template_id,
            document_type=request.document_type,
            target_industry=request.target_industry,
            target_specialization=request.target_specialization,
            title=request.title,
            request_id=request_id,
        )
        return result.to_dict()

    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (DocumentTypeMismatchError, InvalidDocumentTypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[{request_id[:8]}] Failed to initialize document: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/init/preview",
    response_model=PreviewSampleContentResponse,
    summary="Preview a template's sample content",
)
async def preview_sample_content(
    request: PreviewSampleContentRequest,
    user: UserContext = Depends(get_current_user),
    service: DocumentInitializationService = Depends(get_initialization_service),
):
    """Report per section where its content would come from. Writes nothing."""
    try:
        return service.preview(
            template_id=request.template_id,
            target_industry=request.target_industry,
            target_specialization=request.target_specialization,
        )

    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to preview template {request.template_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# =============================================================================
# User Document Endpoints
# =============================================================================


@router.get("/{document_type}", summary="List the caller's documents of a type")
async def list_documents(
    document_type: str,
    user: UserContext = Depends(get_current_user),
    service: DocumentService = Depends(get_document_service),
):
    try:
        documents = service.list_documents(document_type, user.user_id)
        return {"data": documents, "total": len(documents)}

    except InvalidDocumentTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to list {document_type} documents: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{document_type}/{document_id}", summary="Get one of the caller's documents")
async def get_document(
    document_type: str,
    document_id: str,
    user: UserContext = Depends(get_current_user),
    service: DocumentService = Depends(get_document_service),
):
    try:
        return {"data": service.get_document(document_type, document_id, user.user_id)}

    except InvalidDocumentTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to get {document_type} {document_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete(
    "/{document_type}/{document_id}",
    response_model=SuccessResponse,
    summary="Delete one of the caller's documents",
)
async def delete_document(
    document_type: str,
    document_id: str,
    user: UserContext = Depends(get_current_user),
    service: DocumentService = Depends(get_document_service),
):
    try:
        service.delete_document(document_type, document_id, user.user_id)
        return SuccessResponse(success=True, message=f"{document_type} deleted")

    except InvalidDocumentTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to delete {document_type} {document_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
