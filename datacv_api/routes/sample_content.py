"""
Sample Content Admin API Routes.

Admin-only CRUD over the sample content library:
- Listing with filters, search and pagination
- Distinct content types
- Create / partial update / delete
- Samples grouped by content type for the template editor
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from datacv.common.error_handling import SampleContentNotFoundError
from datacv.common.repositories import SampleContentQuery
from datacv.services import SampleContentService

from ..auth import UserContext, require_admin
from ..dependencies import get_sample_content_service
from ..models import (
    DataResponse,
    SampleContentCreateRequest,
    SampleContentListResponse,
    SampleContentUpdateRequest,
    SuccessResponse,
    TemplatePreviewSamplesRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/sample-content", tags=["sample-content"])


@router.get("", response_model=SampleContentListResponse, summary="List sample content")
async def list_sample_content(
    content_type: Optional[str] = Query(None, description="Exact content type"),
    target_industry: Optional[str] = Query(None, description="Samples targeting this industry"),
    target_specialization: Optional[str] = Query(None, description="Samples targeting this specialization"),
    experience_level: Optional[str] = Query(None, description="Exact experience level"),
    tags: Optional[str] = Query(None, description="Comma-separated tags; all must match"),
    search: Optional[str] = Query(None, description="Case-insensitive text search"),
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(20, ge=1, le=100, description="Results per page"),
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    """
    List sample content, newest first.
    """
    tag_list = [t.strip() for t in tags.split(",") if t.strip()] if tags else None
    query = SampleContentQuery(
        content_type=content_type,
        target_industry=target_industry,
        target_specialization=target_specialization,
        experience_level=experience_level,
        tags=tag_list,
        search=search,
    )

    try:
        return service.list_samples(query, page=page, limit=limit)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to list sample content: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/content-types", response_model=DataResponse, summary="List distinct content types")
async def list_content_types(
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    try:
        return DataResponse(data=service.content_types())
    except Exception as e:
        logger.exception(f"Failed to list content types: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/template-preview", response_model=DataResponse, summary="Samples grouped by content type")
async def template_preview_samples(
    request: TemplatePreviewSamplesRequest,
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    try:
        grouped = service.grouped_for_template_preview(
            target_industry=request.target_industry,
            target_specialization=request.target_specialization,
            experience_level=request.experience_level.value if request.experience_level else None,
            content_types=request.content_types,
        )
        return DataResponse(data=grouped)

    except Exception as e:
        logger.exception(f"Failed to group sample content: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{sample_id}", response_model=DataResponse, summary="Get a sample")
async def get_sample_content(
    sample_id: str,
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    try:
        return DataResponse(data=service.get_sample(sample_id))

    except SampleContentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to get sample content {sample_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=DataResponse, status_code=201, summary="Create a sample")
async def create_sample_content(
    request: SampleContentCreateRequest,
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    try:
        created = service.create_sample(request.model_dump(mode="json"), created_by=admin.user_id)
        return DataResponse(data=created)

    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to create sample content: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.patch("/{sample_id}", response_model=DataResponse, summary="Update a sample")
async def update_sample_content(
    sample_id: str,
    request: SampleContentUpdateRequest,
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    """
    Apply a partial update. Fields omitted from the body are left unchanged.
    """
    try:
        updated = service.update_sample(sample_id, request.model_dump(mode="json", exclude_unset=True))
        return DataResponse(data=updated)

    except SampleContentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to update sample content {sample_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{sample_id}", response_model=SuccessResponse, summary="Delete a sample")
async def delete_sample_content(
    sample_id: str,
    admin: UserContext = Depends(require_admin),
    service: SampleContentService = Depends(get_sample_content_service),
):
    try:
        service.delete_sample(sample_id)
        return SuccessResponse(success=True, message="Sample content deleted")

    except SampleContentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to delete sample content {sample_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
