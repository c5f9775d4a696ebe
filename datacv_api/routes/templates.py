"""
Template API Routes.

Lets users browse the active, public templates they can start a
document from.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from datacv.common.error_handling import InvalidDocumentTypeError, TemplateNotFoundError
from datacv.services import TemplateService

from ..auth import UserContext, get_current_user
from ..dependencies import get_template_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["templates"])


@router.get("", summary="List templates for a document type")
async def list_templates(
    document_type: str = Query(..., description="resume, cv or cover_letter"),
    specialization: Optional[str] = Query(None, description="Only templates targeting this specialization"),
    industry: Optional[str] = Query(None, description="Only templates targeting this industry"),
    user: UserContext = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
):
    """
    List active, public templates, most used first.
    """
    try:
        templates = service.list_templates(
            document_type,
            specialization=specialization,
            industry=industry,
        )
        return {"data": templates, "total": len(templates)}

    except InvalidDocumentTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to list templates: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{template_id}", summary="Get a template")
async def get_template(
    template_id: str,
    user: UserContext = Depends(get_current_user),
    service: TemplateService = Depends(get_template_service),
):
    try:
        return {"data": service.get_template(template_id)}

    except TemplateNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Failed to get template {template_id}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
