"""Process guidance API."""
from typing import Dict, List

from fastapi import APIRouter

from standards_compare.core.logging import LogEvent, get_logger
from standards_compare.models.guidance import GuidanceRequest, GuidanceResponse, ProjectScale, ProjectType
from standards_compare.models.standard import ALL_STANDARDS, get_standard
from standards_compare.services import process_generator

logger = get_logger(__name__)
router = APIRouter(prefix="/guidance", tags=["Guidance"])


@router.get("/options", summary="Selectable project types, scales and standards")
async def guidance_options() -> Dict[str, List[Dict[str, str]]]:
    return {
        "project_types": [{"value": t.value, "label": t.label} for t in ProjectType],
        "project_scales": [{"value": s.value, "label": s.label} for s in ProjectScale],
        "standards": [{"value": s.key, "label": s.title} for s in ALL_STANDARDS],
    }


@router.post("", response_model=GuidanceResponse, summary="Generate process guidance")
async def generate_guidance(payload: GuidanceRequest) -> GuidanceResponse:
    standard = get_standard(payload.standard)
    text = process_generator.generate(payload.project_type, payload.project_scale, standard)
    logger.info(
        LogEvent.GUIDANCE_GENERATED,
        project_type=payload.project_type.value,
        project_scale=payload.project_scale.value,
        standard=standard.key,
    )
    return GuidanceResponse(
        project_type=payload.project_type.label,
        project_scale=payload.project_scale.label,
        standard=standard.title,
        text=text,
    )
