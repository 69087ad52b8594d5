from typing import Any, Dict

from fastapi import APIRouter, Depends

from standards_compare.api.deps import get_services
from standards_compare.services import ServiceContainer

router = APIRouter()


@router.get("/")
async def health_check(services: ServiceContainer = Depends(get_services)) -> Dict[str, Any]:
    """Basic health status"""
    return {
        "status": "healthy",
        "version": services.settings.version,
        "open_documents": len(services.documents.list()),
    }


@router.get("/ready")
async def readiness_check(services: ServiceContainer = Depends(get_services)) -> Dict[str, Any]:
    """
    Readiness check

    The taxonomy is validated at startup, so a running app is ready once
    it has topics to match.
    """
    return {
        "ready": len(services.taxonomy) > 0,
        "taxonomy_topics": len(services.taxonomy),
        "keyword_match_mode": services.settings.keyword_match_mode.value,
    }


@router.get("/live")
async def liveness_check() -> Dict[str, str]:
    """Liveness probe"""
    return {"status": "alive"}
