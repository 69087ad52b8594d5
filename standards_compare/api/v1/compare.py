"""Comparison APIs: run, show, dismiss and deep-link from a result."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from standards_compare.api.deps import get_comparison_service
from standards_compare.core.errors import ResourceNotFoundError
from standards_compare.models.comparison import ComparisonResult, ComparisonSummary, NavigationOutcome
from standards_compare.services.comparison_service import ComparisonService

router = APIRouter(prefix="/comparisons", tags=["Comparison"])


class CompareRequest(BaseModel):
    left_document_id: str
    right_document_id: str


@router.post("", response_model=ComparisonSummary, summary="Compare two open documents")
async def run_comparison(
    payload: CompareRequest,
    service: ComparisonService = Depends(get_comparison_service),
) -> ComparisonSummary:
    session = await service.run(payload.left_document_id, payload.right_document_id)
    return session.summary()


@router.get("/current", response_model=ComparisonSummary, summary="The displayed comparison")
async def current_comparison(
    service: ComparisonService = Depends(get_comparison_service),
) -> ComparisonSummary:
    if service.current is None:
        raise ResourceNotFoundError("Comparison")
    return service.current.summary()


@router.delete("/current", status_code=204, summary="Dismiss the result sheet")
async def dismiss_comparison(
    service: ComparisonService = Depends(get_comparison_service),
) -> Response:
    service.dismiss()
    return Response(status_code=204)


@router.post("/current/select", response_model=NavigationOutcome, summary="Jump to a result in its document")
async def select_result(
    result: ComparisonResult,
    service: ComparisonService = Depends(get_comparison_service),
) -> NavigationOutcome:
    return await service.select(result)
