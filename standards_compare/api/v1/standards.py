"""Standards catalog API."""
from typing import List

from fastapi import APIRouter

from standards_compare.models.standard import ALL_STANDARDS, Standard, get_standard

router = APIRouter(prefix="/standards", tags=["Standards"])


@router.get("", response_model=List[Standard], summary="List bundled standards")
async def list_standards() -> List[Standard]:
    return ALL_STANDARDS


@router.get("/{key}", response_model=Standard, summary="Get a standard by key")
async def read_standard(key: str) -> Standard:
    return get_standard(key)
