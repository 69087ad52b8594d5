"""Catalog of the project-management standards the app ships with."""
from typing import List

from pydantic import BaseModel, ConfigDict

from standards_compare.core.errors import ResourceNotFoundError


class Standard(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str


ALL_STANDARDS: List[Standard] = [
    Standard(key="PMBOK", title="PMBOK 7th Edition"),
    Standard(key="PRINCE2", title="PRINCE2"),
    Standard(key="ISO21502", title="ISO 21502"),
]


def get_standard(key: str) -> Standard:
    """Look up a standard by key, ignoring case"""
    wanted = key.strip().upper()
    for standard in ALL_STANDARDS:
        if standard.key == wanted:
            return standard
    raise ResourceNotFoundError("Standard", key)
