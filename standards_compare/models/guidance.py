"""Inputs of the process guidance generator."""
from enum import Enum

from pydantic import BaseModel


class ProjectType(str, Enum):
    SOFTWARE = "software"
    CONSTRUCTION = "construction"
    RESEARCH = "research"
    INFRASTRUCTURE = "infrastructure"
    MARKETING = "marketing"

    @property
    def label(self) -> str:
        return _PROJECT_TYPE_LABELS[self]


class ProjectScale(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def label(self) -> str:
        return _PROJECT_SCALE_LABELS[self]


_PROJECT_TYPE_LABELS = {
    ProjectType.SOFTWARE: "Software Development",
    ProjectType.CONSTRUCTION: "Construction",
    ProjectType.RESEARCH: "Research Project",
    ProjectType.INFRASTRUCTURE: "Infrastructure",
    ProjectType.MARKETING: "Marketing Campaign",
}

_PROJECT_SCALE_LABELS = {
    ProjectScale.SMALL: "Small (1-3 months)",
    ProjectScale.MEDIUM: "Medium (3-9 months)",
    ProjectScale.LARGE: "Large (9+ months)",
}


class GuidanceRequest(BaseModel):
    project_type: ProjectType
    project_scale: ProjectScale
    standard: str


class GuidanceResponse(BaseModel):
    project_type: str
    project_scale: str
    standard: str
    text: str
