"""
Comparison data models - results, grouped summaries and navigation outcomes
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Side(str, Enum):
    """Which of the two compared documents a piece of evidence came from"""
    LEFT = "left"
    RIGHT = "right"


class ResultKind(str, Enum):
    SIMILARITY = "similarity"
    DIFFERENCE = "difference"


class ComparisonResult(BaseModel):
    """One classified outcome for one topic"""

    model_config = ConfigDict(frozen=True)

    topic: str
    snippet: str
    source_label: str
    side: Side
    kind: ResultKind


class ComparisonOutcome(BaseModel):
    """Similarities and differences of one run, in taxonomy order"""

    model_config = ConfigDict(frozen=True)

    similarities: Tuple[ComparisonResult, ...] = ()
    differences: Tuple[ComparisonResult, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.similarities and not self.differences


@dataclass(frozen=True, slots=True)
class TopicMatch:
    """Keywords of one topic found on each side, in declaration order."""

    topic: str
    left_matches: Tuple[str, ...]
    right_matches: Tuple[str, ...]


class SummaryRow(BaseModel):
    """A result row, or the placeholder row of an empty section"""
    text: str
    placeholder: bool = False
    result: Optional[ComparisonResult] = None


class SummarySection(BaseModel):
    title: str
    kind: ResultKind
    rows: List[SummaryRow]


class ComparisonSummary(BaseModel):
    """What the result sheet displays"""
    run_id: str
    left_title: str
    right_title: str
    sections: List[SummarySection]


class NavigationOutcome(BaseModel):
    """Result of a deep-link request"""
    document_id: str
    side: Side
    keyword: str
    highlighted: bool
    page: Optional[int] = None
    offset: Optional[int] = None
