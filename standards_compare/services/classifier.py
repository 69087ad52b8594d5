"""Buckets topic matches into similarities and differences."""
from __future__ import annotations

from typing import Iterable, List, Optional

from standards_compare.models.comparison import (
    ComparisonOutcome,
    ComparisonResult,
    ResultKind,
    Side,
    TopicMatch,
)

SIMILARITY_SNIPPET = "Both standards discuss topics related to '{keyword}'"
DIFFERENCE_SNIPPET = "Mentions '{keyword}', a key aspect of this topic"


def classify_topic(match: TopicMatch, left_title: str, right_title: str) -> Optional[ComparisonResult]:
    """
    Classify a single topic.

    The first keyword in declaration order is the one quoted in the snippet.
    """
    if match.left_matches and match.right_matches:
        return ComparisonResult(
            topic=match.topic,
            snippet=SIMILARITY_SNIPPET.format(keyword=match.left_matches[0]),
            source_label=f"{left_title} & {right_title}",
            side=Side.LEFT,
            kind=ResultKind.SIMILARITY,
        )
    if match.left_matches:
        return ComparisonResult(
            topic=match.topic,
            snippet=DIFFERENCE_SNIPPET.format(keyword=match.left_matches[0]),
            source_label=left_title,
            side=Side.LEFT,
            kind=ResultKind.DIFFERENCE,
        )
    if match.right_matches:
        return ComparisonResult(
            topic=match.topic,
            snippet=DIFFERENCE_SNIPPET.format(keyword=match.right_matches[0]),
            source_label=right_title,
            side=Side.RIGHT,
            kind=ResultKind.DIFFERENCE,
        )
    return None


def classify(matches: Iterable[TopicMatch], left_title: str, right_title: str) -> ComparisonOutcome:
    """Partition results, keeping topic iteration order within each list."""
    similarities: List[ComparisonResult] = []
    differences: List[ComparisonResult] = []
    for match in matches:
        result = classify_topic(match, left_title, right_title)
        if result is None:
            continue
        if result.kind == ResultKind.SIMILARITY:
            similarities.append(result)
        else:
            differences.append(result)
    return ComparisonOutcome(similarities=tuple(similarities), differences=tuple(differences))
