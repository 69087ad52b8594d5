"""Groups a comparison outcome into the two sections of the result sheet."""
from typing import Sequence

from standards_compare.models.comparison import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonSummary,
    ResultKind,
    SummaryRow,
    SummarySection,
)

SIMILARITIES_TITLE = "Similar Concepts"
DIFFERENCES_TITLE = "Unique Points"
NO_SIMILARITIES_TEXT = "No direct similarities found on these pages."
NO_DIFFERENCES_TEXT = "No unique points found on these pages."


def _section(
    title: str,
    kind: ResultKind,
    results: Sequence[ComparisonResult],
    placeholder: str,
) -> SummarySection:
    # an empty section still shows one row
    if not results:
        rows = [SummaryRow(text=placeholder, placeholder=True)]
    else:
        rows = [SummaryRow(text=f"{r.topic}: {r.snippet}", result=r) for r in results]
    return SummarySection(title=title, kind=kind, rows=rows)


def present(run_id: str, outcome: ComparisonOutcome, left_title: str, right_title: str) -> ComparisonSummary:
    """Similarities first, then differences."""
    return ComparisonSummary(
        run_id=run_id,
        left_title=left_title,
        right_title=right_title,
        sections=[
            _section(SIMILARITIES_TITLE, ResultKind.SIMILARITY, outcome.similarities, NO_SIMILARITIES_TEXT),
            _section(DIFFERENCES_TITLE, ResultKind.DIFFERENCE, outcome.differences, NO_DIFFERENCES_TEXT),
        ],
    )
