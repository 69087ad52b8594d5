import asyncio

import pytest

from standards_compare.core.config import Settings
from standards_compare.core.errors import (
    ComparisonSupersededError,
    InvalidInputError,
    ResourceNotFoundError,
)
from standards_compare.models.comparison import ComparisonResult, ResultKind, Side
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services.comparison_service import ComparisonService
from standards_compare.services.document_view import DocumentView

from conftest import BrokenView, GatedView, StubRegistry


@pytest.fixture
def left():
    return DocumentView("left", "PMBOK 7th Edition", ["We must manage the relevant threat.", "The gantt chart."])


@pytest.fixture
def right():
    return DocumentView("right", "PRINCE2", ["Keep the project risk register current."])


def test_run_classifies_current_pages(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    session = asyncio.run(service.run("left", "right"))

    assert [r.topic for r in session.outcome.similarities] == ["Risk Management"]
    assert session.outcome.similarities[0].snippet == "Both standards discuss topics related to 'threat'"
    assert session.outcome.differences == ()
    assert service.current is session


def test_only_the_visible_page_is_compared(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    left.go_to_page(1)
    session = asyncio.run(service.run("left", "right"))

    assert [r.topic for r in session.outcome.differences] == ["Risk Management", "Schedule Management"]
    sides = {r.topic: r.side for r in session.outcome.differences}
    assert sides["Risk Management"] == Side.RIGHT
    assert sides["Schedule Management"] == Side.LEFT


def test_repeated_runs_give_identical_outcomes(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)

    async def scenario():
        first = await service.run("left", "right")
        second = await service.run("left", "right")
        return first, second

    first, second = asyncio.run(scenario())
    assert first.outcome == second.outcome
    assert first.run_id != second.run_id


def test_summary_sections(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    summary = asyncio.run(service.run("left", "right")).summary()

    similarities, differences = summary.sections
    assert similarities.rows[0].text.startswith("Risk Management: ")
    assert differences.rows[0].placeholder
    assert summary.left_title == "PMBOK 7th Edition"


def test_newer_run_supersedes_pending_one(taxonomy, settings, left, right):
    async def scenario():
        gate = asyncio.Event()
        slow = GatedView("slow", "ISO 21502", ["budget"], gate)
        service = ComparisonService(StubRegistry(slow, left, right), taxonomy, settings=settings)

        pending = asyncio.create_task(service.run("slow", "right"))
        await asyncio.sleep(0)
        latest = await service.run("left", "right")
        gate.set()

        with pytest.raises(ComparisonSupersededError):
            await pending
        return service, latest

    service, latest = asyncio.run(scenario())
    assert service.current is latest
    assert service.current.left.document_id == "left"


def test_dismiss_discards_pending_run(taxonomy, settings, right):
    async def scenario():
        gate = asyncio.Event()
        slow = GatedView("slow", "ISO 21502", ["risk"], gate)
        service = ComparisonService(StubRegistry(slow, right), taxonomy, settings=settings)

        pending = asyncio.create_task(service.run("slow", "right"))
        await asyncio.sleep(0)
        service.dismiss()
        gate.set()

        with pytest.raises(ComparisonSupersededError):
            await pending
        return service

    service = asyncio.run(scenario())
    assert service.current is None


def test_dismiss_clears_displayed_session(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    asyncio.run(service.run("left", "right"))
    service.dismiss()
    assert service.current is None


def test_select_requires_a_displayed_session(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    some_result = ComparisonResult(
        topic="Risk Management",
        snippet="",
        source_label="PMBOK 7th Edition",
        side=Side.LEFT,
        kind=ResultKind.DIFFERENCE,
    )
    with pytest.raises(ResourceNotFoundError):
        asyncio.run(service.select(some_result))


def test_select_highlights_in_the_session_document(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)

    async def scenario():
        session = await service.run("left", "right")
        return await service.select(session.outcome.similarities[0])

    outcome = asyncio.run(scenario())
    # "risk" is not on the left page; similarities point at the left side
    assert outcome.document_id == "left"
    assert outcome.keyword == "risk"
    assert not outcome.highlighted


def test_unknown_document_is_rejected(taxonomy, settings, left):
    service = ComparisonService(StubRegistry(left), taxonomy, settings=settings)
    with pytest.raises(ResourceNotFoundError):
        asyncio.run(service.run("left", "missing"))


def test_failed_extraction_counts_as_empty(taxonomy, settings, right):
    broken = BrokenView("broken", "PMBOK", ["risk"])
    service = ComparisonService(StubRegistry(broken, right), taxonomy, settings=settings)
    session = asyncio.run(service.run("broken", "right"))

    assert session.outcome.similarities == ()
    assert [(r.topic, r.side) for r in session.outcome.differences] == [("Risk Management", Side.RIGHT)]


def test_word_mode_from_settings(right):
    taxonomy = Taxonomy.from_dict({"Cost Management": ["cost"]})
    costly = DocumentView("costly", "PMBOK", ["a costly delay"])
    registry = StubRegistry(costly, right)

    loose = ComparisonService(registry, taxonomy, settings=Settings(_env_file=None))
    strict = ComparisonService(
        registry, taxonomy, settings=Settings(_env_file=None, keyword_match_mode="word")
    )

    assert len(asyncio.run(loose.run("costly", "right")).outcome.differences) == 1
    assert asyncio.run(strict.run("costly", "right")).outcome.is_empty


def test_unknown_document_keeps_displayed_session(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)

    async def scenario():
        shown = await service.run("left", "right")
        with pytest.raises(ResourceNotFoundError):
            await service.run("left", "typo")
        return shown

    shown = asyncio.run(scenario())
    assert service.current is shown


def test_unknown_document_does_not_supersede_pending_run(taxonomy, settings, right):
    async def scenario():
        gate = asyncio.Event()
        slow = GatedView("slow", "ISO 21502", ["budget"], gate)
        service = ComparisonService(StubRegistry(slow, right), taxonomy, settings=settings)

        pending = asyncio.create_task(service.run("slow", "right"))
        await asyncio.sleep(0)
        with pytest.raises(ResourceNotFoundError):
            await service.run("slow", "typo")
        gate.set()

        return service, await pending

    service, session = asyncio.run(scenario())
    assert service.current is session
    assert [r.topic for r in session.outcome.differences] == ["Risk Management", "Cost Management"]


def test_select_rejects_result_not_on_the_sheet(taxonomy, settings, left, right):
    service = ComparisonService(StubRegistry(left, right), taxonomy, settings=settings)
    forged = ComparisonResult(
        topic="Cost Management",
        snippet="Both standards discuss topics related to 'cost'",
        source_label="PMBOK 7th Edition & PRINCE2",
        side=Side.RIGHT,
        kind=ResultKind.SIMILARITY,
    )

    async def scenario():
        session = await service.run("left", "right")
        with pytest.raises(InvalidInputError):
            await service.select(forged)
        # a real row with its side flipped is not on the sheet either
        flipped = session.outcome.similarities[0].model_copy(update={"side": Side.RIGHT})
        with pytest.raises(InvalidInputError):
            await service.select(flipped)

    asyncio.run(scenario())
    assert right.highlights == ()
