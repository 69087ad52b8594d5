import asyncio

import pytest

from standards_compare.core.errors import InvalidInputError, ResourceNotFoundError
from standards_compare.services.document_view import DocumentRegistry, DocumentView


def make_view(*pages):
    return DocumentView("doc", "PMBOK", list(pages))


def test_extracts_only_the_current_page():
    view = make_view("risk on page one", "gantt on page two")
    assert asyncio.run(view.extract_visible_text()) == "risk on page one"
    view.go_to_page(1)
    assert asyncio.run(view.extract_visible_text()) == "gantt on page two"


def test_empty_document_has_empty_text():
    view = make_view()
    assert view.page_count == 0
    assert asyncio.run(view.extract_visible_text()) == ""


def test_page_out_of_range_is_rejected():
    view = make_view("only page")
    with pytest.raises(InvalidInputError):
        view.go_to_page(1)
    with pytest.raises(InvalidInputError):
        view.go_to_page(-1)


def test_highlight_is_case_insensitive_and_scrolls():
    view = make_view("Intro. Risk appetite is set by the board.")
    highlight = asyncio.run(view.find_and_highlight("risk"))
    assert highlight is not None
    assert highlight.start == 7
    assert view.scroll_offset == 7
    assert view.render() == 'Intro. <mark class="pm-highlight">Risk</mark> appetite is set by the board.'


def test_repeated_highlights_leave_one_marker():
    view = make_view("risk and budget and risk")

    async def scenario():
        await view.find_and_highlight("risk")
        await view.find_and_highlight("budget")
        await view.find_and_highlight("risk")

    asyncio.run(scenario())
    assert len(view.highlights) == 1
    assert view.render().count("<mark") == 1


def test_missed_highlight_clears_the_previous_marker():
    view = make_view("risk register")

    async def scenario():
        await view.find_and_highlight("risk")
        return await view.find_and_highlight("gantt")

    assert asyncio.run(scenario()) is None
    assert view.highlights == ()
    assert "<mark" not in view.render()


def test_render_escapes_markup():
    view = make_view("Cost & <threat>")
    asyncio.run(view.find_and_highlight("threat"))
    assert view.render() == 'Cost &amp; &lt;<mark class="pm-highlight">threat</mark>&gt;'


def test_changing_page_drops_highlights():
    view = make_view("risk", "more risk")
    asyncio.run(view.find_and_highlight("risk"))
    view.go_to_page(1)
    assert view.highlights == ()


def test_search_spans_pages_with_snippets():
    view = make_view("A long preamble before the Risk register entry.", "no match", "risk now")
    hits = view.search("risk", radius=5)
    assert [h.page for h in hits] == [0, 2]
    assert hits[0].snippet == "...the Risk regi..."
    assert hits[1].snippet == "risk now"


def test_search_respects_limit_and_blank_queries():
    view = make_view("risk risk risk")
    assert len(view.search("risk", limit=2)) == 2
    assert view.search("   ") == []


def test_registry_splits_text_on_form_feeds(settings):
    registry = DocumentRegistry(settings)
    view = registry.open_text("PRINCE2", "first page\fsecond page", standard_key="PRINCE2")
    assert view.page_count == 2
    assert registry.get(view.document_id) is view
    assert registry.list() == [view]


def test_registry_close_and_missing(settings):
    registry = DocumentRegistry(settings)
    view = registry.open_text("PMBOK", "text")
    registry.close(view.document_id)
    with pytest.raises(ResourceNotFoundError):
        registry.get(view.document_id)
    with pytest.raises(ResourceNotFoundError):
        registry.close(view.document_id)


def test_whole_word_highlight_skips_partial_words():
    view = make_view("A costly delay, then the Cost baseline.")

    async def scenario():
        loose = await view.find_and_highlight("cost")
        strict = await view.find_and_highlight("cost", whole_words=True)
        return loose, strict

    loose, strict = asyncio.run(scenario())
    assert loose.start == 2
    assert strict.start == 19
    assert len(view.highlights) == 1
