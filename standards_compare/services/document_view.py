"""Loaded documents: paged text, a current page and a highlight overlay."""
from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import uuid4

from standards_compare.core.config import Settings
from standards_compare.core.errors import InvalidInputError, ResourceNotFoundError
from standards_compare.core.logging import LogEvent
from standards_compare.services.base_service import BaseService
from standards_compare.tools.readers import ReadersService
from standards_compare.tools.readers.readers_base import split_pages

HIGHLIGHT_CLASS = "pm-highlight"


@dataclass(frozen=True, slots=True)
class Highlight:
    """A marker over [start, end) of one page."""

    page: int
    start: int
    end: int
    keyword: str


@dataclass(frozen=True, slots=True)
class SearchHit:
    page: int
    offset: int
    snippet: str


class DocumentView:
    """
    A rendered, paged document.

    The comparison core only reads the current page and asks for a visual
    highlight; it never changes the text itself.
    """

    def __init__(
        self,
        document_id: str,
        title: str,
        pages: Sequence[str],
        standard_key: Optional[str] = None,
        source: Optional[str] = None,
    ):
        self.document_id = document_id
        self.title = title
        self.standard_key = standard_key
        self.source = source
        self._pages: Tuple[str, ...] = tuple(pages)
        self._current_page = 0
        self._highlights: List[Highlight] = []
        self.scroll_offset = 0

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def current_text(self) -> str:
        if not self._pages:
            return ""
        return self._pages[self._current_page]

    @property
    def char_count(self) -> int:
        return sum(len(page) for page in self._pages)

    @property
    def highlights(self) -> Tuple[Highlight, ...]:
        return tuple(self._highlights)

    def go_to_page(self, page: int) -> None:
        if not 0 <= page < max(self.page_count, 1):
            raise InvalidInputError(
                f"Page must be between 0 and {max(self.page_count - 1, 0)}",
                field="page",
                value=page,
            )
        self._current_page = page
        self.scroll_offset = 0
        self.clear_highlights()

    async def extract_visible_text(self) -> str:
        """Plain text of the page currently loaded, case preserved."""
        return self.current_text

    async def find_and_highlight(self, text: str, whole_words: bool = False) -> Optional[Highlight]:
        """
        Scroll to and mark the first occurrence of ``text`` on the current page.
        With ``whole_words`` the occurrence must sit between word boundaries.

        Any earlier marker is removed first, so at most one marker exists
        afterwards. Returns None (and leaves no marker) when the text is not
        on the page.
        """
        self.clear_highlights()
        if not text:
            return None
        pattern = re.escape(text)
        if whole_words:
            pattern = rf"\b{pattern}\b"
        match = re.search(pattern, self.current_text, re.IGNORECASE)
        if match is None:
            return None
        highlight = Highlight(
            page=self._current_page,
            start=match.start(),
            end=match.end(),
            keyword=text,
        )
        self._highlights.append(highlight)
        self.scroll_offset = match.start()
        return highlight

    def clear_highlights(self) -> None:
        self._highlights.clear()

    def render(self) -> str:
        """Current page as escaped markup with highlights wrapped in <mark>."""
        text = self.current_text
        marks = sorted(
            (h for h in self._highlights if h.page == self._current_page),
            key=lambda h: h.start,
        )
        parts = []
        cursor = 0
        for mark in marks:
            parts.append(html.escape(text[cursor:mark.start]))
            parts.append(f'<mark class="{HIGHLIGHT_CLASS}">')
            parts.append(html.escape(text[mark.start:mark.end]))
            parts.append('</mark>')
            cursor = mark.end
        parts.append(html.escape(text[cursor:]))
        return "".join(parts)

    def search(self, query: str, limit: int = 50, radius: int = 40) -> List[SearchHit]:
        """Case-insensitive search over every page, in reading order."""
        query = query.strip()
        if not query:
            return []
        pattern = re.compile(re.escape(query), re.IGNORECASE)
        hits: List[SearchHit] = []
        for page_number, page in enumerate(self._pages):
            for match in pattern.finditer(page):
                start = max(match.start() - radius, 0)
                end = min(match.end() + radius, len(page))
                snippet = " ".join(page[start:end].split())
                if start > 0:
                    snippet = "..." + snippet
                if end < len(page):
                    snippet = snippet + "..."
                hits.append(SearchHit(page=page_number, offset=match.start(), snippet=snippet))
                if len(hits) >= limit:
                    return hits
        return hits

    def __repr__(self) -> str:
        return f"<DocumentView id={self.document_id} title={self.title!r} pages={self.page_count}>"


class DocumentRegistry(BaseService):
    """In-memory set of open documents, keyed by handle id."""

    def __init__(self, settings: Optional[Settings] = None, readers: Optional[ReadersService] = None):
        super().__init__(settings)
        self.readers = readers or ReadersService()
        self._documents: Dict[str, DocumentView] = {}

    def open_text(
        self,
        title: str,
        text: str,
        standard_key: Optional[str] = None,
    ) -> DocumentView:
        """Open raw text; form feeds split it into pages."""
        return self._register(title, split_pages(text), standard_key, source="text")

    def open_file(
        self,
        file_path: str,
        title: str,
        standard_key: Optional[str] = None,
        source: Optional[str] = None,
    ) -> DocumentView:
        pages = self.readers.read_pages(file_path)
        return self._register(title, pages, standard_key, source=source or file_path)

    def get(self, document_id: str) -> DocumentView:
        try:
            return self._documents[document_id]
        except KeyError:
            raise ResourceNotFoundError("Document", document_id) from None

    def list(self) -> List[DocumentView]:
        return list(self._documents.values())

    def close(self, document_id: str) -> None:
        view = self.get(document_id)
        del self._documents[document_id]
        self.logger.info(LogEvent.DOCUMENT_CLOSED, document_id=document_id, title=view.title)

    def _register(
        self,
        title: str,
        pages: Sequence[str],
        standard_key: Optional[str],
        source: Optional[str],
    ) -> DocumentView:
        document_id = uuid4().hex
        view = DocumentView(document_id, title, pages, standard_key=standard_key, source=source)
        self._documents[document_id] = view
        self.logger.info(
            LogEvent.DOCUMENT_OPENED,
            document_id=document_id,
            title=title,
            pages=view.page_count,
            chars=view.char_count,
            source=source,
        )
        return view
