"""Document APIs: open, page through, render and search loaded documents."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile
from pydantic import BaseModel, Field

from standards_compare.api.deps import get_document_registry, get_settings_dep
from standards_compare.core.config import Settings
from standards_compare.core.errors import InvalidInputError, UnsupportedFormatError
from standards_compare.core.logging import get_logger
from standards_compare.models.standard import get_standard
from standards_compare.services.document_view import DocumentRegistry, DocumentView

logger = get_logger(__name__)
router = APIRouter(prefix="/documents", tags=["Documents"])


class TextDocumentRequest(BaseModel):
    title: Optional[str] = None
    text: str = ""
    standard: Optional[str] = Field(default=None, description="Standard key, e.g. PMBOK")


class PageRequest(BaseModel):
    page: int


class HighlightModel(BaseModel):
    page: int
    start: int
    end: int
    keyword: str


class DocumentInfo(BaseModel):
    id: str
    title: str
    standard: Optional[str]
    source: Optional[str]
    page_count: int
    current_page: int
    char_count: int
    scroll_offset: int
    highlights: List[HighlightModel]

    @classmethod
    def from_view(cls, view: DocumentView) -> "DocumentInfo":
        return cls(
            id=view.document_id,
            title=view.title,
            standard=view.standard_key,
            source=view.source,
            page_count=view.page_count,
            current_page=view.current_page,
            char_count=view.char_count,
            scroll_offset=view.scroll_offset,
            highlights=[
                HighlightModel(page=h.page, start=h.start, end=h.end, keyword=h.keyword)
                for h in view.highlights
            ],
        )


class DocumentListResponse(BaseModel):
    items: List[DocumentInfo]


class RenderResponse(BaseModel):
    id: str
    page: int
    markup: str


class SearchHitModel(BaseModel):
    page: int
    offset: int
    snippet: str


class SearchResponse(BaseModel):
    query: str
    hits: List[SearchHitModel]


def _resolve_title(title: Optional[str], standard: Optional[str], fallback: str) -> tuple[str, Optional[str]]:
    standard_key = None
    if standard:
        resolved = get_standard(standard)
        standard_key = resolved.key
        fallback = resolved.title
    return (title or "").strip() or fallback, standard_key


async def _save_upload(upload: UploadFile, max_bytes: int) -> str:
    name = Path(upload.filename or "").name
    if not name:
        raise InvalidInputError("Filename is required", field="file")
    ext = Path(name).suffix.lower()
    tmp = tempfile.NamedTemporaryFile(prefix="standard_", suffix=ext, delete=False)
    temp_path = Path(tmp.name)
    bytes_written = 0
    try:
        chunk_size = 1024 * 1024
        while True:
            chunk = await upload.read(chunk_size)
            if not chunk:
                break
            bytes_written += len(chunk)
            if bytes_written > max_bytes:
                raise InvalidInputError("File exceeds the upload size limit", field="file", value=bytes_written)
            tmp.write(chunk)
        tmp.flush()
        return str(temp_path)
    except Exception:
        tmp.close()
        temp_path.unlink(missing_ok=True)
        raise
    finally:
        tmp.close()


@router.post("/text", response_model=DocumentInfo, status_code=201, summary="Open a document from raw text")
async def open_text_document(
    payload: TextDocumentRequest,
    registry: DocumentRegistry = Depends(get_document_registry),
) -> DocumentInfo:
    title, standard_key = _resolve_title(payload.title, payload.standard, "Untitled document")
    view = registry.open_text(title, payload.text, standard_key=standard_key)
    return DocumentInfo.from_view(view)


@router.post("/upload", response_model=DocumentInfo, status_code=201, summary="Open an uploaded document")
async def upload_document(
    file: UploadFile = File(..., description="PDF, DOCX, HTML or text document"),
    title: Optional[str] = Form(None),
    standard: Optional[str] = Form(None),
    registry: DocumentRegistry = Depends(get_document_registry),
    settings: Settings = Depends(get_settings_dep),
) -> DocumentInfo:
    filename = Path(file.filename or "").name
    if filename and not registry.readers.is_format_supported(filename):
        raise UnsupportedFormatError(filename)

    resolved_title, standard_key = _resolve_title(title, standard, Path(filename).stem or "Untitled document")
    temp_path = await _save_upload(file, settings.max_upload_bytes)
    try:
        view = registry.open_file(temp_path, resolved_title, standard_key=standard_key, source=filename)
    finally:
        Path(temp_path).unlink(missing_ok=True)
    return DocumentInfo.from_view(view)


@router.get("", response_model=DocumentListResponse, summary="List open documents")
async def list_documents(registry: DocumentRegistry = Depends(get_document_registry)) -> DocumentListResponse:
    return DocumentListResponse(items=[DocumentInfo.from_view(v) for v in registry.list()])


@router.get("/{document_id}", response_model=DocumentInfo, summary="Get a document")
async def read_document(
    document_id: str,
    registry: DocumentRegistry = Depends(get_document_registry),
) -> DocumentInfo:
    return DocumentInfo.from_view(registry.get(document_id))


@router.delete("/{document_id}", status_code=204, summary="Close a document")
async def close_document(
    document_id: str,
    registry: DocumentRegistry = Depends(get_document_registry),
) -> Response:
    registry.close(document_id)
    return Response(status_code=204)


@router.put("/{document_id}/page", response_model=DocumentInfo, summary="Go to a page")
async def go_to_page(
    document_id: str,
    payload: PageRequest,
    registry: DocumentRegistry = Depends(get_document_registry),
) -> DocumentInfo:
    view = registry.get(document_id)
    view.go_to_page(payload.page)
    return DocumentInfo.from_view(view)


@router.get("/{document_id}/render", response_model=RenderResponse, summary="Render the current page")
async def render_document(
    document_id: str,
    registry: DocumentRegistry = Depends(get_document_registry),
) -> RenderResponse:
    view = registry.get(document_id)
    return RenderResponse(id=view.document_id, page=view.current_page, markup=view.render())


@router.get("/{document_id}/search", response_model=SearchResponse, summary="Search a document")
async def search_document(
    document_id: str,
    q: str = Query(..., min_length=1, description="Text to search for"),
    registry: DocumentRegistry = Depends(get_document_registry),
    settings: Settings = Depends(get_settings_dep),
) -> SearchResponse:
    view = registry.get(document_id)
    hits = view.search(q, limit=settings.search_result_limit, radius=settings.search_snippet_radius)
    return SearchResponse(
        query=q,
        hits=[SearchHitModel(page=h.page, offset=h.offset, snippet=h.snippet) for h in hits],
    )
