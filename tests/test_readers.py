import zipfile

import pymupdf
import pytest

from standards_compare.core.errors import DocumentParseError, UnsupportedFormatError
from standards_compare.tools.readers import ReadersService
from standards_compare.tools.readers.parser_map import get_parser_for_file

DOCUMENT_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
    '<w:body>'
    '<w:p><w:r><w:t>Risk </w:t></w:r><w:r><w:t>register</w:t></w:r></w:p>'
    '<w:p><w:r><w:t>Milestone plan</w:t></w:r></w:p>'
    '</w:body>'
    '</w:document>'
)


@pytest.fixture
def readers():
    return ReadersService()


def test_text_file_pages_split_on_form_feed(tmp_path, readers):
    path = tmp_path / "guide.txt"
    path.write_text("page one\fpage two\f   \n", encoding="utf-8")
    assert readers.read_pages(str(path)) == ["page one", "page two"]


def test_text_file_with_byte_order_mark(tmp_path, readers):
    path = tmp_path / "guide.txt"
    path.write_bytes("\ufeffRisk register".encode("utf-8"))
    assert readers.read_pages(str(path)) == ["Risk register"]


def test_text_file_in_legacy_encoding(tmp_path, readers):
    path = tmp_path / "guide.md"
    path.write_bytes("café budget".encode("cp1252"))
    assert readers.read_pages(str(path)) == ["café budget"]


def test_html_body_text_without_scripts(tmp_path, readers):
    path = tmp_path / "chapter.xhtml"
    path.write_text(
        "<html><head><title>Ignored</title><style>p {}</style></head>"
        "<body><h1>Risk</h1><p>Threats and <b>opportunities</b></p>"
        "<script>var issue = 1;</script></body></html>",
        encoding="utf-8",
    )
    pages = readers.read_pages(str(path))
    assert pages == ["Risk\nThreats and opportunities"]


def test_docx_paragraphs(tmp_path, readers):
    path = tmp_path / "standard.docx"
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("word/document.xml", DOCUMENT_XML)
    assert readers.read_pages(str(path)) == ["Risk register\n\nMilestone plan"]


def test_pdf_keeps_pages(tmp_path, readers):
    path = tmp_path / "standard.pdf"
    doc = pymupdf.open()
    for text in ("Risk register", "Gantt chart"):
        page = doc.new_page()
        page.insert_text((72, 72), text)
    doc.save(str(path))
    doc.close()

    pages = readers.read_pages(str(path))
    assert len(pages) == 2
    assert "Risk register" in pages[0]
    assert "Gantt chart" in pages[1]


def test_unsupported_extension(tmp_path, readers):
    path = tmp_path / "slides.pptx"
    path.write_bytes(b"")
    with pytest.raises(UnsupportedFormatError):
        readers.read_pages(str(path))
    assert not readers.is_format_supported(str(path))


def test_empty_document_fails_to_parse(tmp_path, readers):
    path = tmp_path / "empty.txt"
    path.write_text("  \n", encoding="utf-8")
    with pytest.raises(DocumentParseError):
        readers.read_pages(str(path))


def test_corrupt_docx_fails_to_parse(tmp_path, readers):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip")
    with pytest.raises(DocumentParseError):
        readers.read_pages(str(path))


def test_extension_lookup_ignores_case():
    assert get_parser_for_file("GUIDE.PDF")[1] == "PDFParser"
    assert get_parser_for_file("notes.rst")[1] == "PlainTextParser"
    assert get_parser_for_file("archive.zip") is None
