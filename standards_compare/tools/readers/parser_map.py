"""
Parser map - file extension to reader class

Configuration kept apart from code: readers are imported lazily from here.
"""
from pathlib import Path
from typing import Dict, Optional, Tuple

_PACKAGE = 'standards_compare.tools.readers'

# Dedicated binary/markup readers take precedence
SPECIALIZED_PARSERS: Dict[str, Tuple[str, str]] = {
    '.pdf': (f'{_PACKAGE}.readers_pdf', 'PDFParser'),
    '.docx': (f'{_PACKAGE}.readers_docx', 'DOCXParser'),
    '.html': (f'{_PACKAGE}.readers_html', 'HTMLParser'),
    '.htm': (f'{_PACKAGE}.readers_html', 'HTMLParser'),
    '.xhtml': (f'{_PACKAGE}.readers_html', 'HTMLParser'),
}

# Formats handled by the plain text reader
TEXT_PARSER_FORMATS = [
    '.txt', '.text', '.md', '.markdown', '.rst',
]


def get_parser_map() -> Dict[str, Tuple[str, str]]:
    """
    Full extension -> (module path, class name) mapping

    Returns:
        dict keyed by lowercase extension
    """
    parser_map = {}
    for ext in TEXT_PARSER_FORMATS:
        parser_map[ext] = (f'{_PACKAGE}.readers_text', 'PlainTextParser')
    parser_map.update(SPECIALIZED_PARSERS)
    return parser_map


def get_parser_for_file(file_path: str) -> Optional[Tuple[str, str]]:
    """
    Pick the reader for a file path

    Returns:
        (module_path, class_name) or None when the format is unsupported
    """
    ext = Path(file_path).suffix.lower()
    return get_parser_map().get(ext)
