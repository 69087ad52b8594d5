"""
Unified document reading service with lazily imported readers
"""

import importlib
from pathlib import Path
from typing import Dict, List

from standards_compare.core.errors import DocumentParseError, UnsupportedFormatError
from standards_compare.core.logging import LogEvent, get_logger
from .parser_map import get_parser_for_file, get_parser_map
from .readers_base import BaseParser

logger = get_logger(__name__)


class ReadersService:
    """Turns a file on disk into pages of text"""

    def __init__(self):
        self._parsers: Dict[str, BaseParser] = {}
        self._parser_map = get_parser_map()

    def read_pages(self, file_path: str) -> List[str]:
        """
        Parse a document into pages

        Raises:
            UnsupportedFormatError: no reader for the extension
            DocumentParseError: the reader produced no text
        """
        parser = self._get_parser(file_path)
        name = Path(file_path).name
        pages = parser.parse(file_path)
        if not pages:
            logger.warning(LogEvent.DOCUMENT_PARSE_FAILED, file=name, parser=type(parser).__name__)
            raise DocumentParseError(name, "no text could be extracted")
        return pages

    def _get_parser(self, file_path: str) -> BaseParser:
        parser_info = get_parser_for_file(file_path)
        if not parser_info:
            raise UnsupportedFormatError(Path(file_path).name)

        module_path, class_name = parser_info
        cache_key = f"{module_path}.{class_name}"
        if cache_key not in self._parsers:
            module = importlib.import_module(module_path)
            self._parsers[cache_key] = getattr(module, class_name)()
        return self._parsers[cache_key]

    def get_supported_formats(self) -> List[str]:
        return sorted(self._parser_map)

    def is_format_supported(self, file_path: str) -> bool:
        return Path(file_path).suffix.lower() in self._parser_map
