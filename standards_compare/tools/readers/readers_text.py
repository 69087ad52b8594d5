"""
Plain text reader for .txt, Markdown and reStructuredText files.
"""

from typing import List, Optional
from .readers_base import BaseParser, split_pages
from standards_compare.core.logging import get_logger

logger = get_logger(__name__)


class PlainTextParser(BaseParser):
    """Text reader with an encoding fallback chain; form feeds split pages."""

    # utf-8-sig also reads plain utf-8, and drops a leading BOM
    encodings = ['utf-8-sig', 'cp1252', 'latin-1']

    def parse(self, file_path: str) -> Optional[List[str]]:
        try:
            with open(file_path, 'rb') as f:
                raw = f.read()
        except OSError as e:
            logger.error("text_read_failed", file_path=file_path, error=str(e))
            return None

        return split_pages(self.decode(raw))

    def decode(self, raw: bytes) -> str:
        # latin-1 accepts any byte sequence, so the chain always ends in a decode
        for encoding in self.encodings:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                continue
        return raw.decode('utf-8', errors='ignore')
