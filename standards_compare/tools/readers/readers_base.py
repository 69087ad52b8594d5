"""
Reader base class - defines the parsing interface only

Format support lives in parser_map.py.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

# Page separator understood by every reader that produces a single text blob
PAGE_BREAK = '\f'


class BaseParser(ABC):
    """Minimal document reader: one required method."""

    @abstractmethod
    def parse(self, file_path: str) -> Optional[List[str]]:
        """
        Parse a document into pages of plain text.

        Args:
            file_path: path of the document

        Returns:
            list of page texts, None when parsing fails
        """


def split_pages(text: str) -> List[str]:
    """Split text on form feeds, dropping pages that are only whitespace."""
    pages = [page for page in text.split(PAGE_BREAK) if page.strip()]
    return pages
