"""
PDF reader - basic text extraction with PyMuPDF, one entry per page
"""

import re
from typing import List, Optional

import pymupdf

from .readers_base import BaseParser
from standards_compare.core.logging import get_logger

logger = get_logger(__name__)


class PDFParser(BaseParser):
    """PDF reader - keeps the page structure of the source file"""

    def parse(self, file_path: str) -> Optional[List[str]]:
        try:
            doc = pymupdf.open(file_path)
        except (RuntimeError, OSError, ValueError) as e:
            logger.error("pdf_open_failed", file_path=file_path, error=str(e))
            return None

        pages = []
        try:
            for page in doc:
                text = page.get_text()
                if not text.strip():
                    continue
                # collapse runs of blank lines and horizontal whitespace
                text = re.sub(r'\n\s*\n\s*\n', '\n\n', text)
                text = re.sub(r'[ \t]+', ' ', text)
                pages.append(text.strip())
        finally:
            doc.close()

        return pages or None
