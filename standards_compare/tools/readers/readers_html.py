"""
HTML/XHTML reader - approximates the rendered body text of a chapter,
such as an EPUB content document that was already unpacked.
"""

import re
from typing import List, Optional

import lxml.html
from lxml import etree

from .readers_base import BaseParser
from standards_compare.core.logging import get_logger

logger = get_logger(__name__)

BLOCK_TAGS = (
    'p', 'div', 'section', 'article', 'header', 'footer', 'li', 'tr',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'blockquote', 'pre', 'br', 'table',
)


class HTMLParser(BaseParser):
    """Extracts body text with one line per block element."""

    def parse(self, file_path: str) -> Optional[List[str]]:
        try:
            with open(file_path, 'rb') as f:
                raw = f.read()
            text = self.extract_text(raw)
        except (OSError, etree.ParserError, ValueError) as e:
            logger.error("html_parse_failed", file_path=file_path, error=str(e))
            return None

        return [text] if text else None

    def extract_text(self, raw: bytes) -> str:
        root = lxml.html.document_fromstring(raw)
        for bad in root.xpath('//script|//style|//head'):
            bad.drop_tree()

        body = root.find('body')
        if body is None:
            body = root

        for element in body.iter(*BLOCK_TAGS):
            element.tail = '\n' + (element.tail or '')

        lines = []
        for line in body.text_content().splitlines():
            line = re.sub(r'[ \t\r\xa0]+', ' ', line).strip()
            if line:
                lines.append(line)
        return '\n'.join(lines)
