"""
DOCX reader using direct XML parsing.

Reads word/document.xml straight out of the zip container with lxml,
bypassing higher level APIs.
"""

import zipfile
from typing import List, Optional

from lxml import etree

from .readers_base import BaseParser
from standards_compare.core.logging import get_logger

logger = get_logger(__name__)

WORD_NAMESPACE = {'w': 'http://schemas.openxmlformats.org/wordprocessingml/2006/main'}


class DOCXParser(BaseParser):
    """DOCX reader; the whole document becomes a single page."""

    def parse(self, file_path: str) -> Optional[List[str]]:
        try:
            with zipfile.ZipFile(file_path, 'r') as zip_file:
                try:
                    xml_content = zip_file.read('word/document.xml')
                except KeyError:
                    logger.info("docx_missing_document_xml", file_path=file_path)
                    return None
        except (zipfile.BadZipFile, OSError) as e:
            logger.error("docx_open_failed", file_path=file_path, error=str(e))
            return None

        try:
            root = etree.fromstring(xml_content)
        except etree.XMLSyntaxError as e:
            logger.error("docx_xml_invalid", file_path=file_path, error=str(e))
            return None

        paragraph_texts = []
        for paragraph in root.xpath('//w:p', namespaces=WORD_NAMESPACE):
            text_nodes = paragraph.xpath('.//w:t/text()', namespaces=WORD_NAMESPACE)
            paragraph_text = ''.join(text_nodes).strip()
            if paragraph_text:
                paragraph_texts.append(paragraph_text)

        if not paragraph_texts:
            return None
        return ['\n\n'.join(paragraph_texts)]
