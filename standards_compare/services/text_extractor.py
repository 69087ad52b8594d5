"""
Text extraction from document views.

Extraction never fails loudly: an error, a timeout or an empty page all
come back as "" which the comparison treats as no evidence.
"""
import asyncio
from typing import Optional, Protocol

from standards_compare.core.config import Settings
from standards_compare.core.logging import LogEvent
from standards_compare.services.base_service import BaseService


class TextSource(Protocol):
    """Anything that can report the text it currently displays."""

    document_id: str

    async def extract_visible_text(self) -> str:
        ...


class TextExtractor(BaseService):
    """Pulls the loaded text out of a document view."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)
        self.timeout = self.settings.extraction_timeout_seconds

    async def extract_visible_text(self, document: TextSource) -> str:
        try:
            text = await asyncio.wait_for(document.extract_visible_text(), timeout=self.timeout)
        except asyncio.TimeoutError:
            self.logger.warning(
                LogEvent.EXTRACTION_FAILED,
                document_id=document.document_id,
                reason="timeout",
                timeout=self.timeout,
            )
            return ""
        except Exception as exc:
            self.logger.warning(
                LogEvent.EXTRACTION_FAILED,
                document_id=document.document_id,
                reason=type(exc).__name__,
                error=str(exc),
            )
            return ""

        if not isinstance(text, str):
            return ""
        return text
