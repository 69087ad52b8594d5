import asyncio
from typing import Dict, Sequence

import pytest
from fastapi.testclient import TestClient

from standards_compare.core.config import Settings
from standards_compare.core.errors import ResourceNotFoundError
from standards_compare.main import create_app
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services.document_view import DocumentView


class StubRegistry:
    """Minimal stand-in for DocumentRegistry holding prebuilt views."""

    def __init__(self, *views: DocumentView):
        self._views: Dict[str, DocumentView] = {v.document_id: v for v in views}

    def get(self, document_id: str) -> DocumentView:
        try:
            return self._views[document_id]
        except KeyError:
            raise ResourceNotFoundError("Document", document_id) from None


class GatedView(DocumentView):
    """Extraction blocks until the gate is opened."""

    def __init__(self, document_id: str, title: str, pages: Sequence[str], gate: asyncio.Event):
        super().__init__(document_id, title, pages)
        self.gate = gate

    async def extract_visible_text(self) -> str:
        await self.gate.wait()
        return await super().extract_visible_text()


class BrokenView(DocumentView):
    async def extract_visible_text(self) -> str:
        raise RuntimeError("renderer went away")


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, enable_metrics=False, log_level="WARNING")


@pytest.fixture
def taxonomy() -> Taxonomy:
    return Taxonomy.from_dict({
        "Risk Management": ["risk", "threat", "opportunity", "issue"],
        "Schedule Management": ["gantt", "milestone"],
        "Cost Management": ["cost", "budget"],
    })


@pytest.fixture
def client(settings) -> TestClient:
    with TestClient(create_app(settings)) as test_client:
        yield test_client
