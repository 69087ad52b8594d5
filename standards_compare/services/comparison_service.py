"""Comparison runs: extraction, matching, classification and the displayed session."""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Dict, Optional
from uuid import uuid4

from standards_compare.core.config import Settings
from standards_compare.core.errors import (
    ComparisonSupersededError,
    InvalidInputError,
    ResourceNotFoundError,
)
from standards_compare.core.logging import LogEvent
from standards_compare.models.comparison import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonSummary,
    NavigationOutcome,
    Side,
)
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services.base_service import BaseService
from standards_compare.services.classifier import classify
from standards_compare.services.document_view import DocumentRegistry, DocumentView
from standards_compare.services.navigator import DeepLinkNavigator
from standards_compare.services.presenter import present
from standards_compare.services.text_extractor import TextExtractor
from standards_compare.services.topic_matcher import match_topics


class CancellationToken:
    """Marks a run whose eventual result must not be presented."""

    def __init__(self, run_id: str):
        self.run_id = run_id
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass(frozen=True)
class ComparisonSession:
    """A finished run and the two documents it was computed from."""

    run_id: str
    left: DocumentView
    right: DocumentView
    outcome: ComparisonOutcome

    @property
    def views(self) -> Dict[Side, DocumentView]:
        return {Side.LEFT: self.left, Side.RIGHT: self.right}

    def summary(self) -> ComparisonSummary:
        return present(self.run_id, self.outcome, self.left.title, self.right.title)


class ComparisonService(BaseService):
    """
    Coordinates comparison runs.

    Only one run is ever presented: starting a new run or dismissing the
    result sheet cancels the token of the run still in flight, and that run
    raises ComparisonSupersededError instead of returning.
    """

    def __init__(
        self,
        registry: DocumentRegistry,
        taxonomy: Taxonomy,
        extractor: Optional[TextExtractor] = None,
        navigator: Optional[DeepLinkNavigator] = None,
        settings: Optional[Settings] = None,
    ):
        super().__init__(settings)
        self.registry = registry
        self.taxonomy = taxonomy
        self.extractor = extractor or TextExtractor(self.settings)
        self.navigator = navigator or DeepLinkNavigator(taxonomy, self.settings)
        self._active: Optional[CancellationToken] = None
        self._current: Optional[ComparisonSession] = None

    @property
    def current(self) -> Optional[ComparisonSession]:
        return self._current

    def _begin(self) -> CancellationToken:
        if self._active is not None:
            self._active.cancel()
        token = CancellationToken(uuid4().hex[:12])
        self._active = token
        return token

    async def run(self, left_id: str, right_id: str) -> ComparisonSession:
        # unknown ids fail before anything in flight or on screen is touched
        left = self.registry.get(left_id)
        right = self.registry.get(right_id)

        token = self._begin()
        # a new run replaces whatever the sheet was showing
        self._current = None
        start_time = time.time()

        self.logger.info(
            LogEvent.COMPARISON_STARTED,
            run_id=token.run_id,
            left=left.title,
            right=right.title,
        )

        left_text, right_text = await asyncio.gather(
            self.extractor.extract_visible_text(left),
            self.extractor.extract_visible_text(right),
        )

        if token.cancelled:
            self.logger.info(LogEvent.COMPARISON_SUPERSEDED, run_id=token.run_id)
            raise ComparisonSupersededError(token.run_id)

        matches = match_topics(
            left_text.lower(),
            right_text.lower(),
            self.taxonomy,
            whole_words=self.settings.whole_word_matching,
        )
        outcome = classify(matches, left.title, right.title)

        session = ComparisonSession(run_id=token.run_id, left=left, right=right, outcome=outcome)
        self._current = session
        self._active = None

        self.logger.info(
            LogEvent.COMPARISON_COMPLETED,
            run_id=token.run_id,
            similarities=len(outcome.similarities),
            differences=len(outcome.differences),
            left_chars=len(left_text),
            right_chars=len(right_text),
            duration=round(time.time() - start_time, 4),
        )
        return session

    def dismiss(self) -> None:
        """Close the result sheet: drop the displayed session and any run in flight."""
        if self._active is not None:
            self._active.cancel()
            self._active = None
        if self._current is not None:
            self.logger.info(LogEvent.COMPARISON_DISMISSED, run_id=self._current.run_id)
        self._current = None

    async def select(self, result: ComparisonResult) -> NavigationOutcome:
        """Deep-link a result of the displayed session into its document."""
        if self._current is None:
            raise ResourceNotFoundError("Comparison")
        outcome = self._current.outcome
        if result not in outcome.similarities + outcome.differences:
            raise InvalidInputError(
                f"Result for topic '{result.topic}' is not part of the displayed comparison",
                field="result",
                value=result.topic,
            )
        return await self.navigator.navigate(result, self._current.views)
