"""Deep links from a comparison result back into the source document."""
from typing import Mapping, Optional

from standards_compare.core.config import Settings
from standards_compare.core.errors import ResourceNotFoundError
from standards_compare.core.logging import LogEvent
from standards_compare.models.comparison import ComparisonResult, NavigationOutcome, Side
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services.base_service import BaseService
from standards_compare.services.document_view import DocumentView


class DeepLinkNavigator(BaseService):
    """
    Resolves a result to the first keyword of its topic and asks the
    document on the result's side to scroll to and mark it.

    Best effort: when the keyword is no longer on the rendered page the
    request is a silent no-op.
    """

    def __init__(self, taxonomy: Taxonomy, settings: Optional[Settings] = None):
        super().__init__(settings)
        self.taxonomy = taxonomy

    async def navigate(
        self,
        result: ComparisonResult,
        views: Mapping[Side, DocumentView],
    ) -> NavigationOutcome:
        if result.topic not in self.taxonomy:
            raise ResourceNotFoundError("Topic", result.topic)

        keyword = self.taxonomy.first_keyword(result.topic)
        view = views[result.side]

        try:
            highlight = await view.find_and_highlight(
                keyword, whole_words=self.settings.whole_word_matching
            )
        except Exception as exc:
            self.logger.warning(
                LogEvent.HIGHLIGHT_MISSED,
                document_id=view.document_id,
                keyword=keyword,
                error=str(exc),
            )
            highlight = None

        if highlight is None:
            self.logger.info(
                LogEvent.HIGHLIGHT_MISSED,
                document_id=view.document_id,
                topic=result.topic,
                keyword=keyword,
                page=view.current_page,
            )
            return NavigationOutcome(
                document_id=view.document_id,
                side=result.side,
                keyword=keyword,
                highlighted=False,
            )

        self.logger.info(
            LogEvent.HIGHLIGHT_APPLIED,
            document_id=view.document_id,
            topic=result.topic,
            keyword=keyword,
            page=highlight.page,
            offset=highlight.start,
        )
        return NavigationOutcome(
            document_id=view.document_id,
            side=result.side,
            keyword=keyword,
            highlighted=True,
            page=highlight.page,
            offset=highlight.start,
        )
