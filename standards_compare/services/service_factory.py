"""
Service factory - the composition root that builds and wires every service

One container per application instance; its lifecycle is the app's.
"""
from dataclasses import dataclass
from typing import Optional

from standards_compare.core.config import Settings, get_settings
from standards_compare.core.logging import LogEvent, get_logger
from standards_compare.models.taxonomy import Taxonomy
from standards_compare.services.comparison_service import ComparisonService
from standards_compare.services.document_view import DocumentRegistry
from standards_compare.services.navigator import DeepLinkNavigator
from standards_compare.services.text_extractor import TextExtractor
from standards_compare.tools.readers import ReadersService

logger = get_logger(__name__)


@dataclass
class ServiceContainer:
    settings: Settings
    taxonomy: Taxonomy
    documents: DocumentRegistry
    comparisons: ComparisonService


class ServiceFactory:
    """Builds the service graph for one application instance."""

    @staticmethod
    def build(settings: Optional[Settings] = None, taxonomy: Optional[Taxonomy] = None) -> ServiceContainer:
        """
        Wire all services.

        The taxonomy is loaded here so a misconfigured file stops the
        application from starting (TaxonomyConfigurationError).
        """
        settings = settings or get_settings()
        if taxonomy is None:
            taxonomy = Taxonomy.load(settings.taxonomy_path)
        logger.info(
            LogEvent.TAXONOMY_LOADED,
            topics=len(taxonomy),
            source=settings.taxonomy_path or "bundled",
            match_mode=settings.keyword_match_mode.value,
        )

        documents = DocumentRegistry(settings, readers=ReadersService())
        comparisons = ComparisonService(
            registry=documents,
            taxonomy=taxonomy,
            extractor=TextExtractor(settings),
            navigator=DeepLinkNavigator(taxonomy, settings),
            settings=settings,
        )
        return ServiceContainer(
            settings=settings,
            taxonomy=taxonomy,
            documents=documents,
            comparisons=comparisons,
        )
