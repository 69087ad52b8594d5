"""
Data models shared by services and the API
"""
from standards_compare.models.comparison import (
    ComparisonOutcome,
    ComparisonResult,
    ComparisonSummary,
    NavigationOutcome,
    ResultKind,
    Side,
    SummaryRow,
    SummarySection,
    TopicMatch,
)
from standards_compare.models.standard import ALL_STANDARDS, Standard, get_standard
from standards_compare.models.taxonomy import Taxonomy, TaxonomyEntry

__all__ = [
    'ComparisonOutcome',
    'ComparisonResult',
    'ComparisonSummary',
    'NavigationOutcome',
    'ResultKind',
    'Side',
    'SummaryRow',
    'SummarySection',
    'TopicMatch',
    'ALL_STANDARDS',
    'Standard',
    'get_standard',
    'Taxonomy',
    'TaxonomyEntry',
]
