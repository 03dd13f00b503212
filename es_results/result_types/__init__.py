"""
Result type definitions for Elasticsearch responses.
"""

from .hits import Hit
from .results import ElasticResult
from .search import SearchResult
from .facets import (
    FACET_REGISTRY,
    register_facet,
    resolve_facet_builder,
    Facet,
    TermsFacet,
    TermEntry,
    RangeFacet,
    RangeEntry,
    GeoDistanceFacet,
    HistogramFacet,
    HistogramEntry,
    DateHistogramFacet,
    StatisticalFacet,
    FilterFacet,
    QueryFacet,
    TermsStatsFacet,
    TermStatsEntry,
)

__all__ = [
    # Results
    "ElasticResult",
    "SearchResult",
    "Hit",
    # Facet registry
    "FACET_REGISTRY",
    "register_facet",
    "resolve_facet_builder",
    # Facets
    "Facet",
    "TermsFacet",
    "TermEntry",
    "RangeFacet",
    "RangeEntry",
    "GeoDistanceFacet",
    "HistogramFacet",
    "HistogramEntry",
    "DateHistogramFacet",
    "StatisticalFacet",
    "FilterFacet",
    "QueryFacet",
    "TermsStatsFacet",
    "TermStatsEntry",
]
