"""
Typed mapping of Elasticsearch search responses.
"""

from .errors import ResultError, PathTraversalError, FacetConstructionError
from .result_types import (
    ElasticResult,
    SearchResult,
    Hit,
    Facet,
    FACET_REGISTRY,
    register_facet,
)

__version__ = "1.0.0"

__all__ = [
    "ElasticResult",
    "SearchResult",
    "Hit",
    "Facet",
    "FACET_REGISTRY",
    "register_facet",
    "ResultError",
    "PathTraversalError",
    "FacetConstructionError",
]
