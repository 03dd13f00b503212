"""
Flows turning mapped search results into JSON-ready summaries.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from es_results.config.environments import get_results_config
from es_results.result_types.hits import Hit
from es_results.result_types.search import SearchResult
from es_results.utils.decoding import identity
from es_results.utils.validation import clamp_value


def hit_to_dict(hit: Hit) -> Dict[str, Any]:
    """Convert a hit with plain JSON source and explanation to a dict."""
    summary: Dict[str, Any] = {"source": hit.source}
    if hit.explanation is not None:
        summary["explanation"] = hit.explanation
    if hit.highlight is not None:
        summary["highlight"] = hit.highlight
    return summary


def summarize_hits(
    result: SearchResult,
    limit: Optional[int] = None,
    first_only: bool = False,
) -> Dict[str, Any]:
    """
    Summarize the hits of a search result.
    
    Args:
        result: Search result to summarize
        limit: Maximum number of hits to include (1-max_hits)
        first_only: Only include the first hit
        
    Returns:
        Dictionary with status, total, max_score and hits
    """
    summary: Dict[str, Any] = {
        "succeeded": result.succeeded,
        "status": result.response_code,
    }
    if not result.succeeded:
        summary["error"] = result.error_message
        return summary

    if first_only:
        first = result.get_first_hit(identity, identity)
        hits = [first] if first is not None else []
    else:
        hits = result.get_hits(identity, identity)

    max_hits = get_results_config()["max_hits"]
    limit = clamp_value(limit if limit is not None else max_hits, min_value=1, max_value=max_hits)

    summary.update({
        "took": result.get_took(),
        "timed_out": result.is_timed_out(),
        "total": result.get_total(),
        "max_score": result.get_max_score(),
        "returned": min(len(hits), limit),
        "hits": [hit_to_dict(hit) for hit in hits[:limit]],
    })
    if result.get_scroll_id():
        summary["scroll_id"] = result.get_scroll_id()
    return summary


def summarize_facets(result: SearchResult, facet_types: List[str]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Build the requested facet types and convert them to dicts.
    
    Args:
        result: Search result carrying a facets section
        facet_types: Discriminators to extract (e.g., ["terms", "range"])
        
    Returns:
        Facets per requested type, empty lists for types not present
        
    Raises:
        FacetConstructionError: If a type is unknown or a facet is malformed
    """
    return {
        facet_type: [asdict(facet) for facet in result.get_facets(facet_type)]
        for facet_type in facet_types
    }
