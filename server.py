"""
FastMCP Elasticsearch result server.

Exposes search tools whose responses are mapped into typed hits and facets:
- health: Check Elasticsearch connectivity
- search_hits: Run a search and return its mapped hits
- search_facets: Run a search and return its facets by type
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastmcp import FastMCP

from es_results import __version__
from es_results.config import get_current_environment, get_logging_config
from es_results.tools.flows import summarize_hits, summarize_facets
from es_results.tools.primitives import execute_search
from es_results.utils import check_connection

logging_config = get_logging_config()
logging.basicConfig(level=logging_config["level"], format=logging_config["format"])

mcp = FastMCP("es-results")


@mcp.tool()
def health() -> Dict[str, Any]:
    """
    Check Elasticsearch connectivity and configuration.
    """
    env = get_current_environment()
    connected = check_connection()

    return {
        "overall_status": "healthy" if connected else "degraded",
        "environment": env,
        "services": {
            "elasticsearch": {
                "service": "elasticsearch",
                "connected": connected,
                "version": __version__,
            }
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@mcp.tool()
def search_hits(
    index_pattern: str,
    body: Dict[str, Any],
    limit: Optional[int] = None,
    first_only: bool = False,
    scroll: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Run a search and return its hits.

    Each hit carries its source (with the document id under the metadata
    id field), its explanation when "explain" was requested and its
    highlight fragments when highlighting was requested.

    Args:
        index_pattern: Index pattern (e.g., "logs-*")
        body: Complete search request body
        limit: Maximum number of hits to return
        first_only: Only return the first hit
        scroll: Scroll timeout to keep the search context open

    Returns:
        Dictionary with total, max_score and hits
    """
    result = execute_search(index_pattern=index_pattern, body=body, scroll=scroll)
    return summarize_hits(result, limit=limit, first_only=first_only)


@mcp.tool()
def search_facets(
    index_pattern: str,
    body: Dict[str, Any],
    facet_types: List[str],
) -> Dict[str, Any]:
    """
    Run a faceted search and return the facets of the given types.

    Args:
        index_pattern: Index pattern
        body: Search request body with a "facets" section
        facet_types: Facet types to extract (terms, range, histogram,
            date_histogram, statistical, filter, query, terms_stats,
            geo_distance)

    Returns:
        Dictionary with the facets per type
    """
    result = execute_search(index_pattern=index_pattern, body=body)
    if not result.succeeded:
        return {"succeeded": False, "status": result.response_code, "error": result.error_message}

    return {
        "succeeded": True,
        "total": result.get_total(),
        "facets": summarize_facets(result, facet_types),
    }


if __name__ == "__main__":
    mcp.run()
