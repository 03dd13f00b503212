"""
Primitive search operations for Elasticsearch.
"""

import logging
from typing import Dict, Any, List, Optional

from elasticsearch import ApiError

from es_results.result_types.search import SearchResult
from es_results.utils.connection import get_elasticsearch_client
from es_results.utils.validation import validate_index_pattern

logger = logging.getLogger(__name__)


def execute_search(
    index_pattern: str,
    body: Dict[str, Any],
    scroll: Optional[str] = None,
) -> SearchResult:
    """
    Run a search and wrap the response for mapping.

    The body is sent as given; building it is up to the caller.

    Args:
        index_pattern: Index pattern to search (e.g., "logs-*")
        body: Complete search request body
        scroll: Scroll timeout for large result sets

    Returns:
        SearchResult over the response. Requests Elasticsearch rejects come
        back as a result with succeeded False and the error message set.

    Raises:
        ValueError: If the index pattern is invalid
        Exception: If the request could not be executed
    """
    validate_index_pattern(index_pattern)

    es = get_elasticsearch_client()
    params = {"index": index_pattern, "body": body}
    if scroll:
        params["scroll"] = scroll

    try:
        response = es.search(**params)
    except ApiError as e:
        logger.warning("Search on %s was rejected: %s", index_pattern, e)
        return SearchResult.from_response(e.body, status=e.meta.status)
    except Exception as e:
        raise Exception(f"Elasticsearch query failed: {str(e)}") from e

    return SearchResult.from_response(response)


def scroll_search(
    scroll_id: str,
    scroll: str = "1m",
) -> SearchResult:
    """
    Continue scrolling through search results.

    Must be called after an initial search with the scroll parameter.

    Args:
        scroll_id: Scroll ID from previous search
        scroll: Scroll timeout (e.g., "1m", "30s")

    Returns:
        SearchResult with the next batch of hits

    Raises:
        Exception: If scroll fails
    """
    es = get_elasticsearch_client()

    try:
        response = es.scroll(
            scroll_id=scroll_id,
            scroll=scroll,
        )
    except ApiError as e:
        logger.warning("Scroll was rejected: %s", e)
        return SearchResult.from_response(e.body, status=e.meta.status)
    except Exception as e:
        raise Exception(f"Elasticsearch scroll failed: {str(e)}") from e

    return SearchResult.from_response(response)


def clear_scroll(scroll_id: str) -> None:
    """
    Clear a scroll context to free resources.

    Best effort: failures are logged and otherwise ignored, the context
    expires on its own.
    """
    es = get_elasticsearch_client()

    try:
        es.clear_scroll(scroll_id=scroll_id)
    except Exception as e:
        logger.debug("Could not clear scroll %s: %s", scroll_id, e)


def multi_search(
    searches: List[Dict[str, Any]],
    index: Optional[str] = None,
) -> List[SearchResult]:
    """
    Execute multiple searches in a single request.

    Args:
        searches: Search bodies, each optionally carrying an "index" key
        index: Default index for searches without one

    Returns:
        One SearchResult per search, in request order. Each carries the
        status Elasticsearch reported for that search.

    Raises:
        Exception: If multi-search fails
    """
    es = get_elasticsearch_client()

    body = []
    for search in searches:
        header = {}
        target = search.get("index", index)
        if target:
            validate_index_pattern(target)
            header["index"] = target
        body.append(header)
        body.append({k: v for k, v in search.items() if k != "index"})

    try:
        response = es.msearch(body=body)
    except Exception as e:
        raise Exception(f"Multi-search failed: {str(e)}") from e

    return [
        SearchResult.from_response(item, status=item.get("status"))
        for item in response.get("responses", [])
    ]
