"""
Response parsing utilities for Elasticsearch.

Helpers that walk a parsed JSON response along a path of keys. Lookups
distinguish between data that is simply missing (returned as ``None``) and
a response whose shape does not match the path at all (raised as
``PathTraversalError``).
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from es_results.errors import PathTraversalError


def get_path(document: Optional[Dict[str, Any]], path: Sequence[str]) -> Optional[Any]:
    """
    Look up a value by following a path of keys.

    Args:
        document: Parsed response (may be None)
        path: Keys to follow, outermost first

    Returns:
        The value at the end of the path, or None if any key is missing

    Raises:
        PathTraversalError: If a key has to be read from a non-object
    """
    value: Any = document
    for segment in path:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise PathTraversalError(path, segment)
        value = value.get(segment)
    return value


def descend(document: Dict[str, Any], keys: Sequence[str]) -> Any:
    """
    Strictly resolve a path of keys.

    Unlike get_path, every segment must be present.

    Args:
        document: Parsed response
        keys: Keys to follow, outermost first

    Returns:
        The value stored under the last key

    Raises:
        PathTraversalError: If a segment is missing or not an object
    """
    value: Any = document
    for segment in keys:
        if not isinstance(value, dict):
            raise PathTraversalError(keys, segment)
        if value.get(segment) is None:
            raise PathTraversalError(
                keys, segment, f"Missing '{segment}' in path {'/'.join(keys)}"
            )
        value = value[segment]
    return value


def iter_hit_entries(container: Any) -> Iterable[Any]:
    """
    Iterate over the entries of a hits container.

    A single object counts as one entry, an array yields each element and
    anything else yields nothing.
    """
    if isinstance(container, dict):
        return [container]
    if isinstance(container, list):
        return container
    return []


def with_metadata_id(source: Any, hit_id: Any, field: str) -> Any:
    """
    Return the source with the hit id added under the metadata field.

    The given source is never modified; a new dict is returned instead.
    Non-object sources and hits without an id come back unchanged.
    """
    if hit_id is None or not isinstance(source, dict):
        return source
    augmented = dict(source)
    augmented[field] = hit_id
    return augmented


def extract_highlight(highlight: Optional[Dict[str, Any]]) -> Optional[Dict[str, List[str]]]:
    """
    Map a highlight object to field name -> list of fragments.

    Args:
        highlight: The hit's highlight object, or None

    Returns:
        Fragments per field in response order, or None when the hit carried
        no highlight at all
    """
    if highlight is None:
        return None
    if not isinstance(highlight, dict):
        raise PathTraversalError(("highlight",), "highlight", "Highlight must be an object")

    fragments: Dict[str, List[str]] = {}
    for field_name, values in highlight.items():
        if not isinstance(values, list):
            values = [values]
        # null fragments carry no text
        fragments[field_name] = [str(value) for value in values if value is not None]
    return fragments


def parse_aggregations(response: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Extract aggregations from response.

    Args:
        response: Elasticsearch response

    Returns:
        Aggregations dict
    """
    if not response:
        return {}
    return response.get("aggregations") or {}
