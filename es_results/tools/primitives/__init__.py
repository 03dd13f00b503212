"""
Primitive tools for low-level Elasticsearch operations.
"""

from .search import execute_search, scroll_search, clear_scroll, multi_search

__all__ = [
    "execute_search",
    "scroll_search",
    "clear_scroll",
    "multi_search",
]
