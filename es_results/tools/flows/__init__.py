"""
Flow tools combining search execution and result mapping.
"""

from .hit_summary import hit_to_dict, summarize_hits, summarize_facets

__all__ = [
    "hit_to_dict",
    "summarize_hits",
    "summarize_facets",
]
