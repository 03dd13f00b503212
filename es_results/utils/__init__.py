"""
Utility functions for Elasticsearch result mapping.
"""

from .connection import get_elasticsearch_client, check_connection
from .validation import (
    validate_index_pattern,
    validate_result_path,
    clamp_value,
)
from .response_parser import (
    get_path,
    descend,
    iter_hit_entries,
    with_metadata_id,
    extract_highlight,
    parse_aggregations,
)
from .decoding import identity, as_decoder, decode_dataclass

__all__ = [
    # Connection
    "get_elasticsearch_client",
    "check_connection",
    # Validation
    "validate_index_pattern",
    "validate_result_path",
    "clamp_value",
    # Response parsing
    "get_path",
    "descend",
    "iter_hit_entries",
    "with_metadata_id",
    "extract_highlight",
    "parse_aggregations",
    # Decoding
    "identity",
    "as_decoder",
    "decode_dataclass",
]
