"""
Input validation utilities.
"""

import re
from typing import Any, Sequence


def validate_index_pattern(pattern: str) -> None:
    """
    Validate an Elasticsearch index pattern.
    
    Args:
        pattern: Index pattern to validate
        
    Raises:
        ValueError: If pattern is invalid
    """
    if not pattern:
        raise ValueError("Index pattern cannot be empty")
        
    if pattern.startswith("_"):
        raise ValueError("Index pattern cannot start with underscore")
        
    # Comma separated patterns are allowed
    invalid_chars = re.findall(r'[^a-zA-Z0-9\-_.*,]', pattern)
    if invalid_chars:
        raise ValueError(f"Invalid characters in index pattern: {invalid_chars}")


def validate_result_path(keys: Sequence[str]) -> None:
    """
    Validate the key segments of a path to result.
    
    Raises:
        ValueError: If the path is empty or has blank segments
    """
    if not keys:
        raise ValueError("Path to result cannot be empty")
    if any(not key for key in keys):
        raise ValueError(f"Path to result has an empty segment: {'/'.join(keys)}")


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.
    
    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value
        
    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
