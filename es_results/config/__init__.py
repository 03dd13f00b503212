"""
Configuration management for Elasticsearch result mapping.
"""

from .environments import (
    get_current_environment,
    get_environment_config,
    get_elasticsearch_config,
    get_results_config,
    get_logging_config,
    get_feature_flag,
)

__all__ = [
    "get_current_environment",
    "get_environment_config",
    "get_elasticsearch_config",
    "get_results_config",
    "get_logging_config",
    "get_feature_flag",
]
