"""
Environment configuration management.
"""

import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv


# Pick up a local .env before the defaults below read the environment
load_dotenv()


# Single environment configuration - reads directly from env vars
DEFAULT_CONFIG = {
    "name": "default",
    "elasticsearch": {
        "url": os.getenv("ELASTIC_URL", os.getenv("ELASTICSEARCH_URL", "http://localhost:9200")),
        "username": os.getenv("ELASTIC_USERNAME", os.getenv("ELASTICSEARCH_USERNAME")),
        "password": os.getenv("ELASTIC_PASSWORD", os.getenv("ELASTICSEARCH_PASSWORD")),
        "api_key": os.getenv("ELASTIC_API_KEY", os.getenv("ELASTICSEARCH_API_KEY")),
        "timeout_ms": int(os.getenv("ELASTIC_TIMEOUT", os.getenv("ELASTICSEARCH_TIMEOUT", "30000"))),
        "verify_certs": True,
        "ca_certs": os.getenv("ELASTIC_CA_CERTS"),
    },
    "results": {
        # Field the hit _id is copied into before the source is decoded
        "metadata_id_field": os.getenv("ELASTIC_METADATA_ID_FIELD", "es_metadata_id"),
        "max_hits": 10000,
    },
    "logging": {
        "level": os.getenv("ELASTIC_LOG_LEVEL", "INFO"),
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    },
    "features": {
        "deprecation_warnings": True,
    },
}


def get_current_environment() -> str:
    """
    Get the current environment name.
    
    Returns:
        Always returns 'default' since we use a single environment
    """
    return "default"


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get configuration for the environment.
    
    Args:
        environment: Ignored (kept for compatibility)
        
    Returns:
        Environment configuration dictionary
    """
    return DEFAULT_CONFIG


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch connection configuration.
    """
    return get_environment_config(environment)["elasticsearch"]


def get_results_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get result mapping configuration.
    
    Args:
        environment: Ignored (kept for compatibility)
        
    Returns:
        Dictionary with the metadata id field name and hit limits
    """
    return get_environment_config(environment)["results"]


def get_logging_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """Get logging level and format."""
    return get_environment_config(environment)["logging"]


def get_feature_flag(feature: str, environment: Optional[str] = None) -> bool:
    """
    Check if a feature is enabled.
    
    Args:
        feature: Feature name
        environment: Ignored (kept for compatibility)
        
    Returns:
        True if feature is enabled
    """
    return get_environment_config(environment).get("features", {}).get(feature, False)
