"""
Pytest configuration and fixtures for result mapping tests.
"""

import pytest
import os
import sys
from unittest.mock import Mock, patch

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)


@pytest.fixture
def search_response():
    """Search response with highlights, an explanation and a hit without source."""
    return {
        "took": 5,
        "timed_out": False,
        "hits": {
            "total": 3,
            "max_score": 1.5,
            "hits": [
                {
                    "_index": "articles",
                    "_type": "article",
                    "_id": "42",
                    "_score": 1.5,
                    "_source": {"name": "x", "tags": ["a"]},
                    "_explanation": {"value": 1.5, "description": "weight(name:x)"},
                    "highlight": {"name": ["<em>x</em>"], "body": ["a", "b"]},
                },
                {
                    "_index": "articles",
                    "_type": "article",
                    "_id": "43",
                    "_score": 1.0,
                },
                {
                    "_index": "articles",
                    "_type": "article",
                    "_id": "44",
                    "_score": 0.5,
                    "_source": {"name": "y"},
                },
            ],
        },
    }


@pytest.fixture
def facet_response():
    """Search response carrying facets of several types."""
    return {
        "took": 2,
        "timed_out": False,
        "hits": {"total": 10, "max_score": 1.0, "hits": []},
        "facets": {
            "tagcloud": {
                "_type": "terms",
                "missing": 1,
                "total": 9,
                "other": 2,
                "terms": [
                    {"term": "python", "count": 4},
                    {"term": "java", "count": 3},
                ],
            },
            "price_ranges": {
                "_type": "range",
                "ranges": [
                    {"to": 50.0, "count": 4, "min": 5.0, "max": 45.0, "total_count": 4, "total": 90.0, "mean": 22.5},
                    {"from": 50.0, "count": 6, "min": 55.0, "max": 99.0, "total_count": 6, "total": 450.0, "mean": 75.0},
                ],
            },
            "authors": {
                "_type": "TERMS",
                "missing": 0,
                "total": 10,
                "other": 0,
                "terms": [{"term": "kimchy", "count": 10}],
            },
            "published": {
                "_type": "filter",
                "count": 7,
            },
        },
    }


@pytest.fixture
def mock_elasticsearch(search_response):
    """Mock Elasticsearch client for testing."""
    mock_es = Mock()
    mock_es.search.return_value = search_response
    mock_es.scroll.return_value = {
        "_scroll_id": "scroll-2",
        "took": 1,
        "timed_out": False,
        "hits": {"total": 3, "max_score": 1.0, "hits": []},
    }
    return mock_es


@pytest.fixture
def mock_es_client(mock_elasticsearch):
    """Patch client creation in the search primitives."""
    with patch('es_results.tools.primitives.search.get_elasticsearch_client', return_value=mock_elasticsearch):
        yield mock_elasticsearch


@pytest.fixture
def test_environment_config():
    """Test environment configuration."""
    return {
        "name": "test",
        "elasticsearch": {
            "url": "http://localhost:9200",
            "username": None,
            "password": None,
            "api_key": None,
            "timeout_ms": 5000,
            "verify_certs": False,
        },
        "results": {
            "metadata_id_field": "doc_id",
            "max_hits": 2,
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(message)s",
        },
        "features": {
            "deprecation_warnings": True,
        },
    }


@pytest.fixture
def patch_environment(test_environment_config):
    """Patch environment configuration for testing."""
    with patch('es_results.config.environments.get_environment_config', return_value=test_environment_config), \
         patch('es_results.config.environments.get_current_environment', return_value='test'):
        yield
