"""
Unit tests for search hit mapping.
"""

import copy
import pytest
from dataclasses import dataclass
from typing import List, Optional

from es_results import SearchResult, Hit, PathTraversalError
from es_results.utils.decoding import as_decoder


@dataclass
class Article:
    name: str
    tags: Optional[List[str]] = None
    es_metadata_id: Optional[str] = None


@dataclass
class Explanation:
    value: float
    description: str


class TestGetHits:
    """Test cases for SearchResult.get_hits."""

    def test_skips_hits_without_source(self, search_response):
        """Only entries with a source become hits, in response order."""
        result = SearchResult.from_response(search_response)

        hits = result.get_hits()

        assert len(hits) == 2
        assert hits[0].source["name"] == "x"
        assert hits[1].source["name"] == "y"

    def test_decodes_source_into_dataclass(self, search_response):
        """The source decoder maps each source into the caller's type."""
        result = SearchResult.from_response(search_response)

        hits = result.get_hits(as_decoder(Article))

        assert hits[0].source == Article(name="x", tags=["a"], es_metadata_id="42")
        assert hits[1].source == Article(name="y", es_metadata_id="44")

    def test_injects_id_into_source(self):
        """The hit _id shows up under the metadata id field."""
        result = SearchResult.from_response({
            "hits": {"hits": [{"_id": "42", "_source": {"name": "x"}}]}
        })

        hit = result.get_first_hit()

        assert hit.source == {"name": "x", "es_metadata_id": "42"}

    def test_id_injection_leaves_document_untouched(self, search_response):
        """Mapping hits does not modify the parsed response."""
        pristine = copy.deepcopy(search_response)
        result = SearchResult.from_response(search_response)

        result.get_hits()
        result.get_hits()

        assert result.json_object == pristine
        assert "es_metadata_id" not in search_response["hits"]["hits"][0]["_source"]

    def test_hit_without_id_keeps_source(self):
        """Sources of hits without _id are passed through as-is."""
        result = SearchResult.from_response({"hits": {"hits": [{"_source": {"a": 1}}]}})

        assert result.get_hits()[0].source == {"a": 1}

    def test_metadata_id_field_is_configurable(self, patch_environment, search_response):
        """The configured field name is used for the injected id."""
        result = SearchResult.from_response(search_response)

        assert result.get_hits()[0].source["doc_id"] == "42"

    def test_explanation_left_out_without_decoder(self, search_response):
        """Explanations are only mapped when a decoder is given."""
        result = SearchResult.from_response(search_response)

        assert result.get_hits()[0].explanation is None

    def test_explanation_decoded(self, search_response):
        """The explanation decoder maps _explanation."""
        result = SearchResult.from_response(search_response)

        hits = result.get_hits(explanation_decoder=as_decoder(Explanation))

        assert hits[0].explanation == Explanation(value=1.5, description="weight(name:x)")
        assert hits[1].explanation is None

    def test_highlight_mapped(self, search_response):
        """Highlights map field names to ordered fragments."""
        result = SearchResult.from_response(search_response)

        hits = result.get_hits()

        assert hits[0].highlight == {"name": ["<em>x</em>"], "body": ["a", "b"]}
        assert hits[1].highlight is None

    def test_single_object_at_hits_path(self):
        """A single object instead of an array counts as one hit."""
        result = SearchResult.from_response({
            "hits": {"hits": {"_id": "1", "_source": {"a": 1}}}
        })

        hits = result.get_hits()

        assert len(hits) == 1
        assert hits[0].source == {"a": 1, "es_metadata_id": "1"}

    def test_empty_hits(self):
        """An empty hits array gives no hits."""
        result = SearchResult.from_response({"hits": {"total": 0, "hits": []}})

        assert result.get_hits() == []
        assert result.get_first_hit() is None

    def test_no_document(self):
        """A result without a parsed document gives no hits."""
        assert SearchResult().get_hits() == []

    def test_non_object_entries_skipped(self):
        """Entries that are not objects never become hits."""
        result = SearchResult.from_response({
            "hits": {"hits": ["oops", None, {"_id": "1", "_source": {"a": 1}}]}
        })

        assert len(result.get_hits()) == 1

    def test_missing_hits_container_raises(self):
        """A response without hits does not have the search shape."""
        result = SearchResult.from_response({"took": 1})

        with pytest.raises(PathTraversalError):
            result.get_hits()

    def test_non_object_intermediate_raises(self):
        """Crossing a non-object on the way to the hits is a structural error."""
        result = SearchResult.from_response({"hits": ["not", "an", "object"]})

        with pytest.raises(PathTraversalError, match="hits"):
            result.get_hits()

    def test_hits_are_immutable(self, search_response):
        """Hits cannot be modified after construction."""
        hit = SearchResult.from_response(search_response).get_hits()[0]

        with pytest.raises(AttributeError):
            hit.source = {}

    def test_custom_result_path(self):
        """Subclasses may point the hit walk somewhere else."""

        class SuggestResult(SearchResult):
            PATH_TO_RESULT = "suggest/options/text"

        result = SuggestResult.from_response({
            "suggest": {"options": [{"text": "foo"}, {"score": 1}, {"text": "bar"}]}
        })

        assert [hit.source for hit in result.get_hits()] == ["foo", "bar"]


class TestGetFirstHit:
    """Test cases for SearchResult.get_first_hit."""

    def test_matches_first_of_get_hits(self, search_response):
        """The first hit equals the head of the full hit list."""
        result = SearchResult.from_response(search_response)

        assert result.get_first_hit() == result.get_hits()[0]

    def test_skips_leading_hits_without_source(self):
        """First-hit mode keeps going until a hit has a source."""
        result = SearchResult.from_response({
            "hits": {"hits": [{"_id": "1"}, {"_id": "2", "_source": {"a": 2}}]}
        })

        hit = result.get_first_hit()

        assert hit == Hit(source={"a": 2, "es_metadata_id": "2"})

    def test_stops_after_first_hit(self):
        """Later entries are not decoded once a hit was produced."""
        decoded = []

        def decoder(source):
            decoded.append(source["a"])
            return source

        result = SearchResult.from_response({
            "hits": {"hits": [{"_source": {"a": 1}}, {"_source": {"a": 2}}]}
        })

        result.get_first_hit(decoder)

        assert decoded == [1]


class TestTotalAndMaxScore:
    """Test cases for total and max score accessors."""

    def test_total(self):
        assert SearchResult.from_response({"hits": {"total": 10}}).get_total() == 10

    def test_total_object_form(self):
        """Newer servers report the total as an object."""
        result = SearchResult.from_response({"hits": {"total": {"value": 100, "relation": "eq"}}})

        assert result.get_total() == 100

    def test_total_absent(self):
        assert SearchResult.from_response({"took": 1}).get_total() is None
        assert SearchResult.from_response({"hits": {}}).get_total() is None
        assert SearchResult().get_total() is None

    def test_max_score(self):
        assert SearchResult.from_response({"hits": {"max_score": 1.5}}).get_max_score() == 1.5

    def test_max_score_null(self):
        """Sorted searches report a null max score."""
        assert SearchResult.from_response({"hits": {"max_score": None}}).get_max_score() is None

    def test_total_on_malformed_hits_raises(self):
        with pytest.raises(PathTraversalError):
            SearchResult.from_response({"hits": [1, 2]}).get_total()

    def test_reads_document_on_each_call(self):
        """Accessors are not cached."""
        result = SearchResult.from_response({"hits": {"total": 1}})
        result.json_object["hits"]["total"] = 2

        assert result.get_total() == 2


class TestResponseMetadata:
    """Test cases for the other response accessors."""

    def test_took_and_timed_out(self, search_response):
        result = SearchResult.from_response(search_response)

        assert result.get_took() == 5
        assert result.is_timed_out() is False

    def test_scroll_id(self):
        result = SearchResult.from_response({"_scroll_id": "abc", "hits": {"hits": []}})

        assert result.get_scroll_id() == "abc"

    def test_aggregations(self):
        aggs = {"pods": {"buckets": [{"key": "pod-1", "doc_count": 3}]}}
        result = SearchResult.from_response({"hits": {"hits": []}, "aggregations": aggs})

        assert result.get_aggregations() == aggs
        assert SearchResult.from_response({"hits": {"hits": []}}).get_aggregations() == {}


class TestDeprecatedSourceAccessors:
    """Test cases for the source accessors kept on SearchResult."""

    def test_source_list_warns(self, search_response):
        result = SearchResult.from_response(search_response)

        with pytest.warns(DeprecationWarning, match="get_hits"):
            sources = result.get_source_as_object_list()

        assert [source["es_metadata_id"] for source in sources] == ["42", "44"]

    def test_source_object_warns(self, search_response):
        result = SearchResult.from_response(search_response)

        with pytest.warns(DeprecationWarning, match="get_first_hit"):
            source = result.get_source_as_object(as_decoder(Article))

        assert source.name == "x"
