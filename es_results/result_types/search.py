"""
Search response mapping.
"""

import logging
import warnings
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from es_results.config.environments import get_feature_flag
from es_results.errors import FacetConstructionError, PathTraversalError
from es_results.result_types.facets import Facet, resolve_facet_builder
from es_results.result_types.hits import Hit
from es_results.result_types.results import ElasticResult, ID_KEY
from es_results.utils.decoding import identity
from es_results.utils.response_parser import (
    descend,
    extract_highlight,
    get_path,
    iter_hit_entries,
    parse_aggregations,
    with_metadata_id,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
F = TypeVar("F", bound=Facet)


class SearchResult(ElasticResult):
    """Result of a search request."""

    PATH_TO_RESULT = "hits/hits/_source"

    EXPLANATION_KEY = "_explanation"
    HIGHLIGHT_KEY = "highlight"
    FACETS_KEY = "facets"
    TYPE_KEY = "_type"
    PATH_TO_TOTAL = ("hits", "total")
    PATH_TO_MAX_SCORE = ("hits", "max_score")

    def get_source_as_object(self, decoder: Callable[[Any], T] = identity) -> Optional[T]:
        _warn_deprecated("get_source_as_object", "get_first_hit")
        return super().get_source_as_object(decoder)

    def get_source_as_object_list(self, decoder: Callable[[Any], T] = identity) -> List[T]:
        _warn_deprecated("get_source_as_object_list", "get_hits")
        return super().get_source_as_object_list(decoder)

    def get_hits(
        self,
        source_decoder: Callable[[Any], T] = identity,
        explanation_decoder: Optional[Callable[[Any], K]] = None,
    ) -> List[Hit[T, K]]:
        """
        Map every hit of the response.

        Args:
            source_decoder: Turns a hit's source object into the caller's type
            explanation_decoder: Turns _explanation into the caller's type;
                explanations are left out when omitted

        Returns:
            Hits in response order. Entries without a source are skipped.

        Raises:
            PathTraversalError: If the response has no hits container
        """
        return self._collect_hits(source_decoder, explanation_decoder, first_only=False)

    def get_first_hit(
        self,
        source_decoder: Callable[[Any], T] = identity,
        explanation_decoder: Optional[Callable[[Any], K]] = None,
    ) -> Optional[Hit[T, K]]:
        """Map only the first hit that has a source, or return None."""
        hits = self._collect_hits(source_decoder, explanation_decoder, first_only=True)
        return hits[0] if hits else None

    def _collect_hits(
        self,
        source_decoder: Callable[[Any], T],
        explanation_decoder: Optional[Callable[[Any], K]],
        first_only: bool,
    ) -> List[Hit[T, K]]:
        hits: List[Hit[T, K]] = []
        if self.json_object is None:
            return hits

        keys = self.get_keys()
        if keys is None:
            # Only subclasses that drop the result path end up here
            return hits

        source_key = keys[-1]
        container = descend(self.json_object, keys[:-1])
        for entry in iter_hit_entries(container):
            hit = self._extract_hit(entry, source_key, source_decoder, explanation_decoder)
            if hit is None:
                continue
            hits.append(hit)
            if first_only:
                break
        return hits

    def _extract_hit(
        self,
        entry: Any,
        source_key: str,
        source_decoder: Callable[[Any], T],
        explanation_decoder: Optional[Callable[[Any], K]],
    ) -> Optional[Hit[T, K]]:
        if not isinstance(entry, dict):
            logger.debug("Skipping hit entry of type %s", type(entry).__name__)
            return None

        source = entry.get(source_key)
        if source is None:
            logger.debug("Skipping hit %s without '%s'", entry.get(ID_KEY), source_key)
            return None

        return Hit.from_json(
            source=with_metadata_id(source, entry.get(ID_KEY), self.metadata_id_field),
            source_decoder=source_decoder,
            explanation=entry.get(self.EXPLANATION_KEY),
            explanation_decoder=explanation_decoder,
            highlight=extract_highlight(entry.get(self.HIGHLIGHT_KEY)),
        )

    def get_total(self) -> Optional[int]:
        """
        Total number of matching documents.

        Handles both the plain number and the ``{"value": n}`` object form.
        Returns None when the response does not carry a total.
        """
        total = get_path(self.json_object, self.PATH_TO_TOTAL)
        if isinstance(total, dict):
            total = total.get("value")
        return None if total is None else int(total)

    def get_max_score(self) -> Optional[float]:
        max_score = get_path(self.json_object, self.PATH_TO_MAX_SCORE)
        return None if max_score is None else float(max_score)

    def get_took(self) -> Optional[int]:
        took = self.get_value("took")
        return None if took is None else int(took)

    def is_timed_out(self) -> bool:
        return bool(self.get_value("timed_out"))

    def get_scroll_id(self) -> Optional[str]:
        return self.get_value("_scroll_id")

    def get_aggregations(self) -> Dict[str, Any]:
        return parse_aggregations(self.json_object)

    def get_facets(self, facet_type: Union[str, Type[F]]) -> List[F]:
        """
        Build every facet of the requested type.

        Facet entries are matched by comparing their _type with the
        requested type's discriminator, ignoring case.

        Args:
            facet_type: A facet class (see FACET_REGISTRY) or a discriminator

        Returns:
            Facets in response order; empty when the response has no facets

        Raises:
            FacetConstructionError: If the type cannot be resolved or a
                matching facet cannot be built
        """
        facets: List[F] = []
        facets_map = self.get_value(self.FACETS_KEY)
        if facets_map is None:
            return facets
        if not isinstance(facets_map, dict):
            raise PathTraversalError((self.FACETS_KEY,), self.FACETS_KEY, "Facets must be an object")

        discriminator = builder = None
        for name, facet_json in facets_map.items():
            if not isinstance(facet_json, dict):
                continue
            facet_kind = facet_json.get(self.TYPE_KEY)
            if facet_kind is None:
                continue
            # Resolved on the first typed entry only
            if discriminator is None:
                discriminator, builder = resolve_facet_builder(facet_type)
            if str(facet_kind).lower() != discriminator:
                continue

            try:
                facets.append(builder(name, facet_json))
            except Exception as e:
                raise FacetConstructionError(
                    f"Failed to build '{discriminator}' facet '{name}': {str(e)}"
                ) from e
            logger.debug("Built %s facet '%s'", discriminator, name)

        return facets


def _warn_deprecated(name: str, replacement: str) -> None:
    if get_feature_flag("deprecation_warnings"):
        warnings.warn(
            f"SearchResult.{name} is deprecated, use {replacement} instead",
            DeprecationWarning,
            stacklevel=3,
        )
