"""
Facet type definitions.

Each facet type carries the ``_type`` discriminator Elasticsearch writes into
its facet results and registers a builder taking ``(facet name, facet JSON)``.
Search results look builders up in FACET_REGISTRY instead of introspecting
the requested type.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type, Union

from es_results.errors import FacetConstructionError


FacetBuilder = Callable[[str, Dict[str, Any]], "Facet"]

# Discriminator (lower case) -> builder
FACET_REGISTRY: Dict[str, FacetBuilder] = {}


def register_facet(cls: Type["Facet"]) -> Type["Facet"]:
    """Class decorator registering a facet type under its TYPE."""
    FACET_REGISTRY[cls.TYPE.lower()] = cls.from_json
    return cls


def resolve_facet_builder(facet_type: Union[str, Type["Facet"]]) -> Tuple[str, FacetBuilder]:
    """
    Find the discriminator and builder for a requested facet type.

    Args:
        facet_type: A facet class or its discriminator string

    Returns:
        Tuple of lower-cased discriminator and builder

    Raises:
        FacetConstructionError: If the type has no discriminator or no builder
    """
    if isinstance(facet_type, str):
        discriminator = facet_type
    else:
        discriminator = getattr(facet_type, "TYPE", None)
    if not isinstance(discriminator, str) or not discriminator:
        raise FacetConstructionError(f"{facet_type!r} does not declare a facet TYPE")

    key = discriminator.lower()
    builder = FACET_REGISTRY.get(key)
    if builder is None and isinstance(facet_type, type):
        # Unregistered subclasses can still build themselves
        builder = getattr(facet_type, "from_json", None)
    if builder is None:
        raise FacetConstructionError(f"No facet builder registered for type '{discriminator}'")
    return key, builder


def _number(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else float(value)


@dataclass
class Facet:
    """Base class for named facet results."""
    TYPE: ClassVar[str]

    name: str

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "Facet":
        raise NotImplementedError(f"{cls.__name__} cannot be built from JSON")


@dataclass
class TermEntry:
    term: Any
    count: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TermEntry":
        return cls(term=data["term"], count=int(data["count"]))


@register_facet
@dataclass
class TermsFacet(Facet):
    """Most frequent terms of a field."""
    TYPE: ClassVar[str] = "terms"

    missing: int = 0
    total: int = 0
    other: int = 0
    terms: List[TermEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "TermsFacet":
        return cls(
            name=name,
            missing=int(data.get("missing", 0)),
            total=int(data.get("total", 0)),
            other=int(data.get("other", 0)),
            terms=[TermEntry.from_dict(entry) for entry in data.get("terms", [])],
        )


@dataclass
class RangeEntry:
    from_: Optional[float]
    to: Optional[float]
    count: int
    total_count: Optional[int] = None
    total: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RangeEntry":
        total_count = data.get("total_count")
        return cls(
            from_=_number(data, "from"),
            to=_number(data, "to"),
            count=int(data.get("count", 0)),
            total_count=None if total_count is None else int(total_count),
            total=_number(data, "total"),
            min=_number(data, "min"),
            max=_number(data, "max"),
            mean=_number(data, "mean"),
        )


@register_facet
@dataclass
class RangeFacet(Facet):
    """Document counts per numeric range."""
    TYPE: ClassVar[str] = "range"

    ranges: List[RangeEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "RangeFacet":
        return cls(name=name, ranges=[RangeEntry.from_dict(entry) for entry in data.get("ranges", [])])


@register_facet
@dataclass
class GeoDistanceFacet(RangeFacet):
    """Document counts per distance range from an origin point."""
    TYPE: ClassVar[str] = "geo_distance"


@dataclass
class HistogramEntry:
    key: float
    count: int
    total_count: Optional[int] = None
    total: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], key_field: str = "key") -> "HistogramEntry":
        total_count = data.get("total_count")
        return cls(
            key=data[key_field],
            count=int(data.get("count", 0)),
            total_count=None if total_count is None else int(total_count),
            total=_number(data, "total"),
            min=_number(data, "min"),
            max=_number(data, "max"),
            mean=_number(data, "mean"),
        )


@register_facet
@dataclass
class HistogramFacet(Facet):
    """Document counts per numeric interval."""
    TYPE: ClassVar[str] = "histogram"

    entries: List[HistogramEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "HistogramFacet":
        return cls(name=name, entries=[HistogramEntry.from_dict(entry) for entry in data.get("entries", [])])


@register_facet
@dataclass
class DateHistogramFacet(Facet):
    """Document counts per time interval; keys are epoch milliseconds."""
    TYPE: ClassVar[str] = "date_histogram"

    entries: List[HistogramEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "DateHistogramFacet":
        return cls(
            name=name,
            entries=[HistogramEntry.from_dict(entry, key_field="time") for entry in data.get("entries", [])],
        )


@register_facet
@dataclass
class StatisticalFacet(Facet):
    """Statistics over a numeric field."""
    TYPE: ClassVar[str] = "statistical"

    count: int = 0
    total: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    sum_of_squares: Optional[float] = None
    variance: Optional[float] = None
    std_deviation: Optional[float] = None

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "StatisticalFacet":
        return cls(
            name=name,
            count=int(data.get("count", 0)),
            total=_number(data, "total"),
            min=_number(data, "min"),
            max=_number(data, "max"),
            mean=_number(data, "mean"),
            sum_of_squares=_number(data, "sum_of_squares"),
            variance=_number(data, "variance"),
            std_deviation=_number(data, "std_deviation"),
        )


@register_facet
@dataclass
class FilterFacet(Facet):
    """Number of documents matching a filter."""
    TYPE: ClassVar[str] = "filter"

    count: int = 0

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "FilterFacet":
        return cls(name=name, count=int(data.get("count", 0)))


@register_facet
@dataclass
class QueryFacet(FilterFacet):
    """Number of documents matching a query."""
    TYPE: ClassVar[str] = "query"


@dataclass
class TermStatsEntry:
    term: Any
    count: int
    total_count: int
    total: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TermStatsEntry":
        return cls(
            term=data["term"],
            count=int(data.get("count", 0)),
            total_count=int(data.get("total_count", 0)),
            total=_number(data, "total"),
            min=_number(data, "min"),
            max=_number(data, "max"),
            mean=_number(data, "mean"),
        )


@register_facet
@dataclass
class TermsStatsFacet(Facet):
    """Value statistics per term of a key field."""
    TYPE: ClassVar[str] = "terms_stats"

    missing: int = 0
    terms: List[TermStatsEntry] = field(default_factory=list)

    @classmethod
    def from_json(cls, name: str, data: Dict[str, Any]) -> "TermsStatsFacet":
        return cls(
            name=name,
            missing=int(data.get("missing", 0)),
            terms=[TermStatsEntry.from_dict(entry) for entry in data.get("terms", [])],
        )
