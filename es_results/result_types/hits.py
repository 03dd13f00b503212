"""
Search hit type definitions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True)
class Hit(Generic[T, K]):
    """
    One matched document of a search response.

    Attributes:
        source: The document body, decoded into the caller's type
        explanation: Decoded scoring explanation, if requested and returned
        highlight: Fragments per highlighted field, or None when the hit
            carried no highlight
    """
    source: T
    explanation: Optional[K] = None
    highlight: Optional[Dict[str, List[str]]] = None

    @classmethod
    def from_json(
        cls,
        source: Any,
        source_decoder: Callable[[Any], T],
        explanation: Any = None,
        explanation_decoder: Optional[Callable[[Any], K]] = None,
        highlight: Optional[Dict[str, List[str]]] = None,
    ) -> "Hit[T, K]":
        """Create from raw JSON values using the given decoders."""
        decoded_explanation = None
        if explanation is not None and explanation_decoder is not None:
            decoded_explanation = explanation_decoder(explanation)

        return cls(
            source=None if source is None else source_decoder(source),
            explanation=decoded_explanation,
            highlight=highlight,
        )
