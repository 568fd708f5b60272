"""
Expression Base Types
=====================

Minimal contract shared by expression nodes.

Design:
- Nodes are immutable after parse
- evaluate() takes an EvaluationContext and returns a plain value
- serialize() returns plain values ([operator, *args])
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from sextant_tile import EXTENT, CanonicalTileID, GeometryTileFeature


class ResultType(str, Enum):
    """Result type of an expression."""
    NUMBER = "number"
    VALUE = "value"


@dataclass(frozen=True)
class EvaluationContext:
    """
    Immutable per-evaluation inputs.

    Attributes:
        feature: Decoded tile feature being styled
        canonical: Tile the feature was decoded from
        extent: Tile extent of the feature coordinates
    """
    feature: Optional[GeometryTileFeature] = None
    canonical: Optional[CanonicalTileID] = None
    extent: int = EXTENT


class Expression(ABC):
    """Interface for expression nodes."""

    result_type: ResultType = ResultType.VALUE

    @property
    @abstractmethod
    def operator(self) -> str:
        """Operator name as written in style JSON."""
        ...

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> Any:
        """Evaluate against a context; raises EvaluationError."""
        ...

    @abstractmethod
    def serialize(self) -> List[Any]:
        """Encode back into style JSON values."""
        ...

    def possible_outputs(self) -> List[Optional[Any]]:
        """Values this node can produce; None means unknown."""
        return [None]
