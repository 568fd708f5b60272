"""
Sextant Expressions
===================

Bounded Context: Style expressions that measure geographic distance.

Architecture:

    sextant_expression/
    ├── arguments.py   # Argument array validation, reference geometry extraction
    ├── distance.py    # Distance expression node
    ├── expression.py  # Expression interface, EvaluationContext
    ├── registry.py    # Operator -> parser registry
    ├── errors.py      # ParseError, EvaluationError
    └── logging/       # Structured JSON logging

Usage:

    from sextant_expression import Distance, EvaluationContext
    from sextant_tile import CanonicalTileID, FeatureType, GeometryTileFeature

    expr = Distance.parse(
        ["distance", {"type": "Point", "coordinates": [13.4, 52.5]}, "Kilometers"]
    )
    feature = GeometryTileFeature(type=FeatureType.POINT, geometry=(((100, 200),),))
    km = expr.evaluate(EvaluationContext(feature=feature, canonical=CanonicalTileID(14, 8800, 5373)))

    expr.serialize()  # ["distance", {"type": "Point", "coordinates": [13.4, 52.5]}]
"""

from sextant_expression.errors import ExpressionError, ParseError, EvaluationError
from sextant_expression.expression import EvaluationContext, Expression, ResultType
from sextant_expression.arguments import DistanceArguments, extract_geometry, parse_arguments
from sextant_expression.distance import Distance
from sextant_expression.registry import ExpressionRegistry, default_registry

__all__ = [
    # Errors
    "ExpressionError",
    "ParseError",
    "EvaluationError",
    # Interface
    "EvaluationContext",
    "Expression",
    "ResultType",
    # Distance
    "DistanceArguments",
    "extract_geometry",
    "parse_arguments",
    "Distance",
    # Registry
    "ExpressionRegistry",
    "default_registry",
]

__version__ = "1.0.0"
