"""
Distance Expression
===================

["distance", geojson, unit?] measures how far the evaluated feature is
from a reference geometry embedded in the style.

Design:
- Immutable node (frozen dataclass): safe to evaluate from many threads
- Reference geometry extracted once, at parse time
- A fresh CheapRuler per evaluation (see sextant_geometry.dispatch)
- serialize() emits ["distance", geojson]; the unit is not written back
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from shapely.geometry.base import BaseGeometry

from sextant_geojson import GeoJSON, GeoJSONError, from_geojson
from sextant_geometry import Unit, distance_to_geometry
from sextant_tile import FeatureType, convert_geometry
from sextant_expression.arguments import extract_geometry, parse_arguments
from sextant_expression.errors import EvaluationError, ParseError
from sextant_expression.expression import EvaluationContext, Expression, ResultType
from sextant_expression.logging import LogEvent, create_logger

logger = create_logger("expression.distance")

OPERATOR = "distance"


@dataclass(frozen=True, eq=False)
class Distance(Expression):
    """
    Distance from the evaluated feature to a reference geometry.

    Attributes:
        geojson_source: Parsed GeoJSON document as written in the style
        geometries: Reference geometry extracted from the document
        unit: Output unit

    Example:
        >>> expr = Distance.parse(["distance", {"type": "Point", "coordinates": [0, 0]}])
        >>> expr.evaluate(EvaluationContext(feature=feature, canonical=tile_id))
    """

    geojson_source: GeoJSON
    geometries: BaseGeometry
    unit: Unit = Unit.METERS

    result_type = ResultType.NUMBER

    @property
    def operator(self) -> str:
        return OPERATOR

    @classmethod
    def parse(cls, value: Any) -> "Distance":
        """
        Build a Distance node from its argument array.

        Raises:
            ParseError: If the arguments or the embedded GeoJSON are invalid
        """
        try:
            arguments = parse_arguments(value)
            geometry = extract_geometry(arguments.geojson)
        except ParseError as e:
            logger.debug(
                event=LogEvent.EXPRESSION_PARSE_FAILED,
                message=str(e),
                metadata={'operator': OPERATOR},
            )
            raise

        logger.debug(
            event=LogEvent.EXPRESSION_PARSED,
            message="Parsed 'distance' expression",
            metadata={
                'operator': OPERATOR,
                'geometry_type': geometry.geom_type,
                'unit': arguments.unit.value,
            },
        )
        return cls(geojson_source=arguments.geojson, geometries=geometry, unit=arguments.unit)

    def evaluate(self, context: EvaluationContext) -> float:
        """
        Distance from the context's feature to the reference geometry.

        Raises:
            EvaluationError: If the context lacks a feature or tile id, or
                the feature is not a point or line feature
        """
        if context.feature is None or context.canonical is None:
            raise EvaluationError(
                "distance expression requires valid feature and canonical information."
            )

        if context.feature.type not in (FeatureType.POINT, FeatureType.LINESTRING):
            logger.debug(
                event=LogEvent.EXPRESSION_EVALUATION_FAILED,
                message="Unsupported feature type",
                metadata={'feature_type': context.feature.type.name},
            )
            raise EvaluationError(
                "distance expression currently only supports feature with Point geometry."
            )

        geometry = convert_geometry(context.feature, context.canonical, context.extent)
        result = distance_to_geometry(geometry, self.geometries, self.unit)

        logger.debug(
            event=LogEvent.EXPRESSION_EVALUATED,
            message="Evaluated 'distance' expression",
            metadata={
                'tile': str(context.canonical),
                'feature_type': context.feature.type.name,
                'distance': result,
            },
        )
        return result

    def serialize(self) -> List[Any]:
        """
        Encode as ["distance", geojson].

        A document that cannot be encoded as an object is logged and
        written as an empty object.
        """
        serialized: Dict[str, Any] = {}
        try:
            encoded: Optional[Dict[str, Any]] = from_geojson(self.geojson_source)
        except GeoJSONError as e:
            logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message="Failed to serialize 'distance' expression",
                exc_info=e,
            )
        else:
            if isinstance(encoded, dict):
                serialized = encoded
            else:
                logger.error(
                    event=LogEvent.SERIALIZATION_ERROR,
                    message="Failed to serialize 'distance' expression, converted GeoJSON is not an object",
                )
        return [self.operator, serialized]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distance):
            return NotImplemented
        return (
            self.geojson_source == other.geojson_source
            and self.geometries == other.geometries
            and self.unit == other.unit
        )

    def __hash__(self) -> int:
        # Coordinates can differ in signed zeros while comparing equal
        return hash((OPERATOR, self.geometries.geom_type, self.unit))

    def possible_outputs(self) -> List[Optional[Any]]:
        return [None]
