"""
Distance Argument Parser
========================

Validates ["distance", geojson] / ["distance", geojson, unit] arrays and
extracts the reference geometry.

Rules:
- Arity must be 2 or 3
- Unknown or non-string unit names fall back to Meters without error
- The first Point or LineString kind geometry wins
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from shapely.geometry.base import BaseGeometry

from sextant_geojson import Feature, FeatureCollection, GeoJSON, GeoJSONError, to_geojson
from sextant_geometry import Unit
from sextant_tile import FeatureType
from sextant_expression.errors import ParseError

NOT_AN_ARRAY = "'distance' expression needs to be an array with one/two arguments."
UNSUPPORTED_GEOMETRY = (
    "'distance' expression requires valid geojson source that contains "
    "Point/LineString geometry type."
)

UNIT_NAMES = {
    "Meters": Unit.METERS,
    "Metres": Unit.METERS,
    "Kilometers": Unit.KILOMETERS,
    "Miles": Unit.MILES,
    "Inches": Unit.INCHES,
}


@dataclass(frozen=True)
class DistanceArguments:
    """Parsed GeoJSON document and unit of a distance expression."""
    geojson: GeoJSON
    unit: Unit = Unit.METERS


def parse_unit(value: Any) -> Unit:
    """Map a unit name to a Unit; anything unrecognized is Meters."""
    if isinstance(value, str):
        return UNIT_NAMES.get(value, Unit.METERS)
    return Unit.METERS


def parse_arguments(value: Any) -> DistanceArguments:
    """
    Validate a distance argument array.

    Args:
        value: Full expression array, operator included

    Returns:
        DistanceArguments with the parsed document and unit

    Raises:
        ParseError: On wrong arity, non-object document or invalid GeoJSON
    """
    if not isinstance(value, (list, tuple)):
        raise ParseError(NOT_AN_ARRAY)

    length = len(value)
    if length not in (2, 3):
        raise ParseError(
            f"'distance' expression requires exactly one argument, "
            f"but found {length - 1} instead."
        )

    unit = parse_unit(value[2]) if length == 3 else Unit.METERS

    argument = value[1]
    if not isinstance(argument, Mapping):
        raise ParseError(NOT_AN_ARRAY)

    try:
        geojson = to_geojson(argument)
    except GeoJSONError as e:
        raise ParseError(str(e)) from e

    return DistanceArguments(geojson=geojson, unit=unit)


def _qualifying(geometry: Optional[BaseGeometry]) -> Optional[BaseGeometry]:
    if geometry is None or geometry.is_empty:
        return None
    if FeatureType.of(geometry) in (FeatureType.POINT, FeatureType.LINESTRING):
        return geometry
    return None


def extract_geometry(geojson: GeoJSON) -> BaseGeometry:
    """
    Select the reference geometry from a GeoJSON document.

    A bare geometry or a single feature must itself be a point or line
    kind. A feature collection is scanned in order and later features are
    ignored once one qualifies.

    Raises:
        ParseError: If no qualifying geometry exists
    """
    if isinstance(geojson, FeatureCollection):
        for feature in geojson.features:
            geometry = _qualifying(feature.geometry)
            if geometry is not None:
                return geometry
    elif isinstance(geojson, Feature):
        geometry = _qualifying(geojson.geometry)
        if geometry is not None:
            return geometry
    else:
        geometry = _qualifying(geojson)
        if geometry is not None:
            return geometry

    raise ParseError(UNSUPPORTED_GEOMETRY)
