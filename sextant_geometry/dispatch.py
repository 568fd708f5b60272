"""
Geometry Dispatch Module
========================

Routes a feature geometry and a reference geometry to the matching
distance algorithm.

Design:
- Tagged-union dispatch with match/case on shapely geometry classes
- One fresh CheapRuler per measured point or line (anchored at it)
- Collections aggregate with a zero short-circuit
- Unsupported feature geometry yields UNSUPPORTED_GEOMETRY (-1.0)
"""

import math
from typing import List, Tuple

from shapely.geometry import LineString, MultiLineString, MultiPoint, Point
from shapely.geometry.base import BaseGeometry

from sextant_geometry.ruler import CheapRuler, Unit
from sextant_geometry.segments import (
    line_to_line_distance,
    point_to_line_distance,
    point_to_lines_distance,
    point_to_points_distance,
)

UNSUPPORTED_GEOMETRY = -1.0


def _xy(point: Point) -> Tuple[float, float]:
    return (point.x, point.y)


def _coords(line: LineString) -> List[Tuple[float, float]]:
    return [(x, y) for x, y, *_ in line.coords]


def point_distance_to_geometry(
    point: Tuple[float, float],
    geometry: BaseGeometry,
    unit: Unit
) -> float:
    """Distance from a single (lon, lat) point to the reference geometry."""
    ruler = CheapRuler(point[1], unit)

    match geometry:
        case Point():
            return ruler.distance(point, _xy(geometry))
        case MultiPoint():
            return point_to_points_distance(point, [_xy(p) for p in geometry.geoms], ruler)
        case LineString():
            return point_to_line_distance(point, _coords(geometry), ruler)
        case MultiLineString():
            return point_to_lines_distance(point, [_coords(line) for line in geometry.geoms], ruler)
        case _:
            return math.inf


def line_distance_to_geometry(
    line: List[Tuple[float, float]],
    geometry: BaseGeometry,
    unit: Unit
) -> float:
    """
    Distance from a single line to the reference geometry.

    Raises:
        ValueError: If the line has no coordinates
    """
    if not line:
        raise ValueError("Cannot measure distance from an empty line")
    ruler = CheapRuler(line[0][1], unit)

    match geometry:
        case Point():
            return point_to_line_distance(_xy(geometry), line, ruler)
        case MultiPoint():
            dist = math.inf
            for point in geometry.geoms:
                dist = min(dist, point_to_line_distance(_xy(point), line, ruler))
            return dist
        case LineString():
            return line_to_line_distance(line, _coords(geometry), ruler)
        case MultiLineString():
            dist = math.inf
            for other in geometry.geoms:
                temp_dist = line_to_line_distance(line, _coords(other), ruler)
                if temp_dist == 0.0:
                    return 0.0
                dist = min(dist, temp_dist)
            return dist
        case _:
            return UNSUPPORTED_GEOMETRY


def distance_to_geometry(
    feature_geometry: BaseGeometry,
    reference_geometry: BaseGeometry,
    unit: Unit = Unit.METERS
) -> float:
    """
    Minimum distance between a feature geometry and a reference geometry.

    Args:
        feature_geometry: Feature geometry in (lon, lat)
        reference_geometry: Point, MultiPoint, LineString or MultiLineString
        unit: Output unit

    Returns:
        Distance in the requested unit. UNSUPPORTED_GEOMETRY when the
        feature geometry is not a point or line kind; inf when a point
        feature meets an unrecognized reference kind.
    """
    match feature_geometry:
        case Point():
            return point_distance_to_geometry(_xy(feature_geometry), reference_geometry, unit)
        case MultiPoint():
            result = math.inf
            for point in feature_geometry.geoms:
                dist = point_distance_to_geometry(_xy(point), reference_geometry, unit)
                if dist == 0.0:
                    return dist
                result = min(result, dist)
            return result
        case LineString():
            return line_distance_to_geometry(_coords(feature_geometry), reference_geometry, unit)
        case MultiLineString():
            result = math.inf
            for line in feature_geometry.geoms:
                dist = line_distance_to_geometry(_coords(line), reference_geometry, unit)
                if dist == 0.0:
                    return dist
                result = min(result, dist)
            return result
        case _:
            return UNSUPPORTED_GEOMETRY
