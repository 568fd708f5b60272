"""
Tile Geometry Conversion
========================

Reprojects tile-local feature geometry to (lon, lat) shapely geometry.

Design:
- Inverse Web Mercator, one tile of `extent` units per side
- Single-part features collapse to their simple geometry type
- Polygon rings grouped by winding order (outer ring + holes)
"""

import math
from typing import List, Sequence, Tuple

from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry

from sextant_tile.feature import (
    EXTENT,
    CanonicalTileID,
    FeatureType,
    GeometryTileFeature,
)

LonLat = Tuple[float, float]


def signed_area(ring: Sequence[Tuple[int, int]]) -> float:
    """Shoelace sum of a ring; the sign gives its winding order."""
    total = 0.0
    j = len(ring) - 1
    for i in range(len(ring)):
        p1 = ring[i]
        p2 = ring[j]
        total += (p2[0] - p1[0]) * (p1[1] + p2[1])
        j = i
    return total


def classify_rings(rings: Sequence[Sequence[Tuple[int, int]]]) -> List[List[Sequence[Tuple[int, int]]]]:
    """
    Group rings into polygons.

    A ring with the same winding as the first non-degenerate ring starts a
    new polygon; the others are holes of the current one. Zero-area rings
    are dropped.
    """
    if len(rings) <= 1:
        return [list(rings)]

    polygons = []
    polygon: List[Sequence[Tuple[int, int]]] = []
    ccw = 0
    for ring in rings:
        area = signed_area(ring)
        if area == 0:
            continue
        winding = -1 if area < 0 else 1
        if ccw == 0:
            ccw = winding
        if ccw == winding and polygon:
            polygons.append(polygon)
            polygon = []
        polygon.append(ring)

    if polygon:
        polygons.append(polygon)
    return polygons


def convert_geometry(
    feature: GeometryTileFeature,
    canonical: CanonicalTileID,
    extent: int = EXTENT
) -> BaseGeometry:
    """
    Convert a decoded tile feature to (lon, lat) geometry.

    Args:
        feature: Decoded feature in tile-local coordinates
        canonical: Tile the feature was decoded from
        extent: Tile extent in local units

    Returns:
        Point/MultiPoint, LineString/MultiLineString, Polygon/MultiPolygon,
        or an empty GeometryCollection for untyped features
    """
    size = extent * math.pow(2, canonical.z)
    x0 = extent * float(canonical.x)
    y0 = extent * float(canonical.y)

    def to_lon_lat(p: Tuple[int, int]) -> LonLat:
        y2 = 180 - (p[1] + y0) * 360 / size
        return (
            (p[0] + x0) * 360 / size - 180,
            math.atan(math.exp(y2 * math.pi / 180)) * 360.0 / math.pi - 90.0,
        )

    def transform(part: Sequence[Tuple[int, int]]) -> List[LonLat]:
        return [to_lon_lat(p) for p in part]

    if feature.type == FeatureType.POINT:
        points = [to_lon_lat(p) for part in feature.geometry for p in part]
        if len(points) == 1:
            return Point(points[0])
        return MultiPoint(points)

    if feature.type == FeatureType.LINESTRING:
        lines = [transform(part) for part in feature.geometry if len(part) >= 2]
        if len(lines) == 1:
            return LineString(lines[0])
        return MultiLineString(lines)

    if feature.type == FeatureType.POLYGON:
        polygons = [
            Polygon(transform(rings[0]), [transform(ring) for ring in rings[1:]])
            for rings in classify_rings(feature.geometry)
            if rings
        ]
        if len(polygons) == 1:
            return polygons[0]
        return MultiPolygon(polygons)

    return GeometryCollection()
