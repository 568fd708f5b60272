"""
Geometry Layer
==============

Bounded Context: Geographic distance between feature and reference geometries.

Responsibilities:
- Flat-earth ruler anchored at a latitude
- Segment intersection and shortest-distance algorithms
- Dispatch on geometry kind
- NO parsing, NO tile decoding, NO expression state

Design Philosophy:
- Pure functions over plain coordinate sequences
- Immutable rulers, one per query
- Zero side effects
"""

from sextant_geometry.ruler import CheapRuler, Unit
from sextant_geometry.segments import (
    segments_intersect,
    point_to_line_distance,
    point_to_lines_distance,
    point_to_points_distance,
    line_to_line_distance,
)
from sextant_geometry.dispatch import UNSUPPORTED_GEOMETRY, distance_to_geometry

__all__ = [
    "CheapRuler",
    "Unit",
    "segments_intersect",
    "point_to_line_distance",
    "point_to_lines_distance",
    "point_to_points_distance",
    "line_to_line_distance",
    "UNSUPPORTED_GEOMETRY",
    "distance_to_geometry",
]
