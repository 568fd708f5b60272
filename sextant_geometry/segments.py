"""
Segment Distance Module
=======================

Pure shortest-distance algorithms over plain coordinate sequences.

Design:
- No geometry classes: inputs are sequences of (x, y) pairs
- Cross products for side and parallelism tests
- Distances delegated to a CheapRuler built by the caller
- A zero distance ends the search early
"""

import math
from typing import Iterable, Sequence

from sextant_geometry.ruler import CheapRuler

Coords = Sequence[Sequence[float]]


def _perp(v1: Sequence[float], v2: Sequence[float]) -> float:
    return v1[0] * v2[1] - v1[1] * v2[0]


def _two_sided(
    p1: Sequence[float],
    p2: Sequence[float],
    q1: Sequence[float],
    q2: Sequence[float]
) -> bool:
    """True if p1 and p2 lie strictly on opposite sides of line q1->q2."""
    x3 = q2[0] - q1[0]
    y3 = q2[1] - q1[1]
    ret1 = (p1[0] - q1[0]) * y3 - x3 * (p1[1] - q1[1])
    ret2 = (p2[0] - q1[0]) * y3 - x3 * (p2[1] - q1[1])
    return (ret1 > 0 and ret2 < 0) or (ret1 < 0 and ret2 > 0)


def segments_intersect(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    d: Sequence[float]
) -> bool:
    """
    Check whether segment a->b properly crosses segment c->d.

    Parallel and collinear segments never intersect, and neither do
    segments that only touch at an endpoint.

    Args:
        a, b: End points of the first segment
        c, d: End points of the second segment

    Returns:
        True if the segments cross, False otherwise
    """
    vector_p = (b[0] - a[0], b[1] - a[1])
    vector_q = (d[0] - c[0], d[1] - c[1])
    if _perp(vector_q, vector_p) == 0:
        return False

    return _two_sided(a, b, c, d) and _two_sided(c, d, a, b)


def point_to_line_distance(
    point: Sequence[float],
    line: Coords,
    ruler: CheapRuler
) -> float:
    """Distance from a point to its projection on a line."""
    nearest, _, _ = ruler.point_on_line(line, point)
    return ruler.distance(point, nearest)


def point_to_lines_distance(
    point: Sequence[float],
    lines: Iterable[Coords],
    ruler: CheapRuler
) -> float:
    """Minimum distance from a point to any of the lines."""
    dist = math.inf
    for line in lines:
        temp_dist = point_to_line_distance(point, line, ruler)
        if temp_dist == 0.0:
            return temp_dist
        dist = min(dist, temp_dist)
    return dist


def point_to_points_distance(
    point: Sequence[float],
    points: Iterable[Sequence[float]],
    ruler: CheapRuler
) -> float:
    """Minimum distance from a point to any point of the set."""
    dist = math.inf
    for other in points:
        temp_dist = ruler.distance(point, other)
        if temp_dist == 0.0:
            return temp_dist
        dist = min(dist, temp_dist)
    return dist


def line_to_line_distance(
    line1: Coords,
    line2: Coords,
    ruler: CheapRuler
) -> float:
    """
    Shortest distance between two lines.

    Compares every segment of line1 with every segment of line2 and
    returns 0 as soon as a crossing pair is found.

    Per segment pair the candidates are p1->q, p2->q and q1->p (taken
    twice); q2->p is never measured. Styles depend on the resulting
    values, so keep the candidate set as is.

    Args:
        line1: First line as (x, y) coordinates
        line2: Second line as (x, y) coordinates
        ruler: Ruler anchored near both lines

    Returns:
        Distance in the ruler's unit, or inf if either line has no segment
    """
    dist = math.inf
    for i in range(len(line1) - 1):
        p1 = line1[i]
        p2 = line1[i + 1]
        for j in range(len(line2) - 1):
            q1 = line2[j]
            q2 = line2[j + 1]
            if segments_intersect(p1, p2, q1, q2):
                return 0.0
            dist = min(dist, point_to_line_distance(p1, (q1, q2), ruler))
            dist = min(dist, point_to_line_distance(p2, (q1, q2), ruler))
            dist = min(dist, point_to_line_distance(q1, (p1, p2), ruler))
            dist = min(dist, point_to_line_distance(q1, (p1, p2), ruler))
    return dist
