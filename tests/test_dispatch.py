import math

import pytest
from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    Point,
    Polygon,
)

from sextant_geometry import (
    UNSUPPORTED_GEOMETRY,
    CheapRuler,
    Unit,
    distance_to_geometry,
    line_to_line_distance,
)

SQUARE = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])


def test_point_to_point_uses_ruler_at_feature_latitude():
    feature = Point(10, 60)
    reference = Point(10.2, 20)
    expected = CheapRuler(latitude=60).distance((10, 60), (10.2, 20))
    assert distance_to_geometry(feature, reference) == pytest.approx(expected)


def test_point_on_reference_line_is_zero():
    assert distance_to_geometry(Point(1, 1), LineString([(0, 0), (2, 2)])) == 0.0


def test_point_to_multipoint_reference():
    reference = MultiPoint([(5, 5), (0, 0), (100, 100)])
    assert distance_to_geometry(Point(0, 0), reference) == 0.0


def test_point_to_multilinestring_reference():
    reference = MultiLineString([[(0, 2), (2, 2)], [(0, 1), (2, 1)]])
    expected = CheapRuler(latitude=0).distance((1, 0), (1, 1))
    assert distance_to_geometry(Point(1, 0), reference) == pytest.approx(expected)


def test_multipoint_feature_takes_minimum():
    feature = MultiPoint([(0, 3), (0, 1)])
    expected = CheapRuler(latitude=1).distance((0, 1), (0, 0))
    assert distance_to_geometry(feature, Point(0, 0)) == pytest.approx(expected)


def test_multipoint_feature_short_circuits_on_zero():
    feature = MultiPoint([(5, 5), (0, 0), (100, 100)])
    assert distance_to_geometry(feature, Point(0, 0)) == 0.0


def test_line_to_line_reference():
    feature = LineString([(0, 0), (4, 0)])
    reference = LineString([(0, 1), (4, 1)])
    ruler = CheapRuler(latitude=0)
    expected = line_to_line_distance(list(feature.coords), list(reference.coords), ruler)
    assert distance_to_geometry(feature, reference) == pytest.approx(expected)


def test_line_to_point_reference():
    feature = LineString([(0, 0), (2, 0)])
    expected = CheapRuler(latitude=0).distance((1, 1), (1, 0))
    assert distance_to_geometry(feature, Point(1, 1)) == pytest.approx(expected)


def test_line_to_multipoint_reference():
    feature = LineString([(0, 0), (2, 0)])
    reference = MultiPoint([(1, 3), (1, 2)])
    expected = CheapRuler(latitude=0).distance((1, 2), (1, 0))
    assert distance_to_geometry(feature, reference) == pytest.approx(expected)


def test_line_crossing_multilinestring_reference_is_zero():
    feature = LineString([(0, 0), (2, 2)])
    reference = MultiLineString([[(10, 10), (11, 11)], [(0, 2), (2, 0)]])
    assert distance_to_geometry(feature, reference) == 0.0


def test_multilinestring_feature_takes_minimum():
    feature = MultiLineString([[(0, 5), (4, 5)], [(0, 2), (4, 2)]])
    reference = LineString([(0, 0), (4, 0)])
    expected = CheapRuler(latitude=2).distance((0, 2), (0, 0))
    assert distance_to_geometry(feature, reference) == pytest.approx(expected)


@pytest.mark.parametrize("feature", [SQUARE, GeometryCollection()])
def test_unsupported_feature_geometry_returns_sentinel(feature):
    assert distance_to_geometry(feature, Point(0, 0)) == UNSUPPORTED_GEOMETRY


def test_point_against_polygon_reference_is_infinite():
    assert distance_to_geometry(Point(0, 0), SQUARE) == math.inf


def test_line_against_polygon_reference_returns_sentinel():
    assert distance_to_geometry(LineString([(0, 0), (1, 1)]), SQUARE) == UNSUPPORTED_GEOMETRY


@pytest.mark.parametrize("unit, divisor", [
    (Unit.KILOMETERS, 1000.0),
    (Unit.MILES, 1609.344),
    (Unit.INCHES, 0.0254),
])
def test_unit_scaling(unit, divisor):
    feature = LineString([(13.40, 52.50), (13.42, 52.51)])
    reference = Point(13.45, 52.53)
    meters = distance_to_geometry(feature, reference, Unit.METERS)
    assert distance_to_geometry(feature, reference, unit) == pytest.approx(meters / divisor)
