import pytest
from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

from sextant_tile import (
    CanonicalTileID,
    FeatureType,
    GeometryTileFeature,
    classify_rings,
    convert_geometry,
    signed_area,
)

OUTER = [(0, 0), (100, 0), (100, 100), (0, 100), (0, 0)]
HOLE = [(20, 20), (20, 40), (40, 40), (40, 20), (20, 20)]
OTHER_OUTER = [(200, 200), (300, 200), (300, 300), (200, 300), (200, 200)]


@pytest.mark.parametrize("z, x, y", [(-1, 0, 0), (33, 0, 0), (1, 2, 0), (1, 0, -1)])
def test_invalid_tile_ids(z, x, y):
    with pytest.raises(ValueError):
        CanonicalTileID(z=z, x=x, y=y)


def test_tile_id_from_sequence():
    assert CanonicalTileID.from_sequence([3, 4, 2]) == CanonicalTileID(z=3, x=4, y=2)
    assert str(CanonicalTileID(3, 4, 2)) == "3/4/2"


def test_tile_feature_rejects_bad_coordinates():
    with pytest.raises(ValueError):
        GeometryTileFeature(type=FeatureType.POINT, geometry=(((1, 2, 3),),))


def test_world_tile_center_is_origin(world_tile, point_feature):
    geometry = convert_geometry(point_feature((4096, 4096)), world_tile)
    assert isinstance(geometry, Point)
    assert geometry.x == pytest.approx(0.0)
    assert geometry.y == pytest.approx(0.0, abs=1e-9)


def test_world_tile_corner(world_tile, point_feature):
    geometry = convert_geometry(point_feature((0, 0)), world_tile)
    assert geometry.x == pytest.approx(-180.0)
    assert geometry.y == pytest.approx(85.0511287798, rel=1e-9)


def test_deeper_tile_offsets(point_feature):
    geometry = convert_geometry(point_feature((0, 8192)), CanonicalTileID(z=1, x=1, y=0))
    assert geometry.x == pytest.approx(0.0)
    assert geometry.y == pytest.approx(0.0, abs=1e-9)


def test_custom_extent(world_tile, point_feature):
    geometry = convert_geometry(point_feature((2048, 2048)), world_tile, extent=4096)
    assert geometry.x == pytest.approx(0.0)


def test_multiple_points_become_multipoint(world_tile, point_feature):
    geometry = convert_geometry(point_feature((0, 0), (4096, 4096)), world_tile)
    assert isinstance(geometry, MultiPoint)
    assert len(geometry.geoms) == 2


def test_line_parts(world_tile, line_feature):
    single = convert_geometry(line_feature([(0, 0), (10, 10)]), world_tile)
    multi = convert_geometry(line_feature([(0, 0), (10, 10)], [(20, 20), (30, 30)]), world_tile)
    assert isinstance(single, LineString)
    assert isinstance(multi, MultiLineString)


def test_signed_area_sign_follows_winding():
    assert signed_area(OUTER) > 0
    assert signed_area(HOLE) < 0


def test_classify_rings_groups_holes():
    polygons = classify_rings([OUTER, HOLE, OTHER_OUTER])
    assert polygons == [[OUTER, HOLE], [OTHER_OUTER]]


def test_polygon_with_hole(world_tile):
    feature = GeometryTileFeature(type=FeatureType.POLYGON, geometry=(OUTER, HOLE))
    geometry = convert_geometry(feature, world_tile)
    assert isinstance(geometry, Polygon)
    assert len(geometry.interiors) == 1


def test_two_polygons(world_tile):
    feature = GeometryTileFeature(type=FeatureType.POLYGON, geometry=(OUTER, OTHER_OUTER))
    assert isinstance(convert_geometry(feature, world_tile), MultiPolygon)


def test_unknown_feature_is_empty_collection(world_tile):
    feature = GeometryTileFeature(type=FeatureType.UNKNOWN, geometry=(((0, 0),),))
    geometry = convert_geometry(feature, world_tile)
    assert isinstance(geometry, GeometryCollection)
    assert geometry.is_empty


@pytest.mark.parametrize("geometry, expected", [
    (Point(0, 0), FeatureType.POINT),
    (MultiPoint([(0, 0), (1, 1)]), FeatureType.POINT),
    (LineString([(0, 0), (1, 1)]), FeatureType.LINESTRING),
    (MultiLineString([[(0, 0), (1, 1)]]), FeatureType.LINESTRING),
    (Polygon([(0, 0), (1, 0), (1, 1)]), FeatureType.POLYGON),
    (GeometryCollection(), FeatureType.UNKNOWN),
    (None, FeatureType.UNKNOWN),
])
def test_feature_type_of_geometry(geometry, expected):
    assert FeatureType.of(geometry) == expected
