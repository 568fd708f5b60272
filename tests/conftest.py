"""
Shared pytest fixtures for sextant tests.
"""

import logging

import pytest
import yaml

from sextant_expression.logging import configure_logging
from sextant_geometry import CheapRuler, Unit
from sextant_tile import CanonicalTileID, FeatureType, GeometryTileFeature


@pytest.fixture
def equator_ruler():
    """Ruler anchored at the equator, in meters."""
    return CheapRuler(latitude=0.0, unit=Unit.METERS)


@pytest.fixture
def world_tile():
    """The single zoom-0 tile; local (4096, 4096) is (lon 0, lat 0)."""
    return CanonicalTileID(z=0, x=0, y=0)


@pytest.fixture
def point_feature():
    """Factory for point-tagged tile features."""
    def _make(*points):
        return GeometryTileFeature(
            type=FeatureType.POINT,
            geometry=tuple((p,) for p in points),
        )
    return _make


@pytest.fixture
def line_feature():
    """Factory for line-tagged tile features, one part per argument."""
    def _make(*lines):
        return GeometryTileFeature(
            type=FeatureType.LINESTRING,
            geometry=tuple(tuple(line) for line in lines),
        )
    return _make


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping to a YAML file under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path
    return _write


@pytest.fixture(autouse=True)
def default_log_level():
    """Restore the package log level after tests that raise it."""
    yield
    configure_logging(logging.INFO)
