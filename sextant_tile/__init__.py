"""
Tile Layer
==========

Bounded Context: Decoded vector-tile features and their reprojection.

Responsibilities:
- Tile identifiers and feature geometry tags
- Tile-local to (lon, lat) conversion
- NO decoding of tile bytes, NO rendering
"""

from sextant_tile.feature import (
    EXTENT,
    CanonicalTileID,
    FeatureType,
    GeometryTileFeature,
)
from sextant_tile.convert import classify_rings, convert_geometry, signed_area

__all__ = [
    "EXTENT",
    "CanonicalTileID",
    "FeatureType",
    "GeometryTileFeature",
    "classify_rings",
    "convert_geometry",
    "signed_area",
]
