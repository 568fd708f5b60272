"""
Tile Feature Types
==================

Immutable value types describing a decoded vector-tile feature and the
tile it belongs to.

Types:
- FeatureType: Vector tile geometry tag
- CanonicalTileID: Tile position (z, x, y)
- GeometryTileFeature: Decoded feature in tile-local coordinates
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from shapely.geometry.base import BaseGeometry

EXTENT = 8192

TileCoordinates = Tuple[Tuple[int, int], ...]


class FeatureType(IntEnum):
    """Vector tile geometry tag."""
    UNKNOWN = 0
    POINT = 1
    LINESTRING = 2
    POLYGON = 3

    @classmethod
    def of(cls, geometry: Optional[BaseGeometry]) -> "FeatureType":
        """Classify a GeoJSON geometry by the tag a tile would give it."""
        if geometry is None:
            return cls.UNKNOWN
        return _GEOMETRY_TAGS.get(geometry.geom_type, cls.UNKNOWN)


_GEOMETRY_TAGS = {
    "Point": FeatureType.POINT,
    "MultiPoint": FeatureType.POINT,
    "LineString": FeatureType.LINESTRING,
    "LinearRing": FeatureType.LINESTRING,
    "MultiLineString": FeatureType.LINESTRING,
    "Polygon": FeatureType.POLYGON,
    "MultiPolygon": FeatureType.POLYGON,
}


@dataclass(frozen=True)
class CanonicalTileID:
    """
    Immutable canonical tile identifier.

    Attributes:
        z: Zoom level in [0, 32]
        x: Column in [0, 2**z)
        y: Row in [0, 2**z)

    Example:
        >>> CanonicalTileID(z=3, x=4, y=2)
    """
    z: int
    x: int
    y: int

    def __post_init__(self):
        """Validate tile coordinates."""
        if not 0 <= self.z <= 32:
            raise ValueError(f"Tile zoom must be in [0, 32], got {self.z}")
        dim = 1 << self.z
        if not 0 <= self.x < dim:
            raise ValueError(f"Tile x must be in [0, {dim}), got {self.x}")
        if not 0 <= self.y < dim:
            raise ValueError(f"Tile y must be in [0, {dim}), got {self.y}")

    @classmethod
    def from_sequence(cls, value: Sequence[int]) -> "CanonicalTileID":
        """Build from a [z, x, y] sequence."""
        if len(value) != 3:
            raise ValueError(f"Tile id must be [z, x, y], got {list(value)}")
        z, x, y = value
        return cls(z=int(z), x=int(x), y=int(y))

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"


@dataclass(frozen=True)
class GeometryTileFeature:
    """
    Immutable decoded tile feature.

    Attributes:
        type: Geometry tag
        geometry: Parts (points, lines or rings) in tile-local coordinates
        properties: Feature properties
        id: Optional feature identifier

    Invariants:
        - Every coordinate is an (x, y) pair

    Example:
        >>> GeometryTileFeature(
        ...     type=FeatureType.LINESTRING,
        ...     geometry=(((0, 0), (4096, 4096)),),
        ... )
    """
    type: FeatureType
    geometry: Tuple[TileCoordinates, ...]
    properties: Dict[str, Any] = field(default_factory=dict)
    id: Optional[Union[str, int]] = None

    def __post_init__(self):
        """Normalize parts to tuples and validate coordinate pairs."""
        for part in self.geometry:
            for p in part:
                if len(p) != 2:
                    raise ValueError(f"Tile coordinates must be (x, y) pairs, got {p}")
        parts = tuple(
            tuple((int(p[0]), int(p[1])) for p in part)
            for part in self.geometry
        )
        object.__setattr__(self, 'type', FeatureType(self.type))
        object.__setattr__(self, 'geometry', parts)
