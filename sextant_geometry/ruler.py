"""
Cheap Ruler Module
==================

Flat-earth distance approximation anchored at a latitude.

Design:
- Scale factors computed once at init from the WGS84 ellipsoid
- Immutable (frozen dataclass), safe to share within a call
- Accurate near the anchor latitude only; build one per query
- Units expressed as a multiplier relative to kilometers
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Tuple

import numpy as np

# WGS84 ellipsoid
RE = 6378.137
FE = 1 / 298.257223563
E2 = FE * (2 - FE)
RAD = math.pi / 180

Coordinate = Tuple[float, float]


class Unit(str, Enum):
    """Distance units accepted by the distance expression."""
    METERS = "Meters"
    KILOMETERS = "Kilometers"
    MILES = "Miles"
    INCHES = "Inches"

    @property
    def multiplier(self) -> float:
        """Conversion factor from kilometers to this unit."""
        return _MULTIPLIERS[self]


_MULTIPLIERS = {
    Unit.KILOMETERS: 1.0,
    Unit.METERS: 1000.0,
    Unit.MILES: 1000.0 / 1609.344,
    Unit.INCHES: 1000.0 / 0.0254,
}


def _wrap(deg: float) -> float:
    """Normalize a longitude delta into [-180, 180]."""
    while deg < -180:
        deg += 360
    while deg > 180:
        deg -= 360
    return deg


def _wrap_array(deg: np.ndarray) -> np.ndarray:
    deg = np.where(deg < -180, deg + 360 * np.ceil((-180 - deg) / 360), deg)
    return np.where(deg > 180, deg - 360 * np.ceil((deg - 180) / 360), deg)


@dataclass(frozen=True)
class CheapRuler:
    """
    Latitude-anchored planar distance helper.

    Attributes:
        latitude: Anchor latitude in degrees
        unit: Output unit for every distance
        kx: Units per degree of longitude at the anchor
        ky: Units per degree of latitude at the anchor

    Example:
        >>> ruler = CheapRuler(latitude=52.5, unit=Unit.KILOMETERS)
        >>> ruler.distance((13.40, 52.5), (13.41, 52.5))
    """

    latitude: float
    unit: Unit = Unit.METERS
    kx: float = field(init=False)
    ky: float = field(init=False)

    def __post_init__(self):
        """Compute scale factors from meridional and normal curvature."""
        mul = RAD * RE * Unit(self.unit).multiplier
        coslat = math.cos(self.latitude * RAD)
        w2 = 1 / (1 - E2 * (1 - coslat * coslat))
        w = math.sqrt(w2)

        object.__setattr__(self, 'kx', mul * w * coslat)
        object.__setattr__(self, 'ky', mul * w * w2 * (1 - E2))

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        """
        Distance between two (lon, lat) coordinates.

        Args:
            a: First coordinate
            b: Second coordinate

        Returns:
            Distance in the ruler's unit
        """
        dx = _wrap(a[0] - b[0]) * self.kx
        dy = (a[1] - b[1]) * self.ky
        return math.sqrt(dx * dx + dy * dy)

    def point_on_line(
        self,
        line: Sequence[Sequence[float]],
        point: Sequence[float]
    ) -> Tuple[Coordinate, int, float]:
        """
        Find the point on a line closest to the given point.

        Every segment is projected at once; ties resolve to the earliest
        segment.

        Args:
            line: Sequence of (lon, lat) coordinates
            point: Query (lon, lat) coordinate

        Returns:
            Tuple of:
            - nearest: (lon, lat) of the closest point on the line
            - index: Index of the segment holding it
            - t: Position along that segment, clamped to [0, 1]

        Raises:
            ValueError: If the line has no coordinates
        """
        coords = np.asarray(line, dtype=float)
        if coords.ndim != 2 or len(coords) == 0:
            raise ValueError("point_on_line requires a non-empty line")
        if len(coords) == 1:
            return (float(coords[0, 0]), float(coords[0, 1])), 0, 0.0

        px, py = float(point[0]), float(point[1])
        start = coords[:-1]
        end = coords[1:]

        seg_dx = _wrap_array(end[:, 0] - start[:, 0]) * self.kx
        seg_dy = (end[:, 1] - start[:, 1]) * self.ky
        seg_len2 = seg_dx * seg_dx + seg_dy * seg_dy

        degenerate = seg_len2 == 0
        numerator = (
            _wrap_array(px - start[:, 0]) * self.kx * seg_dx
            + (py - start[:, 1]) * self.ky * seg_dy
        )
        t = np.where(degenerate, 0.0, numerator / np.where(degenerate, 1.0, seg_len2))

        # t > 1 snaps to the segment end, 0 < t <= 1 interpolates, else start
        x = np.where(t > 1, end[:, 0], np.where(t > 0, start[:, 0] + seg_dx / self.kx * t, start[:, 0]))
        y = np.where(t > 1, end[:, 1], np.where(t > 0, start[:, 1] + seg_dy / self.ky * t, start[:, 1]))

        dx = _wrap_array(px - x) * self.kx
        dy = (py - y) * self.ky
        index = int(np.argmin(dx * dx + dy * dy))

        nearest = (float(x[index]), float(y[index]))
        return nearest, index, float(min(1.0, max(0.0, t[index])))
