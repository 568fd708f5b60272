"""
Configuration schema for the sextant CLI.

Defines the global settings file and the evaluation job file: the
expression to parse, the tile it is evaluated in, and the decoded
features to measure.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from sextant_tile import EXTENT, CanonicalTileID, FeatureType, GeometryTileFeature

FEATURE_TYPES = {
    "Unknown": FeatureType.UNKNOWN,
    "Point": FeatureType.POINT,
    "LineString": FeatureType.LINESTRING,
    "Polygon": FeatureType.POLYGON,
}


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


@dataclass(frozen=True)
class SextantConfig:
    """Global settings (logging, tile extent)."""

    log_level: str = "INFO"
    tile_extent: int = EXTENT

    def __post_init__(self):
        """Validate settings."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if self.log_level not in valid_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {valid_levels}"
            )

        if self.tile_extent <= 0:
            raise ValueError(
                f"tile_extent must be positive, got {self.tile_extent}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "SextantConfig":
        """
        Load settings from YAML.

        Example YAML:
            log_level: "DEBUG"
            tile_extent: 4096
        """
        data = _load_yaml(yaml_path)
        return cls(
            log_level=data.get("log_level", "INFO"),
            tile_extent=data.get("tile_extent", EXTENT),
        )


@dataclass(frozen=True)
class FeatureConfig:
    """Decoded tile feature (type tag + tile-local parts)."""

    type: str
    geometry: List[List[Tuple[int, int]]]
    properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate feature configuration."""
        if self.type not in FEATURE_TYPES:
            raise ValueError(
                f"Invalid feature type: {self.type}. "
                f"Must be one of {set(FEATURE_TYPES)}"
            )
        if not self.geometry:
            raise ValueError("Feature geometry must have at least one part")

    def to_tile_feature(self) -> GeometryTileFeature:
        return GeometryTileFeature(
            type=FEATURE_TYPES[self.type],
            geometry=tuple(tuple(tuple(p) for p in part) for part in self.geometry),
            properties=dict(self.properties),
        )


@dataclass(frozen=True)
class JobConfig:
    """
    Evaluation job: one expression, one tile, any number of features.

    Immutable after construction (frozen dataclass).
    """

    expression: List[Any]
    tile: CanonicalTileID
    features: List[FeatureConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate job configuration."""
        if not isinstance(self.expression, list) or not self.expression:
            raise ValueError("expression must be a non-empty array")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "JobConfig":
        """
        Load a job from YAML.

        Example YAML:
            expression:
              - distance
              - type: Point
                coordinates: [13.4, 52.5]
              - Kilometers

            tile: [14, 8800, 5373]

            features:
              - type: Point
                geometry: [[[100, 200]]]
              - type: LineString
                geometry: [[[0, 0], [4096, 4096]]]
        """
        data = _load_yaml(yaml_path)

        if "expression" not in data:
            raise ValueError("Job config requires an 'expression'")
        if "tile" not in data:
            raise ValueError("Job config requires a 'tile' as [z, x, y]")

        features = [
            FeatureConfig(
                type=f["type"],
                geometry=[[tuple(p) for p in part] for part in f["geometry"]],
                properties=f.get("properties") or {},
            )
            for f in data.get("features", [])
        ]

        return cls(
            expression=data["expression"],
            tile=CanonicalTileID.from_sequence(data["tile"]),
            features=features,
        )
