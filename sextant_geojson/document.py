"""
GeoJSON Document Module
=======================

Converts plain mappings into GeoJSON documents and back.

Design:
- Geometries are shapely objects (shape()/mapping() do the heavy lifting)
- Feature and FeatureCollection are frozen dataclasses
- Type names are case-sensitive, as in RFC 7946
- Encoding yields JSON-compatible values only (dict, list, float, str)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry

GEOMETRY_TYPES = {
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
}


class GeoJSONError(ValueError):
    """Raised when a value cannot be converted to or from GeoJSON."""
    pass


@dataclass(frozen=True)
class Feature:
    """
    Immutable GeoJSON feature.

    Attributes:
        geometry: Shapely geometry, or None for a null geometry
        properties: Feature properties (treated as read-only)
        id: Optional feature identifier (string or number)
    """
    geometry: Optional[BaseGeometry]
    properties: Mapping[str, Any] = field(default_factory=dict)
    id: Optional[Union[str, int, float]] = None


@dataclass(frozen=True)
class FeatureCollection:
    """Immutable, ordered GeoJSON feature collection."""
    features: Tuple[Feature, ...] = ()


GeoJSON = Union[BaseGeometry, Feature, FeatureCollection]


def _parse_geometry(value: Mapping[str, Any]) -> BaseGeometry:
    geom_type = value.get("type")
    if geom_type not in GEOMETRY_TYPES:
        raise GeoJSONError(f"{geom_type} is not a supported GeoJSON geometry type")

    if geom_type == "GeometryCollection":
        geometries = value.get("geometries")
        if not isinstance(geometries, list):
            raise GeoJSONError("GeometryCollection must have a geometries property")
        for member in geometries:
            if not isinstance(member, Mapping):
                raise GeoJSONError("GeometryCollection members must be objects")
            _parse_geometry(member)
    elif not isinstance(value.get("coordinates"), list):
        raise GeoJSONError(f"{geom_type} geometry must have a coordinates property")

    try:
        return shape(value)
    except (ShapelyError, ValueError, TypeError, IndexError, KeyError) as e:
        raise GeoJSONError(f"Invalid {geom_type} coordinates: {e}") from e


def _parse_feature(value: Mapping[str, Any]) -> Feature:
    if "geometry" not in value:
        raise GeoJSONError("Feature must have a geometry property")

    raw_geometry = value["geometry"]
    if raw_geometry is None:
        geometry = None
    elif isinstance(raw_geometry, Mapping):
        geometry = _parse_geometry(raw_geometry)
    else:
        raise GeoJSONError("Feature geometry must be an object or null")

    properties = value.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise GeoJSONError("Feature properties must be an object or null")

    feature_id = value.get("id")
    if feature_id is not None and (
        isinstance(feature_id, bool) or not isinstance(feature_id, (str, int, float))
    ):
        raise GeoJSONError("Feature id must be a string or number")

    return Feature(geometry=geometry, properties=dict(properties), id=feature_id)


def to_geojson(value: Any) -> GeoJSON:
    """
    Convert a plain mapping into a GeoJSON document.

    Args:
        value: Mapping shaped like a GeoJSON object

    Returns:
        Shapely geometry, Feature or FeatureCollection

    Raises:
        GeoJSONError: If the mapping is not valid GeoJSON
    """
    if not isinstance(value, Mapping):
        raise GeoJSONError("GeoJSON must be an object")
    if "type" not in value:
        raise GeoJSONError("GeoJSON must have a type property")

    doc_type = value["type"]
    if doc_type == "FeatureCollection":
        features = value.get("features")
        if not isinstance(features, list):
            raise GeoJSONError("FeatureCollection must have a features property")
        parsed = []
        for raw in features:
            if not isinstance(raw, Mapping) or raw.get("type") != "Feature":
                raise GeoJSONError("FeatureCollection members must be Feature objects")
            parsed.append(_parse_feature(raw))
        return FeatureCollection(features=tuple(parsed))

    if doc_type == "Feature":
        return _parse_feature(value)

    return _parse_geometry(value)


def _to_plain(value: Any) -> Any:
    """Recursively turn tuples into lists."""
    if isinstance(value, (tuple, list)):
        return [_to_plain(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _to_plain(v) for k, v in value.items()}
    return value


def _encode_geometry(geometry: Optional[BaseGeometry]) -> Optional[Dict[str, Any]]:
    if geometry is None:
        return None
    if geometry.geom_type == "GeometryCollection":
        return {
            "type": "GeometryCollection",
            "geometries": [_encode_geometry(g) for g in geometry.geoms],
        }
    encoded = mapping(geometry)
    return {
        "type": encoded["type"],
        "coordinates": _to_plain(encoded["coordinates"]),
    }


def _encode_feature(feature: Feature) -> Dict[str, Any]:
    encoded = {
        "type": "Feature",
        "geometry": _encode_geometry(feature.geometry),
        "properties": _to_plain(dict(feature.properties)),
    }
    if feature.id is not None:
        encoded["id"] = feature.id
    return encoded


def from_geojson(document: GeoJSON) -> Dict[str, Any]:
    """
    Encode a GeoJSON document into plain JSON-compatible values.

    Args:
        document: Shapely geometry, Feature or FeatureCollection

    Returns:
        Dictionary ready for json.dumps()

    Raises:
        GeoJSONError: If the document is not a supported GeoJSON object
    """
    if isinstance(document, FeatureCollection):
        return {
            "type": "FeatureCollection",
            "features": [_encode_feature(f) for f in document.features],
        }
    if isinstance(document, Feature):
        return _encode_feature(document)
    if isinstance(document, BaseGeometry):
        return _encode_geometry(document)
    raise GeoJSONError(f"Cannot encode {type(document).__name__} as GeoJSON")
