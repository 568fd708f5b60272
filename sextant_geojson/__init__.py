"""
GeoJSON Layer
=============

Bounded Context: GeoJSON documents embedded in style expressions.

Public API
----------
    Feature, FeatureCollection: Immutable document types
    GeoJSON: Union of geometry, Feature and FeatureCollection
    GeoJSONError: Conversion failure
    to_geojson / from_geojson: Mapping <-> document conversion
"""

from sextant_geojson.document import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GeoJSONError,
    from_geojson,
    to_geojson,
)

__all__ = [
    "Feature",
    "FeatureCollection",
    "GeoJSON",
    "GeoJSONError",
    "from_geojson",
    "to_geojson",
]
