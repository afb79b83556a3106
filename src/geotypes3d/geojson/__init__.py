from __future__ import annotations

from geotypes3d.geojson.export import (
    collection_to_feature_collection,
    dumps,
    geometries_to_dict,
    geometry_to_dict,
    make_feature,
    make_geojson,
)
from geotypes3d.geojson.load import (
    dict_to_geometry,
    geojson_to_collection,
    geojson_to_geometry,
    loads,
)

__all__ = [
    "collection_to_feature_collection",
    "dict_to_geometry",
    "dumps",
    "geojson_to_collection",
    "geojson_to_geometry",
    "geometries_to_dict",
    "geometry_to_dict",
    "loads",
    "make_feature",
    "make_geojson",
]
