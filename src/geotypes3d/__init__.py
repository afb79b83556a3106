from __future__ import annotations

from loguru import logger

from geotypes3d.conf import config
from geotypes3d.errors import (
    ErrorKind,
    FeatureHasNoGeometryError,
    GeoJSONError,
    GeometryError,
    InvalidGeometryConversionError,
    MismatchedGeometryError,
    WKTError,
)
from geotypes3d.geojson import (
    dict_to_geometry,
    geojson_to_collection,
    geojson_to_geometry,
    geometry_to_dict,
)
from geotypes3d.geometry import (
    Coord,
    CoordZ,
    Geometry,
    GeometryCollection,
    Line,
    LineString,
    LineStringZ,
    LineZ,
    MultiLineString,
    MultiLineStringZ,
    MultiPoint,
    MultiPointZ,
    MultiPolygon,
    MultiPolygonZ,
    Point,
    PointZ,
    Polygon,
    PolygonZ,
    Rect,
    Triangle,
    downcast,
    drop_z,
    lift_z,
)
from geotypes3d.wkt import parse_wkt

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "CoordZ",
    "ErrorKind",
    "FeatureHasNoGeometryError",
    "GeoJSONError",
    "Geometry",
    "GeometryCollection",
    "GeometryError",
    "InvalidGeometryConversionError",
    "Line",
    "LineString",
    "LineStringZ",
    "LineZ",
    "MismatchedGeometryError",
    "MultiLineString",
    "MultiLineStringZ",
    "MultiPoint",
    "MultiPointZ",
    "MultiPolygon",
    "MultiPolygonZ",
    "Point",
    "PointZ",
    "Polygon",
    "PolygonZ",
    "Rect",
    "Triangle",
    "WKTError",
    "config",
    "dict_to_geometry",
    "downcast",
    "drop_z",
    "geojson_to_collection",
    "geojson_to_geometry",
    "geometry_to_dict",
    "lift_z",
    "parse_wkt",
]

# Library code stays silent until the application calls logger.enable("geotypes3d")
logger.disable("geotypes3d")
