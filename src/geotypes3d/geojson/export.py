from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, cast, overload

from geotypes3d.geojson.typing import (
    FeatureDict,
    GeoJSONDict,
    GeometryCollectionDict,
    GeometryDict,
    LineStringCoordinates,
    LineStringDict,
    MultiLineStringCoordinates,
    MultiLineStringDict,
    MultiPointDict,
    MultiPolygonDict,
    PointDict,
    PolygonCoordinates,
    PolygonDict,
    Position,
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
    iter_geometries,
)
from geotypes3d.numeric import to_f64
from geotypes3d.utils import format_type_error

__all__ = [
    "collection_to_feature_collection",
    "dumps",
    "geometries_to_dict",
    "geometry_to_dict",
    "make_feature",
    "make_geojson",
]


def _coord_z_to_position(coord: CoordZ[Any]) -> Position:
    return [to_f64(coord.x), to_f64(coord.y), to_f64(coord.z)]


def _coord_to_position(coord: Coord[Any]) -> Position:
    return [to_f64(coord.x), to_f64(coord.y)]


def _line_string_z_to_coordinates(
    line_string: LineStringZ[Any] | Iterable[CoordZ[Any]],
) -> LineStringCoordinates:
    return list(map(_coord_z_to_position, line_string))


def _line_string_to_coordinates(
    line_string: LineString[Any] | Iterable[Coord[Any]],
) -> LineStringCoordinates:
    return list(map(_coord_to_position, line_string))


def _polygon_z_to_coordinates(polygon: PolygonZ[Any]) -> PolygonCoordinates:
    # The exterior is ring 0 even when it is empty
    return list(map(_line_string_z_to_coordinates, polygon.rings()))


def _polygon_to_coordinates(polygon: Polygon[Any]) -> PolygonCoordinates:
    return list(map(_line_string_to_coordinates, polygon.rings()))


def _multi_line_string_z_to_coordinates(
    multi_line_string: MultiLineStringZ[Any],
) -> MultiLineStringCoordinates:
    return list(map(_line_string_z_to_coordinates, multi_line_string))


@overload
def geometry_to_dict(geometry: PointZ[Any] | Point[Any]) -> PointDict: ...


@overload
def geometry_to_dict(geometry: MultiPointZ[Any] | MultiPoint[Any]) -> MultiPointDict: ...


@overload
def geometry_to_dict(
    geometry: LineStringZ[Any] | LineZ[Any] | LineString[Any] | Line[Any],
) -> LineStringDict: ...


@overload
def geometry_to_dict(
    geometry: MultiLineStringZ[Any] | MultiLineString[Any],
) -> MultiLineStringDict: ...


@overload
def geometry_to_dict(
    geometry: PolygonZ[Any] | Triangle[Any] | Polygon[Any] | Rect[Any],
) -> PolygonDict: ...


@overload
def geometry_to_dict(
    geometry: MultiPolygonZ[Any] | MultiPolygon[Any],
) -> MultiPolygonDict: ...


@overload
def geometry_to_dict(geometry: GeometryCollection[Any]) -> GeometryCollectionDict: ...


@overload
def geometry_to_dict(geometry: Geometry) -> GeometryDict: ...


def geometry_to_dict(geometry: Geometry | Triangle[Any]) -> GeometryDict:
    """
    Convert a geometry into a GeoJSON geometry dict

    Three-axis variants give [x, y, z] positions, legacy variants [x, y].
    Scalars are converted to float. Line and LineZ become a LineString,
    Rect and Triangle become a closed single-ring Polygon.

    Parameters
    ----------
    geometry : Geometry or Triangle
        Geometry to convert.

    Returns
    -------
    geometry_dict : GeometryDict
        A new dict sharing nothing with geometry.
    """
    match geometry:
        case PointZ():
            kind = "Point"
            coordinates: Any = _coord_z_to_position(geometry.coord)
        case LineZ():
            kind = "LineString"
            coordinates = _line_string_z_to_coordinates([geometry.start, geometry.end])
        case LineStringZ():
            kind = "LineString"
            coordinates = _line_string_z_to_coordinates(geometry)
        case PolygonZ():
            kind = "Polygon"
            coordinates = _polygon_z_to_coordinates(geometry)
        case Triangle():
            kind = "Polygon"
            coordinates = _polygon_z_to_coordinates(geometry.to_polygon())
        case MultiPointZ():
            kind = "MultiPoint"
            coordinates = [_coord_z_to_position(point.coord) for point in geometry]
        case MultiLineStringZ():
            kind = "MultiLineString"
            coordinates = _multi_line_string_z_to_coordinates(geometry)
        case MultiPolygonZ():
            kind = "MultiPolygon"
            coordinates = list(map(_polygon_z_to_coordinates, geometry))
        case GeometryCollection():
            return {
                "type": "GeometryCollection",
                "geometries": list(map(geometry_to_dict, geometry)),
            }
        case Point():
            kind = "Point"
            coordinates = _coord_to_position(geometry.coord)
        case Line():
            kind = "LineString"
            coordinates = _line_string_to_coordinates([geometry.start, geometry.end])
        case LineString():
            kind = "LineString"
            coordinates = _line_string_to_coordinates(geometry)
        case Polygon():
            kind = "Polygon"
            coordinates = _polygon_to_coordinates(geometry)
        case Rect():
            kind = "Polygon"
            coordinates = _polygon_to_coordinates(geometry.to_polygon())
        case MultiPoint():
            kind = "MultiPoint"
            coordinates = [_coord_to_position(point.coord) for point in geometry]
        case MultiLineString():
            kind = "MultiLineString"
            coordinates = list(map(_line_string_to_coordinates, geometry))
        case MultiPolygon():
            kind = "MultiPolygon"
            coordinates = list(map(_polygon_to_coordinates, geometry))
        case _:
            raise TypeError(
                format_type_error("geometry", geometry, ["Geometry", Triangle])
            )

    return cast(GeometryDict, {"type": kind, "coordinates": coordinates})


def geometries_to_dict(geometries: Iterable[Geometry]) -> GeometryCollectionDict:
    """Build a GeoJSON GeometryCollection dict out of any iterable of geometries"""
    return {
        "type": "GeometryCollection",
        "geometries": list(map(geometry_to_dict, iter_geometries(geometries))),
    }


def make_feature(
    geometry_dict: GeometryDict | None, properties: Mapping[str, Any] | None = None
) -> FeatureDict:
    """Build a GeoJSON feature dict out of a geometry dict and a properties dict"""
    if properties is None:
        properties = {}
    elif not isinstance(properties, dict):
        properties = dict(properties)

    return {"type": "Feature", "geometry": geometry_dict, "properties": properties}


def make_geojson(features: Iterable[FeatureDict]) -> GeoJSONDict:
    """Build a GeoJSON FeatureCollection dict out of feature dicts"""
    if not isinstance(features, list):
        features = list(features)
    return {"type": "FeatureCollection", "features": features}


def collection_to_feature_collection(
    collection: GeometryCollection[Any],
) -> GeoJSONDict:
    """Wrap every member of a collection in a feature with empty properties"""
    if not isinstance(collection, GeometryCollection):
        raise TypeError(
            format_type_error("collection", collection, GeometryCollection)
        )
    return make_geojson(make_feature(geometry_to_dict(g)) for g in collection)


def dumps(geometry: Geometry | Triangle[Any], **kwargs: Any) -> str:
    """
    Serialize a geometry to a GeoJSON string

    Keyword arguments are passed to json.dumps.
    """
    return json.dumps(geometry_to_dict(geometry), **kwargs)
