"""
Adapters between geotypes3d geometries and shapely geometries.

Three-axis variants map to shapely geometries with Z, legacy variants to
two-dimensional ones. shapely closes polygon rings on construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import shapely
from shapely.geometry.base import BaseGeometry

from geotypes3d.conf import config
from geotypes3d.geometry import (
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
)
from geotypes3d.numeric import from_f64, is_float_type, to_f64
from geotypes3d.utils import format_type_error

__all__ = ["from_shapely", "to_shapely"]


def _to_tuples(coords: Iterable[Iterable[Any]]) -> list[tuple[float, ...]]:
    return [tuple(map(to_f64, coord)) for coord in coords]


def _polygon_to_shapely(polygon: PolygonZ[Any] | Polygon[Any]) -> shapely.Polygon:
    if len(polygon.exterior) == 0:
        if len(polygon.interiors) > 0:
            raise ValueError("a polygon with interiors needs a non-empty exterior")
        return shapely.Polygon()
    return shapely.Polygon(
        _to_tuples(polygon.exterior), list(map(_to_tuples, polygon.interiors))
    )


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """
    Convert a geometry into a shapely geometry

    Parameters
    ----------
    geometry : Geometry
        Geometry to convert. Rect becomes a Polygon.

    Returns
    -------
    geometry : BaseGeometry
        Has Z exactly when geometry is a three-axis variant.
    """
    match geometry:
        case PointZ() | Point():
            return shapely.Point(_to_tuples([geometry.coord])[0])
        case LineZ() | Line():
            return shapely.LineString(_to_tuples([geometry.start, geometry.end]))
        case LineStringZ() | LineString():
            if len(geometry) == 0:
                return shapely.LineString()
            if len(geometry) == 1:
                raise ValueError("shapely needs at least 2 coordinates in a LineString")
            return shapely.LineString(_to_tuples(geometry))
        case PolygonZ() | Polygon():
            return _polygon_to_shapely(geometry)
        case Rect():
            return _polygon_to_shapely(geometry.to_polygon())
        case MultiPointZ() | MultiPoint():
            if len(geometry) == 0:
                return shapely.MultiPoint()
            return shapely.MultiPoint(_to_tuples(point.coord for point in geometry))
        case MultiLineStringZ() | MultiLineString():
            if len(geometry) == 0:
                return shapely.MultiLineString()
            if any(len(line_string) == 0 for line_string in geometry):
                raise ValueError("shapely cannot hold an empty MultiLineString member")
            return shapely.MultiLineString(list(map(to_shapely, geometry)))
        case MultiPolygonZ() | MultiPolygon():
            if len(geometry) == 0:
                return shapely.MultiPolygon()
            if any(len(polygon.exterior) == 0 for polygon in geometry):
                raise ValueError("shapely cannot hold an empty MultiPolygon member")
            return shapely.MultiPolygon(list(map(_polygon_to_shapely, geometry)))
        case GeometryCollection():
            if len(geometry) == 0:
                return shapely.GeometryCollection()
            return shapely.GeometryCollection(list(map(to_shapely, geometry)))
        case _:
            raise TypeError(format_type_error("geometry", geometry, "Geometry"))


def _get_coords(geometry: BaseGeometry, has_z: bool, dtype: type) -> list[tuple]:
    array = shapely.get_coordinates(geometry, include_z=has_z)
    return [tuple(from_f64(value, dtype) for value in row) for row in array.tolist()]


def from_shapely(geometry: BaseGeometry, *, dtype: type | None = None) -> Geometry:
    """
    Convert a shapely geometry into a geometry

    Geometries with Z give three-axis variants, the others legacy ones.
    Empty shapely geometries carry no Z and give empty legacy variants.

    Parameters
    ----------
    geometry : BaseGeometry
        shapely geometry. Empty points are not supported.

    dtype : type, optional
        Floating scalar type of the coordinates. Defaults to
        config.default_dtype.

    Returns
    -------
    geometry : Geometry
    """
    if dtype is None:
        dtype = config.default_dtype
    elif not is_float_type(dtype):
        raise TypeError(format_type_error("dtype", dtype, "floating scalar type"))

    if not isinstance(geometry, BaseGeometry):
        raise TypeError(format_type_error("geometry", geometry, BaseGeometry))
    has_z = bool(shapely.has_z(geometry))

    def convert_parts(geometry: BaseGeometry) -> tuple[Geometry, ...]:
        return tuple(from_shapely(part, dtype=dtype) for part in geometry.geoms)

    match geometry:
        case shapely.Point():
            if geometry.is_empty:
                raise ValueError("empty points are not supported")
            coord = _get_coords(geometry, has_z, dtype)[0]
            return PointZ.from_coord(coord) if has_z else Point.from_coord(coord)
        case shapely.LineString():
            coords = _get_coords(geometry, has_z, dtype)
            return LineStringZ(tuple(coords)) if has_z else LineString(tuple(coords))
        case shapely.Polygon():
            if geometry.is_empty:
                return PolygonZ() if has_z else Polygon()
            rings = [
                _get_coords(ring, has_z, dtype)
                for ring in [geometry.exterior, *geometry.interiors]
            ]
            if has_z:
                return PolygonZ.from_rings([LineStringZ(tuple(r)) for r in rings])
            return Polygon(
                LineString(tuple(rings[0])),
                tuple(LineString(tuple(r)) for r in rings[1:]),
            )
        case shapely.MultiPoint():
            parts = convert_parts(geometry)
            return MultiPointZ(parts) if has_z else MultiPoint(parts)
        case shapely.MultiLineString():
            parts = convert_parts(geometry)
            return MultiLineStringZ(parts) if has_z else MultiLineString(parts)
        case shapely.MultiPolygon():
            parts = convert_parts(geometry)
            return MultiPolygonZ(parts) if has_z else MultiPolygon(parts)
        case shapely.GeometryCollection():
            return GeometryCollection(convert_parts(geometry))
        case _:
            raise TypeError(format_type_error("geometry", geometry, BaseGeometry))
