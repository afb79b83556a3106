from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar, Union

from geotypes3d.errors import MismatchedGeometryError
from geotypes3d.geometry.coord import Coord, CoordZ
from geotypes3d.geometry.legacy import (
    Line,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Rect,
)
from geotypes3d.geometry.multi import MultiLineStringZ, MultiPointZ, MultiPolygonZ
from geotypes3d.geometry.primitives import LineStringZ, LineZ, PointZ, PolygonZ
from geotypes3d.typing import T
from geotypes3d.utils import format_type_error, full_name

__all__ = [
    "GEOMETRY_TYPES",
    "Geometry",
    "GeometryCollection",
    "downcast",
    "drop_z",
    "is_geometry",
    "iter_geometries",
    "lift_z",
    "type_name",
]

# X | Y does not accept the forward reference
Geometry: TypeAlias = Union[
    PointZ,
    LineZ,
    LineStringZ,
    PolygonZ,
    MultiPointZ,
    MultiLineStringZ,
    MultiPolygonZ,
    "GeometryCollection",
    Point,
    Line,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    Rect,
]

GeometryT = TypeVar("GeometryT")


@dataclass(frozen=True)
class GeometryCollection(Generic[T]):
    """
    An ordered, possibly empty collection of Geometry

    Members may themselves be GeometryCollections.
    """

    geometries: tuple[Geometry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "geometries", tuple(iter_geometries(self.geometries)))

    @classmethod
    def empty(cls) -> GeometryCollection[Any]:
        return cls()

    def is_empty(self) -> bool:
        return len(self.geometries) == 0

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.geometries)

    def __getitem__(self, index: int) -> Geometry:
        return self.geometries[index]


GEOMETRY_TYPES: tuple[type, ...] = (
    PointZ,
    LineZ,
    LineStringZ,
    PolygonZ,
    MultiPointZ,
    MultiLineStringZ,
    MultiPolygonZ,
    GeometryCollection,
    Point,
    Line,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    Rect,
)


def is_geometry(obj: Any) -> bool:
    """Whether obj is one of the Geometry variants"""
    return isinstance(obj, GEOMETRY_TYPES)


def type_name(obj: Any) -> str:
    """Fully qualified name of a class, or of the class of an instance"""
    if not isinstance(obj, type):
        obj = type(obj)
    return full_name(obj)


def downcast(geometry: Geometry, cls: type[GeometryT]) -> GeometryT:
    """
    Extract a concrete variant out of a Geometry

    Parameters
    ----------
    geometry : Geometry
        Any Geometry variant.

    cls : type
        The variant the caller expects. Subclasses do not match.

    Returns
    -------
    geometry : cls
        The same object, narrowed to cls.

    Raises
    ------
    MismatchedGeometryError
        geometry holds another variant.
    """
    if not is_geometry(geometry):
        raise TypeError(format_type_error("geometry", geometry, "Geometry"))
    if cls not in GEOMETRY_TYPES:
        raise TypeError(format_type_error("cls", cls, "Geometry variant class"))
    if type(geometry) is not cls:
        raise MismatchedGeometryError(type_name(cls), type_name(geometry))
    return geometry  # type: ignore[return-value]


def _lift(coord: Coord[Any], z: Any) -> CoordZ[Any]:
    if z is None:
        z = type(coord.x)(0)
    return CoordZ(coord.x, coord.y, z)


def _lift_line_string(line_string: LineString[Any], z: Any) -> LineStringZ[Any]:
    return LineStringZ(tuple(_lift(coord, z) for coord in line_string))


def _lift_polygon(polygon: Polygon[Any], z: Any) -> PolygonZ[Any]:
    return PolygonZ(
        _lift_line_string(polygon.exterior, z),
        tuple(_lift_line_string(interior, z) for interior in polygon.interiors),
    )


def lift_z(geometry: Geometry, z: Any = None) -> Geometry:
    """
    Promote legacy two-axis variants to their three-axis counterparts

    Current variants are returned unchanged, collections are lifted member
    by member. Rect becomes a PolygonZ.

    Parameters
    ----------
    geometry : Geometry
        Geometry to lift.

    z : scalar, optional
        Value of the new axis. Defaults to the zero of each coordinate's
        x type.

    Returns
    -------
    geometry : Geometry
        A geometry made only of current variants.
    """
    match geometry:
        case Point():
            return PointZ.from_coord(_lift(geometry.coord, z))
        case Line():
            return LineZ(_lift(geometry.start, z), _lift(geometry.end, z))
        case LineString():
            return _lift_line_string(geometry, z)
        case Polygon():
            return _lift_polygon(geometry, z)
        case MultiPoint():
            return MultiPointZ(
                tuple(PointZ.from_coord(_lift(p.coord, z)) for p in geometry)
            )
        case MultiLineString():
            return MultiLineStringZ(
                tuple(_lift_line_string(line_string, z) for line_string in geometry)
            )
        case MultiPolygon():
            return MultiPolygonZ(
                tuple(_lift_polygon(polygon, z) for polygon in geometry)
            )
        case Rect():
            return _lift_polygon(geometry.to_polygon(), z)
        case GeometryCollection():
            return GeometryCollection(tuple(lift_z(g, z) for g in geometry))
        case (
            PointZ()
            | LineZ()
            | LineStringZ()
            | PolygonZ()
            | MultiPointZ()
            | MultiLineStringZ()
            | MultiPolygonZ()
        ):
            return geometry
        case _:
            raise TypeError(format_type_error("geometry", geometry, "Geometry"))


def _drop(coord: CoordZ[Any]) -> Coord[Any]:
    return Coord(coord.x, coord.y)


def _drop_line_string(line_string: LineStringZ[Any]) -> LineString[Any]:
    return LineString(tuple(map(_drop, line_string)))


def _drop_polygon(polygon: PolygonZ[Any]) -> Polygon[Any]:
    return Polygon(
        _drop_line_string(polygon.exterior),
        tuple(map(_drop_line_string, polygon.interiors)),
    )


def drop_z(geometry: Geometry) -> Geometry:
    """Demote three-axis variants to legacy ones, discarding z"""
    match geometry:
        case PointZ():
            return Point(geometry.x, geometry.y)
        case LineZ():
            return Line(_drop(geometry.start), _drop(geometry.end))
        case LineStringZ():
            return _drop_line_string(geometry)
        case PolygonZ():
            return _drop_polygon(geometry)
        case MultiPointZ():
            return MultiPoint(tuple(Point(p.x, p.y) for p in geometry))
        case MultiLineStringZ():
            return MultiLineString(tuple(map(_drop_line_string, geometry)))
        case MultiPolygonZ():
            return MultiPolygon(tuple(map(_drop_polygon, geometry)))
        case GeometryCollection():
            return GeometryCollection(tuple(map(drop_z, geometry)))
        case (
            Point()
            | Line()
            | LineString()
            | Polygon()
            | MultiPoint()
            | MultiLineString()
            | MultiPolygon()
            | Rect()
        ):
            return geometry
        case _:
            raise TypeError(format_type_error("geometry", geometry, "Geometry"))


def iter_geometries(geometries: Iterable[Any]) -> Iterator[Geometry]:
    """Iterate over geometries, checking that each one is a Geometry"""
    for geometry in geometries:
        if not is_geometry(geometry):
            raise TypeError(format_type_error("geometry", geometry, "Geometry"))
        yield geometry
