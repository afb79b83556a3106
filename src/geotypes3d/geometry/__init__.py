from __future__ import annotations

from geotypes3d.geometry.collection import (
    GEOMETRY_TYPES,
    Geometry,
    GeometryCollection,
    downcast,
    drop_z,
    is_geometry,
    iter_geometries,
    lift_z,
    type_name,
)
from geotypes3d.geometry.coord import Coord, CoordZ, as_coord, as_coord_z
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
from geotypes3d.geometry.primitives import (
    LineStringZ,
    LineZ,
    PointZ,
    PolygonZ,
    Triangle,
)

__all__ = [
    "GEOMETRY_TYPES",
    "Coord",
    "CoordZ",
    "Geometry",
    "GeometryCollection",
    "Line",
    "LineString",
    "LineStringZ",
    "LineZ",
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
    "as_coord",
    "as_coord_z",
    "downcast",
    "drop_z",
    "is_geometry",
    "iter_geometries",
    "lift_z",
    "type_name",
]
