from __future__ import annotations

import json
from collections.abc import Mapping
from numbers import Real
from typing import Any, TypeVar, overload

from loguru import logger

from geotypes3d.conf import config
from geotypes3d.errors import (
    FeatureHasNoGeometryError,
    GeoJSONError,
    InvalidGeometryConversionError,
)
from geotypes3d.geojson.typing import GeoJSONObject, GeometryDict
from geotypes3d.geometry import (
    CoordZ,
    Geometry,
    GeometryCollection,
    LineStringZ,
    MultiLineStringZ,
    MultiPointZ,
    MultiPolygonZ,
    PointZ,
    PolygonZ,
)
from geotypes3d.numeric import from_f64, is_float_type
from geotypes3d.typing import GeometryKind, MissingZPolicy
from geotypes3d.utils import format_literal_error, format_type_error

__all__ = [
    "dict_to_geometry",
    "geojson_to_collection",
    "geojson_to_geometry",
    "loads",
]

GeometryT = TypeVar("GeometryT")

_KIND_TO_CLASS: dict[GeometryKind, type] = {
    "Point": PointZ,
    "MultiPoint": MultiPointZ,
    "LineString": LineStringZ,
    "MultiLineString": MultiLineStringZ,
    "Polygon": PolygonZ,
    "MultiPolygon": MultiPolygonZ,
    "GeometryCollection": GeometryCollection,
}
_CLASS_TO_KIND: dict[type, GeometryKind] = {
    cls: kind for kind, cls in _KIND_TO_CLASS.items()
}


def _kind_of_class(cls: type) -> GeometryKind:
    try:
        return _CLASS_TO_KIND[cls]
    except (KeyError, TypeError):
        raise TypeError(
            format_type_error("cls", cls, "importable Geometry variant class")
        ) from None


def _read_kind(value: Any) -> str:
    if not isinstance(value, Mapping):
        raise GeoJSONError(
            f"a GeoJSON object must be a mapping, got {type(value).__name__}"
        )
    kind = value.get("type")
    if kind is None:
        raise GeoJSONError("GeoJSON object has no type member")
    if not isinstance(kind, str):
        raise GeoJSONError(f"GeoJSON type must be a string, got {kind!r}")
    return kind


def _read_member(value: Mapping[str, Any], name: str, kind: str) -> list[Any]:
    if name not in value:
        raise GeoJSONError(f"{kind} has no {name} member")
    member = value[name]
    if not isinstance(member, (list, tuple)):
        raise GeoJSONError(
            f"{kind} {name} must be an array, got {type(member).__name__}"
        )
    return list(member)


class _Reader:
    """Builds three-axis variants out of GeoJSON values for one import call"""

    def __init__(self, dtype: type, missing_z: MissingZPolicy) -> None:
        self.dtype = dtype
        self.missing_z = missing_z

    def _array(self, value: Any, what: str) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise GeoJSONError(f"{what} must be an array, got {type(value).__name__}")
        return list(value)

    def _scalar(self, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise GeoJSONError(f"position element must be a number, got {value!r}")
        try:
            number = float(value)
        except OverflowError as e:
            raise GeoJSONError(f"position element {value!r} is out of range") from e
        return from_f64(number, self.dtype)

    def coord(self, value: Any) -> CoordZ[Any]:
        position = self._array(value, "position")
        match len(position):
            case 0 | 1:
                raise GeoJSONError(
                    f"position needs at least 2 elements, got {len(position)}"
                )
            case 2:
                if self.missing_z == "error":
                    raise GeoJSONError(f"position {position!r} has no z element")
                logger.debug("Position {} has no z element, using 0", position)
                x, y = map(self._scalar, position)
                z = from_f64(0.0, self.dtype)
            case _:
                x, y, z = map(self._scalar, position[:3])

        return CoordZ(x, y, z)

    def point(self, coordinates: Any) -> PointZ[Any]:
        return PointZ.from_coord(self.coord(coordinates))

    def line_string(self, coordinates: Any) -> LineStringZ[Any]:
        return LineStringZ(
            tuple(map(self.coord, self._array(coordinates, "line string")))
        )

    def polygon(self, coordinates: Any) -> PolygonZ[Any]:
        rings = self._array(coordinates, "polygon")
        return PolygonZ.from_rings(list(map(self.line_string, rings)))

    def multi_point(self, coordinates: Any) -> MultiPointZ[Any]:
        return MultiPointZ(
            tuple(map(self.point, self._array(coordinates, "multi point")))
        )

    def multi_line_string(self, coordinates: Any) -> MultiLineStringZ[Any]:
        return MultiLineStringZ(
            tuple(map(self.line_string, self._array(coordinates, "multi line string")))
        )

    def multi_polygon(self, coordinates: Any) -> MultiPolygonZ[Any]:
        return MultiPolygonZ(
            tuple(map(self.polygon, self._array(coordinates, "multi polygon")))
        )

    def geometry(self, value: Any) -> Geometry:
        kind = _read_kind(value)
        match kind:
            case "GeometryCollection":
                members = _read_member(value, "geometries", kind)
                # The first failing member aborts the whole collection
                return GeometryCollection(tuple(map(self.geometry, members)))
            case "Point":
                return self.point(_read_member(value, "coordinates", kind))
            case "MultiPoint":
                return self.multi_point(_read_member(value, "coordinates", kind))
            case "LineString":
                return self.line_string(_read_member(value, "coordinates", kind))
            case "MultiLineString":
                return self.multi_line_string(_read_member(value, "coordinates", kind))
            case "Polygon":
                return self.polygon(_read_member(value, "coordinates", kind))
            case "MultiPolygon":
                return self.multi_polygon(_read_member(value, "coordinates", kind))
            case "Feature" | "FeatureCollection":
                raise GeoJSONError(
                    f"expected a geometry object, got a {kind}; "
                    "use geojson_to_geometry or geojson_to_collection"
                )
            case _:
                raise GeoJSONError(f"unknown GeoJSON type: {kind!r}")

    def feature_geometry(self, feature: Any) -> Geometry | None:
        if _read_kind(feature) != "Feature":
            raise GeoJSONError(f"expected a Feature, got a {feature['type']}")
        geometry = feature.get("geometry")
        if geometry is None:
            return None
        return self.geometry(geometry)


def _make_reader(dtype: type | None, missing_z: MissingZPolicy | None) -> _Reader:
    if dtype is None:
        dtype = config.default_dtype
    elif not is_float_type(dtype):
        raise TypeError(format_type_error("dtype", dtype, "floating scalar type"))

    if missing_z is None:
        missing_z = config.missing_z
    elif missing_z not in {"zero", "error"}:
        raise ValueError(
            format_literal_error("missing_z", missing_z, ["zero", "error"])
        )

    return _Reader(dtype, missing_z)


@overload
def dict_to_geometry(
    value: GeometryDict,
    cls: None = None,
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> Geometry: ...


@overload
def dict_to_geometry(
    value: GeometryDict,
    cls: type[GeometryT],
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> GeometryT: ...


def dict_to_geometry(
    value: GeometryDict,
    cls: type | None = None,
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> Any:
    """
    Convert a GeoJSON geometry dict into a geometry

    Only three-axis variants and GeometryCollection are produced. No
    coercion between kinds is attempted.

    Parameters
    ----------
    value : GeometryDict
        A GeoJSON geometry object.

    cls : type, optional
        Concrete variant to import as: PointZ, LineStringZ, PolygonZ,
        MultiPointZ, MultiLineStringZ, MultiPolygonZ or GeometryCollection.
        The type member of value must name exactly that kind. By default
        whatever variant the type member names is returned.

    dtype : type, optional
        Floating scalar type of the coordinates. Defaults to
        config.default_dtype.

    missing_z : {'zero', 'error'}, optional
        What a two-element position does. Defaults to config.missing_z.

    Returns
    -------
    geometry : Geometry
        A new geometry tree sharing nothing with value.

    Raises
    ------
    InvalidGeometryConversionError
        The type member does not match cls.

    GeoJSONError
        value is structurally malformed.
    """
    expected = None if cls is None else _kind_of_class(cls)
    reader = _make_reader(dtype, missing_z)
    found = _read_kind(value)
    if expected is not None and found != expected:
        raise InvalidGeometryConversionError(expected, found)
    return reader.geometry(value)


def geojson_to_geometry(
    document: GeoJSONObject,
    cls: type | None = None,
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> Any:
    """
    Convert a GeoJSON geometry, Feature or FeatureCollection into a geometry

    A Feature imports its geometry and raises FeatureHasNoGeometryError
    when it has none. A FeatureCollection imports as a GeometryCollection,
    skipping features that have no geometry.

    Parameters are those of dict_to_geometry.
    """
    expected = None if cls is None else _kind_of_class(cls)
    match _read_kind(document):
        case "Feature":
            geometry = document.get("geometry")
            if geometry is None:
                raise FeatureHasNoGeometryError(document)
            return dict_to_geometry(geometry, cls, dtype=dtype, missing_z=missing_z)
        case "FeatureCollection":
            if expected is not None and expected != "GeometryCollection":
                raise InvalidGeometryConversionError(expected, "GeometryCollection")
            return geojson_to_collection(document, dtype=dtype, missing_z=missing_z)
        case _:
            return dict_to_geometry(document, cls, dtype=dtype, missing_z=missing_z)


def geojson_to_collection(
    document: GeoJSONObject,
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> GeometryCollection[Any]:
    """
    Convert any GeoJSON document into a GeometryCollection

    - geometry: a collection holding that one geometry
    - Feature with geometry: a collection holding its geometry
    - Feature without geometry: an empty collection
    - FeatureCollection: the geometries of the features that have one,
      in order

    Parameters are those of dict_to_geometry.
    """
    reader = _make_reader(dtype, missing_z)
    match _read_kind(document):
        case "FeatureCollection":
            features = _read_member(document, "features", "FeatureCollection")
            geometries: list[Geometry] = []
            for i, feature in enumerate(features):
                geometry = reader.feature_geometry(feature)
                if geometry is None:
                    logger.debug("Feature {} has no geometry, skipped", i)
                    continue
                geometries.append(geometry)
            return GeometryCollection(tuple(geometries))
        case "Feature":
            geometry = reader.feature_geometry(document)
            if geometry is None:
                logger.debug("Feature has no geometry, empty collection")
                return GeometryCollection()
            return GeometryCollection((geometry,))
        case _:
            return GeometryCollection((reader.geometry(document),))


def loads(
    s: str | bytes,
    cls: type | None = None,
    *,
    dtype: type | None = None,
    missing_z: MissingZPolicy | None = None,
) -> Any:
    """Parse a GeoJSON string with json.loads, then apply geojson_to_geometry"""
    try:
        document = json.loads(s)
    except json.JSONDecodeError as e:
        raise GeoJSONError(f"invalid JSON: {e}") from e
    return geojson_to_geometry(document, cls, dtype=dtype, missing_z=missing_z)
