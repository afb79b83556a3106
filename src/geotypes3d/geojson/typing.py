from __future__ import annotations

from typing import Any, Literal, TypeAlias, Union

from typing_extensions import NotRequired, TypedDict

__all__ = [
    "FeatureDict",
    "GeoJSONDict",
    "GeoJSONObject",
    "GeometryCollectionDict",
    "GeometryDict",
    "LineStringCoordinates",
    "LineStringDict",
    "MultiLineStringCoordinates",
    "MultiLineStringDict",
    "MultiPointCoordinates",
    "MultiPointDict",
    "MultiPolygonCoordinates",
    "MultiPolygonDict",
    "PointDict",
    "Position",
    "Position2D",
    "PositionZ",
    "PolygonCoordinates",
    "PolygonDict",
]

# Export writes lists, import also accepts tuples
PositionZ: TypeAlias = tuple[float, float, float]
Position2D: TypeAlias = tuple[float, float]
Position: TypeAlias = Union[list[float], PositionZ, Position2D]
MultiPointCoordinates: TypeAlias = list[Position]
LineStringCoordinates: TypeAlias = list[Position]
MultiLineStringCoordinates: TypeAlias = list[LineStringCoordinates]
PolygonCoordinates: TypeAlias = list[LineStringCoordinates]
MultiPolygonCoordinates: TypeAlias = list[PolygonCoordinates]


class PointDict(TypedDict, extra_items=Any):
    type: Literal["Point"]
    coordinates: Position
    bbox: NotRequired[list[float]]


class MultiPointDict(TypedDict, extra_items=Any):
    type: Literal["MultiPoint"]
    coordinates: MultiPointCoordinates
    bbox: NotRequired[list[float]]


class LineStringDict(TypedDict, extra_items=Any):
    type: Literal["LineString"]
    coordinates: LineStringCoordinates
    bbox: NotRequired[list[float]]


class MultiLineStringDict(TypedDict, extra_items=Any):
    type: Literal["MultiLineString"]
    coordinates: MultiLineStringCoordinates
    bbox: NotRequired[list[float]]


class PolygonDict(TypedDict, extra_items=Any):
    type: Literal["Polygon"]
    coordinates: PolygonCoordinates
    bbox: NotRequired[list[float]]


class MultiPolygonDict(TypedDict, extra_items=Any):
    type: Literal["MultiPolygon"]
    coordinates: MultiPolygonCoordinates
    bbox: NotRequired[list[float]]


# X | Y does not accept the forward reference
GeometryDict: TypeAlias = Union[
    PointDict,
    MultiPointDict,
    LineStringDict,
    MultiLineStringDict,
    PolygonDict,
    MultiPolygonDict,
    "GeometryCollectionDict",
]


class GeometryCollectionDict(TypedDict, extra_items=Any):
    type: Literal["GeometryCollection"]
    geometries: list[GeometryDict]
    bbox: NotRequired[list[float]]


class FeatureDict(TypedDict, extra_items=Any):
    type: Literal["Feature"]
    geometry: GeometryDict | None
    properties: dict[str, Any] | None
    bbox: NotRequired[list[float]]


class GeoJSONDict(TypedDict, extra_items=Any):
    type: Literal["FeatureCollection"]
    features: list[FeatureDict]
    bbox: NotRequired[list[float]]


# Any top-level document
GeoJSONObject: TypeAlias = Union[GeometryDict, FeatureDict, GeoJSONDict]
