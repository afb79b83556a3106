from __future__ import annotations

from typing import TYPE_CHECKING, Literal, TypeAlias, TypeVar

if TYPE_CHECKING:
    from geotypes3d.numeric import CoordFloat, CoordNum

__all__ = ["F", "GeometryKind", "MissingZPolicy", "R", "T"]

# Bounds are forward references, resolved only by type checkers
T = TypeVar("T", bound="CoordNum")
F = TypeVar("F", bound="CoordFloat")
R = TypeVar("R")

# TODO: switch to the 3.12 type statement once 3.10/3.11 support is dropped
GeometryKind: TypeAlias = Literal[
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
]
MissingZPolicy: TypeAlias = Literal["zero", "error"]
