"""
Legacy two-axis geometries.

Kept for producers and consumers that only know x and y. They are part of
the Geometry union and export with two-element positions, but importers
always build the three-axis variants.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic

from geotypes3d.geometry.coord import Coord, as_coord
from geotypes3d.typing import T
from geotypes3d.utils import format_type_error

__all__ = [
    "Line",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Rect",
]


@dataclass(frozen=True, init=False)
class Point(Generic[T]):
    coord: Coord[T]

    def __init__(self, x: T, y: T) -> None:
        object.__setattr__(self, "coord", Coord(x, y))

    @classmethod
    def from_coord(cls, coord: Any) -> Point[T]:
        coord = as_coord(coord)
        return cls(coord.x, coord.y)

    @property
    def x(self) -> T:
        return self.coord.x

    @property
    def y(self) -> T:
        return self.coord.y

    def x_y(self) -> tuple[T, T]:
        return self.coord.x_y()

    def __iter__(self) -> Iterator[T]:
        return iter(self.coord)


@dataclass(frozen=True)
class Line(Generic[T]):
    start: Coord[T]
    end: Coord[T]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_coord(self.start))
        object.__setattr__(self, "end", as_coord(self.end))

    def delta(self) -> Coord[T]:
        return self.end - self.start


@dataclass(frozen=True)
class LineString(Generic[T]):
    coords: tuple[Coord[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(map(as_coord, self.coords)))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coord[T]]:
        return iter(self.coords)

    def __getitem__(self, index: int) -> Coord[T]:
        return self.coords[index]


def _as_line_string(obj: Any) -> LineString[Any]:
    if isinstance(obj, LineString):
        return obj
    return LineString(tuple(obj))


@dataclass(frozen=True)
class Polygon(Generic[T]):
    exterior: LineString[T] = field(default_factory=LineString)
    interiors: tuple[LineString[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_line_string(self.exterior))
        object.__setattr__(self, "interiors", tuple(map(_as_line_string, self.interiors)))

    def rings(self) -> list[LineString[T]]:
        return [self.exterior, *self.interiors]


@dataclass(frozen=True)
class MultiPoint(Generic[T]):
    points: tuple[Point[T], ...] = ()

    def __post_init__(self) -> None:
        points = [p if isinstance(p, Point) else Point.from_coord(p) for p in self.points]
        object.__setattr__(self, "points", tuple(points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point[T]]:
        return iter(self.points)


@dataclass(frozen=True)
class MultiLineString(Generic[T]):
    line_strings: tuple[LineString[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "line_strings", tuple(map(_as_line_string, self.line_strings))
        )

    def __len__(self) -> int:
        return len(self.line_strings)

    def __iter__(self) -> Iterator[LineString[T]]:
        return iter(self.line_strings)


@dataclass(frozen=True)
class MultiPolygon(Generic[T]):
    polygons: tuple[Polygon[T], ...] = ()

    def __post_init__(self) -> None:
        for polygon in self.polygons:
            if not isinstance(polygon, Polygon):
                raise TypeError(format_type_error("polygon", polygon, Polygon))
        object.__setattr__(self, "polygons", tuple(self.polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon[T]]:
        return iter(self.polygons)


@dataclass(frozen=True)
class Rect(Generic[T]):
    """
    An axis-aligned box

    The corners are normalised on construction so that min <= max on
    each axis, whatever order they were given in.
    """

    min: Coord[T]
    max: Coord[T]

    def __post_init__(self) -> None:
        a = as_coord(self.min)
        b = as_coord(self.max)
        object.__setattr__(self, "min", Coord(min(a.x, b.x), min(a.y, b.y)))
        object.__setattr__(self, "max", Coord(max(a.x, b.x), max(a.y, b.y)))

    def width(self) -> T:
        return self.max.x - self.min.x

    def height(self) -> T:
        return self.max.y - self.min.y

    def center(self) -> Coord[T]:
        return Coord((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    def to_polygon(self) -> Polygon[T]:
        """Closed counter-clockwise ring starting at (max.x, min.y)"""
        (x0, y0), (x1, y1) = self.min, self.max
        return Polygon(
            LineString(((x1, y0), (x1, y1), (x0, y1), (x0, y0), (x1, y0)))
        )
