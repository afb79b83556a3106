from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, overload

from geotypes3d.geometry.coord import CoordZ, as_coord_z
from geotypes3d.numeric import to_degrees, to_radians
from geotypes3d.typing import F, T

__all__ = ["LineStringZ", "LineZ", "PointZ", "PolygonZ", "Triangle"]


@dataclass(frozen=True, init=False)
class PointZ(Generic[T]):
    """
    A single three-axis location

    Wraps exactly one CoordZ. Build it from components with PointZ(x, y, z)
    or from an existing coordinate with PointZ.from_coord(coord).
    """

    coord: CoordZ[T]

    def __init__(self, x: T, y: T, z: T) -> None:
        object.__setattr__(self, "coord", CoordZ(x, y, z))

    @classmethod
    def from_coord(cls, coord: CoordZ[T] | Iterable[T]) -> PointZ[T]:
        coord = as_coord_z(coord)
        return cls(coord.x, coord.y, coord.z)

    @property
    def x(self) -> T:
        return self.coord.x

    @property
    def y(self) -> T:
        return self.coord.y

    @property
    def z(self) -> T:
        return self.coord.z

    # Geographic aliases
    @property
    def lng(self) -> T:
        return self.coord.x

    @property
    def lat(self) -> T:
        return self.coord.y

    @property
    def alt(self) -> T:
        return self.coord.z

    def x_y_z(self) -> tuple[T, T, T]:
        return self.coord.x_y_z()

    def __iter__(self) -> Iterator[T]:
        return iter(self.coord)

    def dot(self, other: PointZ[T]) -> T:
        """Dot product of the two position vectors"""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_prod(self, point_b: PointZ[T], point_c: PointZ[T]) -> T:
        """
        Planar cross product of self -> point_b -> point_c

        Positive means counter-clockwise in the xy plane, negative
        clockwise, zero collinear. The z axis is ignored.
        """
        return (point_b.x - self.x) * (point_c.y - self.y) - (point_b.y - self.y) * (
            point_c.x - self.x
        )

    def to_degrees(self: PointZ[F]) -> PointZ[F]:
        """Convert every component from radians to degrees"""
        return PointZ(*map(to_degrees, self.x_y_z()))

    def to_radians(self: PointZ[F]) -> PointZ[F]:
        """Convert every component from degrees to radians"""
        return PointZ(*map(to_radians, self.x_y_z()))

    def __neg__(self) -> PointZ[T]:
        return PointZ.from_coord(-self.coord)

    def __add__(self, other: PointZ[T]) -> PointZ[T]:
        if not isinstance(other, PointZ):
            return NotImplemented
        return PointZ.from_coord(self.coord + other.coord)

    def __sub__(self, other: PointZ[T]) -> PointZ[T]:
        if not isinstance(other, PointZ):
            return NotImplemented
        return PointZ.from_coord(self.coord - other.coord)

    def __mul__(self, scalar: T) -> PointZ[T]:
        return PointZ.from_coord(self.coord * scalar)

    def __truediv__(self, scalar: T) -> PointZ[T]:
        return PointZ.from_coord(self.coord / scalar)


@dataclass(frozen=True)
class LineZ(Generic[T]):
    """A segment made of exactly two coordinates"""

    start: CoordZ[T]
    end: CoordZ[T]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_coord_z(self.start))
        object.__setattr__(self, "end", as_coord_z(self.end))

    def delta(self) -> CoordZ[T]:
        return self.end - self.start

    def dx(self) -> T:
        return self.delta().x

    def dy(self) -> T:
        return self.delta().y

    def dz(self) -> T:
        return self.delta().z

    def slope(self) -> T:
        """dy / dx, raises ZeroDivisionError for vertical lines with exact scalars"""
        return self.dy() / self.dx()

    def determinant(self) -> T:
        return self.start.x * self.end.y - self.start.y * self.end.x

    def start_point(self) -> PointZ[T]:
        return PointZ.from_coord(self.start)

    def end_point(self) -> PointZ[T]:
        return PointZ.from_coord(self.end)

    def points(self) -> tuple[PointZ[T], PointZ[T]]:
        return self.start_point(), self.end_point()


@dataclass(frozen=True)
class LineStringZ(Generic[T]):
    """
    An ordered sequence of coordinates

    Empty (no coordinates) is a valid state. A line string used as a
    polygon ring is closed by convention only: nothing here appends the
    first coordinate unless closed() is called explicitly.
    """

    coords: tuple[CoordZ[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(map(as_coord_z, self.coords)))

    @classmethod
    def empty(cls) -> LineStringZ[Any]:
        return cls()

    def is_empty(self) -> bool:
        return len(self.coords) == 0

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[CoordZ[T]]:
        return iter(self.coords)

    @overload
    def __getitem__(self, index: int) -> CoordZ[T]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[CoordZ[T], ...]: ...

    def __getitem__(self, index: int | slice) -> CoordZ[T] | tuple[CoordZ[T], ...]:
        return self.coords[index]

    def points(self) -> list[PointZ[T]]:
        return list(map(PointZ.from_coord, self.coords))

    def lines(self) -> list[LineZ[T]]:
        """Consecutive coordinate pairs as segments"""
        return [LineZ(a, b) for a, b in zip(self.coords[:-1], self.coords[1:])]

    def is_closed(self) -> bool:
        """Whether the first and last coordinates are equal. Empty counts as closed."""
        return self.is_empty() or self.coords[0] == self.coords[-1]

    def closed(self) -> LineStringZ[T]:
        """A copy with the first coordinate appended if it is not already closed"""
        if self.is_closed():
            return self
        return LineStringZ((*self.coords, self.coords[0]))


def _as_line_string_z(obj: LineStringZ[T] | Iterable[Any]) -> LineStringZ[T]:
    if isinstance(obj, LineStringZ):
        return obj
    return LineStringZ(tuple(obj))


@dataclass(frozen=True)
class PolygonZ(Generic[T]):
    """
    An exterior ring and an ordered sequence of interior rings (holes)

    Both empty is the canonical empty polygon. Interiors with an empty
    exterior are invalid but kept as they are.
    """

    exterior: LineStringZ[T] = field(default_factory=LineStringZ)
    interiors: tuple[LineStringZ[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_line_string_z(self.exterior))
        object.__setattr__(
            self, "interiors", tuple(map(_as_line_string_z, self.interiors))
        )

    @classmethod
    def empty(cls) -> PolygonZ[Any]:
        return cls()

    @classmethod
    def from_rings(cls, rings: Sequence[LineStringZ[T]]) -> PolygonZ[T]:
        """Ring 0 becomes the exterior, the rest the interiors in order"""
        if len(rings) == 0:
            return cls()
        return cls(rings[0], tuple(rings[1:]))

    def rings(self) -> list[LineStringZ[T]]:
        """Flatten to [exterior, *interiors]"""
        return [self.exterior, *self.interiors]

    def is_empty(self) -> bool:
        return self.exterior.is_empty() and len(self.interiors) == 0


@dataclass(frozen=True)
class Triangle(Generic[T]):
    """Three vertices. Not a Geometry variant, exports as a closed polygon."""

    a: CoordZ[T]
    b: CoordZ[T]
    c: CoordZ[T]

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, as_coord_z(getattr(self, name)))

    def to_array(self) -> tuple[CoordZ[T], CoordZ[T], CoordZ[T]]:
        return self.a, self.b, self.c

    def to_polygon(self) -> PolygonZ[T]:
        return PolygonZ(LineStringZ((self.a, self.b, self.c, self.a)))
