from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic

from geotypes3d import numeric
from geotypes3d.typing import T
from geotypes3d.utils import format_type_error

__all__ = ["Coord", "CoordZ", "as_coord", "as_coord_z"]


@dataclass(frozen=True)
class CoordZ(Generic[T]):
    """
    A three-axis coordinate

    Value type. Equality is exact, component-wise. Arithmetic mirrors a
    vector space over T: negation, addition, subtraction, and scaling by
    a scalar.
    """

    x: T
    y: T
    z: T

    @classmethod
    def zero(cls, dtype: type = float) -> CoordZ[Any]:
        return cls(numeric.zero(dtype), numeric.zero(dtype), numeric.zero(dtype))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def x_y_z(self) -> tuple[T, T, T]:
        return self.x, self.y, self.z

    def __iter__(self):
        return iter(self.x_y_z())

    def __neg__(self) -> CoordZ[T]:
        return CoordZ(-self.x, -self.y, -self.z)

    def __add__(self, other: CoordZ[T]) -> CoordZ[T]:
        if not isinstance(other, CoordZ):
            return NotImplemented
        return CoordZ(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: CoordZ[T]) -> CoordZ[T]:
        if not isinstance(other, CoordZ):
            return NotImplemented
        return CoordZ(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: T) -> CoordZ[T]:
        return CoordZ(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: T) -> CoordZ[T]:
        return CoordZ(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass(frozen=True)
class Coord(Generic[T]):
    """A legacy two-axis coordinate"""

    x: T
    y: T

    @classmethod
    def zero(cls, dtype: type = float) -> Coord[Any]:
        return cls(numeric.zero(dtype), numeric.zero(dtype))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def x_y(self) -> tuple[T, T]:
        return self.x, self.y

    def __iter__(self):
        return iter(self.x_y())

    def __neg__(self) -> Coord[T]:
        return Coord(-self.x, -self.y)

    def __add__(self, other: Coord[T]) -> Coord[T]:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord[T]) -> Coord[T]:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: T) -> Coord[T]:
        return Coord(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: T) -> Coord[T]:
        return Coord(self.x / scalar, self.y / scalar)


def as_coord_z(obj: CoordZ[T] | Iterable[T]) -> CoordZ[T]:
    """Coerce a CoordZ or an (x, y, z) sequence into a CoordZ"""
    if isinstance(obj, CoordZ):
        return obj
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
        raise TypeError(format_type_error("coord", obj, [CoordZ, "(x, y, z)"]))
    values = tuple(obj)
    if len(values) != 3:
        raise ValueError(f"a CoordZ needs 3 components, got {len(values)}")
    return CoordZ(*values)


def as_coord(obj: Coord[T] | Iterable[T]) -> Coord[T]:
    """Coerce a Coord or an (x, y) sequence into a Coord"""
    if isinstance(obj, Coord):
        return obj
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Iterable):
        raise TypeError(format_type_error("coord", obj, [Coord, "(x, y)"]))
    values = tuple(obj)
    if len(values) != 2:
        raise ValueError(f"a Coord needs 2 components, got {len(values)}")
    return Coord(*values)
