from __future__ import annotations

from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Generic

from geotypes3d.geometry.primitives import LineStringZ, PointZ, PolygonZ
from geotypes3d.typing import R, T
from geotypes3d.utils import format_type_error

__all__ = ["MultiLineStringZ", "MultiPointZ", "MultiPolygonZ"]


def _as_point_z(obj: Any) -> PointZ[Any]:
    if isinstance(obj, PointZ):
        return obj
    return PointZ.from_coord(obj)


def _as_line_string_z(obj: Any) -> LineStringZ[Any]:
    if isinstance(obj, LineStringZ):
        return obj
    return LineStringZ(tuple(obj))


def _as_polygon_z(obj: Any) -> PolygonZ[Any]:
    if not isinstance(obj, PolygonZ):
        raise TypeError(format_type_error("polygon", obj, PolygonZ))
    return obj


@dataclass(frozen=True)
class MultiPointZ(Generic[T]):
    """An ordered, possibly empty collection of PointZ"""

    points: tuple[PointZ[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(map(_as_point_z, self.points)))

    @classmethod
    def empty(cls) -> MultiPointZ[Any]:
        return cls()

    def is_empty(self) -> bool:
        return len(self.points) == 0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PointZ[T]]:
        return iter(self.points)

    def __getitem__(self, index: int) -> PointZ[T]:
        return self.points[index]

    def parallel_map(
        self, func: Callable[[PointZ[T]], R], max_workers: int | None = None
    ) -> list[R]:
        """
        Apply func to every point on a thread pool

        Only worth it when func releases the GIL or does I/O. func must be
        safe to call concurrently. Results are returned in point order.

        Parameters
        ----------
        func : callable
            Called once per point.

        max_workers : int or None, default None
            Passed to ThreadPoolExecutor.

        Returns
        -------
        list
            func(point) for every point.
        """
        if len(self.points) == 0:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(func, self.points))


@dataclass(frozen=True)
class MultiLineStringZ(Generic[T]):
    """An ordered, possibly empty collection of LineStringZ"""

    line_strings: tuple[LineStringZ[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "line_strings", tuple(map(_as_line_string_z, self.line_strings))
        )

    @classmethod
    def empty(cls) -> MultiLineStringZ[Any]:
        return cls()

    def is_empty(self) -> bool:
        return len(self.line_strings) == 0

    def __len__(self) -> int:
        return len(self.line_strings)

    def __iter__(self) -> Iterator[LineStringZ[T]]:
        return iter(self.line_strings)

    def __getitem__(self, index: int) -> LineStringZ[T]:
        return self.line_strings[index]

    def is_closed(self) -> bool:
        """True when every member is closed (vacuously true when empty)"""
        return all(line_string.is_closed() for line_string in self.line_strings)


@dataclass(frozen=True)
class MultiPolygonZ(Generic[T]):
    """An ordered, possibly empty collection of PolygonZ"""

    polygons: tuple[PolygonZ[T], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(map(_as_polygon_z, self.polygons)))

    @classmethod
    def empty(cls) -> MultiPolygonZ[Any]:
        return cls()

    def is_empty(self) -> bool:
        return len(self.polygons) == 0

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[PolygonZ[T]]:
        return iter(self.polygons)

    def __getitem__(self, index: int) -> PolygonZ[T]:
        return self.polygons[index]

