"""
Numeric capability contract for coordinate scalars.

Two tiers: CoordNum is what every geometry needs (arithmetic, ordering,
zero and one). CoordFloat adds conversion to and from a 64-bit float and is
only required by the interchange converters, which are float based.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, SupportsFloat, runtime_checkable

import numpy as np

from geotypes3d.utils import format_type_error

__all__ = [
    "FLOAT_TYPES",
    "CoordFloat",
    "CoordNum",
    "from_f64",
    "is_float_type",
    "one",
    "to_degrees",
    "to_f64",
    "to_radians",
    "zero",
]


@runtime_checkable
class CoordNum(Protocol):
    """Base arithmetic capability of a coordinate scalar"""

    def __add__(self, other: Any, /) -> Any: ...
    def __sub__(self, other: Any, /) -> Any: ...
    def __mul__(self, other: Any, /) -> Any: ...
    def __truediv__(self, other: Any, /) -> Any: ...
    def __lt__(self, other: Any, /) -> bool: ...
    def __le__(self, other: Any, /) -> bool: ...


@runtime_checkable
class CoordFloat(CoordNum, Protocol):
    """Floating capability: CoordNum plus conversion through float"""

    def __float__(self) -> float: ...


FLOAT_TYPES: tuple[type, ...] = (float, np.floating, Decimal, Fraction)


def zero(dtype: type = float) -> Any:
    """Additive identity of a scalar type"""
    return dtype(0)


def one(dtype: type = float) -> Any:
    """Multiplicative identity of a scalar type"""
    return dtype(1)


def is_float_type(dtype: Any) -> bool:
    """Whether dtype can receive values converted from a 64-bit float"""
    return isinstance(dtype, type) and issubclass(dtype, FLOAT_TYPES)


def to_f64(value: Any) -> float:
    """Convert a scalar to a Python float (IEEE 754 binary64)"""
    if isinstance(value, (str, bytes)) or not isinstance(value, SupportsFloat):
        raise TypeError(format_type_error("value", value, "SupportsFloat"))
    return float(value)


def from_f64(value: float, dtype: type = float) -> Any:
    """
    Convert a 64-bit float into the scalar type dtype

    Integer dtypes are refused instead of truncating. float32 rounds to
    nearest, Decimal and Fraction keep the exact binary value.

    Parameters
    ----------
    value : float
        Value read from an interchange document.

    dtype : type, default float
        Target scalar type. Must satisfy is_float_type.

    Returns
    -------
    scalar
        An instance of dtype.
    """
    if not is_float_type(dtype):
        raise TypeError(format_type_error("dtype", dtype, "floating scalar type"))
    return dtype(value)


def _convert_angle(value: Any, func: np.ufunc) -> Any:
    dtype = type(value)
    if not is_float_type(dtype):
        raise TypeError(format_type_error("value", value, "floating scalar"))
    return dtype(float(func(to_f64(value))))


def to_degrees(value: Any) -> Any:
    """Radians to degrees, keeping the scalar type"""
    return _convert_angle(value, np.degrees)


def to_radians(value: Any) -> Any:
    """Degrees to radians, keeping the scalar type"""
    return _convert_angle(value, np.radians)
