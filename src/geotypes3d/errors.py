from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "ErrorKind",
    "FeatureHasNoGeometryError",
    "GeoJSONError",
    "GeometryError",
    "InvalidGeometryConversionError",
    "MismatchedGeometryError",
    "WKTError",
]


class ErrorKind(Enum):
    MISMATCHED_GEOMETRY = "mismatched_geometry"
    INVALID_GEOMETRY_CONVERSION = "invalid_geometry_conversion"
    FEATURE_HAS_NO_GEOMETRY = "feature_has_no_geometry"
    INVALID_GEOJSON = "invalid_geojson"
    INVALID_WKT = "invalid_wkt"


class GeometryError(Exception):
    """Base class of every error raised by geotypes3d"""

    kind: ErrorKind


class MismatchedGeometryError(GeometryError, TypeError):
    """A Geometry was downcast to a variant it does not hold"""

    kind = ErrorKind.MISMATCHED_GEOMETRY

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected a {expected}, but found a {found}")


class InvalidGeometryConversionError(GeometryError):
    """The kind tag of an interchange value does not match the requested type"""

    kind = ErrorKind.INVALID_GEOMETRY_CONVERSION

    def __init__(self, expected_type: str, found_type: str) -> None:
        self.expected_type = expected_type
        self.found_type = found_type
        super().__init__(f"Expected type: `{expected_type}`, but found `{found_type}`")


class FeatureHasNoGeometryError(GeometryError):
    """A Feature without geometry was imported where geometry is mandatory"""

    kind = ErrorKind.FEATURE_HAS_NO_GEOMETRY

    def __init__(self, feature: Any) -> None:
        self.feature = feature
        super().__init__("Feature has no geometry")


class GeoJSONError(GeometryError, ValueError):
    """Structurally malformed interchange value"""

    kind = ErrorKind.INVALID_GEOJSON


class WKTError(GeometryError, ValueError):
    """Geometry literal that violates the grammar"""

    kind = ErrorKind.INVALID_WKT

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
