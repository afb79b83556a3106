from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields
from typing import Any, TypedDict, cast

from typing_extensions import Unpack

from geotypes3d.numeric import is_float_type
from geotypes3d.typing import MissingZPolicy
from geotypes3d.utils import format_literal_error, format_type_error

__all__ = ["Config", "ConfigDict", "MissingZPolicy", "config"]


def _validate_missing_z(value: Any) -> None:
    if value not in {"zero", "error"}:
        raise ValueError(format_literal_error("missing_z", value, ["zero", "error"]))


def _validate_dtype(value: Any) -> None:
    if not is_float_type(value):
        raise TypeError(format_type_error("default_dtype", value, "floating scalar type"))


class ConfigDict(TypedDict):
    missing_z: MissingZPolicy
    default_dtype: type


class PartialConfigDict(TypedDict, total=False):
    missing_z: MissingZPolicy
    default_dtype: type


# TODO: thread safety of update/context, conversions only read the config
@dataclass(kw_only=True)
class Config:
    """
    Global configuration

    missing_z: what importing a two-element position into a three-axis
    variant does. "zero" fills z with zero, "error" raises GeoJSONError.

    default_dtype: scalar type used by importers when no dtype is passed.
    """

    missing_z: MissingZPolicy = "zero"
    default_dtype: type = float

    def __post_init__(self) -> None:
        self._field_names = {field.name for field in fields(self)}
        for name in self._field_names:
            self._validate(name, getattr(self, name))

    def assert_field(self, name: str) -> None:
        """Check that name is a configuration field"""
        if name not in self._field_names:
            raise ValueError(f"unknown configuration field: {name}")

    def _validate(self, name: str, value: Any) -> None:
        match name:
            case "missing_z":
                _validate_missing_z(value)
            case "default_dtype":
                _validate_dtype(value)

    def validate(self, name: str, value: Any) -> None:
        """Validate one configuration entry"""
        self.assert_field(name)
        self._validate(name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        # Non-field attributes are allowed
        self._validate(name, value)
        super().__setattr__(name, value)

    def to_dict(self) -> ConfigDict:
        """Return the configuration as a dict"""
        return cast(ConfigDict, asdict(self))

    def update(self, **kwargs: Unpack[PartialConfigDict]) -> None:
        """Update the configuration"""
        # Validate everything first so a failure leaves no partial update
        for name, value in kwargs.items():
            self.validate(name, value)
        for name, value in kwargs.items():
            super().__setattr__(name, value)

    @contextmanager
    def context(self, **kwargs: Unpack[PartialConfigDict]) -> Iterator[None]:
        """Context in which the configuration is temporarily modified"""
        config_dict = self.to_dict()
        try:
            self.update(**kwargs)
            yield
        finally:
            self.update(**config_dict)


config = Config()
