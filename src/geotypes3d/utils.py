from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "format_literal_error",
    "format_type_error",
    "full_name",
    "join_with_or",
]


def join_with_or(strings: Iterable[str]) -> str:
    """Join strings as "a, b or c"."""
    return " or ".join(", ".join(strings).rsplit(", ", 1))


def full_name(obj: Any) -> str:
    """Return the "__module__.__qualname__" string of an object."""
    assert hasattr(obj, "__module__") and hasattr(obj, "__qualname__")
    if obj.__module__ in {"__main__", "builtins"}:
        return obj.__qualname__
    else:
        return f"{obj.__module__}.{obj.__qualname__}"


def format_type_error(
    param_name: str, param_value: Any, expected_type: str | type | Iterable[str | type]
) -> str:
    """
    Build the message string for a TypeError

    Parameters
    ----------
    param_name : str
        Name of the parameter.

    param_value
        Value of the parameter. Its type is reported in the message.

    expected_type: str, type or iterable object of str and type
        The type(s) the value should have. Strings stand for types that are
        awkward to spell as objects, e.g. "callable".

    Returns
    -------
    msg : str
        The message string.
    """
    if isinstance(expected_type, str) or not isinstance(expected_type, Iterable):
        expected_types = [expected_type]
    else:
        expected_types = expected_type

    names: list[str] = []
    for typ in expected_types:
        match typ:
            case str():
                names.append(typ)
            case type():
                names.append(full_name(typ))
            case _:
                raise TypeError(format_type_error("expected_type", typ, [str, type]))

    if len(names) == 0:
        raise ValueError("expected_type must not be empty")

    expected_type_str = join_with_or(names)
    actual_type_str = full_name(type(param_value))
    msg = f"{param_name} must be of type {expected_type_str}, got {actual_type_str}"

    return msg


def format_literal_error(
    param_name: str, param_value: Any, literal_value: Any | Iterable[Any]
) -> str:
    """
    Build the message string for a literal-choice ValueError

    Parameters
    ----------
    param_name : str
        Name of the parameter.

    param_value
        Value of the parameter.

    literal_value
        The allowed literal, or a group of allowed literals.

    Returns
    -------
    msg : str
        The message string.
    """
    if isinstance(literal_value, str) or not isinstance(literal_value, Iterable):
        literal_values = [literal_value]
    else:
        literal_values = list(literal_value)
        if len(literal_values) == 0:
            raise ValueError("literal_value must not be empty")
        if len(literal_values) != len(set(literal_values)):
            raise ValueError("literal_value must not contain duplicates")

    param_value_str = repr(param_value)
    literal_value_str = "{" + ", ".join(map(repr, literal_values)) + "}"
    msg = f"{param_name} must be one of {literal_value_str}, got {param_value_str}"

    return msg
