"""
Decoder for WKT literals of the three-axis variants.

Grammar, keywords uppercase and case-sensitive, Z marker optional:

    POINT [Z] (x y z)
    LINESTRING [Z] (x y z, ...) | EMPTY
    POLYGON [Z] ((x y z, ...), ...) | EMPTY
    MULTIPOINT [Z] ((x y z), ...) | EMPTY
    MULTILINESTRING [Z] ((x y z, ...), ...) | EMPTY
    MULTIPOLYGON [Z] (((x y z, ...), ...), ...) | EMPTY
    GEOMETRYCOLLECTION [Z] (<geometry>, ...) | EMPTY

POINT EMPTY and () in place of EMPTY are rejected for every kind, so
LINESTRING () and MULTILINESTRING () fail too although geo-types' wkt!
macro reads them as empty. Number tokens must be separated by whitespace
or punctuation. Rings are kept as written, never closed.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from loguru import logger

from geotypes3d.errors import WKTError
from geotypes3d.geometry import (
    CoordZ,
    Geometry,
    GeometryCollection,
    LineStringZ,
    MultiLineStringZ,
    MultiPointZ,
    MultiPolygonZ,
    PointZ,
    PolygonZ,
)
from geotypes3d.utils import format_type_error, join_with_or

__all__ = ["parse_wkt"]

ItemT = TypeVar("ItemT")

KEYWORDS = (
    "POINT",
    "LINESTRING",
    "POLYGON",
    "MULTIPOINT",
    "MULTILINESTRING",
    "MULTIPOLYGON",
    "GEOMETRYCOLLECTION",
)

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<number>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?(?![\w.]))
    | (?P<word>[A-Za-z_]\w*)
    | (?P<punct>[(),])
    """,
    re.VERBOSE,
)
_SPACE_PATTERN = re.compile(r"\s*")


@dataclass(frozen=True)
class _Token:
    kind: str  # number, word, punct or end
    text: str
    pos: int


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = _SPACE_PATTERN.match(text, 0).end()  # type: ignore[union-attr]
    while pos < len(text):
        match = _TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise WKTError(f"unexpected character {text[pos]!r}", pos)
        kind = match.lastgroup
        assert kind is not None
        tokens.append(_Token(kind, match.group(), pos))
        pos = _SPACE_PATTERN.match(text, match.end()).end()  # type: ignore[union-attr]
    tokens.append(_Token("end", "", len(text)))

    return tokens


class _Parser:
    def __init__(self, text: str, dtype: Callable[[str], Any]) -> None:
        self.tokens = _tokenize(text)
        self.index = 0
        self.dtype = dtype

    def peek(self) -> _Token:
        return self.tokens[self.index]

    def advance(self) -> _Token:
        token = self.tokens[self.index]
        if token.kind != "end":
            self.index += 1
        return token

    def expect(self, text: str) -> _Token:
        token = self.advance()
        if token.text != text or token.kind == "end":
            got = "end of input" if token.kind == "end" else repr(token.text)
            raise WKTError(f"expected {text!r}, got {got}", token.pos)
        return token

    def at(self, text: str) -> bool:
        token = self.peek()
        return token.kind != "end" and token.text == text

    def parse(self) -> Geometry:
        geometry = self.geometry()
        token = self.peek()
        if token.kind != "end":
            raise WKTError(f"unexpected trailing input {token.text!r}", token.pos)
        return geometry

    def geometry(self) -> Geometry:
        token = self.advance()
        if token.kind != "word":
            got = "end of input" if token.kind == "end" else repr(token.text)
            raise WKTError(f"expected a geometry keyword, got {got}", token.pos)
        if token.text not in KEYWORDS:
            raise WKTError(
                f"unknown geometry type {token.text!r}, "
                f"must be one of {join_with_or(KEYWORDS)}",
                token.pos,
            )
        if self.at("Z"):
            self.advance()

        match token.text:
            case "POINT":
                return self.point()
            case "LINESTRING":
                return self.line_string()
            case "POLYGON":
                return self.polygon()
            case "MULTIPOINT":
                return self.multi_point()
            case "MULTILINESTRING":
                return MultiLineStringZ(tuple(self.body(self.line_string)))
            case "MULTIPOLYGON":
                return MultiPolygonZ(tuple(self.body(self.polygon)))
            case "GEOMETRYCOLLECTION":
                return GeometryCollection(tuple(self.body(self.geometry)))
            case _:
                raise AssertionError(token.text)

    def is_empty(self) -> bool:
        """Consume EMPTY if it comes next"""
        if self.at("EMPTY"):
            self.advance()
            return True
        return False

    def open(self) -> None:
        """Consume ( and reject an immediately following )"""
        self.expect("(")
        token = self.peek()
        if token.text == ")":
            raise WKTError("use EMPTY instead of () for an empty collection", token.pos)

    def items(
        self, item: Callable[[], ItemT], trailing_comma: bool = True
    ) -> list[ItemT]:
        """Comma separated items up to the closing )"""
        items = [item()]
        while not self.at(")"):
            self.expect(",")
            if trailing_comma and self.at(")"):
                break
            items.append(item())
        self.expect(")")

        return items

    def body(self, item: Callable[[], ItemT]) -> list[ItemT]:
        """EMPTY or a parenthesized list of items"""
        if self.is_empty():
            return []
        self.open()
        return self.items(item)

    def number(self) -> Any:
        token = self.advance()
        try:
            return self.dtype(token.text)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise WKTError(f"invalid number {token.text!r}: {e}", token.pos) from e

    def coord(self) -> CoordZ[Any]:
        start = self.peek().pos
        values = []
        while self.peek().kind == "number":
            values.append(self.number())
        if len(values) != 3:
            raise WKTError(
                f"a coordinate needs exactly 3 numbers, got {len(values)}", start
            )
        return CoordZ(*values)

    def point(self) -> PointZ[Any]:
        token = self.peek()
        if self.is_empty():
            raise WKTError("EMPTY points are not supported", token.pos)
        self.expect("(")
        coord = self.coord()
        self.expect(")")
        return PointZ.from_coord(coord)

    def multi_point_item(self) -> PointZ[Any]:
        token = self.peek()
        if token.text == "EMPTY":
            raise WKTError("MULTIPOINT members cannot be EMPTY", token.pos)
        self.expect("(")
        coord = self.coord()
        self.expect(")")
        return PointZ.from_coord(coord)

    def line_string(self) -> LineStringZ[Any]:
        return LineStringZ(tuple(self.body(self.coord)))

    def polygon(self) -> PolygonZ[Any]:
        return PolygonZ.from_rings(self.body(self.line_string))

    def multi_point(self) -> MultiPointZ[Any]:
        if self.is_empty():
            return MultiPointZ()
        self.open()
        return MultiPointZ(
            tuple(self.items(self.multi_point_item, trailing_comma=False))
        )


def parse_wkt(text: str, *, dtype: Callable[[str], Any] = float) -> Geometry:
    """
    Decode a WKT literal into a three-axis geometry

    Parameters
    ----------
    text : str
        The literal, e.g. "POINT Z (1 2 3)" or "POLYGON EMPTY".

    dtype : callable, default float
        Applied to each number token as written, so Decimal and Fraction
        keep the literal digits.

    Returns
    -------
    geometry : Geometry
        PointZ, LineStringZ, PolygonZ, MultiPointZ, MultiLineStringZ,
        MultiPolygonZ or GeometryCollection.

    Raises
    ------
    WKTError
        text does not match the grammar. No partial geometry is returned.
    """
    if not isinstance(text, str):
        raise TypeError(format_type_error("text", text, str))
    if not callable(dtype):
        raise TypeError(format_type_error("dtype", dtype, "callable"))

    try:
        return _Parser(text, dtype).parse()
    except WKTError as e:
        logger.debug("Rejected WKT literal {!r}: {}", text, e)
        raise
