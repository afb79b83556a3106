from decimal import Decimal
from fractions import Fraction
from unittest import TestCase

from geotypes3d.errors import ErrorKind, WKTError
from geotypes3d.geometry import (
    CoordZ,
    GeometryCollection,
    LineStringZ,
    MultiLineStringZ,
    MultiPointZ,
    MultiPolygonZ,
    PointZ,
    PolygonZ,
)
from geotypes3d.wkt import parse_wkt


class TestParseWKT(TestCase):
    def test_point(self) -> None:
        self.assertEqual(parse_wkt("POINT Z (1.0 2.0 3.0)"), PointZ(1.0, 2.0, 3.0))
        self.assertEqual(parse_wkt("POINT(1 -2 3e2)"), PointZ(1.0, -2.0, 300.0))
        self.assertEqual(parse_wkt("POINT (.5 1. -2e-1)"), PointZ(0.5, 1.0, -0.2))

    def test_line_string(self) -> None:
        line_string = parse_wkt("LINESTRING Z (1.0 2.0 3.0,3.0 4.0 5.0)")
        self.assertEqual(len(line_string), 2)
        self.assertEqual(line_string[0], CoordZ(1.0, 2.0, 3.0))
        self.assertEqual(parse_wkt("LINESTRING EMPTY"), LineStringZ())
        self.assertEqual(len(parse_wkt("LINESTRING (1 2 3, 4 5 6,)")), 2)

    def test_polygon(self) -> None:
        polygon = parse_wkt("POLYGON Z ((1.0 2.0 3.0), (1.1 2.1 3.1))")
        self.assertEqual(len(polygon.exterior), 1)
        self.assertEqual(polygon.interiors[0][0], CoordZ(1.1, 2.1, 3.1))

        # Rings are kept as written
        polygon = parse_wkt("POLYGON Z ((1 2 3, 3 4 5))")
        self.assertEqual(len(polygon.exterior), 2)

        polygon = parse_wkt(
            "POLYGON Z ((1 2 3, 3 4 5), (1.1 2.1 3.1, 3.1 4.1 5.1), (1.2 2.2 3.2, 3.2 4.2 5.2))"
        )
        self.assertEqual(len(polygon.interiors), 2)
        self.assertEqual(polygon.interiors[1][1], CoordZ(3.2, 4.2, 5.2))

    def test_polygon_empty(self) -> None:
        polygon = parse_wkt("POLYGON EMPTY")
        self.assertIsInstance(polygon, PolygonZ)
        self.assertEqual(len(polygon.exterior), 0)
        self.assertEqual(polygon.interiors, ())

    def test_multi_point(self) -> None:
        self.assertEqual(
            parse_wkt("MULTIPOINT Z ((1 2 3), (3 4 5))"),
            MultiPointZ([(1.0, 2.0, 3.0), (3.0, 4.0, 5.0)]),
        )
        self.assertEqual(parse_wkt("MULTIPOINT EMPTY"), MultiPointZ())

    def test_multi_line_string(self) -> None:
        multi_line_string = parse_wkt(
            "MULTILINESTRING Z ((1 2 3, 3 4 5), EMPTY, (5 6 7, 7 8 9),)"
        )
        self.assertIsInstance(multi_line_string, MultiLineStringZ)
        self.assertEqual([len(ls) for ls in multi_line_string], [2, 0, 2])
        self.assertEqual(parse_wkt("MULTILINESTRING EMPTY"), MultiLineStringZ())

    def test_multi_polygon(self) -> None:
        multi_polygon = parse_wkt(
            "MULTIPOLYGON Z (((0 0 0, 1 0 0, 1 1 0, 0 0 0)), EMPTY)"
        )
        self.assertIsInstance(multi_polygon, MultiPolygonZ)
        self.assertEqual(len(multi_polygon), 2)
        self.assertEqual(len(multi_polygon[0].exterior), 4)
        self.assertTrue(multi_polygon[1].is_empty())

    def test_geometry_collection(self) -> None:
        collection = parse_wkt(
            "GEOMETRYCOLLECTION (POINT Z (1 2 3), LINESTRING EMPTY, "
            "POLYGON ((0 0 0, 1 0 0, 1 1 0, 0 0 0)), GEOMETRYCOLLECTION EMPTY)"
        )
        self.assertEqual(
            [type(g) for g in collection],
            [PointZ, LineStringZ, PolygonZ, GeometryCollection],
        )
        self.assertEqual(parse_wkt("GEOMETRYCOLLECTION EMPTY"), GeometryCollection())

    def test_dtype(self) -> None:
        point = parse_wkt("POINT (0.1 0.2 0.3)", dtype=Decimal)
        self.assertEqual(point.x, Decimal("0.1"))
        point = parse_wkt("POINT (0.5 1 2)", dtype=Fraction)
        self.assertEqual(point.x, Fraction(1, 2))
        point = parse_wkt("POINT (1 2 3)", dtype=int)
        self.assertEqual(point, PointZ(1, 2, 3))

    def test_rejections(self) -> None:
        samples = [
            "POINT EMPTY",
            "POINT Z EMPTY",
            "POINT (1 2)",
            "POINT (1 2 3 4)",
            "LINESTRING (1 2 3, 4 5)",
            "LINESTRING ()",
            "MULTILINESTRING ()",
            "POINT (1.2.3 4)",
            "POINT (1 2 3e)",
            "POINT (1 2 3abc)",
            "POLYGON ()",
            "MULTIPOINT ()",
            "MULTIPOINT (EMPTY)",
            "MULTIPOINT ((1 2 3),)",
            "MULTIPOLYGON ()",
            "GEOMETRYCOLLECTION ()",
            "point (1 2 3)",
            "CIRCLE (1 2 3)",
            "POINT (1 2 3",
            "POINT (1 2 3))",
            "POINT (1 2 3) POINT (1 2 3)",
            "LINESTRING (1 2 3 4 5 6)",
            "POINT (1 2 3) #",
            "",
        ]
        for sample in samples:
            with self.subTest(sample=sample):
                with self.assertRaises(WKTError) as cm:
                    parse_wkt(sample)
                self.assertIs(cm.exception.kind, ErrorKind.INVALID_WKT)

    def test_error_position(self) -> None:
        with self.assertRaises(WKTError) as cm:
            parse_wkt("POINT EMPTY")
        self.assertEqual(cm.exception.position, 6)
        self.assertIn("offset 6", str(cm.exception))

    def test_invalid_number_for_dtype(self) -> None:
        with self.assertRaises(WKTError):
            parse_wkt("POINT (1.5 2 3)", dtype=int)

    def test_not_a_string(self) -> None:
        with self.assertRaises(TypeError):
            parse_wkt(b"POINT (1 2 3)")  # type: ignore[arg-type]
