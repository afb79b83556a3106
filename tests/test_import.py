from decimal import Decimal
from fractions import Fraction
from unittest import TestCase

import numpy as np

from geotypes3d.conf import config
from geotypes3d.errors import (
    ErrorKind,
    FeatureHasNoGeometryError,
    GeoJSONError,
    InvalidGeometryConversionError,
)
from geotypes3d.geojson import (
    dict_to_geometry,
    geojson_to_collection,
    geojson_to_geometry,
    geometry_to_dict,
    loads,
    make_feature,
    make_geojson,
)
from geotypes3d.geojson.typing import PositionZ
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

EXTERIOR = [(0.0, 0.0, 0.0), (4.0, 0.0, 1.0), (4.0, 4.0, 2.0), (0.0, 0.0, 0.0)]
INTERIOR = [(1.0, 1.0, 0.5), (2.0, 1.0, 0.5), (2.0, 2.0, 0.5), (1.0, 1.0, 0.5)]
POINT_DICT = {"type": "Point", "coordinates": [1.0, 2.0, 3.0]}


class TestDictToGeometry(TestCase):
    def test_point_round_trip(self) -> None:
        point = PointZ(40.02, 116.34, 0.0)
        actual = dict_to_geometry(geometry_to_dict(point), PointZ)
        self.assertIsInstance(actual, PointZ)
        for a, b in zip(actual.x_y_z(), point.x_y_z()):
            self.assertAlmostEqual(a, b, delta=1e-6)

    def test_polygon_round_trip(self) -> None:
        polygon = PolygonZ(EXTERIOR, [INTERIOR])
        polygon_dict = geometry_to_dict(polygon)
        self.assertEqual(len(polygon_dict["coordinates"]), 2)

        actual = dict_to_geometry(polygon_dict, PolygonZ)
        self.assertEqual(actual.exterior, polygon.exterior)
        self.assertEqual(actual.interiors, polygon.interiors)
        self.assertEqual(actual, polygon)

    def test_tuple_positions(self) -> None:
        position: PositionZ = (1.0, 2.0, 3.0)
        self.assertEqual(
            dict_to_geometry({"type": "Point", "coordinates": position}),
            PointZ(1.0, 2.0, 3.0),
        )
        line_string = dict_to_geometry(
            {"type": "LineString", "coordinates": tuple(EXTERIOR)}
        )
        self.assertEqual(line_string, LineStringZ(EXTERIOR))

    def test_round_trip(self) -> None:
        geometries = [
            PointZ(1.5, -2.25, 3.0),
            LineStringZ(),
            LineStringZ(EXTERIOR[:2]),
            PolygonZ(),
            PolygonZ(EXTERIOR),
            MultiPointZ([(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]),
            MultiLineStringZ([EXTERIOR, INTERIOR]),
            MultiPolygonZ([PolygonZ(EXTERIOR, [INTERIOR]), PolygonZ()]),
            GeometryCollection([PointZ(0.0, 0.0, 0.0), GeometryCollection()]),
        ]
        for geometry in geometries:
            self.assertEqual(dict_to_geometry(geometry_to_dict(geometry)), geometry)

    def test_collection_kinds_in_order(self) -> None:
        collection = GeometryCollection(
            [
                MultiPointZ([(1.0, 2.0, 3.0)]),
                MultiLineStringZ([EXTERIOR]),
                MultiPolygonZ([PolygonZ(EXTERIOR)]),
            ]
        )
        actual = dict_to_geometry(geometry_to_dict(collection), GeometryCollection)
        self.assertEqual(len(actual), 3)
        self.assertEqual(
            [type(g) for g in actual], [MultiPointZ, MultiLineStringZ, MultiPolygonZ]
        )

    def test_kind_mismatch(self) -> None:
        line_string_dict = {"type": "LineString", "coordinates": [[0, 0, 0], [1, 1, 1]]}
        with self.assertRaises(InvalidGeometryConversionError) as cm:
            dict_to_geometry(line_string_dict, PointZ)
        self.assertEqual(cm.exception.expected_type, "Point")
        self.assertEqual(cm.exception.found_type, "LineString")
        self.assertEqual(
            str(cm.exception), "Expected type: `Point`, but found `LineString`"
        )
        self.assertIs(cm.exception.kind, ErrorKind.INVALID_GEOMETRY_CONVERSION)

    def test_no_coercion_between_kinds(self) -> None:
        with self.assertRaises(InvalidGeometryConversionError):
            dict_to_geometry(POINT_DICT, MultiPointZ)
        with self.assertRaises(InvalidGeometryConversionError):
            dict_to_geometry(
                {"type": "GeometryCollection", "geometries": [POINT_DICT]}, PointZ
            )

    def test_unsupported_cls(self) -> None:
        with self.assertRaises(TypeError):
            dict_to_geometry(POINT_DICT, int)

    def test_zero_rings(self) -> None:
        polygon = dict_to_geometry({"type": "Polygon", "coordinates": []}, PolygonZ)
        self.assertEqual(len(polygon.exterior), 0)
        self.assertEqual(polygon.interiors, ())

    def test_one_ring(self) -> None:
        polygon = dict_to_geometry(
            {"type": "Polygon", "coordinates": [[list(c) for c in EXTERIOR]]}
        )
        self.assertEqual(polygon, PolygonZ(EXTERIOR))

    def test_rings_are_not_closed(self) -> None:
        coordinates = [[[0, 0, 0], [1, 0, 0], [1, 1, 0]]]
        polygon = dict_to_geometry({"type": "Polygon", "coordinates": coordinates})
        self.assertEqual(len(polygon.exterior), 3)

    def test_collection_fails_fast(self) -> None:
        collection_dict = {
            "type": "GeometryCollection",
            "geometries": [POINT_DICT, {"type": "Point", "coordinates": "bad"}],
        }
        with self.assertRaises(GeoJSONError):
            dict_to_geometry(collection_dict)

    def test_extra_elements_are_dropped(self) -> None:
        point = dict_to_geometry({"type": "Point", "coordinates": [1, 2, 3, 4]})
        self.assertEqual(point, PointZ(1.0, 2.0, 3.0))

    def test_missing_z(self) -> None:
        point_dict = {"type": "Point", "coordinates": [1.0, 2.0]}
        self.assertEqual(dict_to_geometry(point_dict), PointZ(1.0, 2.0, 0.0))
        with self.assertRaises(GeoJSONError):
            dict_to_geometry(point_dict, missing_z="error")
        with config.context(missing_z="error"):
            with self.assertRaises(GeoJSONError):
                dict_to_geometry(point_dict)
            self.assertEqual(
                dict_to_geometry(point_dict, missing_z="zero"), PointZ(1.0, 2.0, 0.0)
            )
        with self.assertRaises(ValueError):
            dict_to_geometry(point_dict, missing_z="drop")  # type: ignore[arg-type]

    def test_dtype(self) -> None:
        point = dict_to_geometry(POINT_DICT, dtype=Fraction)
        self.assertEqual(point.coord, CoordZ(Fraction(1), Fraction(2), Fraction(3)))
        self.assertIsInstance(dict_to_geometry(POINT_DICT, dtype=np.float32).x, np.float32)
        with config.context(default_dtype=Decimal):
            self.assertIsInstance(dict_to_geometry(POINT_DICT).x, Decimal)
        with self.assertRaises(TypeError):
            dict_to_geometry(POINT_DICT, dtype=int)

    def test_malformed(self) -> None:
        samples = [
            [1, 2, 3],
            {"coordinates": [1, 2, 3]},
            {"type": 1, "coordinates": [1, 2, 3]},
            {"type": "Circle", "coordinates": [1, 2, 3]},
            {"type": "Point"},
            {"type": "Point", "coordinates": [1]},
            {"type": "Point", "coordinates": [1, "2", 3]},
            {"type": "Point", "coordinates": [True, 2, 3]},
            {"type": "Point", "coordinates": [10**400, 2, 3]},
            {"type": "LineString", "coordinates": [1, 2, 3]},
            {"type": "Polygon", "coordinates": [[1, 2, 3]]},
            {"type": "GeometryCollection"},
            {"type": "Feature", "geometry": POINT_DICT, "properties": {}},
        ]
        for sample in samples:
            with self.assertRaises(GeoJSONError):
                dict_to_geometry(sample)  # type: ignore[arg-type]


class TestDocuments(TestCase):
    def test_feature(self) -> None:
        feature = make_feature(POINT_DICT, {"name": "a"})
        self.assertEqual(geojson_to_geometry(feature), PointZ(1.0, 2.0, 3.0))
        self.assertEqual(
            geojson_to_collection(feature), GeometryCollection([PointZ(1.0, 2.0, 3.0)])
        )
        with self.assertRaises(InvalidGeometryConversionError):
            geojson_to_geometry(feature, PolygonZ)

    def test_feature_without_geometry(self) -> None:
        feature = make_feature(None)
        with self.assertRaises(FeatureHasNoGeometryError) as cm:
            geojson_to_geometry(feature)
        self.assertIs(cm.exception.feature, feature)
        self.assertEqual(str(cm.exception), "Feature has no geometry")

        # Standalone, a feature without geometry is an empty collection
        self.assertEqual(geojson_to_collection(feature), GeometryCollection())

    def test_feature_collection_skips_empty_features(self) -> None:
        line_string_dict = {"type": "LineString", "coordinates": []}
        geojson_dict = make_geojson(
            [
                make_feature(POINT_DICT),
                make_feature(None),
                make_feature(line_string_dict),
            ]
        )
        expected = GeometryCollection([PointZ(1.0, 2.0, 3.0), LineStringZ()])
        self.assertEqual(geojson_to_collection(geojson_dict), expected)
        self.assertEqual(geojson_to_geometry(geojson_dict), expected)
        self.assertEqual(
            geojson_to_geometry(geojson_dict, GeometryCollection), expected
        )

        with self.assertRaises(InvalidGeometryConversionError) as cm:
            geojson_to_geometry(geojson_dict, PointZ)
        self.assertEqual(cm.exception.found_type, "GeometryCollection")

    def test_empty_feature_collection(self) -> None:
        self.assertEqual(geojson_to_collection(make_geojson([])), GeometryCollection())

    def test_geometry_document(self) -> None:
        self.assertEqual(geojson_to_geometry(POINT_DICT, PointZ), PointZ(1.0, 2.0, 3.0))
        self.assertEqual(
            geojson_to_collection(POINT_DICT), GeometryCollection([PointZ(1.0, 2.0, 3.0)])
        )

    def test_feature_collection_with_bad_feature(self) -> None:
        geojson_dict = make_geojson([POINT_DICT])  # type: ignore[list-item]
        with self.assertRaises(GeoJSONError):
            geojson_to_collection(geojson_dict)

    def test_loads(self) -> None:
        s = '{"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2, 3]}, "properties": null}'
        self.assertEqual(loads(s), PointZ(1.0, 2.0, 3.0))
        with self.assertRaises(GeoJSONError):
            loads("{")
