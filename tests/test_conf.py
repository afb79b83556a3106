from decimal import Decimal
from unittest import TestCase

from geotypes3d.conf import Config, config


class TestConfig(TestCase):
    def test_defaults(self) -> None:
        conf = Config()
        self.assertEqual(conf.missing_z, "zero")
        self.assertIs(conf.default_dtype, float)
        self.assertEqual(conf.to_dict(), {"missing_z": "zero", "default_dtype": float})

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            Config(missing_z="fill")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            Config(default_dtype=int)

        conf = Config()
        with self.assertRaises(ValueError):
            conf.missing_z = "drop"  # type: ignore[assignment]
        with self.assertRaises(ValueError):
            conf.update(unknown=1)  # type: ignore[call-arg]

    def test_update_is_atomic(self) -> None:
        conf = Config()
        with self.assertRaises(TypeError):
            conf.update(missing_z="error", default_dtype=int)
        self.assertEqual(conf.missing_z, "zero")

    def test_context(self) -> None:
        with config.context(missing_z="error", default_dtype=Decimal):
            self.assertEqual(config.missing_z, "error")
            self.assertIs(config.default_dtype, Decimal)
        self.assertEqual(config.missing_z, "zero")
        self.assertIs(config.default_dtype, float)
