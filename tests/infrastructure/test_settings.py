import os
import tempfile
import unittest

from src.keytensor.domain._dtype import DataType
from src.keytensor.domain._errors import InvalidVariantError
from src.keytensor.domain.device import Device
from src.keytensor.infrastructure.config import _settings
from src.keytensor.infrastructure.config._settings import Settings


class TestSettingsDefaults(unittest.TestCase):
    def test_builtin_defaults(self):
        s = Settings()
        self.assertEqual(s.default_device, Device("cpu"))
        self.assertIs(s.default_dtype, DataType.FLOAT)
        self.assertFalse(s.debug)

    def test_empty_environment_gives_builtin_defaults(self):
        self.assertEqual(Settings.from_env(environ={}), Settings())

    def test_placeholder_dtype_is_rejected(self):
        with self.assertRaises(InvalidVariantError):
            Settings(default_dtype=DataType.DEFAULT)

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            Settings().debug = True


class TestSettingsFromEnv(unittest.TestCase):
    def test_reads_variables(self):
        s = Settings.from_env(
            environ={
                "KEYTENSOR_DEFAULT_DEVICE": "cuda",
                "KEYTENSOR_DEFAULT_DTYPE": "float64",
                "KEYTENSOR_DEBUG": "yes",
            }
        )
        self.assertEqual(s.default_device, Device("cuda"))
        self.assertIs(s.default_dtype, DataType.DOUBLE)
        self.assertTrue(s.debug)

    def test_invalid_device_raises(self):
        with self.assertRaises(InvalidVariantError):
            Settings.from_env(environ={"KEYTENSOR_DEFAULT_DEVICE": "tpu"})

    def test_invalid_dtype_raises(self):
        with self.assertRaises(InvalidVariantError):
            Settings.from_env(environ={"KEYTENSOR_DEFAULT_DTYPE": "int8"})

    def test_default_placeholder_from_env_raises(self):
        with self.assertRaises(InvalidVariantError):
            Settings.from_env(environ={"KEYTENSOR_DEFAULT_DTYPE": "default"})

    def test_unrecognised_bool_warns_and_falls_back(self):
        with self.assertLogs(_settings.logger.name, level="WARNING") as logs:
            s = Settings.from_env(environ={"KEYTENSOR_DEBUG": "maybe"})
        self.assertFalse(s.debug)
        self.assertIn("KEYTENSOR_DEBUG", logs.output[0])

    def test_false_spellings(self):
        for raw in ("0", "false", "No", "OFF"):
            with self.subTest(raw=raw):
                self.assertFalse(Settings.from_env(environ={"KEYTENSOR_DEBUG": raw}).debug)


class TestSettingsDotenv(unittest.TestCase):
    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".env")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("KEYTENSOR_DEFAULT_DTYPE=double\n")
            f.write("KEYTENSOR_DEBUG=1\n")

    def tearDown(self):
        os.remove(self.path)

    def test_env_file_argument(self):
        s = Settings.from_env(environ={}, env_file=self.path)
        self.assertIs(s.default_dtype, DataType.DOUBLE)
        self.assertTrue(s.debug)

    def test_env_file_variable(self):
        s = Settings.from_env(environ={"KEYTENSOR_ENV_FILE": self.path})
        self.assertIs(s.default_dtype, DataType.DOUBLE)

    def test_missing_env_file_warns_and_is_ignored(self):
        missing = self.path + ".missing"
        with self.assertLogs(_settings.logger.name, level="WARNING") as logs:
            s = Settings.from_env(environ={"KEYTENSOR_ENV_FILE": missing})
        self.assertEqual(s, Settings())
        self.assertIn(missing, logs.output[0])

    def test_environment_overrides_file(self):
        s = Settings.from_env(
            environ={"KEYTENSOR_DEFAULT_DTYPE": "float"}, env_file=self.path
        )
        self.assertIs(s.default_dtype, DataType.FLOAT)
        self.assertTrue(s.debug)


if __name__ == "__main__":
    unittest.main()
