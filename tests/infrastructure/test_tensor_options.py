import unittest

import numpy as np

from src.keytensor.domain._dtype import DataType
from src.keytensor.domain._errors import InvalidVariantError
from src.keytensor.domain.device import Device, DeviceType
from src.keytensor.infrastructure._tensor_options import TensorOptions
from src.keytensor.infrastructure.config._settings import Settings
from src.keytensor.infrastructure.context._defaults import (
    reset_defaults,
    set_default_device,
    set_default_dtype,
    use_device,
    use_dtype,
)

CPU = Device("cpu")
CUDA = Device("cuda")


class TensorOptionsTestCase(unittest.TestCase):
    def setUp(self):
        reset_defaults(Settings())

    def tearDown(self):
        reset_defaults(Settings())


class TestResolution(TensorOptionsTestCase):
    def test_all_defaults(self):
        opts = TensorOptions()
        self.assertIs(opts.dtype, DataType.FLOAT)
        self.assertEqual(opts.device, CPU)

    def test_explicit_dtype(self):
        opts = TensorOptions(DataType.DOUBLE)
        self.assertEqual((opts.dtype, opts.device), (DataType.DOUBLE, CPU))

    def test_explicit_dtype_and_device(self):
        opts = TensorOptions(DataType.DOUBLE, CUDA)
        self.assertEqual((opts.dtype, opts.device), (DataType.DOUBLE, CUDA))

    def test_device_only_positional(self):
        for spec in (CUDA, DeviceType.CUDA, "cuda"):
            with self.subTest(spec=spec):
                opts = TensorOptions(spec)
                self.assertEqual((opts.dtype, opts.device), (DataType.FLOAT, CUDA))

    def test_device_only_keyword(self):
        opts = TensorOptions(device=DeviceType.CUDA)
        self.assertIsInstance(opts.device, Device)
        self.assertEqual(opts.device, CUDA)

    def test_placeholder_dtype_is_substituted(self):
        set_default_dtype(DataType.DOUBLE)
        self.assertIs(TensorOptions(DataType.DEFAULT).dtype, DataType.DOUBLE)

    def test_dtype_specs_are_parsed(self):
        self.assertIs(TensorOptions("double").dtype, DataType.DOUBLE)
        self.assertIs(TensorOptions(np.float64).dtype, DataType.DOUBLE)

    def test_explicit_fields_beat_defaults(self):
        set_default_device("cuda")
        set_default_dtype("double")
        opts = TensorOptions(DataType.FLOAT, CPU)
        self.assertEqual((opts.dtype, opts.device), (DataType.FLOAT, CPU))

    def test_resolution_is_eager(self):
        opts = TensorOptions()
        set_default_device("cuda")
        set_default_dtype("double")
        self.assertEqual((opts.dtype, opts.device), (DataType.FLOAT, CPU))

    def test_never_contains_placeholder(self):
        for args in ((), (DataType.DEFAULT,), (None, None), (DataType.DEFAULT, "cuda")):
            with self.subTest(args=args):
                opts = TensorOptions(*args)
                self.assertTrue(opts.dtype.is_concrete)
                self.assertIsInstance(opts.device, Device)

    def test_invalid_fields_raise(self):
        with self.assertRaises(InvalidVariantError):
            TensorOptions("int8")
        with self.assertRaises(InvalidVariantError):
            TensorOptions(device="tpu")


class TestValueSemantics(TensorOptionsTestCase):
    def test_equality_and_hash(self):
        a = TensorOptions(DataType.DOUBLE, "cuda")
        b = TensorOptions("float64", DeviceType.CUDA)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            TensorOptions().dtype = DataType.DOUBLE

    def test_device_inside_options_is_immutable(self):
        opts = TensorOptions(device="cpu")
        before = hash(opts)
        with self.assertRaises(AttributeError):
            opts.device.type = DeviceType.CUDA
        self.assertEqual(hash(opts), before)
        self.assertEqual(str(opts), "TensorOptions(dtype=float, device=cpu)")

    def test_fields_hold_resolved_types(self):
        opts = TensorOptions("cuda")
        self.assertIsInstance(opts.dtype, DataType)
        self.assertIsInstance(opts.device, Device)
        self.assertIn("dtype=<DataType.FLOAT", repr(opts))

    def test_with_dtype_and_with_device(self):
        base = TensorOptions(DataType.DOUBLE, CUDA)
        self.assertEqual(base.with_dtype("float"), TensorOptions(DataType.FLOAT, CUDA))
        self.assertEqual(base.with_device("cpu"), TensorOptions(DataType.DOUBLE, CPU))
        self.assertEqual(base, TensorOptions(DataType.DOUBLE, CUDA))

    def test_str(self):
        self.assertEqual(
            str(TensorOptions(DataType.DOUBLE, CUDA)),
            "TensorOptions(dtype=double, device=cuda)",
        )


class TestEndToEnd(TensorOptionsTestCase):
    def test_nested_overrides(self):
        with use_device("cuda"):
            with use_dtype(DataType.DOUBLE):
                opts = TensorOptions()
                self.assertEqual((opts.dtype, opts.device), (DataType.DOUBLE, CUDA))
            opts = TensorOptions()
            self.assertEqual((opts.dtype, opts.device), (DataType.FLOAT, CUDA))
        opts = TensorOptions()
        self.assertEqual((opts.dtype, opts.device), (DataType.FLOAT, CPU))


if __name__ == "__main__":
    unittest.main()
