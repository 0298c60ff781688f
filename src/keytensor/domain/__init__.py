from ._dtype import DataType, DTypeSpec, size_of, to_numpy_dtype
from ._enums import (
    MAX_AXES,
    BinaryFunctionEnum,
    InitializePolicy,
    StridePolicy,
    UnaryFunctionEnum,
)
from ._errors import InvalidVariantError
from .device import Device, DeviceLike, DeviceSpec, DeviceType

__all__ = [
    DataType.__name__,
    Device.__name__,
    DeviceType.__name__,
    DeviceLike.__name__,
    StridePolicy.__name__,
    InitializePolicy.__name__,
    UnaryFunctionEnum.__name__,
    BinaryFunctionEnum.__name__,
    InvalidVariantError.__name__,
    size_of.__name__,
    to_numpy_dtype.__name__,
    "DTypeSpec",
    "DeviceSpec",
    "MAX_AXES",
]
