"""
KeyTensor: default execution context and tensor options for a tensor library.

This package owns the ambient configuration that tensor allocation, autograd
and diagnostics components read:

- the default device and default dtype, with scoped overrides
- `TensorOptions`, which combines explicit arguments with those defaults
- a process-wide monotonic tick counter for staleness checks
- the debug-mode gate
- the interchange enumerations (device/data types, stride and initialize
  policies, unary/binary function tags)
"""

import logging

from .domain import (
    MAX_AXES,
    BinaryFunctionEnum,
    DataType,
    Device,
    DeviceLike,
    DeviceType,
    InitializePolicy,
    InvalidVariantError,
    StridePolicy,
    UnaryFunctionEnum,
    size_of,
    to_numpy_dtype,
)
from .infrastructure import TensorOptions
from .infrastructure.config import Settings
from .infrastructure.context import (
    ScopedOverride,
    TickCounter,
    current_tick,
    debug_mode,
    get_default_device,
    get_default_dtype,
    next_tick,
    reset_defaults,
    set_debug_mode,
    set_default_device,
    set_default_dtype,
    use_debug_mode,
    use_device,
    use_dtype,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "MAX_AXES",
    BinaryFunctionEnum.__name__,
    DataType.__name__,
    Device.__name__,
    DeviceLike.__name__,
    DeviceType.__name__,
    InitializePolicy.__name__,
    InvalidVariantError.__name__,
    StridePolicy.__name__,
    UnaryFunctionEnum.__name__,
    size_of.__name__,
    to_numpy_dtype.__name__,
    TensorOptions.__name__,
    Settings.__name__,
    ScopedOverride.__name__,
    TickCounter.__name__,
    current_tick.__name__,
    debug_mode.__name__,
    get_default_device.__name__,
    get_default_dtype.__name__,
    next_tick.__name__,
    reset_defaults.__name__,
    set_debug_mode.__name__,
    set_default_device.__name__,
    set_default_dtype.__name__,
    use_debug_mode.__name__,
    use_device.__name__,
    use_dtype.__name__,
]
