from ._defaults import (
    DEBUG,
    DEVICE,
    DTYPE,
    debug_mode,
    get_default_device,
    get_default_dtype,
    reset_defaults,
    set_debug_mode,
    set_default_device,
    set_default_dtype,
    use_debug_mode,
    use_device,
    use_dtype,
)
from ._register import Register, ScopedOverride
from ._tick import TickCounter, current_tick, next_tick

__all__ = [
    Register.__name__,
    ScopedOverride.__name__,
    TickCounter.__name__,
    get_default_device.__name__,
    set_default_device.__name__,
    get_default_dtype.__name__,
    set_default_dtype.__name__,
    debug_mode.__name__,
    set_debug_mode.__name__,
    use_device.__name__,
    use_dtype.__name__,
    use_debug_mode.__name__,
    reset_defaults.__name__,
    next_tick.__name__,
    current_tick.__name__,
    "DEVICE",
    "DTYPE",
    "DEBUG",
]
