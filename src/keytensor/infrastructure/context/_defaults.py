"""
Default execution context: default device, default dtype and debug gate.

Every register is context-local (see `_register`). Initial values come from
`Settings.from_env()`, read once when this module is imported; with no
configuration every context starts as {device=cpu, dtype=FLOAT, debug=False}.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...domain._dtype import DataType, DTypeSpec
from ...domain._errors import InvalidVariantError
from ...domain.device import Device, DeviceSpec
from ..config._settings import Settings
from ._register import Register, ScopedOverride

logger = logging.getLogger(__name__)


def _concrete_dtype(value: DTypeSpec) -> DataType:
    dtype = DataType.parse(value)
    if not dtype.is_concrete:
        raise InvalidVariantError("set_default_dtype", value)
    return dtype


def _flag(value: Any) -> bool:
    # Strings such as "false" are truthy; only real booleans are accepted.
    if not isinstance(value, bool):
        raise InvalidVariantError("set_debug_mode", value, [True, False])
    return value


SETTINGS = Settings.from_env()

DEVICE: Register[Device] = Register("default_device", SETTINGS.default_device, Device.coerce)
DTYPE: Register[DataType] = Register("default_dtype", SETTINGS.default_dtype, _concrete_dtype)
DEBUG: Register[bool] = Register("debug_mode", SETTINGS.debug, _flag)


def get_default_device() -> Device:
    """Return the default device of the current execution context."""
    return DEVICE.get()


def set_default_device(device: DeviceSpec) -> None:
    """
    Set the default device of the current execution context.

    Parameters
    ----------
    device : Device | DeviceType | str
        The new default device.

    Raises
    ------
    InvalidVariantError
        If `device` does not name a supported device.
    """
    DEVICE.set(device)


def get_default_dtype() -> DataType:
    """Return the default (always concrete) dtype of the current execution context."""
    return DTYPE.get()


def set_default_dtype(dtype: DTypeSpec) -> None:
    """
    Set the default dtype of the current execution context.

    Raises
    ------
    InvalidVariantError
        If `dtype` is unsupported or is the `DataType.DEFAULT` placeholder.
    """
    DTYPE.set(dtype)


def debug_mode() -> bool:
    """
    Return whether debug mode is on in the current execution context.

    Consumers branch on this to run additional, more expensive consistency
    checks (e.g. detecting invalidated data during backprop).
    """
    return DEBUG.get()


def set_debug_mode(enabled: bool) -> None:
    """
    Switch debug mode on or off in the current execution context.

    Parameters
    ----------
    enabled : bool
        New state of the debug gate. Must be a real `bool`.

    Raises
    ------
    InvalidVariantError
        If `enabled` is not a `bool` (e.g. the string "false").
    """
    DEBUG.set(enabled)


def use_device(device: DeviceSpec) -> ScopedOverride[Device]:
    """
    Temporarily change the default device.

    Example
    -------
        with use_device("cuda"):
            opts = TensorOptions()  # device is cuda
    """
    return DEVICE.override(device)


def use_dtype(dtype: DTypeSpec) -> ScopedOverride[DataType]:
    """Temporarily change the default dtype; see `use_device`."""
    return DTYPE.override(dtype)


def use_debug_mode(enabled: bool = True) -> ScopedOverride[bool]:
    """Temporarily switch debug mode on (or off)."""
    return DEBUG.override(enabled)


def reset_defaults(settings: Optional[Settings] = None) -> None:
    """
    Reinstall initial values in the current execution context.

    Parameters
    ----------
    settings : Optional[Settings]
        Values to install. Defaults to the settings read at import.
    """
    settings = settings or SETTINGS
    DEVICE.set(settings.default_device)
    DTYPE.set(settings.default_dtype)
    DEBUG.set(settings.debug)
    logger.debug("Default context reset to %s", settings)
