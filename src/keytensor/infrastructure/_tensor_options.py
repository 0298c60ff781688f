"""
Resolved (dtype, device) pair passed to tensor constructors.

`TensorOptions` lets callers state as much or as little as they care about:

    TensorOptions()                          # both from the current defaults
    TensorOptions(DataType.DOUBLE)           # explicit dtype, default device
    TensorOptions("cuda")                    # explicit device, default dtype
    TensorOptions(DataType.DOUBLE, "cuda")   # fully explicit

Omitted fields are filled from the default-context registers immediately,
inside the constructor, so the result never changes if the defaults are
modified afterwards. Explicit fields always win over the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from typing_extensions import Self

from ..domain._dtype import DataType, DTypeSpec
from ..domain.device import Device, DeviceSpec, DeviceType
from .context._defaults import get_default_device, get_default_dtype


def _is_device_spec(value: Any) -> bool:
    if isinstance(value, (Device, DeviceType)):
        return True
    return isinstance(value, str) and value.strip().lower() in {
        t.value for t in DeviceType
    }


@dataclass(frozen=True, init=False)
class TensorOptions:
    """
    Concrete element type and placement for a tensor.

    Parameters
    ----------
    dtype : DataType | str | numpy dtype-like | Device | DeviceType, optional
        Element type. `None` or `DataType.DEFAULT` selects the current default
        dtype. A device specification passed here (with `device` omitted) is
        taken as the device, so ``TensorOptions("cuda")`` works.
    device : Device | DeviceType | str, optional
        Placement. `None` selects the current default device. A bare
        `DeviceType` is promoted to a `Device`.

    Attributes
    ----------
    dtype : DataType
        Always concrete after construction.
    device : Device
        Always a `Device` after construction.

    Raises
    ------
    InvalidVariantError
        If either field names an unsupported variant.
    """

    dtype: DataType
    device: Device

    def __init__(
        self,
        dtype: Union[DTypeSpec, DeviceSpec, None] = None,
        device: Optional[DeviceSpec] = None,
    ) -> None:
        if device is None and _is_device_spec(dtype):
            dtype, device = None, dtype

        resolved_dtype = DataType.DEFAULT if dtype is None else DataType.parse(dtype)
        if not resolved_dtype.is_concrete:
            resolved_dtype = get_default_dtype()
        resolved_device = (
            get_default_device() if device is None else Device.coerce(device)
        )

        object.__setattr__(self, "dtype", resolved_dtype)
        object.__setattr__(self, "device", resolved_device)

    def with_dtype(self, dtype: DTypeSpec) -> Self:
        """Return a copy with `dtype` replaced (resolved like the constructor)."""
        return replace(self, dtype=dtype)

    def with_device(self, device: DeviceSpec) -> Self:
        """Return a copy with `device` replaced."""
        return replace(self, device=device)

    def __str__(self) -> str:
        return f"TensorOptions(dtype={self.dtype.name.lower()}, device={self.device})"
