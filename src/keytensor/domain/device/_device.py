"""
Device abstraction utilities.

This module defines lightweight abstractions for representing computation
devices (CPU and CUDA GPUs) in a framework-agnostic way. It provides:

- `DeviceType`: an enumeration of supported device categories
- `Device`: a concrete device descriptor that validates and normalizes
  user-facing device specifications such as "cpu", "cuda" or
  `DeviceType.CUDA`

A device currently carries no index; multi-GPU selection is left for a later
extension of `Device`.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .._errors import InvalidVariantError


class DeviceType(Enum):
    """
    Enumeration of supported device categories.

    Attributes
    ----------
    CPU : DeviceType
        Central Processing Unit.
    CUDA : DeviceType
        NVIDIA CUDA-enabled Graphics Processing Unit.
    """

    CPU = "cpu"
    CUDA = "cuda"


DeviceSpec = Union["Device", DeviceType, str]


class Device:
    """
    Concrete computation device descriptor.

    Parameters
    ----------
    device : Device | DeviceType | str, optional
        Device specification. Strings must be "cpu" or "cuda"
        (case-insensitive). Defaults to the CPU.

    Raises
    ------
    InvalidVariantError
        If the specification does not name a supported device.

    Notes
    -----
    `__slots__` prevents dynamic attribute creation and `__setattr__` rejects
    reassignment, so a `Device` is an immutable value and may be shared
    freely (e.g. as the initial value of a context-local register).
    """

    __slots__ = ("type",)

    def __init__(self, device: DeviceSpec = DeviceType.CPU):
        if isinstance(device, Device):
            device_type = device.type
        elif isinstance(device, DeviceType):
            device_type = device
        elif isinstance(device, str):
            try:
                device_type = DeviceType(device.strip().lower())
            except ValueError as e:
                raise InvalidVariantError(
                    "Device", device, [t.value for t in DeviceType]
                ) from e
        else:
            raise InvalidVariantError("Device", device, [t.value for t in DeviceType])
        object.__setattr__(self, "type", device_type)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self.type,))

    @classmethod
    def coerce(cls, device: DeviceSpec) -> "Device":
        """
        Return `device` as a `Device`, reusing it when it already is one.

        A bare `DeviceType` tag is promoted to a `Device` with no further
        attributes.
        """
        if isinstance(device, Device):
            return device
        return cls(device)

    def __str__(self) -> str:
        """
        Return the canonical string representation of the device.

        Returns
        -------
        str
            "cpu" or "cuda".
        """
        return self.type.value

    def __repr__(self) -> str:
        return f"Device('{self}')"

    def __eq__(self, other: object) -> bool:
        """
        Compare two Device objects for semantic equality.

        Devices are equal when they have the same device type.
        """
        if not isinstance(other, Device):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def is_cpu(self) -> bool:
        """
        Check whether this device represents a CPU.

        Returns
        -------
        bool
            True if the device type is CPU, False otherwise.
        """
        return self.type is DeviceType.CPU

    def is_cuda(self) -> bool:
        """
        Check whether this device represents a CUDA GPU.

        Returns
        -------
        bool
            True if the device type is CUDA, False otherwise.
        """
        return self.type is DeviceType.CUDA
