"""
Device abstraction contracts for KeyTensor.

This module defines a duck-typed `DeviceLike` protocol that represents a
computation device descriptor (CPU or CUDA) without coupling consumers to the
concrete `Device` class.

Allocation and dispatch components that read `TensorOptions.device` are
expected to type against `DeviceLike` so that they can accept any descriptor
exposing the same members.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DeviceLike(Protocol):
    """
    Duck-typed device contract.

    Any object that provides these members can be used as a computation device
    descriptor, regardless of its concrete class identity.
    """

    type: object

    def is_cpu(self) -> bool: ...
    def is_cuda(self) -> bool: ...
    def __str__(self) -> str: ...
