"""
Context-local registers and scoped overrides.

A `Register` holds one piece of ambient state (the default device, the
default dtype, the debug flag). Its value lives in a `contextvars.ContextVar`,
so each thread and each asyncio task owns its own copy: a write in one
execution context is never observed by another. Asyncio tasks start from a
snapshot of the context that created them; a brand-new `contextvars.Context`
starts from the register's initial value.

A `ScopedOverride` temporarily replaces a register's value for the duration
of a ``with`` block and restores the previous value however the block exits:

    with DEVICE.override("cuda"):
        ...  # the default device is CUDA here
    # the previous default device is back

Overrides nest last-in-first-out: leaving the innermost block restores the
value that was current when that block was entered, which may itself have
been installed by an enclosing override.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from types import TracebackType
from typing import Any, Callable, Generic, Optional, Type, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Register(Generic[T]):
    """
    A named, context-local value with validation on write.

    Parameters
    ----------
    name : str
        Name used in log messages and for the underlying ContextVar.
    initial : T
        Value seen by any execution context that has not written the register.
    coerce : Callable[[Any], T]
        Converts user input into a valid register value, raising on invalid
        input. Applied on every write.
    """

    def __init__(self, name: str, initial: T, coerce: Callable[[Any], T]) -> None:
        self._name = name
        self._coerce = coerce
        self._var: ContextVar[T] = ContextVar(f"keytensor.{name}", default=coerce(initial))

    @property
    def name(self) -> str:
        return self._name

    def get(self) -> T:
        """Return the value most recently written in the current context."""
        return self._var.get()

    def set(self, value: Any) -> T:
        """
        Overwrite the register in the current context.

        The value is validated first; an invalid value raises and leaves the
        register untouched.

        Returns
        -------
        T
            The coerced value that was stored.
        """
        coerced = self._coerce(value)
        self._var.set(coerced)
        logger.debug("%s <- %s", self._name, coerced)
        return coerced

    def coerce(self, value: Any) -> T:
        return self._coerce(value)

    def override(self, value: Any) -> "ScopedOverride[T]":
        """Return a single-use guard that installs `value` while it is active."""
        return ScopedOverride(self, value)

    def __repr__(self) -> str:
        return f"Register({self._name!r}, value={self.get()!r})"


_PENDING = "pending"
_ACTIVE = "active"
_DONE = "done"


class ScopedOverride(Generic[T]):
    """
    Save/restore transaction over a single `Register`.

    The replacement value is validated when the guard is created, so an invalid
    value fails before the register is touched. Entering the guard captures the
    register's current value and installs the replacement; exiting writes the
    captured value back. Exceptions raised inside the block are never
    suppressed.

    A guard owns its transaction exclusively: it may be entered once and
    exited once, and it cannot be copied.

    Parameters
    ----------
    register : Register[T]
        The register to override.
    value : Any
        Replacement value; coerced with the register's coercion function.
    """

    __slots__ = ("_register", "_value", "_saved", "_state")

    def __init__(self, register: Register[T], value: Any) -> None:
        self._register = register
        self._value: T = register.coerce(value)
        self._saved: Optional[T] = None
        self._state = _PENDING

    @property
    def value(self) -> T:
        """The value installed while the guard is active."""
        return self._value

    @property
    def active(self) -> bool:
        return self._state is _ACTIVE

    def __enter__(self) -> T:
        if self._state is not _PENDING:
            raise RuntimeError(
                f"Override of {self._register.name!r} is single-use and was already entered"
            )
        self._saved = self._register.get()
        self._register.set(self._value)
        self._state = _ACTIVE
        return self._value

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._state is not _ACTIVE:
            raise RuntimeError(
                f"Override of {self._register.name!r} exited without being active"
            )
        self._state = _DONE
        self._register.set(self._saved)
        self._saved = None

    def run(self, fn: Callable[..., R], *args: Any, **kwargs: Any) -> R:
        """
        Call ``fn(*args, **kwargs)`` with the override installed.

        The previous value is restored whether `fn` returns or raises.
        """
        with self:
            return fn(*args, **kwargs)

    def __copy__(self) -> "ScopedOverride[T]":
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict) -> "ScopedOverride[T]":
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __repr__(self) -> str:
        return (
            f"ScopedOverride({self._register.name!r}, value={self._value!r}, "
            f"state={self._state})"
        )
