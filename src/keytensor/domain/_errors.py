"""
Error types for KeyTensor.

KeyTensor has a single error kind: an *invalid variant*. It is raised
whenever an operation receives an enumerant (or something meant to become
one) that lies outside the set the operation handles, e.g. querying the byte
width of the unresolved ``DataType.DEFAULT`` placeholder, or parsing the
device string ``"tpu"``.

An invalid variant is a programming defect rather than a transient condition.
It is never retried and never replaced by a fallback value; it propagates
straight to the caller.
"""

from typing import Any, Iterable, Optional


class InvalidVariantError(ValueError):
    """
    Raised when an operation is given a value outside its known variant set.

    Subclasses `ValueError` so that callers which already guard device/dtype
    parsing with ``except ValueError`` keep working.

    Attributes
    ----------
    op : str
        Name of the operation that rejected the value (e.g., "size_of").
    value : Any
        The offending value, exactly as it was passed in.
    """

    def __init__(
        self, op: str, value: Any, expected: Optional[Iterable[Any]] = None
    ) -> None:
        """
        Initialize the InvalidVariantError.

        Parameters
        ----------
        op : str
            The operation name that rejected `value`.
        value : Any
            The rejected value.
        expected : Optional[Iterable[Any]]
            Accepted values, listed in the message when provided.
        """
        msg = f"{op}: invalid variant {value!r}"
        if expected is not None:
            msg += f". Expected one of: {', '.join(str(e) for e in expected)}"
        super().__init__(msg)
        self.op = op
        self.value = value
