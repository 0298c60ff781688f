"""
Numeric element types.

`DataType` lists the element types a tensor may hold. `DataType.DEFAULT` is a
placeholder meaning "whatever the current default dtype is"; it is only valid
as an unresolved request and is substituted by the options resolver before any
storage decision is made.

Two exhaustive tables live here:

- the NumPy dtype for each concrete variant (`to_numpy_dtype`)
- the storage width in bytes for each concrete variant (`size_of`)

Both are derived from the same NumPy table and both are checked at import
against every concrete `DataType` member, so extending the enumeration without
extending the tables is an import-time failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Union

import numpy as np

from ._errors import InvalidVariantError
from .utils._exhaustive import assert_exhaustive


class DataType(Enum):
    """
    Element data type of a tensor.

    Attributes
    ----------
    DEFAULT : DataType
        Unresolved placeholder; replaced by the current default dtype.
    FLOAT : DataType
        IEEE-754 single precision.
    DOUBLE : DataType
        IEEE-754 double precision.
    """

    # Integer and half-precision types are expected to be added later.
    DEFAULT = 0
    FLOAT = 1
    DOUBLE = 2

    @property
    def is_concrete(self) -> bool:
        """True for every variant except the `DEFAULT` placeholder."""
        return self is not DataType.DEFAULT

    @classmethod
    def parse(cls, value: "DTypeSpec") -> "DataType":
        """
        Convert a user-facing dtype specification into a `DataType`.

        Parameters
        ----------
        value : DataType | str | numpy dtype-like
            A member, a case-insensitive name ("float", "float32", "double",
            "float64", "default") or anything `numpy.dtype` accepts that maps
            to a supported type (e.g. ``np.float32``).

        Returns
        -------
        DataType
            The matching member (may be `DEFAULT`).

        Raises
        ------
        InvalidVariantError
            If `value` does not name a supported dtype.
        """
        if isinstance(value, DataType):
            return value
        if value is None:
            # np.dtype(None) means float64; reject it rather than guess.
            raise InvalidVariantError("DataType.parse", value)
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
            raise InvalidVariantError("DataType.parse", value, sorted(_ALIASES))
        try:
            np_dtype = np.dtype(value)
        except TypeError as e:
            raise InvalidVariantError("DataType.parse", value) from e
        for member, candidate in _NUMPY_DTYPES.items():
            if candidate == np_dtype:
                return member
        raise InvalidVariantError(
            "DataType.parse", value, [str(d) for d in _NUMPY_DTYPES.values()]
        )


DTypeSpec = Union[DataType, str, np.dtype, type]

_ALIASES: Dict[str, DataType] = {
    "default": DataType.DEFAULT,
    "float": DataType.FLOAT,
    "float32": DataType.FLOAT,
    "double": DataType.DOUBLE,
    "float64": DataType.DOUBLE,
}

_NUMPY_DTYPES: Dict[DataType, np.dtype] = {
    DataType.FLOAT: np.dtype(np.float32),
    DataType.DOUBLE: np.dtype(np.float64),
}

_SIZES: Dict[DataType, int] = {
    member: dtype.itemsize for member, dtype in _NUMPY_DTYPES.items()
}

assert_exhaustive(
    _NUMPY_DTYPES, DataType, name="numpy dtype table", include=lambda m: m.is_concrete
)
assert_exhaustive(_SIZES, DataType, name="size table", include=lambda m: m.is_concrete)


def _lookup(op: str, table: Dict[DataType, Any], dtype: Any) -> Any:
    # Only DataType members are hashed into the table; anything else
    # (ints, strings, foreign enums) is rejected by name.
    if isinstance(dtype, DataType) and dtype in table:
        return table[dtype]
    raise InvalidVariantError(op, dtype, [m.name for m in table])


def size_of(dtype: DataType) -> int:
    """
    Return the storage width in bytes of one element of `dtype`.

    Parameters
    ----------
    dtype : DataType
        A concrete data type (not `DataType.DEFAULT`).

    Returns
    -------
    int
        4 for `FLOAT`, 8 for `DOUBLE`.

    Raises
    ------
    InvalidVariantError
        If `dtype` is the `DEFAULT` placeholder or not a `DataType` at all.
    """
    return _lookup("size_of", _SIZES, dtype)


def to_numpy_dtype(dtype: DataType) -> np.dtype:
    """
    Return the NumPy dtype backing a concrete `DataType`.

    Raises
    ------
    InvalidVariantError
        If `dtype` is the `DEFAULT` placeholder or not a `DataType` at all.
    """
    return _lookup("to_numpy_dtype", _NUMPY_DTYPES, dtype)
