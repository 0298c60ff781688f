"""
Stable interchange enumerations consumed by allocation and dispatch code.

These values carry no behavior here. Allocation components read
`StridePolicy` and `InitializePolicy` next to a resolved `TensorOptions`;
element-wise dispatch components key their kernels on `UnaryFunctionEnum` and
`BinaryFunctionEnum` so that most of the glue code can be shared.

Any table keyed by one of these enumerations should be validated with
`assert_exhaustive` so that a new enumerant cannot be added silently.
"""

from enum import Enum

MAX_AXES = 6
"""
Maximum number of axes a tensor may have.

User tensors rarely exceed five axes; simplifying matrix multiplications may
temporarily add one more.
"""


class StridePolicy(Enum):
    """
    Which strides to choose when allocating a tensor.

    Attributes
    ----------
    KEEP_STRIDE_ORDER : StridePolicy
        Keep the size-ordering of the source tensor's strides. The chosen
        strides are all positive even if some source strides were negative.
    NORMALIZED : StridePolicy
        Strides of non-unit dimensions decrease from first to last axis, as in
        a C array; any dimension of size 1 gets a zero stride.
    COPY_STRIDES : StridePolicy
        Use exactly the strides provided.
    """

    KEEP_STRIDE_ORDER = 0
    NORMALIZED = 1
    COPY_STRIDES = 2


class InitializePolicy(Enum):
    """Whether to zero a freshly allocated tensor."""

    ZERO_DATA = 0
    UNINITIALIZED = 1


class UnaryFunctionEnum(Enum):
    """Unary element-wise functions that may be applied to tensors."""

    EXP = 0
    LOG = 1
    RELU = 2
    INVERT = 3
    SQUARE = 4


class BinaryFunctionEnum(Enum):
    """
    Binary element-wise functions that may be applied to tensors.

    Multiplication is deliberately absent: it is routed to BLAS separately.
    """

    ADD = 0
    DIVIDE = 1
    MAX = 2
    MIN = 3
