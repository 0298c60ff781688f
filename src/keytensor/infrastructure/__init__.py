from ._tensor_options import TensorOptions

__all__ = [TensorOptions.__name__]
