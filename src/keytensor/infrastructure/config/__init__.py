from ._settings import (
    ENV_DEBUG,
    ENV_DEFAULT_DEVICE,
    ENV_DEFAULT_DTYPE,
    ENV_FILE,
    Settings,
)

__all__ = [
    Settings.__name__,
    "ENV_DEBUG",
    "ENV_DEFAULT_DEVICE",
    "ENV_DEFAULT_DTYPE",
    "ENV_FILE",
]
