"""
Initial values for the default-context registers.

`Settings` collects the values every fresh execution context starts from:
default device, default dtype and the debug flag. They are read from
environment variables, optionally backed by a dotenv file:

- ``KEYTENSOR_DEFAULT_DEVICE``: "cpu" (default) or "cuda"
- ``KEYTENSOR_DEFAULT_DTYPE``: "float"/"float32" (default) or "double"/"float64"
- ``KEYTENSOR_DEBUG``: 1/true/yes/on or 0/false/no/off (default off)
- ``KEYTENSOR_ENV_FILE``: path of a dotenv file to read the above from

Variables set in the real environment take precedence over the dotenv file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import dotenv_values
from typing_extensions import Self

from ...domain._dtype import DataType
from ...domain._errors import InvalidVariantError
from ...domain.device import Device, DeviceType

logger = logging.getLogger(__name__)

ENV_DEFAULT_DEVICE = "KEYTENSOR_DEFAULT_DEVICE"
ENV_DEFAULT_DTYPE = "KEYTENSOR_DEFAULT_DTYPE"
ENV_DEBUG = "KEYTENSOR_DEBUG"
ENV_FILE = "KEYTENSOR_ENV_FILE"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _bool_from_env(name: str, value: Optional[str], *, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    key = value.strip().lower()
    if key in _TRUE:
        return True
    if key in _FALSE:
        return False
    logger.warning("Ignoring unrecognised %s=%r; using %s", name, value, default)
    return default


@dataclass(frozen=True)
class Settings:
    """
    Initial register values for a new execution context.

    Attributes
    ----------
    default_device : Device
        Device used when a caller omits one. Defaults to the CPU.
    default_dtype : DataType
        Concrete dtype used when a caller omits one. Defaults to `FLOAT`.
    debug : bool
        Initial state of the debug gate. Defaults to False.
    """

    default_device: Device = field(default_factory=lambda: Device(DeviceType.CPU))
    default_dtype: DataType = DataType.FLOAT
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.default_dtype.is_concrete:
            raise InvalidVariantError("Settings.default_dtype", self.default_dtype)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = None,
    ) -> Self:
        """
        Build settings from environment variables and an optional dotenv file.

        Parameters
        ----------
        environ : Optional[Mapping[str, str]]
            Variables to read. Defaults to `os.environ`.
        env_file : Optional[str]
            Dotenv file to read first. Defaults to the file named by
            ``KEYTENSOR_ENV_FILE`` in `environ`, if any.

        Returns
        -------
        Settings
            The resolved settings.

        Raises
        ------
        InvalidVariantError
            If the configured device or dtype is not a supported variant.
        """
        env = dict(os.environ if environ is None else environ)
        env_file = env_file or env.get(ENV_FILE)

        values: dict[str, Optional[str]] = {}
        if env_file and not os.path.isfile(env_file):
            logger.warning("Dotenv file %r not found; ignoring it", env_file)
        elif env_file:
            values.update(dotenv_values(env_file))
            logger.debug("Loaded %d value(s) from %s", len(values), env_file)
        values.update(env)

        defaults = cls()
        device = values.get(ENV_DEFAULT_DEVICE)
        dtype = values.get(ENV_DEFAULT_DTYPE)
        settings = cls(
            default_device=(
                Device(device) if device else defaults.default_device
            ),
            default_dtype=(
                DataType.parse(dtype) if dtype else defaults.default_dtype
            ),
            debug=_bool_from_env(ENV_DEBUG, values.get(ENV_DEBUG), default=defaults.debug),
        )
        logger.debug("Resolved %s", settings)
        return settings
