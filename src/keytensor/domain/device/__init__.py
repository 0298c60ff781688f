from ._device import Device, DeviceSpec, DeviceType
from ._device_protocol import DeviceLike

__all__ = [
    Device.__name__,
    DeviceType.__name__,
    DeviceLike.__name__,
    "DeviceSpec",
]
