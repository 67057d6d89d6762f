"""
Devices Module - устройства умного дома.

Device, Light, Thermostat, Door, DeviceFactory, DeviceProxy, SmartHomeSystem.
"""

from .models import Device, Door, Light, Observable, Observer, Thermostat, TEMPERATURE_THRESHOLD
from .factory import DeviceFactory
from .proxy import DeviceProxy, LoggingDeviceProxy
from .system import SmartHomeSystem
from .module import DevicesModule

__all__ = [
    "Device",
    "Door",
    "Light",
    "Observable",
    "Observer",
    "Thermostat",
    "TEMPERATURE_THRESHOLD",
    "DeviceFactory",
    "DeviceProxy",
    "LoggingDeviceProxy",
    "SmartHomeSystem",
    "DevicesModule",
]
