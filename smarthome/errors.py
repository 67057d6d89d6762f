"""
Исключения домена умного дома.
"""

from typing import Any, Dict, Optional


class SmartHomeError(Exception):
    """Базовое исключение Smart Home Runtime."""

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.extra = extra or {}


class InvalidArgument(SmartHomeError, ValueError):
    """Неизвестный тип устройства или операция, неприменимая к устройству."""


class DeviceNotFound(SmartHomeError, LookupError):
    """Устройство с таким идентификатором не зарегистрировано."""

    def __init__(self, device_id: Any):
        super().__init__("Device not found.", {"device_id": device_id})
        self.device_id = device_id
