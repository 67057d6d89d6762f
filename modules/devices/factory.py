"""
DeviceFactory: создание устройства по тегу типа.

Чистое конструирование: фабрика не взаимодействует с реестром устройств.
"""

from typing import Callable, Dict, List

from smarthome.errors import InvalidArgument
from .models import Device, Door, Light, Thermostat


# Тег типа -> конструктор (device_id, temperature) -> Device
DeviceBuilder = Callable[[int, int], Device]


class DeviceFactory:
    """
    Фабрика устройств.

    Поддерживаемые теги: "light", "thermostat", "door".
    Температура передаётся только термостату.
    """

    _builders: Dict[str, DeviceBuilder] = {
        "light": lambda device_id, temperature: Light(device_id),
        "thermostat": lambda device_id, temperature: Thermostat(device_id, temperature),
        "door": lambda device_id, temperature: Door(device_id),
    }

    @classmethod
    def create_device(cls, device_id: int, device_type: str, temperature: int = 0) -> Device:
        """
        Создать устройство.

        Args:
            device_id: идентификатор устройства
            device_type: тег типа ("light", "thermostat", "door")
            temperature: начальная температура (только для термостата)

        Returns:
            Новый экземпляр устройства

        Raises:
            InvalidArgument: если тег типа неизвестен
        """
        builder = cls._builders.get(device_type)
        if builder is None:
            raise InvalidArgument(
                f"Invalid device type: {device_type!r}",
                {"device_type": device_type, "available": cls.available_types()},
            )
        return builder(device_id, temperature)

    @classmethod
    def available_types(cls) -> List[str]:
        """Список поддерживаемых тегов типа."""
        return list(cls._builders.keys())
