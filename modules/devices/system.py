"""
SmartHomeSystem: реестр устройств.

Владеет всеми добавленными устройствами, назначает им идентификаторы
и маршрутизирует команды по идентификатору.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from smarthome.errors import DeviceNotFound
from .models import Device


# Обёртка, через которую проходят команды turn_on/turn_off (например, LoggingDeviceProxy)
CommandProxyFactory = Callable[[Device], Device]


class SmartHomeSystem:
    """
    Реестр устройств умного дома.

    Идентификаторы назначаются последовательно начиная с 1 и никогда
    не переиспользуются. Операции удаления нет.
    """

    def __init__(self, command_proxy: Optional[CommandProxyFactory] = None):
        self._devices: Dict[int, Device] = {}
        self._device_id_counter = 1
        self.command_proxy = command_proxy

    def get_next_device_id(self) -> int:
        """Идентификатор, который получит следующее добавленное устройство. Счётчик не меняется."""
        return self._device_id_counter

    def add_device(self, device: Device) -> int:
        """
        Добавить устройство.

        Returns:
            назначенный идентификатор
        """
        device_id = self._device_id_counter
        self._devices[device_id] = device
        self._device_id_counter += 1
        return device_id

    def get_device(self, device_id: int) -> Device:
        """
        Raises:
            DeviceNotFound: если устройства с таким идентификатором нет
        """
        device = self._devices.get(device_id)
        if device is None:
            raise DeviceNotFound(device_id)
        return device

    def turn_on(self, device_id: int) -> bool:
        """Включить устройство. False, если устройство не найдено."""
        device = self._devices.get(device_id)
        if device is None:
            return False
        self._route(device).turn_on()
        return True

    def turn_off(self, device_id: int) -> bool:
        """Выключить устройство. False, если устройство не найдено."""
        device = self._devices.get(device_id)
        if device is None:
            return False
        self._route(device).turn_off()
        return True

    def get_status(self) -> str:
        """Сводный отчёт по всем устройствам в порядке возрастания идентификатора."""
        parts = [
            f"Device {device_id}: {self._devices[device_id].get_status()}"
            for device_id in sorted(self._devices)
        ]
        return " ".join(parts).strip()

    @property
    def devices(self) -> Mapping[int, Device]:
        return MappingProxyType(self._devices)

    def _route(self, device: Device) -> Device:
        if self.command_proxy is None:
            return device
        return self.command_proxy(device)

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, device_id: object) -> bool:
        return device_id in self._devices
