"""
Модели устройств: общий интерфейс Device и три его варианта.

- Light: включается/выключается, реагирует на температуру термостата (Observer)
- Thermostat: хранит температуру и рассылает изменения подписчикам (Observable)
- Door: всегда "locked", команды on/off ничего не меняют
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple


# Температура, при которой подписанные лампы принудительно выключаются
TEMPERATURE_THRESHOLD = 75


class Device(ABC):
    """
    Интерфейс всех симулируемых устройств.

    Общего у вариантов только идентификатор.
    """

    device_type: str = ""

    def __init__(self, device_id: int):
        self._device_id = device_id

    @property
    def device_id(self) -> int:
        return self._device_id

    @abstractmethod
    def turn_on(self) -> None:
        """Включить устройство (no-op для устройств без состояния on/off)."""
        pass

    @abstractmethod
    def turn_off(self) -> None:
        """Выключить устройство (no-op для устройств без состояния on/off)."""
        pass

    @abstractmethod
    def get_status(self) -> str:
        """Однострочное описание текущего состояния."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.device_id,
            "type": self.device_type,
            "status": self.get_status(),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_id={self.device_id!r})"


class Observer(ABC):
    """Получает значения температуры от Observable."""

    @abstractmethod
    def update(self, temperature: int) -> None:
        pass


class Observable(ABC):
    """Хранит подписчиков и рассылает им изменения температуры."""

    @abstractmethod
    def add_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify_observers(self, temperature: int) -> None:
        pass


class Light(Device, Observer):
    """
    Лампа: единственное устройство с настоящим состоянием on/off.

    Подписывается на термостат и выключается при перегреве.
    """

    device_type = "light"

    def __init__(self, device_id: int):
        super().__init__(device_id)
        self._status = "off"

    @property
    def is_on(self) -> bool:
        return self._status == "on"

    def turn_on(self) -> None:
        self._status = "on"

    def turn_off(self) -> None:
        self._status = "off"

    def get_status(self) -> str:
        return f"Light {self.device_id} is {self._status}."

    def update(self, temperature: int) -> None:
        """
        Реакция на показание термостата.

        При TEMPERATURE_THRESHOLD и выше лампа выключается.
        Более низкая температура обратно её не включает.
        """
        if temperature >= TEMPERATURE_THRESHOLD:
            self.turn_off()


class Thermostat(Device, Observable):
    """Термостат: хранит температуру, on/off не меняют состояние."""

    device_type = "thermostat"

    def __init__(self, device_id: int, temperature: int):
        super().__init__(device_id)
        self._temperature = temperature
        # Ссылки без владения, уведомляются в порядке подписки
        self._observers: List[Observer] = []

    @property
    def temperature(self) -> int:
        return self._temperature

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def set_temperature(self, temperature: int) -> None:
        """Сохранить температуру и уведомить всех подписчиков до возврата."""
        self._temperature = temperature
        self.notify_observers(self._temperature)

    def turn_on(self) -> None:
        pass

    def turn_off(self) -> None:
        pass

    def get_status(self) -> str:
        return f"Thermostat is set to {self._temperature} degrees."

    def add_observer(self, observer: Observer) -> None:
        # Повторная подписка игнорируется: одно уведомление на изменение
        if any(o is observer for o in self._observers):
            return
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        for i, o in enumerate(self._observers):
            if o is observer:
                del self._observers[i]
                return

    def notify_observers(self, temperature: int) -> None:
        # Обход по снимку: подписчик может отписаться во время уведомления
        for observer in list(self._observers):
            observer.update(temperature)


class Door(Device):
    """Дверь: всегда заперта."""

    device_type = "door"

    def __init__(self, device_id: int):
        super().__init__(device_id)
        self._status = "locked"

    @property
    def is_locked(self) -> bool:
        return self._status == "locked"

    def turn_on(self) -> None:
        # У двери нет состояния on/off
        pass

    def turn_off(self) -> None:
        pass

    def get_status(self) -> str:
        return f"Door is {self._status}."
