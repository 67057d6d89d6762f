"""
DeviceProxy: прозрачная обёртка над устройством.

Точка расширения для сквозной логики (логирование, контроль доступа)
без изменения конкретных устройств и кода, который зависит только от Device.
"""

from typing import Any, Callable

from .models import Device


# Синхронный логгер: log(level, message, **context)
LogFunc = Callable[..., None]


class DeviceProxy(Device):
    """Перенаправляет каждый вызов обёрнутому устройству и возвращает его результат как есть."""

    def __init__(self, device: Device):
        # Своего состояния нет, идентификатор берётся у обёрнутого устройства
        self._device = device

    @property
    def device_id(self) -> int:
        return self._device.device_id

    @property
    def device_type(self) -> str:  # type: ignore[override]
        return self._device.device_type

    @property
    def wrapped(self) -> Device:
        return self._device

    def turn_on(self) -> None:
        return self._device.turn_on()

    def turn_off(self) -> None:
        return self._device.turn_off()

    def get_status(self) -> str:
        return self._device.get_status()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._device!r})"


class LoggingDeviceProxy(DeviceProxy):
    """
    DeviceProxy, который пишет в лог каждую команду.

    Ошибки обёрнутого устройства логируются и пробрасываются дальше.

    Пример:
        proxy = LoggingDeviceProxy(light, log=lambda level, message, **ctx: ...)
        proxy.turn_on()
    """

    def __init__(self, device: Device, log: LogFunc):
        super().__init__(device)
        self._log = log

    def _forward(self, command: str, func: Callable[[], Any]) -> Any:
        self._log("debug", f"Device command: {command}", device_id=self.device_id, command=command)
        try:
            return func()
        except Exception as e:
            self._log("error", f"Device command failed: {e}", device_id=self.device_id, command=command)
            raise

    def turn_on(self) -> None:
        return self._forward("turn_on", self._device.turn_on)

    def turn_off(self) -> None:
        return self._forward("turn_off", self._device.turn_off)
