"""
DevicesModule: встроенный модуль управления устройствами.

Регистрирует сервисы devices.* и при старте наполняет реестр
стартовым набором устройств (если включено в конфигурации).
"""

from smarthome.runtime_module import RuntimeModule
from . import services
from .proxy import LoggingDeviceProxy


class DevicesModule(RuntimeModule):
    """
    Модуль управления устройствами.

    Реестр устройств (runtime.smart_home) принадлежит runtime,
    модуль только открывает к нему доступ через service_registry.
    """

    @property
    def name(self) -> str:
        """Уникальное имя модуля."""
        return "devices"

    async def register(self) -> None:
        """Регистрирует сервисы devices.*."""
        service_names = [
            ("devices.add_light", services.add_light),
            ("devices.create", services.create_device),
            ("devices.turn_on", services.turn_on),
            ("devices.turn_off", services.turn_off),
            ("devices.status", services.get_status),
            ("devices.list", services.list_devices),
            ("devices.get", services.get_device),
            ("devices.set_temperature", services.set_temperature),
            ("devices.subscribe", services.subscribe),
            ("devices.unsubscribe", services.unsubscribe),
        ]

        self._registered_services = []

        for name, func in service_names:
            # Skip services that are already registered (idempotent)
            if await self.runtime.service_registry.has_service(name):
                continue

            async def _wrapper(*args, _func=func, **kwargs):
                return await _func(self.runtime, *args, **kwargs)

            await self.runtime.service_registry.register(name, _wrapper)
            self._registered_services.append(name)

    async def start(self) -> None:
        """
        Запуск модуля.

        - команды turn_on/turn_off идут через LoggingDeviceProxy
        - пустой реестр наполняется стартовым набором устройств
        """
        logger = self.runtime.module_manager.get_module("logger")
        if logger is not None:
            self.runtime.smart_home.command_proxy = lambda device: LoggingDeviceProxy(device, logger.emit)

        config = self.runtime.config
        if config.seed_demo_devices and len(self.runtime.smart_home) == 0:
            await services.seed_demo_devices(self.runtime, config.initial_temperature)

    async def stop(self) -> None:
        """Отменяет регистрацию сервисов."""
        self.runtime.smart_home.command_proxy = None

        for service_name in getattr(self, "_registered_services", []):
            await self.runtime.service_registry.unregister(service_name)
        self._registered_services = []
