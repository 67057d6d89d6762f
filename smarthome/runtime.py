"""
CoreRuntime - главный класс Smart Home Runtime.

Объединяет все компоненты:
- Config
- ServiceRegistry
- SmartHomeSystem (реестр устройств)
- ModuleManager

Реестр устройств: явный объект runtime, а не глобальный singleton:
каждый экземпляр CoreRuntime владеет своим набором устройств.
"""

from typing import Optional

from smarthome.config import Config
from smarthome.module_manager import ModuleManager
from smarthome.service_registry import ServiceRegistry
from modules.devices.system import SmartHomeSystem


class CoreRuntime:
    """
    Главный класс Smart Home Runtime.

    Координирует работу всех компонентов.
    Предоставляет единую точку доступа для модулей и консоли.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Инициализация runtime.

        Args:
            config: конфигурация (если None - используются значения по умолчанию)
        """
        if config is None:
            config = Config()
        config.validate()
        self.config = config

        self.service_registry = ServiceRegistry(default_timeout=config.service_call_timeout)
        self.smart_home = SmartHomeSystem()
        self.module_manager = ModuleManager(self)

        self._running = False

    @property
    def is_running(self) -> bool:
        """Запущен ли runtime."""
        return self._running

    async def start(self) -> None:
        """
        Запустить runtime.

        - регистрирует встроенные модули (logger, devices)
        - запускает их в порядке регистрации
        """
        if self._running:
            return

        await self.module_manager.register_builtin_modules(self)
        try:
            await self.module_manager.start_all()
        except RuntimeError:
            # stop() вызывается даже при частичном старте
            await self.module_manager.stop_all()
            raise

        self._running = True

    async def stop(self) -> None:
        """
        Остановить runtime: останавливает все модули.

        Модули снимают свои сервисы в stop(), поэтому менеджер модулей
        очищается: повторный start() зарегистрирует их заново.
        Реестр устройств сохраняется.
        """
        if not self._running:
            return

        await self.module_manager.stop_all()
        self.module_manager.clear()
        self._running = False

    async def shutdown(self) -> None:
        """
        Полное завершение работы runtime.

        - останавливает runtime
        - очищает реестр сервисов и менеджер модулей
        """
        await self.stop()
        self.module_manager.clear()
        await self.service_registry.clear()
