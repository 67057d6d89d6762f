"""
Базовый класс для встроенных модулей Runtime (RuntimeModule).

RuntimeModule: это домены системы (logger, devices), которые:
- регистрируются в CoreRuntime через ModuleManager
- используют только Core API (service_registry, smart_home, config)

КОНТРАКТ LIFECYCLE:
- register() вызывается ровно один раз при регистрации модуля
- start() вызывается ровно один раз при runtime.start()
- stop() вызывается ровно один раз при runtime.stop()
- Порядок: __init__ → register() → start() → stop()
"""

from abc import ABC, abstractmethod
from typing import Any


class RuntimeModule(ABC):
    """
    Базовый класс для встроенных модулей Runtime.

    LIFECYCLE:
        - register() регистрирует сервисы в service_registry
        - start() выполняет инициализацию, которая требует запущенного runtime
        - stop() отменяет регистрацию и освобождает ресурсы
    """

    def __init__(self, runtime: Any):
        """
        Инициализация модуля.

        Args:
            runtime: экземпляр CoreRuntime
        """
        self.runtime = runtime

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Уникальное имя модуля.

        Returns:
            имя модуля (например, "logger", "devices")
        """
        pass

    async def register(self) -> None:
        """
        Регистрация модуля в CoreRuntime.

        По умолчанию: no-op. Переопределяется в подклассах.
        """
        pass

    async def start(self) -> None:
        """
        Запуск модуля.

        Вызывается после успешного register(). По умолчанию: no-op.
        """
        pass

    async def stop(self) -> None:
        """
        Остановка модуля.

        Должен быть безопасным, даже если start() не был вызван.
        По умолчанию: no-op.
        """
        pass
