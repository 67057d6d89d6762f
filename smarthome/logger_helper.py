"""
Logger Helper - простой wrapper для логирования в компонентах runtime.

Использует встроенный LoggerModule через service_registry (сервис `logger.log`).
LoggerModule регистрируется первым в BUILTIN_MODULES, поэтому fallback
нужен только для случаев до инициализации runtime.

Реальная логика логирования находится в modules/logger/module.py.
"""

import sys
from typing import Optional, Any


async def log(runtime: Optional[Any], level: str, message: str, **context: Any) -> None:
    """
    Записать лог сообщение через LoggerModule.

    Args:
        runtime: экземпляр CoreRuntime (если None - пишем напрямую в stderr)
        level: уровень логирования (debug, info, warning, error)
        message: сообщение
        **context: дополнительный контекст
    """
    level = (level or "info").lower()
    if level not in ("debug", "info", "warning", "error"):
        level = "info"

    if runtime is not None:
        registry = getattr(runtime, "service_registry", None)
        if registry is not None and await registry.has_service("logger.log"):
            await registry.call("logger.log", level=level, message=message, **context)
            return

    # Fallback только для случаев до инициализации runtime
    log_message = f"[{level.upper()}] {message}"
    if context:
        log_message += f" {context}"
    print(log_message, file=sys.stderr)


async def debug(runtime: Optional[Any], message: str, **context: Any) -> None:
    """Логировать debug сообщение."""
    await log(runtime, "debug", message, **context)


async def info(runtime: Optional[Any], message: str, **context: Any) -> None:
    """Логировать info сообщение."""
    await log(runtime, "info", message, **context)


async def warning(runtime: Optional[Any], message: str, **context: Any) -> None:
    """Логировать warning сообщение."""
    await log(runtime, "warning", message, **context)


async def error(runtime: Optional[Any], message: str, **context: Any) -> None:
    """Логировать error сообщение."""
    await log(runtime, "error", message, **context)
