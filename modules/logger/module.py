"""
LoggerModule: встроенный модуль логирования.

Обязательный инфраструктурный модуль, регистрируется первым.

Предоставляет сервис `logger.log` для централизованного логирования
и синхронный `emit()` для кода, который не может ждать (LoggingDeviceProxy).
Уровни - стандартные уровни модуля `logging`. Вывод в stderr, чтобы
stdout оставался за консольным меню.
Формат text: [LEVEL] [module] message (context)
Формат json: один JSON-объект на строку.
"""

import os
import sys
import json
import logging
from typing import Any

from smarthome.runtime_module import RuntimeModule


LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class LoggerModule(RuntimeModule):
    """
    Модуль логирования.

    Не меняет глобальное состояние logging (не трогает root logger).
    """

    _log_level = logging.INFO
    _log_format = "text"

    @property
    def name(self) -> str:
        """Уникальное имя модуля."""
        return "logger"

    async def register(self) -> None:
        """
        Читает уровень и формат логов и регистрирует сервис logger.log.

        Приоритет: конфигурация runtime, затем LOG_LEVEL / LOG_FORMAT.
        """
        cfg = getattr(self.runtime, "config", None)

        level_str = (getattr(cfg, "log_level", None) or os.getenv("LOG_LEVEL", "INFO")).upper()
        self._log_level = getattr(logging, level_str, logging.INFO)

        fmt = getattr(cfg, "log_format", None) or os.getenv("LOG_FORMAT") or "text"
        self._log_format = fmt.lower() if fmt.lower() in ("text", "json") else "text"

        await self.runtime.service_registry.register("logger.log", self._log_service)

    async def start(self) -> None:
        self.emit("info", "Logger module started", module="logger")

    async def stop(self) -> None:
        self.emit("info", "Logger module stopped", module="logger")
        await self.runtime.service_registry.unregister("logger.log")

    async def _log_service(self, level: str, message: str, **context: Any) -> None:
        """
        Сервис логирования.

        Args:
            level: уровень логирования (debug, info, warning, error)
            message: сообщение для логирования
            **context: дополнительный контекст (module, device_id и др.)
        """
        self.emit(level, message, **context)

    def emit(self, level: str, message: str, **context: Any) -> None:
        """Записать одну строку лога, если уровень не ниже настроенного."""
        lvl = (level or "").lower()
        if lvl not in LEVEL_MAP:
            lvl = "info"
        if LEVEL_MAP[lvl] < self._log_level:
            return

        module = context.pop("module", None)

        if self._log_format == "json":
            event: dict[str, Any] = {"level": lvl.upper(), "message": message}
            if module:
                event["module"] = module
            safe_ctx: dict[str, Any] = {}
            for k, v in context.items():
                if isinstance(v, (str, int, float, bool, type(None), dict, list)):
                    safe_ctx[k] = v
                else:
                    safe_ctx[k] = str(v)
            if safe_ctx:
                event["context"] = safe_ctx
            line = json.dumps(event, ensure_ascii=False)
        else:
            parts = [f"[{lvl.upper()}]"]
            if module:
                parts.append(f"[{module}]")
            parts.append(message)
            important_context = {
                k: v for k, v in context.items()
                if isinstance(v, (str, int, float, bool, type(None)))
            }
            if important_context:
                parts.append("(" + " ".join(f"{k}={v}" for k, v in important_context.items()) + ")")
            line = " ".join(parts)

        print(line, file=sys.stderr, flush=True)
