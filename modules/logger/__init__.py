"""
Logger Module - встроенный модуль логирования.

Обязательный инфраструктурный модуль, который регистрируется автоматически
при runtime.start() через ModuleManager, первым из BUILTIN_MODULES.
"""

from .module import LoggerModule

__all__ = ["LoggerModule"]
