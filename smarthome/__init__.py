"""
Smart Home Runtime - минимальное ядро симулятора умного дома.
"""

from .config import Config
from .errors import DeviceNotFound, InvalidArgument, SmartHomeError
from .service_registry import ServiceRegistry
from .runtime_module import RuntimeModule
from .module_manager import ModuleManager
from .runtime import CoreRuntime
from .console import run_cli
from .logger_helper import info, warning, error

__all__ = [
    "Config",
    "CoreRuntime",
    "DeviceNotFound",
    "InvalidArgument",
    "ModuleManager",
    "RuntimeModule",
    "ServiceRegistry",
    "SmartHomeError",
    "info",
    "warning",
    "error",
    "run_cli",
]
