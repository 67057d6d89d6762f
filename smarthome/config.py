"""
Конфигурация Smart Home Runtime.

Минимальные настройки: логирование, тайм-ауты и стартовый набор устройств.
"""

import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Конфигурация Smart Home Runtime."""

    # Logging
    # Уровень: DEBUG | INFO | WARNING | ERROR
    log_level: str = "INFO"
    # "text" | "json"
    log_format: str = "text"

    # Тайм-аут для вызовов сервисов (секунды)
    service_call_timeout: float = 30.0

    # Тайм-аут для shutdown (секунды)
    shutdown_timeout: int = 10

    # Стартовый набор устройств: свет, термостат, дверь
    seed_demo_devices: bool = True
    # Начальная температура термостата из стартового набора
    initial_temperature: int = 70

    def validate(self) -> None:
        """
        Валидировать конфигурацию.

        Raises:
            ValueError: если конфигурация невалидна
        """
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

        if self.log_format not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")

        if not isinstance(self.service_call_timeout, (int, float)) or self.service_call_timeout <= 0:
            raise ValueError(
                f"service_call_timeout must be positive number, got: {self.service_call_timeout}"
            )

        if not isinstance(self.shutdown_timeout, int) or self.shutdown_timeout <= 0:
            raise ValueError(
                f"shutdown_timeout must be positive integer, got: {self.shutdown_timeout}"
            )

        # bool is a subclass of int, reject it explicitly
        if isinstance(self.initial_temperature, bool) or not isinstance(self.initial_temperature, int):
            raise ValueError(
                f"initial_temperature must be integer, got: {self.initial_temperature!r}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Создать конфигурацию из переменных окружения.

        Raises:
            ValueError: если конфигурация невалидна
        """
        try:
            service_call_timeout = float(os.getenv("SMARTHOME_SERVICE_CALL_TIMEOUT", "30.0"))
            shutdown_timeout = int(os.getenv("SMARTHOME_SHUTDOWN_TIMEOUT", "10"))
            initial_temperature = int(os.getenv("SMARTHOME_INITIAL_TEMPERATURE", "70"))
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting in environment: {e}") from e

        config = cls(
            log_level=os.getenv("SMARTHOME_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("SMARTHOME_LOG_FORMAT", "text").lower(),
            service_call_timeout=service_call_timeout,
            shutdown_timeout=shutdown_timeout,
            seed_demo_devices=_env_bool("SMARTHOME_SEED_DEMO_DEVICES", "true"),
            initial_temperature=initial_temperature,
        )
        config.validate()
        return config
