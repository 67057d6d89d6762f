"""
Точка входа в Smart Home Runtime.

Загружает конфигурацию и запускает интерактивное меню.
Выход из меню (пункт 5) завершает процесс с кодом 0.
"""

import asyncio
import sys

from smarthome.config import Config
from smarthome.console import run_cli


async def main() -> int:
    """Главная функция запуска."""
    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"[Runtime] Ошибка конфигурации: {e}", file=sys.stderr)
        return 2

    await run_cli(config=config)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
