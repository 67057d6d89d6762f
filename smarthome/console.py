"""
Интерактивный CLI-адаптер (меню) для Smart Home Runtime.

Правила:
- Все действия выполняются через runtime.service_registry
- Не содержит бизнес-логики, только ввод/вывод

Запуск:
- `python3 main.py`
"""

from __future__ import annotations

import asyncio
import sys
from typing import Callable, Optional

from smarthome.config import Config
from smarthome.errors import SmartHomeError
from smarthome.logger_helper import error as log_error
from smarthome.runtime import CoreRuntime


MENU = (
    "\n--- Smart Home System Menu ---\n"
    "1. Add Light\n"
    "2. Turn On Device\n"
    "3. Turn Off Device\n"
    "4. Get Status Report\n"
    "5. Quit"
)


def _read_device_id(input_func: Callable[[str], str], prompt: str) -> Optional[int]:
    raw = input_func(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        print("Invalid device ID. Please enter a number.")
        return None


async def _switch(runtime: CoreRuntime, service: str, device_id: int) -> None:
    result = await runtime.service_registry.call(service, device_id)
    if not result.get("ok"):
        print(result.get("error", "Device not found."))


async def run_cli(
    input_func: Callable[[str], str] = input,
    config: Optional[Config] = None,
    shutdown_on_exit: bool = True,
) -> CoreRuntime:
    """
    Запустить меню и обрабатывать команды до выбора "5" или конца ввода.

    Args:
        input_func: функция чтения ввода (подменяется в тестах)
        config: конфигурация; по умолчанию Config.from_env()
        shutdown_on_exit: завершить runtime при выходе из меню

    Returns:
        runtime (для проверки состояния в тестах)
    """
    if config is None:
        config = Config.from_env()
    runtime = CoreRuntime(config)
    await runtime.start()

    try:
        while True:
            print(MENU)
            try:
                choice = input_func("Enter your choice: ").strip()
            except EOFError:
                break

            try:
                if choice == "1":
                    light = await runtime.service_registry.call("devices.add_light")
                    print(f"Light added with ID: {light['id']}")
                elif choice == "2":
                    device_id = _read_device_id(input_func, "Enter device ID to turn on: ")
                    if device_id is not None:
                        await _switch(runtime, "devices.turn_on", device_id)
                elif choice == "3":
                    device_id = _read_device_id(input_func, "Enter device ID to turn off: ")
                    if device_id is not None:
                        await _switch(runtime, "devices.turn_off", device_id)
                elif choice == "4":
                    print(await runtime.service_registry.call("devices.status"))
                elif choice == "5":
                    break
                else:
                    print("Invalid choice. Please try again.")
            except EOFError:
                break
            except SmartHomeError as exc:
                await log_error(runtime, f"CLI call error: {exc}", module="console", choice=choice)
                print(f"Error: {exc}")
    finally:
        if shutdown_on_exit:
            try:
                await asyncio.wait_for(runtime.shutdown(), timeout=config.shutdown_timeout)
            except asyncio.TimeoutError:
                print(
                    f"[Runtime] Shutdown timed out after {config.shutdown_timeout}s",
                    file=sys.stderr,
                    flush=True,
                )

    return runtime
