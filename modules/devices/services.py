from typing import Any, Dict, List, Tuple

from smarthome.errors import InvalidArgument
from smarthome.logger_helper import info, warning
from .factory import DeviceFactory
from .models import Light, Observer, Thermostat


def _coerce_id(device_id: Any) -> int:
    """
    Приводит идентификатор устройства к int.

    Принимает int или строку из цифр (значение из консоли/CLI).
    """
    if isinstance(device_id, bool):
        raise InvalidArgument(f"device_id must be integer, got: {device_id!r}")
    if isinstance(device_id, int):
        return device_id
    if isinstance(device_id, str):
        try:
            return int(device_id.strip())
        except ValueError:
            pass
    raise InvalidArgument(f"device_id must be integer, got: {device_id!r}")


def _get_thermostat(runtime, device_id: Any) -> Thermostat:
    device = runtime.smart_home.get_device(_coerce_id(device_id))
    if not isinstance(device, Thermostat):
        raise InvalidArgument(
            f"Device {device.device_id} is not a thermostat",
            {"device_id": device.device_id, "type": device.device_type},
        )
    return device


def _get_observer(runtime, device_id: Any) -> Observer:
    device = runtime.smart_home.get_device(_coerce_id(device_id))
    if not isinstance(device, Observer):
        raise InvalidArgument(
            f"Device {device.device_id} cannot observe a thermostat",
            {"device_id": device.device_id, "type": device.device_type},
        )
    return device


def _observer_ids(thermostat: Thermostat) -> List[int]:
    return [getattr(o, "device_id", None) for o in thermostat.observers]


async def create_device(runtime, device_type: str, temperature: int = 0) -> Dict[str, Any]:
    """
    Создаёт устройство через DeviceFactory и добавляет его в реестр.

    Args:
        runtime: экземпляр CoreRuntime
        device_type: "light" | "thermostat" | "door"
        temperature: начальная температура (только для термостата)

    Returns:
        Созданное устройство в виде dict

    Raises:
        InvalidArgument: неизвестный тип устройства или нецелая температура
    """
    if isinstance(temperature, bool) or not isinstance(temperature, int):
        raise InvalidArgument(f"temperature must be integer, got: {temperature!r}")

    system = runtime.smart_home
    device = DeviceFactory.create_device(system.get_next_device_id(), device_type, temperature)
    device_id = system.add_device(device)

    await info(runtime, "Device added", module="devices", device_id=device_id, type=device.device_type)
    return device.to_dict()


async def add_light(runtime) -> Dict[str, Any]:
    return await create_device(runtime, "light")


async def turn_on(runtime, device_id: Any) -> Dict[str, Any]:
    device_id = _coerce_id(device_id)
    if runtime.smart_home.turn_on(device_id):
        return {"ok": True, "device_id": device_id}

    await warning(runtime, "Device not found", module="devices", device_id=device_id, command="turn_on")
    return {"ok": False, "device_id": device_id, "error": "Device not found."}


async def turn_off(runtime, device_id: Any) -> Dict[str, Any]:
    device_id = _coerce_id(device_id)
    if runtime.smart_home.turn_off(device_id):
        return {"ok": True, "device_id": device_id}

    await warning(runtime, "Device not found", module="devices", device_id=device_id, command="turn_off")
    return {"ok": False, "device_id": device_id, "error": "Device not found."}


async def get_status(runtime) -> str:
    return runtime.smart_home.get_status()


async def list_devices(runtime) -> List[Dict[str, Any]]:
    devices = runtime.smart_home.devices
    return [devices[device_id].to_dict() for device_id in sorted(devices)]


async def get_device(runtime, device_id: Any) -> Dict[str, Any]:
    """
    Raises:
        DeviceNotFound: если устройства нет в реестре
    """
    return runtime.smart_home.get_device(_coerce_id(device_id)).to_dict()


async def set_temperature(runtime, device_id: Any, temperature: Any) -> Dict[str, Any]:
    """
    Устанавливает температуру термостата.

    Подписчики (лампы) получают новое значение синхронно,
    до возврата из сервиса.
    """
    if isinstance(temperature, bool) or not isinstance(temperature, int):
        raise InvalidArgument(f"temperature must be integer, got: {temperature!r}")

    thermostat = _get_thermostat(runtime, device_id)
    thermostat.set_temperature(temperature)

    await info(
        runtime,
        "Temperature changed",
        module="devices",
        device_id=thermostat.device_id,
        temperature=temperature,
        observers=len(thermostat.observers),
    )
    return thermostat.to_dict()


async def subscribe(runtime, thermostat_id: Any, light_id: Any) -> Dict[str, Any]:
    thermostat = _get_thermostat(runtime, thermostat_id)
    thermostat.add_observer(_get_observer(runtime, light_id))

    await info(
        runtime,
        "Observer subscribed",
        module="devices",
        thermostat_id=thermostat.device_id,
        light_id=_coerce_id(light_id),
    )
    return {"ok": True, "observers": _observer_ids(thermostat)}


async def unsubscribe(runtime, thermostat_id: Any, light_id: Any) -> Dict[str, Any]:
    thermostat = _get_thermostat(runtime, thermostat_id)
    thermostat.remove_observer(_get_observer(runtime, light_id))
    return {"ok": True, "observers": _observer_ids(thermostat)}


async def seed_demo_devices(runtime, temperature: int = 70) -> Tuple[Light, Thermostat]:
    """
    Стартовый набор устройств: свет, термостат, дверь.

    Термостат создаётся напрямую (не через фабрику), чтобы сохранить
    ссылку для подписки лампы на изменения температуры.
    """
    system = runtime.smart_home

    light = DeviceFactory.create_device(system.get_next_device_id(), "light")
    system.add_device(light)

    thermostat = Thermostat(system.get_next_device_id(), temperature)
    system.add_device(thermostat)

    system.add_device(DeviceFactory.create_device(system.get_next_device_id(), "door"))

    thermostat.add_observer(light)

    await info(runtime, "Demo devices seeded", module="devices", devices=len(system))
    return light, thermostat
