"""
Integration tests: devices.* services through CoreRuntime.service_registry.
"""

import pytest

from smarthome.config import Config
from smarthome.errors import DeviceNotFound, InvalidArgument
from smarthome.runtime import CoreRuntime
from modules.devices.proxy import LoggingDeviceProxy


@pytest.mark.asyncio
async def test_services_registered(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        services = await runtime.service_registry.list_services()
        for name in (
            "logger.log",
            "devices.add_light",
            "devices.create",
            "devices.turn_on",
            "devices.turn_off",
            "devices.status",
            "devices.list",
            "devices.get",
            "devices.set_temperature",
            "devices.subscribe",
            "devices.unsubscribe",
        ):
            assert name in services
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_create_devices_and_status_report(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        sr = runtime.service_registry
        light = await sr.call("devices.create", "light")
        thermostat = await sr.call("devices.create", "thermostat", temperature=70)
        door = await sr.call("devices.create", "door")

        assert [light["id"], thermostat["id"], door["id"]] == [1, 2, 3]
        assert await sr.call("devices.status") == (
            "Device 1: Light 1 is off. "
            "Device 2: Thermostat is set to 70 degrees. "
            "Device 3: Door is locked."
        )
        assert [d["type"] for d in await sr.call("devices.list")] == ["light", "thermostat", "door"]
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_create_unknown_type_adds_nothing(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        with pytest.raises(InvalidArgument):
            await runtime.service_registry.call("devices.create", "garage")
        assert len(runtime.smart_home) == 0
        assert runtime.smart_home.get_next_device_id() == 1
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
@pytest.mark.parametrize("temperature", ["hot", 70.5, True, None])
async def test_create_thermostat_with_non_integer_temperature_adds_nothing(config, temperature):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        with pytest.raises(InvalidArgument):
            await runtime.service_registry.call("devices.create", "thermostat", temperature=temperature)
        assert len(runtime.smart_home) == 0
        assert runtime.smart_home.get_next_device_id() == 1
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_turn_on_missing_device_reports_not_found(config, capsys):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        await runtime.service_registry.call("devices.add_light")
        result = await runtime.service_registry.call("devices.turn_on", 99)

        assert result == {"ok": False, "device_id": 99, "error": "Device not found."}
        assert len(runtime.smart_home) == 1
        assert "[WARNING] [devices] Device not found" in capsys.readouterr().err
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_turn_on_and_off_by_id(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        sr = runtime.service_registry
        light = await sr.call("devices.add_light")

        assert await sr.call("devices.turn_on", light["id"]) == {"ok": True, "device_id": 1}
        assert (await sr.call("devices.get", "1"))["status"] == "Light 1 is on."

        await sr.call("devices.turn_off", light["id"])
        assert (await sr.call("devices.get", 1))["status"] == "Light 1 is off."
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_commands_are_routed_through_logging_proxy(capsys):
    runtime = CoreRuntime(Config(seed_demo_devices=False, log_level="DEBUG"))
    await runtime.start()
    try:
        await runtime.service_registry.call("devices.add_light")
        proxy = runtime.smart_home.command_proxy(runtime.smart_home.get_device(1))
        assert isinstance(proxy, LoggingDeviceProxy)

        await runtime.service_registry.call("devices.turn_on", 1)
        assert "[DEBUG] Device command: turn_on (device_id=1 command=turn_on)" in capsys.readouterr().err
    finally:
        await runtime.shutdown()
    assert runtime.smart_home.command_proxy is None


@pytest.mark.asyncio
async def test_temperature_propagates_to_subscribed_lights(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        sr = runtime.service_registry
        l1 = await sr.call("devices.add_light")
        l2 = await sr.call("devices.add_light")
        t = await sr.call("devices.create", "thermostat", 70)
        await sr.call("devices.turn_on", l1["id"])
        await sr.call("devices.turn_on", l2["id"])

        await sr.call("devices.subscribe", t["id"], l1["id"])
        res = await sr.call("devices.subscribe", t["id"], l2["id"])
        assert res == {"ok": True, "observers": [1, 2]}

        await sr.call("devices.set_temperature", t["id"], 75)
        assert await sr.call("devices.status") == (
            "Device 1: Light 1 is off. "
            "Device 2: Light 2 is off. "
            "Device 3: Thermostat is set to 75 degrees."
        )

        await sr.call("devices.set_temperature", t["id"], 60)
        assert (await sr.call("devices.get", 1))["status"] == "Light 1 is off."
        assert (await sr.call("devices.get", 2))["status"] == "Light 2 is off."
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_unsubscribe_unknown_light_is_noop(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        sr = runtime.service_registry
        light = await sr.call("devices.add_light")
        t = await sr.call("devices.create", "thermostat", 70)
        await sr.call("devices.turn_on", light["id"])

        assert await sr.call("devices.unsubscribe", t["id"], light["id"]) == {"ok": True, "observers": []}
        await sr.call("devices.set_temperature", t["id"], 80)

        assert (await sr.call("devices.get", light["id"]))["status"] == "Light 1 is on."
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_thermostat_only_operations_validate_target(config):
    runtime = CoreRuntime(config)
    await runtime.start()
    try:
        sr = runtime.service_registry
        light = await sr.call("devices.add_light")
        door = await sr.call("devices.create", "door")
        t = await sr.call("devices.create", "thermostat", 70)

        with pytest.raises(InvalidArgument):
            await sr.call("devices.set_temperature", light["id"], 80)
        with pytest.raises(InvalidArgument):
            await sr.call("devices.subscribe", t["id"], door["id"])
        with pytest.raises(InvalidArgument):
            await sr.call("devices.set_temperature", t["id"], "hot")
        with pytest.raises(DeviceNotFound):
            await sr.call("devices.set_temperature", 42, 80)
    finally:
        await runtime.shutdown()


@pytest.mark.asyncio
async def test_demo_devices_seeded_on_start():
    runtime = CoreRuntime(Config(initial_temperature=70))
    await runtime.start()
    try:
        sr = runtime.service_registry
        assert await sr.call("devices.status") == (
            "Device 1: Light 1 is off. "
            "Device 2: Thermostat is set to 70 degrees. "
            "Device 3: Door is locked."
        )

        await sr.call("devices.turn_on", 1)
        await sr.call("devices.set_temperature", 2, 77)

        # The seeded light observes the seeded thermostat
        assert (await sr.call("devices.get", 1))["status"] == "Light 1 is off."
        assert runtime.smart_home.get_next_device_id() == 4
    finally:
        await runtime.shutdown()
