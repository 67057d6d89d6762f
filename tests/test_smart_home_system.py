import pytest

from smarthome.errors import DeviceNotFound
from modules.devices.factory import DeviceFactory
from modules.devices.models import Light, Thermostat
from modules.devices.proxy import DeviceProxy


def _add(system, device_type, temperature=0):
    device = DeviceFactory.create_device(system.get_next_device_id(), device_type, temperature)
    return system.add_device(device)


def test_ids_start_at_one_and_increase(system):
    ids = [_add(system, t) for t in ("light", "door", "light", "thermostat", "door")]

    assert ids == [1, 2, 3, 4, 5]
    assert len(system) == 5


def test_next_device_id_is_a_peek(system):
    assert system.get_next_device_id() == 1
    assert system.get_next_device_id() == 1

    assigned = _add(system, "light")

    assert assigned == 1
    assert system.get_next_device_id() == 2
    assert system.get_device(1).get_status() == "Light 1 is off."


def test_status_report_end_to_end(system):
    _add(system, "light")
    system.add_device(Thermostat(system.get_next_device_id(), 70))
    _add(system, "door")

    assert system.get_status() == (
        "Device 1: Light 1 is off. "
        "Device 2: Thermostat is set to 70 degrees. "
        "Device 3: Door is locked."
    )


def test_empty_status_report(system):
    assert system.get_status() == ""


def test_turn_on_off_light_restores_status(system):
    light_id = _add(system, "light")
    before = system.get_status()

    assert system.turn_on(light_id) is True
    assert system.get_status() == "Device 1: Light 1 is on."
    assert system.turn_off(light_id) is True

    assert system.get_status() == before


def test_switching_door_and_thermostat_changes_nothing(system):
    door_id = _add(system, "door")
    thermostat_id = _add(system, "thermostat", 70)
    before = system.get_status()

    for device_id in (door_id, thermostat_id):
        system.turn_on(device_id)
        system.turn_off(device_id)

    assert system.get_status() == before


def test_unknown_id_is_not_found_and_registry_unchanged(system):
    _add(system, "light")
    before = system.get_status()

    assert system.turn_on(42) is False
    assert system.turn_off(0) is False

    assert system.get_status() == before
    assert len(system) == 1
    assert system.get_next_device_id() == 2


def test_get_device_missing_raises(system):
    with pytest.raises(DeviceNotFound) as exc_info:
        system.get_device(9)
    assert exc_info.value.device_id == 9
    assert isinstance(exc_info.value, LookupError)


def test_commands_go_through_command_proxy(system):
    routed = []

    def proxy(device):
        routed.append(device.device_id)
        return DeviceProxy(device)

    light_id = _add(system, "light")
    system.command_proxy = proxy

    system.turn_on(light_id)

    assert routed == [light_id]
    assert system.get_device(light_id).is_on is True


def test_devices_view_is_read_only(system):
    _add(system, "light")

    with pytest.raises(TypeError):
        system.devices[2] = Light(2)

    assert 1 in system
    assert 2 not in system
