import sys
import pathlib
import pytest

# Ensure repository root is on sys.path so packages (smarthome, modules) import correctly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smarthome.config import Config
from modules.devices.system import SmartHomeSystem


@pytest.fixture
def config():
    """Конфигурация без стартового набора устройств."""
    return Config(seed_demo_devices=False)


@pytest.fixture
def system():
    return SmartHomeSystem()
