from .logger import LoggerModule
from .devices import DevicesModule

__all__ = ["LoggerModule", "DevicesModule"]
