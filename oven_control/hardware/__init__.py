"""
Hardware collaborators of the oven: capability interfaces plus the
simulation and Modbus backends.
"""

from .interface import (
    HardwareError, HeatingException, FanException, HeatingModule, Fan
)
from .simulation import SimulationHeatingModule, SimulationFan
from .factory import HardwareFactory, HardwareSet

__all__ = [
    'HardwareError', 'HeatingException', 'FanException', 'HeatingModule', 'Fan',
    'SimulationHeatingModule', 'SimulationFan',
    'HardwareFactory', 'HardwareSet',
]
