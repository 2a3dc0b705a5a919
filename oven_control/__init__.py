"""
Oven control: runs baking programs stage by stage against a heating
module and circulation fan.
"""

from .domain import HeatMode, ProgramStage, BakingProgram, HeatingSettings
from .hardware.interface import HardwareError, HeatingException, FanException, HeatingModule, Fan
from .oven import Oven, OvenException

__version__ = "1.0.0"

__all__ = [
    'HeatMode', 'ProgramStage', 'BakingProgram', 'HeatingSettings',
    'HardwareError', 'HeatingException', 'FanException', 'HeatingModule', 'Fan',
    'Oven', 'OvenException',
]
