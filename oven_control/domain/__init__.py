# File: oven_control/domain/__init__.py
"""
Domain layer for oven control.

Contains the value objects that describe a baking program and the
heating settings derived from each of its stages.
"""

from .value_objects import (
    HeatMode, ProgramStage, BakingProgram, HeatingSettings
)

__all__ = [
    'HeatMode', 'ProgramStage', 'BakingProgram', 'HeatingSettings',
]
