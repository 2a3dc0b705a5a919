# File: oven_control/domain/value_objects.py
"""
Value objects for the oven control domain.
Immutable objects describing a baking program and the settings derived from it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple, Union


class HeatMode(Enum):
    """Heating element configuration used by a program stage"""
    HEATER = "heater"
    GRILL = "grill"
    THERMO_CIRCULATION = "thermo_circulation"

    @classmethod
    def parse(cls, value: Union['HeatMode', str]) -> 'HeatMode':
        """Resolve a member from itself, its name or its value (case-insensitive)"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for mode in cls:
                if key.upper() == mode.name or key.lower() == mode.value:
                    return mode
        raise ValueError(f"Unknown heat mode: {value!r}")


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid temperature or duration
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ValueObject:
    """Base class for value objects"""

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Validate value object state - override in subclasses"""
        pass


@dataclass(frozen=True)
class ProgramStage(ValueObject):
    """One stage of a baking program"""
    heat_mode: HeatMode
    stage_time_minutes: int
    target_temp_celsius: int

    def validate(self):
        if not isinstance(self.heat_mode, HeatMode):
            raise ValueError("ProgramStage heat_mode must be a HeatMode")
        if not _is_int(self.stage_time_minutes):
            raise ValueError("ProgramStage stage_time_minutes must be an integer")
        if self.stage_time_minutes <= 0:
            raise ValueError("ProgramStage stage_time_minutes must be positive")
        if not _is_int(self.target_temp_celsius):
            raise ValueError("ProgramStage target_temp_celsius must be an integer")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProgramStage':
        """Create a stage from its plain-data form"""
        return cls(
            heat_mode=HeatMode.parse(data['heat_mode']),
            stage_time_minutes=data['stage_time_minutes'],
            target_temp_celsius=data['target_temp_celsius'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'heat_mode': self.heat_mode.name,
            'stage_time_minutes': self.stage_time_minutes,
            'target_temp_celsius': self.target_temp_celsius,
        }

    def __str__(self):
        return f"{self.heat_mode.name} {self.target_temp_celsius}°C/{self.stage_time_minutes}min"


@dataclass(frozen=True)
class BakingProgram(ValueObject):
    """Initial temperature plus an ordered sequence of stages.

    ``stages`` is stored as a tuple so the program cannot change while an
    oven is running it. An empty program is a valid value.
    """
    initial_temp_celsius: int
    stages: Tuple[ProgramStage, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'stages', tuple(self.stages))
        super().__post_init__()

    def validate(self):
        if not _is_int(self.initial_temp_celsius):
            raise ValueError("BakingProgram initial_temp_celsius must be an integer")
        for index, stage in enumerate(self.stages):
            if not isinstance(stage, ProgramStage):
                raise ValueError(f"BakingProgram stage {index} must be a ProgramStage")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BakingProgram':
        """Create a program from its plain-data form"""
        return cls(
            initial_temp_celsius=data['initial_temp_celsius'],
            stages=tuple(ProgramStage.from_dict(stage) for stage in data.get('stages', ())),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'initial_temp_celsius': self.initial_temp_celsius,
            'stages': [stage.to_dict() for stage in self.stages],
        }

    @property
    def total_minutes(self) -> int:
        """Sum of all stage durations"""
        return sum(stage.stage_time_minutes for stage in self.stages)


@dataclass(frozen=True)
class HeatingSettings(ValueObject):
    """Temperature and duration handed to a heating element activation"""
    target_temp_celsius: int
    time_in_minutes: int

    def validate(self):
        if not _is_int(self.target_temp_celsius):
            raise ValueError("HeatingSettings target_temp_celsius must be an integer")
        if not _is_int(self.time_in_minutes):
            raise ValueError("HeatingSettings time_in_minutes must be an integer")

    @classmethod
    def from_stage(cls, stage: ProgramStage) -> 'HeatingSettings':
        return cls(
            target_temp_celsius=stage.target_temp_celsius,
            time_in_minutes=stage.stage_time_minutes,
        )

    def __str__(self):
        return f"{self.target_temp_celsius}°C for {self.time_in_minutes}min"
