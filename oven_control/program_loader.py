# File: oven_control/program_loader.py
"""
Loads baking programs from plain data or JSON files.

Expected layout:

    {
        "initial_temp_celsius": 180,
        "stages": [
            {"heat_mode": "HEATER", "stage_time_minutes": 5, "target_temp_celsius": 180},
            {"heat_mode": "thermo_circulation", "stage_time_minutes": 10, "target_temp_celsius": 200}
        ]
    }
"""
import json
from pathlib import Path
from typing import Any, Dict, Union

from oven_control.domain.value_objects import BakingProgram, ProgramStage
from oven_control.log_setup import WARN_MARK, get_program_logger

logger = get_program_logger()

STAGE_FIELDS = ('heat_mode', 'stage_time_minutes', 'target_temp_celsius')


class ProgramLoadError(ValueError):
    """Raised when a program definition is malformed"""
    pass


def program_from_dict(data: Dict[str, Any]) -> BakingProgram:
    """Build a BakingProgram, reporting which field or stage is wrong."""
    if not isinstance(data, dict):
        raise ProgramLoadError(f"Program must be an object, got {type(data).__name__}")
    if 'initial_temp_celsius' not in data:
        raise ProgramLoadError("Program is missing required field: initial_temp_celsius")

    raw_stages = data.get('stages', [])
    if not isinstance(raw_stages, list):
        raise ProgramLoadError("Program field 'stages' must be a list")

    stages = []
    for index, raw in enumerate(raw_stages):
        if not isinstance(raw, dict):
            raise ProgramLoadError(f"Stage {index} must be an object")
        missing = [name for name in STAGE_FIELDS if name not in raw]
        if missing:
            raise ProgramLoadError(f"Stage {index} is missing required field(s): {', '.join(missing)}")
        try:
            stages.append(ProgramStage.from_dict(raw))
        except ValueError as e:
            raise ProgramLoadError(f"Stage {index} is invalid: {e}") from e

    try:
        program = BakingProgram(initial_temp_celsius=data['initial_temp_celsius'], stages=tuple(stages))
    except ValueError as e:
        raise ProgramLoadError(f"Program is invalid: {e}") from e

    if not program.stages:
        logger.warning(f"{WARN_MARK} Loaded program has no stages")
    return program


def load_program(source: Union[Dict[str, Any], str, Path]) -> BakingProgram:
    """
    Load a program from a dict or from a JSON file path.

    Raises:
        ProgramLoadError: If the file cannot be read or the definition is malformed
    """
    if isinstance(source, dict):
        return program_from_dict(source)

    path = Path(source)
    logger.info(f"Loading program from {path}")
    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ProgramLoadError(f"Cannot read program file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ProgramLoadError(f"Program file {path} is not valid JSON: {e}") from e

    program = program_from_dict(data)
    logger.info(f"Loaded program with {len(program.stages)} stage(s), {program.total_minutes} min total")
    return program
