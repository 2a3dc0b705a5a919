# File: oven_control/oven.py
"""
Runs a baking program stage by stage against the heating module and fan.
"""
from contextlib import contextmanager
from typing import Optional

from oven_control.domain.value_objects import BakingProgram, HeatMode, HeatingSettings, ProgramStage
from oven_control.hardware.interface import Fan, HardwareError, HeatingModule
from oven_control.log_setup import FAIL_MARK, OK_MARK, get_oven_logger

logger = get_oven_logger()


class OvenException(Exception):
    """Raised by Oven.start when a stage could not be carried out.

    The hardware failure that aborted the run is chained as ``__cause__``.
    """

    def __init__(self, message: str, stage_index: Optional[int] = None, stage: Optional[ProgramStage] = None):
        super().__init__(message)
        self.stage_index = stage_index
        self.stage = stage

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class Oven:
    """Drives the heating module and fan through the stages of a program.

    The oven holds only its two collaborators; nothing from one ``start`` call
    is kept for the next.
    """

    def __init__(self, heating_module: HeatingModule, fan: Fan):
        self.heating_module = heating_module
        self.fan = fan

    def start(self, program: BakingProgram) -> None:
        """
        Process every stage of the program in order.

        Args:
            program: The program to run

        Raises:
            OvenException: If a hardware call fails; remaining stages are not run
        """
        stage_count = len(program.stages)
        logger.info(
            f"Starting program: {stage_count} stage(s), initial temperature "
            f"{program.initial_temp_celsius}°C"
        )

        for index, stage in enumerate(program.stages):
            logger.info(f"Stage {index + 1}/{stage_count}: {stage}")
            try:
                self._run_stage(stage)
            except HardwareError as e:
                logger.error(f"{FAIL_MARK} Stage {index + 1}/{stage_count} ({stage}) failed: {e!r}")
                raise OvenException(
                    f"Stage {index + 1} ({stage.heat_mode.name}) failed: {e}",
                    stage_index=index,
                    stage=stage,
                ) from e

        logger.info(f"{OK_MARK} Program finished after {stage_count} stage(s)")

    def _run_stage(self, stage: ProgramStage) -> None:
        settings = HeatingSettings.from_stage(stage)

        if stage.heat_mode is HeatMode.HEATER:
            self.heating_module.heater(settings)
        elif stage.heat_mode is HeatMode.GRILL:
            self.heating_module.grill(settings)
        elif stage.heat_mode is HeatMode.THERMO_CIRCULATION:
            with self._fan_running():
                self.heating_module.thermal_circuit(settings)
        else:
            raise ValueError(f"Unsupported heat mode: {stage.heat_mode!r}")

    @contextmanager
    def _fan_running(self):
        # off() runs on every exit path, including a failed heating call
        self.fan.on()
        try:
            yield
        finally:
            self.fan.off()
