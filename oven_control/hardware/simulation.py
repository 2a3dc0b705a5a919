# File: hardware/simulation.py
"""
Simulation implementation of the heating module and fan.

Neither class models temperature. They record what the oven asked for so a
program can be dry-run on a workstation, and they can be armed to fail so the
oven's failure path can be exercised without hardware.
"""
from typing import Dict, List, Optional, Tuple

from oven_control.domain.value_objects import HeatingSettings
from oven_control.hardware.interface import Fan, HeatingException, HeatingModule
from oven_control.log_setup import get_hardware_logger

logger = get_hardware_logger()


class SimulationHeatingModule(HeatingModule):
    """Simulated heating elements for testing without hardware."""

    OPERATIONS = ('heater', 'grill', 'thermal_circuit')

    def __init__(self):
        self.activations: List[Tuple[str, HeatingSettings]] = []
        self.active_mode: Optional[str] = None
        self._armed_failures: Dict[str, Exception] = {}

    def fail_on(self, operation: str, error: Optional[Exception] = None) -> None:
        """Make the next call of ``operation`` raise ``error`` (HeatingException by default)."""
        if operation not in self.OPERATIONS:
            raise ValueError(f"Unknown heating operation: {operation}")
        self._armed_failures[operation] = error or HeatingException(
            f"Simulated {operation} failure"
        )

    def reset(self) -> None:
        self.activations.clear()
        self.active_mode = None
        self._armed_failures.clear()

    def heater(self, settings: HeatingSettings) -> None:
        self._activate('heater', settings)

    def grill(self, settings: HeatingSettings) -> None:
        self._activate('grill', settings)

    def thermal_circuit(self, settings: HeatingSettings) -> None:
        self._activate('thermal_circuit', settings)

    def _activate(self, operation: str, settings: HeatingSettings) -> None:
        self.activations.append((operation, settings))

        error = self._armed_failures.pop(operation, None)
        if error is not None:
            self.active_mode = None
            logger.warning(f"Simulated {operation} activation failed: {error}")
            raise error

        self.active_mode = operation
        logger.info(f"Simulated {operation} active at {settings}")


class SimulationFan(Fan):
    """Simulated circulation fan."""

    def __init__(self):
        self.is_running = False
        self.on_count = 0
        self.off_count = 0
        self.events: List[str] = []

    def on(self) -> None:
        self.on_count += 1
        self.events.append('on')
        self.is_running = True
        logger.info("Simulated fan ON")

    def off(self) -> None:
        self.off_count += 1
        self.events.append('off')
        if self.is_running:
            logger.info("Simulated fan OFF")
        else:
            logger.debug("Simulated fan OFF requested while already off")
        self.is_running = False
