# File: hardware/factory.py
"""
Factory for creating the oven's hardware collaborators.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from oven_control.hardware.interface import Fan, HeatingModule
from oven_control.hardware.simulation import SimulationFan, SimulationHeatingModule
from oven_control.log_setup import get_hardware_logger

logger = get_hardware_logger()


@dataclass
class HardwareSet:
    """Heating module and fan built for one backend, plus the link they share."""
    heating_module: HeatingModule
    fan: Fan
    connection: Optional[Any] = None

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()


class HardwareFactory:
    """Factory for creating heating module / fan pairs."""

    @staticmethod
    def create(hardware_type: str, config: Optional[Dict[str, Any]] = None) -> HardwareSet:
        """
        Create the hardware collaborators for the specified backend.

        Args:
            hardware_type: Type of hardware ('simulation' or 'modbus')
            config: Connection options for the Modbus backend

        Returns:
            HardwareSet: The heating module and fan to hand to an Oven

        Raises:
            ValueError: If the hardware type is invalid
        """
        config = config or {}
        hardware_type = (hardware_type or "").lower()

        if hardware_type == 'simulation':
            logger.info("Creating simulation hardware")
            return HardwareSet(SimulationHeatingModule(), SimulationFan())

        if hardware_type == 'modbus':
            # Lazy import to avoid requiring pymodbus in simulation-only environments
            from oven_control.hardware.modbus import (  # noqa: WPS433
                ModbusConnection, ModbusFan, ModbusHeatingModule, RegisterMap
            )

            host = config.get('host', '127.0.0.1')
            port = int(config.get('port', 502))
            timeout = int(config.get('timeout', 3))
            logger.info(f"Creating Modbus hardware - host: {host}, port: {port}, timeout: {timeout}s")

            connection = ModbusConnection(host, port=port, timeout=timeout)
            registers = RegisterMap.from_dict(config.get('registers'))
            return HardwareSet(
                ModbusHeatingModule(connection, registers),
                ModbusFan(connection, registers),
                connection,
            )

        raise ValueError(f"Invalid hardware type: {hardware_type!r}. Must be 'simulation' or 'modbus'")
