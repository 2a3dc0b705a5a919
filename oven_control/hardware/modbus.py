# File: hardware/modbus.py
"""
Modbus TCP implementation of the heating module and fan.

The oven controller exposes two holding registers (target temperature and
stage duration) and one coil per heating element plus one for the fan.
Register selection:
- temperatures/durations use holding registers (int16, two's complement)
- element and fan switches use coils
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pymodbus.client import ModbusTcpClient
from pymodbus.exceptions import ModbusException

from oven_control import config
from oven_control.domain.value_objects import HeatingSettings
from oven_control.hardware.interface import (
    Fan, FanException, HardwareError, HeatingException, HeatingModule
)
from oven_control.log_setup import get_hardware_logger

logger = get_hardware_logger()

INT16_MIN = -32768
INT16_MAX = 32767


class ModbusCommunicationError(HardwareError):
    """Raised when the oven controller cannot be reached or rejects a write"""
    pass


@dataclass(frozen=True)
class RegisterMap:
    """Addresses of the oven controller's registers and coils."""
    target_temp: int = config.REG_TARGET_TEMP
    time_minutes: int = config.REG_TIME_MINUTES
    heater: int = config.COIL_HEATER
    grill: int = config.COIL_GRILL
    thermal_circuit: int = config.COIL_THERMAL_CIRCUIT
    fan: int = config.COIL_FAN

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'RegisterMap':
        if not data:
            return cls()
        return cls(**{key: int(value) for key, value in data.items()})

    @property
    def element_coils(self) -> Dict[str, int]:
        return {
            'heater': self.heater,
            'grill': self.grill,
            'thermal_circuit': self.thermal_circuit,
        }


def to_int16_register(value: int) -> int:
    """Encode a signed value into a 16-bit register word."""
    if value < INT16_MIN or value > INT16_MAX:
        raise ValueError(f"Value {value} does not fit in a 16-bit register")
    return value & 0xFFFF


class ModbusConnection:
    """
    Thin wrapper around a Modbus TCP client shared by the heating module and fan.
    Connects lazily on the first write.
    """

    def __init__(self, host: str = config.MODBUS_HOST, port: int = config.MODBUS_PORT,
                 timeout: int = config.MODBUS_TIMEOUT):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.client = None

    @property
    def connected(self) -> bool:
        return self.client is not None

    def connect(self) -> None:
        if self.client is not None:
            return
        logger.info(f"Connecting to oven controller at {self.host}:{self.port}")
        client = ModbusTcpClient(self.host, port=self.port, timeout=self.timeout)
        if not client.connect():
            client.close()
            raise ModbusCommunicationError(
                f"Could not connect to oven controller at {self.host}:{self.port}"
            )
        self.client = client

    def close(self) -> None:
        if self.client is not None:
            logger.info("Disconnecting from oven controller")
            self.client.close()
            self.client = None

    def write_register(self, address: int, value: int) -> None:
        self._write(f"write_register(address={address}, value={value})",
                    lambda: self.client.write_register(address, to_int16_register(value)))

    def write_coil(self, address: int, value: bool) -> None:
        self._write(f"write_coil(address={address}, value={value})",
                    lambda: self.client.write_coil(address, bool(value)))

    def _write(self, description: str, operation) -> None:
        self.connect()
        try:
            result = operation()
        except ModbusException as e:
            raise ModbusCommunicationError(f"{description} failed: {e}") from e
        if result is None or result.isError():
            raise ModbusCommunicationError(f"{description} rejected: {result}")
        logger.debug(f"{description} ok")


class ModbusHeatingModule(HeatingModule):
    """Heating elements driven through the oven controller's Modbus map."""

    def __init__(self, connection: ModbusConnection, register_map: Optional[RegisterMap] = None):
        self.connection = connection
        self.registers = register_map or RegisterMap()

    def heater(self, settings: HeatingSettings) -> None:
        self._activate('heater', settings)

    def grill(self, settings: HeatingSettings) -> None:
        self._activate('grill', settings)

    def thermal_circuit(self, settings: HeatingSettings) -> None:
        self._activate('thermal_circuit', settings)

    def _activate(self, element: str, settings: HeatingSettings) -> None:
        logger.info(f"Activating {element} at {settings}")
        try:
            self.connection.write_register(self.registers.target_temp, settings.target_temp_celsius)
            self.connection.write_register(self.registers.time_minutes, settings.time_in_minutes)
            # Only one element may be energised at a time; clear the others first
            for name, coil in self.registers.element_coils.items():
                if name != element:
                    self.connection.write_coil(coil, False)
            self.connection.write_coil(self.registers.element_coils[element], True)
        except (ModbusCommunicationError, ValueError) as e:
            raise HeatingException(f"Failed to activate {element}: {e}") from e


class ModbusFan(Fan):
    """Circulation fan switched through a Modbus coil."""

    def __init__(self, connection: ModbusConnection, register_map: Optional[RegisterMap] = None):
        self.connection = connection
        self.registers = register_map or RegisterMap()

    def on(self) -> None:
        self._switch(True)

    def off(self) -> None:
        self._switch(False)

    def _switch(self, state: bool) -> None:
        logger.info(f"Switching fan {'ON' if state else 'OFF'}")
        try:
            self.connection.write_coil(self.registers.fan, state)
        except ModbusCommunicationError as e:
            raise FanException(f"Failed to switch fan {'on' if state else 'off'}: {e}") from e
