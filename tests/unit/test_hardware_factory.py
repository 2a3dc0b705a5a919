"""
Tests for HardwareFactory backend selection.
"""
import pytest
from unittest.mock import patch

from oven_control.hardware.factory import HardwareFactory, HardwareSet
from oven_control.hardware.modbus import ModbusConnection, ModbusFan, ModbusHeatingModule
from oven_control.hardware.simulation import SimulationFan, SimulationHeatingModule

pytestmark = pytest.mark.unit


def test_simulation_backend():
    hardware = HardwareFactory.create('simulation')

    assert isinstance(hardware, HardwareSet)
    assert isinstance(hardware.heating_module, SimulationHeatingModule)
    assert isinstance(hardware.fan, SimulationFan)
    assert hardware.connection is None
    hardware.close()


def test_backend_name_is_case_insensitive():
    hardware = HardwareFactory.create('SIMULATION')
    assert isinstance(hardware.heating_module, SimulationHeatingModule)


def test_modbus_backend_shares_one_connection():
    config = {'host': '10.0.0.5', 'port': 1502, 'timeout': 1, 'registers': {'fan': 9}}

    hardware = HardwareFactory.create('modbus', config)

    assert isinstance(hardware.heating_module, ModbusHeatingModule)
    assert isinstance(hardware.fan, ModbusFan)
    assert isinstance(hardware.connection, ModbusConnection)
    assert hardware.heating_module.connection is hardware.connection
    assert hardware.fan.connection is hardware.connection
    assert hardware.connection.host == '10.0.0.5'
    assert hardware.connection.port == 1502
    assert hardware.fan.registers.fan == 9


def test_modbus_backend_does_not_connect_until_used():
    with patch('oven_control.hardware.modbus.ModbusTcpClient') as client_cls:
        hardware = HardwareFactory.create('modbus', {'host': '10.0.0.5'})
        hardware.close()

    client_cls.assert_not_called()


@pytest.mark.parametrize("hardware_type", ['real', '', None])
def test_invalid_backend(hardware_type):
    with pytest.raises(ValueError, match="Invalid hardware type"):
        HardwareFactory.create(hardware_type)
