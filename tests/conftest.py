"""
Pytest configuration and shared fixtures for oven control testing.

This file provides:
1. Test environment isolation (log directory, hardware backend)
2. Mocked heating module and fan with a shared call recorder
3. Oven instances wired to mocks or to simulated hardware
4. Program/stage data factories
"""
import os
import tempfile

import pytest
from unittest.mock import Mock

# Keep service log files out of the working tree; must happen before
# oven_control.log_setup creates its handlers.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="oven_control_logs_"))
os.environ.setdefault("OVEN_HARDWARE_TYPE", "simulation")

from oven_control.hardware.interface import Fan, HeatingModule
from oven_control.hardware.simulation import SimulationFan, SimulationHeatingModule
from oven_control.oven import Oven
from tests.factories import ProgramFactory


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests - fast, isolated, mocked dependencies"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests - oven driving simulated hardware"
    )


# ============================================================================
# Mocked collaborators
# ============================================================================

@pytest.fixture
def heating_module():
    """Provide a mock heating module."""
    return Mock(spec=HeatingModule)


@pytest.fixture
def fan():
    """Provide a mock fan."""
    return Mock(spec=Fan)


@pytest.fixture
def hardware_calls(heating_module, fan):
    """
    Record heating module and fan calls on one parent so their relative
    order can be asserted, e.g. ``call.fan.on()`` before ``call.heating_module.thermal_circuit(...)``.
    """
    recorder = Mock()
    recorder.attach_mock(heating_module, "heating_module")
    recorder.attach_mock(fan, "fan")
    return recorder


@pytest.fixture
def oven(heating_module, fan):
    """Provide an oven wired to the mocked collaborators."""
    return Oven(heating_module, fan)


# ============================================================================
# Simulated hardware
# ============================================================================

@pytest.fixture
def sim_heating_module():
    return SimulationHeatingModule()


@pytest.fixture
def sim_fan():
    return SimulationFan()


@pytest.fixture
def sim_oven(sim_heating_module, sim_fan):
    return Oven(sim_heating_module, sim_fan)


# ============================================================================
# Data factories
# ============================================================================

@pytest.fixture
def program_factory():
    """Provide a seeded program factory."""
    return ProgramFactory()
