"""
Configuration settings for the oven control application.

Notes on validation:
- This module avoids raising on import so that `oven-control --doctor` can
  report the effective settings even when the environment is incomplete.
  Code that needs the Modbus backend should call `missing_required_keys()`.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Hardware backend: 'simulation' or 'modbus'
HARDWARE_TYPE = os.getenv("OVEN_HARDWARE_TYPE", "simulation").lower()

# Modbus TCP connection
MODBUS_HOST = os.getenv("OVEN_MODBUS_HOST", "127.0.0.1")
MODBUS_PORT = int(os.getenv("OVEN_MODBUS_PORT", "502"))
MODBUS_TIMEOUT = int(os.getenv("OVEN_MODBUS_TIMEOUT", "3"))

# Register map of the oven controller
REG_TARGET_TEMP = int(os.getenv("OVEN_REG_TARGET_TEMP", "100"))
REG_TIME_MINUTES = int(os.getenv("OVEN_REG_TIME_MINUTES", "101"))
COIL_HEATER = int(os.getenv("OVEN_COIL_HEATER", "0"))
COIL_GRILL = int(os.getenv("OVEN_COIL_GRILL", "1"))
COIL_THERMAL_CIRCUIT = int(os.getenv("OVEN_COIL_THERMAL_CIRCUIT", "2"))
COIL_FAN = int(os.getenv("OVEN_COIL_FAN", "3"))

HARDWARE_CONFIG = {
    'host': MODBUS_HOST,
    'port': MODBUS_PORT,
    'timeout': MODBUS_TIMEOUT,
    'registers': {
        'target_temp': REG_TARGET_TEMP,
        'time_minutes': REG_TIME_MINUTES,
        'heater': COIL_HEATER,
        'grill': COIL_GRILL,
        'thermal_circuit': COIL_THERMAL_CIRCUIT,
        'fan': COIL_FAN,
    },
}


def missing_required_keys(hardware_type: str = None) -> list:
    """Return the environment keys the selected backend needs but lacks."""
    hardware_type = (hardware_type or HARDWARE_TYPE).lower()
    missing = []
    if hardware_type == "modbus" and not os.getenv("OVEN_MODBUS_HOST"):
        missing.append("OVEN_MODBUS_HOST")
    return missing


def is_hardware_config_ready(hardware_type: str = None) -> bool:
    """Check if the selected hardware backend has everything it needs."""
    return not missing_required_keys(hardware_type)
