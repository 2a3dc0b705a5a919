# File: hardware/interface.py
"""
Defines the capability interfaces the oven drives: the heating module and the fan.
"""
from abc import ABC, abstractmethod

from oven_control.domain.value_objects import HeatingSettings


class HardwareError(Exception):
    """Base class for failures reported by oven hardware"""
    pass


class HeatingException(HardwareError):
    """Raised when a heating element cannot be activated"""
    pass


class FanException(HardwareError):
    """Raised when the circulation fan cannot be switched"""
    pass


class HeatingModule(ABC):
    """Abstract interface for the oven's heating elements."""

    @abstractmethod
    def heater(self, settings: HeatingSettings) -> None:
        """
        Activate the top/bottom heater.

        Args:
            settings: Target temperature and duration

        Raises:
            HeatingException: If the element cannot be activated
        """
        pass

    @abstractmethod
    def grill(self, settings: HeatingSettings) -> None:
        """
        Activate the grill element.

        Args:
            settings: Target temperature and duration

        Raises:
            HeatingException: If the element cannot be activated
        """
        pass

    @abstractmethod
    def thermal_circuit(self, settings: HeatingSettings) -> None:
        """
        Activate the ring element used for thermo-circulation.

        Args:
            settings: Target temperature and duration

        Raises:
            HeatingException: If the element cannot be activated
        """
        pass


class Fan(ABC):
    """Abstract interface for the circulation fan."""

    @abstractmethod
    def on(self) -> None:
        """Start airflow."""
        pass

    @abstractmethod
    def off(self) -> None:
        """Stop airflow."""
        pass
