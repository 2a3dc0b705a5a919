"""
Tests for service logger configuration.
"""
import logging
import logging.handlers

import pytest

from oven_control import log_setup

pytestmark = pytest.mark.unit


def test_service_logger_is_cached_and_configured():
    logger = log_setup.get_service_logger("oven")

    assert logger is log_setup.get_oven_logger()
    assert logger.name == "oven_control.oven"
    assert logger.propagate is False
    assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)


def test_unknown_service_gets_plain_logger():
    logger = log_setup.get_service_logger("bakery_display")

    assert logger.name == "oven_control.bakery_display"
    assert "bakery_display" in log_setup.list_service_loggers()


def test_set_log_level_for_one_service():
    hardware = log_setup.get_hardware_logger()
    oven = log_setup.get_oven_logger()
    oven_level = oven.level

    log_setup.set_log_level("ERROR", "hardware")
    try:
        assert hardware.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in hardware.handlers)
        assert oven.level == oven_level
    finally:
        log_setup.set_log_level("INFO", "hardware")


def test_unknown_level_falls_back_to_info():
    assert log_setup._get_log_level_from_env("LOUD") == logging.INFO
