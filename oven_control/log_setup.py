"""
Logging configuration for the oven control application.

Adds:
- Service-specific loggers with dedicated log files and formatters
- Env/CLI-driven log level selection via `LOG_LEVEL` and `set_log_level()`
- Standard operator markers for success/warn/failure (✅, ⚠️, ❌) with ASCII fallback
- Log rotation and independent log level configuration per service
"""
import logging
import logging.handlers
import os
import threading
from pathlib import Path
from typing import Dict, Optional

# Operator-facing log markers (emojis), with optional ASCII fallback via LOG_MARKERS_ASCII=true
ASCII_FALLBACK = os.getenv("LOG_MARKERS_ASCII", "false").lower() in {"1", "true", "yes"}
OK_MARK = "OK" if ASCII_FALLBACK else "✅"
WARN_MARK = "WARN" if ASCII_FALLBACK else "⚠️"
FAIL_MARK = "FAIL" if ASCII_FALLBACK else "❌"

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))

_service_loggers: Dict[str, logging.Logger] = {}
_logger_lock = threading.RLock()

# Service definitions with their log file names and default levels
SERVICE_CONFIGS = {
    "oven": {"file": "oven.log", "level": "INFO"},
    "hardware": {"file": "hardware.log", "level": "INFO"},
    "program": {"file": "program.log", "level": "INFO"},
    "cli": {"file": "cli.log", "level": "INFO"},
}

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _get_log_level_from_env(level_str: Optional[str] = None) -> int:
    """Map LOG_LEVEL env var to logging level."""
    if level_str is None:
        level_str = os.getenv("LOG_LEVEL", "INFO")
    return _LEVELS.get(level_str.upper(), logging.INFO)


def _env_int(name: str, default: int, minimum: int) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except (ValueError, TypeError):
        return default
    return value if value >= minimum else default


def _create_service_logger(service_name: str, config: dict) -> logging.Logger:
    """Create a service-specific logger with its own file handler and rotation."""
    logger = logging.getLogger(f"oven_control.{service_name}")

    if logger.handlers:
        has_console = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.handlers.RotatingFileHandler)
            for h in logger.handlers
        )
        has_file = any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        if has_console and has_file:
            return logger
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    level_str = os.getenv(f"LOG_LEVEL_{service_name.upper()}", os.getenv("LOG_LEVEL", config.get("level", "INFO")))
    level = _get_log_level_from_env(level_str)
    logger.setLevel(level)

    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False

    formatter = logging.Formatter(
        f"%(asctime)s - [{service_name.upper()}] - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    max_bytes = _env_int(f"LOG_MAX_BYTES_{service_name.upper()}", 10485760, 1)
    backup_count = _env_int(f"LOG_BACKUP_COUNT_{service_name.upper()}", 5, 0)

    file_handler = logging.handlers.RotatingFileHandler(
        LOG_DIR / config["file"],
        maxBytes=max_bytes,
        backupCount=backup_count,
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    return logger


def get_service_logger(service_name: str) -> logging.Logger:
    """Get or create a service-specific logger (thread-safe)."""
    with _logger_lock:
        if service_name in _service_loggers:
            return _service_loggers[service_name]

        if service_name not in SERVICE_CONFIGS:
            # Unknown services get a plain child logger
            logger = logging.getLogger(f"oven_control.{service_name}")
            _service_loggers[service_name] = logger
            return logger

        logger = _create_service_logger(service_name, SERVICE_CONFIGS[service_name])
        _service_loggers[service_name] = logger
        return logger


def set_log_level(level_str: str, service_name: Optional[str] = None) -> None:
    """Programmatically adjust log level at runtime for a service or all services (thread-safe)."""
    level = _get_log_level_from_env(level_str)

    with _logger_lock:
        if service_name:
            targets = [_service_loggers[service_name]] if service_name in _service_loggers else []
        else:
            targets = list(_service_loggers.values())

        for logger in targets:
            logger.setLevel(level)
            for h in logger.handlers:
                h.setLevel(level)


def list_service_loggers() -> Dict[str, str]:
    """List all created service loggers and their current levels (thread-safe)."""
    with _logger_lock:
        return {
            service: logging.getLevelName(logger.level)
            for service, logger in _service_loggers.items()
        }


def get_oven_logger() -> logging.Logger:
    """Get the oven orchestration logger."""
    return get_service_logger("oven")


def get_hardware_logger() -> logging.Logger:
    """Get the hardware driver logger."""
    return get_service_logger("hardware")


def get_program_logger() -> logging.Logger:
    """Get the program loading logger."""
    return get_service_logger("program")


def get_cli_logger() -> logging.Logger:
    """Get the command line logger."""
    return get_service_logger("cli")
