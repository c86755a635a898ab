"""
Structured logging configuration for the contract cost calculator.

This module provides a centralized way to configure logging across the package
with separate output files for calculation events, warnings and debug detail.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List

# Define logger names for different concerns
CALCULATION_LOGGER = "contract_cost.calculation"
ERROR_LOGGER = "contract_cost.errors"
DEBUG_LOGGER = "contract_cost"  # package-wide debug detail

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = Path("output/logs")

LOG_FILES = [
    "calculation_events.log",
    "warnings_errors.log",
    "debug_detail.log",
    "combined.log",
]

# Track if logging is already configured and the handlers it installed
_LOGGING_CONFIGURED = False
_installed_handlers: List[logging.Handler] = []


def clear_logs(log_dir: Path) -> None:
    """
    Remove the known log files from the specified directory.

    Args:
        log_dir: Directory containing log files to clear
    """
    for name in LOG_FILES:
        log_file = log_dir / name
        if log_file.exists():
            try:
                log_file.unlink()
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not delete {log_file}: {e}")


def _rotating_handler(filename: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=filename,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8',
        mode='a'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    _installed_handlers.append(handler)
    return handler


def _attach(logger_name: str, handler: logging.Handler, level: int) -> None:
    named = logging.getLogger(logger_name)
    for h in named.handlers[:]:
        named.removeHandler(h)
    named.setLevel(level)
    named.addHandler(handler)
    named.propagate = True  # Allow to bubble up to root


def setup_logging(log_dir: Path = DEFAULT_LOG_DIR, debug: bool = False, clear_existing: bool = True) -> None:
    """
    Configure structured logging for the application.

    Creates separate log files for different concerns:
    - calculation_events.log: Calculation workflow events (INFO+)
    - warnings_errors.log: Warnings and errors (WARNING+)
    - debug_detail.log: Detailed debug information (DEBUG, only if debug=True)
    - combined.log: Combined log of all messages (INFO+, DEBUG+ if debug=True)

    Args:
        log_dir: Directory where log files will be stored
        debug: If True, enables debug logging and creates debug_detail.log
        clear_existing: If True, clears existing log files before starting
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    if clear_existing:
        clear_logs(log_dir)

    # Remove all handlers from the root logger before setup
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    file_formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    console_formatter = logging.Formatter("%(levelname)-8s %(message)s")

    # Console handler (for warnings and above)
    console = logging.StreamHandler()
    console.setLevel(logging.WARNING)
    console.setFormatter(console_formatter)
    _installed_handlers.append(console)
    root_logger.addHandler(console)

    root_logger.addHandler(
        _rotating_handler(log_dir / "combined.log", logging.DEBUG if debug else logging.INFO, file_formatter)
    )
    root_logger.addHandler(
        _rotating_handler(log_dir / "warnings_errors.log", logging.WARNING, file_formatter)
    )

    _attach(
        CALCULATION_LOGGER,
        _rotating_handler(log_dir / "calculation_events.log", logging.INFO, file_formatter),
        logging.INFO,
    )

    if debug:
        _attach(
            DEBUG_LOGGER,
            _rotating_handler(log_dir / "debug_detail.log", logging.DEBUG, file_formatter),
            logging.DEBUG,
        )

    _LOGGING_CONFIGURED = True


def reset_logging() -> None:
    """Detach every handler installed by setup_logging so it can run again."""
    global _LOGGING_CONFIGURED

    for name in (None, CALCULATION_LOGGER, DEBUG_LOGGER):
        named = logging.getLogger(name)
        for h in named.handlers[:]:
            if h in _installed_handlers:
                named.removeHandler(h)
    for h in _installed_handlers:
        h.close()
    _installed_handlers.clear()
    _LOGGING_CONFIGURED = False

