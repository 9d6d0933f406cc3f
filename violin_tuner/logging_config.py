"""Centralized logging configuration for the violin tuner.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Core modules
    "violin_tuner": logging.INFO,
    "violin_tuner.core": logging.INFO,
    # Kernel
    "violin_tuner.detection": logging.INFO,  # Set to DEBUG for per-frame gate info
    "violin_tuner.services": logging.INFO,
    "violin_tuner.audio": logging.INFO,
    # Front ends
    "violin_tuner.cli": logging.INFO,
    "violin_tuner.ui": logging.WARNING,  # UI modules often noisy, keep at WARNING
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'violin_tuner' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # Create a single, shared console handler if it doesn't exist
    if _console_handler is None:
        _console_handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        _console_handler.setFormatter(formatter)

    # Determine log levels
    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("violin_tuner"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    # Apply module-specific levels. Child loggers of these names inherit the
    # level and propagate up to the configured package logger.
    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name if module_name else "")
        logger.setLevel(module_level)

        # Only the top-level loggers own a handler
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        if module_name in ("violin_tuner", ""):
            logger.addHandler(_console_handler)
            logger.propagate = False

    logging.getLogger("violin_tuner").info("Logging configuration complete")
