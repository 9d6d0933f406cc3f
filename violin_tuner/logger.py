"""Logger lookup for the violin tuner."""
import logging
from typing import Dict

PACKAGE_LOGGER = "violin_tuner"

# Module-level cache for loggers
_logger_cache: Dict[str, logging.Logger] = {}

# Stay silent until setup_logging() installs a console handler
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a cached logger for a module of this package.

    Names outside the package (e.g. '__main__') are placed under it so the
    levels from logging_config.MODULE_LOG_LEVELS still apply.

    Args:
        name: The full module name (e.g., 'violin_tuner.services.targets')

    Returns:
        A logger instance
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    if name not in _logger_cache:
        _logger_cache[name] = logging.getLogger(name)
    return _logger_cache[name]
