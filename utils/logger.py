"""
Logging utilities.
Supports context-aware logging for runner scripts vs library use.
"""

import logging
from typing import Optional
from enum import Enum
from config.settings import settings


class LoggingContext(Enum):
    """Logging context modes for different execution scenarios."""
    STANDALONE = "standalone"      # Module used directly (full logging)
    ORCHESTRATED = "orchestrated"  # Called by a runner script (quiet sub-modules)
    SILENT = "silent"              # Batch scoring (minimal output)
    PIPELINE_QUIET = "pipeline_quiet" # User-facing runner (clean output)


# Global logging mode (default: settings.LOG_MODE, else standalone)
try:
    _CURRENT_MODE = LoggingContext(settings.LOG_MODE)
except ValueError:
    _CURRENT_MODE = LoggingContext.STANDALONE

# Runner loggers that should always show INFO level
CONSOLE_LOGGERS = {
    'run_scoring', 'run_portfolio',
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def set_logging_mode(mode: LoggingContext):
    """
    Set the global logging mode.

    Loggers created afterwards pick up the new mode; existing loggers keep
    the level they were configured with.

    Args:
        mode: LoggingContext enum value
    """
    global _CURRENT_MODE
    _CURRENT_MODE = mode


def get_logging_mode() -> LoggingContext:
    """Get the current logging mode."""
    return _CURRENT_MODE


def _default_level() -> int:
    level = logging.getLevelName(settings.LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Setup a logger with context-aware levels.

    Args:
        name: Logger name
        level: Logging level (default: settings.LOG_LEVEL, may be overridden by mode)
        log_file: Optional file path for file logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Determine effective level based on current mode
    effective_level = level if level is not None else _default_level()
    current_mode = get_logging_mode()

    if current_mode == LoggingContext.ORCHESTRATED:
        # Only runner loggers keep their level, everything else gets ERROR
        if name not in CONSOLE_LOGGERS:
            effective_level = logging.ERROR
    elif current_mode == LoggingContext.SILENT:
        effective_level = logging.CRITICAL
    elif current_mode == LoggingContext.PIPELINE_QUIET:
        effective_level = logging.ERROR

    logger.setLevel(effective_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(effective_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Optional file handler
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(effective_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Default logger for the application
default_logger = setup_logger('metric_scoring')
