"""Application logger shared by the calculator and the shell."""

import logging
import sys
import os
from typing import Optional

import config

LOGGER_NAME = "GradeCalculator"

_logger: Optional[logging.Logger] = None

def _file_handler(log_file: str, formatter: logging.Formatter) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setFormatter(formatter)
    return handler

def setup_logger(log_file: str = config.LOG_FILE, level: int = config.LOG_LEVEL) -> logging.Logger:
    """Configures the GradeCalculator logger once and returns it.

    Records go to log_file. At DEBUG level they are echoed to stderr too;
    stdout is left to the prompts.

    Args:
        log_file: Path of the log file, created along with its directory.
        level: Logging level; DEBUG also turns on the stderr echo.

    Returns:
        logging.Logger: The configured application logger.
    """
    global _logger
    if _logger:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    debug = level <= logging.DEBUG
    if not logger.handlers:
        formatter = logging.Formatter(config.LOG_FORMAT)
        if debug:
            echo = logging.StreamHandler(sys.stderr)
            echo.setFormatter(formatter)
            logger.addHandler(echo)
        try:
            logger.addHandler(_file_handler(log_file, formatter))
        except OSError as e:
            # Grading still works without a log file
            logger.warning(f"Logging to {log_file} disabled: {e}", exc_info=debug)

    _logger = logger
    logger.debug(f"Logger ready (file={log_file}, level={logging.getLevelName(level)}).")
    return logger

def get_logger() -> logging.Logger:
    """Returns the shared logger, configuring it on first use."""
    return _logger or setup_logger()
