"""Configuration settings for the interactive grade calculator."""

import os
import logging
from typing import Final

from utils.error_handler import ConfigError

# Debug flag: 1 = debug mode (verbose logging), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("GRADER_DEBUG", "0"))

# --- Evaluation Rules ---

SCORE_MIN: Final[float] = 0
SCORE_MAX: Final[float] = 20
WEIGHT_MIN: Final[float] = 0.1
WEIGHT_MAX: Final[float] = 100

# Weights of a valid request must add up to TOTAL_WEIGHT within WEIGHT_TOLERANCE
TOTAL_WEIGHT: Final[float] = 100
WEIGHT_TOLERANCE: Final[float] = 0.001

MAX_EVALUATIONS: Final[int] = 10
MAX_TEACHER_POLICIES: Final[int] = 50

# --- Extra Points Settings ---

MAX_EXTRA_POINTS: Final[float] = 5


# Highest final grade the shell will ever report, validated by cap_grade_at()
CAP_GRADE_AT_RAW: Final[str] = os.environ.get("GRADER_CAP_GRADE_AT", "20")


def cap_grade_at(raw: str = CAP_GRADE_AT_RAW) -> float:
    """Parses the configured final grade cap.

    Raises:
        ConfigError: If the value is not a positive finite number.
    """
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"GRADER_CAP_GRADE_AT must be a number, got {raw!r}") from e
    if not 0 < value < float("inf"):
        raise ConfigError(f"GRADER_CAP_GRADE_AT must be a positive number, got {raw!r}")
    return value

# --- File Paths ---
LOG_DIR: Final[str] = os.environ.get("GRADER_LOG_DIR", "logs")
LOG_FILE: Final[str] = os.path.join(LOG_DIR, "grade_calculator.log")

# --- Logging Configuration ---
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'

# Basic check
if __name__ == "__main__":
    print(f"Debug Mode: {'On' if DEBUG else 'Off'}")
    print(f"Log Level: {logging.getLevelName(LOG_LEVEL)}")
    print(f"Log File: {LOG_FILE}")
    print(f"Final Grade Cap: {CAP_GRADE_AT_RAW}")
    print(f"Max Evaluations: {MAX_EVALUATIONS}")
    print(f"Max Teacher Policies: {MAX_TEACHER_POLICIES}")
