"""Configuration utilities for articlegroups.

This module centralizes the environment variable names and defaults read by
the command-line interface. There are no configuration files.
"""

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "articlegroups"
ENVVAR_PREFIX = "ARTICLEGROUPS"

LOG_PATH_ENVVAR = f"{ENVVAR_PREFIX}_LOG_PATH"
FLIGHT_RECORDER_ENVVAR = f"{ENVVAR_PREFIX}_FLIGHT_RECORDER"
FORCE_FLUSH_ENVVAR = f"{ENVVAR_PREFIX}_FORCE_FLUSH_FLIGHT_RECORDER"
LOGGER_LEVELS_ENVVAR = f"{ENVVAR_PREFIX}_LOGGER_LEVELS"

DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

# Third-party loggers quieted unless overridden with -L NAME=LEVEL
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def default_log_path() -> Path:
    """Return the default flight-recorder file in the user's log directory.

    The directory is created if it does not exist yet.
    """
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / (
        "latest.log"
    )
