# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Logging configuration module.

Records go to stderr with uvicorn's colored level prefix, so that stdout
only carries the hash output. Plaintext passwords are never logged.
"""

import copy
import logging
import logging.config
import os
import sys
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

import uvicorn.config

from .config import ENV_PREFIX

LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
LOG_FORMAT = (
    "%(levelprefix)s %(asctime)s.%(msecs)03d [%(threadName)s] "
    "[%(name)s:%(lineno)d] %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""

LOG_LEVELS: Tuple[LogLevelType, ...] = get_args(LogLevelType)


def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Only uvicorn's ``default`` formatter and stderr handler are kept, the
    root and ``passbatch`` loggers both log through them.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict
    """
    logging_config = copy.deepcopy(uvicorn.config.LOGGING_CONFIG)
    formatter = logging_config["formatters"]["default"]
    formatter["fmt"] = LOG_FORMAT
    formatter["datefmt"] = DATE_FORMAT
    logging_config["handlers"] = {
        "default": logging_config["handlers"]["default"],
    }
    logging_config["loggers"] = {
        name: {
            "handlers": ["default"],
            "level": log_level,
            "propagate": False,
        }
        for name in ("", "passbatch")
    }
    return logging_config


def configure_logging(log_level: str) -> None:
    """Apply the logging configuration.

    Parameters
    ----------
    log_level : str
        The log level
    """
    logging.config.dictConfig(get_logging_config(log_level))
    logging.captureWarnings(True)


def _as_level(value: Optional[str]) -> Optional[LogLevelType]:
    if value is None:
        return None
    upper = value.strip().upper()
    for level in LOG_LEVELS:
        if level == upper:
            return level
    return None


def _level_from_argv() -> Optional[LogLevelType]:
    if "--debug" in sys.argv:
        return "DEBUG"
    args = sys.argv[1:]
    for index, arg in enumerate(args):
        if arg.startswith("--log-level="):
            return _as_level(arg.split("=", 1)[1])
        if arg == "--log-level" and index + 1 < len(args):
            return _as_level(args[index + 1])
    return None


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    ``--debug`` or ``--log-level`` on the command line win over
    ``PASSBATCH_LOG_LEVEL``, unknown values fall back to INFO. The
    resolved level is written back to the environment.

    Returns
    -------
    LogLevelType
        The default log level
    """
    level = (
        _level_from_argv() or _as_level(os.environ.get(LOG_LEVEL_ENV)) or "INFO"
    )
    os.environ[LOG_LEVEL_ENV] = level
    return level
