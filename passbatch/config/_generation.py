# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Password generation configuration.

Environment variables (with prefix PASSBATCH_)
----------------------------------------------
BATCH_SIZE (int) # default: 16
PASSWORD_LENGTH (int) # default: 16
NUMBERS, LOWERCASE, UPPERCASE, SYMBOLS (bool) # default: true
SPACES (bool) # default: false
EXCLUDE_SIMILAR (bool) # default: true
STRICT (bool) # default: true
WORKERS (int) # default: 0 (one per CPU)

Command line arguments (no prefix)
----------------------------------
--batch-size (int)
--length (int)
--[no-]numbers, --[no-]lowercase, --[no-]uppercase, --[no-]symbols
--[no-]spaces, --[no-]exclude-similar, --[no-]strict
--workers (int)
"""

from ._common import get_flag, get_value

DEFAULT_BATCH_SIZE = 16
DEFAULT_PASSWORD_LENGTH = 16
DEFAULT_WORKERS = 0


def get_batch_size() -> int:
    """Get the number of passwords per batch.

    Returns
    -------
    int
        The batch size.
    """
    return get_value("--batch-size", "BATCH_SIZE", int, DEFAULT_BATCH_SIZE)


def get_password_length() -> int:
    """Get the password length.

    Returns
    -------
    int
        The password length.
    """
    return get_value(
        "--length", "PASSWORD_LENGTH", int, DEFAULT_PASSWORD_LENGTH
    )


def get_workers() -> int:
    """Get the worker pool size, 0 for one worker per CPU.

    Returns
    -------
    int
        The number of workers.
    """
    return get_value("--workers", "WORKERS", int, DEFAULT_WORKERS)


def get_include_numbers() -> bool:
    """Whether to include digits."""
    return get_flag("--numbers", "NUMBERS", True)


def get_include_lowercase() -> bool:
    """Whether to include lowercase letters."""
    return get_flag("--lowercase", "LOWERCASE", True)


def get_include_uppercase() -> bool:
    """Whether to include uppercase letters."""
    return get_flag("--uppercase", "UPPERCASE", True)


def get_include_symbols() -> bool:
    """Whether to include symbols."""
    return get_flag("--symbols", "SYMBOLS", True)


def get_include_spaces() -> bool:
    """Whether to include spaces."""
    return get_flag("--spaces", "SPACES", False)


def get_exclude_similar() -> bool:
    """Whether to exclude visually similar characters."""
    return get_flag("--exclude-similar", "EXCLUDE_SIMILAR", True)


def get_strict() -> bool:
    """Whether every enabled class must appear in each password."""
    return get_flag("--strict", "STRICT", True)
