# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Argon2id cost configuration.

Environment variables (with prefix PASSBATCH_)
----------------------------------------------
MEMORY_COST (int) # default: 19456 (KiB)
TIME_COST (int) # default: 2
PARALLELISM (int) # default: 2
OUTPUT_LEN (int) # default: 32
SALT_LEN (int) # default: 16

Command line arguments (no prefix)
----------------------------------
--memory-cost, --time-cost, --parallelism, --output-len, --salt-len
"""

from ..hashing import (
    DEFAULT_HASH_LEN,
    DEFAULT_MEMORY_COST,
    DEFAULT_PARALLELISM,
    DEFAULT_SALT_LEN,
    DEFAULT_TIME_COST,
)
from ._common import get_value


def get_memory_cost() -> int:
    """Get the memory cost in KiB.

    Returns
    -------
    int
        The memory cost.
    """
    return get_value(
        "--memory-cost", "MEMORY_COST", int, DEFAULT_MEMORY_COST
    )


def get_time_cost() -> int:
    """Get the number of passes.

    Returns
    -------
    int
        The time cost.
    """
    return get_value("--time-cost", "TIME_COST", int, DEFAULT_TIME_COST)


def get_parallelism() -> int:
    """Get the number of lanes.

    Returns
    -------
    int
        The parallelism.
    """
    return get_value(
        "--parallelism", "PARALLELISM", int, DEFAULT_PARALLELISM
    )


def get_output_len() -> int:
    """Get the digest length in bytes.

    Returns
    -------
    int
        The output length.
    """
    return get_value("--output-len", "OUTPUT_LEN", int, DEFAULT_HASH_LEN)


def get_salt_len() -> int:
    """Get the salt length in bytes.

    Returns
    -------
    int
        The salt length.
    """
    return get_value("--salt-len", "SALT_LEN", int, DEFAULT_SALT_LEN)
