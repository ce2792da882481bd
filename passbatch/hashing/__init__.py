# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Argon2id password hashing."""

from ._argon_hasher import (
    DEFAULT_HASH_LEN,
    DEFAULT_MEMORY_COST,
    DEFAULT_PARALLELISM,
    DEFAULT_TIME_COST,
    Argon2Hasher,
)
from .protocol import Hasher
from .record import HashRecord, HashRecordInfo, describe_record
from .salt import DEFAULT_SALT_LEN, generate_salt

__all__ = [
    "Argon2Hasher",
    "Hasher",
    "HashRecord",
    "HashRecordInfo",
    "describe_record",
    "generate_salt",
    "DEFAULT_HASH_LEN",
    "DEFAULT_MEMORY_COST",
    "DEFAULT_PARALLELISM",
    "DEFAULT_SALT_LEN",
    "DEFAULT_TIME_COST",
]
