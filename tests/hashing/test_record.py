# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Tests for passbatch.hashing.record."""

import pytest
from argon2 import Type
from argon2.exceptions import InvalidHashError

from passbatch.hashing import Argon2Hasher, describe_record

SALT = b"0123456789abcdef"


def test_describe_record(hasher: Argon2Hasher) -> None:
    """Test that the parameters are read back from the record."""
    record = hasher.hash(bytearray(b"password"), salt=SALT)
    info = describe_record(record)

    assert info.parameters.type is Type.ID
    assert info.parameters.version == 19
    assert info.parameters.memory_cost == hasher.memory_cost
    assert info.parameters.time_cost == hasher.time_cost
    assert info.parameters.parallelism == hasher.parallelism
    assert info.parameters.hash_len == hasher.hash_len
    assert info.parameters.salt_len == len(SALT)
    assert info.salt == SALT
    assert len(info.digest) == hasher.hash_len


def test_describe_invalid_record() -> None:
    """Test that invalid records are rejected."""
    with pytest.raises(InvalidHashError):
        describe_record("$argon2id$invalid")
