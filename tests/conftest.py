# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
# pylint: disable=missing-return-doc
"""Shared fixtures for tests."""

import pytest

from passbatch.generation import PasswordPolicy
from passbatch.hashing import Argon2Hasher

# cheap costs, the parameters are not what is under test
TEST_MEMORY_COST = 256
TEST_TIME_COST = 1
TEST_PARALLELISM = 1


@pytest.fixture(name="hasher")
def hasher_fixture() -> Argon2Hasher:
    """A hasher with low costs."""
    return Argon2Hasher(
        memory_cost=TEST_MEMORY_COST,
        time_cost=TEST_TIME_COST,
        parallelism=TEST_PARALLELISM,
    )


@pytest.fixture(name="policy")
def policy_fixture() -> PasswordPolicy:
    """Every class enabled, similar characters excluded, strict."""
    return PasswordPolicy(
        length=16,
        numbers=True,
        lowercase_letters=True,
        uppercase_letters=True,
        symbols=True,
        spaces=False,
        exclude_similar_characters=True,
        strict=True,
    )
