# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Test passbatch.config._hashing."""
# pylint: disable=missing-return-doc,missing-param-doc

import sys
from pathlib import Path
from typing import Callable

import pytest

# noinspection PyProtectedMember
from passbatch.config import ENV_PREFIX, _hashing
from passbatch.hashing import (
    DEFAULT_HASH_LEN,
    DEFAULT_MEMORY_COST,
    DEFAULT_PARALLELISM,
    DEFAULT_SALT_LEN,
    DEFAULT_TIME_COST,
)

THIS_FILE = Path(__file__).resolve()

GETTERS = [
    (_hashing.get_memory_cost, "MEMORY_COST", "--memory-cost"),
    (_hashing.get_time_cost, "TIME_COST", "--time-cost"),
    (_hashing.get_parallelism, "PARALLELISM", "--parallelism"),
    (_hashing.get_output_len, "OUTPUT_LEN", "--output-len"),
    (_hashing.get_salt_len, "SALT_LEN", "--salt-len"),
]


@pytest.fixture(autouse=True, name="clear_env")
def clear_env_and_args(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear environment variables and command-line arguments."""
    for _, env_key, _ in GETTERS:
        monkeypatch.delenv(f"{ENV_PREFIX}{env_key}", raising=False)
    monkeypatch.setattr(sys, "argv", [str(THIS_FILE)])


def test_defaults() -> None:
    """Test the default costs."""
    assert _hashing.get_memory_cost() == DEFAULT_MEMORY_COST == 19456
    assert _hashing.get_time_cost() == DEFAULT_TIME_COST == 2
    assert _hashing.get_parallelism() == DEFAULT_PARALLELISM == 2
    assert _hashing.get_output_len() == DEFAULT_HASH_LEN == 32
    assert _hashing.get_salt_len() == DEFAULT_SALT_LEN == 16


@pytest.mark.parametrize("getter,env_key,cli_key", GETTERS)
def test_from_env(
    monkeypatch: pytest.MonkeyPatch,
    getter: Callable[[], int],
    env_key: str,
    cli_key: str,  # pylint: disable=unused-argument
) -> None:
    """Test reading a cost from the environment."""
    monkeypatch.setenv(f"{ENV_PREFIX}{env_key}", "77")
    assert getter() == 77


@pytest.mark.parametrize("getter,env_key,cli_key", GETTERS)
def test_from_cli(
    monkeypatch: pytest.MonkeyPatch,
    getter: Callable[[], int],
    env_key: str,
    cli_key: str,
) -> None:
    """Test that the cli arg wins over the environment."""
    monkeypatch.setenv(f"{ENV_PREFIX}{env_key}", "77")
    sys.argv.extend([cli_key, "99"])
    assert getter() == 99


def test_out_of_range_is_not_checked_here(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Test that the getters pass any integer through."""
    monkeypatch.setenv(f"{ENV_PREFIX}MEMORY_COST", "4")
    assert _hashing.get_memory_cost() == 4
