# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Resolution of settings from the command line, the environment and .env.

A value given on the command line wins over the environment, which wins
over the built-in default. Both ``--key value`` and ``--key=value`` are
understood. Flags use ``--key`` / ``--no-key``.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "PASSBATCH_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=False)

TRUTHY = ("true", "1", "yes", "y", "on")
FALSY = ("false", "0", "no", "n", "off")
T = TypeVar("T")


def to_kebab(value: str) -> str:
    """Turn a field name into its command line spelling.

    Parameters
    ----------
    value : str
        A snake case name, e.g. ``memory_cost``.

    Returns
    -------
    str
        The kebab case name, e.g. ``memory-cost``.
    """
    return value.replace("_", "-")


def _from_argv(cli_key: str) -> Optional[str]:
    args = sys.argv[1:]
    prefix = f"{cli_key}="
    for index, arg in enumerate(args):
        if arg.startswith(prefix):
            return arg[len(prefix) :]
        if arg == cli_key:
            return args[index + 1] if index + 1 < len(args) else None
    return None


def _from_env(env_key: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{env_key}") or None


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Resolve a setting and convert it.

    A value that ``cast`` rejects is ignored, as if it was not given.

    Parameters
    ----------
    cli_key : str
        The option, e.g. ``--batch-size``.
    env_key : str
        The environment variable name without :data:`ENV_PREFIX`.
    cast : Callable[[str], T]
        Converts the raw string.
    fallback : T
        Used when neither source gives a usable value.

    Returns
    -------
    T
        The resolved value.
    """
    for raw in (_from_argv(cli_key), _from_env(env_key)):
        if not raw:
            continue
        try:
            return cast(raw)
        except (ValueError, TypeError):
            continue
    return fallback


def get_flag(cli_key: str, env_key: str, fallback: bool) -> bool:
    """Resolve an on/off setting.

    Parameters
    ----------
    cli_key : str
        The positive option, e.g. ``--symbols``.
    env_key : str
        The environment variable name without :data:`ENV_PREFIX`.
    fallback : bool
        Used when neither source decides.

    Returns
    -------
    bool
        The resolved flag.
    """
    name = cli_key.lstrip("-")
    # the last occurrence wins, as with click
    for arg in reversed(sys.argv[1:]):
        if arg == f"--no-{name}":
            return False
        if arg == f"--{name}":
            return True
    raw = (_from_env(env_key) or "").strip().lower()
    if raw in TRUTHY:
        return True
    if raw in FALSY:
        return False
    return fallback
