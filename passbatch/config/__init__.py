# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for passbatch."""

from ._common import ENV_PREFIX, FALSY, ROOT_DIR, TRUTHY
from ._generation import DEFAULT_BATCH_SIZE, DEFAULT_PASSWORD_LENGTH
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "ROOT_DIR",
    "TRUTHY",
    "FALSY",
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_PASSWORD_LENGTH",
]
