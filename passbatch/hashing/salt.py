# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Per-password salts from the OS random source."""

import secrets

DEFAULT_SALT_LEN = 16
MIN_SALT_LEN = 8


def generate_salt(length: int = DEFAULT_SALT_LEN) -> bytes:
    """Generate a fresh random salt.

    Parameters
    ----------
    length : int, optional
        The salt length in bytes, by default 16.

    Returns
    -------
    bytes
        The salt.
    """
    return secrets.token_bytes(length)


__all__ = ["generate_salt", "DEFAULT_SALT_LEN", "MIN_SALT_LEN"]
