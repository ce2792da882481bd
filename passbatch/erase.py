# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Overwrite plaintext buffers once they are no longer needed."""

from contextlib import contextmanager
from typing import Iterator


def secure_erase(buffer: bytearray) -> None:
    """Overwrite every byte of the buffer with zero, in place.

    Parameters
    ----------
    buffer : bytearray
        The mutable buffer holding the secret.

    Raises
    ------
    TypeError
        If the buffer is not mutable.
    """
    if not isinstance(buffer, bytearray):
        raise TypeError(
            f"Only bytearray buffers can be erased, got {type(buffer).__name__}"
        )
    # same length slice assignment, no reallocation
    buffer[:] = bytes(len(buffer))


def is_erased(buffer: bytearray) -> bool:
    """Check if the buffer contains only zero bytes.

    Parameters
    ----------
    buffer : bytearray
        The buffer to check.

    Returns
    -------
    bool
        True if every byte is zero.
    """
    return not any(buffer)


@contextmanager
def erasing(buffer: bytearray) -> Iterator[bytearray]:
    """Yield the buffer and erase it on exit, whatever the exit path.

    Parameters
    ----------
    buffer : bytearray
        The buffer to guard.

    Yields
    ------
    bytearray
        The same buffer.
    """
    try:
        yield buffer
    finally:
        secure_erase(buffer)


__all__ = ["secure_erase", "is_erased", "erasing"]
