# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""What the batch dispatcher needs from a password hasher."""

from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """A configured, thread-safe password hasher.

    One instance is shared by every hashing unit of a batch.
    """

    def hash(self, password: bytearray, salt: Optional[bytes] = None) -> str:
        """Hash a plaintext buffer and erase it.

        Parameters
        ----------
        password : bytearray
            The plaintext, zeroed when the call returns or raises.
        salt : Optional[bytes]
            The salt to use, a fresh one if not given.

        Returns
        -------
        str
            A self-describing encoded hash.
        """
        ...

    def verify(self, plain: Union[str, bytes], stored: str) -> bool:
        """Check a candidate against an encoded hash.

        Parameters
        ----------
        plain : Union[str, bytes]
            The candidate.
        stored : str
            An encoded hash produced by :meth:`hash`.
        """
        ...

    def needs_rehash(self, stored: str) -> bool:
        """Whether an encoded hash was made with other parameters.

        Parameters
        ----------
        stored : str
            The encoded hash.
        """
        ...


__all__ = ["Hasher"]
