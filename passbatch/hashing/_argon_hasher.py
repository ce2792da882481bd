# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=too-many-instance-attributes
"""Argon2id password hasher with eagerly validated cost parameters."""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from argon2 import PasswordHasher, Type
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import ARGON2_VERSION, hash_secret

from ..erase import erasing
from ..errors import HashingError, ParamError
from .salt import DEFAULT_SALT_LEN, MIN_SALT_LEN, generate_salt

LOG = logging.getLogger(__name__)

# limits of the reference implementation (argon2.h)
MIN_PARALLELISM = 1
MAX_PARALLELISM = 0xFFFFFF
MIN_TIME_COST = 1
MAX_TIME_COST = 0xFFFFFFFF
MIN_MEMORY_COST = 8  # KiB, per lane
MAX_MEMORY_COST = 0xFFFFFFFF
MIN_HASH_LEN = 4
MAX_HASH_LEN = 0xFFFFFFFF

DEFAULT_MEMORY_COST = 19456  # 19 MiB
DEFAULT_TIME_COST = 2
DEFAULT_PARALLELISM = 2
DEFAULT_HASH_LEN = 32


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParamError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if not low <= value <= high:
        raise ParamError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class Argon2Hasher:
    """Argon2id hasher.

    The cost parameters are validated when the hasher is created and
    never change afterwards, so one instance can be shared by any
    number of threads.

    Attributes
    ----------
    memory_cost : int
        Memory in KiB, at least 8 per lane.
    time_cost : int
        Number of passes.
    parallelism : int
        Number of lanes.
    hash_len : int
        Digest length in bytes.
    salt_len : int
        Length of the salts drawn by :meth:`hash`.
    """

    _ph: PasswordHasher = field(init=False, repr=False, compare=False)

    memory_cost: int = DEFAULT_MEMORY_COST
    time_cost: int = DEFAULT_TIME_COST
    parallelism: int = DEFAULT_PARALLELISM
    hash_len: int = DEFAULT_HASH_LEN
    salt_len: int = DEFAULT_SALT_LEN

    def __post_init__(self) -> None:
        """Validate the parameters.

        Raises
        ------
        ParamError
            If any parameter is outside the accepted range.
        """
        _check_range(
            "parallelism", self.parallelism, MIN_PARALLELISM, MAX_PARALLELISM
        )
        _check_range("time_cost", self.time_cost, MIN_TIME_COST, MAX_TIME_COST)
        _check_range(
            "memory_cost",
            self.memory_cost,
            MIN_MEMORY_COST * self.parallelism,
            MAX_MEMORY_COST,
        )
        _check_range("hash_len", self.hash_len, MIN_HASH_LEN, MAX_HASH_LEN)
        _check_range("salt_len", self.salt_len, MIN_SALT_LEN, MAX_HASH_LEN)
        object.__setattr__(
            self,
            "_ph",
            PasswordHasher(
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                salt_len=self.salt_len,
                type=Type.ID,
            ),
        )
        LOG.debug(
            "Argon2id configured: m=%d, t=%d, p=%d, hash_len=%d",
            self.memory_cost,
            self.time_cost,
            self.parallelism,
            self.hash_len,
        )

    @classmethod
    def configure(
        cls,
        memory_cost: int,
        time_cost: int,
        parallelism: int,
        output_len: int,
        salt_len: int = DEFAULT_SALT_LEN,
    ) -> "Argon2Hasher":
        """Create a hasher with the given cost parameters.

        Parameters
        ----------
        memory_cost : int
            Memory in KiB.
        time_cost : int
            Number of passes.
        parallelism : int
            Number of lanes.
        output_len : int
            Digest length in bytes.
        salt_len : int, optional
            Salt length in bytes, by default 16.

        Returns
        -------
        Argon2Hasher
            The hasher.

        Raises
        ------
        ParamError
            If any parameter is outside the accepted range.
        """
        return cls(
            memory_cost=memory_cost,
            time_cost=time_cost,
            parallelism=parallelism,
            hash_len=output_len,
            salt_len=salt_len,
        )

    def generate_salt(self) -> bytes:
        """Draw a fresh salt of the configured length.

        Returns
        -------
        bytes
            The salt.
        """
        return generate_salt(self.salt_len)

    def hash(self, password: bytearray, salt: Optional[bytes] = None) -> str:
        """Hash a plaintext buffer using argon2id.

        The buffer is erased before this returns or raises.

        Parameters
        ----------
        password : bytearray
            The plaintext.
        salt : Optional[bytes], optional
            The salt, a fresh one is drawn if not given.

        Returns
        -------
        str
            The self-describing encoded hash.

        Raises
        ------
        TypeError
            If the password is not a bytearray.
        HashingError
            If the primitive rejects the input.
        """
        if not isinstance(password, bytearray):
            raise TypeError(
                "The password must be a bytearray, "
                f"got {type(password).__name__}"
            )
        with erasing(password):
            if salt is None:
                salt = self.generate_salt()
            try:
                encoded = hash_secret(
                    bytes(password),
                    salt,
                    time_cost=self.time_cost,
                    memory_cost=self.memory_cost,
                    parallelism=self.parallelism,
                    hash_len=self.hash_len,
                    type=Type.ID,
                    version=ARGON2_VERSION,
                )
            except (Argon2HashingError, TypeError, ValueError) as exc:
                raise HashingError(salt, exc) from exc
        return encoded.decode("ascii")

    def verify(self, plain: Union[str, bytes], stored: str) -> bool:
        """Verify password against argon2 hash.

        The parameters are read from the stored hash itself.

        Parameters
        ----------
        plain : Union[str, bytes]
            The plain secret to check.
        stored : str
            The stored hashed secret.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        if not stored.startswith("$argon2"):
            return False
        try:
            return self._ph.verify(stored, plain)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, stored: str) -> bool:
        """Check if the stored hashed secret needs rehash.

        Parameters
        ----------
        stored : str
            The stored hash

        Returns
        -------
        bool
            True if secret needs rehash, False otherwise
        """
        if not stored.startswith("$argon2"):
            return True
        try:
            return self._ph.check_needs_rehash(stored)
        except (InvalidHashError, ValueError):
            return True


__all__ = [
    "Argon2Hasher",
    "DEFAULT_MEMORY_COST",
    "DEFAULT_TIME_COST",
    "DEFAULT_PARALLELISM",
    "DEFAULT_HASH_LEN",
    "MIN_MEMORY_COST",
]
