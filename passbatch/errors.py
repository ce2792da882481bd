# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised while generating and hashing password batches."""

import base64


class PassbatchError(Exception):
    """Base class for all passbatch errors."""


class ParamError(PassbatchError, ValueError):
    """Invalid hashing cost parameters.

    Raised once, when the hasher is configured, before any batch work.
    """


class GenerationError(PassbatchError):
    """A password could not be generated under the given policy."""

    def __str__(self) -> str:
        """Get the message with the failing stage prefixed."""
        return f"Password generation failed: {super().__str__()}"


class HashingError(PassbatchError):
    """The hashing primitive rejected a unit's input.

    Parameters
    ----------
    salt : bytes
        The salt used for the failed computation.
    cause : BaseException
        The underlying error.
    """

    def __init__(self, salt: bytes, cause: BaseException) -> None:
        super().__init__(salt, cause)
        self.salt = salt
        self.cause = cause

    @property
    def encoded_salt(self) -> str:
        """The salt, base64 encoded for display."""
        try:
            raw = bytes(self.salt)
        except TypeError:
            return repr(self.salt)
        return base64.b64encode(raw).decode("ascii")

    def __str__(self) -> str:
        """Get the message with the failing stage and the salt."""
        return (
            f"Password hashing failed (salt: {self.encoded_salt}): "
            f"{self.cause}"
        )


__all__ = [
    "PassbatchError",
    "ParamError",
    "GenerationError",
    "HashingError",
]
