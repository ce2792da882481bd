# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Random password generation under a character-class policy."""

import logging
import secrets
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Tuple, Union

from ..erase import is_erased, secure_erase
from ..errors import GenerationError
from .policy import PasswordPolicy
from .scorer import score

LOG = logging.getLogger(__name__)

MAX_STRICT_ATTEMPTS = 100

Scorer = Callable[[Union[bytes, bytearray]], float]


@dataclass(eq=False, repr=False)
class GeneratedPassword:
    """A generated plaintext and its strength score.

    Use it as a context manager so that the plaintext is erased when
    the block exits.

    Attributes
    ----------
    plaintext : bytearray
        The password characters (ASCII).
    score : float
        The strength score.
    """

    plaintext: bytearray
    score: float = 0.0

    def erase(self) -> None:
        """Overwrite the plaintext with zeros."""
        secure_erase(self.plaintext)

    @property
    def erased(self) -> bool:
        """Whether the plaintext has been erased."""
        return is_erased(self.plaintext)

    def __len__(self) -> int:
        """Get the password length."""
        return len(self.plaintext)

    def __enter__(self) -> "GeneratedPassword":
        """Enter the context."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Erase the plaintext on exit."""
        self.erase()

    def __repr__(self) -> str:
        """Represent without revealing the plaintext."""
        return (
            f"GeneratedPassword(length={len(self.plaintext)}, "
            f"score={self.score})"
        )


class PolicyGenerator:
    """Generate passwords satisfying a policy.

    Parameters
    ----------
    policy : PasswordPolicy
        The policy to satisfy.
    scorer : Scorer, optional
        The strength scorer, by default :func:`score`.
    """

    def __init__(self, policy: PasswordPolicy, scorer: Scorer = score) -> None:
        self.policy = policy
        self._scorer = scorer
        charsets = policy.charsets()
        self._alphabet = b"".join(charsets.values())
        self._required: Tuple[FrozenSet[int], ...] = tuple(
            frozenset(chars) for chars in charsets.values()
        )

    def generate(self) -> GeneratedPassword:
        """Generate and score one password.

        Returns
        -------
        GeneratedPassword
            The new password.

        Raises
        ------
        GenerationError
            If a strict policy cannot be satisfied.
        """
        policy = self.policy
        if policy.strict and policy.length < len(self._required):
            raise GenerationError(
                f"Length {policy.length} is too short to include "
                f"{len(self._required)} character classes"
            )
        for _ in range(MAX_STRICT_ATTEMPTS):
            candidate = self._draw()
            if not policy.strict or self._has_every_class(candidate):
                return self._scored(candidate)
            secure_erase(candidate)
        raise GenerationError(
            f"No password satisfying every enabled class after "
            f"{MAX_STRICT_ATTEMPTS} attempts"
        )

    def generate_many(self, count: int) -> List[GeneratedPassword]:
        """Generate several passwords sequentially.

        Parameters
        ----------
        count : int
            How many passwords to generate.

        Returns
        -------
        List[GeneratedPassword]
            The generated passwords.
        """
        passwords: List[GeneratedPassword] = []
        try:
            for _ in range(count):
                passwords.append(self.generate())
        except BaseException:
            for password in passwords:
                password.erase()
            raise
        return passwords

    def _draw(self) -> bytearray:
        buffer = bytearray(self.policy.length)
        for index in range(self.policy.length):
            buffer[index] = secrets.choice(self._alphabet)
        return buffer

    def _has_every_class(self, candidate: bytearray) -> bool:
        return all(
            any(code in chars for code in candidate)
            for chars in self._required
        )

    def _scored(self, candidate: bytearray) -> GeneratedPassword:
        try:
            strength = self._scorer(candidate)
        except BaseException:
            secure_erase(candidate)
            raise
        return GeneratedPassword(plaintext=candidate, score=strength)


def generate(policy: PasswordPolicy) -> GeneratedPassword:
    """Generate one scored password for a policy.

    Parameters
    ----------
    policy : PasswordPolicy
        The policy to satisfy.

    Returns
    -------
    GeneratedPassword
        The new password.
    """
    return PolicyGenerator(policy).generate()


__all__ = [
    "GeneratedPassword",
    "PolicyGenerator",
    "generate",
    "MAX_STRICT_ATTEMPTS",
]
