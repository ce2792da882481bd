# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password policy."""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..errors import GenerationError
from ._charsets import CharClass, charset_for


@dataclass(frozen=True)
class PasswordPolicy:
    """Character-class policy for generated passwords.

    The policy is immutable and can be shared between threads.

    Attributes
    ----------
    length : int
        The exact length of each password.
    numbers : bool
        Include digits.
    lowercase_letters : bool
        Include lowercase ASCII letters.
    uppercase_letters : bool
        Include uppercase ASCII letters.
    symbols : bool
        Include ASCII punctuation.
    spaces : bool
        Include the space character.
    exclude_similar_characters : bool
        Drop characters that are easy to confuse (``iI1loO0"'`|``).
    strict : bool
        Require at least one character of every enabled class.
    """

    length: int = 16
    numbers: bool = True
    lowercase_letters: bool = True
    uppercase_letters: bool = True
    symbols: bool = True
    spaces: bool = False
    exclude_similar_characters: bool = True
    strict: bool = True

    def __post_init__(self) -> None:
        """Validate the policy.

        Raises
        ------
        GenerationError
            If the length is not positive or no class is enabled.
        """
        if not isinstance(self.length, int) or self.length < 1:
            raise GenerationError(
                "Password length must be a positive integer, "
                f"got {self.length}"
            )
        if not self.enabled_classes:
            raise GenerationError(
                "At least one character class must be enabled"
            )

    @property
    def enabled_classes(self) -> Tuple[CharClass, ...]:
        """The enabled character classes, in a stable order."""
        flags = (
            (CharClass.NUMBERS, self.numbers),
            (CharClass.LOWERCASE, self.lowercase_letters),
            (CharClass.UPPERCASE, self.uppercase_letters),
            (CharClass.SYMBOLS, self.symbols),
            (CharClass.SPACES, self.spaces),
        )
        return tuple(char_class for char_class, enabled in flags if enabled)

    def charsets(self) -> Dict[CharClass, bytes]:
        """Get the allowed characters of every enabled class.

        Returns
        -------
        Dict[CharClass, bytes]
            The characters per enabled class.
        """
        return {
            char_class: charset_for(
                char_class, self.exclude_similar_characters
            )
            for char_class in self.enabled_classes
        }

    def alphabet(self) -> bytes:
        """Get the union of the enabled classes.

        Returns
        -------
        bytes
            All allowed characters.
        """
        return b"".join(self.charsets().values())


__all__ = ["PasswordPolicy"]
