# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Character classes used to build passwords."""

import string
from enum import Enum
from typing import Dict

SIMILAR_CHARACTERS = frozenset("iI1loO0\"'`|")


class CharClass(str, Enum):
    """A password character class."""

    NUMBERS = "numbers"
    LOWERCASE = "lowercase_letters"
    UPPERCASE = "uppercase_letters"
    SYMBOLS = "symbols"
    SPACES = "spaces"


CHARSETS: Dict[CharClass, str] = {
    CharClass.NUMBERS: string.digits,
    CharClass.LOWERCASE: string.ascii_lowercase,
    CharClass.UPPERCASE: string.ascii_uppercase,
    CharClass.SYMBOLS: string.punctuation,
    CharClass.SPACES: " ",
}


def charset_for(char_class: CharClass, exclude_similar: bool) -> bytes:
    """Get the characters of a class as bytes.

    Parameters
    ----------
    char_class : CharClass
        The character class.
    exclude_similar : bool
        Whether to drop visually ambiguous characters.

    Returns
    -------
    bytes
        The class characters, in a stable order.
    """
    chars = CHARSETS[char_class]
    if exclude_similar:
        chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
    return chars.encode("ascii")


def classify(code: int) -> CharClass | None:
    """Get the class of a single character code.

    Parameters
    ----------
    code : int
        The character code (byte value or code point).

    Returns
    -------
    CharClass | None
        The class, or None for characters outside every class.
    """
    if code >= 128:
        return None
    char = chr(code)
    for char_class, chars in CHARSETS.items():
        if char in chars:
            return char_class
    return None


__all__ = [
    "CharClass",
    "CHARSETS",
    "SIMILAR_CHARACTERS",
    "charset_for",
    "classify",
]
