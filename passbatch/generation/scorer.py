# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Deterministic password strength scoring."""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ._charsets import CHARSETS, CharClass, classify

MAX_SCORE = 100.0
# pool size credited to characters outside every known class
OTHER_POOL_SIZE = 128

Password = Union[str, bytes, bytearray]


@dataclass(frozen=True)
class PasswordAnalysis:
    """Composition of a password.

    Attributes
    ----------
    length : int
        Number of characters.
    numbers : int
        Number of digits.
    lowercase_letters : int
        Number of lowercase letters.
    uppercase_letters : int
        Number of uppercase letters.
    symbols : int
        Number of punctuation characters.
    spaces : int
        Number of spaces.
    other_characters : int
        Number of characters outside every class.
    consecutive_count : int
        Characters equal to the one before them.
    progressive_count : int
        Characters continuing an ascending or descending run
        (``abc``, ``321``).
    """

    length: int
    numbers: int
    lowercase_letters: int
    uppercase_letters: int
    symbols: int
    spaces: int
    other_characters: int
    consecutive_count: int
    progressive_count: int

    @property
    def pool_size(self) -> int:
        """The size of the character pool the password draws from."""
        counts = (
            (CharClass.NUMBERS, self.numbers),
            (CharClass.LOWERCASE, self.lowercase_letters),
            (CharClass.UPPERCASE, self.uppercase_letters),
            (CharClass.SYMBOLS, self.symbols),
            (CharClass.SPACES, self.spaces),
        )
        size = sum(len(CHARSETS[cls]) for cls, count in counts if count)
        if self.other_characters:
            size += OTHER_POOL_SIZE
        return size


def _codes(password: Password) -> List[int]:
    if isinstance(password, str):
        return [ord(char) for char in password]
    return list(password)


def _runs(codes: Iterable[int]) -> Tuple[int, int]:
    consecutive = 0
    progressive = 0
    previous: Optional[int] = None
    step: Optional[int] = None
    for code in codes:
        if previous is not None:
            delta = code - previous
            if delta == 0:
                consecutive += 1
            elif delta in (-1, 1):
                if step == delta:
                    progressive += 1
            step = delta
        previous = code
    return consecutive, progressive


def analyze(password: Password) -> PasswordAnalysis:
    """Analyze the composition of a password.

    Parameters
    ----------
    password : str | bytes | bytearray
        The password. It is not modified.

    Returns
    -------
    PasswordAnalysis
        The analysis.
    """
    codes = _codes(password)
    counts = {char_class: 0 for char_class in CharClass}
    other = 0
    for code in codes:
        char_class = classify(code)
        if char_class is None:
            other += 1
        else:
            counts[char_class] += 1
    consecutive, progressive = _runs(codes)
    return PasswordAnalysis(
        length=len(password),
        numbers=counts[CharClass.NUMBERS],
        lowercase_letters=counts[CharClass.LOWERCASE],
        uppercase_letters=counts[CharClass.UPPERCASE],
        symbols=counts[CharClass.SYMBOLS],
        spaces=counts[CharClass.SPACES],
        other_characters=other,
        consecutive_count=consecutive,
        progressive_count=progressive,
    )


def score_analysis(analysis: PasswordAnalysis) -> float:
    """Score an analyzed password.

    Parameters
    ----------
    analysis : PasswordAnalysis
        The analysis.

    Returns
    -------
    float
        The score, in ``[0, 100]``.
    """
    if analysis.length == 0:
        return 0.0
    repeated = analysis.consecutive_count + analysis.progressive_count
    effective_length = analysis.length - repeated / 2
    bits = effective_length * math.log2(max(analysis.pool_size, 2))
    return round(min(MAX_SCORE, max(0.0, bits)), 2)


def score(password: Password) -> float:
    """Score the strength of a password.

    Same input, same score.

    Parameters
    ----------
    password : str | bytes | bytearray
        The password. It is neither modified nor retained.

    Returns
    -------
    float
        The score, in ``[0, 100]``.
    """
    return score_analysis(analyze(password))


__all__ = [
    "PasswordAnalysis",
    "analyze",
    "score",
    "score_analysis",
    "MAX_SCORE",
]
