# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password generation and scoring."""

from ._charsets import SIMILAR_CHARACTERS, CharClass
from .generator import (
    MAX_STRICT_ATTEMPTS,
    GeneratedPassword,
    PolicyGenerator,
    generate,
)
from .policy import PasswordPolicy
from .scorer import PasswordAnalysis, analyze, score

__all__ = [
    "CharClass",
    "SIMILAR_CHARACTERS",
    "MAX_STRICT_ATTEMPTS",
    "GeneratedPassword",
    "PasswordPolicy",
    "PasswordAnalysis",
    "PolicyGenerator",
    "analyze",
    "generate",
    "score",
]
