# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use
"""Tests for passbatch.generation.policy."""

import dataclasses
import string

import pytest

from passbatch.errors import GenerationError
from passbatch.generation import SIMILAR_CHARACTERS, CharClass, PasswordPolicy


class TestPasswordPolicy:
    """Test the password policy."""

    def test_defaults(self) -> None:
        """Test the default policy."""
        policy = PasswordPolicy()
        assert policy.length == 16
        assert policy.strict
        assert policy.exclude_similar_characters
        assert policy.enabled_classes == (
            CharClass.NUMBERS,
            CharClass.LOWERCASE,
            CharClass.UPPERCASE,
            CharClass.SYMBOLS,
        )

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length(self, length: int) -> None:
        """Test that the length must be positive."""
        with pytest.raises(GenerationError):
            PasswordPolicy(length=length)

    def test_no_class_enabled(self) -> None:
        """Test that at least one class is required."""
        with pytest.raises(GenerationError):
            PasswordPolicy(
                numbers=False,
                lowercase_letters=False,
                uppercase_letters=False,
                symbols=False,
                spaces=False,
            )

    def test_spaces_only(self) -> None:
        """Test a policy with spaces only."""
        policy = PasswordPolicy(
            numbers=False,
            lowercase_letters=False,
            uppercase_letters=False,
            symbols=False,
            spaces=True,
        )
        assert policy.alphabet() == b" "

    def test_is_immutable(self) -> None:
        """Test that the policy cannot be modified."""
        policy = PasswordPolicy()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.length = 8  # type: ignore[misc]

    def test_alphabet_excludes_similar(self) -> None:
        """Test that similar characters are left out."""
        alphabet = PasswordPolicy(exclude_similar_characters=True).alphabet()
        assert not set(alphabet.decode("ascii")) & SIMILAR_CHARACTERS

    def test_alphabet_includes_similar(self) -> None:
        """Test that similar characters are kept when allowed."""
        policy = PasswordPolicy(exclude_similar_characters=False)
        alphabet = policy.alphabet().decode("ascii")
        assert set(alphabet) == set(
            string.digits
            + string.ascii_lowercase
            + string.ascii_uppercase
            + string.punctuation
        )

    def test_charsets_per_class(self) -> None:
        """Test the characters of each enabled class."""
        policy = PasswordPolicy(
            numbers=True,
            lowercase_letters=False,
            uppercase_letters=False,
            symbols=False,
            exclude_similar_characters=True,
        )
        assert policy.charsets() == {CharClass.NUMBERS: b"23456789"}
