# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc,missing-raises-doc
"""Tests for passbatch.generation.generator."""

import string
from typing import List
from unittest.mock import patch

import pytest

from passbatch.errors import GenerationError
from passbatch.generation import (
    MAX_STRICT_ATTEMPTS,
    SIMILAR_CHARACTERS,
    GeneratedPassword,
    PasswordPolicy,
    PolicyGenerator,
    generate,
)

CHOICE = "passbatch.generation.generator.secrets.choice"


class TestPolicyGenerator:
    """Test password generation."""

    @pytest.mark.parametrize("length", [4, 8, 16, 64])
    def test_exact_length(self, length: int) -> None:
        """Test that passwords have exactly the policy length."""
        password = generate(PasswordPolicy(length=length))
        assert len(password) == length
        assert len(password.plaintext) == length

    def test_characters_from_enabled_classes(self) -> None:
        """Test that only enabled classes are used."""
        policy = PasswordPolicy(
            length=32,
            numbers=True,
            lowercase_letters=False,
            uppercase_letters=True,
            symbols=False,
            exclude_similar_characters=False,
        )
        allowed = set((string.digits + string.ascii_uppercase).encode())
        generator = PolicyGenerator(policy)
        for _ in range(20):
            with generator.generate() as password:
                assert set(password.plaintext) <= allowed

    def test_similar_characters_excluded(self, policy: PasswordPolicy) -> None:
        """Test that similar characters never appear."""
        similar = {ord(char) for char in SIMILAR_CHARACTERS}
        generator = PolicyGenerator(policy)
        for _ in range(50):
            with generator.generate() as password:
                assert not set(password.plaintext) & similar

    def test_strict_includes_every_class(self, policy: PasswordPolicy) -> None:
        """Test that strict passwords contain every enabled class."""
        charsets = [set(chars) for chars in policy.charsets().values()]
        generator = PolicyGenerator(policy)
        for _ in range(50):
            with generator.generate() as password:
                for chars in charsets:
                    assert set(password.plaintext) & chars

    def test_strict_with_too_short_length(self) -> None:
        """Test that a length below the number of classes fails."""
        generator = PolicyGenerator(PasswordPolicy(length=3, strict=True))
        with pytest.raises(GenerationError):
            generator.generate()

    def test_strict_retries_exhausted(self) -> None:
        """Test that strict generation gives up after the retry bound."""
        generator = PolicyGenerator(PasswordPolicy(length=8, strict=True))
        with patch(CHOICE, return_value=ord("a")) as mock_choice:
            with pytest.raises(GenerationError) as exc_info:
                generator.generate()
        assert str(MAX_STRICT_ATTEMPTS) in str(exc_info.value)
        assert mock_choice.call_count == MAX_STRICT_ATTEMPTS * 8

    def test_non_strict_accepts_single_class(self) -> None:
        """Test that non-strict policies accept any draw."""
        generator = PolicyGenerator(PasswordPolicy(length=4, strict=False))
        with patch(CHOICE, return_value=ord("a")):
            password = generator.generate()
        assert bytes(password.plaintext) == b"aaaa"

    def test_password_is_scored(self, policy: PasswordPolicy) -> None:
        """Test that generated passwords carry a positive score."""
        password = PolicyGenerator(policy).generate()
        assert password.score > 0

    def test_custom_scorer(self, policy: PasswordPolicy) -> None:
        """Test a custom scorer."""
        generator = PolicyGenerator(policy, scorer=lambda _: 42.0)
        assert generator.generate().score == 42.0

    def test_failing_scorer_erases_candidate(
        self, policy: PasswordPolicy
    ) -> None:
        """Test that the candidate is erased if scoring fails."""
        seen: List[bytearray] = []

        def scorer(buffer: bytearray) -> float:
            seen.append(buffer)
            raise RuntimeError("boom")

        generator = PolicyGenerator(policy, scorer=scorer)  # type: ignore
        with pytest.raises(RuntimeError):
            generator.generate()
        assert len(seen) == 1
        assert not any(seen[0])

    def test_generate_many(self, policy: PasswordPolicy) -> None:
        """Test generating several passwords."""
        passwords = PolicyGenerator(policy).generate_many(5)
        assert len(passwords) == 5
        assert len({bytes(p.plaintext) for p in passwords}) == 5

    def test_generate_many_erases_on_failure(
        self, policy: PasswordPolicy
    ) -> None:
        """Test that generated passwords are erased if a later one fails."""
        first = GeneratedPassword(bytearray(b"first"), 1.0)
        second = GeneratedPassword(bytearray(b"second"), 1.0)
        generator = PolicyGenerator(policy)
        with patch.object(
            generator,
            "generate",
            side_effect=[first, second, GenerationError("boom")],
        ):
            with pytest.raises(GenerationError):
                generator.generate_many(3)
        assert first.erased
        assert second.erased


class TestGeneratedPassword:
    """Test the generated password container."""

    def test_context_manager_erases(self) -> None:
        """Test that leaving the block erases the plaintext."""
        password = GeneratedPassword(bytearray(b"secret"), 10.0)
        with password as entered:
            assert entered is password
            assert not password.erased
        assert password.erased
        assert len(password) == 6

    def test_context_manager_erases_on_error(self) -> None:
        """Test that the plaintext is erased when the block raises."""
        password = GeneratedPassword(bytearray(b"secret"), 10.0)
        with pytest.raises(ValueError):
            with password:
                raise ValueError("boom")
        assert password.erased

    def test_repr_hides_plaintext(self) -> None:
        """Test that repr does not show the plaintext."""
        password = GeneratedPassword(bytearray(b"hunter2"), 12.5)
        text = repr(password)
        assert "hunter2" not in text
        assert "length=7" in text
        assert "12.5" in text
