# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Passbatch settings module."""

import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ..generation import PasswordPolicy
from ..hashing import Argon2Hasher
from ._common import DOT_ENV_PATH, ENV_PREFIX, to_kebab
from ._generation import (
    get_batch_size,
    get_exclude_similar,
    get_include_lowercase,
    get_include_numbers,
    get_include_spaces,
    get_include_symbols,
    get_include_uppercase,
    get_password_length,
    get_strict,
    get_workers,
)
from ._hashing import (
    get_memory_cost,
    get_output_len,
    get_parallelism,
    get_salt_len,
    get_time_cost,
)

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings class.

    The Argon2 cost fields are only type checked here, their ranges are
    validated by the hasher in :meth:`get_hasher`.
    """

    # Generation
    batch_size: Annotated[int, Field(ge=1, le=100_000)] = get_batch_size()
    password_length: Annotated[int, Field(ge=1, le=4096)] = (
        get_password_length()
    )
    numbers: bool = get_include_numbers()
    lowercase: bool = get_include_lowercase()
    uppercase: bool = get_include_uppercase()
    symbols: bool = get_include_symbols()
    spaces: bool = get_include_spaces()
    exclude_similar: bool = get_exclude_similar()
    strict: bool = get_strict()
    workers: Annotated[int, Field(ge=0, le=1024)] = get_workers()
    # Hashing
    memory_cost: int = get_memory_cost()
    time_cost: int = get_time_cost()
    parallelism: int = get_parallelism()
    output_len: int = get_output_len()
    salt_len: int = get_salt_len()

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=False)
        return cls()

    def get_policy(self) -> PasswordPolicy:
        """Get the password policy.

        Returns
        -------
        PasswordPolicy
            The policy.

        Raises
        ------
        GenerationError
            If no character class is enabled.
        """
        return PasswordPolicy(
            length=self.password_length,
            numbers=self.numbers,
            lowercase_letters=self.lowercase,
            uppercase_letters=self.uppercase,
            symbols=self.symbols,
            spaces=self.spaces,
            exclude_similar_characters=self.exclude_similar,
            strict=self.strict,
        )

    def get_hasher(self) -> Argon2Hasher:
        """Get the configured hasher.

        Returns
        -------
        Argon2Hasher
            The hasher.

        Raises
        ------
        ParamError
            If a cost parameter is out of range.
        """
        return Argon2Hasher.configure(
            memory_cost=self.memory_cost,
            time_cost=self.time_cost,
            parallelism=self.parallelism,
            output_len=self.output_len,
            salt_len=self.salt_len,
        )

    def get_max_workers(self) -> Optional[int]:
        """Get the pool size, None for one worker per CPU.

        Returns
        -------
        Optional[int]
            The pool size.
        """
        return self.workers or None
