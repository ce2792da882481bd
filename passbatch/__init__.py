# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Generate batches of random passwords and their Argon2id hashes."""

from ._version import __version__
from .batch import BatchDispatcher
from .erase import erasing, is_erased, secure_erase
from .errors import GenerationError, HashingError, ParamError, PassbatchError
from .generation import (
    GeneratedPassword,
    PasswordPolicy,
    PolicyGenerator,
    generate,
    score,
)
from .hashing import Argon2Hasher, HashRecord, describe_record, generate_salt

__all__ = [
    "__version__",
    "Argon2Hasher",
    "BatchDispatcher",
    "GeneratedPassword",
    "GenerationError",
    "HashRecord",
    "HashingError",
    "ParamError",
    "PassbatchError",
    "PasswordPolicy",
    "PolicyGenerator",
    "describe_record",
    "erasing",
    "generate",
    "generate_salt",
    "is_erased",
    "score",
    "secure_erase",
]
