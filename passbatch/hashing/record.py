# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Read back the parameters embedded in an encoded hash."""

import base64
import binascii
from dataclasses import dataclass

from argon2 import Parameters, extract_parameters
from argon2.exceptions import InvalidHashError

HashRecord = str
"""An encoded ``$argon2id$v=..$m=..,t=..,p=..$<salt>$<digest>`` string."""


@dataclass(frozen=True)
class HashRecordInfo:
    """The decoded fields of a hash record.

    Attributes
    ----------
    parameters : Parameters
        Algorithm type, version and cost parameters.
    salt : bytes
        The salt used.
    digest : bytes
        The raw digest.
    """

    parameters: Parameters
    salt: bytes
    digest: bytes


def _b64decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.b64decode(value + padding, validate=True)


def describe_record(record: HashRecord) -> HashRecordInfo:
    """Decode a hash record without any external state.

    Parameters
    ----------
    record : HashRecord
        The encoded hash.

    Returns
    -------
    HashRecordInfo
        The decoded fields.

    Raises
    ------
    InvalidHashError
        If the record is not a valid argon2 encoding.
    """
    parameters = extract_parameters(record)
    parts = record.split("$")
    try:
        salt = _b64decode(parts[-2])
        digest = _b64decode(parts[-1])
    except (binascii.Error, ValueError) as exc:
        raise InvalidHashError(record) from exc
    return HashRecordInfo(parameters=parameters, salt=salt, digest=digest)


__all__ = ["HashRecord", "HashRecordInfo", "describe_record"]
