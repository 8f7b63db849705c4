# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Canonical string forms of a hash.

Extended form (PHC style, six ``$``-separated parts)::

    $<algorithm>$<param1>$<param2>$<salt>$<base64(hash)>

The three middle segments are kept together as an opaque blob.

Simple (legacy) form::

    <salt as text>:<hex(hash)>

The simple form drops the algorithm and cannot be parsed back.
"""

import base64
import binascii
from typing import Tuple

from ..errors import Base64DecodeError, InvalidHashStringError, SaltDecodeError
from .hash_algorithm import HashAlgorithm

SEPARATOR = "$"
EXTENDED_PARTS = 6
PARAMETER_SEGMENTS = 3


def b64_encode(data: bytes) -> str:
    """Encode bytes with standard base64, without padding.

    Parameters
    ----------
    data : bytes
        The bytes to encode.

    Returns
    -------
    str
        The encoded string.
    """
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64_decode(value: str) -> bytes:
    """Decode standard base64 with or without padding.

    Parameters
    ----------
    value : str
        The encoded string.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    Base64DecodeError
        If the value is not valid base64.
    """
    padded = value + "=" * (-len(value) % 4)
    try:
        return base64.b64decode(padded.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise Base64DecodeError(f"Invalid base64 segment: {exc}") from exc


def decode_salt(salt: bytes) -> str:
    """Get the text of stored salt bytes.

    Parameters
    ----------
    salt : bytes
        The stored salt.

    Returns
    -------
    str
        The salt as text.

    Raises
    ------
    SaltDecodeError
        If the salt is not valid UTF-8.
    """
    try:
        return salt.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise SaltDecodeError("Salt is not valid UTF-8") from exc


def is_parameter_blob(salt_text: str) -> bool:
    """Check if a text holds exactly three ``$``-separated segments.

    Parameters
    ----------
    salt_text : str
        The text.

    Returns
    -------
    bool
        True if the text is a ``<param1>$<param2>$<salt>`` blob.
    """
    return salt_text.count(SEPARATOR) == PARAMETER_SEGMENTS - 1


def split_parameters(salt_text: str) -> Tuple[str, bytes]:
    """Split a parsed parameter blob.

    Parameters
    ----------
    salt_text : str
        The ``<param1>$<param2>$<base64(salt)>`` blob.

    Returns
    -------
    Tuple[str, bytes]
        The ``<param1>$<param2>`` segments and the decoded salt.

    Raises
    ------
    InvalidHashStringError
        If the blob does not hold three segments.
    Base64DecodeError
        If the salt segment is not valid base64.
    """
    if not is_parameter_blob(salt_text):
        raise InvalidHashStringError(
            f"Expected {PARAMETER_SEGMENTS} parameter segments"
        )
    parameters, encoded = salt_text.rsplit(SEPARATOR, 1)
    return parameters, b64_decode(encoded)


def format_simple(salt: bytes, hashed: bytes) -> str:
    """Render the legacy ``<salt>:<hex>`` form.

    Parameters
    ----------
    salt : bytes
        The salt (decoded lossily).
    hashed : bytes
        The hash bytes.

    Returns
    -------
    str
        The simple string.
    """
    return f"{salt.decode('utf-8', errors='replace')}:{hashed.hex()}"


def format_extended(
    algorithm: HashAlgorithm, parameters: str, hashed: bytes
) -> str:
    """Render the extended form.

    Parameters
    ----------
    algorithm : HashAlgorithm
        The algorithm.
    parameters : str
        The three middle segments, ``<param1>$<param2>$<salt>``.
    hashed : bytes
        The hash bytes.

    Returns
    -------
    str
        The extended string.

    Raises
    ------
    InvalidHashStringError
        If the parameters do not hold exactly three segments.
    """
    if not is_parameter_blob(parameters):
        raise InvalidHashStringError(
            f"Expected {PARAMETER_SEGMENTS} parameter segments"
        )
    return SEPARATOR.join(
        ["", algorithm.value, parameters, b64_encode(hashed)]
    )


def parse_algorithm(value: str) -> HashAlgorithm:
    """Get the algorithm of a ``$``-prefixed hash string.

    Parameters
    ----------
    value : str
        The hash string.

    Returns
    -------
    HashAlgorithm
        The algorithm named by the first segment.

    Raises
    ------
    InvalidHashStringError
        If the string is not ``$``-prefixed.
    """
    parts = value.split(SEPARATOR)
    if len(parts) < 2 or parts[0]:
        raise InvalidHashStringError()
    return HashAlgorithm.from_identifier(parts[1])


def parse_extended(value: str) -> Tuple[HashAlgorithm, bytes, bytes]:
    """Parse the extended form.

    Parameters
    ----------
    value : str
        The hash string.

    Returns
    -------
    Tuple[HashAlgorithm, bytes, bytes]
        The algorithm, the parameter blob (kept as the salt) and the hash.

    Raises
    ------
    InvalidHashStringError
        If the string does not have six parts or the hash is empty.
    """
    algorithm = parse_algorithm(value)
    parts = value.split(SEPARATOR)
    if len(parts) != EXTENDED_PARTS:
        raise InvalidHashStringError()
    parameters = SEPARATOR.join(parts[2:5])
    hashed = b64_decode(parts[5])
    if not hashed:
        raise InvalidHashStringError("Empty hash segment")
    return algorithm, parameters.encode("utf-8"), hashed


__all__ = [
    "b64_decode",
    "b64_encode",
    "decode_salt",
    "format_extended",
    "format_simple",
    "is_parameter_blob",
    "parse_algorithm",
    "parse_extended",
    "split_parameters",
]
