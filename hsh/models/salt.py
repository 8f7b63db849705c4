# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Salt generation."""

import base64
import random
import secrets
import string

from .hash_algorithm import HashAlgorithm

Salt = bytes
"""Salt bytes as stored in a hash."""

SALT_ALPHABET = string.ascii_letters + string.digits
ARGON2I_SALT_CHARS = 16
BCRYPT_SALT_BYTES = 16
SCRYPT_SALT_BYTES = 32


def generate_salt(
    algorithm: str | HashAlgorithm, rng: random.Random | None = None
) -> str:
    """Generate a salt suitable for an algorithm.

    Parameters
    ----------
    algorithm : str | HashAlgorithm
        The algorithm identifier.
    rng : random.Random | None
        The randomness source. A new ``secrets.SystemRandom`` is used when
        not given, pass a seeded ``random.Random`` for reproducible salts.

    Returns
    -------
    str
        16 alphanumeric characters for argon2i, the base64 of 16 random
        bytes for bcrypt and the base64 of 32 random bytes for scrypt.
    """
    tag = HashAlgorithm.from_identifier(algorithm)
    source = rng if rng is not None else secrets.SystemRandom()
    if tag is HashAlgorithm.ARGON2I:
        return "".join(
            source.choice(SALT_ALPHABET) for _ in range(ARGON2I_SALT_CHARS)
        )
    size = SCRYPT_SALT_BYTES
    if tag is HashAlgorithm.BCRYPT:
        size = BCRYPT_SALT_BYTES
    return base64.b64encode(source.randbytes(size)).decode("ascii")


__all__ = ["Salt", "generate_salt", "SALT_ALPHABET"]
