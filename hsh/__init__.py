# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Password hashing with argon2i, bcrypt and scrypt."""

from ._version import __version__
from .algorithms import (
    AlgorithmSelector,
    Argon2iHasher,
    BcryptHasher,
    HashingAlgorithm,
    ScryptHasher,
    algorithm_selector,
)
from .errors import (
    Base64DecodeError,
    HshError,
    InvalidAlgorithmError,
    InvalidHashStringError,
    MissingBuilderFieldsError,
    PasswordTooShortError,
    ProviderError,
    SaltDecodeError,
    VerificationError,
)
from .models import HashAlgorithm, Salt, generate_salt
from .models.hash import MIN_PASSWORD_LENGTH, Hash, HashBuilder

__all__ = [
    "__version__",
    "AlgorithmSelector",
    "Argon2iHasher",
    "BcryptHasher",
    "HashingAlgorithm",
    "ScryptHasher",
    "algorithm_selector",
    "Base64DecodeError",
    "HshError",
    "InvalidAlgorithmError",
    "InvalidHashStringError",
    "MissingBuilderFieldsError",
    "PasswordTooShortError",
    "ProviderError",
    "SaltDecodeError",
    "VerificationError",
    "Hash",
    "HashAlgorithm",
    "HashBuilder",
    "MIN_PASSWORD_LENGTH",
    "Salt",
    "generate_salt",
]
