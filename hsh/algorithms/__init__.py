# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Password hashing algorithm providers."""

from ._argon2i import Argon2iHasher
from ._bcrypt import BcryptHasher
from ._scrypt import ScryptHasher
from .protocol import HashingAlgorithm
from .selector import AlgorithmSelector, algorithm_selector

__all__ = [
    "AlgorithmSelector",
    "Argon2iHasher",
    "BcryptHasher",
    "HashingAlgorithm",
    "ScryptHasher",
    "algorithm_selector",
]
