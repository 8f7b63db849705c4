# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Hashing related configuration.

Environment variables (with prefix HSH_)
----------------------------------------
DEFAULT_ALGORITHM (str) # default: argon2i
BCRYPT_COST (int) # default: 12, 4 to 31

Command line arguments (no prefix)
----------------------------------
--algorithm (str)
--cost (int)
"""

from ..algorithms._bcrypt import DEFAULT_COST, MAX_COST, MIN_COST
from ..models.hash_algorithm import ALGORITHM_IDENTIFIERS, HashAlgorithm
from ._common import get_value

DEFAULT_ALGORITHM = HashAlgorithm.ARGON2I.value


def get_default_algorithm() -> str:
    """Get the algorithm to hash new passwords with.

    Returns
    -------
    str
        The algorithm identifier
    """
    value = get_value(
        "--algorithm", "DEFAULT_ALGORITHM", str, DEFAULT_ALGORITHM
    )
    if value not in ALGORITHM_IDENTIFIERS:
        return DEFAULT_ALGORITHM
    return value


def get_bcrypt_cost() -> int:
    """Get the bcrypt work factor.

    Returns
    -------
    int
        The bcrypt cost
    """
    value = get_value("--cost", "BCRYPT_COST", int, DEFAULT_COST)
    if not MIN_COST <= value <= MAX_COST:
        return DEFAULT_COST
    return value
