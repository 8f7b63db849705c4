# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Hash models.

``Hash`` and ``HashBuilder`` live in ``hsh.models.hash`` and are exported
from ``hsh``; they depend on ``hsh.algorithms``, which depends on this
package, so they are not imported here.
"""

from .hash_algorithm import ALGORITHM_IDENTIFIERS, HashAlgorithm
from .salt import Salt, generate_salt

__all__ = ["ALGORITHM_IDENTIFIERS", "HashAlgorithm", "Salt", "generate_salt"]
