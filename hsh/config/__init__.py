# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Configuration module for hsh."""

from ._common import ENV_PREFIX, FALSY, ROOT_DIR, TRUTHY
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "ROOT_DIR",
    "TRUTHY",
    "FALSY",
]
