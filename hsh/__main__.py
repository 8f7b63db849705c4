# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.
"""Allow running ``python -m hsh``."""

from hsh.cli import app

if __name__ == "__main__":
    app()
