# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "HSH_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"
if DOT_ENV_PATH.exists():
    load_dotenv(DOT_ENV_PATH, override=False)


TRUTHY = ("true", "1", "yes", "y", "on")
FALSY = ("false", "0", "no", "n", "off")
T = TypeVar("T")


def is_testing() -> bool:
    """Check if we are running the tests.

    Returns
    -------
    bool
        Whether we are in testing mode
    """
    return (
        os.environ.get(f"{ENV_PREFIX}TESTING", "False").lower() in TRUTHY
        or "pytest" in sys.argv[0]
    )


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Get a value from CLI args, env vars, or fallback, with type casting.

    Parameters
    ----------
    cli_key : str
        The CLI argument key
    env_key : str
        The environment variable key (without the prefix)
    cast : Callable[[str], T]
        The casting function
    fallback : T
        The fallback value

    Returns
    -------
    T
        The value
    """
    value_str: Optional[str] = None
    env_var = f"{ENV_PREFIX}{env_key}"

    if cast is bool:
        return _get_bool(cli_key, env_key, fallback)  # type: ignore

    if cli_key in sys.argv:
        cli_index = sys.argv.index(cli_key) + 1
        if cli_index < len(sys.argv):
            value_str = sys.argv[cli_index]

    if not value_str:
        from_env = os.environ.get(env_var)
        if from_env:
            value_str = from_env

    if value_str:
        try:
            casted = cast(value_str)
            if cast is str and not casted:  # pragma: no cover
                return fallback
            return casted
        except (ValueError, TypeError):
            pass

    return fallback


def _get_bool(
    cli_key: str,
    env_key: str,
    fallback: bool,
) -> bool:
    """Get a boolean value from CLI args, env vars, or fallback.

    Parameters
    ----------
    cli_key : str
        The CLI argument key
    env_key : str
        The environment variable key
    fallback : bool
        The fallback value

    Returns
    -------
    bool
        The value
    """
    stripped_key = cli_key.lstrip("-")
    if f"--no-{stripped_key}" in sys.argv:
        return False
    if f"--{stripped_key}" in sys.argv:
        return True
    from_env = os.environ.get(f"{ENV_PREFIX}{env_key}", str(fallback))
    return from_env.lower() not in FALSY
