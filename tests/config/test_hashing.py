# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Test hsh.config._hashing."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-yield-doc

import os
import sys
from collections.abc import Generator

import pytest

# noinspection PyProtectedMember
from hsh.config._common import ENV_PREFIX

# noinspection PyProtectedMember
from hsh.config._hashing import (
    DEFAULT_ALGORITHM,
    get_bcrypt_cost,
    get_default_algorithm,
)


@pytest.fixture(scope="function", autouse=True, name="clear_env")
def clear_env_and_args() -> Generator[None, None, None]:
    """Clear the hashing environment variables and arguments."""
    original_env = dict(os.environ)
    os.environ.pop(f"{ENV_PREFIX}DEFAULT_ALGORITHM", None)
    os.environ.pop(f"{ENV_PREFIX}BCRYPT_COST", None)
    original_argv = sys.argv[:]
    sys.argv = ["hsh"]
    yield
    sys.argv = original_argv
    os.environ.clear()
    os.environ.update(original_env)


def test_default_algorithm() -> None:
    """Test the default algorithm."""
    assert DEFAULT_ALGORITHM == "argon2i"
    assert get_default_algorithm() == "argon2i"


def test_default_algorithm_from_env() -> None:
    """Test the algorithm from the environment."""
    os.environ[f"{ENV_PREFIX}DEFAULT_ALGORITHM"] = "scrypt"
    assert get_default_algorithm() == "scrypt"


def test_default_algorithm_from_cli() -> None:
    """Test the algorithm from the command line."""
    sys.argv = ["hsh", "--algorithm", "bcrypt"]
    assert get_default_algorithm() == "bcrypt"


def test_default_algorithm_invalid() -> None:
    """Test that unsupported algorithms fall back to the default."""
    os.environ[f"{ENV_PREFIX}DEFAULT_ALGORITHM"] = "md5"
    assert get_default_algorithm() == DEFAULT_ALGORITHM


def test_bcrypt_cost() -> None:
    """Test the bcrypt cost."""
    assert get_bcrypt_cost() == 12
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "10"
    assert get_bcrypt_cost() == 10
    sys.argv = ["hsh", "--cost", "6"]
    assert get_bcrypt_cost() == 6


def test_bcrypt_cost_out_of_range() -> None:
    """Test that out of range costs fall back to the default."""
    os.environ[f"{ENV_PREFIX}BCRYPT_COST"] = "40"
    assert get_bcrypt_cost() == 12
    sys.argv = ["hsh", "--cost", "3"]
    assert get_bcrypt_cost() == 12
