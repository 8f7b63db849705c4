# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the argon2i hasher."""

import pytest

from hsh.algorithms import Argon2iHasher, HashingAlgorithm
from hsh.errors import InvalidHashStringError, ProviderError

SALT = "a_salt_that_is_long_enough_32chr"


class TestArgon2iHasher:
    """Test argon2i hasher implementation."""

    def test_is_a_hashing_algorithm(self) -> None:
        """Test that the hasher satisfies the protocol."""
        assert isinstance(Argon2iHasher(), HashingAlgorithm)

    def test_hash_is_deterministic(self) -> None:
        """Test that the same inputs give the same hash."""
        hasher = Argon2iHasher()
        password = "correct horse"  # nosemgrep # nosec
        assert hasher.hash_password(password, SALT) == hasher.hash_password(
            password, SALT
        )

    def test_hash_length(self) -> None:
        """Test the default output length."""
        hashed = Argon2iHasher().hash_password("password123", SALT)
        assert len(hashed) == 32

    def test_custom_hash_length(self) -> None:
        """Test a custom output length."""
        hashed = Argon2iHasher(hash_len=16).hash_password("password123", SALT)
        assert len(hashed) == 16

    def test_salt_changes_hash(self) -> None:
        """Test that a different salt gives a different hash."""
        hasher = Argon2iHasher()
        first = hasher.hash_password("password123", SALT)
        second = hasher.hash_password("password123", SALT[::-1])
        assert first != second

    def test_password_changes_hash(self) -> None:
        """Test that a different password gives a different hash."""
        hasher = Argon2iHasher()
        first = hasher.hash_password("password123", SALT)
        second = hasher.hash_password("password124", SALT)
        assert first != second

    def test_str_and_bytes_salt_agree(self) -> None:
        """Test that str salts are used as their UTF-8 bytes."""
        hasher = Argon2iHasher()
        assert hasher.hash_password(
            "password123", SALT
        ) == hasher.hash_password("password123", SALT.encode("utf-8"))

    def test_short_salt_raises(self) -> None:
        """Test that a salt below the argon2 minimum is rejected."""
        with pytest.raises(ProviderError) as exc_info:
            Argon2iHasher().hash_password("password123", "short")
        assert exc_info.value.algorithm == "argon2i"

    def test_verify(self) -> None:
        """Test verifying a password."""
        hasher = Argon2iHasher()
        hashed = hasher.hash_password("password123", SALT)
        assert hasher.verify("password123", SALT, hashed) is True
        assert hasher.verify("wrong_password", SALT, hashed) is False

    def test_verify_with_other_salt(self) -> None:
        """Test that verification fails with the wrong salt."""
        hasher = Argon2iHasher()
        hashed = hasher.hash_password("password123", SALT)
        assert hasher.verify("password123", SALT[::-1], hashed) is False

    def test_parameters(self) -> None:
        """Test the parameter segments."""
        hasher = Argon2iHasher()
        hashed = hasher.hash_password("password123", SALT)
        assert hasher.parameters(hashed) == "v=19$m=4096,t=3,p=1"

    def test_custom_parameters(self) -> None:
        """Test the parameter segments of a custom configuration."""
        hasher = Argon2iHasher(time_cost=2, memory_cost=8192, parallelism=2)
        assert hasher.parameters(b"") == "v=19$m=8192,t=2,p=2"

    def test_from_parameters(self) -> None:
        """Test configuring a hasher from parsed segments."""
        hasher = Argon2iHasher().from_parameters(
            "v=19$m=8192,t=2,p=2", b"\x00" * 24
        )
        assert hasher == Argon2iHasher(
            time_cost=2, memory_cost=8192, parallelism=2, hash_len=24
        )
        assert len(hasher.hash_password("password123", SALT)) == 24

    @pytest.mark.parametrize(
        "parameters", ["m=4096,t=3,p=1", "v=19$m=4096,t=3", "v=19$m=x,t=3,p=1"]
    )
    def test_from_parameters_invalid(self, parameters: str) -> None:
        """Test that missing or malformed costs are rejected."""
        with pytest.raises(InvalidHashStringError):
            Argon2iHasher().from_parameters(parameters, b"\x00" * 32)
