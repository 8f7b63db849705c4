# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for salt generation."""

import base64
import random

import pytest

from hsh.errors import InvalidAlgorithmError
from hsh.models import HashAlgorithm, generate_salt
from hsh.models.salt import SALT_ALPHABET


class TestGenerateSalt:
    """Test generating salts."""

    def test_argon2i_salt(self) -> None:
        """Test the argon2i salt shape."""
        salt = generate_salt("argon2i")
        assert len(salt) == 16
        assert all(char in SALT_ALPHABET for char in salt)

    def test_bcrypt_salt(self) -> None:
        """Test the bcrypt salt shape."""
        salt = generate_salt("bcrypt")
        assert len(salt) == 24
        assert len(base64.b64decode(salt)) == 16

    def test_scrypt_salt(self) -> None:
        """Test the scrypt salt shape."""
        salt = generate_salt(HashAlgorithm.SCRYPT)
        assert len(salt) == 44
        assert len(base64.b64decode(salt)) == 32

    def test_salts_differ(self) -> None:
        """Test that salts are random."""
        assert generate_salt("scrypt") != generate_salt("scrypt")

    @pytest.mark.parametrize("identifier", ["argon2i", "bcrypt", "scrypt"])
    def test_seeded_random_is_reproducible(self, identifier: str) -> None:
        """Test that a seeded source gives the same salt."""
        first = generate_salt(identifier, random.Random(42))
        second = generate_salt(identifier, random.Random(42))
        assert first == second

    def test_invalid_algorithm(self) -> None:
        """Test that unknown algorithms are rejected."""
        with pytest.raises(InvalidAlgorithmError):
            generate_salt("md5")
