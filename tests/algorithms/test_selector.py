# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=no-self-use,missing-param-doc,unused-argument

"""Tests for the algorithm selector."""

import pytest

from hsh.algorithms import (
    AlgorithmSelector,
    Argon2iHasher,
    BcryptHasher,
    HashingAlgorithm,
    ScryptHasher,
    algorithm_selector,
)
from hsh.errors import InvalidAlgorithmError
from hsh.models import HashAlgorithm


class DummyHasher:
    """A provider returning fixed bytes."""

    def hash_password(self, password: str, salt: str | bytes) -> bytes:
        """Hash a password."""
        return b"\x01\x02\x03\x04"

    def verify(self, password: str, salt: str | bytes, hashed: bytes) -> bool:
        """Verify a password."""
        return hashed == b"\x01\x02\x03\x04"

    def parameters(self, hashed: bytes) -> str:
        """Get the parameter segments."""
        return "d=1$e=2"

    def from_parameters(
        self, parameters: str, hashed: bytes
    ) -> "DummyHasher":
        """Get a configured provider."""
        return self


class TestAlgorithmSelector:
    """Test selecting providers."""

    @pytest.mark.parametrize(
        "identifier,provider_type",
        [
            ("argon2i", Argon2iHasher),
            ("bcrypt", BcryptHasher),
            ("scrypt", ScryptHasher),
        ],
    )
    def test_select(
        self, identifier: str, provider_type: type[HashingAlgorithm]
    ) -> None:
        """Test selecting each supported algorithm."""
        assert isinstance(algorithm_selector.select(identifier), provider_type)

    def test_select_accepts_tag(self) -> None:
        """Test selecting by algorithm tag."""
        provider = algorithm_selector.select(HashAlgorithm.SCRYPT)
        assert isinstance(provider, ScryptHasher)

    @pytest.mark.parametrize("identifier", ["md5", "Argon2i", "", "sha256"])
    def test_select_unsupported(self, identifier: str) -> None:
        """Test that unknown identifiers are rejected."""
        with pytest.raises(InvalidAlgorithmError) as exc_info:
            algorithm_selector.select(identifier)
        assert exc_info.value.algorithm == identifier

    def test_identifier_round_trip(self) -> None:
        """Test that identifiers map back to their tags."""
        for tag in HashAlgorithm:
            identifier = AlgorithmSelector.identifier(tag)
            assert HashAlgorithm.from_identifier(identifier) is tag

    def test_providers_are_read_only(self) -> None:
        """Test that the provider mapping cannot be changed."""
        providers = algorithm_selector.providers
        with pytest.raises(TypeError):
            providers[HashAlgorithm.BCRYPT] = DummyHasher()  # type: ignore

    def test_custom_provider(self) -> None:
        """Test overriding one provider."""
        selector = AlgorithmSelector({HashAlgorithm.SCRYPT: DummyHasher()})
        provider = selector.select("scrypt")
        assert isinstance(provider, DummyHasher)
        assert isinstance(provider, HashingAlgorithm)
        assert provider.hash_password("password123", "salt") == (
            b"\x01\x02\x03\x04"
        )
        assert isinstance(selector.select("argon2i"), Argon2iHasher)

    def test_provider_for(self) -> None:
        """Test looking up a provider by tag."""
        provider = algorithm_selector.provider_for(HashAlgorithm.BCRYPT)
        assert isinstance(provider, BcryptHasher)
