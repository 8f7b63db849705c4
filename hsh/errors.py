# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Errors raised while hashing, parsing and verifying passwords.

None of the messages below include passwords, salts or derived hash bytes.
"""

from typing import Iterable


class HshError(Exception):
    """Base class for all hsh errors."""


class InvalidAlgorithmError(HshError, ValueError):
    """The algorithm identifier is not one of the supported ones."""

    def __init__(self, algorithm: str, message: str | None = None) -> None:
        self.algorithm = algorithm
        super().__init__(message or f"Unsupported hash algorithm: {algorithm}")


class PasswordTooShortError(HshError, ValueError):
    """The password is shorter than the allowed minimum."""

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length
        super().__init__(
            f"Password must be at least {min_length} characters long"
        )


class InvalidHashStringError(HshError, ValueError):
    """The hash string does not have the expected shape."""

    def __init__(self, reason: str = "Invalid hash string") -> None:
        super().__init__(reason)


class Base64DecodeError(HshError, ValueError):
    """A base64 segment of a hash string could not be decoded."""


class SaltDecodeError(HshError, ValueError):
    """The stored salt is not valid UTF-8."""


class ProviderError(HshError):
    """The underlying hashing primitive rejected its inputs."""

    def __init__(self, algorithm: str, details: str) -> None:
        self.algorithm = algorithm
        self.details = details
        super().__init__(f"{algorithm}: {details}")


class VerificationError(ProviderError):
    """The provider could not check a password against a stored hash."""


class MissingBuilderFieldsError(HshError, ValueError):
    """A hash builder was asked to build before all fields were set."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(f"Missing fields: {', '.join(self.fields)}")


__all__ = [
    "HshError",
    "InvalidAlgorithmError",
    "PasswordTooShortError",
    "InvalidHashStringError",
    "Base64DecodeError",
    "SaltDecodeError",
    "ProviderError",
    "VerificationError",
    "MissingBuilderFieldsError",
]
