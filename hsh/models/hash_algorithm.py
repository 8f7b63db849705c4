# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Supported hash algorithms."""

from enum import Enum

from ..errors import InvalidAlgorithmError


class HashAlgorithm(str, Enum):
    """The hash algorithm tag.

    The value is the canonical lowercase identifier. Members compare like
    their identifiers, which also matches the declaration order.
    """

    ARGON2I = "argon2i"
    BCRYPT = "bcrypt"
    SCRYPT = "scrypt"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Get the human readable name of the algorithm.

        Returns
        -------
        str
            The display name (e.g. Argon2i).
        """
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_identifier(cls, identifier: str) -> "HashAlgorithm":
        """Get the algorithm for an identifier.

        Parameters
        ----------
        identifier : str
            One of "argon2i", "bcrypt", "scrypt" (case-sensitive).

        Returns
        -------
        HashAlgorithm
            The matching algorithm.

        Raises
        ------
        InvalidAlgorithmError
            If the identifier is not supported.
        """
        if isinstance(identifier, cls):
            return identifier
        for member in cls:
            if member.value == identifier:
                return member
        raise InvalidAlgorithmError(str(identifier))


_DISPLAY_NAMES = {
    HashAlgorithm.ARGON2I: "Argon2i",
    HashAlgorithm.BCRYPT: "Bcrypt",
    HashAlgorithm.SCRYPT: "Scrypt",
}

ALGORITHM_IDENTIFIERS = tuple(member.value for member in HashAlgorithm)


__all__ = ["HashAlgorithm", "ALGORITHM_IDENTIFIERS"]
