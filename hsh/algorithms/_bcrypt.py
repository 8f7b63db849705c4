# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Bcrypt password hashing provider.

Bcrypt generates its own salt and embeds it in the hash string, so the salt
given to this provider is ignored.
"""

from dataclasses import dataclass

import bcrypt

from ..errors import ProviderError, VerificationError
from .protocol import to_bytes

BCRYPT_PREFIXES = (b"$2a$", b"$2b$", b"$2y$")
MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 12
MAX_PASSWORD_BYTES = 72


def _truncate(password: str) -> bytes:
    # bcrypt originally suffered from a wraparound bug:
    #  http://www.openwall.com/lists/oss-security/2012/01/02/4
    # The OpenBSD source truncates inputs to 72 bytes on the $2b$ prefix
    # and newer pyca/bcrypt releases refuse longer inputs, so truncate here.
    return to_bytes(password)[:MAX_PASSWORD_BYTES]


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher."""

    cost: int = DEFAULT_COST

    def hash_password(self, password: str, salt: str | bytes = b"") -> bytes:
        """Hash password using bcrypt.

        Parameters
        ----------
        password : str
            The plain secret to hash.
        salt : str | bytes
            Ignored, bcrypt generates and embeds its own salt.

        Returns
        -------
        bytes
            The ``$2b$<cost>$...`` hash string as bytes.

        Raises
        ------
        ProviderError
            If the cost is outside the range bcrypt accepts.
        """
        try:
            return bcrypt.hashpw(
                _truncate(password), bcrypt.gensalt(rounds=self.cost)
            )
        except ValueError as exc:
            raise ProviderError("bcrypt", str(exc)) from exc

    def verify(self, password: str, salt: str | bytes, hashed: bytes) -> bool:
        """Verify password against a bcrypt hash.

        Parameters
        ----------
        password : str
            The plain secret to check.
        salt : str | bytes
            Ignored, the salt is read from the stored hash.
        hashed : bytes
            The stored ``$2b$...`` hash bytes.

        Returns
        -------
        bool
            True if verified, False if not.

        Raises
        ------
        VerificationError
            If the stored hash is not a valid bcrypt hash.
        """
        try:
            encoded = hashed.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise VerificationError(
                "bcrypt", "stored hash is not valid UTF-8"
            ) from exc
        try:
            return bcrypt.checkpw(_truncate(password), encoded.encode("utf-8"))
        except ValueError as exc:
            raise VerificationError("bcrypt", str(exc)) from exc

    def parameters(self, hashed: bytes) -> str:
        """Get the parameter segments, e.g. ``v=2b$r=12``.

        The version and cost are read from the embedded hash prefix when
        possible, else the hasher's own cost is used.

        Parameters
        ----------
        hashed : bytes
            The bcrypt hash bytes.

        Returns
        -------
        str
            The parameter segments.
        """
        if hashed.startswith(BCRYPT_PREFIXES):
            parts = hashed.split(b"$")
            if len(parts) > 2 and parts[2].isdigit():
                version = parts[1].decode("ascii")
                return f"v={version}$r={int(parts[2])}"
        return f"v=2b$r={self.cost}"

    def from_parameters(
        self, parameters: str, hashed: bytes
    ) -> "BcryptHasher":
        """Get a hasher for the cost of a parsed hash string.

        The stored bcrypt hash embeds its own cost and salt, so checking a
        password needs nothing from the parameter segments.

        Parameters
        ----------
        parameters : str
            The segments, e.g. ``v=2b$r=12``.
        hashed : bytes
            The stored ``$2b$...`` hash bytes.

        Returns
        -------
        BcryptHasher
            This hasher.
        """
        return self


__all__ = ["BcryptHasher", "BCRYPT_PREFIXES", "DEFAULT_COST"]
