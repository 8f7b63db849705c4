# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Argon2i password hashing provider."""

import hmac
from dataclasses import dataclass, replace

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from ..errors import InvalidHashStringError, ProviderError
from .protocol import parameter_values, to_bytes


@dataclass(frozen=True)
class Argon2iHasher:
    """Argon2i hasher (deterministic for a password/salt pair)."""

    time_cost: int = 3
    memory_cost: int = 4096  # 4 MiB
    parallelism: int = 1
    hash_len: int = 32
    version: int = ARGON2_VERSION

    def hash_password(self, password: str, salt: str | bytes) -> bytes:
        """Hash password using argon2i.

        Parameters
        ----------
        password : str
            The plain secret to hash.
        salt : str | bytes
            The salt (at least 8 bytes).

        Returns
        -------
        bytes
            The raw hash, `hash_len` bytes long.

        Raises
        ------
        ProviderError
            If argon2 rejects the inputs (e.g. a too short salt).
        """
        try:
            return hash_secret_raw(
                secret=to_bytes(password),
                salt=to_bytes(salt),
                time_cost=self.time_cost,
                memory_cost=self.memory_cost,
                parallelism=self.parallelism,
                hash_len=self.hash_len,
                type=Type.I,
                version=self.version,
            )
        except HashingError as exc:
            raise ProviderError("argon2i", str(exc)) from exc

    def verify(self, password: str, salt: str | bytes, hashed: bytes) -> bool:
        """Verify password against argon2i hash bytes.

        Parameters
        ----------
        password : str
            The plain secret to check.
        salt : str | bytes
            The salt used when the hash was created.
        hashed : bytes
            The stored hash bytes.

        Returns
        -------
        bool
            True if the verification succeeds, false otherwise.
        """
        return hmac.compare_digest(self.hash_password(password, salt), hashed)

    def parameters(self, hashed: bytes) -> str:
        """Get the parameter segments, e.g. ``v=19$m=4096,t=3,p=1``.

        Parameters
        ----------
        hashed : bytes
            Unused, the parameters are fixed per hasher.

        Returns
        -------
        str
            The parameter segments.
        """
        return (
            f"v={self.version}$"
            f"m={self.memory_cost},t={self.time_cost},p={self.parallelism}"
        )

    def from_parameters(
        self, parameters: str, hashed: bytes
    ) -> "Argon2iHasher":
        """Get a hasher for the costs of a parsed hash string.

        Parameters
        ----------
        parameters : str
            The segments, e.g. ``v=19$m=65536,t=2,p=1``.
        hashed : bytes
            The stored hash bytes, their length is used as ``hash_len``.

        Returns
        -------
        Argon2iHasher
            The configured hasher.

        Raises
        ------
        InvalidHashStringError
            If a cost is missing or malformed.
        """
        values = parameter_values(parameters)
        try:
            return replace(
                self,
                version=values["v"],
                memory_cost=values["m"],
                time_cost=values["t"],
                parallelism=values["p"],
                hash_len=len(hashed),
            )
        except KeyError as exc:
            raise InvalidHashStringError(
                f"Missing argon2i parameter: {exc.args[0]}"
            ) from exc


__all__ = ["Argon2iHasher"]
