# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Scrypt password hashing provider (stdlib)."""

import hashlib
import hmac
from dataclasses import dataclass, replace

from ..errors import InvalidHashStringError, ProviderError
from .protocol import parameter_values, to_bytes


@dataclass(frozen=True)
class ScryptHasher:
    """Scrypt password hasher."""

    log_n: int = 14  # n = 2^14
    r: int = 8
    p: int = 1
    dklen: int = 64

    @property
    def n(self) -> int:
        """The CPU/memory cost (2 ** log_n)."""
        return 1 << self.log_n

    def hash_password(self, password: str, salt: str | bytes) -> bytes:
        """Hash password using scrypt.

        Parameters
        ----------
        password : str
            The plain secret to hash.
        salt : str | bytes
            The salt.

        Returns
        -------
        bytes
            The derived key, `dklen` bytes long.

        Raises
        ------
        ProviderError
            If the scrypt parameters are rejected.
        """
        # 128 * r * n is the working memory, leave headroom over it
        maxmem = 256 * self.r * self.n
        try:
            return hashlib.scrypt(
                to_bytes(password),
                salt=to_bytes(salt),
                n=self.n,
                r=self.r,
                p=self.p,
                maxmem=maxmem,
                dklen=self.dklen,
            )
        except (ValueError, OverflowError) as exc:
            raise ProviderError("scrypt", str(exc)) from exc

    def verify(self, password: str, salt: str | bytes, hashed: bytes) -> bool:
        """Verify password against scrypt hash bytes.

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
        """Get the parameter segments, e.g. ``ln=14$r=8,p=1``.

        Parameters
        ----------
        hashed : bytes
            Unused, the parameters are fixed per hasher.

        Returns
        -------
        str
            The parameter segments.
        """
        return f"ln={self.log_n}$r={self.r},p={self.p}"

    def from_parameters(
        self, parameters: str, hashed: bytes
    ) -> "ScryptHasher":
        """Get a hasher for the costs of a parsed hash string.

        Parameters
        ----------
        parameters : str
            The segments, e.g. ``ln=15$r=8,p=2``.
        hashed : bytes
            The stored hash bytes, their length is used as ``dklen``.

        Returns
        -------
        ScryptHasher
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
                log_n=values["ln"],
                r=values["r"],
                p=values["p"],
                dklen=len(hashed),
            )
        except KeyError as exc:
            raise InvalidHashStringError(
                f"Missing scrypt parameter: {exc.args[0]}"
            ) from exc


__all__ = ["ScryptHasher"]
