# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing algorithm protocol."""

from typing import Dict, Protocol, runtime_checkable

from ..errors import InvalidHashStringError


@runtime_checkable
class HashingAlgorithm(Protocol):  # pragma: no cover
    """Protocol for the algorithm providers."""

    def hash_password(self, password: str, salt: str | bytes) -> bytes:
        """Derive the hash bytes of a password.

        Parameters
        ----------
        password : str
            The plain text password
        salt : str | bytes
            The salt to combine with the password
        """
        ...

    def verify(self, password: str, salt: str | bytes, hashed: bytes) -> bool:
        """Check a plain text password against stored hash bytes.

        Parameters
        ----------
        password : str
            The plain text password
        salt : str | bytes
            The salt the stored hash was derived with
        hashed : bytes
            The stored hash bytes
        """
        ...

    def parameters(self, hashed: bytes) -> str:
        """Get the two `$`-separated parameter segments of a hash string.

        Parameters
        ----------
        hashed : bytes
            The hash bytes the parameters describe
        """
        ...

    def from_parameters(
        self, parameters: str, hashed: bytes
    ) -> "HashingAlgorithm":
        """Get a provider configured from parsed parameter segments.

        Parameters
        ----------
        parameters : str
            The two `$`-separated parameter segments of a hash string
        hashed : bytes
            The hash bytes the parameters describe
        """
        ...


def to_bytes(value: str | bytes) -> bytes:
    """Get the UTF-8 bytes of a password or salt.

    Parameters
    ----------
    value : str | bytes
        The value to convert.

    Returns
    -------
    bytes
        The value as bytes.
    """
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def parameter_values(parameters: str) -> Dict[str, int]:
    """Read the `key=value` pairs of parameter segments.

    Parameters
    ----------
    parameters : str
        The segments, e.g. `v=19$m=4096,t=3,p=1`.

    Returns
    -------
    Dict[str, int]
        The values by key.

    Raises
    ------
    InvalidHashStringError
        If a pair is malformed or its value is not a positive integer.
    """
    values: Dict[str, int] = {}
    for segment in parameters.split("$"):
        for pair in segment.split(","):
            key, sep, value = pair.partition("=")
            if not sep or not key or not value.isdigit() or int(value) < 1:
                raise InvalidHashStringError(f"Invalid parameter: {pair!r}")
            values[key] = int(value)
    return values


__all__ = ["HashingAlgorithm", "parameter_values", "to_bytes"]
