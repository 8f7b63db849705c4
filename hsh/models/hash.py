# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

# pylint: disable=too-many-public-methods

"""The hash entity and its builder."""

import logging
import random
import warnings
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .._logging import redact
from ..algorithms import BcryptHasher, algorithm_selector
from ..errors import (
    InvalidAlgorithmError,
    InvalidHashStringError,
    MissingBuilderFieldsError,
    PasswordTooShortError,
)
from . import codec
from .hash_algorithm import HashAlgorithm
from .salt import Salt
from .salt import generate_salt as _generate_salt

LOG = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def _check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError(MIN_PASSWORD_LENGTH)


class Hash(BaseModel):
    """A password hash: the hash bytes, the salt and the algorithm.

    The algorithm cannot be changed once the hash exists, the hash and salt
    only through ``set_hash``, ``set_salt`` and ``set_password``. The hash is
    never empty. Hashes read with ``from_string`` keep the parameter segments
    of the string in their salt and are marked as ``parsed``.
    Neither ``repr`` nor ``str`` include the hash or salt bytes.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    hash: bytes = Field(repr=False, min_length=1)
    salt: Salt = Field(repr=False)
    algorithm: HashAlgorithm = Field(frozen=True)
    parsed: bool = Field(
        default=False,
        description=(
            "Whether the salt holds the <param1>$<param2>$<base64(salt)> "
            "segments of a parsed hash string."
        ),
    )

    def __str__(self) -> str:
        return (
            f"Hash(algorithm={self.algorithm.value}, "
            f"hash_length={self.hash_length})"
        )

    @property
    def hash_length(self) -> int:
        """The number of hash bytes."""
        return len(self.hash)

    @classmethod
    def new(cls, password: str, salt: str, algorithm: str) -> "Hash":
        """Hash a password.

        Parameters
        ----------
        password : str
            The plain password (at least 8 characters).
        salt : str
            The salt. Ignored by bcrypt, which embeds its own.
        algorithm : str
            The algorithm identifier.

        Returns
        -------
        Hash
            The new hash.

        Raises
        ------
        PasswordTooShortError
            If the password is too short.
        InvalidAlgorithmError
            If the algorithm is not supported.
        ProviderError
            If the hashing primitive rejects its inputs.
        """
        _check_password(password)
        tag = HashAlgorithm.from_identifier(algorithm)
        hashed = cls.generate_hash(password, salt, tag)
        LOG.debug("Created %s hash (%s)", tag.value, redact(hashed))
        return (
            HashBuilder()
            .hash(hashed)
            .salt(salt.encode("utf-8"))
            .algorithm(tag)
            .build()
        )

    @classmethod
    def new_argon2i(cls, password: str, salt: Salt) -> "Hash":
        """Hash a password with argon2i.

        Parameters
        ----------
        password : str
            The plain password.
        salt : Salt
            The salt bytes (at least 8).

        Returns
        -------
        Hash
            The new hash.
        """
        return cls._new_salted(password, salt, HashAlgorithm.ARGON2I)

    @classmethod
    def new_scrypt(cls, password: str, salt: Salt) -> "Hash":
        """Hash a password with scrypt.

        Parameters
        ----------
        password : str
            The plain password.
        salt : Salt
            The salt bytes.

        Returns
        -------
        Hash
            The new hash.
        """
        return cls._new_salted(password, salt, HashAlgorithm.SCRYPT)

    @classmethod
    def new_bcrypt(cls, password: str, cost: int) -> "Hash":
        """Hash a password with bcrypt.

        Parameters
        ----------
        password : str
            The plain password.
        cost : int
            The bcrypt work factor (4 to 31).

        Returns
        -------
        Hash
            The new hash, with an empty salt.
        """
        _check_password(password)
        hashed = BcryptHasher(cost=cost).hash_password(password)
        return (
            HashBuilder()
            .hash(hashed)
            .salt(b"")
            .algorithm(HashAlgorithm.BCRYPT)
            .build()
        )

    @classmethod
    def _new_salted(
        cls, password: str, salt: Salt, algorithm: HashAlgorithm
    ) -> "Hash":
        _check_password(password)
        provider = algorithm_selector.provider_for(algorithm)
        hashed = provider.hash_password(password, salt)
        return (
            HashBuilder()
            .hash(hashed)
            .salt(bytes(salt))
            .algorithm(algorithm)
            .build()
        )

    @classmethod
    def from_hash(cls, hashed: bytes, algorithm: str) -> "Hash":
        """Wrap hash bytes whose salt is tracked elsewhere.

        Parameters
        ----------
        hashed : bytes
            The raw hash bytes.
        algorithm : str
            The algorithm identifier.

        Returns
        -------
        Hash
            The hash, with an empty salt.
        """
        tag = HashAlgorithm.from_identifier(algorithm)
        return HashBuilder().hash(hashed).salt(b"").algorithm(tag).build()

    @classmethod
    def from_string(cls, value: str) -> "Hash":
        """Parse the extended ``$``-separated form.

        Parameters
        ----------
        value : str
            The hash string.

        Returns
        -------
        Hash
            The parsed hash. The three parameter segments are kept as salt.

        Raises
        ------
        InvalidHashStringError
            If the string does not have the expected shape.
        InvalidAlgorithmError
            If the algorithm is not supported.
        Base64DecodeError
            If the hash segment is not valid base64.
        """
        tag, parameters, hashed = codec.parse_extended(value)
        result = (
            HashBuilder().hash(hashed).salt(parameters).algorithm(tag).build()
        )
        result.parsed = True
        return result

    @staticmethod
    def parse_algorithm(value: str) -> HashAlgorithm:
        """Get the algorithm of a ``$``-prefixed hash string.

        Parameters
        ----------
        value : str
            The hash string.

        Returns
        -------
        HashAlgorithm
            The algorithm.
        """
        return codec.parse_algorithm(value)

    @classmethod
    def parse(cls, value: str) -> "Hash":
        """Load a hash from its JSON form.

        Parameters
        ----------
        value : str
            The JSON document (see ``to_json``).

        Returns
        -------
        Hash
            The hash.

        Raises
        ------
        InvalidHashStringError
            If the document is not a valid hash.
        """
        try:
            return cls.model_validate_json(value)
        except ValidationError as exc:
            raise InvalidHashStringError(
                f"Invalid hash document ({exc.error_count()} errors)"
            ) from exc

    def to_json(self) -> str:
        """Dump the hash as JSON, bytes as base64.

        Returns
        -------
        str
            The JSON document.
        """
        return self.model_dump_json()

    @staticmethod
    def generate_hash(
        password: str, salt: str | bytes, algorithm: str | HashAlgorithm
    ) -> bytes:
        """Derive hash bytes with the provider of an algorithm.

        Parameters
        ----------
        password : str
            The plain password.
        salt : str | bytes
            The salt.
        algorithm : str | HashAlgorithm
            The algorithm identifier.

        Returns
        -------
        bytes
            The hash bytes.
        """
        return algorithm_selector.select(algorithm).hash_password(
            password, salt
        )

    @staticmethod
    def generate_salt(
        algorithm: str, rng: Optional[random.Random] = None
    ) -> str:
        """Generate a salt suitable for an algorithm.

        Parameters
        ----------
        algorithm : str
            The algorithm identifier.
        rng : Optional[random.Random]
            The randomness source, system randomness if not given.

        Returns
        -------
        str
            The salt.
        """
        return _generate_salt(algorithm, rng)

    def set_password(self, password: str, salt: str, algorithm: str) -> None:
        """Replace the hash with the hash of a new password.

        Only the hash bytes change, the stored salt is kept as is.

        Parameters
        ----------
        password : str
            The new plain password.
        salt : str
            The salt to hash with.
        algorithm : str
            The algorithm identifier, must be this hash's algorithm.

        Raises
        ------
        InvalidAlgorithmError
            If the algorithm is unknown or differs from this hash's.
        """
        _check_password(password)
        tag = HashAlgorithm.from_identifier(algorithm)
        if tag is not self.algorithm:
            raise InvalidAlgorithmError(
                tag.value,
                f"Cannot rehash a {self.algorithm.value} hash with {tag.value}",
            )
        self.set_hash(self.generate_hash(password, salt, tag))

    def set_hash(self, hashed: bytes) -> None:
        """Replace the hash bytes.

        Parameters
        ----------
        hashed : bytes
            The new hash bytes.
        """
        self.hash = bytes(hashed)

    def set_salt(self, salt: Salt) -> None:
        """Replace the salt bytes with a plain salt.

        Parameters
        ----------
        salt : Salt
            The new salt.
        """
        self.salt = bytes(salt)
        self.parsed = False

    def verify(self, password: str) -> bool:
        """Check a password against this hash.

        Parameters
        ----------
        password : str
            The candidate password.

        Returns
        -------
        bool
            True if the password matches, False otherwise.

        Raises
        ------
        SaltDecodeError
            If the stored salt is not valid UTF-8.
        InvalidHashStringError
            If the parameter segments of a parsed hash are malformed.
        VerificationError
            If the stored bcrypt hash is malformed.
        ProviderError
            If the hashing primitive rejects its inputs.
        """
        salt_text = codec.decode_salt(self.salt)
        salt: str | bytes = salt_text
        provider = algorithm_selector.provider_for(self.algorithm)
        if self.parsed:
            parameters, salt = codec.split_parameters(salt_text)
            provider = provider.from_parameters(parameters, self.hash)
        LOG.debug("Verifying a %s hash", self.algorithm.value)
        return provider.verify(password, salt, self.hash)

    def to_string_representation(self) -> str:
        """Render the legacy ``<salt>:<hex(hash)>`` form.

        The algorithm is not included, so the result cannot be parsed back.
        Prefer ``to_extended_string``.

        Returns
        -------
        str
            The simple string.
        """
        warnings.warn(
            "The <salt>:<hex> form is lossy, use to_extended_string()",
            DeprecationWarning,
            stacklevel=2,
        )
        return codec.format_simple(self.salt, self.hash)

    def to_extended_string(self) -> str:
        """Render the extended ``$``-separated form.

        Returns
        -------
        str
            ``$<algorithm>$<param1>$<param2>$<base64(salt)>$<base64(hash)>``,
            or the parsed parameter blob if this hash came from a string.
        """
        if self.parsed:
            parameters = codec.decode_salt(self.salt)
        else:
            provider = algorithm_selector.provider_for(self.algorithm)
            parameters = codec.SEPARATOR.join(
                [provider.parameters(self.hash), codec.b64_encode(self.salt)]
            )
        return codec.format_extended(self.algorithm, parameters, self.hash)


class HashBuilder:
    """Collects the fields of a hash and builds it once all are set."""

    def __init__(self) -> None:
        self._hash: Optional[bytes] = None
        self._salt: Optional[Salt] = None
        self._algorithm: Optional[HashAlgorithm] = None

    def hash(self, hashed: bytes) -> "HashBuilder":
        """Set the hash bytes.

        Parameters
        ----------
        hashed : bytes
            The hash bytes.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._hash = bytes(hashed)
        return self

    def salt(self, salt: Salt) -> "HashBuilder":
        """Set the salt.

        Parameters
        ----------
        salt : Salt
            The salt bytes.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._salt = bytes(salt)
        return self

    def algorithm(self, algorithm: str | HashAlgorithm) -> "HashBuilder":
        """Set the algorithm.

        Parameters
        ----------
        algorithm : str | HashAlgorithm
            The algorithm or its identifier.

        Returns
        -------
        HashBuilder
            The builder.
        """
        self._algorithm = HashAlgorithm.from_identifier(algorithm)
        return self

    def build(self) -> Hash:
        """Build the hash.

        Returns
        -------
        Hash
            The hash.

        Raises
        ------
        MissingBuilderFieldsError
            If a field is not set (an empty hash counts as not set).
        """
        missing: List[str] = []
        if not self._hash:
            missing.append("hash")
        if self._salt is None:
            missing.append("salt")
        if self._algorithm is None:
            missing.append("algorithm")
        if missing:
            raise MissingBuilderFieldsError(missing)
        return Hash(
            hash=self._hash,
            salt=self._salt,
            algorithm=self._algorithm,
        )


__all__ = ["Hash", "HashBuilder", "MIN_PASSWORD_LENGTH"]
