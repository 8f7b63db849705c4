# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Map algorithm identifiers to hashing providers."""

import logging
from types import MappingProxyType
from typing import Mapping

from ..errors import InvalidAlgorithmError
from ..models.hash_algorithm import HashAlgorithm
from ._argon2i import Argon2iHasher
from ._bcrypt import BcryptHasher
from ._scrypt import ScryptHasher
from .protocol import HashingAlgorithm

LOG = logging.getLogger(__name__)


def default_providers() -> Mapping[HashAlgorithm, HashingAlgorithm]:
    """Get the default provider of each algorithm.

    Returns
    -------
    Mapping[HashAlgorithm, HashingAlgorithm]
        The providers, one per algorithm.
    """
    return {
        HashAlgorithm.ARGON2I: Argon2iHasher(),
        HashAlgorithm.BCRYPT: BcryptHasher(),
        HashAlgorithm.SCRYPT: ScryptHasher(),
    }


class AlgorithmSelector:
    """Selects the provider to use for an algorithm identifier."""

    def __init__(
        self, providers: Mapping[HashAlgorithm, HashingAlgorithm] | None = None
    ) -> None:
        """Initialize the selector.

        Parameters
        ----------
        providers : Mapping[HashAlgorithm, HashingAlgorithm] | None
            Providers to use instead of the defaults.

        Raises
        ------
        ValueError
            If a provider is missing for an algorithm.
        """
        resolved = dict(default_providers())
        if providers:
            resolved.update(providers)
        missing = [tag.value for tag in HashAlgorithm if tag not in resolved]
        if missing:  # pragma: no cover
            raise ValueError(f"No provider for: {', '.join(missing)}")
        self._providers = MappingProxyType(resolved)

    @property
    def providers(self) -> Mapping[HashAlgorithm, HashingAlgorithm]:
        """The registered providers."""
        return self._providers

    def select(self, identifier: str) -> HashingAlgorithm:
        """Get the provider for an algorithm identifier.

        Parameters
        ----------
        identifier : str
            The algorithm identifier ("argon2i", "bcrypt" or "scrypt").

        Returns
        -------
        HashingAlgorithm
            The provider.

        Raises
        ------
        InvalidAlgorithmError
            If the identifier is not supported.
        """
        try:
            algorithm = HashAlgorithm.from_identifier(identifier)
        except InvalidAlgorithmError:
            LOG.debug("Rejected algorithm identifier: %r", identifier)
            raise
        return self.provider_for(algorithm)

    def provider_for(self, algorithm: HashAlgorithm) -> HashingAlgorithm:
        """Get the provider of an algorithm.

        Parameters
        ----------
        algorithm : HashAlgorithm
            The algorithm.

        Returns
        -------
        HashingAlgorithm
            The provider.
        """
        return self._providers[algorithm]

    @staticmethod
    def identifier(algorithm: HashAlgorithm) -> str:
        """Get the canonical identifier of an algorithm.

        Parameters
        ----------
        algorithm : HashAlgorithm
            The algorithm.

        Returns
        -------
        str
            The lowercase identifier.
        """
        return algorithm.value


algorithm_selector = AlgorithmSelector()


__all__ = ["AlgorithmSelector", "algorithm_selector", "default_providers"]
