# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""hsh settings module."""

import logging

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import get_log_level
from ..algorithms._bcrypt import DEFAULT_COST, MAX_COST, MIN_COST
from ..models.hash_algorithm import HashAlgorithm
from ._common import DOT_ENV_PATH, ENV_PREFIX, is_testing
from ._hashing import (
    DEFAULT_ALGORITHM,
    get_bcrypt_cost,
    get_default_algorithm,
)

LOG = logging.getLogger(__name__)

FALLBACKS = {
    "log_level": "INFO",
    "default_algorithm": DEFAULT_ALGORITHM,
    "bcrypt_cost": DEFAULT_COST,
}


class Settings(BaseSettings):
    """Settings class."""

    log_level: str = get_log_level()
    default_algorithm: str = get_default_algorithm()
    bcrypt_cost: Annotated[int, Field(ge=MIN_COST, le=MAX_COST)] = (
        get_bcrypt_cost()
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate the log level.

        Parameters
        ----------
        value : str
            The log level

        Returns
        -------
        str
            The upper-cased log level

        Raises
        ------
        ValueError
            If the log level is not valid
        """
        value = str(value).upper()
        if value not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Invalid log level: {value}")
        return value

    @field_validator("default_algorithm", mode="before")
    @classmethod
    def validate_default_algorithm(cls, value: str) -> str:
        """Validate the default algorithm.

        Parameters
        ----------
        value : str
            The algorithm identifier

        Returns
        -------
        str
            The algorithm identifier

        Raises
        ------
        ValueError
            If the algorithm is not supported
        """
        # InvalidAlgorithmError is a ValueError
        return HashAlgorithm.from_identifier(value).value

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Invalid values from the environment are replaced by the defaults.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=False)
        try:
            instance = cls()
        except ValidationError as exc:
            invalid = sorted(
                {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
            )
            LOG.warning("Ignoring invalid settings: %s", ", ".join(invalid))
            instance = cls(
                **{key: FALLBACKS[key] for key in invalid if key in FALLBACKS}
            )
        LOG.debug(
            "Loaded settings, default algorithm: %s",
            instance.default_algorithm,
        )
        return instance

    @classmethod
    def is_testing(cls) -> bool:
        """Check if the settings are for testing.

        Returns
        -------
        bool
            Whether the settings are for testing
        """
        return is_testing()
