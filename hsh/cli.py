# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
import logging
import logging.config
from typing import Optional

import typer

from hsh._logging import LogLevel, get_log_level, get_logging_config
from hsh._version import __version__
from hsh.config import Settings
from hsh.errors import HshError
from hsh.models import HashAlgorithm, generate_salt
from hsh.models.hash import Hash

APP_NAME = "hsh"
APP_HELP = "Hash and verify passwords with argon2i, bcrypt or scrypt"

DEFAULT_SETTINGS = Settings.load()

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_short=True,
)


def _fail(error: HshError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=2)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Password hashing command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    logging.config.dictConfig(get_logging_config(log_level.value))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("hash")
def hash_command(
    algorithm: HashAlgorithm = typer.Option(
        default=HashAlgorithm(DEFAULT_SETTINGS.default_algorithm),
        help="The hash algorithm",
    ),
    salt: Optional[str] = typer.Option(
        default=None,
        help="The salt to use (generated if omitted, ignored by bcrypt)",
        show_default=False,
    ),
    cost: int = typer.Option(
        default=DEFAULT_SETTINGS.bcrypt_cost,
        help="The bcrypt cost",
    ),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to hash",
    ),
) -> None:
    """Hash a password and print its extended string form."""
    try:
        if algorithm is HashAlgorithm.BCRYPT:
            hashed = Hash.new_bcrypt(password, cost)
        else:
            hashed = Hash.new(
                password, salt or generate_salt(algorithm), algorithm.value
            )
        typer.echo(hashed.to_extended_string())
    except HshError as error:
        _fail(error)


@app.command("verify")
def verify_command(
    hash_string: str = typer.Argument(
        ...,
        help="The stored hash, in its extended string form",
    ),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        help="The password to check",
    ),
) -> None:
    """Check a password against a stored hash."""
    try:
        valid = Hash.from_string(hash_string).verify(password)
    except HshError as error:
        _fail(error)
        return
    LOG.debug("Verification finished")
    typer.echo("valid" if valid else "invalid")
    raise typer.Exit(code=0 if valid else 1)


@app.command("salt")
def salt_command(
    algorithm: HashAlgorithm = typer.Option(
        default=HashAlgorithm(DEFAULT_SETTINGS.default_algorithm),
        help="The hash algorithm",
    ),
) -> None:
    """Generate a salt for an algorithm."""
    typer.echo(generate_salt(algorithm))


if __name__ == "__main__":
    app()
