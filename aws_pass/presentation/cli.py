"""Command-line interface for aws-pass.

Thin click layer over PasswordStore. Each command runs one coroutine with
asyncio.run, writes its output to stdout and maps a Failure to
``Error: <code>: <message>`` on stderr with exit status 1.

Usage:
    aws-pass init
    aws-pass insert --name github
    aws-pass show --name github
    aws-pass list --prefix git
"""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from aws_pass import __version__
from aws_pass.core.container import get_password_store
from aws_pass.core.errors import DomainError
from aws_pass.core.result import Failure, Result, Success

T = TypeVar("T")


def _unwrap(result: Result[T, DomainError]) -> T:
    """Return the success value or exit with the error on stderr."""
    match result:
        case Success(value=value):
            return value
        case Failure(error=error):
            click.echo(f"Error: {error}", err=True)
            raise SystemExit(1)


def _run(coroutine: Coroutine[Any, Any, Result[T, DomainError]]) -> T:
    return _unwrap(asyncio.run(coroutine))


@click.group()
@click.version_option(__version__, prog_name="aws-pass")
def cli() -> None:
    """Password manager backed by AWS Secrets Manager."""
    pass


@cli.command("init")
@click.option("--access-key-id", prompt="AWS access key id", help="IAM access key id")
@click.option(
    "--secret-access-key",
    prompt="AWS secret access key",
    hide_input=True,
    help="IAM secret access key",
)
@click.option("--mfa-serial", prompt="MFA device serial", help="MFA device serial or ARN")
def init(access_key_id: str, secret_access_key: str, mfa_serial: str) -> None:
    """Initialize the local store with identity credentials."""
    store_dir = _unwrap(
        get_password_store().init(access_key_id, secret_access_key, mfa_serial)
    )
    click.echo(f"Initialized password store in {store_dir}", err=True)


@cli.command("list")
@click.option("--prefix", default=None, help="Only names starting with this prefix")
def list_secrets(prefix: str | None) -> None:
    """List secret names."""
    for name in _run(get_password_store().list(prefix)):
        click.echo(name)


@cli.command("show")
@click.option("--name", required=True, help="Secret name")
def show(name: str) -> None:
    """Print a secret's value."""
    click.echo(_run(get_password_store().show(name)))


@cli.command("insert")
@click.option("--name", required=True, help="Secret name")
def insert(name: str) -> None:
    """Create a secret with a value read from the terminal."""
    _run(get_password_store().insert(name))


@cli.command("edit")
@click.option("--name", required=True, help="Secret name")
def edit(name: str) -> None:
    """Edit a secret's value in $EDITOR."""
    _run(get_password_store().edit(name))


@cli.command("generate")
@click.option("--name", required=True, help="Secret name")
@click.option("--exclude-chars", default=None, help="Characters the password must not contain")
@click.option(
    "--length", default=None, type=click.IntRange(min=1), help="Password length"
)
def generate(name: str, exclude_chars: str | None, length: int | None) -> None:
    """Create a secret holding a generated password and print it."""
    click.echo(_run(get_password_store().generate(name, exclude_chars, length)))


@cli.command("remove")
@click.option("--name", required=True, help="Secret name")
def remove(name: str) -> None:
    """Delete a secret."""
    _run(get_password_store().remove(name))


if __name__ == "__main__":
    cli()
