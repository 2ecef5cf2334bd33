"""Unified CLI for the Azure NetApp Files sample.

Subcommands:
    anf-sample subscription     – print the resolved subscription ID
    anf-sample authorize        – build a credential and verify it against ARM
    anf-sample auth-info PATH   – show an ``--sdk-auth`` file, secret masked
    anf-sample basic-info PATH  – show a basic info file
    anf-sample to-tib BYTES     – convert bytes to tebibytes
    anf-sample to-bytes TIB     – convert tebibytes to bytes
"""

import json
import logging

import click
import requests
from azure.core.exceptions import AzureError

from anf_sample import __version__, iam
from anf_sample.console import console_output, print_header, setup_logging
from anf_sample.errors import SampleError
from anf_sample.utils import bytes_to_tebibytes, tebibytes_to_bytes

_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose logging.",
)


@click.group()
@click.version_option(version=__version__, prog_name="anf-sample")
def cli() -> None:
    """Azure NetApp Files sample helpers."""


@cli.command()
@_verbose_option
def subscription(verbose: bool) -> None:
    """Print the subscription ID from AZURE_SUBSCRIPTION_ID or the Azure CLI."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)
    try:
        click.echo(iam.get_subscription_id())
    except SampleError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.option(
    "--basic-info",
    "basic_info_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Basic info file providing the resource manager endpoint.",
)
@_verbose_option
def authorize(basic_info_path: str | None, verbose: bool) -> None:
    """Build the default credential and look up the subscription on ARM."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)

    endpoint = None
    try:
        if basic_info_path:
            endpoint = iam.read_basic_info(basic_info_path).resourceManagerEndpointUrl
        credential, subscription_id = iam.get_authorizer()
        details = iam.get_subscription_details(credential, subscription_id, endpoint=endpoint)
    except SampleError as exc:
        raise click.ClickException(str(exc)) from exc
    except AzureError as exc:
        raise click.ClickException(f"authentication failed: {exc}") from exc
    except requests.RequestException as exc:
        raise click.ClickException(f"ARM request failed: {exc}") from exc

    console_output(f"Authenticated for subscription {subscription_id}")
    print_header(f"Subscription {details['name'] or details['id']}")
    for key, value in details.items():
        click.echo(f"{key}: {value}")


@cli.command("auth-info")
@click.argument("path", type=click.Path(dir_okay=False))
def auth_info(path: str) -> None:
    """Print an ``az ad sp create-for-rbac --sdk-auth`` file with the secret masked."""
    try:
        info = iam.read_auth_info(path)
    except SampleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(info.masked(), indent=2))


@cli.command("basic-info")
@click.argument("path", type=click.Path(dir_okay=False))
def basic_info(path: str) -> None:
    """Print a basic info file."""
    try:
        info = iam.read_basic_info(path)
    except SampleError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(info.model_dump(), indent=2))


@cli.command("to-tib")
@click.argument("size", type=click.IntRange(min=0))
def to_tib(size: int) -> None:
    """Convert SIZE bytes to whole tebibytes."""
    click.echo(bytes_to_tebibytes(size))


@cli.command("to-bytes")
@click.argument("size", type=click.IntRange(min=0, max=2**32 - 1))
def to_bytes(size: int) -> None:
    """Convert SIZE tebibytes to bytes."""
    click.echo(tebibytes_to_bytes(size))
