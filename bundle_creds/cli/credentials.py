"""CLI commands for credential set management.

This module provides the ``bundle-creds credentials`` command group for
generating, listing, showing and deleting credential sets.

A credential set maps each credential a bundle requires to a source:
    - env: an environment variable on the machine running the bundle
    - path: a local file whose contents are the credential
    - command: a shell command whose output is the credential
    - value: the credential value itself

Commands:
    - generate: Create or regenerate a set from the bundle manifest
    - list: List all credential sets
    - show: Show one credential set and its sources
    - delete: Remove a credential set

Example:
    Generate and inspect a credential set::

        $ bundle-creds credentials generate --name kool-kreds
        $ bundle-creds credentials list
        $ bundle-creds credentials show kool-kreds --output yaml
        $ bundle-creds credentials delete kool-kreds
"""

import sys
from pathlib import Path
from typing import NoReturn

import click
import structlog

from bundle_creds.config import BundleCredsSettings, load_settings
from bundle_creds.credentials import ManifestBundleProvider
from bundle_creds.credentials.manager import CredentialSetManager, GenerateOptions
from bundle_creds.exceptions import BundleCredsError, ConfigurationError
from bundle_creds.store import FileSystemStore

log = structlog.get_logger(__name__)

_OUTPUT_HELP = "Output format: json, yaml or table (default from settings, normally table)"


def _get_settings(ctx: click.Context) -> BundleCredsSettings:
    """Return settings loaded by the root group, loading them when run standalone."""
    if not ctx.obj or ctx.obj.get("settings") is None:
        try:
            settings = load_settings()
        except ConfigurationError as e:
            _fail(e)
        ctx.ensure_object(dict)["settings"] = settings
    return ctx.obj["settings"]


def _build_manager(ctx: click.Context, bundle_file: str | None = None) -> CredentialSetManager:
    settings = _get_settings(ctx)
    return CredentialSetManager(
        store=FileSystemStore(settings.credentials_dir),
        out=sys.stdout,
        bundles=ManifestBundleProvider(Path(bundle_file) if bundle_file else settings.bundle_file),
    )


def _fail(error: Exception) -> NoReturn:
    message = error.message if isinstance(error, BundleCredsError) else str(error)
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)


@click.group(name="credentials")
def credentials_group() -> None:
    """Manage credential sets for running bundles.

    A credential set records, for every credential a bundle needs, where
    its value comes from: an environment variable, a file path, a shell
    command, or a specific value.

    Examples:

        # Generate a set from ./bundle.yaml, prompting for each source
        bundle-creds credentials generate --name kool-kreds

        # Generate with placeholder values
        bundle-creds credentials generate --silent

        # Inspect sets
        bundle-creds credentials list --output json
        bundle-creds credentials show kool-kreds
    """
    pass


@credentials_group.command(name="generate")
@click.option("--name", default="", help="Credential set name (defaults to the bundle name)")
@click.option("--silent", is_flag=True, help="Do not prompt; fill every credential with a placeholder")
@click.option("--file", "bundle_file", default=None, help="Path to the bundle manifest")
@click.pass_context
def generate_credentials(ctx: click.Context, name: str, silent: bool, bundle_file: str | None) -> None:
    """Generate a credential set from the bundle's credential requirements.

    Regenerating an existing set replaces its credentials and keeps its
    creation time.
    """
    manager = _build_manager(ctx, bundle_file)
    try:
        credential_set = manager.generate(GenerateOptions(name=name, silent=silent))
    except (BundleCredsError, OSError) as e:
        log.debug("generate_failed", exc_info=True)
        _fail(e)

    click.echo(click.style(f"Generated credential set {credential_set.name}", fg="green"), err=True)


@credentials_group.command(name="list")
@click.option("--output", "-o", default=None, help=_OUTPUT_HELP)
@click.pass_context
def list_credentials(ctx: click.Context, output: str | None) -> None:
    """List credential sets."""
    manager = _build_manager(ctx)
    try:
        manager.list(output if output is not None else _get_settings(ctx).default_output)
    except (BundleCredsError, OSError) as e:
        _fail(e)


@credentials_group.command(name="show")
@click.argument("name")
@click.option("--output", "-o", default=None, help=_OUTPUT_HELP)
@click.pass_context
def show_credentials(ctx: click.Context, name: str, output: str | None) -> None:
    """Show a credential set and the source of each credential."""
    manager = _build_manager(ctx)
    try:
        manager.show(name, output if output is not None else _get_settings(ctx).default_output)
    except (BundleCredsError, OSError) as e:
        _fail(e)


@credentials_group.command(name="delete")
@click.argument("name")
@click.pass_context
def delete_credentials(ctx: click.Context, name: str) -> None:
    """Delete a credential set."""
    manager = _build_manager(ctx)
    try:
        manager.delete(name)
    except (BundleCredsError, OSError) as e:
        _fail(e)
