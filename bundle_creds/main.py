"""CLI entry point for bundle-creds."""

import sys

import click
import structlog

from bundle_creds.cli.credentials import credentials_group
from bundle_creds.config import load_settings
from bundle_creds.exceptions import ConfigurationError
from bundle_creds.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(), help="Path to a YAML settings file")
@click.option("--home", default=None, help="Data home directory (default: ~/.bundle-creds)")
@click.option("--log-level", default=None, help="Logging level (default: WARNING)")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, home: str | None, log_level: str | None) -> None:
    """bundle-creds: Manage credential sets for application bundles."""
    try:
        settings = load_settings(config_path, home=home, log_level=log_level)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    configure_logging(settings.log_level)
    log.debug("settings_loaded", home=str(settings.home))
    ctx.obj = {"settings": settings}


cli.add_command(credentials_group)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
