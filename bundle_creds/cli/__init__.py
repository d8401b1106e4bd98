"""CLI commands for bundle-creds.

The CLI is built using Click with the main entry point ``bundle-creds``.

Key Commands:
    credentials (bundle_creds.cli.credentials):
        Command group for generating, listing, showing and deleting
        credential sets.

Usage Examples:
    Generate a credential set from a bundle manifest::

        $ bundle-creds credentials generate --file bundle.yaml --name kool-kreds

    Show it as JSON::

        $ bundle-creds credentials show kool-kreds -o json
"""

from bundle_creds.cli.credentials import credentials_group

__all__ = ["credentials_group"]
