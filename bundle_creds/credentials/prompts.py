"""Gathering credential sources while generating a credential set.

Two prompters are provided:
    - SilentPrompter: fills every credential with a placeholder value so a
      set can be generated non-interactively and edited afterwards.
    - ClickPrompter: asks on the terminal how each credential should be
      sourced, then asks for the environment variable, path, command or
      literal value.
"""

from typing import Protocol

import click
import structlog

from bundle_creds.enums import SourceKind
from bundle_creds.models import CredentialRequirement, Source

log = structlog.get_logger(__name__)

PLACEHOLDER_VALUE = "TODO"

# Prompt choice -> (source kind, follow-up question)
SOURCE_CHOICES: dict[str, tuple[SourceKind, str]] = {
    "specific value": (SourceKind.VALUE, "Enter the value that will be used to set credential {name}"),
    "environment variable": (SourceKind.ENV, "Enter the environment variable that will be used to set credential {name}"),
    "file path": (SourceKind.PATH, "Enter the path that will be used to set credential {name}"),
    "shell command": (SourceKind.COMMAND, "Enter the command that will be used to set credential {name}"),
}


class SourcePrompter(Protocol):
    """Supplies a source for each credential a bundle requires."""

    def prompt_source(self, requirement: CredentialRequirement) -> Source:
        ...


class SilentPrompter:
    """Non-interactive prompter that uses a placeholder for every credential."""

    def prompt_source(self, requirement: CredentialRequirement) -> Source:
        return Source.literal(PLACEHOLDER_VALUE)


class ClickPrompter:
    """Interactive prompter using click prompts on the controlling terminal.

    Specific values are read with hidden input since they are the secret
    itself; the other kinds only name where the secret lives.
    """

    def prompt_source(self, requirement: CredentialRequirement) -> Source:
        if requirement.description:
            click.echo(click.style(requirement.description, dim=True))

        choice = click.prompt(
            f"How would you like to set credential {requirement.name!r}",
            type=click.Choice(list(SOURCE_CHOICES)),
            default="environment variable" if requirement.env else "specific value",
        )
        kind, question = SOURCE_CHOICES[choice]

        value = click.prompt(
            question.format(name=requirement.name),
            default=requirement.env if kind == SourceKind.ENV and requirement.env else None,
            hide_input=kind == SourceKind.VALUE,
        )

        log.debug("credential_source_selected", credential=requirement.name, kind=kind.value)
        return Source(kind=kind, value=value)
