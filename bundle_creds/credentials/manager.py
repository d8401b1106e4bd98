"""
Credential set lifecycle: generate, list, show and delete.

The manager owns the meaning of a record's fields; persistence is
delegated to a ``CredentialSetStore`` and output goes to an injected text
sink, so nothing here depends on process-wide state.

Timestamp rules:
    - A new set gets ``created == modified == now``.
    - Regenerating an existing set replaces its credentials and bumps
      ``modified``; ``created`` is carried over unchanged.

Validation always happens before the store is touched: an invalid name
aborts ``generate`` without writing, and an invalid output format aborts
``list``/``show`` without reading.

Example:
    >>> manager = CredentialSetManager(
    ...     store=FileSystemStore(settings.credentials_dir),
    ...     bundles=ManifestBundleProvider("bundle.yaml"),
    ...     out=sys.stdout,
    ... )
    >>> manager.generate(GenerateOptions(name="kool-kreds", silent=True))
    >>> manager.show("kool-kreds", "json")
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TextIO

import structlog

from bundle_creds.credentials.bundle_provider import BundleProvider
from bundle_creds.credentials.prompts import ClickPrompter, SilentPrompter, SourcePrompter
from bundle_creds.credentials.validation import validate_name
from bundle_creds.enums import OutputFormat
from bundle_creds.exceptions import CredentialSetNotFoundError
from bundle_creds.models import CredentialEntry, CredentialSet
from bundle_creds.rendering.printer import parse_format, render_credential_set, render_credential_sets
from bundle_creds.store import CredentialSetStore

log = structlog.get_logger(__name__)

SHOW_NOT_FOUND_MESSAGE = "Credential set does not exist"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class GenerateOptions:
    """Options for generating a credential set.

    Attributes:
        name: Credential set name; the bundle name is used when empty
        silent: Use placeholder sources instead of prompting
    """

    name: str = ""
    silent: bool = False


class CredentialSetManager:
    """Orchestrates credential set operations against a store.

    Attributes:
        store: Persistence backend for credential sets
        bundles: Supplies the bundle whose credentials are generated
        out: Text sink that rendered output is written to
    """

    def __init__(
        self,
        store: CredentialSetStore,
        out: TextIO,
        bundles: BundleProvider | None = None,
        prompter: SourcePrompter | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the manager.

        Args:
            store: Persistence backend for credential sets
            out: Text sink for rendered output
            bundles: Bundle provider; required only by ``generate``
            prompter: Source prompter used for interactive generation.
                Defaults to prompting on the terminal.
            clock: Returns the current time; injectable for tests
        """
        self.store = store
        self.out = out
        self.bundles = bundles
        self.prompter = prompter or ClickPrompter()
        self.clock = clock

    def generate(self, options: GenerateOptions) -> CredentialSet:
        """Create or regenerate a credential set from the bundle's requirements.

        Args:
            options: Target name and silent/interactive flag

        Returns:
            The credential set as written

        Raises:
            NameInvalidError: If the (explicit or bundle-derived) name is invalid
            ConfigurationError: If the bundle cannot be loaded
            StoreError: If an existing record with this name is corrupt
            OSError: If the store cannot be written
        """
        if self.bundles is None:
            raise ValueError("A bundle provider is required to generate credential sets")

        name = options.name
        if name:
            validate_name(name)

        bundle = self.bundles.load_bundle()
        if not name:
            name = validate_name(bundle.name)

        now = self.clock()
        try:
            existing = self.store.read(name)
        except CredentialSetNotFoundError:
            existing = None

        prompter: SourcePrompter = SilentPrompter() if options.silent else self.prompter
        credentials = [
            CredentialEntry(name=requirement.name, source=prompter.prompt_source(requirement))
            for requirement in bundle.credentials
        ]

        if existing is None:
            credential_set = CredentialSet(name=name, created=now, modified=now, credentials=credentials)
        else:
            credential_set = CredentialSet(
                name=name,
                created=existing.created,
                modified=max(now, existing.created),
                credentials=credentials,
            )

        self.store.write(credential_set)
        log.info(
            "credential_set_generated",
            name=name,
            bundle=bundle.name,
            credentials=len(credentials),
            regenerated=existing is not None,
        )
        return credential_set

    def list(self, output: str | OutputFormat = OutputFormat.TABLE) -> None:
        """Render every stored credential set to the output sink.

        Raises:
            FormatInvalidError: If output is not a supported format
        """
        fmt = parse_format(output)
        credential_sets = self.store.list()
        self.out.write(render_credential_sets(credential_sets, fmt))
        log.debug("credential_sets_listed", count=len(credential_sets), output=fmt.value)

    def show(self, name: str, output: str | OutputFormat = OutputFormat.TABLE) -> None:
        """Render a single credential set to the output sink.

        Raises:
            FormatInvalidError: If output is not a supported format
            CredentialSetNotFoundError: If no set with this name exists
        """
        fmt = parse_format(output)
        try:
            credential_set = self.store.read(name)
        except CredentialSetNotFoundError:
            raise CredentialSetNotFoundError(SHOW_NOT_FOUND_MESSAGE, name=name) from None

        self.out.write(render_credential_set(credential_set, fmt))

    def delete(self, name: str) -> None:
        """Remove a credential set. Writes nothing to the output sink.

        Raises:
            CredentialSetNotFoundError: If no set with this name exists
        """
        self.store.delete(name)
        log.info("credential_set_deleted", name=name)
