"""In-memory credential set store.

Useful for tests and for embedding the lifecycle manager where nothing
should touch the disk. Records are deep-copied on the way in and out so
callers cannot mutate what is stored.
"""

import structlog

from bundle_creds.exceptions import CredentialSetNotFoundError
from bundle_creds.models import CredentialSet
from bundle_creds.store.filesystem import NOT_FOUND_MESSAGE

log = structlog.get_logger(__name__)


class InMemoryStore:
    """Dictionary-backed store that lists records in insertion order."""

    def __init__(self, credential_sets: list[CredentialSet] | None = None) -> None:
        self._records: dict[str, CredentialSet] = {}
        for credential_set in credential_sets or []:
            self.write(credential_set)

    @property
    def name(self) -> str:
        return "memory"

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def read(self, name: str) -> CredentialSet:
        try:
            return self._records[name].model_copy(deep=True)
        except KeyError:
            raise CredentialSetNotFoundError(NOT_FOUND_MESSAGE, name=name) from None

    def write(self, credential_set: CredentialSet) -> None:
        self._records[credential_set.name] = credential_set.model_copy(deep=True)
        log.debug("credential_set_written", name=credential_set.name, backend=self.name)

    def list(self) -> list[CredentialSet]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    def delete(self, name: str) -> None:
        if self._records.pop(name, None) is None:
            raise CredentialSetNotFoundError(NOT_FOUND_MESSAGE, name=name)
        log.debug("credential_set_removed", name=name, backend=self.name)
