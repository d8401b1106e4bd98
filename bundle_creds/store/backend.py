"""Abstract backend protocol for credential set storage."""

from typing import Protocol

from bundle_creds.models import CredentialSet


class CredentialSetStore(Protocol):
    """Protocol defining the interface for credential set storage backends.

    A store is keyed persistence of whole credential set records by name.
    It owns the physical layout; callers own the meaning of the record's
    fields (timestamps, name).
    """

    @property
    def name(self) -> str:
        """Backend identifier (e.g., 'filesystem', 'memory')."""
        ...

    def read(self, name: str) -> CredentialSet:
        """Retrieve a credential set.

        Args:
            name: Credential set name

        Returns:
            The stored credential set

        Raises:
            CredentialSetNotFoundError: If no set with this name exists
            StoreError: If the stored record cannot be decoded
        """
        ...

    def write(self, credential_set: CredentialSet) -> None:
        """Store a credential set under its name, replacing any previous record.

        Args:
            credential_set: The record to persist

        Raises:
            NameInvalidError: If the set name is not a valid store key
            OSError: If the record cannot be written
        """
        ...

    def list(self) -> list[CredentialSet]:
        """Return every stored credential set.

        Returns:
            Stored sets in backend order; empty if nothing is stored
        """
        ...

    def delete(self, name: str) -> None:
        """Delete a credential set.

        Args:
            name: Credential set name

        Raises:
            CredentialSetNotFoundError: If no set with this name exists
        """
        ...
