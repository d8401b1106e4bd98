"""Custom exception hierarchy for bundle-creds.

This module defines a structured exception hierarchy so that callers (most
notably the CLI) can tell the failure kinds apart and print a single
descriptive line for each.

Exception Hierarchy:
    BundleCredsError (base)
    ├── ConfigurationError
    ├── CredentialSetError
    │   ├── NameInvalidError
    │   └── CredentialSetNotFoundError
    ├── FormatInvalidError
    └── StoreError

Errors raised by the operating system while reading or writing the store
(``OSError`` and subclasses) are not part of this tree; they
propagate unchanged.

Example Usage:
    >>> from bundle_creds.exceptions import CredentialSetNotFoundError
    >>> try:
    ...     store.read("kool-kreds")
    ... except CredentialSetNotFoundError as e:
    ...     print(e.message)
"""


class BundleCredsError(Exception):
    """Base exception for all bundle-creds errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(BundleCredsError):
    """Configuration-related errors.

    Raised when the settings file or the bundle manifest is missing,
    unreadable, or does not validate.
    """

    pass


class CredentialSetError(BundleCredsError):
    """Base class for errors about a specific credential set.

    Unlike other errors in the tree, the string form is exactly ``message``;
    the offending name is kept on the instance rather than appended.

    Attributes:
        message: Human-readable error description
        name: The credential set name involved, if known
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            name: Credential set name involved in the failure
        """
        self.name = name
        super().__init__(message)


class NameInvalidError(CredentialSetError):
    """Proposed credential set name failed validation."""

    pass


class CredentialSetNotFoundError(CredentialSetError):
    """Credential set does not exist in the store."""

    pass


class FormatInvalidError(BundleCredsError):
    """Requested output format is not one of json, yaml or table.

    Attributes:
        value: The unrecognized format string
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid format: {value}")


class StoreError(BundleCredsError):
    """A stored record exists but could not be decoded.

    Raised by store backends when a record is corrupt (invalid JSON, or a
    document that does not validate as a credential set). The original
    exception is always chained.
    """

    pass
