"""Persistent storage for credential sets.

This package provides:
- A backend protocol keyed by credential set name
- A file system backend (one JSON document per set)
- An in-memory backend for tests and embedding

Example usage:

    from bundle_creds.store import FileSystemStore

    store = FileSystemStore(settings.credentials_dir)
    store.write(credential_set)
    names = [c.name for c in store.list()]
"""

from .backend import CredentialSetStore
from .filesystem import FileSystemStore
from .memory import InMemoryStore

__all__ = [
    "CredentialSetStore",
    "FileSystemStore",
    "InMemoryStore",
]
