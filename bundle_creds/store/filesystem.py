"""File system backend storing one JSON document per credential set.

Layout:
    Each set is written to ``<directory>/<name>.json``::

        {
          "name": "kool-kreds",
          "created": "2019-06-24T16:07:57.415378-05:00",
          "modified": "2019-06-24T16:07:57.415378-05:00",
          "credentials": [
            {"name": "kool-envvar", "source": {"env": "KOOL_ENV_VAR"}}
          ]
        }

The directory is created on the first write, never earlier, so reading or
listing an empty home does not leave anything behind on disk.
"""

from pathlib import Path

import structlog
from pydantic import ValidationError

from bundle_creds.credentials.validation import validate_name
from bundle_creds.exceptions import CredentialSetNotFoundError, NameInvalidError, StoreError
from bundle_creds.models import CredentialSet

log = structlog.get_logger(__name__)

NOT_FOUND_MESSAGE = "credential set does not exist"


class FileSystemStore:
    """Credential sets persisted as JSON files in a directory.

    Writes are atomic: the document is written to a temporary file in the
    same directory and renamed over the target, so a failed write never
    leaves a partial record. Operating system errors propagate unchanged.

    Example:
        >>> store = FileSystemStore(Path("~/.bundle-creds/credentials").expanduser())
        >>> store.write(credential_set)
        >>> store.read("kool-kreds").modified
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    @property
    def name(self) -> str:
        return "filesystem"

    def _get_path(self, name: str) -> Path:
        """Return the record path for a name.

        A name that fails validation can never have been written, and may
        point outside the directory, so it is reported as missing.
        """
        try:
            validate_name(name)
        except NameInvalidError:
            raise CredentialSetNotFoundError(NOT_FOUND_MESSAGE, name=name) from None
        return self.directory / f"{name}.json"

    def _load(self, path: Path) -> CredentialSet:
        """Decode a record file.

        Raises:
            StoreError: If the file is not a valid credential set document
        """
        try:
            return CredentialSet.model_validate_json(path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError) as e:
            raise StoreError(f"Stored credential set is corrupted: {path}") from e

    def read(self, name: str) -> CredentialSet:
        path = self._get_path(name)
        if not path.is_file():
            raise CredentialSetNotFoundError(NOT_FOUND_MESSAGE, name=name)
        return self._load(path)

    def write(self, credential_set: CredentialSet) -> None:
        validate_name(credential_set.name)
        self.directory.mkdir(parents=True, exist_ok=True)

        path = self._get_path(credential_set.name)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(credential_set.model_dump_json(indent=2), encoding="utf-8")

        # Atomic rename - safe on POSIX when same filesystem
        tmp_path.replace(path)
        log.debug("credential_set_written", name=credential_set.name, path=str(path))

    def list(self) -> list[CredentialSet]:
        if not self.directory.is_dir():
            return []
        return [self._load(path) for path in sorted(self.directory.glob("*.json"))]

    def delete(self, name: str) -> None:
        path = self._get_path(name)
        try:
            path.unlink()
        except FileNotFoundError:
            raise CredentialSetNotFoundError(NOT_FOUND_MESSAGE, name=name) from None
        log.debug("credential_set_removed", name=name, path=str(path))
