"""Pytest configuration and shared fixtures."""

import io
import shutil
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import structlog

from bundle_creds.credentials import StaticBundleProvider
from bundle_creds.credentials.manager import CredentialSetManager
from bundle_creds.models import Bundle, CredentialEntry, CredentialRequirement, CredentialSet, Source
from bundle_creds.store import FileSystemStore, InMemoryStore

TESTDATA_DIR = Path(__file__).parent / "testdata"

KOOL_TIMESTAMP = datetime(2019, 6, 24, 16, 7, 57, 415378, tzinfo=timezone(timedelta(hours=-5)))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any structlog configuration a CLI invocation installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def testdata_dir() -> Path:
    return TESTDATA_DIR


@pytest.fixture
def kool_kreds() -> CredentialSet:
    """Credential set with one credential of every source kind."""
    return CredentialSet(
        name="kool-kreds",
        created=KOOL_TIMESTAMP,
        modified=KOOL_TIMESTAMP,
        credentials=[
            CredentialEntry(name="kool-config", source=Source.path("/path/to/kool-config")),
            CredentialEntry(name="kool-envvar", source=Source.env("KOOL_ENV_VAR")),
            CredentialEntry(name="kool-cmd", source=Source.command("echo 'kool'")),
            CredentialEntry(name="kool-val", source=Source.literal("kool")),
        ],
    )


@pytest.fixture
def test_bundle() -> Bundle:
    return Bundle(
        name="testbundle",
        credentials=[
            CredentialRequirement(name="kubeconfig", path="/root/.kube/config"),
            CredentialRequirement(name="api-token", env="API_TOKEN"),
        ],
    )


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def credentials_dir(tmp_path: Path) -> Path:
    """Credential directory that does not exist yet."""
    return tmp_path / "home" / "credentials"


@pytest.fixture
def fs_store(credentials_dir: Path) -> FileSystemStore:
    return FileSystemStore(credentials_dir)


@pytest.fixture
def populated_fs_store(credentials_dir: Path) -> FileSystemStore:
    """File system store seeded with the kool-kreds test data."""
    shutil.copytree(TESTDATA_DIR / "credentials", credentials_dir)
    return FileSystemStore(credentials_dir)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def manager(memory_store: InMemoryStore, output: io.StringIO, test_bundle: Bundle) -> CredentialSetManager:
    """Manager over an empty in-memory store with a fixed clock."""
    return CredentialSetManager(
        store=memory_store,
        out=output,
        bundles=StaticBundleProvider(test_bundle),
        clock=lambda: KOOL_TIMESTAMP,
    )
