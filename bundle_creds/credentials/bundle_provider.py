"""Sources of bundle credential requirements.

Generating a credential set needs to know which credentials the bundle
declares. Providers return a ``Bundle`` describing them; the manifest
provider reads a YAML manifest such as::

    name: kool-bundle
    version: 0.1.0
    credentials:
      - name: kubeconfig
        path: /root/.kube/config
      - name: token
        env: API_TOKEN
        description: Token used to call the API
"""

from pathlib import Path
from typing import Protocol

import structlog
import yaml
from pydantic import ValidationError

from bundle_creds.exceptions import ConfigurationError
from bundle_creds.models import Bundle

log = structlog.get_logger(__name__)


class BundleProvider(Protocol):
    """Supplies the bundle whose credential requirements are generated."""

    def load_bundle(self) -> Bundle:
        ...


class StaticBundleProvider:
    """Provider wrapping an already loaded bundle."""

    def __init__(self, bundle: Bundle) -> None:
        self.bundle = bundle

    def load_bundle(self) -> Bundle:
        return self.bundle


class ManifestBundleProvider:
    """Provider reading a YAML bundle manifest from disk."""

    def __init__(self, manifest_path: str | Path) -> None:
        self.manifest_path = Path(manifest_path)

    def load_bundle(self) -> Bundle:
        """Load and validate the manifest.

        Raises:
            ConfigurationError: If the manifest is missing, is not valid
                YAML, or does not describe a bundle
        """
        if not self.manifest_path.exists():
            raise ConfigurationError(f"Bundle manifest not found: {self.manifest_path}")

        try:
            with open(self.manifest_path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read bundle manifest: {self.manifest_path}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {self.manifest_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Bundle manifest must be a YAML object, not a list or scalar")

        try:
            bundle = Bundle.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid bundle manifest {self.manifest_path}: {e}") from e

        log.debug("bundle_loaded", bundle=bundle.name, credentials=len(bundle.credentials))
        return bundle
