"""Credential set lifecycle for bundle-creds.

This package provides:
- Name validation for credential sets
- Display classification of credential sources
- Source prompting (interactive and silent)
- Bundle requirement providers
- The lifecycle manager (``bundle_creds.credentials.manager``)

Example usage:

    from bundle_creds.credentials import classify_source, validate_name
    from bundle_creds.credentials.manager import CredentialSetManager, GenerateOptions

    validate_name("kool-kreds")
    value, label = classify_source(entry.source)
"""

from .bundle_provider import BundleProvider, ManifestBundleProvider, StaticBundleProvider
from .prompts import ClickPrompter, SilentPrompter, SourcePrompter
from .sources import classify_source
from .validation import validate_name

__all__ = [
    # Bundles
    "BundleProvider",
    "ManifestBundleProvider",
    "StaticBundleProvider",
    # Prompting
    "SourcePrompter",
    "SilentPrompter",
    "ClickPrompter",
    # Validation and display
    "classify_source",
    "validate_name",
]
