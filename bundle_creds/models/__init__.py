"""Data models for credential sets and bundle manifests."""

from bundle_creds.models.bundle import Bundle, CredentialRequirement
from bundle_creds.models.credential_set import CredentialEntry, CredentialSet, Source

__all__ = [
    "Bundle",
    "CredentialEntry",
    "CredentialRequirement",
    "CredentialSet",
    "Source",
]
