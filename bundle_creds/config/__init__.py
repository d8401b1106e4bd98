"""Configuration for bundle-creds."""

from bundle_creds.config.settings import BundleCredsSettings, load_settings

__all__ = ["BundleCredsSettings", "load_settings"]
