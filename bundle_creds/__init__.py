"""bundle-creds: credential sets for application bundles."""

__version__ = "0.1.0"
