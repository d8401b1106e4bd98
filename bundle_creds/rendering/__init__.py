"""Output rendering for credential sets (JSON, YAML and tables)."""

from bundle_creds.rendering.printer import parse_format, render_credential_set, render_credential_sets

__all__ = ["parse_format", "render_credential_set", "render_credential_sets"]
