"""Display classification of credential sources.

Classification only describes how a value would be obtained. It never
reads the environment variable, executes the command, or opens the path.
"""

from bundle_creds.enums import SourceKind
from bundle_creds.models import Source

_TYPE_LABELS: dict[SourceKind, str] = {
    SourceKind.ENV: "env",
    SourceKind.PATH: "path",
    SourceKind.COMMAND: "command",
    SourceKind.VALUE: "value",
}


def classify_source(source: Source) -> tuple[str, str]:
    """Map a source to its display value and type label.

    Args:
        source: The credential source to describe

    Returns:
        Tuple of (display value, type label), e.g. ("KOOL_ENV_VAR", "env")

    Example:
        >>> classify_source(Source.command("echo 'kool'"))
        ("echo 'kool'", 'command')
    """
    return source.value, _TYPE_LABELS[source.kind]
