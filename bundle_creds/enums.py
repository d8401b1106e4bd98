"""Enumerations for credential sources and output formats."""

from enum import Enum


class SourceKind(str, Enum):
    """Mechanisms a credential's value can be obtained from at run time.

    The enum value doubles as the serialized key of a source mapping
    (``{"env": "KOOL_ENV_VAR"}``) and as the type label shown in tables.
    """

    PATH = "path"
    ENV = "env"
    COMMAND = "command"
    VALUE = "value"

    def __str__(self) -> str:
        return self.value


class OutputFormat(str, Enum):
    """Output representations supported by the renderer."""

    JSON = "json"
    YAML = "yaml"
    TABLE = "table"

    def __str__(self) -> str:
        return self.value
