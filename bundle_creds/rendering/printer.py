"""
Rendering of credential sets as JSON, YAML or plain-text tables.

All three formats preserve the record order they are given and the
declaration order of each set's credentials; nothing is re-sorted here.

Formats:
    json: Pretty-printed with 2-space indentation, one trailing newline.
    yaml: Block style with keys in model order; each document is followed
        by a blank line.
    table: For a list of sets, a ``NAME   MODIFIED`` column listing. For a
        single set, a summary block followed by a bordered credential table::

            Name: kool-kreds
            Created: 2019-06-24
            Modified: 2019-06-24

            --------------------------------------------------
              Name         Local Source          Source Type
            --------------------------------------------------
              kool-config  /path/to/kool-config  path

Dates in tables are truncated to ``YYYY-MM-DD``.
"""

import json
from collections.abc import Sequence
from datetime import datetime
from typing import Any

import yaml

from bundle_creds.credentials.sources import classify_source
from bundle_creds.enums import OutputFormat
from bundle_creds.exceptions import FormatInvalidError
from bundle_creds.models import CredentialSet

DATE_FORMAT = "%Y-%m-%d"
COLUMN_PADDING = 3


def parse_format(value: str | OutputFormat) -> OutputFormat:
    """Convert a user-supplied format string to an OutputFormat.

    Raises:
        FormatInvalidError: If the value is not json, yaml or table
    """
    try:
        return OutputFormat(value)
    except ValueError:
        raise FormatInvalidError(str(value)) from None


class _DocumentDumper(yaml.SafeDumper):
    """SafeDumper emitting datetimes as plain ISO-8601 timestamps."""


def _represent_datetime(dumper: yaml.SafeDumper, data: datetime) -> yaml.ScalarNode:
    return dumper.represent_scalar("tag:yaml.org,2002:timestamp", data.isoformat())


_DocumentDumper.add_representer(datetime, _represent_datetime)


def _json_default(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(document: Any) -> str:
    return json.dumps(document, indent=2, default=_json_default) + "\n"


def to_yaml(document: Any) -> str:
    body = yaml.dump(
        document,
        Dumper=_DocumentDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return body + "\n"


def _format_date(value: datetime) -> str:
    return value.strftime(DATE_FORMAT)


def _format_columns(rows: Sequence[Sequence[str]]) -> str:
    """Left-align rows into columns separated by at least COLUMN_PADDING spaces.

    The last column is never padded, so lines carry no trailing whitespace.
    """
    widths = [max(len(row[i]) for row in rows) + COLUMN_PADDING for i in range(len(rows[0]) - 1)]
    lines = []
    for row in rows:
        leading = "".join(cell.ljust(width) for cell, width in zip(row, widths))
        lines.append(leading + row[-1])
    return "\n".join(lines) + "\n"


def _format_bordered_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = [max(len(row[i]) for row in [header, *rows]) for i in range(len(header))]

    def format_row(cells: Sequence[str]) -> str:
        return "  " + "".join(f"{cell.ljust(width)}  " for cell, width in zip(cells, widths))

    header_line = format_row(header)
    border = "-" * len(header_line)
    lines = [border, header_line, border, *(format_row(row) for row in rows)]
    return "\n".join(lines) + "\n"


def _list_table(credential_sets: Sequence[CredentialSet]) -> str:
    rows = [["NAME", "MODIFIED"]]
    rows.extend([c.name, _format_date(c.modified)] for c in credential_sets)
    return _format_columns(rows)


def _show_table(credential_set: CredentialSet) -> str:
    summary = (
        f"Name: {credential_set.name}\n"
        f"Created: {_format_date(credential_set.created)}\n"
        f"Modified: {_format_date(credential_set.modified)}\n"
    )

    rows = []
    for entry in credential_set.credentials:
        value, label = classify_source(entry.source)
        rows.append([entry.name, value, label])

    return summary + "\n" + _format_bordered_table(["Name", "Local Source", "Source Type"], rows)


def render_credential_sets(credential_sets: Sequence[CredentialSet], output: str | OutputFormat) -> str:
    """Render a collection of credential sets.

    Args:
        credential_sets: Sets in the order they should appear
        output: json, yaml or table

    Returns:
        Rendered text, ending in a newline

    Raises:
        FormatInvalidError: If output is not a supported format
    """
    fmt = parse_format(output)

    if fmt == OutputFormat.JSON:
        return to_json([c.to_document() for c in credential_sets])
    if fmt == OutputFormat.YAML:
        return to_yaml([c.to_document() for c in credential_sets])
    return _list_table(credential_sets)


def render_credential_set(credential_set: CredentialSet, output: str | OutputFormat) -> str:
    """Render a single credential set including every credential's source.

    Raises:
        FormatInvalidError: If output is not a supported format
    """
    fmt = parse_format(output)

    if fmt == OutputFormat.JSON:
        return to_json(credential_set.to_document())
    if fmt == OutputFormat.YAML:
        return to_yaml(credential_set.to_document())
    return _show_table(credential_set)
