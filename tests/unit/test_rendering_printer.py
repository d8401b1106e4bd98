"""Tests for bundle_creds/rendering/printer.py."""

from datetime import UTC, datetime

import pytest

from bundle_creds.enums import OutputFormat
from bundle_creds.exceptions import FormatInvalidError
from bundle_creds.models import CredentialSet
from bundle_creds.rendering import parse_format, render_credential_set, render_credential_sets

KOOL_KREDS_JSON = """{
  "name": "kool-kreds",
  "created": "2019-06-24T16:07:57.415378-05:00",
  "modified": "2019-06-24T16:07:57.415378-05:00",
  "credentials": [
    {
      "name": "kool-config",
      "source": {
        "path": "/path/to/kool-config"
      }
    },
    {
      "name": "kool-envvar",
      "source": {
        "env": "KOOL_ENV_VAR"
      }
    },
    {
      "name": "kool-cmd",
      "source": {
        "command": "echo 'kool'"
      }
    },
    {
      "name": "kool-val",
      "source": {
        "value": "kool"
      }
    }
  ]
}
"""

KOOL_KREDS_YAML = """name: kool-kreds
created: 2019-06-24T16:07:57.415378-05:00
modified: 2019-06-24T16:07:57.415378-05:00
credentials:
- name: kool-config
  source:
    path: /path/to/kool-config
- name: kool-envvar
  source:
    env: KOOL_ENV_VAR
- name: kool-cmd
  source:
    command: echo 'kool'
- name: kool-val
  source:
    value: kool

"""

KOOL_KREDS_TABLE = "\n".join(
    [
        "Name: kool-kreds",
        "Created: 2019-06-24",
        "Modified: 2019-06-24",
        "",
        "--------------------------------------------------",
        "  Name         Local Source          Source Type  ",
        "--------------------------------------------------",
        "  kool-config  /path/to/kool-config  path         ",
        "  kool-envvar  KOOL_ENV_VAR          env          ",
        "  kool-cmd     echo 'kool'           command      ",
        "  kool-val     kool                  value        ",
        "",
    ]
)


class TestParseFormat:
    """Tests for parse_format."""

    @pytest.mark.parametrize("value", ["json", "yaml", "table"])
    def test_known_formats(self, value):
        assert parse_format(value) == OutputFormat(value)

    def test_enum_passes_through(self):
        assert parse_format(OutputFormat.YAML) is OutputFormat.YAML

    def test_unknown_format(self):
        with pytest.raises(FormatInvalidError) as exc_info:
            parse_format("wingdings")

        assert str(exc_info.value) == "invalid format: wingdings"
        assert exc_info.value.value == "wingdings"


class TestRenderCredentialSet:
    """Tests for rendering a single credential set."""

    def test_json(self, kool_kreds):
        assert render_credential_set(kool_kreds, "json") == KOOL_KREDS_JSON

    def test_yaml(self, kool_kreds):
        assert render_credential_set(kool_kreds, "yaml") == KOOL_KREDS_YAML

    def test_table(self, kool_kreds):
        assert render_credential_set(kool_kreds, "table") == KOOL_KREDS_TABLE

    def test_table_without_credentials(self, kool_kreds):
        empty = kool_kreds.model_copy(update={"credentials": []})

        rendered = render_credential_set(empty, OutputFormat.TABLE)

        assert rendered.splitlines() == [
            "Name: kool-kreds",
            "Created: 2019-06-24",
            "Modified: 2019-06-24",
            "",
            "-" * 35,
            "  Name  Local Source  Source Type  ",
            "-" * 35,
        ]

    def test_invalid_format(self, kool_kreds):
        with pytest.raises(FormatInvalidError, match="invalid format: xml"):
            render_credential_set(kool_kreds, "xml")


class TestRenderCredentialSets:
    """Tests for rendering a collection of credential sets."""

    def test_empty_json(self):
        assert render_credential_sets([], "json") == "[]\n"

    def test_empty_yaml(self):
        assert render_credential_sets([], "yaml") == "[]\n\n"

    def test_empty_table_is_header_only(self):
        assert render_credential_sets([], "table") == "NAME   MODIFIED\n"

    def test_table(self, kool_kreds):
        rendered = render_credential_sets([kool_kreds], "table")

        assert rendered == "NAME         MODIFIED\nkool-kreds   2019-06-24\n"

    def test_table_preserves_order_and_truncates_dates(self, kool_kreds):
        later = CredentialSet(
            name="a-later-set",
            created=datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC),
            modified=datetime(2021, 12, 31, 23, 59, 59, tzinfo=UTC),
        )

        lines = render_credential_sets([kool_kreds, later], "table").splitlines()

        assert lines == [
            "NAME          MODIFIED",
            "kool-kreds    2019-06-24",
            "a-later-set   2021-12-31",
        ]

    def test_json_list(self, kool_kreds):
        rendered = render_credential_sets([kool_kreds], "json")

        assert rendered.startswith("[\n  {\n")
        assert '"name": "kool-kreds"' in rendered

    def test_yaml_list(self, kool_kreds):
        rendered = render_credential_sets([kool_kreds], "yaml")

        assert rendered.startswith("- name: kool-kreds\n")
        assert rendered.endswith("\n\n")

    def test_invalid_format(self):
        with pytest.raises(FormatInvalidError, match="invalid format: wingdings"):
            render_credential_sets([], "wingdings")
