"""Tests for bundle_creds/models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from bundle_creds.enums import SourceKind
from bundle_creds.models import Bundle, CredentialEntry, CredentialSet, Source


class TestSource:
    """Tests for the Source discriminant + payload model."""

    @pytest.mark.parametrize(
        "factory,kind",
        [
            (Source.path, SourceKind.PATH),
            (Source.env, SourceKind.ENV),
            (Source.command, SourceKind.COMMAND),
            (Source.literal, SourceKind.VALUE),
        ],
    )
    def test_constructors(self, factory, kind):
        source = factory("payload")

        assert source.kind is kind
        assert source.value == "payload"

    def test_serializes_to_single_key_mapping(self):
        assert Source.env("KOOL_ENV_VAR").model_dump() == {"env": "KOOL_ENV_VAR"}

    def test_parses_single_key_mapping(self):
        source = Source.model_validate({"command": "echo 'kool'"})

        assert source == Source.command("echo 'kool'")

    def test_literal_value_key_is_not_confused_with_field(self):
        source = Source.model_validate({"value": "kool"})

        assert source.kind is SourceKind.VALUE
        assert source.value == "kool"

    def test_rejects_multiple_kinds(self):
        with pytest.raises(ValidationError, match="exactly one"):
            Source.model_validate({"env": "A", "path": "/b"})

    def test_rejects_empty_mapping(self):
        with pytest.raises(ValidationError, match="exactly one"):
            Source.model_validate({})

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError, match="unknown source kind 'secret'"):
            Source.model_validate({"secret": "shh"})

    def test_is_immutable(self):
        source = Source.env("A")

        with pytest.raises(ValidationError):
            source.value = "B"


class TestCredentialSet:
    """Tests for CredentialSet."""

    def test_document_key_order(self, kool_kreds):
        document = kool_kreds.to_document()

        assert list(document) == ["name", "created", "modified", "credentials"]
        assert list(document["credentials"][0]) == ["name", "source"]

    def test_document_keeps_declaration_order(self, kool_kreds):
        names = [entry["name"] for entry in kool_kreds.to_document()["credentials"]]

        assert names == ["kool-config", "kool-envvar", "kool-cmd", "kool-val"]

    def test_json_round_trip(self, kool_kreds):
        restored = CredentialSet.model_validate_json(kool_kreds.model_dump_json())

        assert restored == kool_kreds
        assert restored.created.utcoffset() == timedelta(hours=-5)

    def test_created_after_modified_rejected(self, kool_kreds):
        with pytest.raises(ValidationError, match="must not be later than modified"):
            CredentialSet(
                name="backwards",
                created=kool_kreds.created,
                modified=kool_kreds.created - timedelta(seconds=1),
            )

    def test_naive_timestamps_rejected(self):
        with pytest.raises(ValidationError):
            CredentialSet.model_validate(
                {"name": "old", "created": "2019-06-24T16:07:57", "modified": "2019-06-24T16:07:57"}
            )

    def test_credentials_default_empty(self, kool_kreds):
        credential_set = CredentialSet(name="empty", created=kool_kreds.created, modified=kool_kreds.modified)

        assert credential_set.credentials == []

    def test_entry_requires_name(self):
        with pytest.raises(ValidationError):
            CredentialEntry(name="", source=Source.literal("x"))


class TestBundle:
    """Tests for the bundle manifest model."""

    def test_requirement_defaults(self):
        bundle = Bundle.model_validate({"name": "b", "credentials": [{"name": "token"}]})

        requirement = bundle.credentials[0]
        assert requirement.required is True
        assert requirement.env is None
        assert requirement.path is None

    def test_extra_manifest_keys_ignored(self):
        bundle = Bundle.model_validate({"name": "b", "mixins": ["exec"], "install": []})

        assert bundle.credentials == []
