"""
Credential set models.

A credential set is a named, timestamped collection of credential entries.
Each entry binds a credential name to a source: the mechanism used to obtain
the secret when the bundle runs. Sources are a closed set of four kinds and
serialize to a single-key mapping::

    {"name": "kool-envvar", "source": {"env": "KOOL_ENV_VAR"}}

Field declaration order is the serialization order, so documents always come
out as ``name, created, modified, credentials``.

Example:
    >>> creds = CredentialSet(
    ...     name="kool-kreds",
    ...     created=now,
    ...     modified=now,
    ...     credentials=[CredentialEntry(name="kool-envvar", source=Source.env("KOOL_ENV_VAR"))],
    ... )
    >>> creds.to_document()["credentials"][0]["source"]
    {'env': 'KOOL_ENV_VAR'}
"""

from __future__ import annotations

from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_serializer, model_validator

from bundle_creds.enums import SourceKind


class Source(BaseModel):
    """Where a credential's value comes from.

    Modeled as a validated discriminant (``kind``) plus its single string
    payload (``value``), so exactly one variant is ever active.
    """

    model_config = ConfigDict(frozen=True)

    kind: SourceKind
    value: str

    @model_validator(mode="before")
    @classmethod
    def _from_mapping(cls, data: Any) -> Any:
        """Accept the serialized ``{kind: value}`` shape as well as field kwargs."""
        if not isinstance(data, dict) or "kind" in data:
            return data

        if len(data) != 1:
            raise ValueError(f"source must have exactly one of {_KIND_NAMES}, got {sorted(data)}")

        key, value = next(iter(data.items()))
        try:
            kind = SourceKind(key)
        except ValueError:
            raise ValueError(f"unknown source kind '{key}', expected one of {_KIND_NAMES}") from None
        return {"kind": kind, "value": value}

    @model_serializer
    def _to_mapping(self) -> dict[str, str]:
        return {self.kind.value: self.value}

    @classmethod
    def path(cls, value: str) -> Source:
        return cls(kind=SourceKind.PATH, value=value)

    @classmethod
    def env(cls, value: str) -> Source:
        return cls(kind=SourceKind.ENV, value=value)

    @classmethod
    def command(cls, value: str) -> Source:
        return cls(kind=SourceKind.COMMAND, value=value)

    @classmethod
    def literal(cls, value: str) -> Source:
        return cls(kind=SourceKind.VALUE, value=value)


_KIND_NAMES = ", ".join(kind.value for kind in SourceKind)


class CredentialEntry(BaseModel):
    """One named credential within a set."""

    name: str = Field(..., min_length=1, description="Credential name, unique within its set")
    source: Source


class CredentialSet(BaseModel):
    """A named collection of credential entries.

    Attributes:
        name: Unique key of the set in the store
        created: Set once, on the first successful write
        modified: Updated on every successful write
        credentials: Entries in declaration order

    Both timestamps must carry a UTC offset; naive values are rejected.
    """

    name: str
    created: AwareDatetime
    modified: AwareDatetime
    credentials: list[CredentialEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_timestamps(self) -> CredentialSet:
        """Ensure a set was never modified before it was created."""
        if self.created > self.modified:
            raise ValueError(
                f"created ({self.created.isoformat()}) must not be later than modified ({self.modified.isoformat()})"
            )
        return self

    def to_document(self) -> dict[str, Any]:
        """Return the set as an ordered mapping with datetimes left intact."""
        return self.model_dump()
