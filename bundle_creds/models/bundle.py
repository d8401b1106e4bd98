"""Bundle manifest models.

Only the parts of a bundle manifest needed to generate credential sets are
modeled: the bundle name (the default credential set name) and the ordered
list of credentials the bundle requires.
"""

from pydantic import BaseModel, Field


class CredentialRequirement(BaseModel):
    """A credential a bundle needs at run time.

    ``env`` and ``path`` describe where the bundle expects the credential
    inside its own runtime, not where the value comes from locally.
    """

    name: str = Field(..., min_length=1, description="Credential name")
    description: str | None = Field(default=None, description="Human-readable purpose")
    env: str | None = Field(default=None, description="Environment variable the bundle reads")
    path: str | None = Field(default=None, description="File path the bundle reads")
    required: bool = Field(default=True, description="Whether the bundle fails without it")


class Bundle(BaseModel):
    """The subset of a bundle manifest relevant to credentials."""

    name: str = Field(..., min_length=1, description="Bundle name")
    version: str | None = Field(default=None, description="Bundle version")
    description: str | None = Field(default=None, description="Bundle description")
    credentials: list[CredentialRequirement] = Field(default_factory=list)
