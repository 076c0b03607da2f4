from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SkillProperties(BaseModel):
    """Properties declared in a skill's SKILL.md frontmatter.

    Unknown frontmatter keys are dropped here; the reader keeps the raw key
    list separately so the validator can report them.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    """The unique name/identifier of the skill. Must match its directory."""

    description: str
    """A description of what the skill does and when to use it."""

    compatibility: str | None = None
    """Optional environment or version compatibility notes."""

    license: str | None = None
    """Optional license information for the skill."""

    allowed_tools: str | None = Field(default=None, alias="allowed-tools")
    """Optional tools the skill may use, written as ``allowed-tools``."""

    metadata: dict[str, str] | None = None
    """Optional free-form string key/value pairs."""

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class SkillWithLocation(BaseModel):
    properties: SkillProperties
    location: str | None = None


class ValidationReport(BaseModel):
    """Outcome of validating one skill directory.

    Either ``errors`` is empty and ``properties`` holds the validated value,
    or ``errors`` lists every violation found.
    """

    model_config = ConfigDict(frozen=True)

    properties: SkillProperties | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
