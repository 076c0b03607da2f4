"""Error taxonomy for reading and validating skill manifests.

Structural failures (I/O, missing manifest, missing frontmatter, unparseable
header, empty required field) abort a read immediately. Content violations are
collected by the validator and reported together in a single
:class:`SkillValidationError`.
"""

from __future__ import annotations


class SkillError(Exception):
    """Base error for skill parsing/validation."""


class SkillIOError(SkillError):
    """Raised when the manifest cannot be read or is not valid UTF-8."""

    def __init__(self, path: str, cause: OSError | UnicodeDecodeError):
        self.path = path
        self.cause = cause
        super().__init__(f"IO error: {cause}")


class SkillParseError(SkillError):
    """Raised when SKILL.md frontmatter is malformed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"YAML parsing error: {detail}")


class SkillFileNotFoundError(SkillError):
    def __init__(self):
        super().__init__("No SKILL.md or skill.md found")


class MissingFrontmatterError(SkillError):
    def __init__(self):
        super().__init__("No valid frontmatter found")


class EmptyFieldError(SkillError):
    """Raised when a required field is missing or empty before validation."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field is empty: {field}")


class SkillValidationError(SkillError):
    """Raised when skill metadata violates the manifest rules.

    Carries every violation found, in evaluation order.
    """

    def __init__(self, errors: list[str]):
        if not errors:
            raise ValueError("SkillValidationError requires at least one error")
        self.errors = list(errors)
        super().__init__(f"Validation failed: {'; '.join(self.errors)}")
