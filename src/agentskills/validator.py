"""Validate a skill directory against the manifest naming and length rules.

Every rule group runs and contributes to one pooled list of messages, so a
single call reports all problems. Structural failures raised while reading
the manifest still abort immediately.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Callable, Iterable
from pathlib import Path

import regex

from .errors import SkillValidationError
from .fs import FileSystem
from .models import SkillProperties, ValidationReport
from .parser import read_properties

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
MAX_COMPATIBILITY_LENGTH = 500

ALLOWED_FRONTMATTER_FIELDS = (
    "name",
    "description",
    "license",
    "allowed-tools",
    "metadata",
    "compatibility",
)

Normalizer = Callable[[str], str]

# Unicode Alphabetic covers combining vowel signs (Mc/Mn) used by Indic scripts
_NAME_CHARS = regex.compile(r"[\p{Alphabetic}\p{N}-]*")


def normalize_name(value: str) -> str:
    """Apply Unicode NFKC normalization."""
    return unicodedata.normalize("NFKC", value)


def validate_allowed_fields(keys: Iterable[str]) -> list[str]:
    extra_fields = sorted(key for key in keys if key not in ALLOWED_FRONTMATTER_FIELDS)
    if not extra_fields:
        return []
    return [
        f"Unexpected fields in frontmatter: {', '.join(extra_fields)}. "
        f"Only {', '.join(ALLOWED_FRONTMATTER_FIELDS)} are allowed."
    ]


def validate_name(name: str, skill_path: str | Path, normalize: Normalizer = normalize_name) -> list[str]:
    """Check the declared name and that it matches the skill directory.

    Both the name and the directory's last path segment are normalized
    independently before comparison; messages show the un-normalized text.
    """
    trimmed = name.strip()
    if not trimmed:
        return ["name must be a non-empty string"]

    errors = []
    normalized = normalize(trimmed)

    if len(normalized) > MAX_NAME_LENGTH:
        errors.append(f"name exceeds {MAX_NAME_LENGTH} character limit")
    if normalized != normalized.lower():
        errors.append("name must be lowercase")
    if normalized.startswith("-") or normalized.endswith("-"):
        errors.append("name cannot start or end with a hyphen")
    if "--" in normalized:
        errors.append("name cannot contain consecutive hyphens")
    if not _NAME_CHARS.fullmatch(normalized):
        errors.append("name contains invalid characters; only letters, digits, and hyphens are allowed")

    dir_name = Path(skill_path).name
    if normalize(dir_name) != normalized:
        errors.append(f"name '{trimmed}' must match directory name '{dir_name}'")

    return errors


def validate_description(description: str) -> list[str]:
    if not description.strip():
        return ["description must be a non-empty string"]
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return [f"description exceeds {MAX_DESCRIPTION_LENGTH} character limit"]
    return []


def validate_compatibility(compatibility: str) -> list[str]:
    if len(compatibility) > MAX_COMPATIBILITY_LENGTH:
        return [f"compatibility exceeds {MAX_COMPATIBILITY_LENGTH} character limit"]
    return []


def collect_validation_errors(
    fs: FileSystem,
    skill_path: str | Path,
    normalize: Normalizer = normalize_name,
) -> ValidationReport:
    """Read a skill and run every rule group against it.

    Raises:
        SkillError: for structural failures (unreadable or missing manifest,
            missing frontmatter, malformed header, empty required field).

    Returns:
        A report holding either the properties or every violation found.
    """
    props, keys = read_properties(fs, skill_path)

    errors: list[str] = []
    errors.extend(validate_allowed_fields(keys))
    errors.extend(validate_name(props.name, skill_path, normalize))
    errors.extend(validate_description(props.description))
    if props.compatibility is not None:
        errors.extend(validate_compatibility(props.compatibility))

    if errors:
        logger.info(f"Skill at {skill_path} failed validation with {len(errors)} error(s)")
        return ValidationReport(errors=errors)
    return ValidationReport(properties=props)


def validate_skill(
    fs: FileSystem,
    skill_path: str | Path,
    normalize: Normalizer = normalize_name,
) -> SkillProperties:
    """Validate the skill at ``skill_path`` and return its properties.

    Raises:
        SkillValidationError: carrying every content violation found.
        SkillError: for structural failures, reported alone.
    """
    report = collect_validation_errors(fs, skill_path, normalize)
    if not report.is_valid:
        raise SkillValidationError(report.errors)
    return report.properties
