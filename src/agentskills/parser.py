"""Locate SKILL.md, extract its YAML frontmatter and read skill properties."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import (
    EmptyFieldError,
    MissingFrontmatterError,
    SkillFileNotFoundError,
    SkillIOError,
    SkillParseError,
)
from .fs import FileSystem
from .models import SkillProperties

logger = logging.getLogger(__name__)

# Checked in this order; the uppercase name wins when both exist.
SKILL_FILE_NAMES = ("SKILL.md", "skill.md")

FRONTMATTER_DELIMITER = "---"


def find_skill_md(fs: FileSystem, skill_path: str | Path) -> Path:
    """Return the manifest path inside ``skill_path``."""
    skill_path = Path(skill_path)
    for file_name in SKILL_FILE_NAMES:
        candidate = skill_path / file_name
        if fs.exists(candidate):
            return candidate
    raise SkillFileNotFoundError()


def resolve_skill_path(path: str | Path) -> Path:
    """Map a path to a SKILL.md/skill.md file onto its skill directory."""
    path = Path(path)
    if path.name in SKILL_FILE_NAMES:
        return path.parent
    return path


def _split_frontmatter(content: str) -> str:
    lines = content.lstrip("\ufeff").splitlines()
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        raise MissingFrontmatterError()

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == FRONTMATTER_DELIMITER:
            return "\n".join(lines[1:index])

    raise MissingFrontmatterError()


def parse_frontmatter(content: str) -> dict[str, Any]:
    """Parse the YAML header block at the top of a manifest.

    The document must open with a ``---`` line and close the header with a
    second ``---`` line. Anything after the closing delimiter is ignored.

    Raises:
        MissingFrontmatterError: if a delimiter is missing or the header is empty.
        SkillParseError: if the header is not valid YAML or not a mapping.
    """
    header = _split_frontmatter(content)

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise SkillParseError(str(e)) from e

    if data is None or data == {}:
        raise MissingFrontmatterError()
    if not isinstance(data, dict):
        raise SkillParseError(f"frontmatter must be a mapping, got {type(data).__name__}")

    return data


def read_properties(fs: FileSystem, skill_path: str | Path) -> tuple[SkillProperties, list[str]]:
    """Read a skill's properties and the raw frontmatter keys.

    Args:
        fs: File access capability.
        skill_path: The skill directory.

    Returns:
        The typed properties, and every key literally present in the
        frontmatter (including keys the typed model ignores).
    """
    skill_md = find_skill_md(fs, skill_path)
    logger.debug(f"Reading skill manifest {skill_md}")

    try:
        content = fs.read_text(skill_md)
    except (OSError, UnicodeDecodeError) as e:
        raise SkillIOError(str(skill_md), e) from e

    data = parse_frontmatter(content)
    keys = [str(key) for key in data]

    for field in ("name", "description"):
        if data.get(field) is None:
            raise EmptyFieldError(field)

    try:
        props = SkillProperties.model_validate(data)
    except ValidationError as e:
        raise SkillParseError(str(e)) from e

    if props.name == "":
        raise EmptyFieldError("name")
    if props.description == "":
        raise EmptyFieldError("description")

    return props, keys
