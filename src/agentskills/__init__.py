from .errors import (
    EmptyFieldError,
    MissingFrontmatterError,
    SkillError,
    SkillFileNotFoundError,
    SkillIOError,
    SkillParseError,
    SkillValidationError,
)
from .fs import FileSystem, LocalFileSystem, MemoryFileSystem
from .models import SkillProperties, SkillWithLocation, ValidationReport
from .parser import find_skill_md, parse_frontmatter, read_properties, resolve_skill_path
from .prompts import html_escape, to_prompt, to_prompt_with_location
from .validator import collect_validation_errors, normalize_name, validate_skill

__all__ = [
    "SkillError",
    "SkillIOError",
    "SkillParseError",
    "SkillFileNotFoundError",
    "MissingFrontmatterError",
    "EmptyFieldError",
    "SkillValidationError",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "SkillProperties",
    "SkillWithLocation",
    "ValidationReport",
    "find_skill_md",
    "parse_frontmatter",
    "read_properties",
    "resolve_skill_path",
    "html_escape",
    "to_prompt",
    "to_prompt_with_location",
    "collect_validation_errors",
    "normalize_name",
    "validate_skill",
]
