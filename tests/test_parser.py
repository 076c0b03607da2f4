from pathlib import Path

import pytest

from agentskills import (
    EmptyFieldError,
    LocalFileSystem,
    MissingFrontmatterError,
    SkillFileNotFoundError,
    SkillIOError,
    SkillParseError,
    find_skill_md,
    parse_frontmatter,
    read_properties,
    resolve_skill_path,
)


class UnreadableFileSystem:
    """Reports every file as present but fails to read it."""

    def exists(self, path):
        return True

    def read_text(self, path):
        raise PermissionError(f"Permission denied: {path}")

    def write_text(self, path, content):
        raise PermissionError(f"Permission denied: {path}")


def test_find_skill_md_exists(memfs):
    memfs.insert("/skill/SKILL.md", "---\nname: test\n---")
    found = find_skill_md(memfs, "/skill")
    assert found == Path("/skill/SKILL.md")
    assert memfs.exists(found)


def test_find_skill_md_lowercase(memfs):
    memfs.insert("/skill/skill.md", "---\nname: test\n---")
    assert find_skill_md(memfs, Path("/skill")) == Path("/skill/skill.md")


def test_find_skill_md_uppercase_precedence(memfs):
    memfs.insert("/skill/SKILL.md", "---\n---")
    memfs.insert("/skill/skill.md", "---\n---")
    assert find_skill_md(memfs, Path("/skill")) == Path("/skill/SKILL.md")


def test_find_skill_md_not_found(memfs):
    with pytest.raises(SkillFileNotFoundError, match="No SKILL.md or skill.md found"):
        find_skill_md(memfs, Path("/skill"))


def test_parse_frontmatter_valid():
    data = parse_frontmatter("---\nname: test\n---\nBody content")
    assert data == {"name": "test"}


def test_parse_frontmatter_no_body():
    assert parse_frontmatter("---\nname: test\n---") == {"name": "test"}


def test_parse_frontmatter_multiline():
    data = parse_frontmatter("---\nname: test\ndescription: |\n  Multi\n  line\n---")
    assert data["name"] == "test"
    assert data["description"].startswith("Multi\nline")


def test_parse_frontmatter_nested_metadata():
    data = parse_frontmatter("---\nname: test\nmetadata:\n  author: me\n  version: '1.0'\n---\n")
    assert data["metadata"] == {"author": "me", "version": "1.0"}


def test_parse_frontmatter_ignores_delimiters_in_body():
    data = parse_frontmatter("---\nname: test\n---\n# Title\n---\nmore: text\n")
    assert data == {"name": "test"}


def test_parse_frontmatter_allows_bom_and_crlf():
    data = parse_frontmatter("\ufeff---\r\nname: test\r\n---\r\nBody")
    assert data == {"name": "test"}


@pytest.mark.parametrize(
    "content",
    [
        "name: test\n---",
        "---\nname: test",
        "---\nname: test\nBody without a closing delimiter\n# ---",
        "",
        "Intro\n---\nname: test\n---",
        "---\n---",
        "---\n\n---\nBody",
    ],
)
def test_parse_frontmatter_missing(content):
    with pytest.raises(MissingFrontmatterError, match="No valid frontmatter found"):
        parse_frontmatter(content)


def test_parse_frontmatter_invalid_yaml():
    with pytest.raises(SkillParseError):
        parse_frontmatter("---\nname: [unclosed\n---")


def test_parse_frontmatter_not_a_mapping():
    with pytest.raises(SkillParseError, match="must be a mapping"):
        parse_frontmatter("---\n- a\n- b\n---")


def test_read_properties_basic(memfs):
    memfs.insert("/skill/SKILL.md", "---\nname: test-skill\ndescription: Test Description\n---")
    props, keys = read_properties(memfs, Path("/skill"))
    assert props.name == "test-skill"
    assert props.description == "Test Description"
    assert props.license is None
    assert keys == ["name", "description"]


def test_read_properties_with_optional_fields(memfs):
    content = (
        "---\nname: test-skill\ndescription: Test\nlicense: MIT\n"
        "compatibility: v1.0\nallowed-tools: bash python\n---"
    )
    memfs.insert("/skill/SKILL.md", content)
    props, _ = read_properties(memfs, "/skill")
    assert props.license == "MIT"
    assert props.compatibility == "v1.0"
    assert props.allowed_tools == "bash python"


def test_read_properties_keeps_unknown_keys(memfs):
    memfs.insert("/skill/SKILL.md", "---\nname: test-skill\ndescription: ok\nunknown-field: x\n---")
    props, keys = read_properties(memfs, "/skill")
    assert keys == ["name", "description", "unknown-field"]
    assert "unknown-field" not in props.model_dump(by_alias=True)


def test_read_properties_file_not_found(memfs):
    with pytest.raises(SkillFileNotFoundError):
        read_properties(memfs, Path("/nonexistent"))


def test_read_properties_io_error():
    with pytest.raises(SkillIOError, match="Permission denied") as exc_info:
        read_properties(UnreadableFileSystem(), Path("/skill"))
    assert isinstance(exc_info.value.cause, PermissionError)


@pytest.mark.parametrize(
    "content,field",
    [
        ("---\ndescription: Only has description, missing name\n---", "name"),
        ("---\nname: test-skill\n---", "description"),
        ("---\nname:\ndescription: ok\n---", "name"),
        ("---\nname: ''\ndescription: ok\n---", "name"),
        ('---\nname: test-skill\ndescription: ""\n---', "description"),
    ],
)
def test_read_properties_empty_required_field(memfs, content, field):
    memfs.insert("/skill/SKILL.md", content)
    with pytest.raises(EmptyFieldError) as exc_info:
        read_properties(memfs, Path("/skill"))
    assert exc_info.value.field == field
    assert str(exc_info.value) == f"Required field is empty: {field}"


def test_read_properties_whitespace_name_is_not_empty_here(memfs):
    memfs.insert("/skill/SKILL.md", "---\nname: '   '\ndescription: ok\n---")
    props, _ = read_properties(memfs, Path("/skill"))
    assert props.name == "   "


def test_read_properties_wrong_type(memfs):
    memfs.insert("/skill/SKILL.md", "---\nname: [a, b]\ndescription: ok\n---")
    with pytest.raises(SkillParseError):
        read_properties(memfs, Path("/skill"))


def test_read_properties_missing_frontmatter(memfs):
    memfs.insert("/skill/SKILL.md", "# Just a heading\n")
    with pytest.raises(MissingFrontmatterError):
        read_properties(memfs, Path("/skill"))


def test_read_properties_multiple_skills_isolated(memfs):
    memfs.insert("/skill1/SKILL.md", "---\nname: skill1\ndescription: First\n---")
    memfs.insert("/skill2/SKILL.md", "---\nname: skill2\ndescription: Second\n---")
    props1, _ = read_properties(memfs, Path("/skill1"))
    props2, _ = read_properties(memfs, Path("/skill2"))
    assert props1.name == "skill1"
    assert props2.name == "skill2"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/path/to/skill", "/path/to/skill"),
        ("/path/to/skill/SKILL.md", "/path/to/skill"),
        ("/path/to/skill/skill.md", "/path/to/skill"),
        ("SKILL.md", "."),
        ("/path/to/skill/README.md", "/path/to/skill/README.md"),
    ],
)
def test_resolve_skill_path(path, expected):
    assert resolve_skill_path(Path(path)) == Path(expected)


def test_read_properties_invalid_utf8(skill_dir):
    directory = skill_dir("my-skill", "")
    (directory / "SKILL.md").write_bytes(b"---\nname: my-skill\ndescription: \xff\xfe bad\n---\n")
    with pytest.raises(SkillIOError, match="IO error") as exc_info:
        read_properties(LocalFileSystem(), directory)
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_parse_frontmatter_empty_mapping():
    with pytest.raises(MissingFrontmatterError):
        parse_frontmatter("---\n{}\n---\nBody")
