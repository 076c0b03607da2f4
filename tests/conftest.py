import pytest

from agentskills import MemoryFileSystem


@pytest.fixture
def memfs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def skill_dir(tmp_path):
    """Writes a manifest into ``tmp_path/<name>/SKILL.md`` and returns the directory."""

    def _make(name: str, content: str, file_name: str = "SKILL.md"):
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        (directory / file_name).write_text(content, encoding="utf-8")
        return directory

    return _make
