"""File access used by the manifest reader."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSystem(Protocol):
    """Minimal file access capability.

    The reader only ever calls :meth:`exists` and :meth:`read_text`.
    """

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def exists(self, path: Path) -> bool: ...


class LocalFileSystem:
    """FileSystem backed by the local disk, UTF-8 encoded."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {len(content)} characters to {path}")

    def exists(self, path: Path) -> bool:
        return Path(path).exists()


class MemoryFileSystem:
    """FileSystem held in a dict, keyed by path."""

    def __init__(self, files: dict[str | Path, str] | None = None):
        self._files: dict[Path, str] = {}
        for path, content in (files or {}).items():
            self.insert(path, content)

    def insert(self, path: str | Path, content: str) -> None:
        self._files[Path(path)] = content

    def read_text(self, path: Path) -> str:
        try:
            return self._files[Path(path)]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None

    def write_text(self, path: Path, content: str) -> None:
        self.insert(path, content)

    def exists(self, path: Path) -> bool:
        return Path(path) in self._files
