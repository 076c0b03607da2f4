import os
from pathlib import Path


class SkillsConfig:
    """Settings for the command line, taken from arguments or the environment.

    ``SKILLS_FOLDER`` is the base directory that relative skill paths are
    resolved against. When neither the argument nor the variable is set,
    paths are used as given.
    """

    _skills_folder: str | None

    def __init__(self, skills_folder: str | None = None):
        self._skills_folder = skills_folder if skills_folder else os.getenv("SKILLS_FOLDER")

    @property
    def skills_folder(self) -> Path | None:
        return Path(self._skills_folder) if self._skills_folder else None

    def resolve(self, path: str | Path) -> Path:
        path = Path(path)
        if path.is_absolute() or self.skills_folder is None:
            return path
        return self.skills_folder / path
