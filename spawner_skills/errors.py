from pathlib import Path
from typing import Sequence


class SpawnerError(Exception):
    """Base user-facing application error."""

    hint: str | None = None


class GitNotInstalledError(SpawnerError):
    hint = "Download: https://git-scm.com/downloads"

    def __init__(self) -> None:
        super().__init__("Git is not installed. Please install Git first.")


class GitCommandError(SpawnerError):
    hint = "Check your internet connection and try again"

    def __init__(self, args: Sequence[str], returncode: int) -> None:
        self.args_list = list(args)
        self.returncode = returncode
        super().__init__(
            f"git {' '.join(self.args_list)} failed with exit code {returncode}"
        )


class SkillsNotInstalledError(SpawnerError):
    hint = "Run install command first."

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Skills not installed: {path}")


class CategoryNotFoundError(SpawnerError):
    def __init__(self, category: str, available: list[str]) -> None:
        self.category = category
        self.available = available
        super().__init__(f'Category "{category}" not found.')


class SpawnerFileError(SpawnerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidConfigSchemaError(SpawnerFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")
