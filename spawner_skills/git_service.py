"""Thin wrapper around the installed ``git`` binary."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence

from spawner_skills.errors import GitCommandError

Runner = Callable[..., subprocess.CompletedProcess]


class GitService:
    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner or subprocess.run

    def _run(
        self, args: Sequence[str], cwd: Path | None = None, capture: bool = False
    ) -> subprocess.CompletedProcess:
        kwargs: dict[str, Any] = {"cwd": str(cwd) if cwd is not None else None}
        if capture:
            kwargs.update(capture_output=True, text=True)
        return self._runner(["git", *args], check=False, **kwargs)

    def _run_checked(self, args: Sequence[str], cwd: Path | None = None) -> None:
        try:
            result = self._run(args, cwd=cwd)
        except OSError as exc:
            raise GitCommandError(args, returncode=-1) from exc
        if result.returncode != 0:
            raise GitCommandError(args, returncode=result.returncode)

    def _read(self, args: Sequence[str], cwd: Path) -> str | None:
        try:
            result = self._run(args, cwd=cwd, capture=True)
        except OSError:
            return None
        if result.returncode != 0:
            return None
        output = (result.stdout or "").strip()
        return output or None

    def is_available(self) -> bool:
        try:
            result = self._run(["--version"], capture=True)
        except OSError:
            return False
        return result.returncode == 0

    def clone(self, url: str, dest: Path, cwd: Path | None = None) -> None:
        """Clone with inherited stdio so git reports its own progress."""
        self._run_checked(["clone", url, str(dest)], cwd=cwd)

    def pull(self, cwd: Path) -> None:
        self._run_checked(["pull"], cwd=cwd)

    def current_branch(self, cwd: Path) -> str | None:
        return self._read(["branch", "--show-current"], cwd=cwd)

    def last_commit(self, cwd: Path) -> str | None:
        return self._read(["log", "-1", "--format=%h %s"], cwd=cwd)
