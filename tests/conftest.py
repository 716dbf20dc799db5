import sys
import json
import subprocess
from pathlib import Path
from typing import Any, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from spawner_skills.settings import SpawnerSettings  # noqa: E402


SAMPLE_SKILL_YAML = """\
id: {name}
name: {title}
description: {description}
version: 1.2.0
tags:
  - python
  - api
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    for name in ("SPAWNER_HOME", "SPAWNER_REPO_URL", "SPAWNER_MCP_ENDPOINT", "APPDATA"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def settings(tmp_path: Path) -> SpawnerSettings:
    return SpawnerSettings.from_env(
        env={}, home=tmp_path, cwd=tmp_path / "work", platform="linux"
    )


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    return tmp_path / ".spawner" / "skills"


@pytest.fixture
def make_skill():
    def _make(
        root: Path,
        category: str,
        name: str,
        skill_yaml: Optional[str] = None,
        description: str = "Builds things",
        files: Optional[dict[str, str]] = None,
    ) -> Path:
        skill_dir = root / category / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if skill_yaml is None:
            skill_yaml = SAMPLE_SKILL_YAML.format(
                name=name, title=name.replace("-", " ").title(), description=description
            )
        if skill_yaml:
            (skill_dir / "skill.yaml").write_text(skill_yaml, encoding="utf-8")
        for filename, content in (files or {}).items():
            (skill_dir / filename).write_text(content, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def installed_skills(skills_root: Path, make_skill) -> Path:
    (skills_root / ".git").mkdir(parents=True)
    make_skill(skills_root, "development", "backend", description="Backend/API development")
    make_skill(skills_root, "development", "frontend", description="Frontend/UI development")
    make_skill(skills_root, "data", "postgres-wizard", description="PostgreSQL expert")
    (skills_root / "scripts").mkdir()
    return skills_root


class FakeGit:
    """Stands in for ``subprocess.run`` when the git binary is invoked."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[Any] = []
        self.installed = True
        self.fail_clone = False
        self.fail_pull = False
        self.seed: dict[str, list[str]] = {
            "development": ["backend", "frontend"],
            "ai": ["llm-architect"],
        }

    def commands(self) -> list[str]:
        return [call[1] for call in self.calls if len(call) > 1]

    def __call__(self, args: list[str], check: bool = False, cwd: Any = None, **kwargs: Any):
        args = list(args)
        self.calls.append(args)
        self.cwds.append(cwd)
        if not self.installed:
            raise FileNotFoundError("git")

        command = args[1]
        if command == "--version":
            return subprocess.CompletedProcess(args, 0, stdout="git version 2.43.0\n", stderr="")
        if command == "clone":
            if self.fail_clone:
                return subprocess.CompletedProcess(args, 128)
            dest = Path(args[3])
            (dest / ".git").mkdir(parents=True)
            for category, names in self.seed.items():
                for name in names:
                    skill_dir = dest / category / name
                    skill_dir.mkdir(parents=True)
                    (skill_dir / "skill.yaml").write_text(f"name: {name}\n", encoding="utf-8")
            return subprocess.CompletedProcess(args, 0)
        if command == "pull":
            return subprocess.CompletedProcess(args, 1 if self.fail_pull else 0)
        if command == "branch":
            return subprocess.CompletedProcess(args, 0, stdout="main\n", stderr="")
        if command == "log":
            return subprocess.CompletedProcess(args, 0, stdout="abc1234 Add skills\n", stderr="")
        return subprocess.CompletedProcess(args, 1)


@pytest.fixture
def fake_git(monkeypatch) -> FakeGit:
    fake = FakeGit()
    monkeypatch.setattr("spawner_skills.git_service.subprocess.run", fake)
    return fake


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
