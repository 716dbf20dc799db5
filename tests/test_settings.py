from pathlib import Path

from spawner_skills.constants import DEFAULT_MCP_ENDPOINT, DEFAULT_REPO_URL
from spawner_skills.settings import SpawnerSettings


def test_defaults_live_under_user_home(tmp_path: Path) -> None:
    settings = SpawnerSettings.from_env(env={}, home=tmp_path, cwd=tmp_path)

    assert settings.home_dir == tmp_path / ".spawner"
    assert settings.skills_dir == tmp_path / ".spawner" / "skills"
    assert settings.repo_url == DEFAULT_REPO_URL
    assert settings.mcp_endpoint == DEFAULT_MCP_ENDPOINT
    assert settings.appdata is None


def test_environment_overrides(tmp_path: Path) -> None:
    env = {
        "SPAWNER_HOME": str(tmp_path / "custom"),
        "SPAWNER_REPO_URL": "https://example.com/skills.git",
        "SPAWNER_MCP_ENDPOINT": "https://mcp.example.com",
        "APPDATA": str(tmp_path / "AppData"),
    }

    settings = SpawnerSettings.from_env(env=env, home=tmp_path, cwd=tmp_path, platform="win32")

    assert settings.skills_dir == tmp_path / "custom" / "skills"
    assert settings.repo_url == "https://example.com/skills.git"
    assert settings.mcp_endpoint == "https://mcp.example.com"
    assert settings.appdata == tmp_path / "AppData"
    assert settings.platform == "win32"


def test_empty_overrides_fall_back_to_defaults(tmp_path: Path) -> None:
    settings = SpawnerSettings.from_env(
        env={"SPAWNER_HOME": "", "SPAWNER_REPO_URL": ""}, home=tmp_path, cwd=tmp_path
    )

    assert settings.home_dir == tmp_path / ".spawner"
    assert settings.repo_url == DEFAULT_REPO_URL


def test_from_env_reads_process_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("SPAWNER_HOME", str(tmp_path / "elsewhere"))

    settings = SpawnerSettings.from_env()

    assert settings.home_dir == tmp_path / "elsewhere"
    assert settings.user_home == tmp_path
    assert settings.cwd == tmp_path / "work"


def test_dist_dir_is_under_source(tmp_path: Path) -> None:
    settings = SpawnerSettings.from_env(env={}, home=tmp_path, cwd=tmp_path)

    assert settings.dist_dir(tmp_path / "repo") == tmp_path / "repo" / "dist"
