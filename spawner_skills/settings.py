"""Per-invocation settings resolved from the environment."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from spawner_skills.constants import (
    DEFAULT_MCP_ENDPOINT,
    DEFAULT_REPO_URL,
    DIST_DIRNAME,
    SKILLS_DIRNAME,
    SPAWNER_DIRNAME,
)


@dataclass(frozen=True)
class SpawnerSettings:
    user_home: Path
    home_dir: Path
    cwd: Path
    repo_url: str = DEFAULT_REPO_URL
    mcp_endpoint: str = DEFAULT_MCP_ENDPOINT
    platform: str = sys.platform
    appdata: Path | None = None

    @property
    def skills_dir(self) -> Path:
        return self.home_dir / SKILLS_DIRNAME

    def dist_dir(self, source_root: Path) -> Path:
        return source_root / DIST_DIRNAME

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        home: Path | None = None,
        cwd: Path | None = None,
        platform: str | None = None,
    ) -> "SpawnerSettings":
        env = os.environ if env is None else env
        user_home = home or Path.home()

        raw_home = env.get("SPAWNER_HOME")
        home_dir = (
            Path(raw_home).expanduser() if raw_home else user_home / SPAWNER_DIRNAME
        )
        appdata = env.get("APPDATA")

        return cls(
            user_home=user_home,
            home_dir=home_dir,
            cwd=cwd or Path.cwd(),
            repo_url=env.get("SPAWNER_REPO_URL") or DEFAULT_REPO_URL,
            mcp_endpoint=env.get("SPAWNER_MCP_ENDPOINT") or DEFAULT_MCP_ENDPOINT,
            platform=platform or sys.platform,
            appdata=Path(appdata) if appdata else None,
        )
