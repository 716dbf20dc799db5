"""Locate the MCP config files of the Claude host applications."""

from __future__ import annotations

from pathlib import Path

from spawner_skills.constants import CLAUDE_CODE_CONFIG, CLAUDE_DESKTOP_CONFIG
from spawner_skills.mcp.models import McpTarget, McpTargetKind
from spawner_skills.settings import SpawnerSettings


def claude_desktop_config_path(settings: SpawnerSettings) -> Path:
    home = settings.user_home
    if settings.platform == "darwin":
        base = home / "Library" / "Application Support"
    elif settings.platform == "win32":
        base = settings.appdata or (home / "AppData" / "Roaming")
    else:
        base = home / ".config"
    return base / "Claude" / CLAUDE_DESKTOP_CONFIG


def detect_targets(settings: SpawnerSettings) -> list[McpTarget]:
    targets: list[McpTarget] = []

    desktop = claude_desktop_config_path(settings)
    if desktop.parent.is_dir():
        targets.append(
            McpTarget(
                kind=McpTargetKind.DESKTOP,
                label="Claude Desktop",
                path=desktop,
                exists=desktop.exists(),
            )
        )

    local = settings.cwd / CLAUDE_CODE_CONFIG
    global_path = settings.user_home / CLAUDE_CODE_CONFIG
    if local.exists() and local.resolve() != global_path.resolve():
        targets.append(
            McpTarget(
                kind=McpTargetKind.CODE_PROJECT,
                label="Claude Code (project)",
                path=local,
            )
        )

    # The global Claude Code config is always offered, created on demand.
    targets.append(
        McpTarget(
            kind=McpTargetKind.CODE_GLOBAL,
            label="Claude Code (global)",
            path=global_path,
            exists=global_path.exists(),
        )
    )
    return targets
