from spawner_skills.mcp.config_repository import McpConfigRepository
from spawner_skills.mcp.models import (
    McpServerDescriptor,
    McpSetupReport,
    McpSetupRow,
    McpSetupStatus,
    McpTarget,
    McpTargetKind,
    McpTargetStatus,
    McpTargetStatusRow,
    McpUpsertOutcome,
)
from spawner_skills.mcp.service import McpSetupService, spawner_descriptor
from spawner_skills.mcp.targets import claude_desktop_config_path, detect_targets

__all__ = [
    "McpConfigRepository",
    "McpServerDescriptor",
    "McpSetupReport",
    "McpSetupRow",
    "McpSetupService",
    "McpSetupStatus",
    "McpTarget",
    "McpTargetKind",
    "McpTargetStatus",
    "McpTargetStatusRow",
    "McpUpsertOutcome",
    "claude_desktop_config_path",
    "detect_targets",
    "spawner_descriptor",
]
