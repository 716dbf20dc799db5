from enum import Enum

from spawner_skills.count_sync import CountSyncStatus
from spawner_skills.mcp.models import McpSetupStatus, McpTargetStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


MCP_TARGET_STATUS_STYLE = {
    McpTargetStatus.CONFIGURED: UIStyle.GREEN.value,
    McpTargetStatus.NOT_CONFIGURED: UIStyle.YELLOW.value,
    McpTargetStatus.WILL_CREATE: UIStyle.DIM.value,
    McpTargetStatus.ERROR: UIStyle.RED.value,
}

MCP_SETUP_STATUS_STYLE = {
    McpSetupStatus.CONFIGURED: UIStyle.GREEN.value,
    McpSetupStatus.SKIPPED: UIStyle.DIM.value,
    McpSetupStatus.FAILED: UIStyle.RED.value,
}

COUNT_SYNC_STATUS_STYLE = {
    CountSyncStatus.UPDATED: UIStyle.GREEN.value,
    CountSyncStatus.UNCHANGED: UIStyle.DIM.value,
    CountSyncStatus.MISSING: UIStyle.YELLOW.value,
}
