from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class McpTargetKind(str, Enum):
    DESKTOP = "desktop"
    CODE_PROJECT = "code-local"
    CODE_GLOBAL = "code-home"


class McpTargetStatus(str, Enum):
    CONFIGURED = "configured"
    NOT_CONFIGURED = "not_configured"
    WILL_CREATE = "will_create"
    ERROR = "error"


class McpUpsertOutcome(str, Enum):
    ADDED = "added"
    ALREADY_CONFIGURED = "already_configured"


class McpSetupStatus(str, Enum):
    CONFIGURED = "configured"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class McpServerDescriptor:
    command: str
    args: list[str] = field(default_factory=list)
    description: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "args": list(self.args),
            "description": self.description,
        }


@dataclass(frozen=True)
class McpTarget:
    kind: McpTargetKind
    label: str
    path: Path
    exists: bool = True


@dataclass(frozen=True)
class McpTargetStatusRow:
    target: McpTarget
    status: McpTargetStatus
    detail: str = ""


@dataclass(frozen=True)
class McpSetupRow:
    target: McpTarget
    status: McpSetupStatus
    detail: str


@dataclass
class McpSetupReport:
    rows: list[McpSetupRow]
    warnings: list[str] = field(default_factory=list)

    @property
    def configured(self) -> int:
        return sum(1 for row in self.rows if row.status == McpSetupStatus.CONFIGURED)

    @property
    def failed(self) -> int:
        return sum(1 for row in self.rows if row.status == McpSetupStatus.FAILED)
