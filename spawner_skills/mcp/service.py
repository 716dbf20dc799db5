"""Register the Spawner MCP server with every detected Claude host."""

from __future__ import annotations

from spawner_skills.constants import MCP_SERVER_DESCRIPTION, MCP_SERVER_NAME
from spawner_skills.errors import SpawnerError
from spawner_skills.mcp.config_repository import McpConfigRepository
from spawner_skills.mcp.models import (
    McpServerDescriptor,
    McpSetupReport,
    McpSetupRow,
    McpSetupStatus,
    McpTarget,
    McpTargetStatus,
    McpTargetStatusRow,
    McpUpsertOutcome,
)
from spawner_skills.mcp.targets import detect_targets
from spawner_skills.settings import SpawnerSettings


def spawner_descriptor(endpoint: str) -> McpServerDescriptor:
    return McpServerDescriptor(
        command="npx",
        args=["-y", "mcp-remote", endpoint],
        description=MCP_SERVER_DESCRIPTION,
    )


class McpSetupService:
    def __init__(
        self, settings: SpawnerSettings, server_name: str = MCP_SERVER_NAME
    ) -> None:
        self._settings = settings
        self._server_name = server_name
        self._descriptor = spawner_descriptor(settings.mcp_endpoint)

    @property
    def descriptor(self) -> McpServerDescriptor:
        return self._descriptor

    def targets(self) -> list[McpTarget]:
        return detect_targets(self._settings)

    def target_status(self, target: McpTarget) -> McpTargetStatusRow:
        repository = McpConfigRepository(target.path)
        try:
            configured = repository.is_configured(self._server_name)
        except SpawnerError as exc:
            return McpTargetStatusRow(target, McpTargetStatus.ERROR, str(exc))
        if configured:
            return McpTargetStatusRow(target, McpTargetStatus.CONFIGURED, "MCP configured")
        if not target.exists:
            return McpTargetStatusRow(target, McpTargetStatus.WILL_CREATE, "will create")
        return McpTargetStatusRow(
            target, McpTargetStatus.NOT_CONFIGURED, "MCP not configured"
        )

    def status(self) -> list[McpTargetStatusRow]:
        return [self.target_status(target) for target in self.targets()]

    def setup(self, targets: list[McpTarget] | None = None) -> McpSetupReport:
        report = McpSetupReport(rows=[])
        for target in targets if targets is not None else self.targets():
            repository = McpConfigRepository(target.path)
            try:
                outcome, warning = repository.upsert_server(
                    self._server_name, self._descriptor
                )
            except (SpawnerError, OSError) as exc:
                report.rows.append(
                    McpSetupRow(
                        target, McpSetupStatus.FAILED, f"Failed to configure - {exc}"
                    )
                )
                continue

            if warning is not None:
                report.warnings.append(warning)
            if outcome == McpUpsertOutcome.ALREADY_CONFIGURED:
                report.rows.append(
                    McpSetupRow(
                        target, McpSetupStatus.SKIPPED, "Already configured, skipping"
                    )
                )
            else:
                report.rows.append(
                    McpSetupRow(target, McpSetupStatus.CONFIGURED, "MCP configured")
                )
        return report
