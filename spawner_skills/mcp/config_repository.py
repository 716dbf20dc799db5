from pathlib import Path
from typing import Any

from spawner_skills.constants import MCP_SERVERS_KEY
from spawner_skills.errors import InvalidConfigSchemaError
from spawner_skills.mcp.models import McpServerDescriptor, McpUpsertOutcome
from spawner_skills.mcp.schema import format_schema_error, host_config_validator
from spawner_skills.utils import backup_file, read_json_safe, write_json


class McpConfigRepository:
    """One host application's JSON config file.

    Only the ``mcpServers`` entry named by the caller is ever touched; every
    other key is written back as it was read, in the same order.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._validator = host_config_validator()

    def load_config(self) -> tuple[dict[str, Any], str | None]:
        """Return the parsed config and a warning when it could not be parsed."""
        payload, error = read_json_safe(self._path)
        if error is not None:
            return {}, f"Config file exists but couldn't be parsed: {self._path}"
        if payload is None:
            return {}, None
        schema_error = next(iter(self._validator.iter_errors(payload)), None)
        if schema_error is not None:
            raise InvalidConfigSchemaError(self._path, format_schema_error(schema_error))
        return payload, None

    def save_config(self, payload: dict[str, Any]) -> None:
        write_json(self._path, payload)

    def load_mcp_payload(self) -> dict[str, Any]:
        payload, _ = self.load_config()
        servers = payload.get(MCP_SERVERS_KEY)
        return servers if isinstance(servers, dict) else {}

    def is_configured(self, name: str) -> bool:
        return name in self.load_mcp_payload()

    def upsert_server(
        self, name: str, descriptor: McpServerDescriptor
    ) -> tuple[McpUpsertOutcome, str | None]:
        payload, warning = self.load_config()
        servers = payload.get(MCP_SERVERS_KEY)
        if isinstance(servers, dict) and name in servers:
            return McpUpsertOutcome.ALREADY_CONFIGURED, warning

        if not isinstance(servers, dict):
            servers = {}
            payload[MCP_SERVERS_KEY] = servers
        servers[name] = descriptor.as_dict()

        if warning is not None and self._path.exists():
            backup = backup_file(self._path)
            warning = f"{warning} (backed up to {backup})"
        self.save_config(payload)
        return McpUpsertOutcome.ADDED, warning
