import json
from pathlib import Path

import pytest

from spawner_skills.errors import InvalidConfigSchemaError
from spawner_skills.mcp import McpConfigRepository, McpUpsertOutcome, spawner_descriptor


ENDPOINT = "https://mcp.vibeship.co"


def test_load_missing_config_is_empty(tmp_path: Path) -> None:
    repository = McpConfigRepository(tmp_path / ".mcp.json")

    assert repository.load_config() == ({}, None)
    assert repository.is_configured("spawner") is False


def test_load_invalid_json_warns_instead_of_failing(tmp_path: Path) -> None:
    path = tmp_path / ".mcp.json"
    path.write_text("{not json", encoding="utf-8")

    payload, warning = McpConfigRepository(path).load_config()

    assert payload == {}
    assert warning is not None
    assert "couldn't be parsed" in warning


def test_load_rejects_non_object_mcp_servers(tmp_path: Path, write_json) -> None:
    path = tmp_path / ".mcp.json"
    write_json(path, {"mcpServers": ["spawner"]})

    with pytest.raises(InvalidConfigSchemaError):
        McpConfigRepository(path).load_config()


def test_load_rejects_non_object_top_level(tmp_path: Path, write_json) -> None:
    path = tmp_path / ".mcp.json"
    write_json(path, [1, 2, 3])

    with pytest.raises(InvalidConfigSchemaError):
        McpConfigRepository(path).load_config()


def test_upsert_creates_file_and_servers_key(tmp_path: Path) -> None:
    path = tmp_path / "nested" / ".mcp.json"
    repository = McpConfigRepository(path)

    outcome, warning = repository.upsert_server("spawner", spawner_descriptor(ENDPOINT))

    assert outcome == McpUpsertOutcome.ADDED
    assert warning is None
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload == {
        "mcpServers": {
            "spawner": {
                "command": "npx",
                "args": ["-y", "mcp-remote", ENDPOINT],
                "description": "Spawner V2 - Project memory, validation, skills, sharp edges",
            }
        }
    }
    assert path.read_text(encoding="utf-8").endswith("\n")


def test_upsert_preserves_other_servers_and_keys(tmp_path: Path, write_json) -> None:
    path = tmp_path / ".mcp.json"
    other = {"command": "uvx", "args": ["other-server"], "env": {"TOKEN": "x"}}
    write_json(path, {"theme": "dark", "mcpServers": {"other": other}, "zeta": [1]})

    McpConfigRepository(path).upsert_server("spawner", spawner_descriptor(ENDPOINT))

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert list(payload) == ["theme", "mcpServers", "zeta"]
    assert list(payload["mcpServers"]) == ["other", "spawner"]
    assert payload["mcpServers"]["other"] == other
    assert payload["zeta"] == [1]


def test_upsert_is_noop_when_already_configured(tmp_path: Path, write_json) -> None:
    path = tmp_path / ".mcp.json"
    write_json(path, {"mcpServers": {"spawner": {"command": "custom"}}})
    before = path.read_bytes()

    outcome, _ = McpConfigRepository(path).upsert_server(
        "spawner", spawner_descriptor(ENDPOINT)
    )

    assert outcome == McpUpsertOutcome.ALREADY_CONFIGURED
    assert path.read_bytes() == before


def test_upsert_replaces_null_servers(tmp_path: Path, write_json) -> None:
    path = tmp_path / ".mcp.json"
    write_json(path, {"mcpServers": None})

    outcome, _ = McpConfigRepository(path).upsert_server(
        "spawner", spawner_descriptor(ENDPOINT)
    )

    assert outcome == McpUpsertOutcome.ADDED
    assert "spawner" in json.loads(path.read_text(encoding="utf-8"))["mcpServers"]


def test_upsert_backs_up_unparsable_config(tmp_path: Path) -> None:
    path = tmp_path / ".mcp.json"
    path.write_text("{broken", encoding="utf-8")

    outcome, warning = McpConfigRepository(path).upsert_server(
        "spawner", spawner_descriptor(ENDPOINT)
    )

    assert outcome == McpUpsertOutcome.ADDED
    assert warning is not None and "backed up" in warning
    backups = list(tmp_path.glob(".mcp.json.bak-*"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "{broken"
    assert "spawner" in json.loads(path.read_text(encoding="utf-8"))["mcpServers"]
