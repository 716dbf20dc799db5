import json
from pathlib import Path

from spawner_skills.__main__ import cli


def test_setup_mcp_is_idempotent(cli_runner, tmp_path: Path) -> None:
    first = cli_runner.invoke(cli, ["setup-mcp"])
    config = tmp_path / ".mcp.json"
    after_first = config.read_bytes()

    second = cli_runner.invoke(cli, ["setup-mcp"])

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert config.read_bytes() == after_first
    assert "MCP server configured for 1 environment(s)" in first.output
    assert "spawner_orchestrate" in first.output
    assert "No new configurations needed" in second.output


def test_setup_mcp_preserves_other_servers(cli_runner, tmp_path: Path, write_json) -> None:
    other = {"command": "node", "args": ["server.js"], "description": "Other"}
    write_json(tmp_path / ".mcp.json", {"mcpServers": {"other": other}})

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 0
    servers = json.loads((tmp_path / ".mcp.json").read_text(encoding="utf-8"))["mcpServers"]
    assert servers["other"] == other
    assert servers["spawner"]["args"] == ["-y", "mcp-remote", "https://mcp.vibeship.co"]


def test_setup_mcp_configures_desktop_and_project(
    cli_runner, tmp_path: Path, write_json
) -> None:
    desktop_dir = tmp_path / ".config" / "Claude"
    desktop_dir.mkdir(parents=True)
    write_json(tmp_path / "work" / ".mcp.json", {})

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 0
    assert "3 environment(s)" in result.output
    for path in (
        desktop_dir / "claude_desktop_config.json",
        tmp_path / "work" / ".mcp.json",
        tmp_path / ".mcp.json",
    ):
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert "spawner" in payload["mcpServers"]


def test_setup_mcp_backs_up_unparsable_config(cli_runner, tmp_path: Path) -> None:
    (tmp_path / ".mcp.json").write_text("{ not json", encoding="utf-8")

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 0
    assert "couldn't be parsed" in result.output
    backups = list(tmp_path.glob(".mcp.json.bak-*"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "{ not json"


def test_setup_mcp_exits_1_when_a_target_fails(
    cli_runner, tmp_path: Path, write_json
) -> None:
    write_json(tmp_path / ".mcp.json", {"mcpServers": "not-an-object"})

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 1
    assert "failed" in result.output


def test_setup_mcp_keeps_non_ascii_text_in_other_servers(cli_runner, tmp_path: Path) -> None:
    config = tmp_path / ".mcp.json"
    config.write_text(
        '{"mcpServers": {"other": {"command": "node", "description": "Café ☕"}}}',
        encoding="utf-8",
    )

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 0
    text = config.read_text(encoding="utf-8")
    assert "Café ☕" in text
    assert "\\u00e9" not in text


def test_setup_mcp_keeps_entries_of_config_with_bom(cli_runner, tmp_path: Path) -> None:
    config = tmp_path / ".mcp.json"
    config.write_bytes(
        b"\xef\xbb\xbf" + json.dumps({"mcpServers": {"other": {"command": "node"}}}).encode()
    )

    result = cli_runner.invoke(cli, ["setup-mcp"])

    assert result.exit_code == 0
    assert "couldn't be parsed" not in result.output
    assert list(tmp_path.glob(".mcp.json.bak-*")) == []
    servers = json.loads(config.read_text(encoding="utf-8-sig"))["mcpServers"]
    assert servers["other"] == {"command": "node"}
    assert "spawner" in servers
