from pathlib import Path

from rich.markup import escape
from rich.table import Column, Table

from spawner_skills.count_sync import CountSyncRow, SkillCount
from spawner_skills.mcp.models import McpSetupRow, McpTargetStatusRow
from spawner_skills.skills.models import DistBuildResult, SkippedSkill
from spawner_skills.tui.enums import (
    COUNT_SYNC_STATUS_STYLE,
    MCP_SETUP_STATUS_STYLE,
    MCP_TARGET_STATUS_STYLE,
    UIStyle,
)
from spawner_skills.utils import compact_home_path, file_link
from spawner_skills.yaml_validation import YamlIssue


def _styled(value: str, style: str) -> str:
    return f"[{style}]{value}[/{style}]"


class CatalogTable:
    @staticmethod
    def categories_table(root: Path, counts: dict[str, int]) -> Table:
        table = Table(
            Column(header="Category", overflow="fold"),
            Column(header="Skills", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        for category, count in counts.items():
            table.add_row(
                _styled(file_link(root / category, category), UIStyle.CYAN.value),
                str(count),
            )
        return table

    @staticmethod
    def skills_table(category_path: Path, skills: list[tuple[str, str]]) -> Table:
        table = Table(
            Column(header="Skill", overflow="fold"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for name, description in skills:
            table.add_row(
                _styled(file_link(category_path / name, name), UIStyle.CYAN.value),
                _styled(escape(description), UIStyle.DIM.value) if description else "",
            )
        return table

    @staticmethod
    def all_skills_table(root: Path, skills: dict[str, list[str]]) -> Table:
        table = Table(
            Column(header="Category", width=20, overflow="fold"),
            Column(header="Count", width=6, justify="right"),
            Column(header="Skills", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for category, names in skills.items():
            links = ", ".join(
                _styled(file_link(root / category / name, name), UIStyle.CYAN.value)
                for name in names
            )
            table.add_row(f"[bold]{category}[/bold]", str(len(names)), links)
        return table

    @staticmethod
    def summary_grid(rows: list[tuple[str, str]]) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        for key, value in rows:
            table.add_row(key, value)
        return table


class McpTable:
    @staticmethod
    def targets_table(rows: list[McpTargetStatusRow]) -> Table:
        table = Table(
            Column(header="Host", width=22),
            Column(header="Status", width=16),
            Column(header="Config", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            style = MCP_TARGET_STATUS_STYLE.get(row.status, UIStyle.WHITE.value)
            table.add_row(
                row.target.label,
                _styled(escape(row.detail or row.status.value), style),
                compact_home_path(row.target.path),
            )
        return table

    @staticmethod
    def setup_table(rows: list[McpSetupRow]) -> Table:
        table = Table(
            Column(header="Host", width=22),
            Column(header="Status", width=12),
            Column(header="Detail", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            style = MCP_SETUP_STATUS_STYLE.get(row.status, UIStyle.WHITE.value)
            table.add_row(row.target.label, _styled(row.status.value, style), escape(row.detail))
        return table


class DistTable:
    @staticmethod
    def summary_block(result: DistBuildResult) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("Generated", _styled(str(len(result.generated)), UIStyle.GREEN.value))
        table.add_row("Skipped", _styled(str(len(result.skipped)), UIStyle.YELLOW.value))
        table.add_row("Output", compact_home_path(result.output_root))
        return table

    @staticmethod
    def generated_table(result: DistBuildResult) -> Table:
        table = Table(
            Column(header="Generated", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in result.generated:
            table.add_row(_styled(f"✓ {item.category}/{item.name}.md", UIStyle.GREEN.value))
        return table

    @staticmethod
    def skipped_table(skipped: list[SkippedSkill]) -> Table:
        table = Table(
            Column(header="Skill", width=32, overflow="fold"),
            Column(header="Reason", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for item in skipped:
            table.add_row(f"{item.category}/{item.name}", escape(item.reason))
        return table


class CountTable:
    @staticmethod
    def categories_table(count: SkillCount) -> Table:
        table = Table(
            Column(header="Category", width=24),
            Column(header="Skills", width=8, justify="right"),
            header_style="bold",
            show_footer=True,
        )
        table.columns[0].footer = "TOTAL"
        table.columns[1].footer = str(count.total)
        for category, skills in count.ranked():
            table.add_row(category, str(skills))
        return table

    @staticmethod
    def sync_table(rows: list[CountSyncRow]) -> Table:
        table = Table(
            Column(header="File", overflow="fold"),
            Column(header="Status", width=10),
            expand=True,
            header_style="bold",
        )
        for row in rows:
            style = COUNT_SYNC_STATUS_STYLE.get(row.status, UIStyle.WHITE.value)
            table.add_row(compact_home_path(row.path), _styled(row.status.value, style))
        return table


class ValidationTable:
    @staticmethod
    def issues_table(issues: list[YamlIssue]) -> Table:
        table = Table(
            Column(header="File", overflow="fold"),
            Column(header="Location", width=10),
            Column(header="Reason", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for issue in issues:
            table.add_row(escape(issue.file), issue.location(), escape(issue.reason))
        return table
