from pathlib import Path

from rich.console import Console
from rich.markup import escape

from spawner_skills.constants import MCP_TOOLS
from spawner_skills.count_sync import CountSyncRow, SkillCount
from spawner_skills.errors import CategoryNotFoundError, SpawnerError
from spawner_skills.mcp.models import McpSetupReport, McpTargetStatus, McpTargetStatusRow
from spawner_skills.skills.models import DistBuildResult
from spawner_skills.tui.enums import UIStyle
from spawner_skills.tui.sections import UISection
from spawner_skills.tui.tables import (
    CatalogTable,
    CountTable,
    DistTable,
    McpTable,
    ValidationTable,
)
from spawner_skills.utils import compact_home_path, file_link
from spawner_skills.yaml_validation import YamlValidationReport

COMMAND = "spawner-skills"


class SkillsConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # Line-level messages

    def step(self, step: str, message: str) -> None:
        self.console.print()
        self.console.print(f"[cyan][{step}][/cyan] {escape(message)}")

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def render_error(self, exc: SpawnerError) -> None:
        self.error(str(exc))
        if exc.hint:
            self.info(exc.hint)

    # Panels

    def render_banner(self) -> None:
        self.console.print(
            UISection.banner(
                "VIBESHIP SPAWNER SKILLS",
                "Specialist Skills for AI-Powered Product Building",
            )
        )

    def render_usage(self, help_text: str) -> None:
        self.console.print(escape(help_text))
        examples = "\n".join(
            [
                f"{COMMAND} install --mcp        # Full setup",
                f"{COMMAND} setup-mcp            # Just add MCP",
                f"{COMMAND} list development",
                f"{COMMAND} build-dist --source ./skills-repo",
            ]
        )
        self.console.print(UISection.note("examples", examples, style=UIStyle.DIM.value))
        self.render_mcp_tools()
        self.console.print(
            UISection.note(
                "after installation",
                "Skills are available at: ~/.spawner/skills/\n\n"
                "Load skills in Claude:\n"
                "  Read: ~/.spawner/skills/development/backend/skill.yaml\n"
                "  Read: ~/.spawner/skills/development/backend/sharp-edges.yaml",
                style=UIStyle.DIM.value,
            )
        )

    def render_mcp_tools(self) -> None:
        tools = "\n".join(f"[cyan]{name}[/cyan]  - {detail}" for name, detail in MCP_TOOLS)
        self.console.print(UISection.note("mcp server tools", tools, style=UIStyle.CYAN.value))

    def render_install_guide(self, skills_dir: Path, with_mcp: bool) -> None:
        lines = [
            f"[bold]Skills Location:[/bold] {escape(compact_home_path(skills_dir))}",
            "",
            "[bold]Quick Start:[/bold] in Claude, load a skill by reading its YAML files:",
            "  [cyan]Read: ~/.spawner/skills/development/backend/skill.yaml[/cyan]",
            "  [cyan]Read: ~/.spawner/skills/development/backend/sharp-edges.yaml[/cyan]",
            "",
            "[bold]Popular Skills:[/bold]",
            "  development/backend      - Backend/API development",
            "  development/frontend     - Frontend/UI development",
            "  data/postgres-wizard     - PostgreSQL expert",
            "  ai/llm-architect         - LLM integration",
            "  agents/autonomous-agents - AI agents",
            "",
            f"[bold]Full Guide:[/bold] {escape(compact_home_path(skills_dir / 'GETTING_STARTED.md'))}",
        ]
        if not with_mcp:
            lines += [
                "",
                "[bold]Want MCP features?[/bold] (project memory, validation, sharp edges)",
                f"  Run: {COMMAND} setup-mcp",
            ]
        lines += ["", "[bold]Update Skills:[/bold]", f"  {COMMAND} update"]
        self.console.print(UISection.note("next", "\n".join(lines), style=UIStyle.GREEN.value))

    def render_install_status(
        self,
        skills_dir: Path,
        installed: bool,
        count: int = 0,
        branch: str | None = None,
        last_commit: str | None = None,
    ) -> None:
        if not installed:
            self.console.print(
                UISection.note(
                    "spawner skills",
                    "[red]✗[/red] Skills not installed\n"
                    f"[blue]ℹ[/blue] Run: {COMMAND} install",
                    style=UIStyle.RED.value,
                )
            )
            return

        rows = [
            ("Installed at", escape(compact_home_path(skills_dir))),
            ("Skills count", str(count)),
        ]
        if branch:
            rows.append(("Branch", escape(branch)))
        if last_commit:
            rows.append(("Last update", escape(last_commit)))
        self.console.print(
            UISection.wrap(
                "spawner skills", CatalogTable.summary_grid(rows), style=UIStyle.GREEN.value
            )
        )

    # MCP

    def render_mcp_status(
        self,
        rows: list[McpTargetStatusRow],
        title: str = "mcp server status",
        hint: bool = True,
    ) -> None:
        style = UIStyle.GREEN.value
        if not any(row.status == McpTargetStatus.CONFIGURED for row in rows):
            style = UIStyle.YELLOW.value
        if any(row.status == McpTargetStatus.ERROR for row in rows):
            style = UIStyle.RED.value
        self.console.print(UISection.wrap(title, McpTable.targets_table(rows), style=style))
        if hint and not any(row.status == McpTargetStatus.CONFIGURED for row in rows):
            self.info(f"Run: {COMMAND} setup-mcp")

    def render_mcp_setup(self, report: McpSetupReport, endpoint: str) -> None:
        for warning in report.warnings:
            self.warning(warning)

        style = UIStyle.GREEN.value if report.failed == 0 else UIStyle.RED.value
        self.console.print(
            UISection.wrap("mcp configuration", McpTable.setup_table(report.rows), style=style)
        )

        if report.configured == 0:
            self.info("No new configurations needed - MCP already set up")
            return

        self.success(f"MCP server configured for {report.configured} environment(s)")
        self.console.print(f"[bold]MCP Endpoint:[/bold] {escape(endpoint)}")
        self.render_mcp_tools()
        self.console.print(
            UISection.note(
                "next steps",
                "1. Restart Claude Desktop (if configured)\n"
                "2. In Claude, the spawner tools will be automatically available\n"
                '3. Try: "Use spawner_orchestrate to help me build a SaaS"',
                style=UIStyle.DIM.value,
            )
        )

    # Listing

    def render_location(self, root: Path) -> None:
        self.console.print(
            f"[dim]Location:[/dim] [cyan]{file_link(root, compact_home_path(root))}[/cyan]"
        )

    def render_categories(self, root: Path, counts: dict[str, int]) -> None:
        total = sum(counts.values())
        self.console.print(
            UISection.wrap(
                "installed skill categories",
                CatalogTable.categories_table(root, counts),
                style=UIStyle.BLUE.value,
                subtitle=f"{total} skills across {len(counts)} categories",
            )
        )
        self.success(f"Total: {total} skills across {len(counts)} categories")
        self.info(f"List skills in a category: {COMMAND} list <category>")
        self.info(f"List all skills: {COMMAND} list --all")

    def render_category(
        self, root: Path, category: str, skills: list[tuple[str, str]]
    ) -> None:
        self.console.print(
            UISection.wrap(
                f"{category} ({len(skills)} skills)",
                CatalogTable.skills_table(root / category, skills),
                style=UIStyle.CYAN.value,
            )
        )
        self.info(f"Load with: Read ~/.spawner/skills/{category}/<skill>/skill.yaml")

    def render_all_skills(self, root: Path, skills: dict[str, list[str]]) -> None:
        total = sum(len(names) for names in skills.values())
        self.console.print(
            UISection.wrap(
                "all skills",
                CatalogTable.all_skills_table(root, skills),
                style=UIStyle.BLUE.value,
            )
        )
        self.success(f"Total: {total} skills across {len(skills)} categories")

    def render_category_not_found(self, exc: CategoryNotFoundError) -> None:
        self.error(str(exc))
        body = "\n".join(f"[cyan]{escape(name)}[/cyan]" for name in exc.available)
        self.console.print(
            UISection.note(
                "available categories", body or "No categories installed.", style=UIStyle.YELLOW.value
            )
        )

    # Build tooling

    def render_dist_result(self, result: DistBuildResult, verbose: bool = False) -> None:
        if verbose:
            for warning in result.warnings:
                self.console.print(f"[dim]  {escape(warning)}[/dim]")
        if result.generated:
            self.console.print(
                UISection.wrap(
                    "skill documents",
                    DistTable.generated_table(result),
                    style=UIStyle.GREEN.value,
                )
            )
        if result.skipped:
            self.console.print(
                UISection.wrap(
                    "skipped",
                    DistTable.skipped_table(result.skipped),
                    style=UIStyle.YELLOW.value,
                )
            )
        self.console.print(
            UISection.wrap("dist build", DistTable.summary_block(result), style=UIStyle.BLUE.value)
        )

    def render_skill_count(self, count: SkillCount) -> None:
        self.console.print(
            UISection.wrap(
                "skill count by category",
                CountTable.categories_table(count),
                style=UIStyle.BLUE.value,
            )
        )

    def render_count_sync(self, rows: list[CountSyncRow], total: int, dry_run: bool) -> None:
        self.console.print(
            UISection.wrap("documentation", CountTable.sync_table(rows), style=UIStyle.CYAN.value)
        )
        updated = sum(1 for row in rows if row.status.value == "updated")
        if updated == 0:
            self.success("All files already up to date")
        elif dry_run:
            self.info(f"Would update {updated} file(s) with count: {total}+")
        else:
            self.success(f"Updated {updated} file(s) with count: {total}+")
            self.info("Don't forget to commit the changes!")

    def render_yaml_validation(self, report: YamlValidationReport) -> None:
        self.info(f"Found {report.checked} YAML files. Validating...")
        if report.ok:
            self.success("All YAML files are valid!")
            return
        self.console.print(
            UISection.wrap(
                f"{len(report.issues)} invalid YAML files",
                ValidationTable.issues_table(report.issues),
                style=UIStyle.RED.value,
            )
        )
        for issue in report.issues:
            if issue.snippet:
                self.console.print(f"[bold]{escape(issue.file)}[/bold]")
                self.console.print(f"[dim]{escape(issue.snippet)}[/dim]")
