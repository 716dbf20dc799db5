from pathlib import Path
from typing import Optional, Sequence

import click
from rich.console import Console

from spawner_skills.catalog import SkillCatalog
from spawner_skills.count_sync import CountSyncService, SkillCounter
from spawner_skills.errors import (
    CategoryNotFoundError,
    GitNotInstalledError,
    SkillsNotInstalledError,
    SpawnerError,
)
from spawner_skills.git_service import GitService
from spawner_skills.mcp import McpSetupService, McpSetupStatus
from spawner_skills.settings import SpawnerSettings
from spawner_skills.skills import DistBuilder
from spawner_skills.tui import SkillsConsoleUI
from spawner_skills.utils import compact_home_path
from spawner_skills.yaml_validation import validate_tree


COMMAND_ALIASES = {
    "i": "install",
    "u": "update",
    "upgrade": "update",
    "mcp": "setup-mcp",
    "s": "status",
    "ls": "list",
    "l": "list",
    "h": "help",
}


class AliasedGroup(click.Group):
    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else None), cmd, rest


def _ui() -> SkillsConsoleUI:
    return SkillsConsoleUI(Console())


def _fail(ui: SkillsConsoleUI, exc: SpawnerError) -> click.exceptions.Exit:
    ui.render_error(exc)
    return click.exceptions.Exit(1)


def _run_mcp_setup(ui: SkillsConsoleUI, settings: SpawnerSettings) -> None:
    service = McpSetupService(settings)

    ui.step("1/3", "Detecting Claude environments...")
    targets = service.targets()
    if not targets:
        ui.error("No Claude environments detected.")
        ui.info("Install Claude Desktop or use Claude Code first.")
        raise click.exceptions.Exit(1)
    ui.render_mcp_status(
        [service.target_status(target) for target in targets],
        title="detected claude environments",
        hint=False,
    )

    ui.step("2/3", "Configuring MCP server...")
    report = service.setup(targets)

    ui.step("3/3", "Verifying configuration...")
    ui.render_mcp_setup(report, settings.mcp_endpoint)

    if any(row.status == McpSetupStatus.FAILED for row in report.rows):
        raise click.exceptions.Exit(1)


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Install, update and browse Spawner specialist skills."""
    if ctx.obj is None:
        ctx.obj = SpawnerSettings.from_env()
    ui = _ui()
    ui.render_banner()
    if ctx.invoked_subcommand is None:
        ui.render_usage(ctx.get_help())


@cli.command(help="Clone the skills repository into ~/.spawner/skills.")
@click.option("--mcp", "with_mcp", is_flag=True, help="Also configure the MCP server.")
@click.pass_obj
def install(settings: SpawnerSettings, with_mcp: bool) -> None:
    ui = _ui()
    git = GitService()
    catalog = SkillCatalog(settings.skills_dir)
    total_steps = 4 if with_mcp else 3

    ui.step(f"1/{total_steps}", "Checking prerequisites...")
    if not git.is_available():
        raise _fail(ui, GitNotInstalledError())
    ui.success("Git is installed")

    if catalog.is_installed():
        ui.info(f"Skills already installed at {compact_home_path(settings.skills_dir)}")
        ui.info('Run "update" command to get the latest version')
        ui.success(f"{catalog.count()} skills available")
    else:
        ui.step(f"2/{total_steps}", "Creating directory structure...")
        if not settings.home_dir.exists():
            settings.home_dir.mkdir(parents=True, exist_ok=True)
            ui.success(f"Created {compact_home_path(settings.home_dir)}/")

        ui.step(f"3/{total_steps}", "Cloning skills repository...")
        ui.info("This may take a moment...")
        try:
            git.clone(settings.repo_url, settings.skills_dir, cwd=settings.home_dir)
        except SpawnerError as exc:
            ui.error("Failed to clone repository")
            raise _fail(ui, exc)
        ui.success(f"Installation complete! {catalog.count()} skills installed.")

    if with_mcp:
        ui.step(f"{total_steps}/{total_steps}", "Configuring MCP server...")
        _run_mcp_setup(ui, settings)

    ui.render_install_guide(settings.skills_dir, with_mcp=with_mcp)


@cli.command(help="Pull the latest skills.")
@click.pass_obj
def update(settings: SpawnerSettings) -> None:
    ui = _ui()
    catalog = SkillCatalog(settings.skills_dir)

    ui.step("1/2", "Checking installation...")
    try:
        catalog.require_installed()
    except SkillsNotInstalledError as exc:
        raise _fail(ui, exc)
    ui.success("Skills directory found")

    ui.step("2/2", "Pulling latest changes...")
    try:
        GitService().pull(settings.skills_dir)
    except SpawnerError as exc:
        ui.error("Failed to update")
        raise _fail(ui, exc)
    ui.success(f"Update complete! {catalog.count()} skills available.")


@cli.command("setup-mcp", help="Register the Spawner MCP server with Claude.")
@click.pass_obj
def setup_mcp(settings: SpawnerSettings) -> None:
    _run_mcp_setup(_ui(), settings)


@cli.command(help="Show installation and MCP status.")
@click.pass_obj
def status(settings: SpawnerSettings) -> None:
    ui = _ui()
    catalog = SkillCatalog(settings.skills_dir)

    if catalog.is_installed():
        git = GitService()
        ui.render_install_status(
            settings.skills_dir,
            installed=True,
            count=catalog.count(),
            branch=git.current_branch(settings.skills_dir),
            last_commit=git.last_commit(settings.skills_dir),
        )
    else:
        ui.render_install_status(settings.skills_dir, installed=False)

    ui.render_mcp_status(McpSetupService(settings).status())


@cli.command("list", help="List categories, skills in a category, or all skills.")
@click.argument("category", required=False)
@click.option("--all", "-a", "show_all", is_flag=True, help="List every skill.")
@click.pass_obj
def list_skills(settings: SpawnerSettings, category: Optional[str], show_all: bool) -> None:
    ui = _ui()
    catalog = SkillCatalog(settings.skills_dir)
    try:
        catalog.require_installed()
    except SkillsNotInstalledError as exc:
        raise _fail(ui, exc)

    ui.render_location(catalog.root)

    if category:
        try:
            catalog.require_category(category)
        except CategoryNotFoundError as exc:
            ui.render_category_not_found(exc)
            raise click.exceptions.Exit(1)
        skills = [
            (name, catalog.describe(category, name)) for name in catalog.skills_in(category)
        ]
        ui.render_category(catalog.root, category, skills)
        return

    if show_all:
        ui.render_all_skills(
            catalog.root,
            {name: catalog.skills_in(name) for name in catalog.categories()},
        )
        return

    ui.render_categories(catalog.root, catalog.counts_by_category())


@cli.command("help", help="Show usage, examples and MCP tools.")
@click.pass_context
def help_command(ctx: click.Context) -> None:
    parent = ctx.parent if ctx.parent is not None else ctx
    _ui().render_usage(parent.get_help())


def _source_option(help_text: str):
    return click.option(
        "--source",
        "-s",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help=help_text,
    )


@cli.command("build-dist", help="Flatten each skill into one Markdown document.")
@click.argument("skill", required=False)
@_source_option("Skills tree to read (default: installed skills).")
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (default: <source>/dist).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show fallback parsing warnings.")
@click.pass_obj
def build_dist(
    settings: SpawnerSettings,
    skill: Optional[str],
    source: Optional[Path],
    output: Optional[Path],
    verbose: bool,
) -> None:
    ui = _ui()
    source_root = source or settings.skills_dir
    if not source_root.is_dir():
        raise _fail(ui, SkillsNotInstalledError(source_root))
    output_root = output or settings.dist_dir(source_root)

    ui.step("1/1", f"Building skill documents from {compact_home_path(source_root)}...")
    try:
        result = DistBuilder(source_root, output_root).build(only=skill)
    except OSError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    ui.render_dist_result(result, verbose=verbose)


@cli.command("sync-count", help="Recount skills and update documented counts.")
@_source_option("Repository root to count (default: installed skills).")
@click.option("--dry-run", is_flag=True, help="Report changes without writing.")
@click.pass_obj
def sync_count(settings: SpawnerSettings, source: Optional[Path], dry_run: bool) -> None:
    ui = _ui()
    root = source or settings.skills_dir
    if not root.is_dir():
        raise _fail(ui, SkillsNotInstalledError(root))

    count = SkillCounter(root).count()
    ui.render_skill_count(count)
    rows = CountSyncService(root).sync(count.total, dry_run=dry_run)
    ui.render_count_sync(rows, count.total, dry_run=dry_run)


@cli.command("validate-yaml", help="Strictly parse every YAML file in a skills tree.")
@_source_option("Skills tree to validate (default: installed skills).")
@click.pass_obj
def validate_yaml(settings: SpawnerSettings, source: Optional[Path]) -> None:
    ui = _ui()
    root = source or settings.skills_dir
    if not root.is_dir():
        raise _fail(ui, SkillsNotInstalledError(root))

    report = validate_tree(root)
    ui.render_yaml_validation(report)
    if not report.ok:
        raise click.exceptions.Exit(1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        code = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="spawner-skills",
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        code = exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.exceptions.Abort:
        return 1
    if isinstance(code, int) and code != 0:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
