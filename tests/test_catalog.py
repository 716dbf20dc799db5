from pathlib import Path

import pytest

from spawner_skills.catalog import SkillCatalog, list_categories, scrape_description
from spawner_skills.errors import CategoryNotFoundError, SkillsNotInstalledError


def test_categories_skip_hidden_and_tooling_dirs(installed_skills: Path) -> None:
    for name in ("cli", "dist", "node_modules", "mcp-server", ".github"):
        (installed_skills / name).mkdir()
    (installed_skills / "README.md").write_text("# skills", encoding="utf-8")

    assert list_categories(installed_skills) == ["data", "development"]


def test_list_categories_missing_root(tmp_path: Path) -> None:
    assert list_categories(tmp_path / "missing") == []


def test_counts_include_dirs_without_skill_yaml(installed_skills: Path) -> None:
    (installed_skills / "data" / "draft").mkdir()
    catalog = SkillCatalog(installed_skills)

    assert catalog.counts_by_category() == {"data": 2, "development": 2}
    assert catalog.count() == 4


def test_skills_in_sorted_and_empty_for_missing(installed_skills: Path) -> None:
    catalog = SkillCatalog(installed_skills)

    assert catalog.skills_in("development") == ["backend", "frontend"]
    assert catalog.skills_in("nope") == []


def test_is_installed_requires_git_dir(skills_root: Path) -> None:
    skills_root.mkdir(parents=True)
    catalog = SkillCatalog(skills_root)

    assert catalog.is_installed() is False
    with pytest.raises(SkillsNotInstalledError):
        catalog.require_installed()

    (skills_root / ".git").mkdir()
    assert catalog.is_installed() is True


def test_require_category_lists_valid_categories(installed_skills: Path) -> None:
    catalog = SkillCatalog(installed_skills)

    with pytest.raises(CategoryNotFoundError) as exc_info:
        catalog.require_category("marketing")

    assert exc_info.value.available == ["data", "development"]
    assert str(exc_info.value) == 'Category "marketing" not found.'


def test_describe_reads_skill_yaml(installed_skills: Path) -> None:
    catalog = SkillCatalog(installed_skills)

    assert catalog.describe("data", "postgres-wizard") == "PostgreSQL expert"
    assert catalog.describe("data", "missing") == ""


# --- scrape_description ---


def test_scrape_inline_description_strips_quotes() -> None:
    assert scrape_description('name: x\ndescription: "Quoted value"\n') == "Quoted value"


def test_scrape_block_description_uses_first_line() -> None:
    text = "name: x\ndescription: |\n  First line here.\n  Second line.\n"

    assert scrape_description(text) == "First line here."


def test_scrape_folded_block_description() -> None:
    text = "description: >-\n  Folded text\n"

    assert scrape_description(text) == "Folded text"


def test_scrape_block_description_with_crlf_line_endings() -> None:
    text = "name: x\r\ndescription: |\r\n  Builds APIs\r\n"

    assert scrape_description(text) == "Builds APIs"


def test_scrape_truncates_long_description() -> None:
    text = "description: " + "a" * 80 + "\n"

    result = scrape_description(text)

    assert result == "a" * 50 + "..."


def test_scrape_ignores_nested_description_keys() -> None:
    text = "name: x\npatterns:\n  - description: nested\n"

    assert scrape_description(text) == ""


def test_scrape_survives_broken_yaml() -> None:
    text = "description: Works anyway\nexample: `code`\n"

    assert scrape_description(text) == "Works anyway"
