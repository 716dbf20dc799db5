"""Read-only view over an installed skills checkout."""

from __future__ import annotations

import re
from pathlib import Path

from spawner_skills.constants import (
    DESCRIPTION_PREVIEW_LIMIT,
    GIT_DIRNAME,
    NON_CATEGORY_DIRS,
    SKILL_YAML,
)
from spawner_skills.errors import CategoryNotFoundError, SkillsNotInstalledError
from spawner_skills.utils import read_text_safe

_INLINE_DESCRIPTION_RE = re.compile(r"^description:[ \t]*(\S[^\n]*)$", re.MULTILINE)
_BLOCK_DESCRIPTION_RE = re.compile(
    r"^description:[ \t]*[|>][-+0-9]*[ \t]*\r?\n[ \t]+(\S[^\n]*)$", re.MULTILINE
)
_BLOCK_INDICATOR_RE = re.compile(r"^[|>][-+0-9]*$")


def is_category_dir(path: Path) -> bool:
    return (
        path.is_dir()
        and not path.name.startswith(".")
        and path.name not in NON_CATEGORY_DIRS
    )


def list_categories(root: Path) -> list[str]:
    if not root.is_dir():
        return []
    return sorted(item.name for item in root.iterdir() if is_category_dir(item))


def list_skill_dirs(category_path: Path) -> list[Path]:
    if not category_path.is_dir():
        return []
    return sorted(
        (item for item in category_path.iterdir() if item.is_dir()),
        key=lambda item: item.name,
    )


def scrape_description(text: str, limit: int = DESCRIPTION_PREVIEW_LIMIT) -> str:
    """Pull a one-line description preview out of raw skill.yaml text.

    Handles ``description: value`` and the first line of a
    ``description: |`` block. Works on files the strict YAML parser rejects.
    """
    value: str | None = None
    inline = _INLINE_DESCRIPTION_RE.search(text)
    if inline is not None:
        value = inline.group(1).strip()
        if _BLOCK_INDICATOR_RE.match(value):
            value = None
        else:
            value = value.strip("\"'").strip()
    if not value:
        block = _BLOCK_DESCRIPTION_RE.search(text)
        if block is not None:
            value = block.group(1).strip()
    if not value:
        return ""
    if len(value) > limit:
        return value[:limit].rstrip() + "..."
    return value


class SkillCatalog:
    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def is_installed(self) -> bool:
        return self._root.is_dir() and (self._root / GIT_DIRNAME).exists()

    def require_installed(self) -> None:
        if not self.is_installed():
            raise SkillsNotInstalledError(self._root)

    def categories(self) -> list[str]:
        return list_categories(self._root)

    def category_path(self, category: str) -> Path:
        return self._root / category

    def require_category(self, category: str) -> Path:
        available = self.categories()
        if category not in available:
            raise CategoryNotFoundError(category, available)
        return self.category_path(category)

    def skills_in(self, category: str) -> list[str]:
        return [item.name for item in list_skill_dirs(self.category_path(category))]

    def counts_by_category(self) -> dict[str, int]:
        return {category: len(self.skills_in(category)) for category in self.categories()}

    def count(self) -> int:
        return sum(self.counts_by_category().values())

    def describe(self, category: str, skill: str) -> str:
        text, _ = read_text_safe(self.category_path(category) / skill / SKILL_YAML)
        if text is None:
            return ""
        return scrape_description(text)
