"""Recount skills and refresh the advertised count in documentation files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from spawner_skills.catalog import list_categories, list_skill_dirs


class CountSyncStatus(str, Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    MISSING = "missing"


@dataclass(frozen=True)
class CountTarget:
    path: str
    pattern: re.Pattern[str]
    replacement: Callable[[int], str]


DEFAULT_COUNT_TARGETS: tuple[CountTarget, ...] = (
    CountTarget(
        "README.md",
        re.compile(r"\*\*\d+\+? skills\*\*"),
        lambda count: f"**{count}+ skills**",
    ),
    CountTarget(
        "cli/README.md",
        re.compile(r"\d+\+? specialist skills"),
        lambda count: f"{count}+ specialist skills",
    ),
    CountTarget(
        "cli/package.json",
        re.compile(r"\d+\+? specialist skills"),
        lambda count: f"{count}+ specialist skills",
    ),
)


@dataclass(frozen=True)
class SkillCount:
    total: int
    categories: dict[str, int] = field(default_factory=dict)

    def ranked(self) -> list[tuple[str, int]]:
        return sorted(self.categories.items(), key=lambda item: (-item[1], item[0]))


@dataclass(frozen=True)
class CountSyncRow:
    path: Path
    status: CountSyncStatus


class SkillCounter:
    def __init__(self, root: Path) -> None:
        self.root = root

    def count(self) -> SkillCount:
        categories: dict[str, int] = {}
        for category in list_categories(self.root):
            skills = len(list_skill_dirs(self.root / category))
            if skills > 0:
                categories[category] = skills
        return SkillCount(total=sum(categories.values()), categories=categories)


class CountSyncService:
    def __init__(
        self, root: Path, targets: tuple[CountTarget, ...] = DEFAULT_COUNT_TARGETS
    ) -> None:
        self.root = root
        self.targets = targets

    def sync(self, count: int, dry_run: bool = False) -> list[CountSyncRow]:
        rows: list[CountSyncRow] = []
        for target in self.targets:
            path = self.root / target.path
            if not path.is_file():
                rows.append(CountSyncRow(path, CountSyncStatus.MISSING))
                continue

            content = path.read_text(encoding="utf-8")
            updated = target.pattern.sub(target.replacement(count), content)
            if updated == content:
                rows.append(CountSyncRow(path, CountSyncStatus.UNCHANGED))
                continue

            if not dry_run:
                path.write_text(updated, encoding="utf-8")
            rows.append(CountSyncRow(path, CountSyncStatus.UPDATED))
        return rows
