"""Strict-parse every YAML file in a skills tree."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from spawner_skills.constants import YAML_VALIDATION_IGNORED_DIRS


@dataclass(frozen=True)
class YamlIssue:
    file: str
    reason: str
    line: int | None = None
    column: int | None = None
    snippet: str | None = None

    def location(self) -> str:
        if self.line is None:
            return "unknown"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class YamlValidationReport:
    checked: int
    issues: list[YamlIssue]

    @property
    def ok(self) -> bool:
        return not self.issues


def discover_yaml_files(root: Path) -> list[Path]:
    files: list[Path] = []
    for current, dir_names, file_names in os.walk(str(root), topdown=True):
        dir_names[:] = sorted(
            name for name in dir_names if name not in YAML_VALIDATION_IGNORED_DIRS
        )
        for file_name in sorted(file_names):
            if file_name.endswith(".yaml"):
                files.append(Path(current) / file_name)
    return files


def check_yaml_file(path: Path, root: Path) -> YamlIssue | None:
    relative = str(path.relative_to(root))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return YamlIssue(file=relative, reason=str(exc))
    if not content.strip():
        return None

    try:
        yaml.safe_load(content)
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark
        return YamlIssue(
            file=relative,
            reason=exc.problem or str(exc),
            line=mark.line + 1 if mark is not None else None,
            column=mark.column + 1 if mark is not None else None,
            snippet=mark.get_snippet() if mark is not None else None,
        )
    except yaml.YAMLError as exc:
        return YamlIssue(file=relative, reason=str(exc))
    return None


def validate_tree(root: Path) -> YamlValidationReport:
    files = discover_yaml_files(root)
    issues = [
        issue
        for issue in (check_yaml_file(path, root) for path in files)
        if issue is not None
    ]
    return YamlValidationReport(checked=len(files), issues=issues)
