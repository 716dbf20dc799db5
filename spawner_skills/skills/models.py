"""Skill data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class YamlLoadResult:
    data: dict[str, Any] | None = None
    fallback: bool = False
    warning: str | None = None


@dataclass(frozen=True)
class SkillSource:
    name: str
    category: str
    path: Path
    skill: dict[str, Any] | None
    sharp_edges: dict[str, Any] | None = None
    collaboration: dict[str, Any] | None = None
    validations: dict[str, Any] | None = None
    patterns_md: str | None = None
    anti_patterns_md: str | None = None
    sharp_edges_md: str | None = None
    decisions_md: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def has_deep_content(self) -> bool:
        return bool(self.patterns_md or self.anti_patterns_md or self.sharp_edges_md)


@dataclass(frozen=True)
class GeneratedSkill:
    category: str
    name: str
    path: Path


@dataclass(frozen=True)
class SkippedSkill:
    category: str
    name: str
    reason: str


@dataclass
class DistBuildResult:
    output_root: Path
    generated: list[GeneratedSkill] = field(default_factory=list)
    skipped: list[SkippedSkill] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
