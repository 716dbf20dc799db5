"""Flatten a deep-format skill into one Markdown document."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable

from spawner_skills.constants import (
    DELEGATION_TRIGGERS_LIMIT,
    PROJECT_URL,
    RECEIVES_FROM_LIMIT,
    SHARP_EDGES_LIMIT,
)
from spawner_skills.skills.models import SkillSource

DEFAULT_VERSION = "1.0.0"
INSTALL_COMMAND = "spawner-skills install"

_PATTERNS_HEADER_RE = re.compile(r"^#\s+Patterns:.*\n+", re.MULTILINE)
_ANTI_PATTERNS_HEADER_RE = re.compile(r"^#\s+Anti-Patterns:.*\n+", re.MULTILINE)
_SHARP_EDGES_HEADER_RE = re.compile(r"^#\s+Sharp Edges:.*\n+", re.MULTILINE)
_DECISIONS_HEADER_RE = re.compile(r"^#\s+Decisions:.*\n+", re.MULTILINE)


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _strip_header(markdown: str, pattern: re.Pattern[str]) -> str:
    return pattern.sub("", markdown, count=1).strip()


def _bullets(items: Iterable[Any]) -> str:
    return "\n".join(f"- {_text(item)}" for item in items)


def format_sharp_edges(data: dict[str, Any] | None) -> str:
    if not data:
        return ""
    parts: list[str] = []
    for edge in _as_list(data.get("sharp_edges"))[:SHARP_EDGES_LIMIT]:
        if not isinstance(edge, dict):
            continue
        severity = _text(edge.get("severity"))
        title = [f"[{severity.upper()}]"] if severity else []
        title.append(_text(edge.get("summary")))
        parts.append(f"### {' '.join(title).strip()}\n\n")

        if edge.get("situation"):
            parts.append(f"**Situation:** {_text(edge['situation'])}\n\n")
        if edge.get("why"):
            parts.append(f"**Why it happens:**\n{_text(edge['why'])}\n\n")
        if edge.get("solution"):
            parts.append(f"**Solution:**\n```\n{_text(edge['solution'])}\n```\n\n")
        symptoms = _as_list(edge.get("symptoms"))
        if symptoms:
            parts.append(f"**Symptoms:**\n{_bullets(symptoms)}\n\n")
        parts.append("---\n\n")
    return "".join(parts)


def format_collaboration(data: dict[str, Any] | None) -> str:
    if not data:
        return ""
    parts: list[str] = []

    triggers = _as_list(data.get("delegation_triggers"))
    if triggers:
        parts.append("### When to Hand Off\n\n")
        parts.append("| Trigger | Delegate To | Context |\n")
        parts.append("|---------|-------------|--------|\n")
        for trigger in triggers[:DELEGATION_TRIGGERS_LIMIT]:
            if not isinstance(trigger, dict):
                continue
            parts.append(
                f"| `{_text(trigger.get('trigger'))}` "
                f"| {_text(trigger.get('delegate_to'))} "
                f"| {_text(trigger.get('context'))} |\n"
            )
        parts.append("\n")

    sources = _as_list(data.get("receives_from"))
    if sources:
        parts.append("### Receives Work From\n\n")
        for source in sources[:RECEIVES_FROM_LIMIT]:
            if not isinstance(source, dict):
                continue
            parts.append(
                f"- **{_text(source.get('skill'))}**: {_text(source.get('context'))}\n"
            )
        parts.append("\n")

    return "".join(parts)


def format_patterns(patterns: Any) -> str:
    parts: list[str] = []
    for pattern in _as_list(patterns):
        if isinstance(pattern, str):
            parts.append(f"- {pattern}\n")
        elif isinstance(pattern, dict) and pattern.get("name"):
            parts.append(f"### {_text(pattern['name'])}\n")
            if pattern.get("description"):
                parts.append(f"{_text(pattern['description'])}\n")
            if pattern.get("when"):
                parts.append(f"**When:** {_text(pattern['when'])}\n")
            if pattern.get("implementation"):
                parts.append(f"```\n{_text(pattern['implementation'])}\n```\n")
            parts.append("\n")
    return "".join(parts)


def format_anti_patterns(anti_patterns: Any) -> str:
    parts: list[str] = []
    for anti in _as_list(anti_patterns):
        if isinstance(anti, str):
            parts.append(f"- {anti}\n")
        elif isinstance(anti, dict) and anti.get("name"):
            parts.append(f"### {_text(anti['name'])}\n")
            if anti.get("description"):
                parts.append(f"{_text(anti['description'])}\n")
            if anti.get("why_bad"):
                parts.append(f"**Why it's bad:** {_text(anti['why_bad'])}\n")
            if anti.get("instead"):
                parts.append(f"**Instead:** {_text(anti['instead'])}\n")
            parts.append("\n")
    return "".join(parts)


class ISkillCompiler(ABC):
    @abstractmethod
    def compile(self, source: SkillSource) -> str:
        """Return the generated Markdown document for ``source``."""


class MarkdownSkillCompiler(ISkillCompiler):
    """Single-file Markdown rendition used for marketplace display."""

    def __init__(self, install_command: str = INSTALL_COMMAND) -> None:
        self.install_command = install_command

    def compile(self, source: SkillSource) -> str:
        skill = source.skill or {}
        parts: list[str] = []
        parts.append(self._header(source, skill))
        parts.append(self._identity(skill))
        parts.append(self._patterns(source, skill))
        parts.append(self._anti_patterns(source, skill))
        parts.append(self._sharp_edges(source))
        parts.append(self._decisions(source))
        parts.append(self._collaboration(source, skill))
        parts.append(self._footer(source))
        return "".join(parts)

    @staticmethod
    def _header(source: SkillSource, skill: dict[str, Any]) -> str:
        name = _text(skill.get("name")) or source.name
        description = _text(skill.get("description"))
        version = _text(skill.get("version")) or DEFAULT_VERSION

        quoted = "\n".join(
            f"> {line}" if line else ">" for line in description.splitlines()
        ) or ">"
        parts = [
            f"# {name}\n\n",
            f"{quoted}\n\n",
            f"**Category:** {source.category} | **Version:** {version}\n\n",
        ]
        tags = _as_list(skill.get("tags"))
        if tags:
            parts.append(f"**Tags:** {', '.join(_text(tag) for tag in tags)}\n\n")
        parts.append("---\n\n")
        return "".join(parts)

    @staticmethod
    def _identity(skill: dict[str, Any]) -> str:
        parts: list[str] = []
        if skill.get("identity"):
            parts.append(f"## Identity\n\n{_text(skill['identity'])}\n\n")
        owns = _as_list(skill.get("owns"))
        if owns:
            parts.append(f"## Expertise Areas\n\n{_bullets(owns)}\n\n")
        return "".join(parts)

    @staticmethod
    def _patterns(source: SkillSource, skill: dict[str, Any]) -> str:
        if source.patterns_md:
            body = f"{_strip_header(source.patterns_md, _PATTERNS_HEADER_RE)}\n\n"
        elif skill.get("patterns"):
            body = f"{format_patterns(skill['patterns'])}\n"
        else:
            body = "*Patterns documented in full version.*\n\n"
        return f"## Patterns\n\n{body}"

    @staticmethod
    def _anti_patterns(source: SkillSource, skill: dict[str, Any]) -> str:
        if source.anti_patterns_md:
            body = f"{_strip_header(source.anti_patterns_md, _ANTI_PATTERNS_HEADER_RE)}\n\n"
        elif _as_list(skill.get("anti_patterns")):
            body = f"{format_anti_patterns(skill['anti_patterns'])}\n"
        else:
            return ""
        return f"## Anti-Patterns\n\n{body}"

    @staticmethod
    def _sharp_edges(source: SkillSource) -> str:
        parts = [
            "## Sharp Edges (Gotchas)\n\n",
            "*Real production issues that cause outages and bugs.*\n\n",
        ]
        if source.sharp_edges_md:
            parts.append(
                f"{_strip_header(source.sharp_edges_md, _SHARP_EDGES_HEADER_RE)}\n\n"
            )
        elif source.sharp_edges:
            parts.append(format_sharp_edges(source.sharp_edges))
        else:
            parts.append("*Sharp edges documented in full version.*\n\n")
        return "".join(parts)

    @staticmethod
    def _decisions(source: SkillSource) -> str:
        if not source.decisions_md:
            return ""
        body = _strip_header(source.decisions_md, _DECISIONS_HEADER_RE)
        return f"## Decision Framework\n\n{body}\n\n"

    @staticmethod
    def _collaboration(source: SkillSource, skill: dict[str, Any]) -> str:
        parts: list[str] = []
        if source.collaboration:
            parts.append("## Collaboration\n\n")
            parts.append(format_collaboration(source.collaboration))
        pairs_with = _as_list(skill.get("pairs_with"))
        if pairs_with:
            parts.append(f"### Works Well With\n\n{_bullets(pairs_with)}\n\n")
        return "".join(parts)

    def _footer(self, source: SkillSource) -> str:
        parts = [
            "---\n\n",
            "## Get the Full Version\n\n",
            "This skill has **automated validations**, **detection patterns**, "
            "and **structured handoff triggers** that work with the Spawner "
            "orchestrator.\n\n",
            f"```bash\n{self.install_command}\n```\n\n",
            f"Full skill path: `~/.spawner/skills/{source.category}/{source.name}/`\n\n",
            "**Includes:**\n",
            "- `skill.yaml` - Structured skill definition\n",
            "- `sharp-edges.yaml` - Machine-parseable gotchas with detection patterns\n",
            "- `validations.yaml` - Automated code checks\n",
            "- `collaboration.yaml` - Handoff triggers for skill orchestration\n",
        ]

        if source.has_deep_content:
            parts.append("\n**Deep content:**\n")
            if source.patterns_md:
                parts.append("- `patterns.md` - Comprehensive pattern library\n")
            if source.anti_patterns_md:
                parts.append("- `anti-patterns.md` - What to avoid and why\n")
            if source.sharp_edges_md:
                parts.append("- `sharp-edges.md` - Detailed gotcha documentation\n")
            if source.decisions_md:
                parts.append("- `decisions.md` - Decision frameworks\n")

        parts.append("\n---\n\n")
        parts.append(f"*Generated by [VibeShip Spawner]({PROJECT_URL})*\n")
        return "".join(parts)
