"""Best-effort field extraction for skill YAML the strict parser rejects.

Skill files often embed code samples whose backticks, colons and braces trip
up ``yaml.safe_load``. This module scrapes the fields the dist build needs
with line-oriented regexes. It is not a YAML parser: nested sections are only
detected, never read.
"""

from __future__ import annotations

import re
import textwrap
from dataclasses import dataclass, field
from typing import Any

SCALAR_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "category",
    "version",
    "skill_id",
    "difficulty",
)
LIST_FIELDS: tuple[str, ...] = ("tags", "triggers", "provides", "references")

PATTERNS_PLACEHOLDER: dict[str, str] = {
    "name": "See full skill for patterns",
    "description": "Contains implementation patterns with code examples",
}
ANTI_PATTERNS_PLACEHOLDER: dict[str, str] = {
    "name": "See full skill for anti-patterns",
    "description": "Contains anti-patterns with examples",
}
HANDOFFS_PLACEHOLDER: dict[str, str] = {"to": "various", "when": "See full skill"}

_BLOCK_INDICATOR_RE = re.compile(r"^[|>][-+0-9]*$")
_QUOTES = "\"'"


def _scalar_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(name)}:[ \t]*(\S[^\n]*)$", re.MULTILINE)


def _block_list_re(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"^{re.escape(name)}:[ \t]*\n((?:[ \t]*-[ \t]+[^\n]+\n?)+)", re.MULTILINE
    )


def _flow_list_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(name)}:[ \t]*\[([^\]\n]*)\][ \t]*$", re.MULTILINE)


_DESCRIPTION_BLOCK_RE = re.compile(
    r"^description:[ \t]*(?:[|>][-+0-9]*)?[ \t]*\n((?:(?:[ ]{2,}[^\n]*)?\n)+)",
    re.MULTILINE,
)
_SECTION_RES: dict[str, re.Pattern[str]] = {
    "patterns": re.compile(r"^patterns:", re.MULTILINE),
    "anti_patterns": re.compile(r"^anti_patterns:", re.MULTILINE),
    "handoffs": re.compile(r"^handoffs:[ \t]*\n(?:[ \t]*(?:#[^\n]*)?\n)*[ \t]*-", re.MULTILINE),
}


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


@dataclass(frozen=True)
class FallbackExtraction:
    """Partial view of a skill file: absent fields stay ``None``."""

    scalars: dict[str, str] = field(default_factory=dict)
    description: str | None = None
    lists: dict[str, list[str]] = field(default_factory=dict)
    has_patterns: bool = False
    has_anti_patterns: bool = False
    has_handoffs: bool = False

    def is_empty(self) -> bool:
        return not (
            self.scalars
            or self.description
            or self.lists
            or self.has_patterns
            or self.has_anti_patterns
            or self.has_handoffs
        )

    def as_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.scalars)
        if self.description:
            data["description"] = self.description
        for key, values in self.lists.items():
            data[key] = list(values)
        if self.has_patterns:
            data["patterns"] = [dict(PATTERNS_PLACEHOLDER)]
        if self.has_anti_patterns:
            data["anti_patterns"] = [dict(ANTI_PATTERNS_PLACEHOLDER)]
        if self.has_handoffs:
            data["handoffs"] = [dict(HANDOFFS_PLACEHOLDER)]
        return data


def _extract_description(content: str) -> str | None:
    inline = _scalar_re("description").search(content)
    if inline is not None:
        value = inline.group(1).strip()
        if not _BLOCK_INDICATOR_RE.match(value):
            return _unquote(value) or None

    block = _DESCRIPTION_BLOCK_RE.search(content)
    if block is None:
        return None
    return textwrap.dedent(block.group(1)).strip() or None


def _extract_list(content: str, name: str) -> list[str] | None:
    block = _block_list_re(name).search(content)
    if block is not None:
        items: list[str] = []
        for line in block.group(1).splitlines():
            item = line.strip()
            if item.startswith("-"):
                item = _unquote(item[1:])
            if item:
                items.append(item)
        return items

    flow = _flow_list_re(name).search(content)
    if flow is not None:
        return [_unquote(item) for item in flow.group(1).split(",") if item.strip()]
    return None


def extract_yaml_fields(content: str) -> FallbackExtraction | None:
    """Scrape what can be scraped; ``None`` when nothing was recognised."""
    text = content if content.endswith("\n") else f"{content}\n"

    scalars: dict[str, str] = {}
    for name in SCALAR_FIELDS:
        match = _scalar_re(name).search(text)
        if match is not None and not _BLOCK_INDICATOR_RE.match(match.group(1).strip()):
            scalars[name] = _unquote(match.group(1))

    lists: dict[str, list[str]] = {}
    for name in LIST_FIELDS:
        values = _extract_list(text, name)
        if values is not None:
            lists[name] = values

    extraction = FallbackExtraction(
        scalars=scalars,
        description=_extract_description(text),
        lists=lists,
        has_patterns=bool(_SECTION_RES["patterns"].search(text)),
        has_anti_patterns=bool(_SECTION_RES["anti_patterns"].search(text)),
        has_handoffs=bool(_SECTION_RES["handoffs"].search(text)),
    )
    return None if extraction.is_empty() else extraction
