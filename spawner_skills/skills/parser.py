"""Load the YAML and Markdown files that make up one skill directory."""

from __future__ import annotations

from pathlib import Path

import yaml

from spawner_skills.constants import (
    ANTI_PATTERNS_MD,
    COLLABORATION_YAML,
    DECISIONS_MD,
    PATTERNS_MD,
    SHARP_EDGES_MD,
    SHARP_EDGES_YAML,
    SKILL_YAML,
    VALIDATIONS_YAML,
)
from spawner_skills.skills.fallback import extract_yaml_fields
from spawner_skills.skills.models import SkillSource, YamlLoadResult
from spawner_skills.utils import read_text_safe


def load_yaml(path: Path) -> YamlLoadResult:
    """Strict parse first, regex extraction when the strict parse fails."""
    text, error = read_text_safe(path)
    if error is not None:
        return YamlLoadResult(warning=f"Failed to read {path}: {error}")
    if text is None:
        return YamlLoadResult()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        extraction = extract_yaml_fields(text)
        return YamlLoadResult(
            data=extraction.as_mapping() if extraction is not None else None,
            fallback=True,
            warning=f"Fallback parsing {path.name}",
        )

    if data is None or isinstance(data, dict):
        return YamlLoadResult(data=data)

    extraction = extract_yaml_fields(text)
    return YamlLoadResult(
        data=extraction.as_mapping() if extraction is not None else None,
        fallback=True,
        warning=f"Fallback parsing {path.name} (top level is not a mapping)",
    )


def read_markdown(path: Path) -> str | None:
    text, _ = read_text_safe(path)
    return text


def load_skill_source(path: Path, category: str) -> SkillSource:
    warnings: list[str] = []

    def _yaml(filename: str):
        result = load_yaml(path / filename)
        if result.warning is not None:
            warnings.append(f"{category}/{path.name}: {result.warning}")
        return result.data

    skill = _yaml(SKILL_YAML)
    sharp_edges = _yaml(SHARP_EDGES_YAML)
    collaboration = _yaml(COLLABORATION_YAML)
    validations = _yaml(VALIDATIONS_YAML)

    return SkillSource(
        name=path.name,
        category=category,
        path=path,
        skill=skill,
        sharp_edges=sharp_edges,
        collaboration=collaboration,
        validations=validations,
        patterns_md=read_markdown(path / PATTERNS_MD),
        anti_patterns_md=read_markdown(path / ANTI_PATTERNS_MD),
        sharp_edges_md=read_markdown(path / SHARP_EDGES_MD),
        decisions_md=read_markdown(path / DECISIONS_MD),
        warnings=warnings,
    )
