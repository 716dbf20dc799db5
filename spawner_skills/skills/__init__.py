from spawner_skills.skills.builder import DistBuilder
from spawner_skills.skills.compilers import ISkillCompiler, MarkdownSkillCompiler
from spawner_skills.skills.fallback import FallbackExtraction, extract_yaml_fields
from spawner_skills.skills.models import (
    DistBuildResult,
    GeneratedSkill,
    SkillSource,
    SkippedSkill,
    YamlLoadResult,
)
from spawner_skills.skills.parser import load_skill_source, load_yaml, read_markdown

__all__ = [
    "DistBuildResult",
    "DistBuilder",
    "FallbackExtraction",
    "GeneratedSkill",
    "ISkillCompiler",
    "MarkdownSkillCompiler",
    "SkillSource",
    "SkippedSkill",
    "YamlLoadResult",
    "extract_yaml_fields",
    "load_skill_source",
    "load_yaml",
    "read_markdown",
]
