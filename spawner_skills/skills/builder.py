"""Generate one Markdown file per skill from a deep-format skills tree."""

from __future__ import annotations

from pathlib import Path

from spawner_skills.catalog import list_categories, list_skill_dirs
from spawner_skills.constants import SKILL_YAML
from spawner_skills.skills.compilers import ISkillCompiler, MarkdownSkillCompiler
from spawner_skills.skills.models import DistBuildResult, GeneratedSkill, SkippedSkill
from spawner_skills.skills.parser import load_skill_source


class DistBuilder:
    def __init__(
        self,
        source_root: Path,
        output_root: Path,
        compiler: ISkillCompiler | None = None,
    ) -> None:
        self.source_root = source_root
        self.output_root = output_root
        self.compiler = compiler or MarkdownSkillCompiler()

    def _categories(self) -> list[str]:
        output = self.output_root.resolve()
        return [
            category
            for category in list_categories(self.source_root)
            if (self.source_root / category).resolve() != output
        ]

    def build(self, only: str | None = None) -> DistBuildResult:
        """Regenerate every skill document (or just ``only``) from scratch.

        Missing ``skill.yaml`` skips that one skill; nothing else aborts the run.
        """
        result = DistBuildResult(output_root=self.output_root)
        self.output_root.mkdir(parents=True, exist_ok=True)

        for category in self._categories():
            for skill_dir in list_skill_dirs(self.source_root / category):
                if only is not None and skill_dir.name != only:
                    continue
                self._build_one(result, category, skill_dir)

        return result

    def _build_one(
        self, result: DistBuildResult, category: str, skill_dir: Path
    ) -> None:
        name = skill_dir.name
        if not (skill_dir / SKILL_YAML).is_file():
            result.skipped.append(
                SkippedSkill(category, name, f"no {SKILL_YAML} found")
            )
            return

        source = load_skill_source(skill_dir, category)
        result.warnings.extend(source.warnings)
        if not source.skill:
            result.skipped.append(
                SkippedSkill(category, name, f"{SKILL_YAML} has no usable fields")
            )
            return

        content = self.compiler.compile(source)
        target = self.output_root / category / f"{name}.md"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        result.generated.append(GeneratedSkill(category, name, target))
