from spawner_skills.tui.renderers import SkillsConsoleUI

__all__ = ["SkillsConsoleUI"]
