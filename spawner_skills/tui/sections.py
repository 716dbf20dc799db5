from typing import Optional

from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from spawner_skills.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def banner(title: str, tagline: str) -> Panel:
        text = Text(justify="center")
        text.append(title, style="bold")
        text.append("\n")
        text.append(tagline, style=UIStyle.CYAN.value)
        return Panel(Align.center(text), border_style=UIStyle.MAGENTA.value, padding=(1, 2))
