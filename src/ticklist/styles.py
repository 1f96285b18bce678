"""Themes that turn rendered lines into styled Rich text."""

from dataclasses import dataclass, field

from rich.text import Text

from .render import Line


@dataclass(frozen=True)
class Theme:
    """Maps line roles to Rich style strings."""

    name: str
    roles: dict[str, str] = field(default_factory=dict)
    cursor: str = ""             # Style for the → marker on the selected line
    caret: str = "reverse"

    def style_for(self, role: str) -> str:
        return self.roles.get(role, "")


RICH_THEME = Theme(
    name="rich",
    roles={
        "title": "bold color(99)",
        "selected": "bold color(212)",
        "item": "color(245)",
        "empty": "color(245)",
        "prompt": "bold color(212)",
        "input": "",
        "placeholder": "color(240)",
        "heading": "color(205)",
        "hint": "color(241)",
        "farewell": "",
    },
    cursor="bold color(212)",
)

PLAIN_THEME = Theme(
    name="plain",
    roles={"title": "bold", "selected": "bold", "prompt": "bold", "placeholder": "dim", "hint": "dim"},
    cursor="bold",
)

THEMES = {theme.name: theme for theme in (RICH_THEME, PLAIN_THEME)}
DEFAULT_STYLE = "rich"


def get_theme(name: str) -> Theme:
    """Get a theme by name, falling back to the default one."""
    return THEMES.get(name, THEMES[DEFAULT_STYLE])


def _style_line(line: Line, theme: Theme, caret_visible: bool) -> Text:
    text = Text(line.text, style=theme.style_for(line.role))
    if line.role == "selected" and theme.cursor:
        text.stylize(theme.cursor, 0, 1)
    if line.caret is not None and caret_visible:
        if line.caret < len(line.text):
            text.stylize(theme.caret, line.caret, line.caret + 1)
        else:
            text.append(" ", style=theme.caret)
    return text


def to_rich_text(lines: list[Line], theme: Theme, caret_visible: bool = True) -> Text:
    """Join rendered lines into one styled Text.

    The caret is drawn as a reversed cell over the character under it
    (or a trailing space) instead of the plain-text block marker.
    """
    styled = Text()
    for i, line in enumerate(lines):
        if i:
            styled.append("\n")
        styled.append_text(_style_line(line, theme, caret_visible))
    return styled
