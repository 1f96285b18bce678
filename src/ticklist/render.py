"""Frame rendering for each mode.

The renderer is structural only: it decides which lines appear and which
role each line plays (title, selected item, hint, ...). Colours belong to
the theme in `styles`, which maps roles to Rich styles.
"""

from typing import NamedTuple, assert_never

from .lineedit import visible_window
from .models import Mode, Session

TITLE = "📝 To-Do"
HELP_TITLE = "📖 Help & Commands"
FAREWELL = "Goodbye! ✨"
EMPTY_MESSAGE = "No tasks yet. Press 'n' to add one."
INPUT_PROMPT = "New Task:"
INPUT_PREFIX = "  > "
DEFAULT_PLACEHOLDER = "Enter task name..."
DEFAULT_INPUT_WIDTH = 40

CURSOR_MARKER = "→ "
SELECTED_INDENT = "  "
ITEM_INDENT = "    "
CARET = "█"

BROWSING_HINT = "↑/↓: navigate • n: add • x: delete • ?: help • q: quit"
INPUTTING_HINT = "enter: save • esc: cancel"
HELP_FOOTER = "Press any key to return..."

HELP_SECTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Navigation:", (
        "↑ / k      - Move selection up",
        "↓ / j      - Move selection down",
    )),
    ("Tasks:", (
        "n / a      - Add a new task (New/Add)",
        "x / d / bk - Remove selected task (Delete)",
        "Enter      - Confirm new task (In input mode)",
    )),
    ("Application:", (
        "? / h      - Toggle this help view",
        "q / Esc    - Return to list or Quit",
        "Ctrl+C     - Force quit",
    )),
)


class Line(NamedTuple):
    """One rendered line.

    role names what the line is so a theme can style it; caret is the
    column of the text caret on the input line, None elsewhere.
    """

    role: str
    text: str
    caret: int | None = None


BLANK = Line("blank", "")


def render_lines(
    session: Session,
    placeholder: str = DEFAULT_PLACEHOLDER,
    input_width: int = DEFAULT_INPUT_WIDTH,
) -> list[Line]:
    """Build the structured frame for a session."""
    if session.quitting:
        return [Line("farewell", FAREWELL)]

    mode = session.mode
    if mode is Mode.BROWSING:
        return [
            *_task_list(session),
            BLANK,
            Line("hint", BROWSING_HINT),
        ]
    elif mode is Mode.INPUTTING:
        return [
            *_task_list(session),
            BLANK,
            Line("prompt", INPUT_PROMPT),
            _input_line(session, placeholder, input_width),
            BLANK,
            Line("hint", INPUTTING_HINT),
        ]
    elif mode is Mode.HELP:
        return _help_screen()
    else:
        assert_never(mode)


def render(
    session: Session,
    placeholder: str = DEFAULT_PLACEHOLDER,
    input_width: int = DEFAULT_INPUT_WIDTH,
) -> str:
    """Render a session as plain text, caret shown as a block."""
    parts = []
    for line in render_lines(session, placeholder, input_width):
        if line.caret is None:
            parts.append(line.text)
        else:
            parts.append(line.text[:line.caret] + CARET + line.text[line.caret:])
    return "\n".join(parts) + "\n"


def _task_list(session: Session) -> list[Line]:
    lines = [Line("title", TITLE), BLANK]
    if not session.tasks:
        lines.append(Line("empty", ITEM_INDENT + EMPTY_MESSAGE))
        return lines
    for i, task in enumerate(session.tasks):
        if i == session.cursor:
            lines.append(Line("selected", CURSOR_MARKER + SELECTED_INDENT + task))
        else:
            lines.append(Line("item", ITEM_INDENT + task))
    return lines


def _input_line(session: Session, placeholder: str, input_width: int) -> Line:
    """Draft with caret, or the placeholder when nothing is typed yet."""
    if not session.draft:
        return Line("placeholder", INPUT_PREFIX + placeholder, caret=len(INPUT_PREFIX))
    text, caret = visible_window(session.draft, session.caret, input_width)
    return Line("input", INPUT_PREFIX + text, caret=len(INPUT_PREFIX) + caret)


def _help_screen() -> list[Line]:
    lines = [Line("title", HELP_TITLE), BLANK]
    for heading, entries in HELP_SECTIONS:
        lines.append(Line("heading", heading))
        lines.extend(Line("item", ITEM_INDENT + entry) for entry in entries)
        lines.append(BLANK)
    lines.append(Line("hint", HELP_FOOTER))
    return lines
