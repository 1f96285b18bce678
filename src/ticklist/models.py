"""Data models for Ticklist."""

from dataclasses import dataclass
from enum import Enum


class Mode(Enum):
    """Active branch of the input/render state machine."""
    BROWSING = "browsing"
    INPUTTING = "inputting"
    HELP = "help"


class Effect(Enum):
    """Instruction for the host that is not itself a state change."""
    QUIT = "quit"    # Stop the event loop
    BLINK = "blink"  # Input focused, start the caret blink


@dataclass(frozen=True)
class Session:
    """Snapshot of the editor state.

    Never mutated in place: the controller returns a new snapshot for
    every key it handles.
    """

    tasks: tuple[str, ...] = ()
    cursor: int = 0                 # Index of the highlighted task, 0 when empty
    mode: Mode = Mode.BROWSING
    draft: str = ""                 # Only non-empty while inputting
    caret: int = 0                  # Caret position inside draft
    quitting: bool = False

    @property
    def selected(self) -> str | None:
        """Task under the cursor, or None when the list is empty."""
        if not self.tasks:
            return None
        return self.tasks[self.cursor]
