"""Textual TUI for Ticklist."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Static

from .config import Config
from .controller import initial_session, update
from .keys import key_name
from .models import Effect, Mode, Session
from .render import render_lines
from .styles import get_theme, to_rich_text

logger = logging.getLogger(__name__)

CARET_BLINK_INTERVAL = 0.53

CSS = """
Screen {
    layout: vertical;
}

#board {
    height: 1fr;
    padding: 1 2;
    overflow-y: auto;
}
"""


class TaskBoard(Static):
    """Displays the current frame."""

    DEFAULT_CSS = """
    TaskBoard {
        height: auto;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.frame = Text()

    def show_frame(self, frame: Text) -> None:
        self.frame = frame
        self.update(frame)


class TicklistApp(App):
    """Textual host for the ticklist state machine.

    Keys are normalized and fed to the controller one at a time; the
    resulting session is rendered into the board.
    """

    CSS = CSS
    ENABLE_COMMAND_PALETTE = False

    # Keys the framework would otherwise claim must reach the controller
    BINDINGS = [
        Binding("ctrl+c", "send_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("ctrl+q", "send_key('ctrl+q')", show=False, priority=True),
    ]

    def __init__(self, config: Config | None = None, session: Session | None = None) -> None:
        super().__init__()
        self.config = config or Config()
        self.session = session or initial_session()
        self._line_theme = get_theme(self.config.style)
        self._caret_visible = True
        self._blink_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield TaskBoard(id="board")

    def on_mount(self) -> None:
        logger.info("Ticklist started (style=%s)", self._line_theme.name)
        self._refresh_board()

    def on_key(self, event: events.Key) -> None:
        """Route every key through the controller."""
        event.stop()
        event.prevent_default()
        self.send_key(key_name(event))

    def action_send_key(self, key: str) -> None:
        self.send_key(key)

    def send_key(self, key: str) -> None:
        """Apply one normalized key to the session and redraw."""
        self.session, effect = update(self.session, key, char_limit=self.config.input.char_limit)
        if self.session.mode is not Mode.INPUTTING:
            self._stop_blink()
        if effect is not None:
            self._apply_effect(effect)
        self._refresh_board()

    def _apply_effect(self, effect: Effect) -> None:
        logger.debug("Effect: %s", effect.value)
        if effect is Effect.QUIT:
            self._stop_blink()
            self.exit()
        elif effect is Effect.BLINK:
            self._start_blink()

    def _start_blink(self) -> None:
        self._stop_blink()
        self._caret_visible = True
        self._blink_timer = self.set_interval(CARET_BLINK_INTERVAL, self._toggle_caret)

    def _stop_blink(self) -> None:
        if self._blink_timer is not None:
            self._blink_timer.stop()
            self._blink_timer = None
        self._caret_visible = True

    def _toggle_caret(self) -> None:
        self._caret_visible = not self._caret_visible
        self._refresh_board()

    def _refresh_board(self) -> None:
        lines = render_lines(
            self.session,
            placeholder=self.config.input.placeholder,
            input_width=self.config.input.width,
        )
        try:
            board = self.query_one("#board", TaskBoard)
        except NoMatches:
            return
        board.show_frame(to_rich_text(lines, self._line_theme, caret_visible=self._caret_visible))
