"""Key handling: the browsing / inputting / help state machine.

`update` is a pure transition function. It takes the current session and
one key name and returns the next session plus an optional effect for the
host. Every (mode, key) pair has a defined result; unknown keys are no-ops.
"""

import logging
from dataclasses import replace
from typing import assert_never

from .lineedit import DEFAULT_CHAR_LIMIT, apply_key
from .models import Effect, Mode, Session

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "esc", "ctrl+c"})
UP_KEYS = frozenset({"up", "k"})
DOWN_KEYS = frozenset({"down", "j"})
ADD_KEYS = frozenset({"n", "a"})
HELP_KEYS = frozenset({"?", "h"})
DELETE_KEYS = frozenset({"x", "backspace", "d"})
HELP_RETURN_KEYS = frozenset({"esc", "q", "?", "h", "enter"})

Transition = tuple[Session, Effect | None]


def initial_session() -> Session:
    """Empty list, browsing."""
    return Session()


def update(
    session: Session,
    key: str,
    char_limit: int = DEFAULT_CHAR_LIMIT,
) -> Transition:
    """Handle one key press.

    Args:
        session: Current snapshot (left untouched)
        key: Normalized key name, e.g. "up", "enter", "esc" or "a"
        char_limit: Maximum draft length while inputting

    Returns:
        The next snapshot and an optional effect for the host
    """
    if session.quitting:
        return session, None

    mode = session.mode
    if mode is Mode.BROWSING:
        result = _update_browsing(session, key)
    elif mode is Mode.INPUTTING:
        result = _update_inputting(session, key, char_limit)
    elif mode is Mode.HELP:
        result = _update_help(session, key)
    else:
        assert_never(mode)

    if result[0].mode is not mode:
        logger.debug("Mode %s -> %s on %r", mode.value, result[0].mode.value, key)
    return result


def _update_browsing(session: Session, key: str) -> Transition:
    if key in QUIT_KEYS:
        return replace(session, quitting=True), Effect.QUIT

    if key in UP_KEYS:
        return replace(session, cursor=max(session.cursor - 1, 0)), None

    if key in DOWN_KEYS:
        if session.cursor < len(session.tasks) - 1:
            return replace(session, cursor=session.cursor + 1), None
        return session, None

    if key in ADD_KEYS:
        return replace(session, mode=Mode.INPUTTING, draft="", caret=0), Effect.BLINK

    if key in HELP_KEYS:
        return replace(session, mode=Mode.HELP), None

    if key in DELETE_KEYS:
        return _delete_selected(session), None

    return session, None


def _delete_selected(session: Session) -> Session:
    """Drop the task under the cursor, keeping the cursor in range."""
    if not session.tasks:
        return session
    cursor = session.cursor
    tasks = session.tasks[:cursor] + session.tasks[cursor + 1:]
    if cursor >= len(tasks) and cursor > 0:
        cursor -= 1
    logger.debug("Deleted task %d, %d left", session.cursor, len(tasks))
    return replace(session, tasks=tasks, cursor=cursor)


def _update_help(session: Session, key: str) -> Transition:
    # Everything except the return keys is swallowed
    if key in HELP_RETURN_KEYS:
        return replace(session, mode=Mode.BROWSING), None
    return session, None


def _update_inputting(session: Session, key: str, char_limit: int) -> Transition:
    if key == "esc":
        return replace(session, mode=Mode.BROWSING, draft="", caret=0), None

    if key == "enter":
        tasks = session.tasks
        cursor = session.cursor
        if session.draft:
            tasks = tasks + (session.draft,)
            cursor = len(tasks) - 1
        return replace(
            session,
            tasks=tasks,
            cursor=cursor,
            mode=Mode.BROWSING,
            draft="",
            caret=0,
        ), None

    # Help keys are not special here; "?" and "h" land in the draft
    draft, caret = apply_key(session.draft, session.caret, key, char_limit)
    if draft == session.draft and caret == session.caret:
        return session, None
    return replace(session, draft=draft, caret=caret), None
