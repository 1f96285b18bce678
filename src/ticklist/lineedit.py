"""Single-line text editing for the task input field.

Pure functions over (text, caret) pairs. The caret is an index between
characters: 0 is before the first character, len(text) after the last.
"""

DEFAULT_CHAR_LIMIT = 100


def _is_printable(key: str) -> bool:
    """Single printable character (named keys like "left" are not)."""
    return len(key) == 1 and key.isprintable()


def _word_start(text: str, caret: int) -> int:
    """Index where the word before the caret begins (skipping trailing spaces)."""
    i = caret
    while i > 0 and text[i - 1] == " ":
        i -= 1
    while i > 0 and text[i - 1] != " ":
        i -= 1
    return i


def apply_key(
    text: str,
    caret: int,
    key: str,
    char_limit: int = DEFAULT_CHAR_LIMIT,
) -> tuple[str, int]:
    """Apply one key to the buffer and return the new (text, caret).

    Unknown keys leave the buffer untouched.
    """
    caret = max(0, min(caret, len(text)))

    if _is_printable(key):
        if char_limit > 0 and len(text) >= char_limit:
            return text, caret
        return text[:caret] + key + text[caret:], caret + 1

    if key == "backspace":
        if caret == 0:
            return text, caret
        return text[:caret - 1] + text[caret:], caret - 1
    if key in ("delete", "ctrl+d"):
        return text[:caret] + text[caret + 1:], caret
    if key in ("left", "ctrl+b"):
        return text, max(caret - 1, 0)
    if key in ("right", "ctrl+f"):
        return text, min(caret + 1, len(text))
    if key in ("home", "ctrl+a"):
        return text, 0
    if key in ("end", "ctrl+e"):
        return text, len(text)
    if key == "ctrl+u":
        return text[caret:], 0
    if key == "ctrl+k":
        return text[:caret], caret
    if key == "ctrl+w":
        start = _word_start(text, caret)
        return text[:start] + text[caret:], start

    return text, caret


def visible_window(text: str, caret: int, width: int) -> tuple[str, int]:
    """Slice of text that fits a field `width` columns wide.

    Scrolls just enough to keep the caret on screen; one column is kept
    free for the caret when it sits past the last character. Returns the
    visible text and the caret position relative to it.
    """
    if width <= 0 or len(text) < width:
        return text, caret
    start = max(0, caret - width + 1)
    return text[start:start + width], caret - start
