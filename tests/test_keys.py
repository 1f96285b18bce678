"""Tests for Textual key event normalization."""

import pytest
from textual import events

from ticklist.keys import key_name


@pytest.mark.parametrize("key,character,expected", [
    ("a", "a", "a"),
    ("question_mark", "?", "?"),
    ("space", " ", " "),
    ("escape", "\x1b", "esc"),
    ("enter", "\r", "enter"),
    ("backspace", "\x7f", "backspace"),
    ("ctrl+h", "\x08", "backspace"),
    ("ctrl+c", "\x03", "ctrl+c"),
    ("up", None, "up"),
    ("down", None, "down"),
    ("delete", None, "delete"),
])
def test_key_name(key, character, expected):
    assert key_name(events.Key(key, character)) == expected
