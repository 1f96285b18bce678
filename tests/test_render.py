"""Tests for frame rendering and theming."""

import pytest

from ticklist.models import Mode, Session
from ticklist.render import (
    BROWSING_HINT,
    CARET,
    DEFAULT_PLACEHOLDER,
    EMPTY_MESSAGE,
    FAREWELL,
    HELP_FOOTER,
    HELP_TITLE,
    INPUTTING_HINT,
    TITLE,
    render,
    render_lines,
)
from ticklist.styles import PLAIN_THEME, RICH_THEME, get_theme, to_rich_text


class TestBrowsing:
    def test_empty_list_placeholder(self):
        frame = render(Session())
        assert TITLE in frame
        assert EMPTY_MESSAGE in frame
        assert BROWSING_HINT in frame
        assert "→" not in frame

    def test_selected_task_marked(self):
        frame = render(Session(tasks=("Alpha", "Beta", "Gamma"), cursor=1))
        lines = frame.splitlines()
        assert "→   Beta" in lines
        assert "    Alpha" in lines
        assert "    Gamma" in lines
        assert frame.count("→") == 1

    def test_task_order_preserved(self):
        frame = render(Session(tasks=("one", "two", "three")))
        assert frame.index("one") < frame.index("two") < frame.index("three")

    def test_line_roles(self):
        lines = render_lines(Session(tasks=("A", "B"), cursor=0))
        roles = [line.role for line in lines]
        assert roles == ["title", "blank", "selected", "item", "blank", "hint"]

    def test_ends_with_newline(self):
        assert render(Session()).endswith("\n")


class TestInputting:
    def test_shows_list_prompt_and_draft(self):
        session = Session(tasks=("A", "B"), cursor=1, mode=Mode.INPUTTING, draft="Buy", caret=3)
        frame = render(session)
        assert "→   B" in frame
        assert "New Task:" in frame
        assert "  > Buy" + CARET in frame
        assert INPUTTING_HINT in frame
        assert BROWSING_HINT not in frame

    def test_caret_in_middle(self):
        session = Session(mode=Mode.INPUTTING, draft="abc", caret=1)
        assert "  > a" + CARET + "bc" in render(session)

    def test_placeholder_when_empty(self):
        frame = render(Session(mode=Mode.INPUTTING))
        assert "  > " + CARET + DEFAULT_PLACEHOLDER in frame

    def test_custom_placeholder(self):
        frame = render(Session(mode=Mode.INPUTTING), placeholder="What next?")
        assert "What next?" in frame
        assert DEFAULT_PLACEHOLDER not in frame

    def test_long_draft_windowed(self):
        draft = "a" * 30 + "b" * 30
        session = Session(mode=Mode.INPUTTING, draft=draft, caret=len(draft))
        line = next(line for line in render_lines(session, input_width=20) if line.role == "input")
        assert line.text == "  > " + "b" * 19
        assert line.caret == len(line.text)


class TestHelp:
    def test_replaces_task_list(self):
        frame = render(Session(tasks=("secret task",), mode=Mode.HELP))
        assert HELP_TITLE in frame
        assert "secret task" not in frame
        assert TITLE not in frame

    def test_groups_and_footer(self):
        frame = render(Session(mode=Mode.HELP))
        for heading in ("Navigation:", "Tasks:", "Application:"):
            assert heading in frame
        assert frame.rstrip("\n").endswith(HELP_FOOTER)


class TestQuitting:
    @pytest.mark.parametrize("mode", list(Mode))
    def test_farewell_in_every_mode(self, mode):
        session = Session(tasks=("A",), mode=mode, draft="x" if mode is Mode.INPUTTING else "", quitting=True)
        assert render(session) == FAREWELL + "\n"


class TestPurity:
    @pytest.mark.parametrize("session", [
        Session(),
        Session(tasks=("A", "B"), cursor=1),
        Session(tasks=("A",), mode=Mode.INPUTTING, draft="hi", caret=1),
        Session(mode=Mode.HELP),
        Session(quitting=True),
    ])
    def test_idempotent(self, session):
        snapshot = Session(**vars(session))
        assert render(session) == render(session)
        assert session == snapshot


class TestThemes:
    def test_get_theme_falls_back(self):
        assert get_theme("nope") is RICH_THEME
        assert get_theme("plain") is PLAIN_THEME

    def test_rich_text_matches_plain_text_without_caret(self):
        session = Session(tasks=("A", "B"), cursor=0)
        lines = render_lines(session)
        text = to_rich_text(lines, RICH_THEME)
        assert text.plain + "\n" == render(session)

    def test_caret_drawn_as_style_not_marker(self):
        session = Session(mode=Mode.INPUTTING, draft="ab", caret=2)
        text = to_rich_text(render_lines(session), RICH_THEME, caret_visible=True)
        assert CARET not in text.plain
        assert "  > ab " in text.plain

    def test_hidden_caret_adds_nothing(self):
        session = Session(mode=Mode.INPUTTING, draft="ab", caret=2)
        text = to_rich_text(render_lines(session), RICH_THEME, caret_visible=False)
        assert "  > ab\n" in text.plain
