"""Translate Textual key events into the key names the controller uses."""

from textual import events

# Textual names that differ from the controller's vocabulary
KEY_ALIASES = {
    "escape": "esc",
    "space": " ",
    "ctrl+h": "backspace",  # Some terminals send ^H for backspace
}


def key_name(event: events.Key) -> str:
    """Normalized name for a key event.

    Printable characters map to the character itself ("?", "a", " "),
    everything else to a lowercase key name ("enter", "esc", "ctrl+c").
    """
    if event.is_printable and event.character:
        return event.character
    return KEY_ALIASES.get(event.key, event.key)
