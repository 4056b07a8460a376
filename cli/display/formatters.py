"""
Display formatting utilities for CLI output.

Provides the coloured step grid and other small formatting helpers.
"""

from rich.text import Text

from splicekit.models.track import STEPS_PER_TRACK, Track

STEP_GROUP = 4

# Colours used for each layout field kind in maps and dumps
FIELD_STYLES = {
    "magic": "bright_blue",
    "payload_size": "cyan",
    "version": "green",
    "tempo": "yellow",
    "track_id": "magenta",
    "name_length": "blue",
    "name": "bright_green",
    "steps": "red",
    "padding": "dim",
}


def step_grid(track: Track, on_char: str = "x", off_char: str = "-") -> Text:
    """
    Create a coloured step grid for a track.

    Returns:
        Rich Text like "|x---|----|x---|----|" with active steps highlighted
    """
    text = Text("|", style="dim")
    for index in range(STEPS_PER_TRACK):
        if track.is_active(index):
            text.append(on_char, style="bold red")
        else:
            text.append(off_char, style="dim")
        if index % STEP_GROUP == STEP_GROUP - 1:
            text.append("|", style="dim")
    return text


def field_style(kind: str) -> str:
    """Get the display style for a layout field kind."""
    return FIELD_STYLES.get(kind, "white")


def format_size(size: int) -> str:
    """Format a byte count, e.g. "1 byte" or "36 bytes"."""
    return f"{size} byte" if size == 1 else f"{size} bytes"
