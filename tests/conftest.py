"""Test configuration and fixtures."""

import struct

import pytest

# Tracks of the reference "pattern_1" file: (id, name, step grid)
PATTERN_1_TRACKS = [
    (0, "kick", "x---|x---|x---|x---"),
    (1, "snare", "----|x---|----|x---"),
    (2, "clap", "----|x-x-|----|----"),
    (3, "hh-open", "--x-|--x-|x-x-|--x-"),
    (4, "hh-close", "x---|x---|----|x--x"),
    (5, "cowbell", "----|----|--x-|----"),
]

PATTERN_1_TEXT = (
    "Saved with HW Version: 0.808-alpha\n"
    "Tempo: 120\n"
    "(0) kick\t|x---|x---|x---|x---|\n"
    "(1) snare\t|----|x---|----|x---|\n"
    "(2) clap\t|----|x-x-|----|----|\n"
    "(3) hh-open\t|--x-|--x-|x-x-|--x-|\n"
    "(4) hh-close\t|x---|x---|----|x--x|\n"
    "(5) cowbell\t|----|----|--x-|----|\n"
)


def grid_to_steps(grid: str) -> bytes:
    """Convert "x---|x---|..." into 16 step bytes."""
    cells = grid.replace("|", "")
    assert len(cells) == 16
    return bytes(1 if c == "x" else 0 for c in cells)


def build_splice(
    version="0.808-alpha",
    tempo=120.0,
    tracks=(),
    trailing=b"",
    payload_size=None,
) -> bytes:
    """
    Build a SPLICE buffer.

    tracks holds (id, name, steps) tuples where steps is either a grid
    string or 16 raw bytes. payload_size defaults to the exact size of
    version, tempo and tracks.
    """
    raw_version = version if isinstance(version, bytes) else version.encode("utf-8")
    body = raw_version.ljust(32, b"\x00")[:32]
    body += struct.pack("<f", tempo)

    for track_id, name, steps in tracks:
        raw_name = name if isinstance(name, bytes) else name.encode("utf-8")
        if isinstance(steps, str):
            steps = grid_to_steps(steps)
        body += struct.pack(">BI", track_id, len(raw_name)) + raw_name + bytes(steps)

    if payload_size is None:
        payload_size = len(body)

    return b"SPLICE" + struct.pack(">q", payload_size) + body + trailing


@pytest.fixture
def splice_builder():
    """Return the SPLICE buffer builder."""
    return build_splice


@pytest.fixture
def steps_from_grid():
    """Return the step grid converter."""
    return grid_to_steps


@pytest.fixture
def pattern_1_data():
    """Return raw bytes of the six-track reference pattern."""
    return build_splice(tracks=PATTERN_1_TRACKS)


@pytest.fixture
def pattern_1_text():
    """Return the canonical rendering of the reference pattern."""
    return PATTERN_1_TEXT


@pytest.fixture
def kick_data():
    """Return a single-track pattern with one hit on the first step."""
    return build_splice(tracks=[(0, "kick", "x---|----|----|----")])


@pytest.fixture
def pattern_1_file(tmp_path, pattern_1_data):
    """Return path to the reference pattern written to disk."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(pattern_1_data)
    return path
