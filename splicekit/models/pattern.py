"""
Pattern data model - the top-level container for decoded SPLICE data.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from splicekit.models.track import Track
from splicekit.utils.float32 import format_float32


@dataclass(frozen=True)
class Pattern:
    """
    Complete drum pattern decoded from a .splice file.

    Attributes:
        version: Hardware version string the file was saved with
        tempo: Tempo in BPM (a float32 value)
        tracks: Tracks in on-disk order
    """

    version: str
    tempo: float
    tracks: Tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of tracks but always store a tuple
        if not isinstance(self.tracks, tuple):
            object.__setattr__(self, "tracks", tuple(self.tracks))

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given id."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def render(self) -> str:
        """
        Render the pattern in its canonical text form.

        Returns:
            Header lines followed by one line per track, e.g.::

                Saved with HW Version: 0.808-alpha
                Tempo: 120
                (0) kick	|x---|----|----|----|
        """
        lines = [
            f"Saved with HW Version: {self.version}\n",
            f"Tempo: {format_float32(self.tempo)}\n",
        ]
        lines.extend(track.render() for track in self.tracks)
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Pattern(version={self.version!r}, tempo={format_float32(self.tempo)}, "
            f"tracks={len(self.tracks)})"
        )


def render(pattern: Pattern) -> str:
    """Render a pattern as canonical text."""
    return pattern.render()
