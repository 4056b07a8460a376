"""
Track data model for SPLICE patterns.
"""

from dataclasses import dataclass
from typing import List

STEPS_PER_TRACK = 16
STEPS_PER_GROUP = 4


@dataclass(frozen=True)
class Track:
    """
    A single instrument track within a pattern.

    Each track carries 16 step bytes. The format does not define velocity,
    so a step is either off (0x00) or on (any other value).

    Attributes:
        id: Track identifier (0-255)
        name: Instrument name
        steps: Raw step bytes, exactly 16
    """

    id: int
    name: str
    steps: bytes

    def __post_init__(self):
        object.__setattr__(self, "steps", bytes(self.steps))
        if len(self.steps) != STEPS_PER_TRACK:
            raise ValueError(
                f"Track {self.id} must have {STEPS_PER_TRACK} steps, got {len(self.steps)}"
            )
        if not 0 <= self.id <= 0xFF:
            raise ValueError(f"Track id must be 0-255, got {self.id}")

    def is_active(self, index: int) -> bool:
        """Check if the step at index is on."""
        return self.steps[index] != 0

    @property
    def active_steps(self) -> List[int]:
        """Indices of all steps that are on."""
        return [i for i, value in enumerate(self.steps) if value != 0]

    @property
    def step_string(self) -> str:
        """Step grid in groups of four, e.g. ``|x---|----|x---|----|``."""
        cells = "".join("x" if value != 0 else "-" for value in self.steps)
        groups = [
            cells[start : start + STEPS_PER_GROUP]
            for start in range(0, STEPS_PER_TRACK, STEPS_PER_GROUP)
        ]
        return "|" + "|".join(groups) + "|"

    def render(self) -> str:
        """Render as a single newline-terminated line."""
        return f"({self.id}) {self.name}\t{self.step_string}\n"

    def __str__(self) -> str:
        return self.render()
