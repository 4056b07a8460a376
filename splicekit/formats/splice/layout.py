"""
SPLICE file layout.

File Structure:
    Offset  Size    Description
    0x00    6       Magic "SPLICE"
    0x06    8       Payload size (big-endian signed, bytes after this field)
    0x0E    32      Hardware version string (NUL padded)
    0x2E    4       Tempo (little-endian float32)
    0x32    ...     Track records until the payload is exhausted

Track record:
    1       Track id (u8)
    4       Name length N (big-endian u32)
    N       Name
    16      Steps (0x00 = off, anything else = on)

Bytes after 6 + 8 + payload size are padding and are not part of the pattern.
"""

import struct
from dataclasses import dataclass
from typing import List

from splicekit.utils.validation import SPLICE_MAGIC


class SpliceOffsets:
    """
    Offset map for the fixed part of a SPLICE file.

    Each field is an (offset, size) pair.
    """

    MAGIC = SPLICE_MAGIC

    HEADER_MAGIC = (0x00, 6)
    PAYLOAD_SIZE = (0x06, 8)
    VERSION = (0x0E, 32)
    TEMPO = (0x2E, 4)

    # Payload size counts from here
    PAYLOAD_START = 0x0E
    # Version + tempo
    FIXED_PAYLOAD_SIZE = 36
    TRACKS_START = 0x32

    TRACK_ID_SIZE = 1
    NAME_LENGTH_SIZE = 4
    STEPS_SIZE = 16

    PAYLOAD_SIZE_FORMAT = ">q"
    TEMPO_FORMAT = "<f"
    TRACK_ID_FORMAT = "B"
    NAME_LENGTH_FORMAT = ">I"


@dataclass(frozen=True)
class FieldSpan:
    """
    A named region of a SPLICE buffer.

    Attributes:
        name: Human readable field name, e.g. "track 0 name"
        kind: Field kind ("magic", "payload_size", "version", "tempo",
              "track_id", "name_length", "name", "steps", "padding")
        offset: Absolute start offset
        size: Number of bytes present in the buffer
        truncated: True if the buffer ended before the field did
    """

    name: str
    kind: str
    offset: int
    size: int
    truncated: bool = False

    @property
    def end(self) -> int:
        return self.offset + self.size

    def contains(self, offset: int) -> bool:
        return self.offset <= offset < self.end


def map_fields(data: bytes) -> List[FieldSpan]:
    """
    Walk a buffer the way the decoder does and name every region.

    Never raises: a buffer that is cut short yields the spans identified so
    far, with the last one marked truncated. A buffer without the magic
    yields only the header span.

    Args:
        data: Raw SPLICE bytes

    Returns:
        Field spans in file order
    """
    spans: List[FieldSpan] = []

    def add(name: str, kind: str, offset: int, size: int) -> bool:
        available = max(0, min(size, len(data) - offset))
        spans.append(FieldSpan(name, kind, offset, available, truncated=available < size))
        return available == size

    offset, size = SpliceOffsets.HEADER_MAGIC
    if not add("magic", "magic", offset, size):
        return spans
    if data[offset : offset + size] != SpliceOffsets.MAGIC:
        return spans

    offset, size = SpliceOffsets.PAYLOAD_SIZE
    if not add("payload size", "payload_size", offset, size):
        return spans
    (payload_size,) = struct.unpack_from(SpliceOffsets.PAYLOAD_SIZE_FORMAT, data, offset)

    offset, size = SpliceOffsets.VERSION
    if not add("version", "version", offset, size):
        return spans

    offset, size = SpliceOffsets.TEMPO
    if not add("tempo", "tempo", offset, size):
        return spans

    cursor = SpliceOffsets.TRACKS_START
    payload_end = SpliceOffsets.PAYLOAD_START + payload_size
    index = 0

    while cursor < payload_end:
        label = f"track {index}"

        if not add(f"{label} id", "track_id", cursor, SpliceOffsets.TRACK_ID_SIZE):
            return spans
        cursor += SpliceOffsets.TRACK_ID_SIZE

        if not add(f"{label} name length", "name_length", cursor, SpliceOffsets.NAME_LENGTH_SIZE):
            return spans
        (name_length,) = struct.unpack_from(SpliceOffsets.NAME_LENGTH_FORMAT, data, cursor)
        cursor += SpliceOffsets.NAME_LENGTH_SIZE

        if not add(f"{label} name", "name", cursor, name_length):
            return spans
        cursor += name_length

        if not add(f"{label} steps", "steps", cursor, SpliceOffsets.STEPS_SIZE):
            return spans
        cursor += SpliceOffsets.STEPS_SIZE

        index += 1

    if cursor < len(data):
        add("padding", "padding", cursor, len(data) - cursor)

    return spans
