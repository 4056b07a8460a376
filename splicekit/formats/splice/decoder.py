"""
SPLICE pattern decoder.

Turns the raw bytes of a .splice file into a Pattern. Every field is read
with an explicit size and byte order (the format mixes big-endian integers
with a little-endian float), and every read is bounds-checked first, so a
short or corrupt buffer fails with TruncatedDataError instead of producing
a partial pattern.
"""

import logging
import struct
from typing import List, Optional, Tuple

from splicekit.formats.splice.layout import SpliceOffsets
from splicekit.models.pattern import Pattern
from splicekit.models.track import Track
from splicekit.utils.validation import (
    InvalidHeaderError,
    TruncatedDataError,
    validate_splice_header,
)

logger = logging.getLogger(__name__)


class ByteCursor:
    """
    Sequential reader over an immutable buffer.

    Tracks the absolute offset so errors can say where a read failed.
    """

    def __init__(self, data: bytes, offset: int = 0, source: Optional[str] = None):
        self.data = data
        self.offset = offset
        self.source = source

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    def read(self, size: int, field: str) -> bytes:
        """
        Read exactly size bytes.

        Raises:
            TruncatedDataError: If fewer than size bytes are left
        """
        if size > self.remaining:
            raise TruncatedDataError(
                field,
                offset=self.offset,
                needed=size,
                available=self.remaining,
                source=self.source,
            )
        chunk = self.data[self.offset : self.offset + size]
        self.offset += size
        return chunk

    def unpack(self, fmt: str, field: str):
        """Read a single struct-formatted value."""
        (value,) = struct.unpack(fmt, self.read(struct.calcsize(fmt), field))
        return value


class SpliceDecoder:
    """
    Decoder for SPLICE drum pattern files.

    Example:
        decoder = SpliceDecoder()
        pattern = decoder.decode(data, source="pattern_1.splice")
        print(pattern.render())
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "replace"):
        """
        Args:
            encoding: Text encoding for the version string and track names
            errors: Error handler passed to bytes.decode
        """
        self.encoding = encoding
        self.errors = errors

    def decode(self, data: bytes, source: Optional[str] = None) -> Pattern:
        """
        Decode a SPLICE buffer.

        Args:
            data: Raw file contents
            source: Label used in error messages (e.g. the file path)

        Returns:
            Decoded Pattern

        Raises:
            InvalidHeaderError: If the SPLICE magic is missing
            TruncatedDataError: If any field runs past the end of data
        """
        data = bytes(data)

        if not validate_splice_header(data):
            raise InvalidHeaderError(source)

        cursor = ByteCursor(data, offset=SpliceOffsets.PAYLOAD_SIZE[0], source=source)

        payload_size = cursor.unpack(SpliceOffsets.PAYLOAD_SIZE_FORMAT, "payload size")
        version, tempo = self._read_header(cursor)

        payload_end = SpliceOffsets.PAYLOAD_START + payload_size
        logger.debug(
            "%s: payload size %d, version %r, tempo %r",
            source or "<bytes>",
            payload_size,
            version,
            tempo,
        )

        tracks = self._read_tracks(cursor, payload_end)

        if cursor.offset < len(data):
            logger.debug(
                "%s: ignoring %d bytes after payload", source or "<bytes>", cursor.remaining
            )

        return Pattern(version=version, tempo=tempo, tracks=tuple(tracks))

    def _read_header(self, cursor: ByteCursor) -> Tuple[str, float]:
        """Read the version string and tempo."""
        raw_version = cursor.read(SpliceOffsets.VERSION[1], "version")

        # The field is NUL padded, but a full 32-byte version has no NUL at all
        end = raw_version.find(b"\x00")
        if end != -1:
            raw_version = raw_version[:end]

        tempo = cursor.unpack(SpliceOffsets.TEMPO_FORMAT, "tempo")
        return self._decode_text(raw_version), tempo

    def _read_tracks(self, cursor: ByteCursor, payload_end: int) -> List[Track]:
        """Read track records until the cursor reaches payload_end."""
        tracks = []

        while cursor.offset < payload_end:
            label = f"track {len(tracks)}"

            track_id = cursor.unpack(SpliceOffsets.TRACK_ID_FORMAT, f"{label} id")
            name_length = cursor.unpack(SpliceOffsets.NAME_LENGTH_FORMAT, f"{label} name length")
            name = cursor.read(name_length, f"{label} name")
            steps = cursor.read(SpliceOffsets.STEPS_SIZE, f"{label} steps")

            track = Track(id=track_id, name=self._decode_text(name), steps=steps)
            logger.debug("%s: (%d) %r %s", label, track.id, track.name, track.step_string)
            tracks.append(track)

        return tracks

    def _decode_text(self, raw: bytes) -> str:
        return raw.decode(self.encoding, errors=self.errors)


_default_decoder = SpliceDecoder()


def decode(data: bytes, source: Optional[str] = None) -> Pattern:
    """
    Decode a SPLICE buffer with the default decoder settings.

    Args:
        data: Raw file contents
        source: Label used in error messages

    Returns:
        Decoded Pattern
    """
    return _default_decoder.decode(data, source=source)
