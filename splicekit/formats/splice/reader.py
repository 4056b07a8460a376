"""
SPLICE file reader.

Reads .splice files from disk and hands their bytes to the decoder.
"""

import struct
from pathlib import Path
from typing import Optional, Union

from splicekit.formats.splice.decoder import SpliceDecoder
from splicekit.formats.splice.layout import SpliceOffsets
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import validate_splice_header


class SpliceReader:
    """
    Reader for SPLICE pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(f"Version: {pattern.version}, Tempo: {pattern.tempo}")
    """

    def __init__(self, decoder: Optional[SpliceDecoder] = None):
        self.decoder = decoder or SpliceDecoder()
        self._raw_data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Pattern:
        """
        Read a SPLICE file and return a Pattern.

        Args:
            filepath: Path to .splice file

        Returns:
            Decoded Pattern
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a SPLICE file.

        Args:
            filepath: Path to .splice file

        Returns:
            Decoded Pattern

        Raises:
            FileNotFoundError: If the file does not exist
            DecodeError: If the contents are not a valid SPLICE pattern
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            data = f.read()

        return self.parse_bytes(data, source=str(filepath))

    def parse_bytes(self, data: bytes, source: Optional[str] = None) -> Pattern:
        """
        Parse SPLICE data from bytes.

        Args:
            data: Raw file contents
            source: Label for error messages

        Returns:
            Decoded Pattern
        """
        self._raw_data = data
        return self.decoder.decode(data, source=source)

    @property
    def raw_data(self) -> bytes:
        """Bytes of the last parsed file."""
        return self._raw_data

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file starts with the SPLICE magic.

        Args:
            filepath: Path to check

        Returns:
            True if file appears to be a SPLICE file
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(len(SpliceOffsets.MAGIC))
        except OSError:
            return False

        return validate_splice_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a SPLICE file without decoding tracks.

        Args:
            filepath: Path to .splice file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": validate_splice_header(data),
            "size": len(data),
        }

        offset, size = SpliceOffsets.PAYLOAD_SIZE
        if info["valid"] and len(data) >= offset + size:
            (payload_size,) = struct.unpack_from(SpliceOffsets.PAYLOAD_SIZE_FORMAT, data, offset)
            expected_size = SpliceOffsets.PAYLOAD_START + payload_size
            info["payload_size"] = payload_size
            info["expected_size"] = expected_size
            info["trailing_bytes"] = max(0, len(data) - expected_size)
            info["truncated"] = len(data) < expected_size

        return info
