"""
Error types and header checks for SPLICE data.
"""

from typing import Optional

SPLICE_MAGIC = b"SPLICE"


class DecodeError(Exception):
    """
    Raised when a SPLICE buffer cannot be decoded.

    Attributes:
        source: Caller-supplied label (usually a file path), or None
        offset: Absolute byte offset of the failing read, if known
        field: Name of the field being read, if known
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        offset: Optional[int] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.source = source
        self.offset = offset
        self.field = field


class InvalidHeaderError(DecodeError):
    """Raised when the SPLICE magic is missing or the buffer is too short for it."""

    def __init__(self, source: Optional[str] = None):
        label = source if source is not None else "<bytes>"
        super().__init__(
            f"File '{label}' is not a valid splice file, SPLICE header not found",
            source=source,
            offset=0,
            field="header",
        )


class TruncatedDataError(DecodeError):
    """Raised when a field runs past the end of the buffer."""

    def __init__(
        self,
        field: str,
        offset: int,
        needed: int,
        available: int,
        source: Optional[str] = None,
    ):
        label = source if source is not None else "<bytes>"
        super().__init__(
            f"File '{label}' is truncated: {field} at offset {offset} "
            f"needs {needed} bytes, {available} available",
            source=source,
            offset=offset,
            field=field,
        )
        self.needed = needed
        self.available = available


def validate_splice_header(data: bytes) -> bool:
    """
    Validate SPLICE file header.

    Args:
        data: File data (at least 6 bytes)

    Returns:
        True if data starts with the SPLICE magic
    """
    if len(data) < len(SPLICE_MAGIC):
        return False

    return data[: len(SPLICE_MAGIC)] == SPLICE_MAGIC
