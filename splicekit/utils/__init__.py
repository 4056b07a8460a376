"""Utility functions for SpliceKit."""

from splicekit.utils.float32 import format_float32, to_float32
from splicekit.utils.validation import (
    DecodeError,
    InvalidHeaderError,
    TruncatedDataError,
    validate_splice_header,
)

__all__ = [
    "format_float32",
    "to_float32",
    "DecodeError",
    "InvalidHeaderError",
    "TruncatedDataError",
    "validate_splice_header",
]
