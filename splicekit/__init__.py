"""
SpliceKit - Decoder for SPLICE drum machine pattern files.

This library provides tools to:
- Decode .splice binary pattern files into Pattern objects
- Render patterns in their canonical text form
- Map the byte layout of a file for inspection

Example usage:
    from splicekit import SpliceReader, decode

    pattern = SpliceReader.read("pattern_1.splice")
    print(pattern.render())

    # Or from bytes already in memory
    pattern = decode(data, source="pattern_1.splice")
"""

__version__ = "0.1.0"
__author__ = "SpliceKit Contributors"

from splicekit.formats.splice.decoder import SpliceDecoder, decode
from splicekit.formats.splice.reader import SpliceReader
from splicekit.models.pattern import Pattern, render
from splicekit.models.track import Track
from splicekit.utils.validation import DecodeError, InvalidHeaderError, TruncatedDataError

__all__ = [
    "SpliceDecoder",
    "SpliceReader",
    "Pattern",
    "Track",
    "DecodeError",
    "InvalidHeaderError",
    "TruncatedDataError",
    "decode",
    "render",
]
