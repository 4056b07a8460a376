"""SPLICE format handlers."""

from splicekit.formats.splice.decoder import SpliceDecoder, decode
from splicekit.formats.splice.layout import FieldSpan, SpliceOffsets, map_fields
from splicekit.formats.splice.reader import SpliceReader

__all__ = [
    "SpliceDecoder",
    "SpliceReader",
    "SpliceOffsets",
    "FieldSpan",
    "decode",
    "map_fields",
]
