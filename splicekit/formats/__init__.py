"""Format handlers for SPLICE files."""

from splicekit.formats.splice import SpliceDecoder, SpliceReader

__all__ = ["SpliceDecoder", "SpliceReader"]
