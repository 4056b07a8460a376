"""
CLI display modules.
"""

from cli.display.tables import display_pattern_info, create_track_table
from cli.display.hex_view import display_hex_dump, create_field_table

__all__ = [
    "display_pattern_info",
    "create_track_table",
    "display_hex_dump",
    "create_field_table",
]
