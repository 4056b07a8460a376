"""
Hex dump display utilities.
"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from splicekit.formats.splice.layout import FieldSpan
from cli.display.formatters import field_style, format_size

console = Console()


def span_for_offset(spans: List[FieldSpan], offset: int) -> Optional[FieldSpan]:
    """Get the field span covering an offset."""
    for span in spans:
        if span.contains(offset):
            return span
    return None


def format_hex_line(
    data: bytes, offset: int, spans: List[FieldSpan], bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump, colouring each byte by its field.

    Returns Rich Text object with coloured output.
    """
    chunk = data[offset : offset + bytes_per_line]

    text = Text()
    text.append(f"0x{offset:04X}  ", style="dim")

    for i, byte in enumerate(chunk):
        span = span_for_offset(spans, offset + i)
        style = field_style(span.kind) if span else "white"
        if byte == 0x00:
            style += " dim"
        if i == bytes_per_line // 2:
            text.append(" ")
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(chunk) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(chunk)))
        if len(chunk) <= bytes_per_line // 2:
            text.append(" ")

    text.append(" ")
    for byte in chunk:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def display_hex_dump(
    data: bytes,
    spans: List[FieldSpan],
    bytes_per_line: int = 16,
    max_lines: int = 0,
) -> None:
    """Display an annotated hex dump with Rich."""
    end = len(data)
    if max_lines > 0:
        end = min(end, max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        console.print(format_hex_line(data, offset, spans, bytes_per_line))

    if len(data) > end:
        console.print(f"[dim]... {len(data) - end} more bytes ...[/dim]")


def create_field_table(spans: List[FieldSpan]) -> Table:
    """Create a legend listing every field span in the file."""
    table = Table(title="Fields", box=box.SIMPLE, show_header=True, header_style="dim")
    table.add_column("Offset", style="dim", width=14)
    table.add_column("Field", min_width=20)
    table.add_column("Size", width=12)

    for span in spans:
        name = Text(span.name, style=field_style(span.kind))
        if span.truncated:
            name.append(" (truncated)", style="bold red")
        if span.size:
            where = f"0x{span.offset:04X}-0x{span.end - 1:04X}"
        else:
            where = f"0x{span.offset:04X}"
        table.add_row(where, name, format_size(span.size))

    return table
