"""
Table display utilities for pattern information.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from splicekit.models.pattern import Pattern
from splicekit.utils.float32 import format_float32
from cli.display.formatters import step_grid

console = Console()


def display_pattern_info(pattern: Pattern, filepath: str, file_info: Optional[dict] = None) -> None:
    """Display a pattern summary panel followed by its track table."""
    file_info = file_info or {}

    overview = f"""[bold]File:[/bold] {escape(filepath)}
[bold]HW Version:[/bold] {escape(pattern.version) or "N/A"}
[bold]Tempo:[/bold] {format_float32(pattern.tempo)} BPM
[bold]Tracks:[/bold] {pattern.track_count}"""

    if "size" in file_info:
        overview += f"\n[bold]File Size:[/bold] {file_info['size']} bytes"
    if "payload_size" in file_info:
        overview += f"\n[bold]Payload Size:[/bold] {file_info['payload_size']} bytes"
    if file_info.get("trailing_bytes"):
        overview += f"\n[bold]Trailing Bytes:[/bold] [yellow]{file_info['trailing_bytes']}[/yellow]"

    console.print(Panel(overview, title="[bold]SPLICE Pattern[/bold]", border_style="blue"))

    if not pattern.tracks:
        console.print("[dim]No tracks[/dim]")
        return

    console.print(create_track_table(pattern))


def create_track_table(pattern: Pattern) -> Table:
    """Build a table with one row per track."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Id", justify="right", width=4)
    table.add_column("Name", style="cyan", min_width=10)
    table.add_column("Steps", width=22)
    table.add_column("Hits", justify="right", width=5)

    for track in pattern.tracks:
        table.add_row(
            str(track.id),
            escape(track.name) or "[dim]<unnamed>[/dim]",
            step_grid(track),
            str(len(track.active_steps)),
        )

    return table
