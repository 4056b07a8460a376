"""
Dump command - annotated hex dump of a SPLICE file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.formats.splice.layout import map_fields
from cli.display.hex_view import create_field_table, display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="SPLICE file to dump"),
    width: int = typer.Option(16, "--width", "-w", min=1, help="Bytes per line"),
    lines: int = typer.Option(0, "--lines", "-n", min=0, help="Maximum lines (0 = all)"),
    legend: bool = typer.Option(True, "--legend/--no-legend", help="Show the field table"),
) -> None:
    """
    Show an annotated hex dump, colouring bytes by the field they belong to.

    Works on damaged files too: fields cut short by the end of the file
    are flagged as truncated in the field table.

    Examples:

        splicekit dump pattern_1.splice

        splicekit dump pattern_1.splice --no-legend -n 8
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    spans = map_fields(data)

    console.print(f"[bold]{escape(str(file))}[/bold] [dim]({len(data)} bytes)[/dim]")
    console.print()
    display_hex_dump(data, spans, bytes_per_line=width, max_lines=lines)

    if legend:
        console.print()
        console.print(create_field_table(spans))
