"""
Info command - display pattern information.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.formats.splice.reader import SpliceReader
from splicekit.utils.validation import DecodeError
from cli.display.tables import display_pattern_info

console = Console(soft_wrap=True)
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
) -> None:
    """
    Display pattern information: version, tempo and a track table.

    Examples:

        splicekit info pattern_1.splice
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    try:
        pattern = SpliceReader.read(file)
    except DecodeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    display_pattern_info(pattern, str(file), SpliceReader.get_file_info(file))
