"""
Render command - print the canonical text form of SPLICE patterns.
"""

from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.markup import escape

from splicekit.formats.splice.reader import SpliceReader
from splicekit.utils.validation import DecodeError

err_console = Console(stderr=True, soft_wrap=True)
app = typer.Typer()


@app.command()
def render(
    files: List[Path] = typer.Argument(..., help="SPLICE files to render"),
) -> None:
    """
    Print each pattern exactly as the canonical text rendering.

    Output is plain text so it can be diffed or redirected. Files that
    fail to decode are reported on stderr and the command exits with 1.

    Examples:

        splicekit render pattern_1.splice

        splicekit render pattern_1.splice pattern_2.splice > out.txt
    """
    failed = False

    for file in files:
        try:
            pattern = SpliceReader.read(file)
        except (OSError, DecodeError) as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
            failed = True
            continue

        typer.echo(pattern.render(), nl=False)

    if failed:
        raise typer.Exit(1)
