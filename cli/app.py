"""
SpliceKit - Decoder for SPLICE drum machine pattern files.

A small CLI for rendering and inspecting .splice patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from splicekit import __version__
from cli.commands.render import render
from cli.commands.info import info
from cli.commands.dump import dump
from cli.commands.validate import validate

console = Console()

# Main app
app = typer.Typer(
    name="splicekit",
    help="Decode and inspect SPLICE drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="render")(render)
app.command(name="info")(info)
app.command(name="dump")(dump)
app.command(name="validate")(validate)


def setup_logging(verbose: bool) -> None:
    """
    Route splicekit debug logging through Rich on stderr.

    Only the library logger is touched; root handlers are left alone.
    """
    logger = logging.getLogger("splicekit")

    installed = [h for h in logger.handlers if isinstance(h, RichHandler)]
    for handler in installed:
        logger.removeHandler(handler)

    if not verbose:
        if installed:
            logger.setLevel(logging.NOTSET)
        return

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicekit[/bold] version {__version__}")
    console.print("[dim]Decoder for SPLICE drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log decoding details"),
) -> None:
    """
    SpliceKit - Decode and inspect SPLICE drum machine patterns.

    [bold]Quick Start:[/bold]

        splicekit render pattern_1.splice   # Canonical text output
        splicekit info pattern_1.splice     # Summary and track table

    [bold]Analysis Commands:[/bold]

        splicekit dump pattern_1.splice     # Annotated hex dump
        splicekit validate pattern_1.splice # Check file structure

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
