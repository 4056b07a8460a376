"""
Validate command - check SPLICE file integrity and structure.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splicekit.formats.splice.decoder import SpliceDecoder
from splicekit.formats.splice.layout import SpliceOffsets, map_fields
from splicekit.models.pattern import Pattern
from splicekit.utils.validation import DecodeError

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a SPLICE file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class SpliceValidator:
    """
    Validate SPLICE file structure and content.

    Decoding failures are errors. Things the decoder tolerates but that
    usually mean a damaged or hand-edited file are warnings.
    """

    def __init__(self, data: bytes, filepath: str):
        self.data = data
        self.filepath = filepath
        self.issues: List[ValidationIssue] = []
        self.pattern: Optional[Pattern] = None

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []
        self.pattern = None

        self._validate_decode()
        if self.pattern is not None:
            self._validate_payload_size()
            self._validate_payload_end()
            self._validate_tracks()

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        self.issues.append(
            ValidationIssue(severity=severity, area=area, offset=offset, message=message)
        )

    def _validate_decode(self) -> None:
        """Decode the file; any failure is an error."""
        try:
            self.pattern = SpliceDecoder().decode(self.data, source=self.filepath)
        except DecodeError as e:
            self._add_issue("error", (e.field or "decode").title(), e.offset or 0, str(e))
            return

        self._add_issue("info", "Decode", 0, f"Decoded {self.pattern.track_count} tracks")

    @property
    def _payload_size(self) -> int:
        offset, _ = SpliceOffsets.PAYLOAD_SIZE
        return int.from_bytes(self.data[offset : offset + 8], "big", signed=True)

    def _validate_payload_size(self) -> None:
        """Payload should at least cover the version and tempo fields."""
        if self._payload_size < SpliceOffsets.FIXED_PAYLOAD_SIZE:
            self._add_issue(
                "warning",
                "Payload Size",
                SpliceOffsets.PAYLOAD_SIZE[0],
                f"Declared payload of {self._payload_size} bytes is smaller than "
                f"the {SpliceOffsets.FIXED_PAYLOAD_SIZE}-byte version and tempo fields",
            )

    def _validate_payload_end(self) -> None:
        """Track records should end exactly where the payload does."""
        payload_end = SpliceOffsets.PAYLOAD_START + self._payload_size
        spans = [s for s in map_fields(self.data) if s.kind != "padding"]
        records_end = spans[-1].end if spans else 0

        if records_end > payload_end and self.pattern.tracks:
            self._add_issue(
                "warning",
                "Tracks",
                payload_end,
                f"Last track ends at offset {records_end}, "
                f"{records_end - payload_end} bytes past the declared payload",
            )

        trailing = len(self.data) - max(records_end, payload_end)
        if trailing > 0:
            self._add_issue(
                "info",
                "Padding",
                max(records_end, payload_end),
                f"{trailing} bytes after payload ignored",
            )

    def _validate_tracks(self) -> None:
        """Check track ids and names."""
        counts = Counter(track.id for track in self.pattern.tracks)
        for track_id, count in sorted(counts.items()):
            if count > 1:
                self._add_issue(
                    "warning", "Track Ids", 0, f"Track id {track_id} used {count} times"
                )

        for index, track in enumerate(self.pattern.tracks):
            if not track.name:
                self._add_issue("warning", "Track Names", 0, f"Track {index} has no name")
            if not track.active_steps:
                self._add_issue("info", "Steps", 0, f"Track {index} ({track.name}) has no hits")


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(result.filepath)}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=16)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", min_width=40)

        for issue in result.errors:
            table.add_row("[red]ERROR[/red]", issue.area, f"0x{issue.offset:04X}", escape(issue.message))

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]", issue.area, f"0x{issue.offset:04X}", escape(issue.message)
            )

        console.print(table)

    if result.info and (verbose or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", min_width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {escape(issue.message)}")

        console.print(info_table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="SPLICE file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate a SPLICE pattern file structure and content.

    Checks for:

    - SPLICE header magic
    - Fields running past the end of the file
    - Payload size consistent with the track records
    - Duplicate track ids and unnamed tracks

    Examples:

        splicekit validate pattern_1.splice

        splicekit validate pattern_1.splice --strict
    """
    if not file.is_file():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        data = f.read()

    validator = SpliceValidator(data, str(file))
    result = validator.validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)
