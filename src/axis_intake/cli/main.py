"""CLI for axis-intake: render / outline commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from axis_intake.assembly import ApplicationAssembler
from axis_intake.catalog import included_titles
from axis_intake.core.config import AppSettings, ObservabilityConfig
from axis_intake.exceptions import AxisIntakeError
from axis_intake.hooks import setup_logging
from axis_intake.models import AnswerRecord

app = typer.Typer(name="axis-intake", help="Assemble technology insurance applications into a merged PDF")
console = Console()


def _load_record(answers_file: Path) -> AnswerRecord:
    """Load an answer record from a JSON file."""
    try:
        raw: Any = json.loads(answers_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read answers from {answers_file}: {exc}") from exc
    return AnswerRecord.from_form_data(raw)


def _fail(exc: AxisIntakeError) -> None:
    console.print(f"[red]Error ({exc.kind}):[/red] {exc}")
    raise typer.Exit(code=1)


@app.command()
def render(
    answers_file: Path = typer.Argument(..., help="JSON file with the submitted answers"),
    out: Path = typer.Option(Path("."), "--out", "-o", help="Directory for the generated PDF"),
    cover: Optional[str] = typer.Option(None, "--cover", help="Cover template path or URL"),
    end: Optional[str] = typer.Option(None, "--end", help="End-page template path or URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render an answer record into the merged application PDF."""
    settings = AppSettings()
    if verbose:
        settings.observability = ObservabilityConfig(log_level="DEBUG")
    setup_logging(settings.observability)

    try:
        record = _load_record(answers_file)
        document = ApplicationAssembler(settings).assemble(record, cover_template=cover, end_template=end)
    except AxisIntakeError as exc:
        _fail(exc)
        return

    out.mkdir(parents=True, exist_ok=True)
    target = out / document.filename
    target.write_bytes(document.content)
    console.print(f"[green]Application saved to {target}[/green]")

    table = Table(title="Table of Contents")
    table.add_column("Section", style="cyan")
    table.add_column("Page", justify="right")
    for entry in document.page_records:
        table.add_row(entry.title, str(entry.page))
    console.print(table)

    counts = document.page_counts
    console.print(
        f"\n[bold]{counts.total} pages[/bold] "
        f"(cover {counts.cover}, contents {counts.toc}, body {counts.content}, end {counts.end})"
    )


@app.command()
def outline(
    answers_file: Path = typer.Argument(..., help="JSON file with the submitted answers"),
) -> None:
    """List the sections an answer record would render, in document order."""
    try:
        record = _load_record(answers_file)
    except AxisIntakeError as exc:
        _fail(exc)
        return

    for title in included_titles(record):
        console.print(title)


if __name__ == "__main__":
    app()
