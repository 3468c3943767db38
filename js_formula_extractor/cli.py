"""Command-line interface for the JS Formula Extractor."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TextColumn

from .errors import FormulaExtractorError
from .io_utils import suggest_output_dir
from .logging_utils import setup_logging
from .pipeline import run_extraction
from .preferences import load_preferences

app = typer.Typer(
    name="js-formula-extractor",
    help="Extract calculated-field JS formulas from a transaction definition JSON.",
    add_completion=False,
)
console = Console()


class RichProgressSink:
    def __init__(self, progress: Progress, task_id):
        self._progress = progress
        self._task_id = task_id

    def update(self, message: str, percent: int) -> None:
        self._progress.update(self._task_id, completed=percent, description=message)

    def log(self, message: str) -> None:
        self._progress.console.print(message, markup=False, highlight=False)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default: INFO)"),
):
    setup_logging(log_level)


@app.command()
def extract(
    input_file: Path = typer.Argument(..., help="Transaction/activity definition JSON file"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output folder (default: <input>_extracted next to the input file)",
    ),
    comments: Optional[bool] = typer.Option(
        None,
        "--comments/--no-comments",
        help="Prepend a metadata comment block to each file (default: saved preference)",
    ),
):
    """Write one .js file per calculated field."""
    if comments is None:
        comments = load_preferences().add_comments
    output_dir = output if output is not None else Path(suggest_output_dir(input_file))

    with Progress(
        TextColumn("{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>3.0f}%"),
        console=console,
    ) as progress:
        task_id = progress.add_task("Extracting", total=100)
        try:
            result = run_extraction(input_file, output_dir, comments, RichProgressSink(progress, task_id))
        except (FormulaExtractorError, OSError) as exc:
            console.print(f"[red]FATAL:[/red] {escape(str(exc))}")
            raise typer.Exit(code=1)

    if result.summary.failures:
        console.print(f"[yellow]{len(result.summary.failures)} file(s) could not be written[/yellow]")


if __name__ == "__main__":
    app()
