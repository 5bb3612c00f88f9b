"""Command-line entry point: analyze one document and show, export or print its notes."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from deepread.config.settings import Settings
from deepread.extraction.models import AnalysisResult
from deepread.intake.models import UploadCandidate
from deepread.logging.logger import Log
from deepread.presenter.printing import PRINT_TABS
from deepread.presenter.views import concepts_view, document_header
from deepread.workflow.machine import build_workflow
from deepread.workflow.state import Idle, Ready

app = typer.Typer(
    name="deepread",
    help="Transform documents into structured reading notes.",
    add_completion=False,
)
console = Console()


@app.callback()
def main() -> None:
    """Load settings and configure logging before any command runs."""
    Log.configure(Settings().log_level)


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="PDF or Markdown file to analyze"),
    export_dir: Optional[Path] = typer.Option(
        None, "--export-dir", "-e", help="Write the Markdown notes into this directory"
    ),
    print_tab: Optional[str] = typer.Option(
        None, "--print", "-p", help=f"Print a tab: {', '.join(PRINT_TABS)}"
    ),
) -> None:
    """Analyze FILE with the configured extraction provider."""
    if print_tab is not None and print_tab not in PRINT_TABS:
        raise typer.BadParameter(f"must be one of {list(PRINT_TABS)}", param_hint="--print")

    settings = Settings()
    workflow = build_workflow(settings)
    with console.status(f"Reading & analyzing {file.name}..."):
        state = asyncio.run(workflow.submit(UploadCandidate.from_path(file)))

    if isinstance(state, Idle):
        console.print(f"[red]Error:[/red] {escape(state.last_error or '')}")
        raise typer.Exit(code=1)

    if isinstance(state, Ready):
        _show_summary(state.result)
    if export_dir is not None:
        try:
            path = workflow.export_markdown(export_dir)
        except OSError as exc:
            Log.error(f"Export to {export_dir} failed: {exc}")
            console.print(f"[red]Error:[/red] Could not write notes to {escape(str(export_dir))}")
            raise typer.Exit(code=1)
        console.print(f"[green]Exported notes to[/green] {escape(str(path))}")
    if print_tab is not None:
        console.print(
            workflow.render_print(print_tab), markup=False, highlight=False, soft_wrap=True
        )


def _show_summary(result: AnalysisResult) -> None:
    header = document_header(result)
    console.print(
        Panel(
            escape(header.executive_summary),
            title=escape(f"{header.title} by {header.author}"),
            subtitle=escape(f"{header.genre} | {header.reading_time} read"),
        )
    )

    table = Table(title="Key Concepts")
    table.add_column("Term", style="cyan")
    table.add_column("Impact", justify="right")
    table.add_column("Definition")
    for card in concepts_view(result):
        impact = str(card.importance)
        if card.high_impact:
            impact = f"[bold yellow]{impact}[/bold yellow]"
        table.add_row(escape(card.term), impact, escape(card.definition))
    console.print(table)


if __name__ == "__main__":
    app()
