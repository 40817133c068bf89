"""CLI for research-digest: summarize / sections commands.

Both commands read text that has already been extracted from a document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from research_digest.core.config import AppSettings
from research_digest.core.logging_config import setup_logging
from research_digest.core.startup_checks import validate_settings
from research_digest.domains.research.classifier import SectionClassifier
from research_digest.engine.organizer import organize_into_sections
from research_digest.engine.summarizer import ExtractiveSummarizer
from research_digest.exceptions import DigestError
from research_digest.services.summary_service import SummaryService

app = typer.Typer(name="research-digest", help="Heuristic extractive summaries of research papers")
console = Console()


def _build_settings(verbose: bool) -> AppSettings:
    """Load env settings, validate them and configure logging."""
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    try:
        validate_settings(settings)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return settings


def _read_text(text_file: Path) -> str:
    try:
        return text_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {text_file}: {exc}") from exc


@app.command()
def summarize(
    text_file: Path = typer.Argument(..., help="UTF-8 text file with the extracted document"),
    max_length: Optional[int] = typer.Option(None, "--max-length", help="Hard cap on summary characters"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="Target minimum summary characters"),
    title: str = typer.Option("", help="Paper title recorded with the summary"),
    output: Optional[Path] = typer.Option(None, help="Write the summary to this .txt file"),
    as_json: bool = typer.Option(False, "--json", help="Print the full summary record as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Summarize a document's extracted text."""
    settings = _build_settings(verbose)
    service = SummaryService(settings=settings)
    text = _read_text(text_file)

    try:
        record = service.create_summary(
            text,
            title=title or text_file.stem,
            max_length=max_length,
            min_length=min_length,
        )
    except DigestError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(record.model_dump_json())
    else:
        console.print(record.summary_text, markup=False, highlight=False)

    if output:
        try:
            service.write_summary(record, output)
        except DigestError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=1) from exc
        console.print(f"[green]Summary saved to {output}[/green]")


@app.command()
def sections(
    text_file: Path = typer.Argument(..., help="UTF-8 text file with the extracted document"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show detected sections and each section's top-scoring sentence."""
    settings = _build_settings(verbose)
    summarizer = ExtractiveSummarizer(config=settings.summary, scoring_config=settings.scoring)
    sentences = summarizer.score_sentences(_read_text(text_file))
    buckets = organize_into_sections(
        sentences, SectionClassifier(), settings.summary.default_section
    )

    table = Table(title="Detected Sections")
    table.add_column("Section", style="cyan", no_wrap=True)
    table.add_column("Sentences")
    table.add_column("Top Score")
    table.add_column("Top Sentence", max_width=60)

    for bucket in buckets:
        best = max(bucket.sentences, key=lambda s: s.score)
        preview = best.text
        if len(preview) > 100:
            preview = preview[:100] + "..."
        table.add_row(bucket.name, str(len(bucket.sentences)), f"{best.score:g}", preview)

    console.print(table)
    console.print(f"\nTotal sentences: {len(sentences)}, Sections: {len(buckets)}")


if __name__ == "__main__":
    app()
