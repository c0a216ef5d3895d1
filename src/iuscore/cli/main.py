"""CLI for iuscore: report / score / catalog commands."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from iuscore.core.config import AppSettings
from iuscore.core.logging_config import setup_logging
from iuscore.exceptions import ExamLoadError
from iuscore.formatters import get_formatter
from iuscore.scoring.quick import ScoreTone, build_score_summary, create_quick_calculator_segment
from iuscore.segments.catalog import CROHNS_ADDITIONAL_SEGMENTS, DEFAULT_SEGMENTS
from iuscore.segments.models import DiseaseProfile, Stratification
from iuscore.services.exam_loader import load_exam
from iuscore.synthesis.pipeline import ReportPipeline

app = typer.Typer(name="iuscore", help="Intestinal ultrasound scoring and structured reports")
console = Console()
err_console = Console(stderr=True)

_TONE_STYLES = {
    ScoreTone.MUTED: "dim",
    ScoreTone.POSITIVE: "green",
    ScoreTone.CAUTION: "yellow",
    ScoreTone.NEGATIVE: "red",
}


def _configure_logging(settings: AppSettings, verbose: bool) -> None:
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)


@app.command()
def report(
    exam_file: Path = typer.Argument(..., help="JSON exam file (segment list or exam object)"),
    profile: Optional[DiseaseProfile] = typer.Option(None, help="Override the exam's disease profile"),
    indication: Optional[str] = typer.Option(None, help="Override the exam's indication"),
    exam_date: Optional[str] = typer.Option(None, "--date", help="Report date text (default: today)"),
    output_format: Optional[str] = typer.Option(None, "--format", help="text or json"),
    output: Optional[Path] = typer.Option(None, help="Write the report to this path"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Compose a structured report from an exam file."""
    settings = AppSettings()
    _configure_logging(settings, verbose)

    try:
        exam = load_exam(exam_file)
    except ExamLoadError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if profile is not None:
        exam.profile = profile
    try:
        formatter = get_formatter(output_format or settings.report.output_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc

    exam_report = ReportPipeline().compose(
        exam.profile,
        exam.visible_segments(),
        date=exam_date or exam.date or date.today(),
        indication=(
            indication if indication is not None
            else exam.indication or settings.report.default_indication
        ),
    )

    if output:
        formatter.format_to_file(exam_report, output)
        console.print(f"[green]Report saved to {output}[/green]")
    else:
        text = formatter.format(exam_report).decode("utf-8")
        console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def score(
    profile: DiseaseProfile = typer.Option(DiseaseProfile.UC, help="uc (Milan) or cd (IBUS-SAS)"),
    bwt: Optional[float] = typer.Option(None, "--bwt", min=0, help="Bowel wall thickness (mm)"),
    doppler: Optional[int] = typer.Option(None, "--doppler", min=0, max=3, help="Modified Limberg grade"),
    stratification: Optional[Stratification] = typer.Option(None, help="Bowel wall layering"),
    fat_wrapping: Optional[bool] = typer.Option(
        None, "--fat-wrapping/--no-fat-wrapping", help="Mesenteric fat echogenicity"
    ),
    not_visualised: bool = typer.Option(False, "--not-visualised", help="Segment could not be assessed"),
) -> None:
    """Quick single-segment score calculator."""
    seed = create_quick_calculator_segment(profile)
    changes: dict = {"not_visualised": not_visualised or None}
    if bwt is not None:
        changes["bowel_wall_thickness"] = bwt
    if doppler is not None:
        changes["doppler_grade"] = doppler
    if stratification is not None:
        changes["stratification"] = stratification
    if fat_wrapping is not None:
        changes["fat_wrapping"] = fat_wrapping
    segment = seed.model_validate({**seed.model_dump(), **changes})

    summary = build_score_summary(segment, profile)
    style = _TONE_STYLES[summary.tone]
    value = summary.value if summary.value is not None else "n/a"
    console.print(f"[bold]{summary.label}:[/bold] [{style}]{value}[/{style}]")
    console.print(summary.description)


@app.command()
def catalog() -> None:
    """List the anatomical segments available in an exam."""
    table = Table(title="Segment catalog")
    table.add_column("ID", style="cyan")
    table.add_column("Label", style="green")
    table.add_column("Small bowel")
    table.add_column("Profiles")

    for template in DEFAULT_SEGMENTS:
        table.add_row(
            template.id,
            template.label,
            "yes" if template.is_small_bowel else "no",
            "cd" if template.is_small_bowel else "uc, cd",
        )
    for template in CROHNS_ADDITIONAL_SEGMENTS:
        table.add_row(template.id, template.label, "yes", "cd (added on demand)")

    console.print(table)


if __name__ == "__main__":
    app()
