"""CLI application using Typer for the risk‑of‑bias assessment tool."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.errors import RoBError
from ..io.studies import load_studies, summary_frame
from ..quality.aggregator import domain_labels, max_score, total_score
from ..quality.catalog import StudyType, criteria_for, guidance_for, max_stars_for, max_total_stars
from ..quality.models import RiskLabel
from ..utils.logging import get_logger, set_level

app = typer.Typer(
    name="robtool",
    help="Newcastle-Ottawa risk of bias assessment for observational studies",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

RISK_STYLE = {RiskLabel.LOW: "green", RiskLabel.HIGH: "red"}


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for engine messages"),
) -> None:
    """Score studies and summarise risk of bias across a review."""
    # keep engine log lines out of the rendered tables unless asked for
    set_level(log_level)


@app.command()
def catalog(
    study_type: StudyType = typer.Option(StudyType.CASE_CONTROL, "--type", "-t", help="Study design"),
    guidance: bool = typer.Option(True, "--guidance/--no-guidance", help="Show reviewer guidance"),
) -> None:
    """Print the Newcastle-Ottawa checklist for a study design."""
    table = Table(title=f"Newcastle-Ottawa checklist ({study_type.value})")
    table.add_column("Domain", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Criterion")
    table.add_column("Max stars", style="yellow", justify="right")
    if guidance:
        table.add_column("Guidance", style="dim")
    for domain, items in criteria_for(study_type).items():
        for index, criterion in enumerate(items):
            row = [domain if index == 0 else "", str(index + 1), criterion, str(max_stars_for(domain))]
            if guidance:
                row.append(guidance_for(study_type, domain, index))
            table.add_row(*row)
    console.print(table)
    console.print(f"Maximum total: {max_total_stars(study_type)} stars")


@app.command()
def assess(
    studies_file: Path = typer.Argument(..., help="JSON file with study ratings", exists=True, dir_okay=False),
    summary_type: StudyType = typer.Option(
        StudyType.CASE_CONTROL,
        "--summary-type",
        help="Checklist whose domains are used for the cross-study summary",
    ),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write the cross-study summary to CSV"),
) -> None:
    """Score studies from a ratings file and summarise risk of bias."""
    console.print(f"[bold blue]Assessing studies from {studies_file}[/bold blue]")
    try:
        registry = load_studies(studies_file)
    except (ValidationError, RoBError, ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    if not len(registry):
        console.print("[yellow]No studies found[/yellow]")
        raise typer.Exit(0)

    study_table = Table(title="Traffic Light Plot")
    study_table.add_column("Study", style="cyan")
    study_table.add_column("Type")
    study_table.add_column("Score", justify="right")
    domains = []
    for study in registry:
        for domain in study.scores.keys():
            if domain not in domains:
                domains.append(domain)
    for domain in domains:
        study_table.add_column(domain.capitalize(), justify="center")
    for study in registry:
        labels = domain_labels(study.scores)
        cells = []
        for domain in domains:
            label = labels.get(domain)
            cells.append(f"[{RISK_STYLE[label]}]{label.value}[/{RISK_STYLE[label]}]" if label else "-")
        study_table.add_row(
            escape(study.name),
            study.study_type.value,
            f"{total_score(study.scores)}/{max_score(study.scores)}",
            *cells,
        )
    console.print(study_table)

    summary = registry.cross_study_summary(summary_type)
    bar_table = Table(title="Weighted Bar Plot")
    bar_table.add_column("Domain", style="cyan")
    bar_table.add_column("Low Risk", style="green", justify="right")
    bar_table.add_column("High Risk", style="red", justify="right")
    bar_table.add_column("Ratings", justify="right")
    for row in summary:
        bar_table.add_row(
            row.domain,
            f"{row.low_risk_percent:.1f}%",
            f"{row.high_risk_percent:.1f}%",
            str(row.n_ratings),
        )
    console.print(bar_table)

    if csv_path is not None:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        summary_frame(registry, summary_type).to_csv(csv_path, index=False)
        console.print(f"[green]✓ Saved: {csv_path}[/green]")


if __name__ == "__main__":
    app()
