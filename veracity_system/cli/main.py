"""Interactive CLI for the veracity system using Typer and Rich."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from veracity_system import __version__
from veracity_system.config.logging import get_logger
from veracity_system.config.settings import ScoringConfig, load_scoring_config, settings
from veracity_system.errors import VeracityError
from veracity_system.pipeline import AnalysisPipeline
from veracity_system.planning import ClaimPlanner

app = typer.Typer(
    help="Veracity CLI - score web evidence for a claim",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")


def _load_records(path: Path) -> list:
    """Read a JSON list of sources, or an object with a "sources" list."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("sources", [])
    if not isinstance(data, list):
        raise typer.BadParameter("sources file must hold a JSON list or {\"sources\": [...]}")
    return data


@app.command()
def score(
    claim: str = typer.Option(..., "--claim", "-c", help="Claim text to assess"),
    sources: Path = typer.Option(
        ..., "--sources", "-s", exists=True, dir_okay=False, help="JSON file of search results"
    ),
    language: Optional[str] = typer.Option(
        None, "--language", "-l", help="Claim language code (detected if omitted)"
    ),
    top_n: Optional[int] = typer.Option(None, "--top-n", help="Override EQS_TOP_N"),
    variant: Optional[str] = typer.Option(None, "--variant", help="canonical or legacy"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """
    Score search results for a claim and print EQS, SDI and the veracity verdict.
    """
    try:
        records = _load_records(sources)
        config = load_scoring_config()
        overrides = {}
        if top_n is not None:
            overrides["top_n"] = top_n
        if variant is not None:
            overrides["variant"] = variant.lower()
        if overrides:
            config = ScoringConfig.model_validate({**config.model_dump(), **overrides})
        report = AnalysisPipeline(config=config).analyze(claim, records, language=language)
    except (VeracityError, ValueError) as e:
        console.print(f"[red]✗[/red] Error: {e}")
        logger.error(f"Scoring failed: {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(report.model_dump_json())
        return

    aggregate = report.aggregate
    table = Table(title="Scored Sources", show_header=True, header_style="bold magenta")
    table.add_column("Domain", style="cyan")
    table.add_column("Stance")
    table.add_column("Cred", justify="right")
    table.add_column("Direct", justify="right")
    table.add_column("Method", justify="right")
    table.add_column("Quality", justify="right", style="green")

    for s in aggregate.sources_with_scores:
        table.add_row(
            s.domain,
            s.stance.value,
            f"{s.credibility_score:.2f}",
            f"{s.directness_score:.2f}",
            f"{s.methodology_score:.2f}",
            f"{s.quality_score:.2f}",
        )
    console.print(table)

    c = aggregate.consensus
    console.print(Panel(
        f"EQS: [bold]{aggregate.eqs}[/bold]   SDI: [bold]{aggregate.sdi}[/bold]   "
        f"Consensus: {c.supporting} supporting / {c.challenging} challenging / {c.neutral} neutral\n"
        f"Veracity: [bold]{report.veracity.score}[/bold] ({report.veracity.label})\n"
        f"{report.veracity.summary}",
        title=f"Claim type: {report.claim_analysis.claim_type.value}",
        border_style="green",
    ))


@app.command()
def plan(
    claim: str = typer.Option(..., "--claim", "-c", prompt="Claim text"),
) -> None:
    """Show the search plan (queries and domain lists) for a claim."""
    search_plan = ClaimPlanner(settings.factcheck_domain_list()).plan(claim)

    table = Table(title="Search Plan", show_header=True, header_style="bold magenta")
    table.add_column("Pass", style="cyan", width=14)
    table.add_column("Query / Domains", style="yellow")
    table.add_row("Claim type", search_plan.analysis.claim_type.value)
    table.add_row("Keywords", ", ".join(search_plan.analysis.keywords))
    table.add_row("Fact-check", search_plan.fact_check_query)
    table.add_row("General", search_plan.general_query)
    table.add_row("Counter", search_plan.counter_query)
    table.add_row("Preferred", ", ".join(search_plan.preferred_domains))
    table.add_row("Fact-checkers", ", ".join(search_plan.fact_check_domains))
    console.print(table)


@app.command()
def status() -> None:
    """
    Display scoring configuration.

    Shows tunables loaded from the environment and logging settings.
    """
    logger.info("Displaying system status")

    table = Table(title="Veracity System Status", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="yellow")

    table.add_row("EQS top-N", str(settings.eqs_top_n))
    table.add_row("Scoring variant", settings.scoring_variant)
    table.add_row("Fact-checkers", ", ".join(settings.factcheck_domain_list()))
    table.add_row("Preflight timeout", f"{settings.factcheck_timeout_ms} ms")
    table.add_row("Analysis timeout", f"{settings.analysis_timeout_s:g} s")
    table.add_row("Source cap", str(settings.source_cap))
    table.add_row("Logging", f"Level: {settings.log_level}, Format: {settings.log_format}")

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print("[bold]Veracity System[/bold]")
    console.print(f"Version: {__version__}")


if __name__ == "__main__":
    app()
