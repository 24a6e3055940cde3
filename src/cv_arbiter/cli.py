"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from cv_arbiter.clients.llm_client import LLMClient
from cv_arbiter.config import load_config
from cv_arbiter.models.analysis import CVContentAnalysis
from cv_arbiter.models.narrative import NarrativeAnalysisResult, NarrativeProfile
from cv_arbiter.parsers.documents import load_bullets, load_jd_file
from cv_arbiter.pipeline.bullet_rewriter import ClaudeBulletRewriter
from cv_arbiter.pipeline.orchestrator import TailoringOrchestrator
from cv_arbiter.scoring.arbiter import score_arbiter
from cv_arbiter.scoring.keywords import extract_job_keywords
from cv_arbiter.scoring.narrative import analyze_narrative_gap
from cv_arbiter.scoring.stages import STAGE_NAMES, analyze_cv_content

app = typer.Typer(
    name="cv-arbiter",
    help="Score, tailor and arbitrate CV bullets against a job description",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _require(path: Path, label: str) -> None:
    if not path.exists():
        console.print(f"[red]{label} not found: {path}[/red]")
        raise typer.Exit(1)


def _stage_table(analysis: CVContentAnalysis) -> Table:
    table = Table(title="Stage scores")
    table.add_column("Stage")
    table.add_column("Score", justify="right")
    table.add_column("Details")
    for stage, name in STAGE_NAMES.items():
        result = getattr(analysis, stage)
        table.add_row(name, f"{result.score:.0f}", "\n".join(result.details))
    return table


def _print_narrative(result: NarrativeAnalysisResult) -> None:
    console.print(
        Panel(
            f"[bold]{result.detected_archetype}[/bold]\n{result.archetype_description}\n\n"
            f"Narrative match: [bold]{result.narrative_match_percent:.1f}%[/bold] | "
            f"CV score: {result.cv_score:.0f}",
            title="Narrative",
        )
    )
    table = Table()
    table.add_column("Dimension")
    table.add_column("Contribution", justify="right")
    table.add_column("Found")
    for item in result.evidence:
        table.add_row(item.dimension, f"{item.contribution:.1f}/{item.max_contribution:.0f}", item.actual)
    console.print(table)
    if result.missing_keywords:
        console.print(f"[yellow]Missing:[/yellow] {', '.join(result.missing_keywords)}")


def _build_profile(role: str, seniority: str, strength: str, brand: str, pain_point: str) -> NarrativeProfile:
    try:
        return NarrativeProfile(
            target_role=role,
            seniority_level=seniority,
            core_strength=strength,
            pain_point=pain_point,
            desired_brand=brand,
        )
    except ValueError as e:
        console.print(f"[red]Invalid profile: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def score(
    text: str = typer.Argument(help="Bullet text to score"),
    job_title: str = typer.Option(None, "--job-title", "-j", help="Target job title (selects stage weights)"),
) -> None:
    """Score one CV bullet across the four stages."""
    config = load_config()
    weights = None if job_title else config.scoring.stage_weights
    analysis = analyze_cv_content(text, job_title, weights)
    console.print(_stage_table(analysis))
    console.print(f"[bold]Total: {analysis.total_score}[/bold]")


@app.command()
def keywords(
    jd: Path = typer.Option(..., "--jd", help="Job description file"),
) -> None:
    """List keywords extracted from a job description."""
    _require(jd, "Job description file")
    found = extract_job_keywords(load_jd_file(jd))
    if not found:
        console.print("[yellow]No keywords found[/yellow]")
        return
    for keyword in found:
        console.print(f"- {keyword}")


@app.command()
def arbitrate(
    original: Path = typer.Option(..., "--original", help="File with original bullets"),
    tailored: Path = typer.Option(..., "--tailored", help="File with rewritten bullets"),
    job_title: str = typer.Option(None, "--job-title", "-j", help="Target job title"),
) -> None:
    """Keep each rewrite only where it does not lower the bullet score."""
    _require(original, "Original bullets file")
    _require(tailored, "Tailored bullets file")
    config = load_config()
    weights = None if job_title else config.scoring.stage_weights
    result = score_arbiter(load_bullets(original), load_bullets(tailored), job_title, weights)

    table = Table(title="Decisions")
    table.add_column("#", justify="right")
    table.add_column("Winner")
    table.add_column("Delta", justify="right")
    table.add_column("Bullet")
    for i, decision in enumerate(result.decisions, 1):
        color = "green" if decision.winner == "tailored" else "yellow"
        table.add_row(str(i), f"[{color}]{decision.winner}[/{color}]", f"{decision.score_delta:+d}", decision.bullet)
    console.print(table)

    status = "[green]preserved[/green]" if result.methodology_preserved else "[red]regressed[/red]"
    console.print(
        Panel(
            f"Original: {result.original_total_score} | Optimised: {result.optimised_total_score} | {status}",
            title="Totals",
        )
    )


@app.command()
def narrative(
    bullets: Path = typer.Option(..., "--bullets", help="File with CV bullets"),
    role: str = typer.Option(..., "--role", help="Target role"),
    seniority: str = typer.Option("mid", "--seniority", help="junior | mid | senior | executive"),
    strength: str = typer.Option(
        "strategic-leadership",
        "--strength",
        help="strategic-leadership | technical-mastery | operational-excellence | business-innovation",
    ),
    brand: str = typer.Option("", "--brand", help="Desired personal brand statement"),
    pain_point: str = typer.Option("", "--pain-point", help="What is not working today"),
) -> None:
    """Check how well bullets tell the narrative you want."""
    _require(bullets, "Bullets file")
    profile = _build_profile(role, seniority, strength, brand, pain_point)
    _print_narrative(analyze_narrative_gap(load_bullets(bullets), profile))


@app.command()
def tailor(
    bullets: Path = typer.Option(..., "--bullets", help="File with CV bullets (TXT/MD/PDF/DOCX)"),
    jd: Path = typer.Option(..., "--jd", help="Job description file"),
    job_title: str = typer.Option(None, "--job-title", "-j", help="Target job title"),
    output: Path = typer.Option(None, "--output", "-o", help="Write optimised bullets here"),
    role: str = typer.Option(None, "--role", help="Target role; enables the narrative check"),
    seniority: str = typer.Option("mid", "--seniority", help="junior | mid | senior | executive"),
    strength: str = typer.Option(
        "strategic-leadership", "--strength", help="Core strength for the narrative check"
    ),
    brand: str = typer.Option("", "--brand", help="Desired personal brand statement"),
    pain_point: str = typer.Option("", "--pain-point", help="What is not working today"),
) -> None:
    """Rewrite bullets for a job description and keep only non-regressing rewrites."""
    _require(bullets, "Bullets file")
    _require(jd, "Job description file")
    profile = _build_profile(role, seniority, strength, brand, pain_point) if role else None

    config = load_config()
    originals = load_bullets(bullets)
    jd_text = load_jd_file(jd)

    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    rewriter = ClaudeBulletRewriter(
        llm,
        model=config.llm.model,
        temperature=config.pipeline.rewrite_temperature,
    )
    orchestrator = TailoringOrchestrator(rewriter, config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Tailoring bullets...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=detail)

        result = asyncio.run(
            orchestrator.run(
                originals, jd_text, job_title=job_title, profile=profile, on_phase=on_phase
            )
        )

    if result.rewrite_failed:
        console.print("[yellow]Rewrite step failed; original bullets kept[/yellow]")

    arbitration = result.arbitration
    for decision, pair in zip(arbitration.decisions, result.pairs):
        marker = "[green]+[/green]" if decision.winner == "tailored" else "[yellow]=[/yellow]"
        gaps = ", ".join(g.gap_name for g in pair.gaps_closing)
        console.print(f"{marker} {decision.bullet}" + (f" [dim]({gaps})[/dim]" if gaps else ""))

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text("\n".join(f"- {b}" for b in arbitration.optimised_bullets) + "\n", encoding="utf-8")
        console.print(f"\n[green]Saved: {output}[/green]")

    console.print(
        Panel(
            f"Original: {arbitration.original_total_score} | Optimised: {arbitration.optimised_total_score}"
            f"\nKeywords: {len(result.keywords)} | Elapsed: {result.elapsed_seconds:.1f}s",
            title="Result",
        )
    )
    if result.narrative is not None:
        _print_narrative(result.narrative)


if __name__ == "__main__":
    app()
