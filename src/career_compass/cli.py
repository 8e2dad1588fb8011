"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from career_compass.config import TIME_RANGES, load_config
from career_compass.fallback.tools import default_tools
from career_compass.insights import CareerInsights
from career_compass.logging.cost_calculator import calculate_cost

app = typer.Typer(
    name="career-compass",
    help="AI-backed career insights: market pulse, tools, jobs and roadmaps.",
    no_args_is_help=True,
)
console = Console()


def _setup(verbose: bool) -> CareerInsights:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return CareerInsights.from_config(load_config())


def _finish(insights: CareerInsights, verbose: bool) -> None:
    if not verbose:
        return
    summary = insights.ai.get_token_summary()
    cost = calculate_cost(summary["calls"])
    console.print(
        f"[dim]AI calls: {len(summary['calls'])} | tokens in/out: "
        f"{summary['input']}/{summary['output']} | est. cost: ${cost:.4f}[/dim]"
    )


def _run(coro):
    """Run a builder call; rejected input is printed instead of raised."""
    try:
        return asyncio.run(coro)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _source_badge(source: str) -> str:
    return "[green]live[/green]" if source == "live" else "[yellow]offline estimate[/yellow]"


@app.command()
def pulse(
    query: str = typer.Argument("", help="Tool or topic to focus on (empty = whole market)"),
    time_range: str = typer.Option("6M", "--range", "-r", help="3M, 6M or 1Y"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Show the AI market pulse."""
    if time_range.upper() not in TIME_RANGES:
        console.print(f"[red]Unknown range {time_range!r}; use one of {', '.join(TIME_RANGES)}[/red]")
        raise typer.Exit(1)

    insights = _setup(verbose)
    with console.status("Synthesizing market pulse..."):
        result = asyncio.run(insights.get_market_pulse(query, time_range.upper()))

    if as_json:
        console.print_json(data=result.to_wire())
    else:
        s = result.stats
        console.print(
            Panel(
                f"Market cap: [bold]{s.market_cap}[/bold] ({s.market_cap_growth})\n"
                f"Active tools: {s.active_tools} (+{s.weekly_new_tools}/week)\n"
                f"{s.funding_label}: {s.avg_funding}\n"
                f"Best overall: {result.best_overall_tool} | {result.cagr}",
                title=f"Market pulse {escape(query) or 'overview'} [{time_range.upper()}] - {_source_badge(result.source)}",
            )
        )
        chart = Table(title="Growth")
        for col in ("Month", "Growth", "Label", "Trend"):
            chart.add_column(col)
        for p in result.chart_data:
            chart.add_row(p.month, f"{p.growth:g}", p.label, p.demand_trend)
        console.print(chart)

        if result.tool_spotlight:
            t = result.tool_spotlight
            console.print(
                Panel(
                    f"{t.description}\n\n"
                    f"Industry need: {t.industry_need}\n"
                    f"Pros: {', '.join(t.pros)}\nCons: {', '.join(t.cons)}\n"
                    f"Competitors: {', '.join(t.competitors)}\n"
                    f"Pricing: {t.pricing} | {t.website}",
                    title=f"Spotlight: {t.name} ({t.category})",
                )
            )
        for tool in result.growing_tools:
            console.print(f"  [bold]{tool.name}[/bold] {tool.growth} - {tool.reason}")
    _finish(insights, verbose)


@app.command()
def tools(
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List trending AI tools."""
    insights = _setup(verbose)
    with console.status("Fetching AI tools..."):
        result = asyncio.run(insights.fetch_tools())

    if result is None:
        console.print("[yellow]Live directory unavailable, showing the curated catalog.[/yellow]")
        result = default_tools()

    if as_json:
        console.print_json(data=[t.to_wire() for t in result])
    else:
        table = Table(title="AI tools")
        for col in ("Name", "Category", "Rating", "Pricing", "URL"):
            table.add_column(col)
        for t in result:
            table.add_row(t.name, t.category, f"{t.rating:.1f}", t.pricing, t.url)
        console.print(table)
    _finish(insights, verbose)


@app.command()
def jobs(
    query: str = typer.Argument("", help="Role to search for"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Search job listings."""
    insights = _setup(verbose)
    with console.status("Searching jobs..."):
        result = asyncio.run(insights.fetch_jobs(query))

    if as_json:
        console.print_json(data=[j.to_wire() for j in result])
    else:
        table = Table(title=f"Jobs: {query or 'all'}")
        for col in ("Title", "Company", "Location", "Salary", "Type", "Posted"):
            table.add_column(col)
        for j in result:
            table.add_row(j.title, j.company, j.location, j.salary, j.type, j.posted_at)
        console.print(table)
    _finish(insights, verbose)


@app.command()
def strategy(
    name: str = typer.Argument(help="Product name"),
    description: str = typer.Option("", "--description", "-d", help="Short product description"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a product strategy and roadmap."""
    insights = _setup(verbose)
    with console.status("Planning product strategy..."):
        result = _run(insights.get_product_strategy(name, description))

    if as_json:
        console.print_json(data=result.to_wire())
    else:
        console.print(
            Panel(
                f"{result.current_state.analysis}\n\n"
                f"Strengths: {', '.join(result.current_state.strengths)}\n"
                f"Weaknesses: {', '.join(result.current_state.weaknesses)}\n"
                f"Differentiation: {result.market_analysis.differentiation}",
                title=f"{result.product_name} - {_source_badge(result.source)}",
            )
        )
        road = result.roadmap
        for label, phase in (("Short", road.short_term), ("Mid", road.mid_term), ("Long", road.long_term)):
            console.print(f"[bold]{label} term[/bold] {phase.title} ({phase.timeline}): {phase.details}")
        console.print(f"\nUX: {result.ux_strategy}\nMonetization: {result.monetization}")
        for k in result.kpis:
            console.print(f"  KPI {k.metric}: {k.target}")
        for r in result.risks:
            console.print(f"  Risk {r.risk} -> {r.mitigation}")
    _finish(insights, verbose)


@app.command()
def roadmap(
    tech: str = typer.Argument(help="Technology to learn"),
    goal: str = typer.Option("", "--goal", "-g", help="Learning goal"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a learning roadmap for a technology."""
    insights = _setup(verbose)
    with console.status("Building learning roadmap..."):
        result = _run(insights.get_learning_roadmap(tech, goal))

    if as_json:
        console.print_json(data=result.to_wire())
    else:
        console.print(Panel(result.objective, title=f"{result.tech_name} - {_source_badge(result.source)}"))
        phases = result.phases
        for step in (phases.foundations, phases.intermediate, phases.advanced):
            console.print(f"[bold]{step.title}[/bold] ({step.estimated_time})")
            console.print(f"  {step.description}")
            console.print(f"  Topics: {', '.join(step.key_topics)}")
        for p in result.projects:
            console.print(f"  Project ({p.difficulty}) {p.title}")
        for c in result.career_paths:
            console.print(f"  Career {c.role}: {c.salary_range}")
    _finish(insights, verbose)


@app.command()
def skill(
    name: str = typer.Argument(help="Skill to master"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a phased skill roadmap."""
    insights = _setup(verbose)
    with console.status("Building skill roadmap..."):
        result = _run(insights.get_skill_roadmap(name))

    if as_json:
        console.print_json(data=result.to_wire())
    else:
        console.print(Panel(result.description, title=f"{result.title} - {_source_badge(result.source)}"))
        for phase in result.phases:
            console.print(f"[bold]{phase.title}[/bold] ({phase.period})")
            for s in phase.skills:
                console.print(f"  {s.name}: {s.details}")
    _finish(insights, verbose)


if __name__ == "__main__":
    app()
