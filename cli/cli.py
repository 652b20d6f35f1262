"""CLI for goalpace.

Developer CLI to inspect allocation plans and daily requirements from the
terminal. ``--today`` pins the anchor day so output is reproducible.
"""

from datetime import date

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from goalpace.allocation import (
    AllocationRequest,
    DistributionType,
    SessionGoalType,
    allocate,
    calculate_daily_requirement,
    calculate_session_requirement,
    current_phase,
    today_allocation,
)
from goalpace.config.settings import settings
from goalpace.core.logger import setup_logger
from goalpace.utils.dates import parse_date
from goalpace.utils.formatting import format_minutes

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="goalpace",
    help="goalpace CLI - deadline allocation plans and daily requirements",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Configure logging for every command."""
    setup_logger(level=log_level.upper(), log_file=settings.log_file)


def _parse_day(value: str, option: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint=option) from e


@app.command()
def plan(
    remaining: int = typer.Argument(..., help="Units left to distribute"),
    deadline: str = typer.Argument(..., help="Deadline (YYYY-MM-DD)"),
    today: str | None = typer.Option(None, "--today", help="Anchor day (YYYY-MM-DD), defaults to the current date"),
    exclude: list[int] = typer.Option([], "--exclude", "-x", help="Excluded weekday, 0=Sunday ... 6=Saturday (repeatable)"),
    distribution: DistributionType = typer.Option(
        DistributionType(settings.default_distribution), "--distribution", "-d", help="LINEAR or EXPONENTIAL"
    ),
    intensity: float = typer.Option(settings.default_intensity, "--intensity", "-i", help="Curve intensity, 0.0-1.0"),
) -> None:
    """Print the day-by-day allocation plan."""
    anchor = _parse_day(today, "--today") if today else date.today()
    due = _parse_day(deadline, "deadline")

    invalid = [d for d in exclude if d < 0 or d > 6]
    if invalid:
        raise typer.BadParameter(f"weekdays must be within 0..6, got {invalid}", param_hint="--exclude")

    request = AllocationRequest(
        remaining_quantity=remaining,
        today=anchor,
        deadline=due,
        excluded_weekdays=frozenset(exclude),
        distribution=distribution,
        intensity=intensity,
    )
    logger.info(f"Building {distribution.value} plan for {remaining} units until {due.isoformat()}")
    result = allocate(request)

    if result.is_expired:
        console.print(Panel(Text("Deadline reached", style="bold red"), border_style="red"))
        raise typer.Exit(1)
    if result.is_fully_blocked:
        console.print(
            Panel(
                Text("All days are excluded", style="bold yellow"),
                subtitle=f"{result.total_allocated} units unallocated",
                border_style="yellow",
            )
        )
        raise typer.Exit(1)
    if result.total_allocated == 0:
        console.print(Panel(Text("Goal already completed", style="bold green"), border_style="green"))
        return

    table = Table(title=f"Plan: {remaining} units, {result.effective_day_count} effective days")
    table.add_column("Date")
    table.add_column("Day")
    table.add_column("Units", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("% avg", justify="right")
    for day in result.days:
        style = "dim" if day.is_excluded else None
        table.add_row(
            day.formatted_date,
            day.weekday_name,
            "-" if day.is_excluded else str(day.allocated),
            str(day.cumulative_allocated),
            "-" if day.is_excluded else f"{day.percent_of_average}%",
            style=style,
        )
    console.print(table)

    phases = Table(title="Phases")
    phases.add_column("Phase")
    phases.add_column("Days")
    phases.add_column("Avg/day", justify="right")
    phases.add_column("Total", justify="right")
    phases.add_column("Range")
    for phase in result.phases:
        phases.add_row(
            f"{phase.symbol} {phase.name}",
            f"{phase.start_day_index}-{phase.end_day_index}",
            str(phase.average_per_day),
            str(phase.total_allocated),
            phase.percent_range_label,
        )
    console.print(phases)

    todays = today_allocation(result, anchor)
    phase = current_phase(result, todays, anchor)
    if todays is not None:
        summary = f"Today: {todays.allocated} units"
        if phase is not None:
            summary += f" ({phase.symbol} {phase.name})"
        console.print(f"[bold]{summary}[/bold]  average {result.average_per_effective_day:.1f}/day")


@app.command()
def requirement(
    remaining: int = typer.Argument(..., help="Units left"),
    deadline: str = typer.Argument(..., help="Deadline (YYYY-MM-DD)"),
    today: str | None = typer.Option(None, "--today", help="Anchor day (YYYY-MM-DD), defaults to the current date"),
) -> None:
    """Print the flat units-per-day requirement."""
    anchor = _parse_day(today, "--today") if today else date.today()
    result = calculate_daily_requirement(remaining, anchor, _parse_day(deadline, "deadline"))

    if result.is_expired:
        console.print("[red]Deadline reached[/red]")
        raise typer.Exit(1)
    console.print(f"{result.per_day} units/day over {result.remaining_days} days")


@app.command()
def session(
    goal_type: SessionGoalType = typer.Argument(..., help="MINUTES or POMODOROS"),
    goal: int = typer.Argument(..., help="Goal in units of GOAL_TYPE"),
    completed: int = typer.Argument(..., help="Units already completed"),
    deadline: str = typer.Argument(..., help="Deadline (YYYY-MM-DD)"),
    today: str | None = typer.Option(None, "--today", help="Anchor day (YYYY-MM-DD), defaults to the current date"),
) -> None:
    """Print the daily pomodoros and hours needed for a work-session goal."""
    anchor = _parse_day(today, "--today") if today else date.today()
    result = calculate_session_requirement(goal_type, goal, completed, anchor, _parse_day(deadline, "deadline"))

    if result.is_expired:
        console.print("[red]Deadline reached[/red]")
        raise typer.Exit(1)
    minutes = round(result.hours_per_day * 60)
    console.print(
        f"{result.pomodoros_per_day} pomodoros/day ({format_minutes(minutes)}/day) over {result.remaining_days} days"
    )


if __name__ == "__main__":
    app()
