"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of plans, routines and history.
"""

from rich.console import Console
from rich.table import Table

from ..core.catalog.base import SearchResult
from ..core.models import CompletionRecord, RoutineDay, WorkoutDayPlan, WorkoutPlan
from ..core.planner import split_display_name

console = Console()


def _fmt_focus(focus: tuple[str, ...]) -> str:
    return ", ".join(focus) if focus else "-"


def format_day_table(day: WorkoutDayPlan, index: int) -> Table:
    """
    Build a table listing one planned day's exercises.

    Args:
        day: Planned day
        index: 1-based position in the week

    Returns:
        Rich Table
    """
    title = f"Day {index}: {day.name}"
    if day.is_rest_day:
        title += "  [dim](rest & recovery)[/dim]"
    else:
        title += f"  [dim]focus: {_fmt_focus(day.focus)}[/dim]"

    table = Table(title=title, title_justify="left", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Exercise", style="cyan")
    table.add_column("Target")
    table.add_column("Equipment", style="magenta")

    for i, ex in enumerate(day.exercises, 1):
        table.add_row(
            str(i),
            ex.name,
            ", ".join(ex.target_muscles),
            ", ".join(ex.equipments),
        )
    return table


def print_plan(plan: WorkoutPlan, days: list[WorkoutDayPlan] | None = None) -> None:
    """
    Print a generated plan, one table per day.

    Args:
        plan: Generated plan
        days: Days to show (default: the plan's training days); pass the
            weekly schedule to include rest days
    """
    days = list(plan.workout_days) if days is None else days

    console.print()
    console.print(
        f"[bold]{len(plan.workout_days)}-day {split_display_name(plan.archetype)} plan[/bold]"
        f"  ({plan.total_exercises} exercise slots)"
    )
    console.print()

    for i, day in enumerate(days, 1):
        if day.is_rest_day:
            console.print(f"[bold]Day {i}: {day.name}[/bold]  [dim](rest & recovery)[/dim]")
            console.print()
            continue
        console.print(format_day_table(day, i))
        if not day.exercises:
            print_warning(f"No exercises matched for {day.name}; widen the equipment list.")
        console.print()


def format_routine_day(day: RoutineDay) -> Table:
    """Build a table of one routine day's exercises and prescribed sets."""
    table = Table(
        title=f"Day {day.day_order}: {day.name}",
        title_justify="left",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Exercise", style="cyan")
    table.add_column("Sets", justify="right")
    table.add_column("Reps", justify="right")
    table.add_column("Weight", justify="right")

    for ex in day.exercises:
        reps = sorted({s.target_reps for s in ex.sets})
        weights = sorted({s.target_weight for s in ex.sets})
        table.add_row(
            str(ex.exercise_order),
            ex.exercise_name,
            str(len(ex.sets)),
            "/".join(str(r) for r in reps),
            "BW" if weights == [0.0] else "/".join(f"{w:g}" for w in weights),
        )
    return table


def print_next_day(routine_name: str, day: RoutineDay, total_days: int) -> None:
    """Print the next workout of the active routine."""
    console.print()
    console.print(
        f"[bold]Next workout[/bold] in [cyan]{routine_name}[/cyan]: "
        f"day {day.day_order} of {total_days}"
    )
    console.print(format_routine_day(day))
    console.print()


def print_routines(routines: list[dict]) -> None:
    """Print stored routine summaries."""
    if not routines:
        console.print("[yellow]No routines saved yet.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("", width=1)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Days", justify="right")
    table.add_column("Created")

    for r in routines:
        table.add_row(
            "[green]*[/green]" if r["active"] else "",
            r["id"],
            r["name"],
            str(r["days"]),
            r["created_at"][:10],
        )
    console.print(table)


def print_history(records: list[CompletionRecord], days: list[RoutineDay]) -> None:
    """
    Print completed workouts.

    Args:
        records: Completions, oldest first
        days: Routine days used to name the completed day
    """
    if not records:
        console.print("[yellow]No workouts recorded yet.[/yellow]")
        return

    names = {d.day_order: d.name for d in days}
    table = Table(show_header=True, header_style="bold")
    table.add_column("Completed", style="cyan")
    table.add_column("Day", justify="right")
    table.add_column("Workout")

    for r in records:
        if r.day_order is None:
            day_cell = "[dim]ad-hoc[/dim]"
            name = r.workout_name or "-"
        else:
            day_cell = str(r.day_order)
            name = r.workout_name or names.get(r.day_order, "?")
        table.add_row(r.completed_at, day_cell, name)
    console.print(table)


def print_search_result(result: SearchResult, offset: int) -> None:
    """Print one page of catalog search results."""
    if not result.exercises:
        console.print("[yellow]No exercises match these filters.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="dim")
    table.add_column("Exercise", style="cyan")
    table.add_column("Target")
    table.add_column("Body part")
    table.add_column("Equipment", style="magenta")

    for i, ex in enumerate(result.exercises, offset + 1):
        table.add_row(
            str(i),
            ex.exercise_id,
            ex.name,
            ", ".join(ex.target_muscles),
            ", ".join(ex.body_parts),
            ", ".join(ex.equipments),
        )
    console.print(table)

    shown_to = offset + len(result.exercises)
    more = "  (more available: use --offset)" if result.has_more else ""
    console.print(f"[dim]{offset + 1}-{shown_to} of {result.total}{more}[/dim]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
