"""Planning commands: plan, save."""

import json
from typing import Annotated

import typer

from ...core.planner import format_plan, generate_plan, weekly_schedule
from ...core.routines import build_routine_days
from ...io.serializers import (
    ValidationError,
    parse_equipment_list,
    validate_experience_level,
    workout_plan_to_dict,
)
from .. import views
from ..app import DataDirOption, DaysOption, EquipmentOption, LevelOption, app, get_store


def _build_plan(days: int, level: str, equipment: str | None):
    """Validate CLI input and generate a plan, exiting with an error on bad input."""
    try:
        level = validate_experience_level(level)
        equipment_list = parse_equipment_list(equipment)
        return level, generate_plan(days, level, equipment_list)
    except (ValidationError, ValueError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def plan(
    days: DaysOption = 3,
    level: LevelOption = "beginner",
    equipment: EquipmentOption = None,
    week: Annotated[
        bool,
        typer.Option("--week", "-w", help="Show the full 7-day week including rest days"),
    ] = False,
    markdown: Annotated[
        bool,
        typer.Option("--markdown", help="Print the plan as Markdown text"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the plan as JSON"),
    ] = False,
) -> None:
    """
    Generate a weekly split and show it.

    The split is chosen from --days: up to 3 full body, 4 upper/lower,
    5 push/pull/legs + upper/lower, 6 or more push/pull/legs.
    """
    _, workout_plan = _build_plan(days, level, equipment)

    if as_json:
        typer.echo(json.dumps(workout_plan_to_dict(workout_plan), indent=2))
        return

    if markdown:
        typer.echo(format_plan(workout_plan))
        return

    shown = weekly_schedule(workout_plan) if week else None
    views.print_plan(workout_plan, shown)


@app.command()
def save(
    name: Annotated[str, typer.Argument(help="Routine name")],
    days: DaysOption = 3,
    level: LevelOption = "beginner",
    equipment: EquipmentOption = None,
    activate: Annotated[
        bool,
        typer.Option("--activate/--no-activate", help="Make this the active routine"),
    ] = True,
    data_dir: DataDirOption = None,
) -> None:
    """
    Generate a split and store it as a routine with default sets.
    """
    level, workout_plan = _build_plan(days, level, equipment)

    try:
        routine_days = build_routine_days(workout_plan, level)
    except ValueError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store = get_store(data_dir)
    try:
        routine_id = store.save_routine(
            name,
            routine_days,
            activate=activate,
            meta={"archetype": workout_plan.archetype, "experience_level": level},
        )
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_plan(workout_plan)
    suffix = " (active)" if store.get_active_routine_id() == routine_id else ""
    views.print_success(
        f"Saved routine '{name.strip()}' with {len(routine_days)} days{suffix}. ID: {routine_id}"
    )
