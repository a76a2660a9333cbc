"""Routine and workout commands: routines, activate, next, log, history."""

from datetime import datetime
from typing import Annotated, Optional

import typer

from ...core.models import CompletionRecord, RoutineDay
from ...core.scheduler import MalformedRoutine, NoActiveRoutineDays, next_day
from ...io.routine_store import RoutineStore
from ...io.serializers import ValidationError, validate_iso_datetime
from .. import views
from ..app import DataDirOption, app, get_store


def _load_active(store: RoutineStore) -> tuple[str, str, list[RoutineDay]]:
    """Return (routine_id, name, days) of the active routine or exit with an error."""
    try:
        routine_id = store.get_active_routine_id()
        if routine_id is None:
            views.print_error(NoActiveRoutineDays.user_message)
            raise typer.Exit(1)
        name, days = store.load_routine(routine_id)
    except (KeyError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)
    return routine_id, name, days


def _resolve_next(store: RoutineStore, routine_id: str, days: list[RoutineDay]) -> RoutineDay:
    """Run the scheduler for the active routine, mapping failures to CLI errors."""
    try:
        last = store.get_last_completion(routine_id=routine_id)
        return next_day(days, last)
    except NoActiveRoutineDays as e:
        views.print_error(e.user_message)
        raise typer.Exit(1)
    except MalformedRoutine as e:
        views.print_error(f"{e.user_message} ({e})")
        views.print_warning("This is a data problem; re-create the routine with 'save'.")
        raise typer.Exit(1)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def routines(data_dir: DataDirOption = None) -> None:
    """
    List saved routines (* marks the active one).
    """
    store = get_store(data_dir)
    try:
        views.print_routines(store.list_routines())
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def activate(
    routine_id: Annotated[str, typer.Argument(help="ID shown by 'routines'")],
    data_dir: DataDirOption = None,
) -> None:
    """
    Make a saved routine the active one.
    """
    store = get_store(data_dir)
    try:
        store.set_active_routine(routine_id)
    except (KeyError, ValidationError) as e:
        views.print_error(str(e).strip("'\""))
        raise typer.Exit(1)
    views.print_success(f"Active routine: {routine_id}")


@app.command(name="next")
def next_workout(data_dir: DataDirOption = None) -> None:
    """
    Show the next workout day of the active routine.

    Continues after the last completed day and wraps back to day 1 after
    the final day.  Ad-hoc workouts restart the routine at day 1.
    """
    store = get_store(data_dir)
    routine_id, name, days = _load_active(store)
    day = _resolve_next(store, routine_id, days)
    views.print_next_day(name, day, len(days))


@app.command()
def log(
    day: Annotated[
        Optional[int],
        typer.Option("--day", help="Day number completed (default: the next day)"),
    ] = None,
    ad_hoc: Annotated[
        bool,
        typer.Option("--ad-hoc", help="Record a workout not tied to a routine day"),
    ] = False,
    name: Annotated[
        Optional[str],
        typer.Option("--name", help="Workout name (default: the day's name)"),
    ] = None,
    at: Annotated[
        Optional[str],
        typer.Option("--at", help="Completion time, YYYY-MM-DD[THH:MM] (default: now)"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """
    Record a completed workout for the active routine.
    """
    if ad_hoc and day is not None:
        views.print_error("Use either --day or --ad-hoc, not both")
        raise typer.Exit(1)

    store = get_store(data_dir)
    routine_id, _, days = _load_active(store)

    try:
        completed_at = (
            validate_iso_datetime(at)
            if at is not None
            else datetime.now().isoformat(timespec="seconds")
        )
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if ad_hoc:
        day_order = None
        workout_name = name or "Ad-hoc workout"
    else:
        if day is None:
            target = _resolve_next(store, routine_id, days)
        else:
            target = next((d for d in days if d.day_order == day), None)
            if target is None:
                views.print_error(f"Day must be between 1 and {len(days)}")
                raise typer.Exit(1)
        day_order = target.day_order
        workout_name = name or target.name

    record = CompletionRecord(
        routine_id=routine_id,
        day_order=day_order,
        completed_at=completed_at,
        workout_name=workout_name,
    )
    store.append_completion(record)

    where = "ad-hoc" if day_order is None else f"day {day_order}"
    views.print_success(f"Logged {workout_name} ({where}) at {completed_at}")


@app.command()
def history(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", help="Show only the most recent N workouts"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """
    Show completed workouts for the active routine.
    """
    store = get_store(data_dir)
    routine_id, _, days = _load_active(store)
    try:
        records = store.load_completions(routine_id)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if limit is not None and limit > 0:
        records = records[-limit:]
    views.print_history(records, days)
