"""Shared Typer app object, shared option types, and store utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.routine_store import RoutineStore, get_default_data_dir

# Shared --data-dir option type used across all commands that touch storage
DataDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--data-dir",
        "-d",
        help="Directory for routines and history (default: ~/.routine-scheduler)",
    ),
]

DaysOption = Annotated[
    int,
    typer.Option("--days", "-n", help="Training days per week"),
]

LevelOption = Annotated[
    str,
    typer.Option("--level", "-l", help="Experience level: beginner, intermediate, advanced"),
]

EquipmentOption = Annotated[
    Optional[str],
    typer.Option(
        "--equipment",
        "-e",
        help="Comma-separated equipment you have, e.g. 'barbell,dumbbell,body weight'",
    ),
]

app = typer.Typer(
    name="routine-scheduler",
    help="Plan a weekly strength split and keep track of which day comes next.",
    no_args_is_help=True,
)


def get_store(data_dir: Path | None) -> RoutineStore:
    """Get routine store from path or default location."""
    if data_dir is None:
        data_dir = get_default_data_dir()
    return RoutineStore(data_dir)
