"""
CLI entry point using Typer.

Provides commands for routine planning and tracking:
- plan: Generate and display a weekly split
- save: Generate a split and store it as a routine
- routines / activate: Manage stored routines
- next: Show the next workout day of the active routine
- log: Record a completed workout
- history: Show completed workouts
- exercises / catalog-info: Browse the exercise catalog
"""

from .app import app
from .commands import catalog, planning, workouts  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
