"""
Routine construction.

Turns a generated WorkoutPlan into the RoutineDay records a routine is
stored as, and checks the day-order invariant the scheduler relies on.
"""

from collections.abc import Sequence

from .config import DEFAULT_PRESCRIPTION, MAX_DAYS_PER_ROUTINE
from .models import ExperienceLevel, RoutineDay, RoutineExercise, RoutineSet, WorkoutPlan


def default_sets(experience_level: ExperienceLevel) -> tuple[RoutineSet, ...]:
    """Return the default bodyweight prescription for a level (e.g. 3 x 10)."""
    try:
        n_sets, reps = DEFAULT_PRESCRIPTION[experience_level]
    except KeyError:
        raise ValueError(f"Unknown experience level {experience_level!r}") from None
    return tuple(RoutineSet(set_number=i, target_reps=reps) for i in range(1, n_sets + 1))


def validate_routine_days(days: Sequence[RoutineDay]) -> None:
    """
    Check that a routine's days can be scheduled.

    Raises:
        ValueError: If there are no days, too many days, or the day orders
            are not exactly 1..N
    """
    if not days:
        raise ValueError("A routine needs at least one day")
    if len(days) > MAX_DAYS_PER_ROUTINE:
        raise ValueError(f"A routine has at most {MAX_DAYS_PER_ROUTINE} days, got {len(days)}")

    orders = sorted(d.day_order for d in days)
    expected = list(range(1, len(days) + 1))
    if orders != expected:
        raise ValueError(
            f"Day orders must be 1..{len(days)} without gaps or duplicates, got {orders}"
        )


def build_routine_days(
    plan: WorkoutPlan,
    experience_level: ExperienceLevel,
) -> list[RoutineDay]:
    """
    Convert a plan into routine days with default sets.

    Exercises keep the plan's order (duplicates included).  Day ids are
    ``day-<order>``; storage may replace them.

    Raises:
        ValueError: If a planned day has no exercises
    """
    sets = default_sets(experience_level)
    days: list[RoutineDay] = []

    for order, planned in enumerate(plan.workout_days, 1):
        if not planned.exercises:
            raise ValueError(
                f"Day {planned.name!r} has no exercises; "
                "widen the equipment selection and try again"
            )
        exercises = tuple(
            RoutineExercise(exercise_name=ex.name, exercise_order=i, sets=sets)
            for i, ex in enumerate(planned.exercises, 1)
        )
        days.append(
            RoutineDay(
                day_id=f"day-{order}",
                day_order=order,
                name=planned.name,
                exercises=exercises,
            )
        )

    validate_routine_days(days)
    return days
