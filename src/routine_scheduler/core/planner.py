"""
Split planner.

Builds a weekly workout split from training frequency and experience
level, then fills each day with exercises from the catalog.

Pipeline
--------
1. determine_split(days_per_week)          → archetype
2. get_day_template(archetype, days)       → [(day name, focus muscles), ...]
3. exercises_per_muscle(level)             → catalog page size per muscle
4. select_exercises(focus, n, equipment)   → exercises, in focus order

Everything here is a pure function of its arguments and the catalog
order.  No randomness: the same inputs give the same plan.
"""

from collections.abc import Callable, Sequence

from .catalog.base import ExerciseCatalogQuery
from .config import (
    DAYS_IN_WEEK,
    EXERCISES_PER_MUSCLE,
    FULL_BODY_MUSCLES,
    LEG_MUSCLES,
    LOWER_MUSCLES,
    PULL_MUSCLES,
    PUSH_MUSCLES,
    REST_DAY_NAME,
    SPLIT_DISPLAY_NAMES,
    UPPER_MUSCLES,
)
from .models import ExerciseRef, ExperienceLevel, SplitArchetype, WorkoutDayPlan, WorkoutPlan

DayTemplate = list[tuple[str, tuple[str, ...]]]


# =============================================================================
# DAY TEMPLATES
# =============================================================================


def _full_body_days(days_per_week: int) -> DayTemplate:
    return [(f"Full Body {i + 1}", FULL_BODY_MUSCLES) for i in range(days_per_week)]


def _upper_lower_days(days_per_week: int) -> DayTemplate:
    return [
        ("Upper Body 1", UPPER_MUSCLES),
        ("Lower Body 1", LOWER_MUSCLES),
        ("Upper Body 2", UPPER_MUSCLES),
        ("Lower Body 2", LOWER_MUSCLES),
    ]


def _push_pull_legs_days(days_per_week: int) -> DayTemplate:
    cycles = 2 if days_per_week == 6 else 1
    days: DayTemplate = []
    for c in range(1, cycles + 1):
        days.extend(
            [
                (f"Push {c}", PUSH_MUSCLES),
                (f"Pull {c}", PULL_MUSCLES),
                (f"Legs {c}", LEG_MUSCLES),
            ]
        )
    return days


def _push_pull_legs_upper_lower_days(days_per_week: int) -> DayTemplate:
    return [
        ("Push", PUSH_MUSCLES),
        ("Pull", PULL_MUSCLES),
        ("Legs", LEG_MUSCLES),
        ("Upper", UPPER_MUSCLES),
        ("Lower", LOWER_MUSCLES),
    ]


_DAY_TEMPLATES: dict[str, Callable[[int], DayTemplate]] = {
    "full-body": _full_body_days,
    "upper-lower": _upper_lower_days,
    "push-pull-legs": _push_pull_legs_days,
    "push-pull-legs-upper-lower": _push_pull_legs_upper_lower_days,
}


def _validate_days_per_week(days_per_week: int) -> None:
    if isinstance(days_per_week, bool) or not isinstance(days_per_week, int):
        raise ValueError(f"days_per_week must be an integer, got {days_per_week!r}")
    if days_per_week <= 0:
        raise ValueError(f"days_per_week must be positive, got {days_per_week}")


def determine_split(days_per_week: int) -> SplitArchetype:
    """
    Choose the split archetype for a training frequency.

    Total over positive integers: 3 or fewer days train full body, 4 days
    upper/lower, 5 days push/pull/legs + upper/lower, 6 or more push/pull/legs.

    Raises:
        ValueError: If days_per_week is not a positive integer
    """
    _validate_days_per_week(days_per_week)
    if days_per_week <= 3:
        return "full-body"
    if days_per_week == 4:
        return "upper-lower"
    if days_per_week == 5:
        return "push-pull-legs-upper-lower"
    return "push-pull-legs"


def exercises_per_muscle(experience_level: ExperienceLevel) -> int:
    """Return how many exercises to pick per focus muscle (1 / 2 / 3)."""
    try:
        return EXERCISES_PER_MUSCLE[experience_level]
    except KeyError:
        valid = ", ".join(EXERCISES_PER_MUSCLE)
        raise ValueError(
            f"Unknown experience level {experience_level!r}. Valid levels: {valid}"
        ) from None


def get_day_template(archetype: SplitArchetype, days_per_week: int) -> DayTemplate:
    """
    Return the ordered (day name, focus muscles) list for an archetype.

    Args:
        archetype: Split archetype
        days_per_week: Training frequency (sets the day count for full-body
            and the number of cycles for push-pull-legs)

    Raises:
        ValueError: If archetype is unknown
    """
    try:
        build = _DAY_TEMPLATES[archetype]
    except KeyError:
        raise ValueError(f"Unknown split archetype: {archetype!r}") from None
    return build(days_per_week)


def split_display_name(archetype: SplitArchetype) -> str:
    """Human-readable archetype name, e.g. 'Push/Pull/Legs'."""
    return SPLIT_DISPLAY_NAMES[archetype]


# =============================================================================
# EXERCISE SELECTION
# =============================================================================


def select_exercises(
    focus: Sequence[str],
    per_muscle: int,
    catalog: ExerciseCatalogQuery,
    available_equipment: Sequence[str] | None = None,
) -> list[ExerciseRef]:
    """
    Pick exercises for one day.

    Each focus muscle is queried on its own and contributes its first
    ``per_muscle`` catalog matches.  Results are concatenated in focus
    order; an exercise tagged with several focus muscles can appear more
    than once.  A muscle with no match contributes nothing.
    """
    equipment = list(available_equipment) if available_equipment else None
    selected: list[ExerciseRef] = []
    for muscle in focus:
        result = catalog.search(
            target_muscles=[muscle],
            equipments=equipment,
            limit=per_muscle,
        )
        selected.extend(result.exercises)
    return selected


def generate_plan(
    days_per_week: int,
    experience_level: ExperienceLevel,
    available_equipment: Sequence[str] | None = None,
    catalog: ExerciseCatalogQuery | None = None,
) -> WorkoutPlan:
    """
    Generate a weekly workout split.

    Args:
        days_per_week: Training days per week (any positive integer;
            values outside 3-6 fall into the nearest archetype)
        experience_level: "beginner", "intermediate" or "advanced"
        available_equipment: Restrict exercises to these equipment tags
        catalog: Exercise source (default: bundled catalog)

    Returns:
        WorkoutPlan with one WorkoutDayPlan per template day

    Raises:
        ValueError: If days_per_week is not a positive integer or the
            experience level is unknown
    """
    archetype = determine_split(days_per_week)
    per_muscle = exercises_per_muscle(experience_level)

    if catalog is None:
        from .catalog.registry import get_catalog

        catalog = get_catalog()

    workout_days = [
        WorkoutDayPlan(
            name=name,
            focus=focus,
            exercises=select_exercises(focus, per_muscle, catalog, available_equipment),
        )
        for name, focus in get_day_template(archetype, days_per_week)
    ]

    return WorkoutPlan(
        archetype=archetype,
        days_per_week=days_per_week,
        workout_days=workout_days,
    )


# =============================================================================
# WEEKLY VIEW AND FORMATTING
# =============================================================================


def weekly_schedule(plan: WorkoutPlan) -> list[WorkoutDayPlan]:
    """
    Return the plan's training days padded with rest days to a full week.

    Plans that already fill the week are returned as-is.
    """
    week = list(plan.workout_days)
    rest_days = max(0, DAYS_IN_WEEK - len(week))
    week.extend(
        WorkoutDayPlan(name=REST_DAY_NAME, focus=(), is_rest_day=True)
        for _ in range(rest_days)
    )
    return week


def format_plan(plan: WorkoutPlan) -> str:
    """
    Render the weekly schedule of a plan as Markdown.

    Used for plain-text output (e.g. piping or pasting into notes).
    """
    lines = [
        f"# {len(plan.workout_days)} Day {split_display_name(plan.archetype)} Workout Plan",
        "",
    ]

    for i, day in enumerate(weekly_schedule(plan), 1):
        lines.append(f"## Day {i}: {day.name}")
        if day.is_rest_day:
            lines.append("**Rest & Recovery Day**")
            lines.append("")
            lines.append(
                "Let your muscles recover. Light walking or stretching is fine."
            )
            lines.append("")
        else:
            lines.append(f"**Focus:** {', '.join(day.focus)}")
            lines.append("")
            lines.append("**Exercises:**")
            if not day.exercises:
                lines.append("_No matching exercises for the selected equipment._")
            for n, ex in enumerate(day.exercises, 1):
                lines.append(f"{n}. **{ex.name}**")
                lines.append(f"   - Target: {', '.join(ex.target_muscles)}")
                lines.append(f"   - Equipment: {', '.join(ex.equipments)}")
            lines.append("")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
