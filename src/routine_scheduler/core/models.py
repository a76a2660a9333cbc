"""
Data models for routine-scheduler.

All core dataclasses representing catalog exercises, generated plans,
persisted routine days and completion records.  Every model is frozen:
plans are produced once per request and routine data is owned by the
storage collaborator, so nothing in the core mutates them.

Sequence fields accept any iterable and are normalised to tuples.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from .config import (
    BODY_PARTS,
    DAY_NAME_MAX_LENGTH,
    EQUIPMENT,
    EXERCISE_NAME_MAX_LENGTH,
    MAX_EXERCISES_PER_DAY,
    MAX_REPS,
    MAX_SETS_PER_EXERCISE,
    MAX_WEIGHT,
    MUSCLE_GROUPS,
    SPLIT_ARCHETYPES,
)

ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
SplitArchetype = Literal[
    "full-body",
    "upper-lower",
    "push-pull-legs",
    "push-pull-legs-upper-lower",
]
# Catalog taxonomy values; membership is checked against config tuples.
MuscleGroup = str
BodyPart = str
Equipment = str


def _freeze(obj: object, name: str) -> tuple:
    """Replace a sequence attribute on a frozen dataclass with a tuple."""
    value = tuple(getattr(obj, name))
    object.__setattr__(obj, name, value)
    return value


def _check_vocabulary(values: tuple, allowed: tuple[str, ...], label: str) -> None:
    unknown = [v for v in values if v not in allowed]
    if unknown:
        raise ValueError(f"Unknown {label}: {', '.join(map(repr, unknown))}")


@dataclass(frozen=True)
class ExerciseRef:
    """
    One exercise from the catalog.

    Owned by the catalog; the planner only copies references into plans.
    """

    exercise_id: str
    name: str
    target_muscles: tuple[MuscleGroup, ...]
    equipments: tuple[Equipment, ...]
    body_parts: tuple[BodyPart, ...] = ()
    secondary_muscles: tuple[MuscleGroup, ...] = ()
    instructions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate exercise data."""
        if not self.exercise_id or not self.exercise_id.strip():
            raise ValueError("exercise_id must be a non-empty string")
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")

        targets = _freeze(self, "target_muscles")
        if not targets:
            raise ValueError(f"Exercise {self.exercise_id!r} has no target muscles")
        _check_vocabulary(targets, MUSCLE_GROUPS, "muscle group")
        _check_vocabulary(_freeze(self, "secondary_muscles"), MUSCLE_GROUPS, "muscle group")
        _check_vocabulary(_freeze(self, "equipments"), EQUIPMENT, "equipment")
        _check_vocabulary(_freeze(self, "body_parts"), BODY_PARTS, "body part")
        _freeze(self, "instructions")

    @property
    def muscle_count(self) -> int:
        """Number of muscles worked (target + secondary)."""
        return len(self.target_muscles) + len(self.secondary_muscles)


@dataclass(frozen=True)
class WorkoutDayPlan:
    """
    One day of a generated plan.

    ``focus`` order drives exercise order.  Rest days only appear in the
    padded weekly view and have no focus and no exercises.
    """

    name: str
    focus: tuple[MuscleGroup, ...]
    exercises: tuple[ExerciseRef, ...] = ()
    is_rest_day: bool = False

    def __post_init__(self) -> None:
        """Validate day plan data."""
        if not self.name:
            raise ValueError("Day name must be non-empty")
        focus = _freeze(self, "focus")
        exercises = _freeze(self, "exercises")
        if self.is_rest_day:
            if focus or exercises:
                raise ValueError("Rest days carry no focus or exercises")
            return
        if not focus:
            raise ValueError(f"Day {self.name!r} needs at least one focus muscle group")
        _check_vocabulary(focus, MUSCLE_GROUPS, "muscle group")


@dataclass(frozen=True)
class WorkoutPlan:
    """
    A generated weekly split.

    Transient: the caller decides whether to turn it into a stored routine.
    """

    archetype: SplitArchetype
    days_per_week: int
    workout_days: tuple[WorkoutDayPlan, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate plan data."""
        if self.archetype not in SPLIT_ARCHETYPES:
            raise ValueError(f"Invalid archetype: {self.archetype}")
        if self.days_per_week <= 0:
            raise ValueError("days_per_week must be positive")
        days = _freeze(self, "workout_days")
        if not days:
            raise ValueError("A plan needs at least one workout day")
        if any(d.is_rest_day for d in days):
            raise ValueError("Rest days belong to the weekly schedule, not the plan")

    @property
    def total_exercises(self) -> int:
        """Sum of exercise slots across all days."""
        return sum(len(d.exercises) for d in self.workout_days)


@dataclass(frozen=True)
class RoutineSet:
    """A prescribed set inside a stored routine."""

    set_number: int
    target_reps: int
    target_weight: float = 0.0  # 0 for bodyweight exercises

    def __post_init__(self) -> None:
        """Validate set data."""
        if self.set_number < 1:
            raise ValueError("set_number must be positive")
        if not 1 <= self.target_reps <= MAX_REPS:
            raise ValueError(f"target_reps must be between 1 and {MAX_REPS}")
        if not 0 <= self.target_weight <= MAX_WEIGHT:
            raise ValueError(f"target_weight must be between 0 and {MAX_WEIGHT:g}")


@dataclass(frozen=True)
class RoutineExercise:
    """An exercise slot inside a stored routine day."""

    exercise_name: str
    exercise_order: int
    sets: tuple[RoutineSet, ...] = ()

    def __post_init__(self) -> None:
        """Validate exercise slot data."""
        name = self.exercise_name.strip() if self.exercise_name else ""
        if not 1 <= len(name) <= EXERCISE_NAME_MAX_LENGTH:
            raise ValueError(
                f"exercise_name must be 1-{EXERCISE_NAME_MAX_LENGTH} characters"
            )
        if self.exercise_order < 1:
            raise ValueError("exercise_order must be positive")
        sets = _freeze(self, "sets")
        if not 1 <= len(sets) <= MAX_SETS_PER_EXERCISE:
            raise ValueError(
                f"{self.exercise_name!r} must have 1-{MAX_SETS_PER_EXERCISE} sets"
            )


@dataclass(frozen=True)
class RoutineDay:
    """
    A day of a persisted routine, as seen by the scheduler.

    ``day_order`` is 1-based and, across one routine, forms the contiguous
    set {1..N}.  The scheduler relies on that but does not check it; see
    routines.validate_routine_days.
    """

    day_id: str
    day_order: int
    name: str
    exercises: tuple[RoutineExercise, ...] = ()

    def __post_init__(self) -> None:
        """Validate routine day data."""
        if not self.day_id:
            raise ValueError("day_id must be non-empty")
        if self.day_order < 1:
            raise ValueError("day_order must be positive")
        name = self.name.strip() if self.name else ""
        if not 1 <= len(name) <= DAY_NAME_MAX_LENGTH:
            raise ValueError(f"Day name must be 1-{DAY_NAME_MAX_LENGTH} characters")
        if len(_freeze(self, "exercises")) > MAX_EXERCISES_PER_DAY:
            raise ValueError(
                f"Day {self.name!r} has more than {MAX_EXERCISES_PER_DAY} exercises"
            )


@dataclass(frozen=True)
class CompletionRecord:
    """
    A completed workout.

    ``day_order`` is None for ad-hoc workouts not tied to a routine day.
    """

    routine_id: str
    day_order: int | None
    completed_at: str  # ISO format: YYYY-MM-DDTHH:MM[:SS]
    workout_name: str | None = None

    def __post_init__(self) -> None:
        """Validate completion data."""
        if not self.routine_id:
            raise ValueError("routine_id must be non-empty")
        if self.day_order is not None and self.day_order < 1:
            raise ValueError("day_order must be positive or None")
        try:
            datetime.fromisoformat(self.completed_at)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid completed_at: {self.completed_at!r}") from e

    @property
    def completed_datetime(self) -> datetime:
        """completed_at parsed to a naive local datetime."""
        parsed = datetime.fromisoformat(self.completed_at)
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)
        return parsed
