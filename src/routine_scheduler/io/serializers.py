"""
JSON serialization for routine-scheduler data models.

Handles conversion between dataclasses and JSON-compatible dicts, plus
parsing of comma-separated CLI values.
"""

import json
from datetime import datetime
from typing import Any

from ..core.config import EQUIPMENT, EXPERIENCE_LEVELS, MUSCLE_GROUPS
from ..core.models import (
    CompletionRecord,
    ExerciseRef,
    RoutineDay,
    RoutineExercise,
    RoutineSet,
    WorkoutDayPlan,
    WorkoutPlan,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_iso_datetime(value: str) -> str:
    """
    Validate an ISO-8601 date or datetime string.

    Values with a UTC offset are converted to naive local time so that
    every stored completion compares against every other.

    Args:
        value: e.g. "2026-03-01", "2026-03-01T18:30" or "2026-03-01T18:30+02:00"

    Returns:
        The value unchanged, or its local-time equivalent if it carried an offset

    Raises:
        ValidationError: If the value cannot be parsed
    """
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid date/time: {value!r}. Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM"
        ) from e
    if parsed.tzinfo is not None:
        return parsed.astimezone().replace(tzinfo=None).isoformat(timespec="seconds")
    return value


def validate_experience_level(level: str) -> str:
    """Validate an experience level name (case-insensitive)."""
    normalized = level.strip().lower()
    if normalized not in EXPERIENCE_LEVELS:
        raise ValidationError(
            f"Invalid experience level: {level!r}. Must be one of {EXPERIENCE_LEVELS}"
        )
    return normalized


def _parse_tag_list(raw: str | None, allowed: tuple[str, ...], label: str) -> list[str] | None:
    if raw is None or not raw.strip():
        return None
    values = [v.strip().lower() for v in raw.split(",") if v.strip()]
    unknown = [v for v in values if v not in allowed]
    if unknown:
        raise ValidationError(f"Unknown {label}: {', '.join(unknown)}")
    return values


def parse_equipment_list(raw: str | None) -> list[str] | None:
    """
    Parse "barbell, dumbbell" into a validated equipment list.

    Returns None for empty input (no equipment restriction).
    """
    return _parse_tag_list(raw, EQUIPMENT, "equipment")


def parse_muscle_list(raw: str | None) -> list[str] | None:
    """Parse a comma-separated muscle group list; None for empty input."""
    return _parse_tag_list(raw, MUSCLE_GROUPS, "muscle group")


# =============================================================================
# Plans
# =============================================================================


def exercise_ref_to_dict(ex: ExerciseRef) -> dict[str, Any]:
    """Convert ExerciseRef to a JSON-compatible dict."""
    return {
        "exercise_id": ex.exercise_id,
        "name": ex.name,
        "target_muscles": list(ex.target_muscles),
        "equipments": list(ex.equipments),
        "body_parts": list(ex.body_parts),
        "secondary_muscles": list(ex.secondary_muscles),
    }


def workout_day_plan_to_dict(day: WorkoutDayPlan) -> dict[str, Any]:
    """Convert WorkoutDayPlan to a JSON-compatible dict."""
    d: dict[str, Any] = {
        "name": day.name,
        "focus": list(day.focus),
        "exercises": [exercise_ref_to_dict(ex) for ex in day.exercises],
    }
    if day.is_rest_day:
        d["is_rest_day"] = True
    return d


def workout_plan_to_dict(plan: WorkoutPlan) -> dict[str, Any]:
    """Convert WorkoutPlan to a JSON-compatible dict."""
    return {
        "archetype": plan.archetype,
        "days_per_week": plan.days_per_week,
        "workout_days": [workout_day_plan_to_dict(d) for d in plan.workout_days],
    }


# =============================================================================
# Routines
# =============================================================================


def routine_day_to_dict(day: RoutineDay) -> dict[str, Any]:
    """Convert RoutineDay to a JSON-compatible dict."""
    return {
        "id": day.day_id,
        "day_order": day.day_order,
        "name": day.name,
        "exercises": [
            {
                "exercise_name": ex.exercise_name,
                "exercise_order": ex.exercise_order,
                "sets": [
                    {
                        "set_number": s.set_number,
                        "target_reps": s.target_reps,
                        "target_weight": s.target_weight,
                    }
                    for s in ex.sets
                ],
            }
            for ex in day.exercises
        ],
    }


def dict_to_routine_day(data: dict[str, Any]) -> RoutineDay:
    """
    Convert a dict to RoutineDay.

    Raises:
        ValidationError: If data is invalid
    """
    try:
        exercises = [
            RoutineExercise(
                exercise_name=ex["exercise_name"],
                exercise_order=int(ex["exercise_order"]),
                sets=[
                    RoutineSet(
                        set_number=int(s["set_number"]),
                        target_reps=int(s["target_reps"]),
                        target_weight=float(s.get("target_weight", 0.0)),
                    )
                    for s in ex.get("sets", [])
                ],
            )
            for ex in data.get("exercises", [])
        ]
        return RoutineDay(
            day_id=str(data["id"]),
            day_order=int(data["day_order"]),
            name=data["name"],
            exercises=exercises,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid routine day data: {e}") from e


def completion_to_dict(record: CompletionRecord) -> dict[str, Any]:
    """Convert CompletionRecord to a JSON-compatible dict."""
    d: dict[str, Any] = {
        "routine_id": record.routine_id,
        "day_order": record.day_order,
        "completed_at": record.completed_at,
    }
    if record.workout_name:
        d["workout_name"] = record.workout_name
    return d


def dict_to_completion(data: dict[str, Any]) -> CompletionRecord:
    """
    Convert a dict to CompletionRecord.

    Raises:
        ValidationError: If data is invalid
    """
    try:
        day_order = data.get("day_order")
        return CompletionRecord(
            routine_id=str(data["routine_id"]),
            day_order=int(day_order) if day_order is not None else None,
            completed_at=validate_iso_datetime(data["completed_at"]),
            workout_name=data.get("workout_name"),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid completion data: {e}") from e


def completion_to_json_line(record: CompletionRecord) -> str:
    """Serialize a completion as a single JSON line (no trailing newline)."""
    return json.dumps(completion_to_dict(record), separators=(",", ":"))
