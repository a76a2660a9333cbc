"""
Progression scheduler.

Works out which routine day to train next from the most recent completed
workout.  There is no stored "current position": the answer is
recomputed from the routine days and one completion record on every
call, so asking twice gives the same day and changes nothing.

Decision table
--------------
  routine has no days                    → NoActiveRoutineDays
  no completion / ad-hoc completion      → day 1
  completion on day k, day k+1 exists    → day k+1
  completion on day k, k is the last day → day 1 (wraparound)
  day 1 needed but missing               → MalformedRoutine
"""

from collections.abc import Iterable, Sequence
from typing import Protocol

from .models import CompletionRecord, RoutineDay


class SchedulingError(Exception):
    """Raised when the next routine day cannot be determined."""

    user_message = "Could not determine the next workout."


class NoActiveRoutineDays(SchedulingError):
    """The active routine has no days (or there is no active routine)."""

    user_message = "No active routine found. Set up a routine first."


class MalformedRoutine(SchedulingError):
    """The routine's day orders are not the contiguous set 1..N."""

    user_message = "Routine data is inconsistent: day 1 is missing."


class HasDayOrder(Protocol):
    day_order: int | None


class RoutinePersistence(Protocol):
    """Source of the active routine's days."""

    def get_active_routine_days(self, user_id: str) -> list[RoutineDay] | None:
        ...


class CompletionHistory(Protocol):
    """Source of the most recent completed workout for a routine."""

    def get_last_completion(self, user_id: str, routine_id: str) -> CompletionRecord | None:
        ...


def _find_day(routine_days: Sequence[RoutineDay], day_order: int) -> RoutineDay | None:
    return next((d for d in routine_days if d.day_order == day_order), None)


def next_day(
    routine_days: Sequence[RoutineDay],
    last_completion: HasDayOrder | None = None,
) -> RoutineDay:
    """
    Return the routine day to perform next.

    Args:
        routine_days: Days of the active routine (day_order 1..N)
        last_completion: Most recent completion for this routine, if any;
            a record with ``day_order=None`` is an ad-hoc workout

    Returns:
        A member of ``routine_days``

    Raises:
        NoActiveRoutineDays: If routine_days is empty
        MalformedRoutine: If day 1 is needed but not present
    """
    if not routine_days:
        raise NoActiveRoutineDays("Routine has no days")

    if last_completion is not None and last_completion.day_order is not None:
        candidate = _find_day(routine_days, last_completion.day_order + 1)
        if candidate is not None:
            return candidate

    first = _find_day(routine_days, 1)
    if first is None:
        orders = sorted(d.day_order for d in routine_days)
        raise MalformedRoutine(f"Routine has no day 1 (day orders: {orders})")
    return first


def latest_completion(
    records: Iterable[CompletionRecord],
    routine_id: str,
) -> CompletionRecord | None:
    """
    Return the most recent completion for a routine, by completed_at.

    Ties keep the record that appears last in ``records``.
    """
    latest: CompletionRecord | None = None
    for record in records:
        if record.routine_id != routine_id:
            continue
        if latest is None or record.completed_datetime >= latest.completed_datetime:
            latest = record
    return latest
