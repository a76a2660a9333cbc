"""
Tests for the progression scheduler and routine construction.

Covers every row of the next-day decision table plus the helpers that
produce and check the routines the scheduler reads.
"""

import pytest

from routine_scheduler import MalformedRoutine, NoActiveRoutineDays, SchedulingError, next_day
from routine_scheduler.core.catalog.registry import ExerciseCatalog
from routine_scheduler.core.models import CompletionRecord, ExerciseRef, RoutineDay
from routine_scheduler.core.planner import generate_plan
from routine_scheduler.core.routines import build_routine_days, default_sets, validate_routine_days
from routine_scheduler.core.scheduler import latest_completion

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _day(order: int, name: str | None = None) -> RoutineDay:
    return RoutineDay(day_id=f"d{order}", day_order=order, name=name or f"Day {order}")


def _routine(n: int = 3) -> list[RoutineDay]:
    return [_day(i) for i in range(1, n + 1)]


def _done(day_order: int | None, at: str = "2026-03-01T18:00", routine_id: str = "r1") -> CompletionRecord:
    return CompletionRecord(routine_id=routine_id, day_order=day_order, completed_at=at)


# ---------------------------------------------------------------------------
# next_day
# ---------------------------------------------------------------------------


class TestNextDay:
    def test_empty_routine_raises(self):
        with pytest.raises(NoActiveRoutineDays):
            next_day([])

    def test_empty_routine_raises_even_with_history(self):
        with pytest.raises(NoActiveRoutineDays):
            next_day([], _done(2))

    def test_no_history_starts_at_day_one(self):
        days = _routine()
        assert next_day(days) is days[0]

    def test_continues_to_following_day(self):
        days = _routine()
        assert next_day(days, _done(2)) is days[2]

    def test_wraps_after_last_day(self):
        days = _routine()
        assert next_day(days, _done(3)) is days[0]

    @pytest.mark.parametrize("n", [1, 3, 7])
    def test_ad_hoc_workout_restarts_at_day_one(self, n):
        days = _routine(n)
        assert next_day(days, _done(None)) is days[0]

    def test_single_day_routine_always_day_one(self):
        days = _routine(1)
        assert next_day(days, _done(1)) is days[0]

    def test_stale_day_order_beyond_routine_wraps(self):
        days = _routine(3)
        assert next_day(days, _done(9)) is days[0]

    def test_input_order_does_not_matter(self):
        days = list(reversed(_routine(4)))
        result = next_day(days, _done(1))
        assert result.day_order == 2

    def test_missing_day_one_is_malformed(self):
        days = [_day(2), _day(3)]
        with pytest.raises(MalformedRoutine, match="day orders"):
            next_day(days)

    def test_continue_works_without_day_one(self):
        # only the wrap/start paths need day 1
        days = [_day(2), _day(3)]
        assert next_day(days, _done(2)) is days[1]

    def test_accepts_any_object_with_day_order(self):
        class Last:
            day_order = 1

        assert next_day(_routine(), Last()).day_order == 2

    def test_idempotent(self):
        days = _routine()
        last = _done(1)
        assert next_day(days, last) is next_day(days, last)
        assert [d.day_order for d in days] == [1, 2, 3]

    def test_errors_share_base_class_and_messages(self):
        assert issubclass(NoActiveRoutineDays, SchedulingError)
        assert issubclass(MalformedRoutine, SchedulingError)
        assert "routine first" in NoActiveRoutineDays.user_message
        assert "inconsistent" in MalformedRoutine.user_message


class TestLatestCompletion:
    def test_picks_most_recent_for_routine(self):
        records = [
            _done(1, "2026-03-01T10:00"),
            _done(3, "2026-03-05T10:00"),
            _done(2, "2026-03-03T10:00"),
            _done(1, "2026-03-09T10:00", routine_id="other"),
        ]
        assert latest_completion(records, "r1").day_order == 3

    def test_none_when_routine_has_no_history(self):
        assert latest_completion([_done(1)], "missing") is None

    def test_date_only_and_datetime_mix(self):
        records = [_done(1, "2026-03-02"), _done(2, "2026-03-01T23:59")]
        assert latest_completion(records, "r1").day_order == 1

    def test_offset_and_naive_timestamps_compare(self):
        records = [_done(1, "2026-03-05T10:00"), _done(2, "2026-03-01T10:00+02:00")]
        assert latest_completion(records, "r1").day_order == 1
        assert records[1].completed_datetime.tzinfo is None


class TestCompletionRecord:
    def test_invalid_timestamp(self):
        with pytest.raises(ValueError, match="completed_at"):
            _done(1, "yesterday")

    def test_day_order_must_be_positive(self):
        with pytest.raises(ValueError):
            _done(0)


# ---------------------------------------------------------------------------
# Routine construction
# ---------------------------------------------------------------------------


def _catalog() -> ExerciseCatalog:
    muscles = ["pectorals", "lats", "delts", "quads", "hamstrings", "glutes"]
    return ExerciseCatalog(
        ExerciseRef(
            exercise_id=f"{m}-{i}",
            name=f"{m.title()} Move {i}",
            target_muscles=[m],
            equipments=["dumbbell"],
        )
        for m in muscles
        for i in (1, 2)
    )


class TestBuildRoutineDays:
    def test_days_numbered_from_one(self):
        plan = generate_plan(3, "intermediate", catalog=_catalog())
        days = build_routine_days(plan, "intermediate")
        assert [d.day_order for d in days] == [1, 2, 3]
        assert [d.name for d in days] == ["Full Body 1", "Full Body 2", "Full Body 3"]
        assert [d.day_id for d in days] == ["day-1", "day-2", "day-3"]

    def test_exercises_keep_plan_order(self):
        plan = generate_plan(1, "intermediate", catalog=_catalog())
        (day,) = build_routine_days(plan, "intermediate")
        assert [e.exercise_order for e in day.exercises] == list(range(1, 13))
        assert day.exercises[0].exercise_name == "Pectorals Move 1"
        assert day.exercises[1].exercise_name == "Pectorals Move 2"

    def test_default_sets_by_level(self):
        assert [(s.set_number, s.target_reps) for s in default_sets("beginner")] == [
            (1, 10), (2, 10), (3, 10),
        ]
        advanced = default_sets("advanced")
        assert len(advanced) == 4
        assert all(s.target_reps == 8 and s.target_weight == 0.0 for s in advanced)

    def test_empty_day_rejected(self):
        plan = generate_plan(3, "beginner", ["barbell"], catalog=_catalog())
        with pytest.raises(ValueError, match="no exercises"):
            build_routine_days(plan, "beginner")

    def test_built_routine_schedules_cleanly(self):
        plan = generate_plan(2, "beginner", catalog=_catalog())
        days = build_routine_days(plan, "beginner")
        assert next_day(days, _done(2)).name == "Full Body 1"


class TestValidateRoutineDays:
    def test_contiguous_days_pass(self):
        validate_routine_days([_day(2), _day(1), _day(3)])

    @pytest.mark.parametrize(
        "orders",
        [[1, 3], [1, 1, 2], [2, 3]],
    )
    def test_gaps_and_duplicates_rejected(self, orders):
        with pytest.raises(ValueError, match="Day orders"):
            validate_routine_days([_day(o) for o in orders])

    def test_empty_and_oversized_rejected(self):
        with pytest.raises(ValueError):
            validate_routine_days([])
        with pytest.raises(ValueError):
            validate_routine_days(_routine(8))
