"""
Unit tests for the split planner.

A small in-test catalog keeps exercise selection predictable: every muscle
used by the day templates gets four exercises, alternating barbell and
body weight, plus one exercise tagged for both pectorals and triceps.
"""

import pytest

from routine_scheduler.core.catalog.registry import ExerciseCatalog, get_catalog
from routine_scheduler.core.config import (
    FULL_BODY_MUSCLES,
    LOWER_MUSCLES,
    PULL_MUSCLES,
    PUSH_MUSCLES,
    UPPER_MUSCLES,
)
from routine_scheduler.core.models import ExerciseRef, WorkoutDayPlan
from routine_scheduler.core.planner import (
    determine_split,
    exercises_per_muscle,
    format_plan,
    generate_plan,
    get_day_template,
    select_exercises,
    split_display_name,
    weekly_schedule,
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

_ALL_FOCUS = sorted(
    set(FULL_BODY_MUSCLES) | set(UPPER_MUSCLES) | set(LOWER_MUSCLES) | set(PULL_MUSCLES)
)


def _ex(ex_id: str, muscles: list[str], equipment: str = "body weight") -> ExerciseRef:
    return ExerciseRef(
        exercise_id=ex_id,
        name=ex_id.replace("-", " ").title(),
        target_muscles=muscles,
        equipments=[equipment],
    )


def _catalog() -> ExerciseCatalog:
    exercises = [_ex("dip", ["pectorals", "triceps"])]
    for muscle in _ALL_FOCUS:
        slug = muscle.replace(" ", "-")
        for i in range(1, 5):
            equipment = "barbell" if i % 2 else "body weight"
            exercises.append(_ex(f"{slug}-{i}", [muscle], equipment))
    return ExerciseCatalog(exercises)


def _names(plan) -> list[str]:
    return [d.name for d in plan.workout_days]


# ---------------------------------------------------------------------------
# Archetype selection
# ---------------------------------------------------------------------------


class TestDetermineSplit:
    @pytest.mark.parametrize("days", [1, 2, 3])
    def test_three_or_fewer_days_is_full_body(self, days):
        assert determine_split(days) == "full-body"

    def test_four_days_is_upper_lower(self):
        assert determine_split(4) == "upper-lower"

    def test_five_days_is_hybrid(self):
        assert determine_split(5) == "push-pull-legs-upper-lower"

    @pytest.mark.parametrize("days", [6, 7, 10])
    def test_six_or_more_is_push_pull_legs(self, days):
        assert determine_split(days) == "push-pull-legs"

    @pytest.mark.parametrize("days", [0, -3])
    def test_non_positive_days_rejected(self, days):
        with pytest.raises(ValueError, match="positive"):
            determine_split(days)

    @pytest.mark.parametrize("days", [3.0, "4", True])
    def test_non_integer_days_rejected(self, days):
        with pytest.raises(ValueError, match="integer"):
            determine_split(days)

    def test_display_names(self):
        assert split_display_name("upper-lower") == "Upper/Lower"
        assert split_display_name("push-pull-legs-upper-lower") == "Push/Pull/Legs + Upper/Lower"


class TestExercisesPerMuscle:
    def test_density_by_level(self):
        assert exercises_per_muscle("beginner") == 1
        assert exercises_per_muscle("intermediate") == 2
        assert exercises_per_muscle("advanced") == 3

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="experience level"):
            exercises_per_muscle("elite")


# ---------------------------------------------------------------------------
# Day templates
# ---------------------------------------------------------------------------


class TestDayTemplates:
    def test_full_body_repeats_same_focus(self):
        template = get_day_template("full-body", 2)
        assert [name for name, _ in template] == ["Full Body 1", "Full Body 2"]
        assert all(focus == FULL_BODY_MUSCLES for _, focus in template)

    def test_push_pull_legs_single_cycle_below_six(self):
        template = get_day_template("push-pull-legs", 7)
        assert [name for name, _ in template] == ["Push 1", "Pull 1", "Legs 1"]

    def test_unknown_archetype(self):
        with pytest.raises(ValueError):
            get_day_template("bro-split", 5)


# ---------------------------------------------------------------------------
# generate_plan
# ---------------------------------------------------------------------------


class TestGeneratePlan:
    @pytest.mark.parametrize("days", [1, 2, 3])
    def test_full_body_day_count(self, days):
        plan = generate_plan(days, "beginner", catalog=_catalog())
        assert plan.archetype == "full-body"
        assert plan.days_per_week == days
        assert _names(plan) == [f"Full Body {i}" for i in range(1, days + 1)]

    @pytest.mark.parametrize("level", ["beginner", "intermediate", "advanced"])
    def test_four_days_upper_lower_order(self, level):
        plan = generate_plan(4, level, catalog=_catalog())
        assert plan.archetype == "upper-lower"
        assert [n.split()[0] for n in _names(plan)] == ["Upper", "Lower", "Upper", "Lower"]
        assert plan.workout_days[0].focus == UPPER_MUSCLES
        assert plan.workout_days[1].focus == LOWER_MUSCLES

    def test_five_days_order(self):
        plan = generate_plan(5, "intermediate", catalog=_catalog())
        assert _names(plan) == ["Push", "Pull", "Legs", "Upper", "Lower"]

    def test_six_days_two_cycles(self):
        plan = generate_plan(6, "beginner", catalog=_catalog())
        assert _names(plan) == ["Push 1", "Pull 1", "Legs 1", "Push 2", "Pull 2", "Legs 2"]

    def test_beginner_one_exercise_per_focus_muscle(self):
        plan = generate_plan(3, "beginner", catalog=_catalog())
        day = plan.workout_days[0]
        assert len(day.exercises) == len(FULL_BODY_MUSCLES)
        # first catalog match per muscle, in focus order
        assert [ex.exercise_id for ex in day.exercises][:2] == ["dip", "lats-1"]

    def test_advanced_push_day_scenario(self):
        """5 days, advanced: Push focuses pectorals/delts/triceps with 3 picks each."""
        plan = generate_plan(5, "advanced", catalog=_catalog())
        assert plan.archetype == "push-pull-legs-upper-lower"
        push = plan.workout_days[0]
        assert push.focus == ("pectorals", "delts", "triceps")
        ids = [ex.exercise_id for ex in push.exercises]
        assert len(ids) == 9
        # the dual-tagged dip is picked for both pectorals and triceps
        assert ids[:3] == ["dip", "pectorals-1", "pectorals-2"]
        assert ids[6:] == ["dip", "triceps-1", "triceps-2"]

    def test_exercises_come_from_focus_muscles(self):
        catalog = _catalog()
        for days in range(1, 8):
            plan = generate_plan(days, "advanced", catalog=catalog)
            for day in plan.workout_days:
                for ex in day.exercises:
                    assert catalog.get_by_id(ex.exercise_id) == ex
                    assert set(ex.target_muscles) & set(day.focus)

    def test_equipment_filter_respected(self):
        plan = generate_plan(4, "advanced", ["barbell"], catalog=_catalog())
        for day in plan.workout_days:
            assert day.exercises
            for ex in day.exercises:
                assert "barbell" in ex.equipments
        # only two barbell exercises per muscle exist in the test catalog
        assert len(plan.workout_days[0].exercises) == 2 * len(UPPER_MUSCLES)

    def test_no_match_gives_empty_day_not_error(self):
        plan = generate_plan(3, "beginner", ["kettlebell"], catalog=_catalog())
        assert all(day.exercises == () for day in plan.workout_days)
        assert plan.total_exercises == 0

    def test_identical_inputs_identical_plans(self):
        catalog = _catalog()
        first = generate_plan(5, "intermediate", ["body weight"], catalog=catalog)
        second = generate_plan(5, "intermediate", ["body weight"], catalog=catalog)
        assert first == second

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            generate_plan(0, "beginner", catalog=_catalog())
        with pytest.raises(ValueError):
            generate_plan(3, "expert", catalog=_catalog())

    def test_default_catalog_used(self):
        plan = generate_plan(4, "beginner")
        assert len(plan.workout_days) == 4
        catalog = get_catalog()
        for day in plan.workout_days:
            assert len(day.exercises) == len(day.focus)
            assert all(catalog.get_by_id(ex.exercise_id) is not None for ex in day.exercises)


class TestSelectExercises:
    def test_concatenates_in_focus_order(self):
        picked = select_exercises(["quads", "calves"], 2, _catalog())
        assert [ex.exercise_id for ex in picked] == ["quads-1", "quads-2", "calves-1", "calves-2"]

    def test_unknown_muscle_contributes_nothing(self):
        picked = select_exercises(["abs", "glutes"], 1, _catalog())
        assert [ex.exercise_id for ex in picked] == ["glutes-1"]


# ---------------------------------------------------------------------------
# Weekly view and Markdown
# ---------------------------------------------------------------------------


class TestWeeklySchedule:
    def test_pads_to_seven_days(self):
        plan = generate_plan(4, "beginner", catalog=_catalog())
        week = weekly_schedule(plan)
        assert len(week) == 7
        assert [d.is_rest_day for d in week] == [False] * 4 + [True] * 3
        assert week[-1].name == "Rest Day"
        assert len(plan.workout_days) == 4

    def test_six_day_plan_gets_one_rest_day(self):
        week = weekly_schedule(generate_plan(6, "beginner", catalog=_catalog()))
        assert sum(d.is_rest_day for d in week) == 1

    def test_rest_day_cannot_carry_focus(self):
        with pytest.raises(ValueError):
            WorkoutDayPlan(name="Rest Day", focus=("quads",), is_rest_day=True)


class TestFormatPlan:
    def test_markdown_layout(self):
        text = format_plan(generate_plan(3, "beginner", catalog=_catalog()))
        assert text.startswith("# 3 Day Full Body Workout Plan")
        assert "## Day 1: Full Body 1" in text
        assert "**Focus:** pectorals, lats, delts, quads, hamstrings, glutes" in text
        assert "1. **Dip**" in text
        assert "   - Equipment: body weight" in text
        assert "## Day 7: Rest Day" in text
        assert "**Rest & Recovery Day**" in text

    def test_empty_day_noted(self):
        text = format_plan(generate_plan(3, "beginner", ["kettlebell"], catalog=_catalog()))
        assert "No matching exercises" in text

    def test_header_counts_training_days(self):
        text = format_plan(generate_plan(7, "beginner", catalog=_catalog()))
        assert text.startswith("# 3 Day Push/Pull/Legs Workout Plan")
        assert "## Day 4: Rest Day" in text
