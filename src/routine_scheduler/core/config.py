"""
Configuration constants for the split planner and routine scheduler.

All adjustable parameters are centralized here for easy tuning.
"""

from typing import Final

# =============================================================================
# CATALOG TAXONOMY
# =============================================================================

MUSCLE_GROUPS: Final[tuple[str, ...]] = (
    "abductors",
    "abs",
    "adductors",
    "biceps",
    "calves",
    "cardiovascular system",
    "delts",
    "forearms",
    "glutes",
    "hamstrings",
    "lats",
    "levator scapulae",
    "pectorals",
    "quads",
    "serratus anterior",
    "spine",
    "traps",
    "triceps",
    "upper back",
)

BODY_PARTS: Final[tuple[str, ...]] = (
    "back",
    "cardio",
    "chest",
    "lower arms",
    "lower legs",
    "neck",
    "shoulders",
    "upper arms",
    "upper legs",
    "waist",
)

EQUIPMENT: Final[tuple[str, ...]] = (
    "assisted",
    "band",
    "barbell",
    "body weight",
    "bosu ball",
    "cable",
    "dumbbell",
    "elliptical machine",
    "ez barbell",
    "hammer",
    "kettlebell",
    "leverage machine",
    "medicine ball",
    "olympic barbell",
    "resistance band",
    "roller",
    "rope",
    "skierg machine",
    "sled machine",
    "smith machine",
    "stability ball",
    "stationary bike",
    "stepmill machine",
    "tire",
    "trap bar",
    "upper body ergometer",
    "weighted",
    "wheel roller",
)

# Antagonist / opposing muscle pairs used for superset suggestions
COMPLEMENTARY_MUSCLES: Final[dict[str, tuple[str, ...]]] = {
    "biceps": ("triceps",),
    "triceps": ("biceps",),
    "pectorals": ("lats", "upper back"),
    "lats": ("pectorals",),
    "upper back": ("pectorals",),
    "quads": ("hamstrings",),
    "hamstrings": ("quads",),
    "abs": ("spine",),
}

# =============================================================================
# EXPERIENCE LEVELS
# =============================================================================

EXPERIENCE_LEVELS: Final[tuple[str, ...]] = ("beginner", "intermediate", "advanced")

# Catalog page size per focus muscle; not a cap on exercises per day
EXERCISES_PER_MUSCLE: Final[dict[str, int]] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}

# =============================================================================
# SPLIT ARCHETYPES
# =============================================================================

SPLIT_ARCHETYPES: Final[tuple[str, ...]] = (
    "full-body",
    "upper-lower",
    "push-pull-legs",
    "push-pull-legs-upper-lower",
)

SPLIT_DISPLAY_NAMES: Final[dict[str, str]] = {
    "full-body": "Full Body",
    "upper-lower": "Upper/Lower",
    "push-pull-legs": "Push/Pull/Legs",
    "push-pull-legs-upper-lower": "Push/Pull/Legs + Upper/Lower",
}

FULL_BODY_MUSCLES: Final[tuple[str, ...]] = (
    "pectorals",
    "lats",
    "delts",
    "quads",
    "hamstrings",
    "glutes",
)
UPPER_MUSCLES: Final[tuple[str, ...]] = ("pectorals", "lats", "delts", "biceps", "triceps")
LOWER_MUSCLES: Final[tuple[str, ...]] = ("quads", "hamstrings", "glutes", "calves")
PUSH_MUSCLES: Final[tuple[str, ...]] = ("pectorals", "delts", "triceps")
PULL_MUSCLES: Final[tuple[str, ...]] = ("lats", "upper back", "biceps", "traps")
LEG_MUSCLES: Final[tuple[str, ...]] = LOWER_MUSCLES

# Training frequency accepted by the routine-creation path
MIN_DAYS_PER_WEEK: Final[int] = 3
MAX_DAYS_PER_WEEK: Final[int] = 7
DAYS_IN_WEEK: Final[int] = 7

REST_DAY_NAME: Final[str] = "Rest Day"

# =============================================================================
# CATALOG SEARCH
# =============================================================================

DEFAULT_PAGE_SIZE: Final[int] = 20
DEFAULT_MUSCLE_GROUP_LIMIT: Final[int] = 10

# =============================================================================
# ROUTINE LIMITS
# =============================================================================

ROUTINE_NAME_MAX_LENGTH: Final[int] = 100
DAY_NAME_MAX_LENGTH: Final[int] = 100
EXERCISE_NAME_MAX_LENGTH: Final[int] = 200
MAX_SETS_PER_EXERCISE: Final[int] = 20
MAX_EXERCISES_PER_DAY: Final[int] = 30
MAX_DAYS_PER_ROUTINE: Final[int] = 7
MAX_REPS: Final[int] = 999
MAX_WEIGHT: Final[float] = 9999.0

# Default prescription when a generated plan is turned into a routine:
# (sets per exercise, target reps per set)
DEFAULT_PRESCRIPTION: Final[dict[str, tuple[int, int]]] = {
    "beginner": (3, 10),
    "intermediate": (3, 10),
    "advanced": (4, 8),
}
