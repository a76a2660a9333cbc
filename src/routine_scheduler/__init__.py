"""Weekly split planner and next-workout scheduler for strength routines."""

from .core.planner import generate_plan
from .core.scheduler import MalformedRoutine, NoActiveRoutineDays, SchedulingError, next_day

__version__ = "0.1.0"

__all__ = [
    "MalformedRoutine",
    "NoActiveRoutineDays",
    "SchedulingError",
    "generate_plan",
    "next_day",
]
