"""
Exercise catalog for routine-scheduler.

The planner reads exercises through the ExerciseCatalogQuery contract;
ExerciseCatalog is the bundled in-memory implementation.
"""

from .base import ExerciseCatalogQuery, SearchResult
from .registry import ExerciseCatalog, complementary_muscles, get_catalog

__all__ = [
    "ExerciseCatalog",
    "ExerciseCatalogQuery",
    "SearchResult",
    "complementary_muscles",
    "get_catalog",
]
