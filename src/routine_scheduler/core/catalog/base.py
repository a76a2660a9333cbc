"""
Base types for the exercise catalog.

ExerciseCatalogQuery is the contract the split planner consumes.  Any
implementation (the bundled YAML catalog, a database, a remote service)
must return results in a stable order for identical filters: plan
generation is only deterministic, and its tests only meaningful, if the
catalog order is.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ..models import ExerciseRef


@dataclass(frozen=True)
class SearchResult:
    """One page of catalog search results."""

    exercises: tuple[ExerciseRef, ...] = field(default_factory=tuple)
    total: int = 0      # matches before pagination
    has_more: bool = False


class ExerciseCatalogQuery(Protocol):
    """Filtered, paginated exercise lookup."""

    def search(
        self,
        target_muscles: Sequence[str] | None = None,
        equipments: Sequence[str] | None = None,
        exclude_equipments: Sequence[str] | None = None,
        body_parts: Sequence[str] | None = None,
        search_term: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SearchResult:
        """
        Return exercises matching every given filter category.

        Within one category any listed value matches; ``exclude_equipments``
        drops exercises carrying any excluded tag.  Pagination slices the
        filtered list in catalog order.
        """
        ...
