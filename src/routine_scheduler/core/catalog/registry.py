"""
Exercise catalog.

ExerciseCatalog is the in-memory implementation of ExerciseCatalogQuery.
Use get_catalog() for the default catalog loaded from the bundled YAML
files (plus user overrides, see loader.py).  If no exercise can be
loaded a RuntimeError is raised; planning cannot work without a catalog.
"""

from collections.abc import Iterable, Sequence
from functools import lru_cache

from ..config import COMPLEMENTARY_MUSCLES, DEFAULT_MUSCLE_GROUP_LIMIT, DEFAULT_PAGE_SIZE
from ..models import ExerciseRef
from .base import SearchResult


def _matches_any(tags: tuple[str, ...], wanted: Sequence[str] | None) -> bool:
    return not wanted or any(w in tags for w in wanted)


class ExerciseCatalog:
    """
    Ordered, read-only collection of exercises with search and lookups.

    Catalog order is the order exercises were given in; every query
    preserves it.
    """

    def __init__(self, exercises: Iterable[ExerciseRef]):
        self._exercises: tuple[ExerciseRef, ...] = tuple(exercises)
        self._by_id: dict[str, ExerciseRef] = {}
        for ex in self._exercises:
            self._by_id.setdefault(ex.exercise_id, ex)

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self):
        return iter(self._exercises)

    def get_all(self) -> tuple[ExerciseRef, ...]:
        """Return every exercise in catalog order."""
        return self._exercises

    def get_by_id(self, exercise_id: str) -> ExerciseRef | None:
        """Return the exercise with the given id, or None."""
        return self._by_id.get(exercise_id)

    def get_by_ids(self, exercise_ids: Iterable[str]) -> list[ExerciseRef]:
        """Return exercises whose id is listed, in catalog order."""
        wanted = set(exercise_ids)
        return [ex for ex in self._exercises if ex.exercise_id in wanted]

    def filter(
        self,
        target_muscles: Sequence[str] | None = None,
        equipments: Sequence[str] | None = None,
        exclude_equipments: Sequence[str] | None = None,
        body_parts: Sequence[str] | None = None,
        search_term: str | None = None,
    ) -> list[ExerciseRef]:
        """
        Return every exercise matching the filters, in catalog order.

        Categories combine with AND; values inside one category with OR.
        Exclusion is applied after the inclusion filters.
        """
        results = [
            ex
            for ex in self._exercises
            if _matches_any(ex.target_muscles, target_muscles)
            and _matches_any(ex.body_parts, body_parts)
            and _matches_any(ex.equipments, equipments)
        ]

        if exclude_equipments:
            excluded = set(exclude_equipments)
            results = [ex for ex in results if excluded.isdisjoint(ex.equipments)]

        if search_term:
            needle = search_term.lower()
            results = [ex for ex in results if needle in ex.name.lower()]

        return results

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
        Filter and paginate the catalog.

        Args:
            target_muscles: Match exercises targeting any of these muscles
            equipments: Match exercises using any of these equipment tags
            exclude_equipments: Drop exercises using any of these tags
            body_parts: Match exercises for any of these body parts
            search_term: Case-insensitive substring of the exercise name
            limit: Page size; None or 0 means DEFAULT_PAGE_SIZE
            offset: Number of matches to skip (default 0)

        Returns:
            SearchResult with the page, total match count and has_more flag

        Raises:
            ValueError: If limit or offset is negative
        """
        limit = limit or DEFAULT_PAGE_SIZE
        offset = 0 if offset is None else offset
        if limit < 0 or offset < 0:
            raise ValueError("limit and offset must be non-negative")

        filtered = self.filter(
            target_muscles=target_muscles,
            equipments=equipments,
            exclude_equipments=exclude_equipments,
            body_parts=body_parts,
            search_term=search_term,
        )
        total = len(filtered)
        return SearchResult(
            exercises=tuple(filtered[offset:offset + limit]),
            total=total,
            has_more=offset + limit < total,
        )

    def by_muscle_groups(
        self,
        muscle_groups: Sequence[str],
        equipments: Sequence[str] | None = None,
        exclude_equipments: Sequence[str] | None = None,
        limit: int = DEFAULT_MUSCLE_GROUP_LIMIT,
    ) -> dict[str, list[ExerciseRef]]:
        """Return {muscle: first ``limit`` matching exercises} for each muscle."""
        return {
            muscle: list(
                self.search(
                    target_muscles=[muscle],
                    equipments=equipments,
                    exclude_equipments=exclude_equipments,
                    limit=limit,
                ).exercises
            )
            for muscle in muscle_groups
        }

    def by_body_part(
        self,
        body_part: str,
        equipments: Sequence[str] | None = None,
        exclude_equipments: Sequence[str] | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> list[ExerciseRef]:
        """Return exercises for one body part."""
        return list(
            self.search(
                body_parts=[body_part],
                equipments=equipments,
                exclude_equipments=exclude_equipments,
                limit=limit,
            ).exercises
        )

    def by_equipment(
        self,
        equipment: str,
        target_muscles: Sequence[str] | None = None,
        body_parts: Sequence[str] | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> list[ExerciseRef]:
        """Return exercises that can be done with one piece of equipment."""
        return list(
            self.search(
                equipments=[equipment],
                target_muscles=target_muscles,
                body_parts=body_parts,
                limit=limit,
            ).exercises
        )

    def compound_exercises(self, min_muscles: int = 2, **filters) -> list[ExerciseRef]:
        """Return exercises working at least ``min_muscles`` muscles (target + secondary)."""
        return [ex for ex in self.filter(**filters) if ex.muscle_count >= min_muscles]

    def isolation_exercises(self, target_muscle: str, **filters) -> list[ExerciseRef]:
        """Return exercises for ``target_muscle`` with at most one secondary muscle."""
        filters["target_muscles"] = [target_muscle]
        return [ex for ex in self.filter(**filters) if len(ex.secondary_muscles) <= 1]

    def metadata(self) -> dict:
        """Summarise the catalog: size and the sorted tags in use."""
        muscles: set[str] = set()
        parts: set[str] = set()
        equipment: set[str] = set()
        for ex in self._exercises:
            muscles.update(ex.target_muscles)
            parts.update(ex.body_parts)
            equipment.update(ex.equipments)
        return {
            "total_exercises": len(self._exercises),
            "target_muscles": sorted(muscles),
            "body_parts": sorted(parts),
            "equipments": sorted(equipment),
        }


def complementary_muscles(muscle: str) -> list[str]:
    """Return opposing muscle groups (e.g. biceps → triceps), or [] if none."""
    return list(COMPLEMENTARY_MUSCLES.get(muscle, ()))


@lru_cache(maxsize=1)
def get_catalog() -> ExerciseCatalog:
    """
    Return the default catalog loaded from YAML.

    Raises:
        RuntimeError: If no exercise definitions could be loaded
    """
    from .loader import load_exercises_from_yaml

    loaded = load_exercises_from_yaml()
    if not loaded:
        raise RuntimeError(
            "routine-scheduler: no exercise definitions could be loaded from YAML. "
            "Check that src/routine_scheduler/exercises/*.yaml files are present and valid."
        )
    return ExerciseCatalog(loaded)
