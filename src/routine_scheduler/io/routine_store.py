"""
File-based storage for routines and completed workouts.

Handles reading, writing, and managing the local data directory:

- routines.json      all saved routines plus the active routine id
- completions.jsonl  one completed workout per line, append-only

RoutineStore serves a single local user; ``user_id`` arguments on the
collaborator methods exist to satisfy the RoutinePersistence and
CompletionHistory protocols and are ignored.
"""

import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.catalog.loader import get_user_home
from ..core.models import CompletionRecord, RoutineDay
from ..core.routines import validate_routine_days
from ..core.scheduler import latest_completion
from .serializers import (
    ValidationError,
    completion_to_json_line,
    dict_to_completion,
    dict_to_routine_day,
    routine_day_to_dict,
)

LOCAL_USER_ID = "local"


def get_default_data_dir() -> Path:
    """Return the default data directory ($ROUTINE_SCHEDULER_HOME or ~/.routine-scheduler)."""
    return get_user_home()


class RoutineStore:
    """
    Manages routines (JSON) and completion history (JSONL) on disk.
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding routines.json and completions.jsonl
        """
        self.data_dir = Path(data_dir)
        self.routines_path = self.data_dir / "routines.json"
        self.completions_path = self.data_dir / "completions.jsonl"

    # ------------------------------------------------------------------
    # Routines
    # ------------------------------------------------------------------

    def _load_routines_file(self) -> dict[str, Any]:
        if not self.routines_path.exists():
            return {"active_routine_id": None, "routines": {}}
        try:
            with open(self.routines_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Corrupt routines file {self.routines_path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("routines", {}), dict):
            raise ValidationError(
                f"Corrupt routines file {self.routines_path}: expected a JSON object"
            )
        data.setdefault("active_routine_id", None)
        data.setdefault("routines", {})
        return data

    def _write_routines_file(self, data: dict[str, Any]) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.routines_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def save_routine(
        self,
        name: str,
        days: list[RoutineDay],
        activate: bool = True,
        meta: dict[str, Any] | None = None,
    ) -> str:
        """
        Store a new routine.

        Args:
            name: Routine name
            days: Routine days (day_order must be 1..N)
            activate: Make it the active routine
            meta: Extra fields kept with the routine (e.g. archetype)

        Returns:
            The new routine id

        Raises:
            ValidationError: If the routine is invalid
        """
        if not name or not name.strip():
            raise ValidationError("Routine name must be non-empty")
        try:
            validate_routine_days(days)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        routine_id = uuid.uuid4().hex
        data = self._load_routines_file()
        data["routines"][routine_id] = {
            "name": name.strip(),
            "created_at": datetime.now().isoformat(timespec="seconds"),
            "days": [
                routine_day_to_dict(d) for d in sorted(days, key=lambda d: d.day_order)
            ],
            **(meta or {}),
        }
        if activate or data["active_routine_id"] is None:
            data["active_routine_id"] = routine_id
        self._write_routines_file(data)
        return routine_id

    def list_routines(self) -> list[dict[str, Any]]:
        """Return summaries of all routines in creation order."""
        data = self._load_routines_file()
        active = data["active_routine_id"]
        return [
            {
                "id": rid,
                "name": r.get("name", ""),
                "created_at": r.get("created_at", ""),
                "days": len(r.get("days", [])),
                "active": rid == active,
            }
            for rid, r in data["routines"].items()
        ]

    def get_active_routine_id(self) -> str | None:
        """Return the active routine id, or None."""
        return self._load_routines_file()["active_routine_id"]

    def set_active_routine(self, routine_id: str) -> None:
        """
        Mark a routine as active.

        Raises:
            KeyError: If the routine does not exist
        """
        data = self._load_routines_file()
        if routine_id not in data["routines"]:
            raise KeyError(f"Routine not found: {routine_id}")
        data["active_routine_id"] = routine_id
        self._write_routines_file(data)

    def load_routine(self, routine_id: str) -> tuple[str, list[RoutineDay]]:
        """
        Load a routine's name and days (ordered by day_order).

        Raises:
            KeyError: If the routine does not exist
            ValidationError: If stored day data is invalid
        """
        data = self._load_routines_file()
        if routine_id not in data["routines"]:
            raise KeyError(f"Routine not found: {routine_id}")
        raw = data["routines"][routine_id]
        days = [dict_to_routine_day(d) for d in raw.get("days", [])]
        days.sort(key=lambda d: d.day_order)
        return raw.get("name", ""), days

    def get_active_routine_days(self, user_id: str = LOCAL_USER_ID) -> list[RoutineDay] | None:
        """Return the active routine's days, or None if no routine is active."""
        routine_id = self.get_active_routine_id()
        if routine_id is None:
            return None
        _, days = self.load_routine(routine_id)
        return days

    # ------------------------------------------------------------------
    # Completions
    # ------------------------------------------------------------------

    def append_completion(self, record: CompletionRecord) -> None:
        """Append a completed workout to the history file."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.completions_path, "a", encoding="utf-8") as f:
            f.write(completion_to_json_line(record) + "\n")

    def load_completions(self, routine_id: str | None = None) -> list[CompletionRecord]:
        """
        Load completed workouts, sorted by completed_at.

        Args:
            routine_id: Only return completions for this routine

        Raises:
            ValidationError: If a line cannot be parsed
        """
        if not self.completions_path.exists():
            return []

        records: list[CompletionRecord] = []
        with open(self.completions_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError as e:
                    raise ValidationError(f"Invalid JSON on line {line_num}: {e}") from e
                record = dict_to_completion(data)
                if routine_id is None or record.routine_id == routine_id:
                    records.append(record)

        records.sort(key=lambda r: r.completed_datetime)
        return records

    def get_last_completion(
        self,
        user_id: str = LOCAL_USER_ID,
        routine_id: str | None = None,
    ) -> CompletionRecord | None:
        """Return the most recent completion for a routine (default: the active one)."""
        if routine_id is None:
            routine_id = self.get_active_routine_id()
            if routine_id is None:
                return None
        return latest_completion(self.load_completions(routine_id), routine_id)
