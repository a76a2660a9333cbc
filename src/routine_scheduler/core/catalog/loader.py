"""
YAML → ExerciseRef loader.

Loads the exercise catalog from YAML files in the bundled
``src/routine_scheduler/exercises/`` directory.  Each file (e.g. chest.yaml)
holds an ``exercises:`` list of flat entries matching the ExerciseRef
schema.  Files are read in sorted filename order and entries in file
order; that sequence *is* the catalog order the planner depends on.

User overrides: place YAML files in ``~/.routine-scheduler/exercises/``
(or ``$ROUTINE_SCHEDULER_HOME/exercises/``).  An entry whose exercise_id
matches a bundled exercise is merged over it in place, so only changed
keys need to be listed.  Entries with a new exercise_id are appended
after the bundled catalog.

Usage (internal, called by registry.py):
    from .loader import load_exercises_from_yaml
    exercises = load_exercises_from_yaml()   # list, possibly empty
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml

from ..models import ExerciseRef

_REQUIRED_EXERCISE_FIELDS: frozenset[str] = frozenset(
    {
        "exercise_id",
        "name",
        "target_muscles",
        "equipments",
    }
)

_OPTIONAL_LIST_FIELDS: tuple[str, ...] = (
    "body_parts",
    "secondary_muscles",
    "instructions",
)


def exercise_from_dict(d: dict) -> ExerciseRef:
    """Convert a raw dict (from YAML) to an ExerciseRef.

    Raises ValueError if any required field is absent or a tag is unknown.
    """
    missing = _REQUIRED_EXERCISE_FIELDS - set(d)
    if missing:
        raise ValueError(f"ExerciseRef missing fields: {sorted(missing)}")

    optional = {k: [str(v) for v in d.get(k) or []] for k in _OPTIONAL_LIST_FIELDS}

    return ExerciseRef(
        exercise_id=str(d["exercise_id"]),
        name=str(d["name"]),
        target_muscles=[str(m) for m in d["target_muscles"] or []],
        equipments=[str(e) for e in d["equipments"] or []],
        **optional,
    )


def _load_yaml_entries(path: Path) -> list[dict]:
    """Return the ``exercises`` list of one YAML file.

    Unreadable files and malformed documents are reported and skipped.
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"routine-scheduler: cannot read {path}: {exc}", stacklevel=3)
        return []

    if data is None:
        return []
    entries = data.get("exercises") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        warnings.warn(
            f"routine-scheduler: {path} has no 'exercises' list; skipped",
            stacklevel=3,
        )
        return []
    return [e for e in entries if isinstance(e, dict)]


def get_bundled_exercises_dir() -> Path | None:
    """Return path to the bundled exercises/ data directory, or None if not found."""
    # loader.py lives at src/routine_scheduler/core/catalog/loader.py
    # three levels up → src/routine_scheduler/
    candidate = Path(__file__).parent.parent.parent / "exercises"
    return candidate if candidate.is_dir() else None


def get_user_home() -> Path:
    """Return the routine-scheduler home directory (may not exist yet)."""
    override = os.environ.get("ROUTINE_SCHEDULER_HOME")
    if override:
        return Path(override).expanduser()
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / ".routine-scheduler"


def get_user_exercises_dir() -> Path | None:
    """Return the user's exercises/ override directory if it exists, else None."""
    p = get_user_home() / "exercises"
    return p if p.is_dir() else None


def _collect_raw(directory: Path | None) -> list[dict]:
    if directory is None:
        return []
    raw: list[dict] = []
    for p in sorted(directory.glob("*.yaml")):
        raw.extend(_load_yaml_entries(p))
    return raw


def load_exercises_from_yaml(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> list[ExerciseRef]:
    """Return the catalog as an ordered list of ExerciseRef.

    Args:
        bundled_dir: Directory of bundled YAML files (default: package data)
        user_dir: Directory of user override files (default: user home)

    Invalid entries are skipped with a warning; duplicate ids within the
    bundled files keep the first occurrence.
    """
    if bundled_dir is None:
        bundled_dir = get_bundled_exercises_dir()
    if user_dir is None:
        user_dir = get_user_exercises_dir()

    merged: dict[str, dict] = {}
    for entry in _collect_raw(bundled_dir):
        ex_id = str(entry.get("exercise_id", ""))
        if ex_id in merged:
            warnings.warn(
                f"routine-scheduler: duplicate exercise_id {ex_id!r} ignored",
                stacklevel=2,
            )
            continue
        merged[ex_id] = dict(entry)

    for entry in _collect_raw(user_dir):
        ex_id = str(entry.get("exercise_id", ""))
        if ex_id in merged:
            merged[ex_id] = {**merged[ex_id], **entry}
        else:
            merged[ex_id] = dict(entry)

    result: list[ExerciseRef] = []
    for ex_id, raw in merged.items():
        try:
            result.append(exercise_from_dict(raw))
        except (TypeError, ValueError) as exc:
            warnings.warn(
                f"routine-scheduler: skipping exercise {ex_id!r}: {exc}",
                stacklevel=2,
            )
    return result
