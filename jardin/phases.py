"""Creating the Gantt phase that stands for a crop in the planner."""

from __future__ import annotations

import sqlite3
from datetime import date

_INSERT = (
    "INSERT INTO tasks (designation, commentaires, depart, fin, duree, precedent, "
    "avancement, type, contrainte_date, phase_parent, id_culture) "
    "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)"
)

_DURATION = 1
_PREVIOUS = 0
_PROGRESS = 0
_PHASE_TYPE = 1
_DATE_CONSTRAINT = 0


class PhaseExistsError(Exception):
    """Raised when the crop already has a phase in the planner."""

    def __init__(self, crop_id: int) -> None:
        super().__init__(f"a phase already exists for crop {crop_id}")
        self.crop_id = crop_id


def _planner_date(value: date) -> str:
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def create_phase(
    connection: sqlite3.Connection, crop_id: int, designation: str, start: date
) -> int:
    """Add a one-day phase for a crop to the planner and return its task id.

    The phase is its own parent: its parent number is 1 in an empty
    planner and one more than the largest task id otherwise. Raises
    ValueError when no crop is given and PhaseExistsError when the crop
    already has a task.
    """
    if not crop_id:
        raise ValueError("a crop must be selected")

    (count,) = connection.execute("SELECT COUNT(*) FROM tasks").fetchone()
    if count > 0:
        existing = connection.execute(
            "SELECT 1 FROM tasks WHERE id_culture = ? LIMIT 1", (crop_id,)
        ).fetchone()
        if existing is not None:
            raise PhaseExistsError(crop_id)
        (max_id,) = connection.execute("SELECT MAX(id) FROM tasks").fetchone()
        parent = int(max_id or 0) + 1
    else:
        parent = 1

    day = _planner_date(start)
    with connection:
        cursor = connection.execute(
            _INSERT,
            (
                designation,
                "",
                day,
                day,
                _DURATION,
                _PREVIOUS,
                _PROGRESS,
                _PHASE_TYPE,
                _DATE_CONSTRAINT,
                parent,
                crop_id,
            ),
        )
    return cursor.lastrowid