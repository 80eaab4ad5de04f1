"""Tasks done and observations made on a crop."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date

from jardin.crops import format_date, parse_date

_COLUMNS = "id, designation, date, type, commentaires, id_culture"


@dataclass
class Observation:
    """A task carried out, or an observation made, on a crop."""

    designation: str
    date: date
    task_type: int
    crop_id: int
    comments: str = ""
    id: int | None = None


class ObservationLog:
    """The observations recorded in a garden database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def task_type_names(self) -> list[str]:
        """Return the names of the task types, sorted."""
        rows = self.connection.execute(
            "SELECT designation FROM taches ORDER BY designation ASC"
        )
        return [row[0] for row in rows]

    def task_type_id(self, name: str) -> int:
        """Return the id of a task type by name; raise KeyError if unknown."""
        row = self.connection.execute(
            "SELECT id FROM taches WHERE designation = ?", (name,)
        ).fetchone()
        if row is None:
            raise KeyError(name)
        return row[0]

    @staticmethod
    def _from_row(row: tuple) -> Observation:
        obs_id, designation, when, task_type, comments, crop_id = row
        try:
            day = parse_date(when) if isinstance(when, str) else date.min
        except ValueError:
            day = date.min
        return Observation(
            designation=designation or "",
            date=day,
            task_type=task_type,
            crop_id=crop_id,
            comments=comments or "",
            id=obs_id,
        )

    def for_crop(self, crop_id: int) -> list[Observation]:
        """Return the observations of a crop, in id order."""
        rows = self.connection.execute(
            f"SELECT {_COLUMNS} FROM observations WHERE id_culture = ? ORDER BY id",
            (crop_id,),
        )
        return [self._from_row(row) for row in rows]

    @staticmethod
    def _values(observation: Observation) -> tuple:
        return (
            observation.designation,
            format_date(observation.date),
            observation.task_type,
            observation.comments,
            observation.crop_id,
        )

    def add(self, observation: Observation) -> int:
        """Record a new observation, set its id and return it."""
        with self.connection:
            cursor = self.connection.execute(
                "INSERT INTO observations (designation, date, type, commentaires, "
                "id_culture) VALUES (?, ?, ?, ?, ?)",
                self._values(observation),
            )
        observation.id = cursor.lastrowid
        return observation.id

    def update(self, observation: Observation) -> bool:
        """Save the changes of a recorded observation; return whether a row changed."""
        if observation.id is None:
            raise ValueError("an observation without id cannot be updated")
        with self.connection:
            cursor = self.connection.execute(
                "UPDATE observations SET designation = ?, date = ?, type = ?, "
                "commentaires = ?, id_culture = ? WHERE id = ?",
                (*self._values(observation), observation.id),
            )
        return cursor.rowcount > 0

    def delete(self, observation_id: int) -> bool:
        """Delete an observation; return whether a row was removed."""
        with self.connection:
            cursor = self.connection.execute(
                "DELETE FROM observations WHERE id = ?", (observation_id,)
            )
        return cursor.rowcount > 0