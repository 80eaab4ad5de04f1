"""Crops grown on the plots of the garden and the plants they use."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass
from datetime import date, datetime, timedelta

_DATE_FORMAT = "%Y.%m.%d"
_DATE_SHAPE = re.compile(r"\d{4}\.\d{2}\.\d{2}")

_CROP_COLUMNS = (
    "id, designation, parcelle, date_semis, type_plante, "
    "commentaires, etat, duree, date_recolte"
)


def parse_date(text: str) -> date:
    """Parse a date stored as 'yyyy.MM.dd'."""
    if not _DATE_SHAPE.fullmatch(text):
        raise ValueError(f"not a yyyy.MM.dd date: {text!r}")
    return datetime.strptime(text, _DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Format a date as 'yyyy.MM.dd'."""
    return f"{value.year:04d}.{value.month:02d}.{value.day:02d}"


def harvest_date(sowing: date, duration: int) -> date:
    """Return the expected harvest date: the sowing date plus a number of days."""
    return sowing + timedelta(days=duration)


def _optional_date(text: object) -> date | None:
    if not isinstance(text, str):
        return None
    try:
        return parse_date(text)
    except ValueError:
        return None


@dataclass
class Crop:
    """A crop sown on a plot."""

    designation: str
    plot: int
    plant_id: int
    sowing: date
    duration: int = 0
    comments: str = ""
    state: int = 1
    harvest: date | None = None
    id: int | None = None

    @property
    def expected_harvest(self) -> date:
        """The recorded harvest date, or the one the duration gives."""
        if self.harvest is not None:
            return self.harvest
        return harvest_date(self.sowing, self.duration)


@dataclass(frozen=True)
class PlantInfo:
    """What is known of a plant: its moon type, species and family."""

    plant_id: int
    moon_type: str = ""
    moon_designation: str = ""
    species: str = ""
    family: str = ""


class CropBook:
    """The crops recorded in a garden database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    @staticmethod
    def _crop_from_row(row: tuple) -> Crop:
        crop_id, designation, plot, sowing, plant, comments, state, duration, harvest = row
        return Crop(
            designation=designation or "",
            plot=plot,
            plant_id=plant,
            sowing=_optional_date(sowing) or date.min,
            duration=int(duration or 0),
            comments=comments or "",
            state=int(state or 1),
            harvest=_optional_date(harvest),
            id=crop_id,
        )

    def crops_for_plot(self, plot_id: int) -> list[Crop]:
        """Return the crops of a plot, in id order."""
        rows = self.connection.execute(
            f"SELECT {_CROP_COLUMNS} FROM cultures WHERE parcelle = ? ORDER BY id",
            (plot_id,),
        )
        return [self._crop_from_row(row) for row in rows]

    def get(self, crop_id: int) -> Crop:
        """Return one crop; raise KeyError if there is none with that id."""
        row = self.connection.execute(
            f"SELECT {_CROP_COLUMNS} FROM cultures WHERE id = ?", (crop_id,)
        ).fetchone()
        if row is None:
            raise KeyError(crop_id)
        return self._crop_from_row(row)

    def _values(self, crop: Crop) -> tuple:
        return (
            crop.designation,
            crop.plot,
            format_date(crop.sowing),
            crop.plant_id,
            crop.comments,
            crop.state,
            crop.duration,
            format_date(crop.expected_harvest),
        )

    def add(self, crop: Crop) -> int:
        """Record a new crop, set its id and return it."""
        with self.connection:
            cursor = self.connection.execute(
                "INSERT INTO cultures (designation, parcelle, date_semis, type_plante, "
                "commentaires, etat, duree, date_recolte) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                self._values(crop),
            )
        crop.id = cursor.lastrowid
        return crop.id

    def update(self, crop: Crop) -> bool:
        """Save the changes of a recorded crop; return whether a row changed."""
        if crop.id is None:
            raise ValueError("a crop without id cannot be updated")
        with self.connection:
            cursor = self.connection.execute(
                "UPDATE cultures SET designation = ?, parcelle = ?, date_semis = ?, "
                "type_plante = ?, commentaires = ?, etat = ?, duree = ?, "
                "date_recolte = ? WHERE id = ?",
                (*self._values(crop), crop.id),
            )
        return cursor.rowcount > 0

    def delete(self, crop_id: int) -> bool:
        """Delete a crop; return whether a row was removed."""
        with self.connection:
            cursor = self.connection.execute(
                "DELETE FROM cultures WHERE id = ?", (crop_id,)
            )
        return cursor.rowcount > 0

    def plant_names(self) -> list[str]:
        """Return the names of the plants, sorted."""
        rows = self.connection.execute(
            "SELECT designation FROM plantes ORDER BY designation ASC"
        )
        return [row[0] for row in rows]

    def plant_id(self, name: str) -> int:
        """Return the id of a plant by name; raise KeyError if unknown."""
        row = self.connection.execute(
            "SELECT id FROM plantes WHERE designation = ?", (name,)
        ).fetchone()
        if row is None:
            raise KeyError(name)
        return row[0]

    def _scalar(self, sql: str, key: object) -> object:
        if key is None:
            return None
        row = self.connection.execute(sql, (key,)).fetchone()
        return None if row is None else row[0]

    def plant_info(self, name: str) -> PlantInfo:
        """Return the moon type, species and family of a plant by name."""
        plant = self.plant_id(name)
        moon_type = self._scalar("SELECT type_lune FROM plantes WHERE id = ?", plant)
        moon_designation = self._scalar(
            "SELECT designation FROM lune WHERE id = ?", moon_type
        )
        species_id = self._scalar("SELECT espece FROM plantes WHERE id = ?", plant)
        species = self._scalar("SELECT designation FROM especes WHERE id = ?", species_id)
        family_id = self._scalar("SELECT famille FROM especes WHERE id = ?", species_id)
        family = self._scalar("SELECT designation FROM familles WHERE id = ?", family_id)
        return PlantInfo(
            plant_id=plant,
            moon_type="" if moon_type is None else str(moon_type),
            moon_designation=moon_designation or "",
            species=species or "",
            family=family or "",
        )