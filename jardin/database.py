"""The garden's SQLite database: opening, import/export and task types."""

from __future__ import annotations

import sqlite3
import xml.etree.ElementTree as ET
from os import PathLike
from pathlib import Path
from types import TracebackType

from jardin.sqlscript import ScriptReport, export_sql, run_script

StrPath = str | PathLike[str]


class GardenDatabase:
    """An open garden database with the operations of the settings dialog."""

    def __init__(self, path: StrPath) -> None:
        self.path = str(path)
        self.connection = sqlite3.connect(self.path)

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()

    def __enter__(self) -> GardenDatabase:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def import_script(self, script: str) -> ScriptReport:
        """Run a script of SQL queries against this database."""
        return run_script(self.connection, script)

    def import_file(self, path: StrPath) -> ScriptReport:
        """Read a .sql file and run its queries against this database."""
        script = Path(path).read_text(encoding="utf-8")
        return self.import_script(script)

    def export_script(self) -> str:
        """Return the schema and data of this database as SQL queries."""
        return export_sql(self.connection)

    def export_to_file(self, path: StrPath) -> None:
        """Write the schema and data of this database to a .sql file."""
        Path(path).write_text(self.export_script(), encoding="utf-8")

    def task_types(self) -> list[tuple[int, str]]:
        """Return the task types as (id, designation), sorted by designation."""
        rows = self.connection.execute(
            "SELECT id, designation FROM taches ORDER BY designation ASC"
        )
        return [(row[0], row[1]) for row in rows]

    def add_task_type(self, designation: str) -> int:
        """Record a new task type and return its id."""
        with self.connection:
            cursor = self.connection.execute(
                "INSERT INTO taches (designation) VALUES (?)", (designation,)
            )
        return cursor.lastrowid

    def rename_task_type(self, task_type_id: int, designation: str) -> bool:
        """Change a task type's designation; return whether a row changed."""
        with self.connection:
            cursor = self.connection.execute(
                "UPDATE taches SET designation = ? WHERE id = ?",
                (designation, task_type_id),
            )
        return cursor.rowcount > 0

    def delete_task_type(self, task_type_id: int) -> bool:
        """Delete a task type; return whether a row was removed."""
        with self.connection:
            cursor = self.connection.execute(
                "DELETE FROM taches WHERE id = ?", (task_type_id,)
            )
        return cursor.rowcount > 0


def write_database_reference(path: StrPath, database_file: str) -> None:
    """Write an XML file naming the SQLite database file to use."""
    root = ET.Element("root")
    base = ET.SubElement(root, "base")
    ET.SubElement(base, "file_base", {"file": database_file})
    text = '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(
        root, encoding="unicode"
    )
    Path(path).write_text(text, encoding="utf-8")


def read_database_reference(path: StrPath) -> str:
    """Return the database file named by an XML reference file."""
    try:
        root = ET.parse(str(path)).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"malformed reference file: {path}") from exc
    element = root.find("base/file_base")
    if element is None or "file" not in element.attrib:
        raise ValueError(f"no database file named in {path}")
    return element.attrib["file"]