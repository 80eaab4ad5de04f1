"""Resources and their attachment to tasks."""

from __future__ import annotations

import sqlite3


def list_resources(connection: sqlite3.Connection) -> list[tuple[int, str]]:
    """Return every resource as (id, designation), in id order."""
    rows = connection.execute(
        "SELECT id, designation FROM ressources ORDER BY id ASC"
    )
    return [(row[0], row[1]) for row in rows]


def attach_resource(
    connection: sqlite3.Connection, task_id: int, resource_id: int, designation: str
) -> int:
    """Link a resource to a task and return the id of the new link."""
    with connection:
        cursor = connection.execute(
            "INSERT INTO liste_ressources (designation, id_task, id_ressource) "
            "VALUES (?, ?, ?)",
            (designation, task_id, resource_id),
        )
    return cursor.lastrowid