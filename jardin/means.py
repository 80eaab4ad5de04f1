"""Means (equipment, materials) and their attachment to resources."""

from __future__ import annotations

import sqlite3


def list_means(connection: sqlite3.Connection) -> list[tuple[int, str]]:
    """Return every mean as (id, designation), in id order."""
    rows = connection.execute("SELECT id, designation FROM moyens ORDER BY id ASC")
    return [(row[0], row[1]) for row in rows]


def attach_mean(
    connection: sqlite3.Connection, resource_id: int, mean_id: int, designation: str
) -> int:
    """Link a mean to a resource and return the id of the new link."""
    with connection:
        cursor = connection.execute(
            "INSERT INTO liste_moyens (designation, id_ressource, id_moyen) "
            "VALUES (?, ?, ?)",
            (designation, resource_id, mean_id),
        )
    return cursor.lastrowid