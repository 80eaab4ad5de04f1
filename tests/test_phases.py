import sqlite3
from datetime import date

import pytest

from jardin.phases import PhaseExistsError, create_phase


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE tasks (id INTEGER PRIMARY KEY, designation TEXT, "
        "commentaires TEXT, depart TEXT, fin TEXT, duree INTEGER, precedent INTEGER, "
        "avancement INTEGER, type INTEGER, contrainte_date INTEGER, "
        "phase_parent INTEGER, id_culture INTEGER)"
    )
    yield conn
    conn.close()


def _row(conn, task_id):
    return conn.execute(
        "SELECT designation, commentaires, depart, fin, duree, precedent, avancement, "
        "type, contrainte_date, phase_parent, id_culture FROM tasks WHERE id = ?",
        (task_id,),
    ).fetchone()


def test_first_phase_in_empty_planner(connection):
    task_id = create_phase(connection, 7, "Tomatoes", date(2024, 3, 5))
    row = _row(connection, task_id)
    assert row == ("Tomatoes", "", "05-03-2024", "05-03-2024", 1, 0, 0, 1, 0, 1, 7)


def test_next_phase_parent_follows_largest_id(connection):
    first = create_phase(connection, 1, "Carrots", date(2024, 4, 1))
    second = create_phase(connection, 2, "Leeks", date(2024, 4, 2))
    assert second > first
    (parent,) = connection.execute(
        "SELECT phase_parent FROM tasks WHERE id = ?", (second,)
    ).fetchone()
    assert parent == first + 1


def test_parent_uses_max_id_with_gaps(connection):
    connection.execute("INSERT INTO tasks (id, id_culture) VALUES (10, 99)")
    connection.commit()
    task_id = create_phase(connection, 3, "Beans", date(2024, 5, 20))
    (parent,) = connection.execute(
        "SELECT phase_parent FROM tasks WHERE id = ?", (task_id,)
    ).fetchone()
    assert parent == 11


def test_duplicate_phase_raises(connection):
    create_phase(connection, 4, "Onions", date(2024, 2, 1))
    with pytest.raises(PhaseExistsError) as info:
        create_phase(connection, 4, "Onions again", date(2024, 2, 2))
    assert info.value.crop_id == 4
    (count,) = connection.execute("SELECT COUNT(*) FROM tasks").fetchone()
    assert count == 1


def test_no_crop_selected_raises(connection):
    with pytest.raises(ValueError):
        create_phase(connection, 0, "Nothing", date(2024, 1, 1))
    (count,) = connection.execute("SELECT COUNT(*) FROM tasks").fetchone()
    assert count == 0


def test_designation_with_apostrophe_is_stored(connection):
    task_id = create_phase(connection, 5, "Pois d'hiver", date(2024, 11, 30))
    row = _row(connection, task_id)
    assert row[0] == "Pois d'hiver"
    assert row[2] == row[3] == "30-11-2024"