"""Running SQL scripts against SQLite and dumping a database as SQL."""

from __future__ import annotations

import re
import sqlite3
from dataclasses import dataclass, field

_NOISE = re.compile(r"/\*[\s\S]*?\*/|^--.*\n|\t|\n", re.IGNORECASE | re.MULTILINE)
_BEGIN = re.compile(r"\bbegin.transaction.*", re.IGNORECASE)
_COMMIT = re.compile(r"\bcommit.*", re.IGNORECASE)


@dataclass
class ScriptReport:
    """Outcome of running a script: statements run and the failures met."""

    executed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors


def quote_text(text: str) -> str:
    """Escape apostrophes for use inside a single-quoted SQL literal."""
    return text.replace("'", "''")


def strip_comments(script: str) -> str:
    """Replace comments, tabs and newlines with spaces and trim the result."""
    return _NOISE.sub(" ", script).strip()


def split_statements(script: str) -> list[str]:
    """Clean a script and split it into its non-empty statements."""
    cleaned = strip_comments(script)
    return [part.strip() for part in cleaned.split(";") if part.strip()]


def _begin(connection: sqlite3.Connection) -> None:
    if not connection.in_transaction:
        connection.execute("BEGIN")


def _commit(connection: sqlite3.Connection) -> None:
    if connection.in_transaction:
        connection.execute("COMMIT")


def _rollback(connection: sqlite3.Connection) -> None:
    if connection.in_transaction:
        connection.execute("ROLLBACK")


def run_script(connection: sqlite3.Connection, script: str) -> ScriptReport:
    """Execute every statement of a script, honouring its own transactions.

    Unless the script opens with BEGIN TRANSACTION it is wrapped in one.
    A failing statement rolls back the open transaction and is recorded in
    the report; the remaining statements are still run.
    """
    report = ScriptReport()
    statements = split_statements(script)
    if not statements:
        return report

    saved_isolation = connection.isolation_level
    connection.isolation_level = None
    try:
        started_with_transaction = bool(_BEGIN.search(statements[0]))
        if not started_with_transaction:
            _begin(connection)
        for statement in statements:
            if _BEGIN.search(statement):
                _begin(connection)
            elif _COMMIT.search(statement):
                _commit(connection)
            else:
                try:
                    connection.execute(statement)
                except sqlite3.Error as exc:
                    _rollback(connection)
                    report.errors.append((statement, str(exc)))
                else:
                    report.executed += 1
        if not started_with_transaction:
            _commit(connection)
    finally:
        connection.isolation_level = saved_isolation
    return report


def _render_value(value: object) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return "'" + quote_text(value) + "'"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "X'" + bytes(value).hex() + "'"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _schema_line(sql: str) -> str:
    return sql.replace('"', "`").replace("\n", "").replace("\t", " ") + ";\n"


def export_sql(connection: sqlite3.Connection) -> str:
    """Return the schema and data of a database as a script of SQL queries."""
    parts = ["BEGIN TRANSACTION;\n"]
    tables: list[str] = []
    schema = connection.execute(
        "SELECT type, name, sql FROM sqlite_master ORDER BY rowid"
    ).fetchall()
    for kind, name, sql in schema:
        if name.startswith("sqlite_") or sql is None:
            continue
        if kind == "table":
            tables.append(name)
        parts.append(_schema_line(sql))

    for table in tables:
        cursor = connection.execute(f"SELECT * FROM [{table}]")
        columns = ",".join(description[0] for description in cursor.description)
        for row in cursor:
            values = " , ".join(_render_value(value) for value in row)
            parts.append(f"INSERT INTO `{table}` ({columns}) VALUES ({values});\n")
    parts.append("COMMIT;")
    return "".join(parts)