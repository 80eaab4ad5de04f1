"""Contact details of suppliers and partners."""

from __future__ import annotations

import sqlite3
from dataclasses import astuple, dataclass, fields

_FIELDS = (
    "societe, commentaires, nom, prenom, adresse, code_postal, ville, pays, "
    "telephone_fixe, portable, fax, email"
)


@dataclass
class Contact:
    """The contact details of a company."""

    company: str
    comments: str = ""
    last_name: str = ""
    first_name: str = ""
    address: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""
    phone: str = ""
    mobile: str = ""
    fax: str = ""
    email: str = ""
    id: int | None = None

    def _values(self) -> tuple:
        return astuple(self)[:-1]


class ContactBook:
    """The contacts recorded in a garden database."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def companies(self) -> list[str]:
        """Return the company names, in id order."""
        rows = self.connection.execute("SELECT societe FROM coordonnees ORDER BY id ASC")
        return [row[0] for row in rows]

    def find_by_company(self, company: str) -> Contact:
        """Return the contact of a company; raise KeyError if there is none."""
        row = self.connection.execute(
            f"SELECT {_FIELDS}, id FROM coordonnees WHERE societe = ? ORDER BY id",
            (company,),
        ).fetchone()
        if row is None:
            raise KeyError(company)
        values = [("" if value is None else str(value)) for value in row[:-1]]
        return Contact(*values, id=row[-1])

    def save(self, contact: Contact) -> int:
        """Insert a new contact or update a recorded one; return its id.

        Raises KeyError when updating a contact whose id is not recorded.
        """
        values = contact._values()
        with self.connection:
            if contact.id is None:
                placeholders = ", ".join("?" for _ in values)
                cursor = self.connection.execute(
                    f"INSERT INTO coordonnees ({_FIELDS}) VALUES ({placeholders})",
                    values,
                )
                contact.id = cursor.lastrowid
            else:
                assignments = ", ".join(
                    f"{column.strip()} = ?" for column in _FIELDS.split(",")
                )
                cursor = self.connection.execute(
                    f"UPDATE coordonnees SET {assignments} WHERE id = ?",
                    (*values, contact.id),
                )
                if cursor.rowcount == 0:
                    raise KeyError(contact.id)
        return contact.id


assert len(fields(Contact)) - 1 == len(_FIELDS.split(","))