from dataclasses import dataclass
from datetime import date
import uuid


@dataclass
class Person:
    """
    Domain model for a Person.

    Represents a contact with personal details and an optional reference to a Country.
    """

    # Unique identifier for the person (primary key)
    person_id: uuid.UUID

    person_name: str | None = None

    # Stored trimmed and lowercased
    email: str | None = None

    date_of_birth: date | None = None

    # One of the GenderOptions values ("Male", "Female", "Other"), stored as plain text
    gender: str | None = None

    # Reference to Country.country_id (not enforced)
    country_id: uuid.UUID | None = None

    address: str | None = None

    receive_news_letters: bool = False

    def __repr__(self) -> str:
        # identifiers only: repr() ends up in log lines
        return f"<Person(person_id={self.person_id!r}, country_id={self.country_id!r})>"
