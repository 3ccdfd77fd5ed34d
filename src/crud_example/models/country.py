from dataclasses import dataclass
import uuid


@dataclass
class Country:
    """
    Domain model for a Country.

    Entities live only inside the repositories and services; callers always receive
    a `CountryResponse` DTO instead.
    """

    # Unique identifier for the country (primary key)
    country_id: uuid.UUID

    # Display name; unique across countries (case-insensitive)
    country_name: str | None = None

    def __repr__(self) -> str:
        return f"<Country(country_id={self.country_id!r}, country_name={self.country_name!r})>"
