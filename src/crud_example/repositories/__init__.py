"""
Repository layer initialization module.

The repository pattern keeps the in-memory collections behind a small interface,
so the services only deal with validation and DTO projection.

Usage:
    from crud_example.repositories import CountryRepository, PersonRepository
"""

from .base_repository import BaseRepository
from .country_repository import CountryRepository
from .person_repository import PersonRepository

__all__ = [
    "BaseRepository",
    "CountryRepository",
    "PersonRepository",
]
