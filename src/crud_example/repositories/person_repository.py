"""
Person repository built on the generic BaseRepository.
"""

from typing import Iterable

from crud_example.models.person import Person
from .base_repository import BaseRepository


class PersonRepository(BaseRepository[Person]):
    """Repository for Person entities."""

    def __init__(self, entities: Iterable[Person] | None = None):
        super().__init__(Person, "person_id", entities)
