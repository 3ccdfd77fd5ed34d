"""
Country repository for country-specific lookups on top of the generic BaseRepository.
"""

from typing import Iterable
import logging

from crud_example.models.country import Country
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class CountryRepository(BaseRepository[Country]):
    """
    Repository for Country entities.

    Inherits the generic CRUD operations and adds name-based lookups.
    """

    def __init__(self, entities: Iterable[Country] | None = None):
        super().__init__(Country, "country_id", entities)

    def find_by_name(self, country_name: str) -> Country | None:
        """
        Find a country by name.

        The match ignores surrounding whitespace and letter case, so "india",
        " India " and "INDIA" all find the same country.
        """
        wanted = country_name.strip().casefold()
        country = next(
            (c for c in self._entities if c.country_name and c.country_name.strip().casefold() == wanted),
            None,
        )
        logger.debug(f"Country lookup by name {country_name!r}: {'found' if country else 'not found'}")
        return country

    def name_exists(self, country_name: str) -> bool:
        return self.find_by_name(country_name) is not None
