from functools import lru_cache

from crud_example.config.settings import get_settings
from crud_example.services.countries_service import CountriesService
from crud_example.services.persons_service import PersonsService


# One instance per process: the in-memory data lives inside the services,
# so every request has to see the same objects.

@lru_cache
def get_countries_service() -> CountriesService:
    return CountriesService(initialize=get_settings().SEED_MOCK_DATA)


@lru_cache
def get_persons_service() -> PersonsService:
    return PersonsService(get_countries_service(), initialize=get_settings().SEED_MOCK_DATA)
