import uuid

import pytest

from crud_example.models.country import Country
from crud_example.repositories.country_repository import CountryRepository
from crud_example.repositories.person_repository import PersonRepository
from crud_example.services.seed_data import mock_countries, mock_persons


@pytest.fixture
def country_repository() -> CountryRepository:
    return CountryRepository(mock_countries())


class TestCountryRepository:

    @pytest.mark.parametrize("name", ["India", "india", "  INDIA  "])
    def test_find_by_name_ignores_case_and_whitespace(self, country_repository, name):
        found = country_repository.find_by_name(name)

        assert found is not None
        assert found.country_name == "India"

    def test_find_by_name_unknown(self, country_repository):
        assert country_repository.find_by_name("Atlantis") is None

    def test_find_by_name_skips_countries_without_name(self):
        repository = CountryRepository([Country(uuid.uuid4(), None)])

        assert repository.find_by_name("") is None

    def test_name_exists(self, country_repository):
        assert country_repository.name_exists("uk")
        assert not country_repository.name_exists("France")

    def test_starts_empty(self):
        assert len(CountryRepository()) == 0


class TestPersonRepository:

    def test_seeded_persons_have_unique_ids(self):
        persons = mock_persons()

        repository = PersonRepository(persons)

        assert len(repository) == len({p.person_id for p in persons})

    def test_mock_data_is_fresh_on_every_call(self):
        first = PersonRepository(mock_persons())
        first.delete(mock_persons()[0].person_id)

        assert len(PersonRepository(mock_persons())) == 10
