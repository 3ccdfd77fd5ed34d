import uuid
from dataclasses import dataclass

import pytest

from crud_example.exceptions.base import DuplicateError, InvalidFieldError, NotFoundError, ServiceError
from crud_example.models.country import Country
from crud_example.models.person import Person
from crud_example.repositories.base_repository import BaseRepository


@pytest.fixture
def base_repo() -> BaseRepository[Country]:
    """An empty BaseRepository configured for the Country model."""
    return BaseRepository(Country, "country_id")


@pytest.fixture
def stored_countries(base_repo) -> list[Country]:
    countries = [Country(uuid.uuid4(), name) for name in ("Canada", "Australia", "Brazil")]
    for country in countries:
        base_repo.add(country)
    return countries


class TestBaseRepositoryInit:

    def test_unknown_id_field(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            BaseRepository(Country, "id")

        assert exc_info.value.fields == ["id"]

    def test_initial_entities_are_copied(self):
        """
        Behavior:
                - The repository keeps its own list; mutating the caller's list afterwards
                  does not change the repository contents.
        """
        # Arrange
        initial = [Country(uuid.uuid4(), "Peru")]

        # Act
        repo = BaseRepository(Country, "country_id", initial)
        initial.append(Country(uuid.uuid4(), "Chile"))

        # Assert
        assert len(repo) == 1


class TestBaseRepositoryAdd:

    def test_add_success(self, base_repo):
        # Arrange
        country = Country(uuid.uuid4(), "Kenya")

        # Act
        stored = base_repo.add(country)

        # Assert
        assert stored is country
        assert base_repo.get_by_id(country.country_id) is country
        assert len(base_repo) == 1

    def test_add_duplicate_id(self, base_repo):
        """
        Behavior:
                - Adding a second entity with an identifier already in use raises DuplicateError
                  and leaves the collection unchanged.
        """
        # Arrange
        country_id = uuid.uuid4()
        base_repo.add(Country(country_id, "Kenya"))

        # Act + Assert
        with pytest.raises(DuplicateError) as exc_info:
            base_repo.add(Country(country_id, "Ghana"))

        assert exc_info.value.fields == ["country_id"]
        assert len(base_repo) == 1

    def test_add_wrong_type(self, base_repo):
        with pytest.raises(TypeError):
            base_repo.add(Person(uuid.uuid4(), "Not a country"))


class TestBaseRepositoryRead:

    def test_get_by_id_none(self, base_repo, stored_countries):
        assert base_repo.get_by_id(None) is None

    def test_get_by_id_unknown(self, base_repo, stored_countries):
        assert base_repo.get_by_id(uuid.uuid4()) is None

    def test_get_by_id_or_raise(self, base_repo, stored_countries):
        assert base_repo.get_by_id_or_raise(stored_countries[0].country_id) is stored_countries[0]

        with pytest.raises(NotFoundError):
            base_repo.get_by_id_or_raise(uuid.uuid4())

    def test_find_by_field(self, base_repo, stored_countries):
        assert base_repo.find_by_field("country_name", "Brazil") is stored_countries[2]
        assert base_repo.find_by_field("country_name", "Narnia") is None

    def test_find_by_unknown_field(self, base_repo):
        with pytest.raises(InvalidFieldError):
            base_repo.find_by_field("population", 1)

    def test_get_all_keeps_insertion_order(self, base_repo, stored_countries):
        assert base_repo.get_all() == stored_countries

    def test_get_all_returns_a_copy(self, base_repo, stored_countries):
        result = base_repo.get_all()
        result.clear()

        assert len(base_repo) == len(stored_countries)

    def test_get_all_order_by(self, base_repo, stored_countries):
        names = [c.country_name for c in base_repo.get_all(order_by="country_name")]

        assert names == ["Australia", "Brazil", "Canada"]

    def test_get_all_invalid_order_by_is_ignored(self, base_repo, stored_countries):
        assert base_repo.get_all(order_by="population") == stored_countries

    def test_get_all_order_by_with_none_values_is_ignored(self, base_repo, stored_countries):
        base_repo.add(Country(uuid.uuid4(), None))

        result = base_repo.get_all(order_by="country_name")

        assert result[:3] == stored_countries

    @pytest.mark.parametrize(
        "offset, limit, expected",
        [(0, 2, [0, 1]), (1, None, [1, 2]), (2, 5, [2]), (5, 1, [])],
    )
    def test_get_all_pagination(self, base_repo, stored_countries, offset, limit, expected):
        assert base_repo.get_all(offset=offset, limit=limit) == [stored_countries[i] for i in expected]

    def test_find_all(self, base_repo, stored_countries):
        result = base_repo.find_all(lambda c: c.country_name.startswith(("A", "B")))

        assert result == stored_countries[1:]


class TestBaseRepositoryUpdate:

    def test_update_success(self, base_repo, stored_countries):
        """
        Behavior:
                - update() replaces the stored entity with a modified copy and returns it.

        Importance:
                - Entities handed out earlier are not mutated behind the caller's back.
        """
        # Arrange
        original = stored_countries[0]

        # Act
        updated = base_repo.update(original.country_id, country_name="Canada (CA)")

        # Assert
        assert updated.country_name == "Canada (CA)"
        assert base_repo.get_by_id(original.country_id) is updated
        assert original.country_name == "Canada"

    def test_update_unknown_entity(self, base_repo, stored_countries):
        assert base_repo.update(uuid.uuid4(), country_name="Nowhere") is None

    def test_update_invalid_field(self, base_repo, stored_countries):
        with pytest.raises(InvalidFieldError) as exc_info:
            base_repo.update(stored_countries[0].country_id, population=38_000_000)

        assert exc_info.value.fields == ["population"]

    def test_update_id_field_is_rejected(self, base_repo, stored_countries):
        with pytest.raises(InvalidFieldError):
            base_repo.update(stored_countries[0].country_id, country_id=uuid.uuid4())


class TestBaseRepositoryDelete:

    def test_delete_success(self, base_repo, stored_countries):
        target = stored_countries[1]

        assert base_repo.delete(target.country_id) is True
        assert not base_repo.exists(target.country_id)
        assert len(base_repo) == 2

    def test_delete_unknown(self, base_repo, stored_countries):
        assert base_repo.delete(uuid.uuid4()) is False
        assert len(base_repo) == 3


class TestBaseRepositoryCount:

    def test_count_all(self, base_repo, stored_countries):
        assert base_repo.count() == 3

    def test_count_with_filter(self, base_repo, stored_countries):
        assert base_repo.count(country_name="Brazil") == 1
        assert base_repo.count(country_name="Narnia") == 0

    def test_count_invalid_filter(self, base_repo):
        with pytest.raises(InvalidFieldError):
            base_repo.count(population=1)


def test_repository_errors_share_a_base_class():
    """Every repository/service error can be caught as ServiceError."""
    for error_type in (DuplicateError, InvalidFieldError, NotFoundError):
        assert issubclass(error_type, ServiceError)


def test_works_with_any_dataclass():
    @dataclass
    class Tag:
        tag_id: int
        label: str

    repo = BaseRepository(Tag, "tag_id", [Tag(1, "urgent"), Tag(2, "later")])

    assert repo.get_by_id(2).label == "later"
