"""
Service layer for persons.

Besides plain CRUD this service implements the search and sort used by the persons
list screen. Country names are resolved through an injected `CountriesService`, which
is the seam the unit tests replace with a mock.
"""

from dataclasses import asdict
from typing import Any, Callable, Iterable
from uuid import UUID
import logging

from crud_example.exceptions.base import MissingRequestError, NotFoundError
from crud_example.models.person import Person
from crud_example.repositories.person_repository import PersonRepository
from crud_example.schemas.enums import SortOrderOptions
from crud_example.schemas.person import (
    PersonAddRequest,
    PersonResponse,
    PersonUpdateRequest,
    to_person_response,
)
from crud_example.services.countries_service import CountriesService
from crud_example.services.seed_data import mock_persons
from crud_example.validators.model_validators import validate_model

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------------------------------------
# Search / sort tables
# -------------------------------------------------------------------------------------------------

def _contains(value: str | None, needle: str) -> bool:
    return value is not None and needle in value.casefold()


def _fold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


# search_by -> predicate(person, casefolded search string)
SEARCH_MATCHERS: dict[str, Callable[[PersonResponse, str], bool]] = {
    "person_name": lambda p, needle: _contains(p.person_name, needle),
    "email": lambda p, needle: _contains(p.email, needle),
    "address": lambda p, needle: _contains(p.address, needle),
    # searching "by country" matches the country name, not the raw identifier
    "country_id": lambda p, needle: _contains(p.country, needle),
    "date_of_birth": lambda p, needle: (
        p.date_of_birth is not None and needle in p.date_of_birth.strftime("%d %B %Y").casefold()
    ),
    # equality: "male" must not match "Female"
    "gender": lambda p, needle: p.gender is not None and p.gender.casefold() == needle,
}

# sort_by -> key(person); a None key means "no value", those persons go last
SORT_KEYS: dict[str, Callable[[PersonResponse], Any]] = {
    "person_name": lambda p: _fold(p.person_name),
    "email": lambda p: _fold(p.email),
    "address": lambda p: _fold(p.address),
    "country": lambda p: _fold(p.country),
    "gender": lambda p: _fold(p.gender),
    "date_of_birth": lambda p: p.date_of_birth,
    "age": lambda p: p.age,
    "receive_news_letters": lambda p: p.receive_news_letters,
}


class PersonsService:
    """CRUD, search and sort operations for persons, backed by an in-memory PersonRepository."""

    def __init__(
        self,
        countries_service: CountriesService,
        repository: PersonRepository | None = None,
        *,
        initialize: bool = False,
    ):
        """
        Args:
            countries_service: used to resolve country names for the responses
            repository: storage to use; a new empty PersonRepository when omitted
            initialize: when True (and no repository is given), seed the mock persons
        """
        if repository is None:
            repository = PersonRepository(mock_persons() if initialize else None)
        self.countries_service = countries_service
        self.repository = repository

    def _to_response(self, person: Person) -> PersonResponse:
        country = self.countries_service.get_country_by_country_id(person.country_id)
        return to_person_response(person, country.country_name if country else None)

    # =================================================================================================================
    # Create
    # =================================================================================================================

    def add_person(self, person_add_request: PersonAddRequest | None) -> PersonResponse:
        """
        Add a person and return it with its generated identifier and resolved country name.

        Raises:
            MissingRequestError: if `person_add_request` is None
            InvalidInputError: if the name or email is missing, or the email is malformed
        """
        if person_add_request is None:
            raise MissingRequestError("Person add request can't be null", fields=["person_add_request"])

        validate_model(person_add_request)

        person = self.repository.add(person_add_request.to_person())
        logger.info(
            "persons.add.success",
            extra={"operation": "add_person", "person_id": str(person.person_id)},
        )
        return self._to_response(person)

    # =================================================================================================================
    # Read
    # =================================================================================================================

    def get_all_persons(self) -> list[PersonResponse]:
        return [self._to_response(p) for p in self.repository.get_all()]

    def get_person_by_person_id(self, person_id: UUID | None) -> PersonResponse | None:
        if person_id is None:
            return None
        person = self.repository.get_by_id(person_id)
        return self._to_response(person) if person else None

    def get_filtered_persons(self, search_by: str | None, search_string: str | None) -> list[PersonResponse]:
        """
        Return the persons whose `search_by` field matches `search_string`.

        Text fields match on a case-insensitive substring, gender on case-insensitive
        equality, date_of_birth on its "02 January 1993" rendering, and country_id on the
        country name. An empty `search_by`/`search_string` or an unknown `search_by`
        returns every person. Persons without a value in the searched field never match.
        """
        all_persons = self.get_all_persons()
        if not search_by or not search_string or not search_string.strip():
            return all_persons

        matcher = SEARCH_MATCHERS.get(search_by)
        if matcher is None:
            logger.info(
                "persons.filter.unknown_field",
                extra={"operation": "get_filtered_persons", "search_by": search_by},
            )
            return all_persons

        needle = search_string.strip().casefold()
        matching = [p for p in all_persons if matcher(p, needle)]
        logger.debug(f"Filtered persons by {search_by}: {len(matching)} of {len(all_persons)} matched")
        return matching

    def get_sorted_persons(
        self,
        all_persons: Iterable[PersonResponse],
        sort_by: str | None,
        sort_order: SortOrderOptions | str = SortOrderOptions.ASC,
    ) -> list[PersonResponse]:
        """
        Return a new list sorted by `sort_by` in `sort_order`.

        The input is never modified. Persons without a value for `sort_by` come last in
        both directions; an empty or unknown `sort_by` keeps the input order.

        Raises:
            ValueError: if `sort_order` is not "ASC" or "DESC"
        """
        persons = list(all_persons)
        sort_order = SortOrderOptions(sort_order)
        if not sort_by:
            return persons

        key = SORT_KEYS.get(sort_by)
        if key is None:
            logger.warning(f"Ignored invalid 'sort_by' field: '{sort_by}'")
            return persons

        present = [p for p in persons if key(p) is not None]
        missing = [p for p in persons if key(p) is None]
        present.sort(key=key, reverse=sort_order is SortOrderOptions.DESC)
        return present + missing

    # =================================================================================================================
    # Update
    # =================================================================================================================

    def update_person(self, person_update_request: PersonUpdateRequest | None) -> PersonResponse:
        """
        Replace every editable field of an existing person.

        Raises:
            MissingRequestError: if `person_update_request` is None
            InvalidInputError: if the id, name or email is missing, or the email is malformed
            NotFoundError: if no person has the given id
        """
        if person_update_request is None:
            raise MissingRequestError("Person update request can't be null", fields=["person_update_request"])

        validate_model(person_update_request)

        if not self.repository.exists(person_update_request.person_id):
            logger.info(
                "persons.update.not_found",
                extra={"operation": "update_person", "person_id": str(person_update_request.person_id)},
            )
            raise NotFoundError("Given person id doesn't exist", fields=["person_id"])

        changes = asdict(person_update_request.to_person())
        person_id = changes.pop("person_id")
        updated = self.repository.update(person_id, **changes)
        logger.info("persons.update.success", extra={"operation": "update_person", "person_id": str(person_id)})
        return self._to_response(updated)

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    def delete_person(self, person_id: UUID | None) -> bool:
        """
        Delete a person.

        Returns:
            True if the person was deleted, False if no person has that id

        Raises:
            MissingRequestError: if `person_id` is None
        """
        if person_id is None:
            raise MissingRequestError("Person ID can't be null", fields=["person_id"])

        deleted = self.repository.delete(person_id)
        if deleted:
            logger.info("persons.delete.success", extra={"operation": "delete_person", "person_id": str(person_id)})
        return deleted
