"""
Service layer for countries.

Validates incoming `CountryAddRequest`s, keeps country names unique and projects the
stored `Country` entities to `CountryResponse` DTOs.
"""

from uuid import UUID
import logging

from crud_example.exceptions.base import DuplicateError, MissingRequestError
from crud_example.repositories.country_repository import CountryRepository
from crud_example.schemas.country import CountryAddRequest, CountryResponse, to_country_response
from crud_example.services.seed_data import mock_countries
from crud_example.validators.model_validators import validate_model

logger = logging.getLogger(__name__)


class CountriesService:
    """CRUD operations for countries, backed by an in-memory CountryRepository."""

    def __init__(self, repository: CountryRepository | None = None, *, initialize: bool = False):
        """
        Args:
            repository: storage to use; a new empty CountryRepository when omitted
            initialize: when True (and no repository is given), seed the mock countries
        """
        if repository is None:
            repository = CountryRepository(mock_countries() if initialize else None)
        self.repository = repository

    def add_country(self, country_add_request: CountryAddRequest | None) -> CountryResponse:
        """
        Add a country and return it with its generated identifier.

        Raises:
            MissingRequestError: if `country_add_request` is None
            InvalidInputError: if the country name is missing or blank
            DuplicateError: if a country with the same name already exists
        """
        if country_add_request is None:
            raise MissingRequestError("Country add request can't be null", fields=["country_add_request"])

        validate_model(country_add_request)

        if self.repository.name_exists(country_add_request.country_name):
            logger.info(
                "countries.add.duplicate_name",
                extra={"operation": "add_country", "conflict_fields": ["country_name"]},
            )
            raise DuplicateError("Given country name already exists", fields=["country_name"])

        country = self.repository.add(country_add_request.to_country())
        logger.info(
            "countries.add.success",
            extra={"operation": "add_country", "country_id": str(country.country_id)},
        )
        return to_country_response(country)

    def get_all_countries(self) -> list[CountryResponse]:
        return [to_country_response(c) for c in self.repository.get_all()]

    def get_country_by_country_id(self, country_id: UUID | None) -> CountryResponse | None:
        """Return the matching country, or None for a None/unknown identifier."""
        if country_id is None:
            return None
        country = self.repository.get_by_id(country_id)
        return to_country_response(country) if country else None
