"""
Country endpoints for API v1.

Countries can be listed, fetched one at a time and added. They are referenced by
persons and shown by name in the persons list.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from crud_example.core.dependencies import get_countries_service
from crud_example.exceptions.base import NotFoundError
from crud_example.schemas.country import CountryAddRequest, CountryResponse
from crud_example.services.countries_service import CountriesService

router = APIRouter()


@router.get("", response_model=list[CountryResponse])
def list_countries(
    countries_service: CountriesService = Depends(get_countries_service),
) -> list[CountryResponse]:
    """Return every country in insertion order."""
    return countries_service.get_all_countries()


@router.get("/{country_id}", response_model=CountryResponse)
def get_country(
    country_id: UUID,
    countries_service: CountriesService = Depends(get_countries_service),
) -> CountryResponse:
    country = countries_service.get_country_by_country_id(country_id)
    if country is None:
        raise NotFoundError("Given country id doesn't exist", fields=["country_id"])
    return country


@router.post("", response_model=CountryResponse, status_code=status.HTTP_201_CREATED)
def add_country(
    country_add_request: CountryAddRequest,
    countries_service: CountriesService = Depends(get_countries_service),
) -> CountryResponse:
    """Add a country. A blank name gives 422, an existing name gives 409."""
    return countries_service.add_country(country_add_request)
