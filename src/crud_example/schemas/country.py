"""
Pydantic schemas (DTOs) for countries.

`CountryAddRequest` is what callers send to `CountriesService.add_country()`;
`CountryResponse` is what every CountriesService method returns.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from crud_example.models.country import Country
from crud_example.validators.model_validators import require_on_submit


class CountryAddRequest(BaseModel):
    """DTO for adding a new country."""

    country_name: str | None = Field(None, description="Name of the country, unique across countries")

    @field_validator("country_name")
    @classmethod
    def country_name_required(cls, value: str | None, info: ValidationInfo) -> str | None:
        return require_on_submit(value, info, "Country Name can't be blank")

    def to_country(self) -> Country:
        """Build a Country entity with a fresh identifier."""
        return Country(
            country_id=uuid.uuid4(),
            country_name=self.country_name.strip() if self.country_name else self.country_name,
        )


class CountryResponse(BaseModel):
    """DTO used as the return type of most CountriesService methods."""

    model_config = ConfigDict(from_attributes=True)

    country_id: uuid.UUID
    country_name: str | None = None


def to_country_response(country: Country) -> CountryResponse:
    """Project a Country entity to its response DTO."""
    return CountryResponse(
        country_id=country.country_id,
        country_name=country.country_name,
    )


__all__ = ["CountryAddRequest", "CountryResponse", "to_country_response"]
