from .enums import GenderOptions, SortOrderOptions
from .country import CountryAddRequest, CountryResponse, to_country_response
from .person import (
    PersonAddRequest,
    PersonUpdateRequest,
    PersonResponse,
    to_person_response,
    calculate_age,
)

__all__ = [
    "GenderOptions",
    "SortOrderOptions",
    "CountryAddRequest",
    "CountryResponse",
    "to_country_response",
    "PersonAddRequest",
    "PersonUpdateRequest",
    "PersonResponse",
    "to_person_response",
    "calculate_age",
]
