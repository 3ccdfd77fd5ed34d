"""
Pydantic schemas (DTOs) for persons.

The request DTOs accept partial data; their rules (required name, required and
well-formed email, required id on update) are enforced when the service submits
them through `validate_model()`.
"""

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from crud_example.models.person import Person
from crud_example.schemas.enums import GenderOptions
from crud_example.validators.model_validators import is_submitting, require_on_submit


def _strip(value: str | None) -> str | None:
    return value.strip() if isinstance(value, str) else value


def calculate_age(date_of_birth: date | None, today: date | None = None) -> int | None:
    """
    Age in whole years, rounded the same way everywhere: days / 365.25.

    Returns None when the date of birth is unknown.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    return round((today - date_of_birth).days / 365.25)


class PersonRequestBase(BaseModel):
    """Fields and rules shared by the add and update requests."""

    person_name: str | None = Field(None, description="Full name of the person")
    email: str | None = Field(None, description="Contact email; stored lowercased")
    date_of_birth: date | None = None
    gender: GenderOptions | None = None
    country_id: uuid.UUID | None = Field(None, description="Identifier of an existing country")
    address: str | None = None
    receive_news_letters: bool = False

    @field_validator("person_name")
    @classmethod
    def person_name_required(cls, value: str | None, info: ValidationInfo) -> str | None:
        return require_on_submit(value, info, "Person Name can't be blank")

    @field_validator("email")
    @classmethod
    def email_required_and_valid(cls, value: str | None, info: ValidationInfo) -> str | None:
        value = require_on_submit(value, info, "Email can't be blank")
        if value is not None and is_submitting(info):
            try:
                validate_email(value.strip())
            except PydanticCustomError as exc:
                raise PydanticCustomError("email", "Email value should be a valid email") from exc
        return value

    def _entity_fields(self) -> dict:
        return {
            "person_name": _strip(self.person_name),
            "email": _strip(self.email).lower() if self.email else self.email,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender.value if self.gender else None,
            "country_id": self.country_id,
            "address": _strip(self.address),
            "receive_news_letters": self.receive_news_letters,
        }


class PersonAddRequest(PersonRequestBase):
    """DTO for adding a new person."""

    def to_person(self) -> Person:
        """Build a Person entity with a fresh identifier."""
        return Person(person_id=uuid.uuid4(), **self._entity_fields())


class PersonUpdateRequest(PersonRequestBase):
    """DTO for replacing the details of an existing person."""

    person_id: uuid.UUID | None = None

    @field_validator("person_id")
    @classmethod
    def person_id_required(cls, value: uuid.UUID | None, info: ValidationInfo) -> uuid.UUID | None:
        return require_on_submit(value, info, "Person ID can't be blank")

    def to_person(self) -> Person:
        return Person(person_id=self.person_id, **self._entity_fields())


class PersonResponse(BaseModel):
    """DTO used as the return type of most PersonsService methods."""

    model_config = ConfigDict(from_attributes=True)

    person_id: uuid.UUID
    person_name: str | None = None
    email: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    country_id: uuid.UUID | None = None
    country: str | None = None
    address: str | None = None
    receive_news_letters: bool = False
    age: int | None = None

    def to_person_update_request(self) -> PersonUpdateRequest:
        """Pre-fill an update request from the current state (the "Edit" form)."""
        return PersonUpdateRequest(
            person_id=self.person_id,
            person_name=self.person_name,
            email=self.email,
            date_of_birth=self.date_of_birth,
            gender=GenderOptions(self.gender) if self.gender else None,
            country_id=self.country_id,
            address=self.address,
            receive_news_letters=self.receive_news_letters,
        )


def to_person_response(person: Person, country_name: str | None = None) -> PersonResponse:
    """
    Project a Person entity to its response DTO.

    `country_name` is resolved by the caller (PersonsService asks the CountriesService).
    """
    return PersonResponse(
        person_id=person.person_id,
        person_name=person.person_name,
        email=person.email,
        date_of_birth=person.date_of_birth,
        gender=person.gender,
        country_id=person.country_id,
        country=country_name,
        address=person.address,
        receive_news_letters=person.receive_news_letters,
        age=calculate_age(person.date_of_birth),
    )


__all__ = [
    "calculate_age",
    "PersonAddRequest",
    "PersonUpdateRequest",
    "PersonResponse",
    "to_person_response",
]
