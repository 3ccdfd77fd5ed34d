"""
Validation helpers shared by the DTOs, repositories and services.

Request DTOs can be built with missing values (a form posted half-filled, a test
building an invalid request on purpose). Their required/format rules only fire when
the service submits them through `validate_model()`, which re-validates the DTO with
the submit context switched on.
"""

from dataclasses import fields, is_dataclass
from typing import Any

from pydantic import BaseModel, ValidationError, ValidationInfo
from pydantic_core import PydanticCustomError

from crud_example.exceptions.base import InvalidInputError

SUBMIT_CONTEXT = {"submit": True}


def is_submitting(info: ValidationInfo) -> bool:
    """Return True when the DTO is being validated by `validate_model()`."""
    return bool(info.context and info.context.get("submit"))


def require_on_submit(value: Any, info: ValidationInfo, message: str) -> Any:
    """
    Field-validator helper: reject None/blank values, but only in submit mode.

    Usage (inside a pydantic model):

        @field_validator("country_name")
        @classmethod
        def country_name_required(cls, value, info):
            return require_on_submit(value, info, "Country Name can't be blank")
    """
    if not is_submitting(info):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise PydanticCustomError("required", message)
    return value


def validate_model(model: BaseModel) -> None:
    """
    Validate a request DTO the way the service sees it.

    Raises:
        InvalidInputError: with every failing rule joined into the message and the
            offending field names in `fields`.
    """
    try:
        type(model).model_validate(model.model_dump(), context=SUBMIT_CONTEXT)
    except ValidationError as exc:
        errors = exc.errors()
        messages = [err["msg"] for err in errors]
        failed = [".".join(str(part) for part in err["loc"]) for err in errors if err["loc"]]
        raise InvalidInputError("; ".join(messages), fields=failed) from exc


def find_unknown_fields(model: type, kwargs: dict) -> list[str]:
    """
    Return the kwarg keys that are not declared fields of the entity dataclass.
    - model: the dataclass (not an instance)
    - kwargs: dict of incoming kwargs to validate
    """
    if not is_dataclass(model):
        raise TypeError(f"{model!r} is not a dataclass")
    allowed = {f.name for f in fields(model)}
    return [k for k in kwargs.keys() if k not in allowed]


__all__ = [
    "SUBMIT_CONTEXT",
    "is_submitting",
    "require_on_submit",
    "validate_model",
    "find_unknown_fields",
]
