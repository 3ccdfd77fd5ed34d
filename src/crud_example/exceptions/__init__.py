from .base import (
    ServiceError,
    InvalidInputError,
    MissingRequestError,
    DuplicateError,
    NotFoundError,
    InvalidFieldError,
)

__all__ = [
    "ServiceError",
    "InvalidInputError",
    "MissingRequestError",
    "DuplicateError",
    "NotFoundError",
    "InvalidFieldError",
]
