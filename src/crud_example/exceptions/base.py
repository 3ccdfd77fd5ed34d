"""
Custom exceptions raised by the repositories and services.

Each exception knows its canonical code and HTTP status, so the API layer can
turn any of them into a response without a per-type mapping table of its own.
"""

from typing import Iterable


class ServiceError(Exception):
    """
    Base exception for repository/service errors.

    - message: client-safe text (e.g. "Given country name already exists")
    - fields: names of the fields involved, e.g. ['country_name']
    - error_code: short code clients can switch on; defaults to the class's `code`
    """

    code: str | None = None

    # canonical error_code -> HTTP status; unknown codes fall back to 400
    STATUS_BY_CODE = {
        "missing_request": 400,
        "invalid_input": 422,
        "invalid_field": 422,
        "duplicate": 409,
        "not_found": 404,
    }

    def __init__(self, message: str, *, fields: Iterable[str] | None = None,
                 error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields) if fields else None
        self.error_code = error_code or self.code

    def __str__(self) -> str:
        details = [f"fields: {', '.join(self.fields)}"] if self.fields else []
        if self.error_code:
            details.append(f"code: {self.error_code}")
        return f"{self.message} ({'; '.join(details)})" if details else self.message

    def to_payload(self) -> dict:
        """
        JSON body for an error response:

            {"detail": "Email can't be blank", "code": "invalid_input", "fields": ["email"]}

        `code` and `fields` are left out when empty.
        """
        payload: dict = {"detail": self.message}
        if self.error_code:
            payload["code"] = self.error_code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        return self.STATUS_BY_CODE.get(self.error_code, 400)


# Input errors are also ValueErrors, so plain `except ValueError` callers keep working.

class InvalidInputError(ServiceError, ValueError):
    """A request DTO failed validation (blank name, malformed email, ...)."""
    code = "invalid_input"


class MissingRequestError(InvalidInputError):
    """A service received `None` instead of a request DTO or identifier."""
    code = "missing_request"


class DuplicateError(ServiceError, ValueError):
    code = "duplicate"


class NotFoundError(ServiceError, LookupError):
    code = "not_found"

    def __init__(self, message: str = "Not found", **kwargs):
        super().__init__(message, **kwargs)


class InvalidFieldError(ServiceError, ValueError):
    """Unknown field names were passed to a repository method."""
    code = "invalid_field"


__all__ = [
    "ServiceError",
    "InvalidInputError",
    "MissingRequestError",
    "DuplicateError",
    "NotFoundError",
    "InvalidFieldError",
]
