# crud_example/api/error_handlers.py
"""
FastAPI exception handlers that map service-level exceptions to HTTP responses.

How to use:
    - `create_app()` calls `register_exception_handlers(app)` once at startup.
    - Services raise crud_example.exceptions.base.* exceptions (DuplicateError, NotFoundError, ...)
    - These handlers produce stable JSON payloads (via .to_payload()) and correct HTTP codes (via .http_status()).
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import logging
from crud_example.exceptions.base import (
    ServiceError,
    DuplicateError,
    InvalidInputError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


# Most specific first (DuplicateError, NotFoundError, InvalidInputError)
# The status code and payload come from the exception classes themselves.

async def duplicate_error_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    """
    409 Conflict for duplicates.
    Payload: exc.to_payload() -> {"detail": "...", "code": "duplicate", "fields": [...]}
    """
    logger.info("DuplicateError for %s %s: fields=%s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """
    404 Not Found.
    """
    logger.info("NotFoundError for %s %s: fields=%s", request.method, request.url.path, exc.fields)
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """
    422 for rule violations, 400 for a missing request (MissingRequestError subclasses this).
    """
    logger.info(
        "%s for %s %s: fields=%s", type(exc).__name__, request.method, request.url.path, exc.fields
    )
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """
    Fallback for every other service error (InvalidFieldError, ...).
    """
    logger.warning("%s for %s %s: %s", type(exc).__name__, request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    422 for requests FastAPI rejects before they reach a service (bad enum value,
    malformed UUID in the path, unknown sort_order, ...).

    The errors are folded into the same payload shape the services produce:
        {"detail": "Input should be 'Male', 'Female' or 'Other'", "code": "invalid_input", "fields": ["gender"]}
    """
    errors = exc.errors()
    fields = [str(err["loc"][-1]) for err in errors if err.get("loc")]
    detail = "; ".join(err.get("msg", "") for err in errors) or "Invalid request"
    error = InvalidInputError(detail, fields=dict.fromkeys(fields))
    logger.info("RequestValidationError for %s %s: fields=%s", request.method, request.url.path, error.fields)
    return JSONResponse(status_code=error.http_status(), content=error.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(DuplicateError, duplicate_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(ServiceError, service_error_handler)


"""
---------------------------------------------------------
What the client sees
---------------------------------------------------------
PersonsService.update_person raises NotFoundError:
```
raise NotFoundError("Given person id doesn't exist", fields=["person_id"])
```

The client gets HTTP 404 and body:
```
{
  "detail": "Given person id doesn't exist",
  "code": "not_found",
  "fields": ["person_id"]
}
```
"""
