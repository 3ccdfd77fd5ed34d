# src/crud_example/core/logging/filters.py
"""
Logging filters

  - RequestIdFilter: stamps `record.request_id` from a ContextVar that the
    RequestIDMiddleware sets for every HTTP request.
  - RedactFilter: masks personal data passed through `extra={...}`.

A ContextVar (not threading.local) holds the request id: FastAPI runs the async
middleware on the event loop and the sync endpoints in a worker thread, and the
context is copied into that thread, so log lines written by the services still
carry the id of the request that caused them.

Both filters return True; they annotate records and never drop them.
"""

import logging
from logging import LogRecord
import contextvars


_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    """
    Set the request id for the current context.

    Returns:
        token: pass it to reset_request_id(token) to restore the previous value
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    """Return the current context's request id, or None when outside a request."""
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    Precedence: an explicit `extra={"request_id": ...}`, then the context value,
    then the sentinel "-" (so `%(request_id)s` in a format string never fails).
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    """
    Replace the value of sensitive `extra` keys with a mask.

    Covers credentials plus the personal details a Person carries. Only record
    attributes are inspected; the message text itself is left alone, so never
    interpolate these values into the message.
    """

    MASK = "***REDACTED***"
    SENSITIVE = {
        "password", "secret", "token", "access_token", "refresh_token", "authorization",
        "email", "address", "date_of_birth",
    }

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True


r"""
-------------------------------------------------
Following one request through the logs
-------------------------------------------------
1. A client calls
	```
	POST /api/v1/persons
	X-Request-ID: 123abc
	```
2. RequestIDMiddleware runs `set_request_id("123abc")`.
3. PersonsService.add_person logs
	```
	logger.info("persons.add.success", extra={"operation": "add_person", "person_id": "..."})
	```
   and the filter copies "123abc" onto the record.
4. The formatter prints it:
	```
	2026-01-12 10:04:51,120 | INFO     | crud_example.services.persons_service | 123abc | persons.add.success
	```
5. The middleware resets the ContextVar, so the next request starts from "-".

Grep the logs for `123abc` and you get every line that request produced, in order.
"""
