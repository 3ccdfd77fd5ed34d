# src/crud_example/core/logging/formatters.py

"""
Log formatters used by the dictConfig built in builder.py.

  - JsonFormatter: one JSON object per line, for log collectors. Carries the
    observability fields (service, env, version, request_id) and every `extra=`
    key passed at the logging call site, e.g. the `operation`/`person_id` keys
    the services attach to their "persons.add.success"-style events.

  - ColorFormatter: compact ANSI-colored lines for a developer terminal
    (LOG_FORMAT=text).

Both formatters rely on RequestIdFilter having set `record.request_id`; when it
has not run they print "-".
"""

import json
import logging
from typing import Any
from logging import LogRecord
from crud_example.utils.project_info import get_project_version

PROJECT_VERSION = get_project_version()

# LogRecord attributes that are not "extras"; everything else on the record was passed via extra={...}
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "request_id", "taskName"}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name ("development", "production", ...)
      - service: logical service name stamped on every line
      - datefmt: optional date format used by formatTime()

    The formatter never raises on odd values: extras that json cannot encode are
    stored as their str() form.
    """

    def __init__(self, *, env: str | None = None, service: str = "crud-example", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "pathname": record.pathname,
            "lineno": record.lineno,
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in log_record or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development formatter: TIMESTAMP | LEVEL | LOGGER | REQUEST_ID | MESSAGE,
    with the level colored. Tracebacks are appended on the following lines.
    """

    COLOR_CODES = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;41m",
        "RESET": "\033[0m",
    }

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        base = (
            f"{timestamp} | {color}{record.levelname:<8}{reset} | "
            f"{record.name:<40} | "
            f"{getattr(record, 'request_id', '-'):<36} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base


"""
-------------------------------------------------
What a service event looks like
-------------------------------------------------
The services log events with a short dotted name and the details in `extra`:
```
logger.info(
    "persons.add.success",
    extra={"operation": "add_person", "person_id": str(person.person_id)},
)
```

With LOG_FORMAT=json this becomes (one line, shown wrapped):
```
{"timestamp": "2026-01-12 10:04:51,120", "level": "INFO",
 "logger": "crud_example.services.persons_service", "message": "persons.add.success",
 "request_id": "5f0c...", "service": "crud-example", "env": "development",
 "version": "0.1.0", "operation": "add_person", "person_id": "8082ed0c-..."}
```

With LOG_FORMAT=text the extras are not printed; only the message is:
```
2026-01-12 10:04:51,120 | INFO     | crud_example.services.persons_service | 5f0c... | persons.add.success
```
"""
