# src/crud_example/core/logging/builder.py
"""
Logging builder: build and apply the dictConfig for the application, and
optionally move the actual log IO to a background QueueListener.

    make_dict_config(settings)  -> dict    pure, easy to unit test
    setup_logging(settings)     -> None    applies it (called by create_app())
    stop_queue_logging()        -> None    flushes and stops the listener at shutdown

Relevant Settings: ENV, LOG_LEVEL, LOG_FORMAT, LOG_TO_STDOUT, LOG_DIR,
LOG_MAX_BYTES, LOG_BACKUP_COUNT, LOG_USE_QUEUE.
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config
import queue as _queue
from logging.handlers import QueueHandler, QueueListener

from crud_example.config.settings import Settings
from crud_example.utils.project_info import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter, RedactFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

# Running listener, kept so stop_queue_logging() can flush it
_QUEUE_LISTENER: QueueListener | None = None


def _writes_files(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping for `settings`.

    Handlers: "console" always; "file" + "error_file" when LOG_TO_STDOUT is false
    and LOG_DIR is set; "error_console" otherwise.
    Loggers: root, the crud_example package, and uvicorn's error/access loggers.
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name(),
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
        "redact": {"()": RedactFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    if _writes_files(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    handler_names = list(handlers.keys())

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": handler_names,
                "level": settings.LOG_LEVEL,
            },
            # propagates to root; only the level is set here
            "crud_example": {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "uvicorn.error": {
                "level": settings.LOG_LEVEL,
                "handlers": handler_names,
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Apply the logging configuration.

    Steps:
      1. Create LOG_DIR when file logging is on.
      2. dictConfig(make_dict_config(settings)).
      3. With LOG_USE_QUEUE, detach the real root handlers, run them in a
         QueueListener thread and put a QueueHandler on the root instead. The
         request-id and redaction filters go on the QueueHandler so they run in the
         producing context, where the request ContextVar is set.
    """
    global _QUEUE_LISTENER

    # A second setup (tests, reload) must not leave the previous listener running
    stop_queue_logging()

    if _writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    if not settings.LOG_USE_QUEUE:
        return

    root_logger = logging.getLogger()
    real_handlers = list(root_logger.handlers)
    if not real_handlers:
        return

    for handler in real_handlers:
        root_logger.removeHandler(handler)

    log_queue: _queue.Queue = _queue.Queue()
    listener = QueueListener(log_queue, *real_handlers, respect_handler_level=True)
    listener.start()

    queue_handler = QueueHandler(log_queue)
    queue_handler.addFilter(RequestIdFilter())
    queue_handler.addFilter(RedactFilter())
    root_logger.addHandler(queue_handler)

    _QUEUE_LISTENER = listener


def stop_queue_logging() -> None:
    """Flush and stop the background listener, if one is running."""
    global _QUEUE_LISTENER
    listener = _QUEUE_LISTENER
    if listener is None:
        return
    try:
        listener.stop()
    finally:
        _QUEUE_LISTENER = None


"""
-------------------------------------------------
Which handlers end up active
-------------------------------------------------
| LOG_TO_STDOUT | LOG_DIR set | Active handlers                  |
| ------------- | ----------- | -------------------------------- |
| true          | any         | console + error_console          |
| false         | no          | console + error_console          |
| false         | yes         | console + file + error_file      |

Example .env for local development with readable output and log files:
```
LOG_LEVEL=DEBUG
LOG_FORMAT=text
LOG_TO_STDOUT=false
LOG_DIR=logs
```

-------------------------------------------------
Queue mode
-------------------------------------------------
LOG_USE_QUEUE=true makes logging calls only enqueue the record; a listener
thread does the formatting and the writes. Call stop_queue_logging() at shutdown
(create_app() registers it on the app's shutdown event) or the last records may
be lost.
"""
