# src/crud_example/core/logging/handlers.py
"""
Handler factories.

Each function returns a dictConfig handler entry (a plain dict, no side effects)
so builder.py can pick the ones a given Settings object asks for:

| Name            | Destination                | Level       | Formatter                 |
| --------------- | -------------------------- | ----------- | ------------------------- |
| `console`       | stdout                     | LOG_LEVEL   | json or standard          |
| `file`          | LOG_DIR/app.log (rotating) | LOG_LEVEL   | json or standard          |
| `error_file`    | LOG_DIR/errors.log         | ERROR       | json                      |
| `error_console` | stderr                     | ERROR       | json                      |

Every handler runs the "request_id" and "redact" filters.
"""

from pathlib import Path

from crud_example.config.settings import Settings

_FILTERS = ["request_id", "redact"]


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "stream": "ext://sys.stdout",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": list(_FILTERS),
    }


def get_file_handler(settings: Settings) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filename": str(Path(settings.LOG_DIR) / "app.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_error_file_handler(settings: Settings) -> dict:
    # error files stay structured whatever LOG_FORMAT says
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": "json",
        "level": "ERROR",
        "filename": str(Path(settings.LOG_DIR) / "errors.log"),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "stream": "ext://sys.stderr",
        "formatter": "json",
        "level": "ERROR",
        "filters": list(_FILTERS),
    }
