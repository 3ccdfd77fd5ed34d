"""
Core pytest configuration for the entire test suite.

This module provides only what ALL tests need: quiet third-party loggers and the
application logging installed once per session.

Domain-specific fixtures live in:
- tests/test_fixtures/service_fixtures.py   (services, request factories, mocks)
- tests/test_fixtures/api_fixtures.py       (FastAPI app + TestClient)

They are imported at the bottom of this file so every test module can use them
without importing them itself.
"""

from __future__ import annotations

import logging

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Keep this block above the crud_example/faker imports so collection stays quiet.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "asyncio",
    "httpx",
    "httpcore",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from crud_example.config.settings import Settings
from crud_example.core.logging.builder import setup_logging


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings for the test session: no mock data, readable logs, console only.

    Built explicitly (not via get_settings()) so a developer's .env cannot change
    what the tests see.
    """
    return Settings(
        _env_file=None,
        ENV="testing",
        SEED_MOCK_DATA=False,
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="text",
        LOG_TO_STDOUT=True,
        LOG_USE_QUEUE=False,
    )


# The `autouse=True` part means pytest applies this fixture without tests asking for it.
@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """
    Install the application's dictConfig once, so the formatters and filters the
    services rely on (request_id, redaction) are active during every test.

    NOTE: dictConfig replaces the root handlers. Tests that assert on log output
    use capsys or attach their own handler instead of caplog.
    """
    setup_logging(test_settings)
    yield


# Service fixtures
from crud_example.tests.test_fixtures.service_fixtures import (  # noqa: E402
    fake,
    countries_service,
    persons_service,
    make_country_add_request,
    make_person_add_request,
    added_countries,
    added_persons,
    countries_service_mock,
    persons_service_with_mock,
)

# API fixtures
from crud_example.tests.test_fixtures.api_fixtures import (  # noqa: E402
    app,
    client,
)
