"""
Shared pytest fixtures.

Every test runs with default logging settings (INFO on stderr, no log
directory, nothing disabled), so LoggingConfig changes made by one test
never leak into another.
"""

import pytest

from remote_client.logging.config import logging_config
from remote_client.logging.config import LoggingSettings


@pytest.fixture(autouse=True)
def reset_logging_config():
    token = logging_config._logging_settings.set(LoggingSettings())

    yield

    logging_config._logging_settings.reset(token)
