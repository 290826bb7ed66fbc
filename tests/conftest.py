"""
Pytest configuration and fixtures.

Provides:
- A runner double returning canned CommandOutcome values
- Registry/dispatcher fixtures built on that double
- Logging teardown for tests that configure structlog
"""

import logging
from unittest.mock import AsyncMock

import pytest
import structlog

from npm_package_info.core.config import Settings
from npm_package_info.dispatcher import Dispatcher
from npm_package_info.protocol import CommandOutcome
from npm_package_info.runner import CommandRunner
from npm_package_info.tools import build_registry


def make_outcome(stdout: str = "", stderr: str = "", exit_code: int = 0, command: str = "npm") -> CommandOutcome:
    """Build a CommandOutcome for a canned npm invocation."""
    return CommandOutcome(command=command, stdout=stdout, stderr=stderr, exit_code=exit_code)


@pytest.fixture
def settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None, npm_command="npm", default_search_limit=10)


@pytest.fixture
def runner():
    """CommandRunner double; set ``runner.run.return_value`` per test."""
    mock_runner = AsyncMock(spec=CommandRunner)
    mock_runner.run.return_value = make_outcome(stdout="{}")
    return mock_runner


@pytest.fixture
def registry(runner, settings):
    return build_registry(runner=runner, settings=settings)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)


@pytest.fixture
def reset_logging():
    """Undo setup_logging so later tests see structlog's defaults."""
    yield
    structlog.reset_defaults()
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
