"""Shared fixtures for CLI unit tests."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Fixture providing a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def mock_configure_logging() -> Generator[MagicMock, None, None]:
    """Keep the CLI from replacing the log sinks of the test session."""
    with patch("funcpipe.cli.configure_logging") as mock:
        yield mock
