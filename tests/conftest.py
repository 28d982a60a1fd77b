"""
Pytest configuration and shared fixtures.
"""

import os
from unittest.mock import MagicMock

import pytest

from nospace.container import DependencyContainer
from nospace.use_cases.filesystem.build_filesystem import BuildFilesystemUseCase

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def example_transcript() -> str:
    """
    The canonical example transcript.

    Returns:
        Transcript text
    """
    with open(os.path.join(FIXTURES_DIR, "example-input.txt")) as f:
        return f.read()


@pytest.fixture
def example_transcript_path(tmp_path, example_transcript):
    """
    Write the example transcript to a temporary file.

    Returns:
        Path to the transcript file
    """
    path = tmp_path / "input.txt"
    path.write_text(example_transcript)
    return str(path)


@pytest.fixture
def example_filesystem(example_transcript):
    """Frozen tree built from the example transcript."""
    return BuildFilesystemUseCase().execute(example_transcript)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
