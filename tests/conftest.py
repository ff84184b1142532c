"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from dirlist.config.settings import Settings
from dirlist.container import DependencyContainer

supports_symlinks = hasattr(os, "symlink") and os.name != "nt"


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory holding one subdirectory, one file and one symlink.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        os.makedirs(os.path.join(temp_dir, "docs"))

        readme = os.path.join(temp_dir, "readme.txt")
        with open(readme, "w") as f:
            f.write("Read me.")

        if supports_symlinks:
            os.symlink(readme, os.path.join(temp_dir, "link"))

        yield temp_dir


@pytest.fixture
def empty_directory():
    """
    Create an empty temporary directory.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings()


@pytest.fixture
def dependency_container(mock_logger, settings):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
