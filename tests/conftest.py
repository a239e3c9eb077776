"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from click.testing import CliRunner

from colorcomp.models import Color


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def red():
    """Pure red."""
    return Color(r=255, g=0, b=0)


@pytest.fixture
def coral():
    """The #FF5733 sample color."""
    return Color(r=255, g=87, b=51)
