"""Shared fixtures for buildver tests."""

import pytest

from buildver import NumericPart, PreRelease, TextualPart, Version


@pytest.fixture
def beta_2() -> PreRelease:
    """Pre-release ``beta.2``."""
    return PreRelease((TextualPart("beta"), NumericPart(2)))


@pytest.fixture
def release() -> Version:
    """A plain final release."""
    return Version(1, 2, 3)


@pytest.fixture
def unsorted_specs() -> list[str]:
    """Version strings in no particular order."""
    return ["3.0", "1.7", "1.0", "2.0", "1.8", "1.6-alpha", "1.6"]
