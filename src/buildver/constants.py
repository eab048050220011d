"""Constants shared by the version models."""

from typing import Final

INTEGRATION: Final = "{integration}"
"""Pre-release marker for local, unreleased builds. Always the last part."""

MAX_COMPONENT: Final = 2**31 - 1
"""Largest value accepted for a numeric version component or pre-release part."""
