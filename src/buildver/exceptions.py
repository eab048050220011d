"""Exceptions raised when parsing or constructing versions."""

from typing import Any, Self


class VersionError(ValueError):
    """Base exception for all version errors."""


class VersionFormatError(VersionError):
    """Raised when a version or pre-release string cannot be parsed.

    Attributes:
        spec: The string that was rejected.
        reason: Why it was rejected.
    """

    def __init__(self: Self, spec: str, reason: str) -> None:
        """Initialize the error.

        Args:
            spec: The string that was rejected.
            reason: Why it was rejected.
        """
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid version string [{spec}]: {reason}")


class InvalidComponentError(VersionError):
    """Raised when a version is built from an out-of-range component.

    Attributes:
        component: Name of the offending component.
        value: The rejected value.
    """

    def __init__(self: Self, component: str, value: Any, reason: str) -> None:
        """Initialize the error.

        Args:
            component: Name of the offending component.
            value: The rejected value.
            reason: Why it was rejected.
        """
        self.component = component
        self.value = value
        super().__init__(f"Invalid {component} {value!r}: {reason}")
