"""Helpers shared by the version and pre-release parsers."""

import logging
from typing import Any, Final

from .constants import MAX_COMPONENT
from .exceptions import VersionFormatError

logger = logging.getLogger(__name__)

DELIMITERS: Final = frozenset(".-+")


def sign(left: Any, right: Any) -> int:
    """Collapse an ordering between two comparable values to -1, 0 or 1."""
    return (left > right) - (left < right)


def is_digits(token: str) -> bool:
    """Return True if the token is made only of ASCII digits."""
    return token.isascii() and token.isdigit()


def reject(spec: str, reason: str) -> VersionFormatError:
    """Build the error for a rejected string, logging the rejection.

    Args:
        spec: The string being rejected.
        reason: Why it is rejected.

    Returns:
        The error to raise.
    """
    logger.debug("Rejected version string %r: %s", spec, reason)
    return VersionFormatError(spec, reason)


def check_boundaries(spec: str, kind: str) -> None:
    """Validate that a string is non-empty and not bounded by a delimiter.

    Args:
        spec: The string to check.
        kind: What is being parsed, used in the error message.

    Raises:
        VersionFormatError: If the string is empty or begins or ends with
            ``.``, ``-`` or ``+``.
    """
    if not spec:
        raise reject(spec, f"{kind} strings must not be empty")
    if spec[0] in DELIMITERS or spec[-1] in DELIMITERS:
        raise reject(spec, f"{kind} strings must not begin or end with . - or +")


def parse_number(token: str, spec: str) -> int:
    """Convert an all-digit token, enforcing the component bound.

    Args:
        token: The digits to convert.
        spec: The full string the token came from, used in errors.

    Returns:
        The integer value of the token.

    Raises:
        VersionFormatError: If the value exceeds MAX_COMPONENT.
    """
    # int() refuses very long digit strings, so bound the length first.
    if len(token.lstrip("0")) > len(str(MAX_COMPONENT)) or int(token) > MAX_COMPONENT:
        raise reject(spec, f"numbers must not be larger than {MAX_COMPONENT}")
    return int(token)
