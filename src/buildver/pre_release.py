"""Models the pre-release portion of a version string."""

from dataclasses import dataclass
from functools import total_ordering
from itertools import zip_longest
from typing import Self, TypeAlias, assert_never

from ._utils import check_boundaries, is_digits, parse_number, reject, sign
from .constants import INTEGRATION, MAX_COMPONENT
from .exceptions import InvalidComponentError


@dataclass(frozen=True)
class NumericPart:
    """A pre-release part made only of digits, e.g. the ``2`` in ``beta.2``.

    Attributes:
        value: Non-negative integer value of the part.
    """

    value: int

    def __post_init__(self: Self) -> None:
        """Validate the part value.

        Raises:
            InvalidComponentError: If the value is negative or too large.
        """
        if not 0 <= self.value <= MAX_COMPONENT:
            raise InvalidComponentError(
                "numeric pre-release part",
                self.value,
                f"must be between 0 and {MAX_COMPONENT}",
            )

    @property
    def is_number(self: Self) -> bool:
        """Always True for numeric parts."""
        return True

    @property
    def is_integration(self: Self) -> bool:
        """Always False for numeric parts."""
        return False

    def __str__(self: Self) -> str:
        """Return the part as written in a version string."""
        return str(self.value)


@dataclass(frozen=True)
class TextualPart:
    """Any other pre-release part, e.g. ``beta``, ``RC1`` or ``pre-beta``.

    Attributes:
        value: The part exactly as written.
    """

    value: str

    def __post_init__(self: Self) -> None:
        """Validate the part value.

        Raises:
            InvalidComponentError: If the value is empty, is all digits,
                contains a part or metadata separator, or begins or ends with
                ``-``.
        """
        if not self.value:
            raise InvalidComponentError(
                "textual pre-release part", self.value, "must not be empty"
            )
        if is_digits(self.value):
            raise InvalidComponentError(
                "textual pre-release part", self.value, "must not be all digits"
            )
        if "." in self.value or "+" in self.value:
            raise InvalidComponentError(
                "textual pre-release part", self.value, "must not contain . or +"
            )
        if self.value.startswith("-") or self.value.endswith("-"):
            raise InvalidComponentError(
                "textual pre-release part",
                self.value,
                "must not begin or end with -",
            )

    @property
    def is_number(self: Self) -> bool:
        """Always False for textual parts."""
        return False

    @property
    def is_integration(self: Self) -> bool:
        """True if this part is the integration build marker."""
        return self.value == INTEGRATION

    def __str__(self: Self) -> str:
        """Return the part as written in a version string."""
        return self.value


PreReleasePart: TypeAlias = NumericPart | TextualPart


def compare_parts(left: PreReleasePart, right: PreReleasePart) -> int:
    """Compare two pre-release parts.

    Numeric parts compare by value and textual parts by code point order. A
    numeric part is always lower than a textual one, whatever their contents.

    Args:
        left: First part.
        right: Second part.

    Returns:
        A negative number, zero or a positive number when ``left`` is lower
        than, equal to or greater than ``right``.
    """
    match left:
        case NumericPart(value):
            match right:
                case NumericPart(other):
                    return sign(value, other)
                case TextualPart():
                    return -1
                case _:
                    assert_never(right)
        case TextualPart(value):
            match right:
                case NumericPart():
                    return 1
                case TextualPart(other):
                    return sign(value, other)
                case _:
                    assert_never(right)
        case _:
            assert_never(left)


def _parse_part(token: str, spec: str) -> PreReleasePart:
    if is_digits(token):
        return NumericPart(parse_number(token, spec))
    return TextualPart(token)


@total_ordering
@dataclass(frozen=True)
class PreRelease:
    """The dot-separated qualifiers that follow ``-`` in a version string.

    Parts keep the order they were written in. Any iterable given as
    ``parts`` is stored as a tuple.

    Attributes:
        parts: Ordered pre-release parts.
    """

    parts: tuple[PreReleasePart, ...] = ()

    def __post_init__(self: Self) -> None:
        """Freeze the parts and check the integration marker placement.

        Raises:
            InvalidComponentError: If the integration marker is not last.
        """
        parts = tuple(self.parts)
        object.__setattr__(self, "parts", parts)
        if any(part.is_integration for part in parts[:-1]):
            raise InvalidComponentError(
                "pre-release",
                ".".join(str(part) for part in parts),
                f"the {INTEGRATION} marker must be the last part",
            )

    @classmethod
    def parse(cls, spec: str) -> Self:
        """Parse a pre-release string such as ``beta.2.build.4``.

        Args:
            spec: The pre-release string, without the leading ``-``.

        Returns:
            Parsed PreRelease instance.

        Raises:
            VersionFormatError: If the string is empty, begins or ends with a
                delimiter, has two delimiters next to each other, or has the
                integration marker anywhere but last.
        """
        check_boundaries(spec, "Pre-release")

        tokens = spec.split(".")
        if "" in tokens:
            raise reject(spec, "two pre-release separators (.) are next to each other")
        if any(token[0] == "-" or token[-1] == "-" for token in tokens):
            raise reject(spec, "two pre-release delimiters are next to each other")
        if INTEGRATION in tokens[:-1]:
            raise reject(spec, f"the {INTEGRATION} marker must be the last part")

        return cls(tuple(_parse_part(token, spec) for token in tokens))

    @property
    def is_integration(self: Self) -> bool:
        """True if the last part is the integration build marker."""
        return bool(self.parts) and self.parts[-1].is_integration

    def with_parts(self: Self, *parts: PreReleasePart) -> Self:
        """Return a new pre-release with the given parts appended.

        Args:
            *parts: Parts to add after the existing ones.

        Returns:
            New PreRelease instance; this one is left untouched.
        """
        return type(self)(self.parts + parts)

    def compare(self: Self, other: "PreRelease") -> int:
        """Compare with another pre-release part by part.

        When one sequence runs out first, it is the lower of the two, so
        ``beta.2`` is lower than ``beta.2.build.1``.

        Args:
            other: Pre-release to compare with.

        Returns:
            -1, 0 or 1.
        """
        for mine, theirs in zip_longest(self.parts, other.parts):
            if mine is None:
                return -1
            if theirs is None:
                return 1
            result = compare_parts(mine, theirs)
            if result:
                return sign(result, 0)
        return 0

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, PreRelease):
            return NotImplemented
        return self.compare(other) < 0

    def __str__(self: Self) -> str:
        """Return the parts joined by ``.``."""
        return ".".join(str(part) for part in self.parts)
