"""Models a semantic version with support for integration builds."""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ._utils import (
    DELIMITERS,
    check_boundaries,
    is_digits,
    parse_number,
    reject,
    sign,
)
from .constants import INTEGRATION, MAX_COMPONENT
from .exceptions import InvalidComponentError, VersionFormatError
from .pre_release import PreRelease, TextualPart

_COMPONENTS = ("major", "minor", "patch")


@total_ordering
@dataclass(frozen=True)
class Version:
    """A three number version with optional pre-release and metadata.

    Follows the ordering rules of https://semver.org, with one addition:
    integration builds, which are local or team builds that were never
    released. These carry a trailing ``{integration}`` pre-release part, as in
    ``1.0.0-{integration}``.

    Metadata is kept for display only. It never takes part in ordering,
    equality or hashing, so ``1.2.6`` and ``1.2.6+sha.f938de8`` are equal.

    An empty pre-release is stored as ``None``.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        pre_release: Pre-release qualifiers, or None for a final release.
        metadata: Free-form build metadata, or None.
    """

    major: int
    minor: int
    patch: int
    pre_release: PreRelease | None = None
    metadata: str | None = field(default=None, compare=False)

    def __post_init__(self: Self) -> None:
        """Validate the numeric components and metadata.

        Raises:
            InvalidComponentError: If major, minor or patch is negative or
                larger than MAX_COMPONENT, or if metadata is empty or ends
                with a delimiter.
        """
        for name in _COMPONENTS:
            value = getattr(self, name)
            if not 0 <= value <= MAX_COMPONENT:
                raise InvalidComponentError(
                    name, value, f"must be between 0 and {MAX_COMPONENT}"
                )
        if self.metadata is not None:
            if not self.metadata:
                raise InvalidComponentError(
                    "metadata", self.metadata, "must not be empty"
                )
            if self.metadata[-1] in DELIMITERS:
                raise InvalidComponentError(
                    "metadata", self.metadata, "must not end with . - or +"
                )
        if self.pre_release is not None and not self.pre_release.parts:
            object.__setattr__(self, "pre_release", None)

    @classmethod
    def parse(cls, spec: str) -> Self:
        """Parse a version string.

        The format is ``<major>[.<minor>[.<patch>]][-<pre-release>][+<metadata>]``.
        Missing minor and patch numbers default to 0, so ``17`` parses as
        ``17.0.0``. Everything after the first ``+`` is metadata and is not
        validated. Only ASCII digits ``0-9`` count as digits, both in the
        numbers and in numeric pre-release parts; other Unicode digits are
        rejected in the numbers and make a pre-release part textual.

        Args:
            spec: Version string, e.g. "3.4.5-beta.2+sha.f938de838ab".

        Returns:
            Parsed Version instance.

        Raises:
            VersionFormatError: If the string begins or ends with a delimiter,
                has two delimiters next to each other, has more than three
                numbers, has non-digits in the numbers, has a number larger
                than MAX_COMPONENT, or has an invalid pre-release.
        """
        check_boundaries(spec, "Version")

        end = next((i for i, char in enumerate(spec) if char in "-+"), len(spec))
        segments = spec[:end].split(".")
        if "" in segments:
            raise reject(spec, "two version delimiters are next to each other")
        if len(segments) > len(_COMPONENTS):
            raise reject(spec, "a version can only have at most 3 dotted parts")
        if not all(is_digits(segment) for segment in segments):
            raise reject(spec, "only digits are allowed in <major>.<minor>.<patch>")

        numbers = [parse_number(segment, spec) for segment in segments]
        numbers += [0] * (len(_COMPONENTS) - len(numbers))

        plus = spec.find("+", end)
        pre_release = None
        if end < len(spec) and spec[end] == "-":
            pre_spec = spec[end + 1 : plus] if plus != -1 else spec[end + 1 :]
            try:
                pre_release = PreRelease.parse(pre_spec)
            except VersionFormatError as e:
                raise VersionFormatError(spec, e.reason) from e

        metadata = spec[plus + 1 :] if plus != -1 else None
        major, minor, patch = numbers
        return cls(major, minor, patch, pre_release, metadata)

    @classmethod
    def coerce(cls, value: "Version | str") -> "Version":
        """Return a Version, parsing the value if it is a string.

        Args:
            value: Version string or Version instance.

        Returns:
            The given instance, or the parsed string.
        """
        return value if isinstance(value, Version) else cls.parse(value)

    @property
    def is_major(self: Self) -> bool:
        """True for final releases with zero minor and patch, e.g. ``2.0.0``."""
        return self.minor == 0 and self.patch == 0 and self.pre_release is None

    @property
    def is_minor(self: Self) -> bool:
        """True for final releases with a minor number and zero patch."""
        return self.minor > 0 and self.patch == 0 and self.pre_release is None

    @property
    def is_patch(self: Self) -> bool:
        """True for final releases with a patch number."""
        return self.patch > 0 and self.pre_release is None

    @property
    def is_pre_release(self: Self) -> bool:
        """True if the version has a pre-release."""
        return self.pre_release is not None

    @property
    def is_integration(self: Self) -> bool:
        """True if the pre-release ends with the integration marker."""
        return self.pre_release is not None and self.pre_release.is_integration

    def is_compatible_with(self: Self, other: "Version") -> bool:
        """Check semantic version compatibility.

        On the 0.x line the other version must share the minor number (0.3 is
        not compatible with 0.4). Otherwise it must share the major number
        (1.0 is not compatible with 2.0).

        Args:
            other: Version to check against.

        Returns:
            True if the versions are compatible.
        """
        if self.major == 0:
            return self.minor == other.minor
        return self.major == other.major

    def to_integration_version(self: Self) -> Self:
        """Return the integration build of this version.

        Returns:
            This version if it is already an integration build, otherwise a
            new version with ``{integration}`` appended to its pre-release.
        """
        if self.is_integration:
            return self

        pre_release = self.pre_release or PreRelease()
        return type(self)(
            self.major,
            self.minor,
            self.patch,
            pre_release.with_parts(TextualPart(INTEGRATION)),
            self.metadata,
        )

    def compare(self: Self, other: "Version") -> int:
        """Compare with another version.

        Numbers are compared first. With equal numbers, a final release is
        greater than any pre-release of it, and two pre-releases are compared
        part by part. Metadata is ignored.

        Args:
            other: Version to compare with.

        Returns:
            -1, 0 or 1.
        """
        result = sign(
            (self.major, self.minor, self.patch),
            (other.major, other.minor, other.patch),
        )
        if result:
            return result

        if self.pre_release is None:
            return 0 if other.pre_release is None else 1
        if other.pre_release is None:
            return -1
        return self.pre_release.compare(other.pre_release)

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __str__(self: Self) -> str:
        """Return the canonical version string.

        Returns:
            Version string in format "major.minor.patch[-pre-release][+metadata]".
        """
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release is not None:
            version += f"-{self.pre_release}"
        if self.metadata is not None:
            version += f"+{self.metadata}"
        return version

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"Version({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Let Version be used as a Pydantic field type.

        Strings are parsed, Version instances pass through, and values
        serialize to their canonical string.
        """
        from_str = core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def parse(spec: str) -> Version:
    """Parse a version string. See Version.parse."""
    return Version.parse(spec)
