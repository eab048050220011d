"""buildver - parse, order and classify build version identifiers.

A package for semantic versions with pre-release ordering, build metadata and
integration builds.
"""

from ._version import __version__
from .constants import INTEGRATION, MAX_COMPONENT
from .exceptions import (
    InvalidComponentError,
    VersionError,
    VersionFormatError,
)
from .pre_release import (
    NumericPart,
    PreRelease,
    PreReleasePart,
    TextualPart,
    compare_parts,
)
from .version import Version, parse

__all__ = [
    "INTEGRATION",
    "MAX_COMPONENT",
    "InvalidComponentError",
    "NumericPart",
    "PreRelease",
    "PreReleasePart",
    "TextualPart",
    "Version",
    "VersionError",
    "VersionFormatError",
    "__version__",
    "compare_parts",
    "parse",
]
