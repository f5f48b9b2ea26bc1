"""tidy-versions - canonical major.minor.patch versions from messy strings."""

from .dates import strip_date
from .models import Resolution, VersionBump
from .versions import (
    DEFAULT_VERSION,
    ComposedVersion,
    VersionOverflowError,
    bump,
    bump_patch,
    compose,
    parse_version,
    resolve,
    standardize,
)

__all__ = [
    "DEFAULT_VERSION",
    "ComposedVersion",
    "VersionOverflowError",
    "Resolution",
    "VersionBump",
    "bump",
    "bump_patch",
    "compose",
    "parse_version",
    "resolve",
    "standardize",
    "strip_date",
]
