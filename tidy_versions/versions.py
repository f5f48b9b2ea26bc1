"""Version normalization and bumping utilities.

Turns arbitrary version-like strings (CI tags, build folder names, release
labels) into semver objects. The pipeline is:

1. Strip an embedded calendar date (see ``tidy_versions.dates``).
2. Match what is left against ``VERSION_RULES``, first match wins, and pad
   the result to a full major.minor.patch triple.
3. Fall back to ``DEFAULT_VERSION`` when nothing matches.

Normalization never raises; unusable input always yields the default.
"""

from __future__ import annotations

import re
import sys
from typing import NamedTuple

import semver
from pydantic import BaseModel, Field, field_validator

from .dates import match_date
from .models import Resolution

DEFAULT_VERSION = semver.Version(1, 0, 0)
DEFAULT_VERSION_STRING = str(DEFAULT_VERSION)
DEFAULT_RULE = "default"

BUMP_PARTS = ("major", "minor", "patch")


class VersionOverflowError(OverflowError):
    """A bumped component would be too long to render as a decimal string."""

    def __init__(self, version: semver.Version, part: str) -> None:
        self.version = version
        self.part = part
        super().__init__(
            f"Cannot bump {part}: result exceeds "
            f"{sys.get_int_max_str_digits()} digits"
        )


def _fits(value: int) -> bool:
    """True if ``value`` can be converted to a decimal string."""
    limit = sys.get_int_max_str_digits()
    return limit == 0 or value < 10**limit


def _checked(version: semver.Version, part: str) -> semver.Version:
    if not all(_fits(n) for n in (version.major, version.minor, version.patch)):
        raise VersionOverflowError(version, part)
    return version


class VersionRule(NamedTuple):
    """A named version shape.

    Named groups ``major``, ``minor``, ``patch`` and ``build`` are read from
    the match; missing groups count as 0 and ``build`` is added to the patch.
    A pattern without a ``major`` group maps to the default version.

    ``on_original`` rules see the string before the leading "v" is removed.
    """

    name: str
    pattern: re.Pattern[str]
    on_original: bool = False


def _rule(name: str, pattern: str, *, on_original: bool = False) -> VersionRule:
    return VersionRule(name, re.compile(pattern), on_original)


_TRIPLE = r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"

VERSION_RULES: tuple[VersionRule, ...] = (
    # A bare dotted date carries no version information
    _rule("calendar-date", r"(?:19|20)\d{2}\.\d{2}\.\d{2}", on_original=True),
    _rule("major", r"0*(?P<major>\d+)"),
    _rule("major-minor", r"(?P<major>\d+)\.(?P<minor>\d+)"),
    _rule("major-minor-patch", _TRIPLE),
    _rule("full-with-metadata", _TRIPLE + r"-[\w.-]+"),
    # Must run before leading-digits: "2023-023-29-v3" is 3, not 2023.
    # Any "<digits>-<text>-v<digits>" input takes the trailing number
    # ("5-foo-v3" → 3.0.0, not 5.0.0).
    _rule("trailing-v-marker", r".+-v(?P<major>\d+)"),
    _rule("leading-digits", r"(?P<major>\d+)(?:-.*)?"),
    _rule("four-part", _TRIPLE + r"\.(?P<build>\d+)"),
)


def _version_from_match(match: re.Match[str]) -> semver.Version:
    """Build a semver.Version from a rule match.

    Raises:
        ValueError: If a digit group is too long for int(), or a component
            (the four-part patch sum) is too long to render back.
    """
    groups = match.groupdict()
    if "major" not in groups:
        return DEFAULT_VERSION
    major = int(groups["major"])
    minor = int(groups.get("minor") or 0)
    patch = int(groups.get("patch") or 0) + int(groups.get("build") or 0)
    if not _fits(patch):
        raise ValueError("patch component exceeds the int string limit")
    return semver.Version(major, minor, patch)


def _apply_rules(candidate: str) -> tuple[str, semver.Version]:
    """Run the rule cascade and return (rule name, version)."""
    stripped = candidate[1:] if candidate[:1] in ("v", "V") else candidate
    for rule in VERSION_RULES:
        match = rule.pattern.fullmatch(candidate if rule.on_original else stripped)
        if not match:
            continue
        try:
            return rule.name, _version_from_match(match)
        except ValueError:
            # Digit strings past the interpreter's int/str limit
            return DEFAULT_RULE, DEFAULT_VERSION
    return DEFAULT_RULE, DEFAULT_VERSION


def standardize(candidate: str) -> semver.Version:
    """Extract a full version from a date-free candidate string.

    Examples:
        "v3" → 3.0.0
        "1.2" → 1.2.0
        "0.2.0-alpha.6" → 0.2.0
        "1.3.3.1" → 1.3.4 (fourth component folded into the patch)
        "release-candidate" → 1.0.0 (default)
    """
    return _apply_rules(candidate)[1]


def parse_version(version_str: str) -> semver.Version:
    """Parse any version-like string into a semver.Version object.

    Runs the full pipeline: date stripping, then standardization. Handles
    incomplete versions by padding with zeros:
    - "1" → "1.0.0"
    - "1.2" → "1.2.0"
    - "2021-11-24.3" → "3.0.0"

    Prerelease/build metadata is dropped. Never raises.
    """
    found = match_date(version_str)
    return standardize(found[1] if found else version_str)


def resolve(version_str: str) -> Resolution:
    """Run the pipeline and report which rules produced the result."""
    found = match_date(version_str)
    date_rule, candidate = found if found else (None, version_str)
    version_rule, version = _apply_rules(candidate)
    return Resolution(
        original=version_str,
        candidate=candidate,
        date_rule=date_rule,
        version_rule=version_rule,
        version=str(version),
        # Identity, not equality: a literal "1.0.0" input is not a fallback
        is_default=version is DEFAULT_VERSION,
    )


def bump(version_str: str, part: str = "patch") -> str:
    """Normalize ``version_str``, bump ``part`` and return the new version.

    Lower components are reset to zero.

    Raises:
        ValueError: If ``part`` is not one of major, minor or patch.
        VersionOverflowError: If the bumped component is too long to render.
    """
    if part not in BUMP_PARTS:
        raise ValueError(f"Unknown version part: {part!r}")
    version = parse_version(version_str)
    return str(_checked(getattr(version, f"bump_{part}")(), part))


def bump_patch(version_str: str) -> str:
    """Increment the patch version and return as a string.

    Examples:
        "1.2.3" → "1.2.4"
        "1.0" → "1.0.1"
        "2" → "2.0.1"
    """
    return bump(version_str, "patch")


class ComposedVersion(BaseModel):
    """A raw version string together with its canonical triple.

    ``original`` is frozen; assigning to it raises a ValidationError. The
    triple only changes through the bump methods. Components are plain ints,
    so bumping never wraps; a bump that would outgrow the interpreter's
    int/str limit raises VersionOverflowError and leaves the triple as is.
    """

    original: str = Field(frozen=True)
    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)

    @field_validator("major", "minor", "patch")
    @classmethod
    def check_renderable(cls, value: int) -> int:
        if not _fits(value):
            raise ValueError("component exceeds the int string limit")
        return value

    @classmethod
    def from_string(cls, original: str) -> ComposedVersion:
        """Normalize ``original``. Never raises."""
        version = parse_version(original)
        return cls(
            original=original,
            major=version.major,
            minor=version.minor,
            patch=version.patch,
        )

    @property
    def standardized(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.patch

    def to_semver(self) -> semver.Version:
        return semver.Version(self.major, self.minor, self.patch)

    def _set(self, version: semver.Version, part: str) -> None:
        _checked(version, part)
        self.major = version.major
        self.minor = version.minor
        self.patch = version.patch

    def bump_major(self) -> None:
        self._set(self.to_semver().bump_major(), "major")

    def bump_minor(self) -> None:
        self._set(self.to_semver().bump_minor(), "minor")

    def bump_patch(self) -> None:
        self._set(self.to_semver().bump_patch(), "patch")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def compose(original: str) -> ComposedVersion:
    """Shorthand for ``ComposedVersion.from_string``."""
    return ComposedVersion.from_string(original)
