"""Data models for tidy-versions.

These Pydantic models carry normalization results to callers and to the
command line.
"""

from __future__ import annotations

from pydantic import BaseModel


class Resolution(BaseModel):
    """How a raw version string was turned into a canonical version.

    Attributes:
        original: The raw input, verbatim.
        candidate: What was left after date stripping. Equal to
                   ``original`` when no date rule matched.
        date_rule: Name of the date rule that fired, or None.
        version_rule: Name of the extractor rule that produced the version,
                      or "default" when nothing could be recovered.
        version: Canonical "major.minor.patch" string.
        is_default: True when no version information was recovered and
                    ``version`` is the fallback.
    """

    original: str
    candidate: str
    date_rule: str | None = None
    version_rule: str
    version: str
    is_default: bool = False


class VersionBump(BaseModel):
    """Records a version change.

    Attributes:
        original: The raw string the version was normalized from.
        old: The canonical version before bumping.
        new: The canonical version after bumping.
    """

    original: str
    old: str
    new: str
