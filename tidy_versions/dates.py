"""Calendar date stripping.

CI tags and build folders often glue a release date onto the real version
("2021-11-24.3", "2023.09.05-2", "2023-Nov-02-v3"). The rules below peel the
date off and hand the remaining fragment to the version extractor.

Rules are tried in order against the whole string and the first match wins.
Order matters: date/version boundaries are ambiguous, so the more specific
shapes come first.
"""

from __future__ import annotations

import re
from typing import NamedTuple

# Returned when a rule matches but leaves nothing to interpret. Resolves to
# the default version downstream.
DEFAULT_TOKEN = "1.0.0"

_YEAR = r"(?:19|20)\d{2}"
_MONTH = r"(?:0?[1-9]|1[0-2])"
_DAY = r"(?:0?[1-9]|[12]\d|3[01])"
_MONTH_NAME = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"


class DateRule(NamedTuple):
    """A named date shape. ``pattern`` must define a ``rest`` group."""

    name: str
    pattern: re.Pattern[str]


def _rule(name: str, pattern: str) -> DateRule:
    return DateRule(name, re.compile(pattern))


DATE_RULES: tuple[DateRule, ...] = (
    _rule("dd-mm-yyyy.n", r"\d{2}-\d{2}-\d{4}\.(?P<rest>\d+)"),
    _rule("yyyy-mm.dd-rest", r"\d{4}-\d{2}\.\d{2}-(?P<rest>.+)"),
    _rule("yyyy-mon-dd-rest", rf"\d{{4}}-{_MONTH_NAME}-\d{{2}}-(?P<rest>.+)"),
    _rule("yyyy-m-d.rest", rf"{_YEAR}-{_MONTH}-{_DAY}\.(?P<rest>.+)"),
    _rule("yyyy.m.d.rest", rf"{_YEAR}\.{_MONTH}\.{_DAY}\.(?P<rest>.+)"),
    _rule("yyyy.m.d-rest", rf"{_YEAR}\.{_MONTH}\.{_DAY}-(?P<rest>.+)"),
    _rule("yyyy.d.m-rest", rf"{_YEAR}\.{_DAY}\.{_MONTH}-(?P<rest>.+)"),
    _rule("yyyy.mm-dd-n", r"\d{4}\.\d{2}-\d{2}-(?P<rest>\d+)"),
    _rule("yyyy-mm-dd_n", r"\d{4}-\d{2}-\d{2}_(?P<rest>\d+)"),
    _rule("yyyy-m-d-word", rf"{_YEAR}-{_MONTH}-{_DAY}-(?P<rest>\w+)"),
)


def match_date(raw: str) -> tuple[str, str] | None:
    """Find the first date rule matching ``raw``.

    Returns:
        ``(rule name, rest)`` for the winning rule, or None if no rule
        matches. ``rest`` is ``DEFAULT_TOKEN`` when the rule leaves no
        fragment behind.
    """
    for rule in DATE_RULES:
        match = rule.pattern.fullmatch(raw)
        if match:
            return rule.name, match.group("rest") or DEFAULT_TOKEN
    return None


def strip_date(raw: str) -> str:
    """Remove a recognized calendar date, returning the version fragment.

    Examples:
        "2021-11-24.3" → "3"
        "2023-Nov-02-v3" → "v3"
        "0.2.0-alpha.6" → "0.2.0-alpha.6" (no date, unchanged)
    """
    found = match_date(raw)
    return found[1] if found else raw
