"""TOML reading utilities.

pyproject.toml files are only ever read here; tidy-versions never writes
them back.
"""

from __future__ import annotations

from pathlib import Path

import tomlkit
from packaging.utils import canonicalize_name

TOOL_TABLE = "tidy-versions"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a pyproject.toml file."""
    return tomlkit.parse(path.read_text())


def get_project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Extract the canonical package name from [project].name.

    Names are normalized per PEP 503 (lowercase, hyphens instead of
    underscores).

    Args:
        doc: Parsed pyproject.toml document.
        fallback: Value to return if name is not specified.
    """
    return canonicalize_name(doc.get("project", {}).get("name", fallback))


def get_project_version(doc: tomlkit.TOMLDocument) -> str:
    """Extract version from [project].version, defaulting to '0.0.0'."""
    return str(doc.get("project", {}).get("version", "0.0.0"))


def get_tool_config(doc: tomlkit.TOMLDocument) -> dict[str, object]:
    """Return the [tool.tidy-versions] table as a plain dict (may be empty).

    Raises:
        ValueError: If ``tool.tidy-versions`` is present but not a table.
    """
    table = doc.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"[tool.{TOOL_TABLE}] must be a table, got {table!r}")
    return dict(table)


def get_bump_part(doc: tomlkit.TOMLDocument, default: str = "patch") -> str:
    """Read the configured bump part from [tool.tidy-versions].bump."""
    return str(get_tool_config(doc).get("bump", default))
