"""Shared test fixtures."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
import tomlkit


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    content = """\
[project]
name = "Test_Package"
version = "2023.09.05-2"
dependencies = ["requests>=2.0"]
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def configured_pyproject(tmp_path: Path) -> Path:
    """A pyproject.toml that configures the default bump part."""
    content = """\
[project]
name = "configured"
version = "v1.13.1"

[tool.tidy-versions]
bump = "minor"
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
version = "2.0.0"

[tool.tidy-versions]
bump = "major"
"""
    return tomlkit.parse(content)


@pytest.fixture
def low_int_digit_limit() -> Iterator[int]:
    """Lower the int/str conversion limit to its minimum for the test."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    try:
        yield 640
    finally:
        sys.set_int_max_str_digits(previous)
