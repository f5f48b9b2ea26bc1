"""CLI entry point for tidy-versions."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from tidy_versions.models import VersionBump
from tidy_versions.shell import latest_tag
from tidy_versions.toml import (
    get_bump_part,
    get_project_name,
    get_project_version,
    load_pyproject,
)
from tidy_versions.versions import (
    BUMP_PARTS,
    VersionOverflowError,
    parse_version,
    resolve,
)
from tidy_versions.versions import bump as bump_version


def _source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared RAW / --git-tag / --pyproject inputs to a command."""
    func = click.option(
        "--pyproject",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read [project].version from this pyproject.toml.",
    )(func)
    func = click.option(
        "--git-tag", is_flag=True, help="Read the latest tag reachable from HEAD."
    )(func)
    return click.argument("raw", nargs=-1)(func)


def _collect_sources(
    raw: tuple[str, ...], git_tag: bool, pyproject: Path | None
) -> list[tuple[str | None, str]]:
    """Gather (label, version string) pairs from every requested source."""
    sources: list[tuple[str | None, str]] = [(None, value) for value in raw]

    if git_tag:
        tag = latest_tag()
        if tag is None:
            raise click.ClickException("No git tags found.")
        sources.append(("git", tag))

    if pyproject is not None:
        doc = load_pyproject(pyproject)
        name = get_project_name(doc, pyproject.parent.name)
        sources.append((name, get_project_version(doc)))

    if not sources:
        raise click.UsageError("Pass a version string, --git-tag or --pyproject.")
    return sources


def _label(label: str | None) -> str:
    return f"[{label}] " if label else ""


@click.group()
@click.version_option(package_name="tidy-versions")
def cli() -> None:
    """Normalize messy version strings into major.minor.patch."""


@cli.command()
@_source_options
def show(raw: tuple[str, ...], git_tag: bool, pyproject: Path | None) -> None:
    """Print the canonical version for each input."""
    for label, value in _collect_sources(raw, git_tag, pyproject):
        resolution = resolve(value)
        suffix = " (default)" if resolution.is_default else ""
        click.echo(f"{_label(label)}{value} → {resolution.version}{suffix}")


@cli.command()
@_source_options
def explain(raw: tuple[str, ...], git_tag: bool, pyproject: Path | None) -> None:
    """Show which date and version rules fired for each input."""
    for label, value in _collect_sources(raw, git_tag, pyproject):
        resolution = resolve(value)
        click.echo(f"{_label(label)}{resolution.original}")
        click.echo(f"  candidate:    {resolution.candidate}")
        click.echo(f"  date rule:    {resolution.date_rule or '<none>'}")
        click.echo(f"  version rule: {resolution.version_rule}")
        click.echo(f"  version:      {resolution.version}")


@cli.command()
@_source_options
@click.option(
    "--part",
    type=click.Choice(BUMP_PARTS),
    default=None,
    help=(
        "Component to bump. Defaults to [tool.tidy-versions].bump when "
        "--pyproject is given (applied to every input), then patch."
    ),
)
def bump(
    raw: tuple[str, ...], git_tag: bool, pyproject: Path | None, part: str | None
) -> None:
    """Normalize each input and print the bumped version."""
    if part is None:
        part = "patch"
        if pyproject is not None:
            try:
                part = get_bump_part(load_pyproject(pyproject))
            except ValueError as exc:
                raise click.BadParameter(str(exc), param_hint="--pyproject") from exc
            if part not in BUMP_PARTS:
                raise click.BadParameter(
                    f"[tool.tidy-versions].bump must be one of "
                    f"{', '.join(BUMP_PARTS)}, got {part!r}",
                    param_hint="--pyproject",
                )

    for label, value in _collect_sources(raw, git_tag, pyproject):
        try:
            new = bump_version(value, part)
        except VersionOverflowError as exc:
            raise click.ClickException(f"{value}: {exc}") from exc
        record = VersionBump(original=value, old=str(parse_version(value)), new=new)
        click.echo(f"{_label(label)}{record.original}: {record.old} → {record.new}")
