# SPDX-License-Identifier: MIT
"""CLI entry point for the verbump command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource

from verbump_version import InvalidVersionError, ReleaseTypeError, is_valid_semver

from .config import ConfigError, load_config
from .git import GitTagError
from .run import RequestError, RunRequest, execute

INCREMENT_HELP = (
    "Increment the latest valid version by LEVEL: major, minor, patch, "
    "premajor, preminor, prepatch or prerelease. Without LEVEL, patch is used."
)
PREID_HELP = "Identifier to prefix premajor, preminor, prepatch or prerelease increments."


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message to stderr, keeping stdout for results."""
    click.echo(message, err=True)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.command()
@click.version_option(package_name="verbump")
@click.argument("versions", nargs=-1)
@click.option(
    "-i",
    "--increment",
    is_flag=False,
    flag_value="patch",
    default=None,
    metavar="[LEVEL]",
    help=INCREMENT_HELP,
)
@click.option("--preid", default=None, help=PREID_HELP)
@click.option(
    "-r",
    "--repo-dir",
    is_flag=False,
    flag_value=".",
    default=None,
    type=click.Path(path_type=Path),
    metavar="[PATH]",
    help="Use tags from a local git repo as source of versions.",
)
@click.option(
    "-d",
    "--default",
    "default_version",
    is_flag=False,
    flag_value="0.0.0",
    default=None,
    metavar="[VERSION]",
    help="Default version to use when no valid versions are provided.",
)
@click.option(
    "-l",
    "--latest-only/--all-versions",
    default=False,
    help="Only return the latest version.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.verbump] configuration from this project directory.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
def cli(
    versions: tuple[str, ...],
    increment: Optional[str],
    preid: Optional[str],
    repo_dir: Optional[Path],
    default_version: Optional[str],
    latest_only: bool,
    directory: Optional[Path],
    verbose: bool,
) -> None:
    """Validate, sort and increment semantic versions.

    Valid VERSIONS (and repository tags with --repo-dir) are printed in
    ascending order. With --increment, the latest valid version is
    incremented and only the new version is printed.

    \b
    Examples:
        verbump 1.2.3 v1.10 not-a-version   # 1.2.3 1.10.0
        verbump -l 1.2.3 v1.10              # 1.10.0
        verbump --increment minor 1.2.3     # 1.3.0
        verbump -i 1.2.3                    # 1.2.4
        verbump 1.2.3 -i prerelease --preid rc   # 1.2.4-rc.0
        verbump -r . -d -i                  # next patch from git tags
    """
    try:
        config = load_config(directory)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if click.get_current_context().get_parameter_source("latest_only") is ParameterSource.DEFAULT:
        latest_only = config.latest_only

    # A bare -i or -r directly before a version must not take it as its value
    if increment is not None and is_valid_semver(increment):
        versions = (increment, *versions)
        increment = "patch"
    if repo_dir is not None and not repo_dir.exists() and is_valid_semver(str(repo_dir)):
        versions = (str(repo_dir), *versions)
        repo_dir = Path(".")

    request = RunRequest(
        versions=versions,
        increment=increment or "",
        preid=preid if preid is not None else config.preid,
        default_version=default_version if default_version is not None else config.default_version,
        repo_dir=repo_dir,
        latest_only=latest_only,
    )

    if verbose and config.has_pyproject():
        echo_info(f"Configuration: {config.project_dir / 'pyproject.toml'}")

    try:
        result = execute(request)
    except RequestError as e:
        echo_error(str(e))
        raise SystemExit(2)
    except (InvalidVersionError, ReleaseTypeError, GitTagError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if verbose:
        echo_info(f"Candidates: {len(result.candidates)}, valid: {len(result.valid)}")
        if result.dropped:
            echo_warning(f"Ignored {result.dropped} invalid version(s)")
        if request.increment and result.valid:
            echo_info(f"Incrementing {result.valid[-1]} ({request.increment})")

    if result.output is not None:
        click.echo(result.output)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
