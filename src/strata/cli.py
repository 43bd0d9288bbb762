# SPDX-License-Identifier: MIT
"""CLI entry point for the strata command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import CLIConfig, load_config
from .errors import ConfigError, ParseError
from .parser import parse_version
from .range import VersionRange
from .range_parser import parse_version_range
from .version import Ordering, Version, compare


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
            if self.verbose:
                self.config.verbose = True
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str, color: bool = True) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red" if color else None, err=True)


def echo_success(message: str, color: bool = True) -> None:
    """Print a success message."""
    click.secho(message, fg="green" if color else None)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str, color: bool = True) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow" if color else None, err=True)


def _load_version(text: str, color: bool = True) -> Version:
    try:
        return parse_version(text)
    except ParseError as e:
        echo_error(f"Invalid version '{text}': {e.pointer()}", color)
        sys.exit(1)


def _load_range(text: str, color: bool = True) -> VersionRange:
    try:
        return parse_version_range(text)
    except ParseError as e:
        echo_error(f"Invalid version range '{text}': {e.pointer()}", color)
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@click.group()
@click.version_option(package_name="strata")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.strata] from the pyproject.toml in this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and match semantic versions.

    \b
    Examples:
        strata parse 1.2.3-rc.1+build.5
        strata compare 1.0.0-alpha 1.0.0
        strata check --range "[1.0.0,2.0.0)" 1.4.2
        strata sort 1.0.0 1.0.0-rc.1 0.9.0
        strata range 1.2.+
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    _configure_logging(config.verbose)


@cli.command("parse")
@click.argument("version")
@pass_context
def parse_command(ctx: Context, version: str) -> None:
    """Print the canonical form and components of VERSION."""
    parsed = _load_version(version, ctx.load_config().color)
    echo_info(str(parsed))
    echo_info(f"  major:      {parsed.major}")
    echo_info(f"  minor:      {parsed.minor}")
    echo_info(f"  patch:      {parsed.patch}")
    if parsed.prerelease:
        echo_info(f"  prerelease: {'.'.join(str(i) for i in parsed.prerelease)}")
    if parsed.build:
        echo_info(f"  build:      {'.'.join(parsed.build)}")


_ORDERING_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


@cli.command("compare")
@click.argument("left")
@click.argument("right")
@pass_context
def compare_command(ctx: Context, left: str, right: str) -> None:
    """Print '<', '=' or '>' for the precedence of LEFT against RIGHT."""
    color = ctx.load_config().color
    result = compare(_load_version(left, color), _load_version(right, color))
    echo_info(f"{left} {_ORDERING_SYMBOLS[result]} {right}")


@cli.command("check")
@click.option(
    "--range",
    "-r",
    "range_text",
    help="Version range to check against. Defaults to tool.strata.range.",
)
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check_command(ctx: Context, range_text: Optional[str], versions: tuple[str, ...]) -> None:
    """Check that every VERSION satisfies a version range.

    Exits with status 1 if any version falls outside the range.
    """
    config = ctx.load_config()
    range_text = range_text or config.range
    if not range_text:
        raise click.UsageError("No range given. Pass --range or set tool.strata.range.")

    version_range = _load_range(range_text, config.color)
    failed = 0
    for text in versions:
        if version_range.is_satisfied_by(_load_version(text, config.color)):
            echo_success(f"{text} satisfies {version_range}", config.color)
        else:
            echo_warning(f"{text} does not satisfy {version_range}", config.color)
            failed += 1

    if failed:
        sys.exit(1)


@cli.command("sort")
@click.option("--reverse", is_flag=True, help="Print the highest version first.")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def sort_command(ctx: Context, reverse: bool, versions: tuple[str, ...]) -> None:
    """Print VERSIONS in precedence order."""
    color = ctx.load_config().color
    parsed = sorted(
        ((_load_version(text, color), text) for text in versions), key=lambda p: p[0], reverse=reverse
    )
    for _, text in parsed:
        echo_info(text)


@cli.command("range")
@click.argument("range_text", metavar="RANGE")
@pass_context
def range_command(ctx: Context, range_text: str) -> None:
    """Print the interval form of RANGE."""
    echo_info(str(_load_range(range_text, ctx.load_config().color)))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
