# SPDX-License-Identifier: MIT
"""CLI entry point for the chronver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from chronver import ChronVerError, __version__, iter_causes

from .config import CLIConfig, ConfigError, load_config


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
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def describe_error(error: ChronVerError) -> str:
    """Render an error and its causes as ``outer: inner: innermost``."""
    return ": ".join(str(e) for e in iter_causes(error))


@click.group()
@click.version_option(version=__version__, prog_name="chronver")
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
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Chronological version tool.

    Validate, inspect, compare, sort and bump versions of the form
    YYYY.MM.DD[.CHANGESET][-KIND].

    \b
    Examples:
        chronver validate 2024.04.03.1-break
        chronver show --json 2024.04.03.2
        chronver compare 2024.04.03 2024.04.03.1
        chronver sort 2024.04.05 2024.04.03.1 2024.04.03
        chronver bump --write
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register commands
from .commands import bump, compare, show, sort, validate

cli.add_command(validate.validate)
cli.add_command(show.show)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(bump.bump)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
