# SPDX-License-Identifier: MIT
"""Compute (and optionally store) the next chronological version."""

from __future__ import annotations

import logging
from typing import Optional

import click

from chronver import SYSTEM_CLOCK, ChronVerError, Date, FixedClock, Version

from ..config import ConfigError
from ..main import (
    Context,
    describe_error,
    echo_error,
    echo_success,
    pass_context,
)

logger = logging.getLogger(__name__)


def _parse_today(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[Date]:
    if value is None:
        return None
    try:
        return Date.parse(value)
    except ChronVerError as e:
        raise click.BadParameter(f"{value}: {describe_error(e)}") from e


@click.command()
@click.argument("version", required=False)
@click.option(
    "--today",
    callback=_parse_today,
    envvar="CHRONVER_TODAY",
    metavar="YYYY.MM.DD",
    help="Use this date as today instead of the system clock.",
)
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Store the new version where the current one is configured.",
)
@pass_context
def bump(ctx: Context, version: Optional[str], today: Optional[Date], write: bool) -> None:
    """Print the version that follows VERSION.

    A release on a new day drops the changeset; another release on the same
    day increments it. Any kind qualifier is removed. Without VERSION the
    project's configured version is used.

    \b
    Examples:
        chronver bump 2024.04.03                 # today's date, or 2024.04.03.1
        chronver bump --today 2024.04.03 2024.04.03.1-break   # 2024.04.03.2
        chronver bump --write                    # update pyproject.toml
    """
    config = None
    if version is None or write:
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    if version is None:
        if not config.version:
            echo_error("No version given and none configured in pyproject.toml")
            raise SystemExit(1)
        version = config.version

    try:
        current = Version.parse(version)
    except ChronVerError as e:
        echo_error(f"{version}: {describe_error(e)}")
        raise SystemExit(1)

    clock = FixedClock(today) if today is not None else SYSTEM_CLOCK
    logger.debug("Bumping %s using %r", current, clock)
    incremented = current.increment(clock)

    if write:
        try:
            path = config.write_version(str(incremented))
        except ConfigError as e:
            echo_error(str(e))
            raise SystemExit(1)
        echo_success(f"Updated {path.name}: {current} -> {incremented}")
        return

    click.echo(str(incremented))
