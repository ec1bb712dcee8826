# SPDX-License-Identifier: MIT
"""Validate chronological version strings."""

from __future__ import annotations

import click

from chronver import ChronVerError, Version

from ..config import ConfigError
from ..main import Context, describe_error, echo_error, echo_info, echo_success, pass_context


@click.command()
@click.argument("versions", nargs=-1)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report invalid versions.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Validate one or more versions.

    Without arguments the project's configured version is validated.
    Exits with status 1 if any version is invalid.

    \b
    Examples:
        chronver validate 2024.04.03.1-break
        chronver validate 2024.04.03 2024.13.01
        chronver validate                     # Validate the project version
    """
    if not versions:
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)
        if not config.version:
            echo_error("No version given and none configured in pyproject.toml")
            raise SystemExit(1)
        versions = (config.version,)

    invalid = 0
    for text in versions:
        try:
            version = Version.parse(text)
        except ChronVerError as e:
            invalid += 1
            echo_error(f"{text}: {describe_error(e)}")
            continue
        if not quiet:
            echo_info(f"{version}: valid")

    if invalid:
        echo_error(f"\n{invalid} of {len(versions)} versions invalid")
        raise SystemExit(1)

    if not quiet:
        echo_success("\nAll versions valid!")
