# SPDX-License-Identifier: MIT
"""Sort chronological versions."""

from __future__ import annotations

import click

from chronver import ChronVerError, sort_versions

from ..main import Context, describe_error, echo_error, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from newest to oldest.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order, one per line.

    \b
    Examples:
        chronver sort 2024.04.05 2024.04.03.1 2024.04.03
        chronver sort --reverse 2024.04.03-break 2024.04.03
    """
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except ChronVerError as e:
        echo_error(f"{e.text}: {describe_error(e)}")
        raise SystemExit(1)

    for version in ordered:
        click.echo(str(version))
