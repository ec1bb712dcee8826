# SPDX-License-Identifier: MIT
"""Compare two chronological versions."""

from __future__ import annotations

import click

from chronver import ChronVerError, compare_versions

from ..main import Context, describe_error, echo_error, pass_context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2.

    Prints -1 if VERSION1 is lower, 0 if both are equal and 1 if VERSION1
    is higher.

    \b
    Examples:
        chronver compare 2024.04.03 2024.04.03.1     # -1
        chronver compare 2024.04.03-break 2024.04.03 # 1
    """
    try:
        result = compare_versions(version1, version2)
    except ChronVerError as e:
        echo_error(f"{e.text}: {describe_error(e)}")
        raise SystemExit(1)

    click.echo(str(result))
