# SPDX-License-Identifier: MIT
"""Show the components of a chronological version."""

from __future__ import annotations

import click

from chronver import ChronVerError, Version, VersionModel

from ..main import Context, describe_error, echo_error, echo_info, pass_context


def _describe_kind(version: Version) -> str:
    if version.kind.is_regular:
        return "regular"
    if version.kind.is_breaking:
        return "breaking"
    return f"feature ({version.kind.name})"


@click.command()
@click.argument("version")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the structured JSON representation.",
)
@pass_context
def show(ctx: Context, version: str, as_json: bool) -> None:
    """Show the date, changeset and kind of VERSION.

    \b
    Examples:
        chronver show 2024.04.03.12-my-feature
        chronver show --json 2024.04.03-break
    """
    try:
        parsed = Version.parse(version)
    except ChronVerError as e:
        echo_error(f"{version}: {describe_error(e)}")
        raise SystemExit(1)

    if as_json:
        click.echo(VersionModel.from_version(parsed).to_json(indent=2))
        return

    echo_info(f"Version:   {parsed}")
    echo_info(f"Date:      {parsed.date}")
    echo_info(f"Changeset: {parsed.changeset if parsed.changeset is not None else '-'}")
    echo_info(f"Kind:      {_describe_kind(parsed)}")
