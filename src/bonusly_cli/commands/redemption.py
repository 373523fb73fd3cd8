"""Redemption commands — list, show."""

from __future__ import annotations

from typing import Annotated

import typer

from bonusly_cli.client.errors import error_handler
from bonusly_cli.client.paginator import list_redemptions_paginator
from bonusly_cli.commands._common import (
    AllOpt,
    EndpointOpt,
    FormatOpt,
    LimitOpt,
    ProfileOpt,
    SkipOpt,
    TokenOpt,
    make_client,
)
from bonusly_cli.config.constants import DEFAULT_REDEMPTIONS_PAGE_SIZE
from bonusly_cli.models.redemption import ListRedemptionsParams
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="redemption", help="Browse reward redemptions.")


@app.command("list")
@error_handler
def list_redemptions(
    limit: LimitOpt = None,
    skip: SkipOpt = 0,
    fetch_all: AllOpt = False,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """List redemptions, one page by default."""
    if fetch_all and skip:
        raise typer.BadParameter("--skip cannot be combined with --all")
    params = ListRedemptionsParams(
        limit=limit or DEFAULT_REDEMPTIONS_PAGE_SIZE, skip=skip,
    )
    with make_client(profile, endpoint, token) as client:
        if fetch_all:
            redemptions = list(list_redemptions_paginator(client, params).items())
        else:
            redemptions = client.list_redemptions(params).items
    columns = ["ID", "User", "Title", "Points", "USD"]
    rows = [
        [r.id, r.user_email, r.title, r.amount_in_points, r.amount_in_usd]
        for r in redemptions
    ]
    output(redemptions, fmt, columns=columns, rows=rows, title="Redemptions")


@app.command()
@error_handler
def show(
    redemption_id: Annotated[str, typer.Argument(help="Redemption ID")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """Show a redemption and the redeemed reward."""
    with make_client(profile, endpoint, token) as client:
        redemption = client.get_redemption(redemption_id)
    output(redemption, fmt, title=f"Redemption: {redemption_id}")
