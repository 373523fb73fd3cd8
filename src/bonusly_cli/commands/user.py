"""User commands — list, show."""

from __future__ import annotations

from typing import Annotated

import typer

from bonusly_cli.client.errors import error_handler
from bonusly_cli.client.paginator import list_users_paginator
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
from bonusly_cli.config.constants import DEFAULT_USERS_PAGE_SIZE
from bonusly_cli.models.user import ListUsersParams, SortOrder, SortProperty, UserMode
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="user", help="Browse Bonusly users.")


@app.command("list")
@error_handler
def list_users(
    email: Annotated[
        str | None, typer.Option("--email", help="Only the user with this email"),
    ] = None,
    custom_property: Annotated[
        str | None,
        typer.Option("--custom-property", help="Filter, e.g. department=marketing"),
    ] = None,
    sort: Annotated[
        SortProperty | None, typer.Option("--sort", help="Sort by property"),
    ] = None,
    descending: Annotated[
        bool, typer.Option("--desc", help="Sort descending"),
    ] = False,
    include_archived: Annotated[
        bool, typer.Option("--include-archived", help="Include archived users"),
    ] = False,
    show_financial_data: Annotated[
        bool, typer.Option("--financial-data", help="Include financial data"),
    ] = False,
    user_mode: Annotated[
        UserMode | None, typer.Option("--mode", help="Filter by user mode"),
    ] = None,
    limit: LimitOpt = None,
    skip: SkipOpt = 0,
    fetch_all: AllOpt = False,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """List users, one page by default."""
    if fetch_all and skip:
        raise typer.BadParameter("--skip cannot be combined with --all")
    params = ListUsersParams(
        limit=limit or DEFAULT_USERS_PAGE_SIZE,
        skip=skip,
        email=email or "",
        custom_property_name=custom_property or "",
        sort_by=sort,
        sort_order=SortOrder.DESCENDING if descending else SortOrder.ASCENDING,
        include_archived=include_archived,
        show_financial_data=show_financial_data,
        user_mode=user_mode,
    )
    with make_client(profile, endpoint, token) as client:
        if fetch_all:
            users = list(list_users_paginator(client, params).items())
        else:
            users = client.list_users(params).items
    columns = ["ID", "Display Name", "Email", "Mode", "Country", "Hired On"]
    rows = [
        [u.id, u.display_name, u.email, u.user_mode, u.country, u.hired_on]
        for u in users
    ]
    output(users, fmt, columns=columns, rows=rows, title="Users")


@app.command()
@error_handler
def show(
    user_id: Annotated[str, typer.Argument(help="User ID")],
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """Show a user including balances."""
    with make_client(profile, endpoint, token) as client:
        user = client.get_user(user_id)
    output(user, fmt, title=f"User: {user.display_name or user_id}")
