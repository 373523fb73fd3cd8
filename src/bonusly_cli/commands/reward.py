"""Reward commands — list, show."""

from __future__ import annotations

from typing import Annotated

import typer

from bonusly_cli.client.errors import error_handler
from bonusly_cli.commands._common import (
    EndpointOpt,
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    make_client,
)
from bonusly_cli.models.reward import ListRewardsParams, RewardType
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="reward", help="Browse the reward catalog.")

CountryOpt = Annotated[
    str | None,
    typer.Option("--request-country", help="Country the request is made from"),
]


@app.command("list")
@error_handler
def list_rewards(
    catalog_country: Annotated[
        str | None, typer.Option("--catalog-country", help="Catalog country"),
    ] = None,
    request_country: CountryOpt = None,
    personalize_for: Annotated[
        str | None,
        typer.Option("--personalize-for", help="Personalize for this user"),
    ] = None,
    reward_type: Annotated[
        RewardType | None, typer.Option("--type", help="Only rewards of this type"),
    ] = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """List the reward catalog."""
    params = ListRewardsParams(
        catalog_country=catalog_country or "",
        request_country=request_country or "",
        personalize_for=personalize_for or "",
    )
    with make_client(profile, endpoint, token) as client:
        rewards = client.list_rewards(params)
    if reward_type is not None:
        rewards = [r for r in rewards if r.type == reward_type]
    columns = ["Type", "Name", "From", "Categories", "Denominations"]
    rows = [
        [
            r.type,
            r.name,
            r.minimum_display_price,
            r.categories,
            [d.display_price for d in r.denominations],
        ]
        for r in rewards
    ]
    output(rewards, fmt, columns=columns, rows=rows, title="Rewards")


@app.command()
@error_handler
def show(
    reward_id: Annotated[str, typer.Argument(help="Reward ID")],
    request_country: CountryOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """Show a single reward."""
    with make_client(profile, endpoint, token) as client:
        reward = client.get_reward(reward_id, request_country=request_country or "")
    output(reward, fmt, title=f"Reward: {reward.name or reward_id}")
