"""Bonus commands — give."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from bonusly_cli.client.errors import error_handler
from bonusly_cli.commands._common import (
    EndpointOpt,
    ProfileOpt,
    TokenOpt,
    make_client,
)
from bonusly_cli.models.bonus import CreateBonusInput

app = typer.Typer(name="bonus", help="Give bonuses.")
console = Console()


@app.command()
@error_handler
def give(
    amount: Annotated[int, typer.Argument(min=1, help="Points per receiver")],
    receivers: Annotated[
        list[str], typer.Argument(help="Usernames of the receivers"),
    ],
    reason: Annotated[
        str, typer.Option("--reason", "-r", help="Reason, e.g. 'for the review #teamwork'"),
    ],
    giver: Annotated[
        str, typer.Option("--giver", help="Email of the giving user"),
    ],
    parent: Annotated[
        str | None, typer.Option("--parent", help="Add on to this bonus ID"),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Print the bonus text without sending"),
    ] = False,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
) -> None:
    """Give AMOUNT points to one or more RECEIVERS."""
    bonus = CreateBonusInput(
        giver_email=giver,
        receivers=receivers,
        reason=reason,
        amount=amount,
        parent_bonus_id=parent or "",
    )
    if dry_run:
        console.print(bonus.reason_text(), markup=False)
        return
    with make_client(profile, endpoint, token) as client:
        client.create_bonus(bonus)
    console.print(f"[green]Bonus sent:[/] {bonus.reason_text()}")
