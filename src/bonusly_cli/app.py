"""Root Typer app — global options and command group registration."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from bonusly_cli import __version__
from bonusly_cli.commands import (
    achievement,
    bonus,
    config_cmd,
    redemption,
    reward,
    user,
    webhook,
)

app = typer.Typer(
    name="bonusly",
    help="CLI tool for the Bonusly recognition and rewards API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"bonusly-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log HTTP requests and pagination to stderr."
    ),
) -> None:
    """Bonusly CLI — browse users, redemptions and rewards, give bonuses, manage webhooks."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            handlers=[
                RichHandler(console=Console(stderr=True), show_time=False, show_path=False),
            ],
        )
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)


# Register command groups
app.add_typer(config_cmd.app, name="config")
app.add_typer(user.app, name="user")
app.add_typer(redemption.app, name="redemption")
app.add_typer(reward.app, name="reward")
app.add_typer(bonus.app, name="bonus")
app.add_typer(webhook.app, name="webhook")
app.add_typer(achievement.app, name="achievement")


def main() -> None:
    app()
