"""Webhook commands — list, create, update, delete.

The API does not paginate webhooks; ``list`` always returns all of them.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from bonusly_cli.client.errors import error_handler
from bonusly_cli.commands._common import (
    EndpointOpt,
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    make_client,
)
from bonusly_cli.models.webhook import (
    CreateWebhookInput,
    UpdateWebhookInput,
    WebhookEventType,
)
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="webhook", help="Manage webhooks.")
console = Console()

EventOpt = Annotated[
    list[WebhookEventType] | None,
    typer.Option("--event", "-e", help="Event type to subscribe to (repeatable)"),
]


@app.command("list")
@error_handler
def list_webhooks(
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """List webhooks."""
    with make_client(profile, endpoint, token) as client:
        webhooks = client.list_webhooks()
    columns = ["ID", "URL", "Events"]
    rows = [[w.id, w.url, w.event_types] for w in webhooks]
    output(webhooks, fmt, columns=columns, rows=rows, title="Webhooks")


@app.command()
@error_handler
def create(
    url: Annotated[str, typer.Argument(help="URL that events are POSTed to")],
    events: EventOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
) -> None:
    """Create a webhook."""
    webhook = CreateWebhookInput(url=url, event_types=events or [])
    with make_client(profile, endpoint, token) as client:
        webhook_id = client.create_webhook(webhook)
    console.print(f"[green]Webhook '{webhook_id}' created.[/]")


@app.command()
@error_handler
def update(
    webhook_id: Annotated[str, typer.Argument(help="Webhook ID")],
    url: Annotated[
        str | None, typer.Option("--url", help="New URL (unchanged if omitted)"),
    ] = None,
    events: EventOpt = None,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
) -> None:
    """Update a webhook's URL or event types."""
    webhook = UpdateWebhookInput(
        id=webhook_id,
        url=url or None,
        event_types=events or [],
    )
    with make_client(profile, endpoint, token) as client:
        client.update_webhook(webhook)
    console.print(f"[green]Webhook '{webhook_id}' updated.[/]")


@app.command()
@error_handler
def delete(
    webhook_id: Annotated[str, typer.Argument(help="Webhook ID")],
    force: Annotated[bool, typer.Option("--force", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
) -> None:
    """Delete a webhook."""
    if not force:
        from rich.prompt import Confirm

        if not Confirm.ask(f"Delete webhook '{webhook_id}'?"):
            console.print("Cancelled.")
            return
    with make_client(profile, endpoint, token) as client:
        client.delete_webhook(webhook_id)
    console.print(f"[green]Webhook '{webhook_id}' deleted.[/]")
