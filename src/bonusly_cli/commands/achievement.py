"""Achievement commands — list."""

from __future__ import annotations

import typer

from bonusly_cli.client.errors import error_handler
from bonusly_cli.commands._common import (
    EndpointOpt,
    FormatOpt,
    ProfileOpt,
    TokenOpt,
    make_client,
)
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="achievement", help="Browse achievements.")


@app.command("list")
@error_handler
def list_achievements(
    profile: ProfileOpt = None,
    endpoint: EndpointOpt = None,
    token: TokenOpt = None,
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """List achievements."""
    with make_client(profile, endpoint, token) as client:
        achievements = client.list_achievements()
    columns = ["ID", "Headline", "Receiver", "Department", "Importance"]
    rows = [
        [
            a.id,
            a.headline,
            a.receiver.display_name,
            a.scope.department,
            a.importance,
        ]
        for a in achievements
    ]
    output(achievements, fmt, columns=columns, rows=rows, title="Achievements")
