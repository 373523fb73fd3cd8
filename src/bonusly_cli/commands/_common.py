"""Options shared by the API commands and the client factory they use."""

from __future__ import annotations

from typing import Annotated

import typer

from bonusly_cli.client.api import BonuslyClient
from bonusly_cli.config.manager import ConfigManager
from bonusly_cli.output.formatter import OutputFormat

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Configuration profile"),
]
EndpointOpt = Annotated[
    str | None,
    typer.Option("--endpoint", help="API base URL, overrides the profile"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", help="API access token, overrides the profile"),
]
FormatOpt = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format", case_sensitive=False),
]

# Paging
LimitOpt = Annotated[
    int | None,
    typer.Option("--limit", min=1, help="Page size"),
]
SkipOpt = Annotated[
    int,
    typer.Option("--skip", min=0, help="Number of items to skip"),
]
AllOpt = Annotated[
    bool,
    typer.Option("--all", help="Fetch every page instead of only the first"),
]


def make_client(
    profile: str | None,
    endpoint: str | None,
    token: str | None,
) -> BonuslyClient:
    """Create a client from CLI options, ``BONUSLY_*`` env vars or a profile."""
    config = ConfigManager().resolve_profile(
        profile_name=profile, endpoint=endpoint, token=token,
    )
    return BonuslyClient(config)
