"""Config commands: create, inspect and test API profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from bonusly_cli.client.errors import ConfigurationError, error_handler
from bonusly_cli.commands._common import FormatOpt
from bonusly_cli.config.constants import DEFAULT_ENDPOINT
from bonusly_cli.config.manager import ConfigManager
from bonusly_cli.config.models import ClientConfig
from bonusly_cli.models.user import ListUsersParams
from bonusly_cli.output.formatter import OutputFormat, output

app = typer.Typer(name="config", help="Manage API profiles.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(token: str | None) -> str:
    """Show just enough of a token to tell profiles apart."""
    if not token:
        return ""
    return f"{token[:4]}..." if len(token) > 8 else "***"


def _existing(mgr: ConfigManager, name: str) -> ClientConfig:
    profile = mgr.get_profile(name)
    if profile is None:
        raise ConfigurationError(f"Profile '{name}' not found.")
    return profile


@app.command()
@error_handler
def init() -> None:
    """Interactively create a profile."""
    mgr = _get_manager()
    console.print("[bold]Bonusly CLI setup[/]\n")
    profile = ClientConfig(
        name=Prompt.ask("Profile name", default="default"),
        token=Prompt.ask("API access token", password=True),
        endpoint=Prompt.ask("API endpoint", default=DEFAULT_ENDPOINT),
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{profile.name}' saved to {mgr.config_path}.[/]")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    token: Annotated[str, typer.Option("--token", "-t", help="API access token")],
    endpoint: Annotated[
        Optional[str], typer.Option("--endpoint", "-e", help="API base URL"),
    ] = None,
    application_name: Annotated[
        Optional[str],
        typer.Option("--app-name", help="HTTP_APPLICATION_NAME header value"),
    ] = None,
    timeout: Annotated[
        Optional[float], typer.Option("--timeout", help="Request timeout in seconds"),
    ] = None,
    insecure: Annotated[
        bool, typer.Option("--no-verify-ssl", help="Skip TLS certificate checks"),
    ] = False,
    make_default: Annotated[
        bool, typer.Option("--default", help="Make this the default profile"),
    ] = False,
) -> None:
    """Add or replace a profile."""
    optional = {
        "endpoint": endpoint,
        "application_name": application_name,
        "timeout": timeout,
    }
    profile = ClientConfig(
        name=name,
        token=token,
        verify_ssl=not insecure,
        **{k: v for k, v in optional.items() if v is not None},
    )
    mgr = _get_manager()
    mgr.add_profile(profile)
    if make_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(fmt: FormatOpt = OutputFormat.TABLE) -> None:
    """List configured profiles."""
    mgr = _get_manager()
    profiles = list(mgr.config.profiles.values())
    if not profiles:
        console.print(
            "[yellow]No profiles configured. Run 'bonusly config init' to get started.[/]"
        )
        return
    default = mgr.config.default_profile
    output(
        {"profiles": [p.model_dump(exclude={"token"}) for p in profiles]},
        fmt,
        columns=["Name", "Endpoint", "Token", "Default"],
        rows=[
            [p.name, p.endpoint, _mask(p.token), "*" if p.name == default else ""]
            for p in profiles
        ],
        title="Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: FormatOpt = OutputFormat.TABLE,
) -> None:
    """Show a profile with its token masked."""
    profile = _existing(_get_manager(), name)
    data = profile.model_dump()
    data["token"] = _mask(profile.token)
    output(data, fmt, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile to use when none is given")],
) -> None:
    """Set the default profile."""
    mgr = _get_manager()
    _existing(mgr, name)
    mgr.set_default(name)
    console.print(f"[green]Default profile is now '{name}'.[/]")


@app.command()
@error_handler
def test(
    name: Annotated[
        Optional[str], typer.Argument(help="Profile name (default profile if omitted)"),
    ] = None,
) -> None:
    """Check that the API accepts a profile's token."""
    from bonusly_cli.client.api import BonuslyClient

    config = _get_manager().resolve_profile(profile_name=name)
    console.print(f"Contacting [bold]{config.endpoint}[/] as '{config.name}'...")
    with BonuslyClient(config) as client:
        client.list_users(ListUsersParams(limit=1))
    console.print("[green]Connected![/] The API accepted the token.")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a profile."""
    mgr = _get_manager()
    _existing(mgr, name)
    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return
    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
