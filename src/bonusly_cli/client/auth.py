"""Authentication for the Bonusly API."""

from __future__ import annotations

from collections.abc import Generator

import httpx

from bonusly_cli.config.models import ClientConfig


class BearerTokenAuth(httpx.Auth):
    """Authenticate with a Bonusly access token (Authorization: Bearer)."""

    def __init__(self, token: str, application_name: str) -> None:
        self.token = token
        self.application_name = application_name

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        request.headers["HTTP_APPLICATION_NAME"] = self.application_name
        yield request


def resolve_auth(config: ClientConfig) -> httpx.Auth | None:
    """Resolve authentication from a client configuration."""
    if config.token:
        return BearerTokenAuth(config.token, config.application_name)
    return None
