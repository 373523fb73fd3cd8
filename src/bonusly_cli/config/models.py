"""Pydantic models for client and CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bonusly_cli.config.constants import (
    DEFAULT_APPLICATION_NAME,
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
)


class ClientConfig(BaseModel):
    """Immutable connection settings handed to a ``BonuslyClient``."""

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    token: str | None = Field(default=None, description="Bonusly API access token")
    endpoint: str = Field(
        default=DEFAULT_ENDPOINT, description="API base URL, e.g. https://bonus.ly/api/v1",
    )
    application_name: str = Field(
        default=DEFAULT_APPLICATION_NAME,
        description="Value of the HTTP_APPLICATION_NAME header",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        return bool(self.token)


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ClientConfig] = Field(default_factory=dict)
