"""Webhook data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from bonusly_cli.models.common import WireStr, WireStrList
from bonusly_cli.models.normalize import (
    NormalizedEnum,
    WireUrl,
    normalize_enum,
    parse_optional_url,
)


class WebhookEventType(NormalizedEnum):
    BONUS_CREATED = "bonus.created"
    ACHIEVEMENT_EVENT_CREATED = "achievement_event.created"
    UNKNOWN = "unknown"


class RawWebhook(BaseModel):
    id: WireStr = ""
    url: WireStr = ""
    event_types: WireStrList = Field(default_factory=list)


class Webhook(BaseModel):
    """A webhook that Bonusly POSTs subscribed events to."""

    id: str = ""
    url: WireUrl | None = None
    event_types: list[WebhookEventType] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: RawWebhook) -> Webhook:
        return cls(
            id=raw.id,
            url=parse_optional_url(raw.url, field="url"),
            event_types=[normalize_enum(WebhookEventType, e) for e in raw.event_types],
        )


class CreateWebhookInput(BaseModel):
    url: WireUrl
    event_types: list[WebhookEventType] = Field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "event_types": [e.value for e in self.event_types],
        }


class UpdateWebhookInput(BaseModel):
    """Webhook changes; ``url`` is left untouched when not given."""

    id: str
    url: WireUrl | None = None
    event_types: list[WebhookEventType] = Field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "id": self.id,
            "event_types": [e.value for e in self.event_types],
        }
        if self.url is not None:
            body["url"] = self.url
        return body
