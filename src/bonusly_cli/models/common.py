"""Common response models and wire field types."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _null_to(factory: Callable[[], Any]) -> BeforeValidator:
    """Treat JSON ``null`` as the empty value of the field's type."""
    return BeforeValidator(lambda v: factory() if v is None else v)


WireStr = Annotated[str, _null_to(str)]
WireInt = Annotated[int, _null_to(int)]
WireFloat = Annotated[float, _null_to(float)]
WireBool = Annotated[bool, _null_to(bool)]
WireStrList = Annotated[list[str], _null_to(list)]
# RFC 3339 timestamp; the API sends "" or null when unset
WireTimestamp = Annotated[datetime | None, BeforeValidator(lambda v: v or None)]

ItemT = TypeVar("ItemT")


class Envelope(BaseModel):
    """Wrapper around every API response.

    Format: ``{"success": bool, "message": str, "result": [...] | {...}}``
    """

    success: bool
    message: str | None = None
    result: Any = None


class Page(BaseModel, Generic[ItemT]):
    """Items returned by a single list request."""

    model_config = ConfigDict(frozen=True)

    items: list[ItemT] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


class PageParams(BaseModel):
    """Offset/limit query parameters shared by paginated list requests."""

    limit: int = 0
    skip: int = 0


class IdResult(BaseModel):
    """``result`` payload of webhook create/update/delete."""

    id: WireStr = ""
