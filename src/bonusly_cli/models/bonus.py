"""Bonus data models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CreateBonusInput(BaseModel):
    """A bonus to give; the API takes amount and receivers inside the reason."""

    giver_email: str
    receivers: list[str] = Field(default_factory=list)
    reason: str = ""
    amount: int = Field(default=0, ge=0)
    parent_bonus_id: str = ""

    def reason_text(self) -> str:
        """Render ``+<amount> @receiver ... <reason>``."""
        receivers = " ".join(f"@{r.strip()}" for r in self.receivers)
        return f"+{self.amount} {receivers} {self.reason}"

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "giver_email": self.giver_email,
            "reason": self.reason_text(),
        }
        if self.parent_bonus_id:
            body["parent_bonus_id"] = self.parent_bonus_id
        return body
