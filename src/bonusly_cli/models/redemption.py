"""Redemption data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from bonusly_cli.models.common import (
    PageParams,
    WireBool,
    WireInt,
    WireStr,
    WireStrList,
    WireTimestamp,
)
from bonusly_cli.models.normalize import WireUrl, normalize_enum, parse_optional_url
from bonusly_cli.models.reward import RewardType


class Redemption(BaseModel):
    """An entry of ``GET /redemptions``."""

    id: WireStr = ""
    user_id: WireStr = ""
    user_email: WireStr = ""
    giftee_email: WireStr = ""
    title: WireStr = ""
    amount_in_points: WireInt = 0
    amount_in_usd: WireStr = ""
    categories: WireStrList = Field(default_factory=list)


class ListRedemptionsParams(PageParams):
    limit: int = 100

    def to_query(self) -> dict[str, str]:
        return {"limit": str(self.limit), "skip": str(self.skip)}


class RawRedeemedReward(BaseModel):
    id: WireStr = ""
    name: WireStr = ""
    price: WireInt = 0
    display_price: WireStr = ""
    type: WireStr = ""
    image_url: WireStr = ""


class RawRedemptionDetail(BaseModel):
    id: WireStr = ""
    created_at: WireTimestamp = None
    state: WireStr = ""
    certificate_url: WireStr = ""
    claim_url: WireStr = ""
    auto_approvable: WireBool = False
    reward_details: Annotated[
        RawRedeemedReward, BeforeValidator(lambda v: v or {}),
    ] = Field(default_factory=RawRedeemedReward)


class RedeemedReward(BaseModel):
    id: str = ""
    name: str = ""
    price: int = 0
    display_price: str = ""
    type: RewardType = RewardType.UNKNOWN
    image_url: WireUrl | None = None


class RedemptionDetail(BaseModel):
    """A single redemption from ``GET /redemptions/{id}``."""

    id: str = ""
    created_at: WireTimestamp = None
    state: str = ""
    certificate_url: WireUrl | None = None
    claim_url: WireUrl | None = None
    auto_approvable: bool = False
    reward_details: RedeemedReward = Field(default_factory=RedeemedReward)

    @classmethod
    def from_raw(cls, raw: RawRedemptionDetail) -> RedemptionDetail:
        reward = raw.reward_details
        return cls(
            id=raw.id,
            created_at=raw.created_at,
            state=raw.state,
            certificate_url=parse_optional_url(
                raw.certificate_url, field="certificate_url",
            ),
            claim_url=parse_optional_url(raw.claim_url, field="claim_url"),
            auto_approvable=raw.auto_approvable,
            reward_details=RedeemedReward(
                id=reward.id,
                name=reward.name,
                price=reward.price,
                display_price=reward.display_price,
                type=normalize_enum(RewardType, reward.type),
                image_url=parse_optional_url(
                    reward.image_url, field="reward_details.image_url",
                ),
            ),
        )
