"""Reward catalog data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from bonusly_cli.models.common import WireInt, WireStr, WireStrList
from bonusly_cli.models.normalize import (
    NormalizedEnum,
    WireUrl,
    normalize_enum,
    parse_optional_url,
)


class RewardType(NormalizedEnum):
    GIFT_CARDS = "gift_cards"
    DONATIONS = "donations"
    CASH_OUTS = "cash_outs"
    UNKNOWN = "unknown"


class RewardDenomination(BaseModel):
    id: WireStr = ""
    name: WireStr = ""
    price: WireInt = 0
    display_price: WireStr = ""


class RewardDescription(BaseModel):
    text: WireStr = ""
    html: WireStr = ""


_Description = Annotated[RewardDescription, BeforeValidator(lambda v: v or {})]
_Denominations = Annotated[
    list[RewardDenomination], BeforeValidator(lambda v: v or []),
]


class RawCatalogReward(BaseModel):
    name: WireStr = ""
    image_url: WireStr = ""
    minimum_display_price: WireStr = ""
    description: _Description = Field(default_factory=RewardDescription)
    disclaimer_html: WireStr = ""
    warning: WireStr = ""
    categories: WireStrList = Field(default_factory=list)
    denominations: _Denominations = Field(default_factory=list)


class RawRewardCatalog(BaseModel):
    """One catalog group from ``GET /rewards``; all rewards share its type."""

    type: WireStr = ""
    name: WireStr = ""
    rewards: Annotated[
        list[RawCatalogReward], BeforeValidator(lambda v: v or []),
    ] = Field(default_factory=list)


class Reward(BaseModel):
    """A reward from the catalog, flattened out of its catalog group."""

    type: RewardType = RewardType.UNKNOWN
    name: str = ""
    image_url: WireUrl | None = None
    minimum_display_price: str = ""
    description_text: str = ""
    description_html: str = ""
    disclaimer_html: str = ""
    warning: str = ""
    categories: list[str] = Field(default_factory=list)
    denominations: list[RewardDenomination] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, reward_type: RewardType, raw: RawCatalogReward) -> Reward:
        return cls(
            type=reward_type,
            name=raw.name,
            image_url=parse_optional_url(raw.image_url, field="image_url"),
            minimum_display_price=raw.minimum_display_price,
            description_text=raw.description.text,
            description_html=raw.description.html,
            disclaimer_html=raw.disclaimer_html,
            warning=raw.warning,
            categories=raw.categories,
            denominations=raw.denominations,
        )


def flatten_catalog(catalogs: list[RawRewardCatalog]) -> list[Reward]:
    """Flatten catalog groups into a single list of rewards, in order."""
    rewards: list[Reward] = []
    for catalog in catalogs:
        reward_type = normalize_enum(RewardType, catalog.type)
        rewards.extend(Reward.from_raw(reward_type, r) for r in catalog.rewards)
    return rewards


class RawRewardDetail(BaseModel):
    id: WireStr = ""
    name: WireStr = ""
    price: WireInt = 0
    display_price: WireStr = ""
    categories: WireStrList = Field(default_factory=list)
    description: _Description = Field(default_factory=RewardDescription)
    image_url: WireStr = ""
    disclaimer_html: WireStr = ""
    warning: WireStr = ""
    quantity: WireInt = 0
    type: WireStr = ""


class RewardDetail(BaseModel):
    """A single reward from ``GET /rewards/{id}``."""

    id: str = ""
    name: str = ""
    price: int = 0
    display_price: str = ""
    categories: list[str] = Field(default_factory=list)
    description: RewardDescription = Field(default_factory=RewardDescription)
    image_url: WireUrl | None = None
    disclaimer_html: str = ""
    warning: str = ""
    quantity: int = 0
    type: RewardType = RewardType.UNKNOWN

    @classmethod
    def from_raw(cls, raw: RawRewardDetail) -> RewardDetail:
        return cls(
            **raw.model_dump(exclude={"image_url", "type"}),
            image_url=parse_optional_url(raw.image_url, field="image_url"),
            type=normalize_enum(RewardType, raw.type),
        )


class ListRewardsParams(BaseModel):
    """Query parameters for ``GET /rewards``; unset values are not sent."""

    catalog_country: str = ""
    request_country: str = ""
    personalize_for: str = ""

    def to_query(self) -> dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v}
