"""Achievement data models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from bonusly_cli.models.common import WireFloat, WireInt, WireStr


class AchievementScope(BaseModel):
    department: WireStr = ""


class AchievementReceiver(BaseModel):
    id: WireInt = 0
    display_name: WireStr = ""
    username: WireStr = ""
    email: WireStr = ""


class Achievement(BaseModel):
    """An achievement earned through a bonus."""

    id: WireStr = ""
    headline: WireStr = ""
    title: WireStr = ""
    importance: WireFloat = 0.0
    bonus_id: WireStr = ""
    scope: Annotated[
        AchievementScope, BeforeValidator(lambda v: v or {}),
    ] = Field(default_factory=AchievementScope)
    receiver: Annotated[
        AchievementReceiver, BeforeValidator(lambda v: v or {}),
    ] = Field(default_factory=AchievementReceiver)
