"""Pydantic data models for the Bonusly REST API."""

from bonusly_cli.models.achievement import Achievement
from bonusly_cli.models.bonus import CreateBonusInput
from bonusly_cli.models.common import Envelope, Page, PageParams
from bonusly_cli.models.redemption import (
    ListRedemptionsParams,
    Redemption,
    RedemptionDetail,
)
from bonusly_cli.models.reward import (
    ListRewardsParams,
    Reward,
    RewardDetail,
    RewardType,
)
from bonusly_cli.models.user import (
    ExtendedUser,
    ListUsersParams,
    SortOrder,
    SortProperty,
    User,
    UserMode,
)
from bonusly_cli.models.webhook import (
    CreateWebhookInput,
    UpdateWebhookInput,
    Webhook,
    WebhookEventType,
)

__all__ = [
    "Achievement",
    "CreateBonusInput",
    "CreateWebhookInput",
    "Envelope",
    "ExtendedUser",
    "ListRedemptionsParams",
    "ListRewardsParams",
    "ListUsersParams",
    "Page",
    "PageParams",
    "Redemption",
    "RedemptionDetail",
    "Reward",
    "RewardDetail",
    "RewardType",
    "SortOrder",
    "SortProperty",
    "UpdateWebhookInput",
    "User",
    "UserMode",
    "Webhook",
    "WebhookEventType",
]
