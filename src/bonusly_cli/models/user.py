"""User data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from bonusly_cli.models.common import (
    PageParams,
    WireBool,
    WireInt,
    WireStr,
    WireTimestamp,
)
from bonusly_cli.models.normalize import (
    NormalizedEnum,
    WireUrl,
    normalize_enum,
    parse_date_only,
    parse_optional_url,
)


class UserMode(NormalizedEnum):
    NORMAL = "normal"
    OBSERVER = "observer"
    RECEIVER = "receiver"
    BENEFACTOR = "benefactor"
    BOT = "bot"
    UNKNOWN = "unknown"


class SortProperty(str, Enum):
    CREATED_AT = "created_at"
    LAST_ACTIVE_AT = "last_active_at"
    DISPLAY_NAME = "display_name"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    COUNTRY = "country"
    TIME_ZONE = "time_zone"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class SuggestedGiveAmount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: WireInt = Field(default=0, alias="dataValue")
    name: WireStr = ""


class ClientIDs(BaseModel):
    """Chat integration identifiers."""

    slack: WireStr = ""
    slack_id: WireStr = ""
    slack_display_name: WireStr = ""
    slack_home_channel_id: WireStr = ""


class CustomProperties(BaseModel):
    department: WireStr = ""
    location: WireStr = ""
    role: WireStr = ""


class _UserFields(BaseModel):
    """Fields that decode the same way on the wire and in the domain model."""

    id: WireStr = ""
    path: WireStr = ""
    first_name: WireStr = ""
    last_name: WireStr = ""
    full_name: WireStr = ""
    short_name: WireStr = ""
    display_name: WireStr = ""
    username: WireStr = ""
    email: WireStr = ""
    manager_email: WireStr = ""
    status: WireStr = ""
    last_active_at: WireTimestamp = None
    created_at: WireTimestamp = None
    external_unique_id: WireStr = ""
    budget_boost: WireInt = 0
    country: WireStr = ""
    time_zone: WireStr = ""
    can_receive: WireBool = False
    can_give: WireBool = False
    give_amounts: Annotated[list[int], BeforeValidator(lambda v: v or [])] = Field(
        default_factory=list,
    )
    suggested_give_amounts: Annotated[
        list[SuggestedGiveAmount], BeforeValidator(lambda v: v or []),
    ] = Field(default_factory=list)
    custom_properties: Annotated[
        CustomProperties, BeforeValidator(lambda v: v or {}),
    ] = Field(default_factory=CustomProperties)
    client_ids: Annotated[
        ClientIDs, BeforeValidator(lambda v: v or {}),
    ] = Field(default_factory=ClientIDs)
    intercom_id: WireStr = ""


class _BalanceFields(BaseModel):
    earning_balance: WireInt = 0
    earning_balance_with_currency: WireStr = ""
    giving_balance: WireInt = 0
    giving_balance_with_currency: WireStr = ""
    lifetime_earnings: WireInt = 0
    lifetime_earnings_with_currency: WireStr = ""


class RawUser(_UserFields):
    """User exactly as sent by the API, irregular fields left as strings."""

    admin: WireBool = False
    full_pic_url: WireStr = ""
    profile_pic_url: WireStr = ""
    hired_on: WireStr = ""
    user_mode: WireStr = ""


class RawExtendedUser(RawUser, _BalanceFields):
    """``GET /users/{id}`` result, which adds balances to the user."""


# Raw fields replaced by a normalized counterpart on the domain model
_IRREGULAR_FIELDS = {"admin", "full_pic_url", "profile_pic_url", "hired_on", "user_mode"}

UserT = TypeVar("UserT", bound="User")


class User(_UserFields):
    """A Bonusly user."""

    is_admin: bool = False
    full_pic_url: WireUrl | None = None
    profile_pic_url: WireUrl | None = None
    hired_on: datetime | None = None
    user_mode: UserMode = UserMode.UNKNOWN

    @classmethod
    def from_raw(cls: type[UserT], raw: RawUser) -> UserT:
        """Build a user from its wire form, normalizing irregular fields.

        Raises ``InvalidDateFormatError`` or ``InvalidURLError`` when
        ``hired_on`` or one of the picture URLs cannot be parsed.
        """
        return cls(
            **raw.model_dump(exclude=_IRREGULAR_FIELDS),
            is_admin=raw.admin,
            full_pic_url=parse_optional_url(raw.full_pic_url, field="full_pic_url"),
            profile_pic_url=parse_optional_url(
                raw.profile_pic_url, field="profile_pic_url",
            ),
            hired_on=parse_date_only(raw.hired_on, field="hired_on"),
            user_mode=normalize_enum(UserMode, raw.user_mode),
        )


class ExtendedUser(User, _BalanceFields):
    """A user including balances and lifetime earnings."""


class ListUsersParams(PageParams):
    """Query parameters for ``GET /users``; unset values are not sent."""

    email: str = ""
    custom_property_name: str = ""
    sort_by: SortProperty | None = None
    sort_order: SortOrder = SortOrder.ASCENDING
    include_archived: bool = False
    show_financial_data: bool = False
    user_mode: UserMode | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.limit > 0:
            query["limit"] = str(self.limit)
        if self.skip > 0:
            query["skip"] = str(self.skip)
        if self.email:
            query["email"] = self.email
        if self.custom_property_name:
            query["custom_property_name"] = self.custom_property_name
        if self.sort_by is not None:
            prefix = "-" if self.sort_order == SortOrder.DESCENDING else ""
            query["sort"] = f"{prefix}{self.sort_by.value}"
        if self.include_archived:
            query["include_archived"] = "true"
        if self.show_financial_data:
            query["show_financial_data"] = "true"
        if self.user_mode is not None:
            query["user_mode"] = self.user_mode.value
        return query
