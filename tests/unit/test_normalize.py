"""Tests for field normalization helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from bonusly_cli.client.errors import (
    InvalidDateFormatError,
    InvalidURLError,
    NormalizationError,
)
from bonusly_cli.models.normalize import normalize_enum, parse_date_only, parse_optional_url
from bonusly_cli.models.reward import RewardType
from bonusly_cli.models.user import UserMode
from bonusly_cli.models.webhook import RawWebhook, Webhook, WebhookEventType

AVATAR = (
    "https://bonusly.s3.amazonaws.com/uploads/user/default_avatar/"
    "123456789/full_avatar.png"
)


class TestParseDateOnly:
    def test_utc_midnight(self):
        assert parse_date_only("2022-03-01", field="hired_on") == datetime(
            2022, 3, 1, tzinfo=timezone.utc,
        )

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_is_none(self, value):
        assert parse_date_only(value, field="hired_on") is None

    @pytest.mark.parametrize(
        "value",
        ["03-01-2022", "2022-3-1", "2022-03-01T00:00:00Z", "yesterday", "2022-13-01"],
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidDateFormatError) as exc_info:
            parse_date_only(value, field="hired_on")
        assert exc_info.value.field == "hired_on"
        assert exc_info.value.value == value
        assert "hired_on" in str(exc_info.value)

    def test_is_normalization_error(self):
        with pytest.raises(NormalizationError):
            parse_date_only("1 March", field="hired_on")


class TestParseOptionalURL:
    @pytest.mark.parametrize(
        "value",
        [
            AVATAR,
            "https://hooks.example.com",
            "HTTPS://Example.com/A",
            "https://example.com/search?q=a&page=2",
            "https://example.com/a b",
        ],
    )
    def test_kept_as_given(self, value):
        assert parse_optional_url(value, field="url") == value
        webhook = Webhook.from_raw(RawWebhook(url=value))
        assert webhook.url == value
        assert webhook.model_dump(mode="json")["url"] == value

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_is_none(self, value):
        assert parse_optional_url(value, field="full_pic_url") is None

    @pytest.mark.parametrize("value", ["not a url", "http://"])
    def test_invalid(self, value):
        with pytest.raises(InvalidURLError) as exc_info:
            parse_optional_url(value, field="claim_url")
        assert exc_info.value.field == "claim_url"
        assert exc_info.value.__cause__ is not None


class TestNormalizeEnum:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("normal", UserMode.NORMAL),
            ("observer", UserMode.OBSERVER),
            ("receiver", UserMode.RECEIVER),
            ("benefactor", UserMode.BENEFACTOR),
            ("bot", UserMode.BOT),
        ],
    )
    def test_known_user_modes(self, value, expected):
        assert normalize_enum(UserMode, value) is expected

    @pytest.mark.parametrize("value", ["intern", "", None, "BOT"])
    def test_unrecognized_is_unknown(self, value):
        assert normalize_enum(UserMode, value) is UserMode.UNKNOWN

    def test_reward_types(self):
        assert normalize_enum(RewardType, "gift_cards") is RewardType.GIFT_CARDS
        assert normalize_enum(RewardType, "experiences") is RewardType.UNKNOWN

    def test_webhook_event_types(self):
        assert (
            normalize_enum(WebhookEventType, "bonus.created")
            is WebhookEventType.BONUS_CREATED
        )
        assert normalize_enum(WebhookEventType, "user.deleted") is WebhookEventType.UNKNOWN

    def test_str_is_value(self):
        assert str(UserMode.BOT) == "bot"
