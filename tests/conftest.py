"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from bonusly_cli.client.api import BonuslyClient
from bonusly_cli.config.constants import ENV_API_TOKEN, ENV_ENDPOINT, ENV_PROFILE
from bonusly_cli.config.manager import ConfigManager
from bonusly_cli.config.models import ClientConfig

API = "https://api.test/api/v1"


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> ClientConfig:
    """Return a sample client configuration for testing."""
    return ClientConfig(
        name="test",
        token="testtoken:secret",
        endpoint=API,
    )


@pytest.fixture
def client(sample_profile: ClientConfig) -> Iterator[BonuslyClient]:
    with BonuslyClient(sample_profile) as c:
        yield c


@pytest.fixture
def user_payload() -> dict:
    """A user as returned by GET /users (trimmed to the interesting fields)."""
    return {
        "id": "5a1b2c3d4e5f",
        "path": "/company/users/5a1b2c3d4e5f",
        "first_name": "Bilbo",
        "last_name": "Baggins",
        "full_name": "Bilbo Baggins",
        "display_name": "bilbo.baggins",
        "username": "bilbo.baggins",
        "email": "bilbo@example.com",
        "manager_email": None,
        "full_pic_url": "https://bonusly.s3.amazonaws.com/uploads/user/default_avatar/123456789/full_avatar.png",
        "profile_pic_url": "",
        "status": "active",
        "admin": True,
        "last_active_at": "2022-05-04T10:11:12Z",
        "created_at": "2021-01-02T03:04:05Z",
        "hired_on": "2022-03-01",
        "budget_boost": 0,
        "user_mode": "normal",
        "country": "NZ",
        "time_zone": "Pacific/Auckland",
        "can_receive": True,
        "can_give": True,
        "give_amounts": [1, 5, 10],
        "suggested_give_amounts": [{"dataValue": 5, "name": "five"}],
        "custom_properties": {"department": "burglary", "location": "Shire"},
        "client_ids": None,
    }


@pytest.fixture
def redemption_payload() -> dict:
    return {
        "id": "r-1",
        "user_id": "5a1b2c3d4e5f",
        "user_email": "bilbo@example.com",
        "giftee_email": "",
        "title": "Amazon Gift Card",
        "amount_in_points": 500,
        "amount_in_usd": "5.00",
        "categories": ["gift_cards"],
    }


@pytest.fixture
def rewards_payload() -> list[dict]:
    """GET /rewards result: catalog groups, each holding rewards."""
    return [
        {
            "type": "gift_cards",
            "name": "Gift Cards",
            "rewards": [
                {
                    "name": "Amazon",
                    "image_url": "https://cdn.example.com/amazon.png",
                    "minimum_display_price": "$5",
                    "description": {"text": "Shop", "html": "<p>Shop</p>"},
                    "categories": ["shopping"],
                    "denominations": [
                        {"id": "d-1", "name": "$5", "price": 500, "display_price": "$5"},
                        {"id": "d-2", "name": "$10", "price": 1000, "display_price": "$10"},
                    ],
                },
            ],
        },
        {
            "type": "experiences",
            "name": "Experiences",
            "rewards": [
                {"name": "Day off", "image_url": "", "description": None},
            ],
        },
    ]


@pytest.fixture
def achievement_payload() -> dict:
    return {
        "id": "5b16f45e9fb5ba8225bc55ef",
        "headline": "Max earned the best bonus tagged #help-out!",
        "title": "best-bonus-received-tagged-#help-out",
        "importance": 0.7,
        "bonus_id": "12345abcde",
        "scope": {"department": "engineering"},
        "receiver": {
            "id": 1,
            "display_name": "Max",
            "username": "max.mustermann",
            "email": "max.mustermann@example.com",
        },
    }


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path: Path) -> None:
    """Keep tests away from the real config file and BONUSLY_* env vars."""
    for var in (ENV_API_TOKEN, ENV_ENDPOINT, ENV_PROFILE):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(
        "bonusly_cli.config.manager.CONFIG_FILE", tmp_path / "isolated" / "config.toml",
    )
