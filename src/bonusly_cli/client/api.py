"""Bonusly HTTP client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from bonusly_cli.client.auth import resolve_auth
from bonusly_cli.client.envelope import decode_envelope
from bonusly_cli.client.errors import (
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from bonusly_cli.config.models import ClientConfig
from bonusly_cli.models.achievement import Achievement
from bonusly_cli.models.bonus import CreateBonusInput
from bonusly_cli.models.common import IdResult, Page
from bonusly_cli.models.redemption import (
    ListRedemptionsParams,
    RawRedemptionDetail,
    Redemption,
    RedemptionDetail,
)
from bonusly_cli.models.reward import (
    ListRewardsParams,
    RawRewardCatalog,
    RawRewardDetail,
    Reward,
    RewardDetail,
    flatten_catalog,
)
from bonusly_cli.models.user import (
    ExtendedUser,
    ListUsersParams,
    RawExtendedUser,
    RawUser,
    User,
)
from bonusly_cli.models.webhook import (
    CreateWebhookInput,
    RawWebhook,
    UpdateWebhookInput,
    Webhook,
)

logger = logging.getLogger(__name__)


class BonuslyClient:
    """Synchronous HTTP client for the Bonusly REST API.

    Every response is a ``{success, message, result}`` envelope. Failures
    surface as ``TransportError`` (no response), ``MalformedResponseError``
    (unreadable body), ``NormalizationError`` (a field failed to convert) or
    ``APIError`` (``success: false``). Nothing is retried.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self.base_url = config.endpoint
        if not config.verify_ssl:
            logger.warning("TLS certificate verification is disabled")
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=resolve_auth(config),
            verify=config.verify_ssl,
            timeout=config.timeout,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BonuslyClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def execute(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request; transport failures become ``TransportError``."""
        request_timeout = timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT
        try:
            response = self._client.request(
                method, path, timeout=request_timeout, **kwargs,
            )
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(
                f"{operation}: request to {self.base_url} timed out: {exc}"
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(
                f"{operation}: cannot reach {self.base_url}: {exc}"
            ) from exc
        except httpx.InvalidURL as exc:
            raise TransportError(
                f"{operation}: invalid URL for {self.base_url}: {exc}"
            ) from exc
        logger.debug(
            "%s %s -> %s (%d bytes)",
            method, response.request.url.path, response.status_code,
            len(response.content),
        )
        return response

    def _call(
        self,
        method: str,
        path: str,
        operation: str,
        result_type: Any = None,
        **kwargs: Any,
    ) -> Any:
        response = self.execute(method, path, operation=operation, **kwargs)
        return decode_envelope(
            response.content, operation, result_type,
            status_code=response.status_code,
        )

    # Users

    def get_user(self, user_id: str, *, timeout: float | None = None) -> ExtendedUser:
        if not user_id:
            raise ValidationError("Missing user id")
        raw = self._call(
            "GET", f"/users/{user_id}", "get user", RawExtendedUser, timeout=timeout,
        )
        return ExtendedUser.from_raw(raw)

    def list_users(
        self, params: ListUsersParams | None = None, *, timeout: float | None = None,
    ) -> Page[User]:
        """Fetch one page of users; ``limit`` and ``skip`` are sent as given."""
        params = params or ListUsersParams()
        raws = self._call(
            "GET", "/users", "list users", list[RawUser],
            params=params.to_query(), timeout=timeout,
        )
        return Page[User](items=[User.from_raw(r) for r in raws])

    # Bonuses

    def create_bonus(
        self, bonus: CreateBonusInput, *, timeout: float | None = None,
    ) -> None:
        if not bonus.receivers:
            raise ValidationError("A bonus needs at least one receiver")
        self._call(
            "POST", "/bonuses", "create bonus", json=bonus.to_body(), timeout=timeout,
        )

    # Redemptions

    def list_redemptions(
        self,
        params: ListRedemptionsParams | None = None,
        *,
        timeout: float | None = None,
    ) -> Page[Redemption]:
        """Fetch one page of redemptions; ``limit`` and ``skip`` are sent as given."""
        params = params or ListRedemptionsParams()
        items = self._call(
            "GET", "/redemptions", "list redemptions", list[Redemption],
            params=params.to_query(), timeout=timeout,
        )
        return Page[Redemption](items=items)

    def get_redemption(
        self, redemption_id: str, *, timeout: float | None = None,
    ) -> RedemptionDetail:
        if not redemption_id:
            raise ValidationError("Missing redemption id")
        raw = self._call(
            "GET", f"/redemptions/{redemption_id}", "get redemption",
            RawRedemptionDetail, timeout=timeout,
        )
        return RedemptionDetail.from_raw(raw)

    # Rewards

    def list_rewards(
        self, params: ListRewardsParams | None = None, *, timeout: float | None = None,
    ) -> list[Reward]:
        """Fetch the reward catalog, flattened across catalog groups."""
        params = params or ListRewardsParams()
        catalogs = self._call(
            "GET", "/rewards", "list rewards", list[RawRewardCatalog],
            params=params.to_query(), timeout=timeout,
        )
        return flatten_catalog(catalogs)

    def get_reward(
        self,
        reward_id: str,
        *,
        request_country: str = "",
        timeout: float | None = None,
    ) -> RewardDetail:
        if not reward_id:
            raise ValidationError("Missing reward id")
        query = {"request_country": request_country} if request_country else {}
        raw = self._call(
            "GET", f"/rewards/{reward_id}", "get reward", RawRewardDetail,
            params=query, timeout=timeout,
        )
        return RewardDetail.from_raw(raw)

    # Webhooks (the API does not paginate webhooks)

    def list_webhooks(self, *, timeout: float | None = None) -> list[Webhook]:
        raws = self._call(
            "GET", "/webhooks", "list webhooks", list[RawWebhook], timeout=timeout,
        )
        return [Webhook.from_raw(r) for r in raws]

    def create_webhook(
        self, webhook: CreateWebhookInput, *, timeout: float | None = None,
    ) -> str:
        """Create a webhook and return its id."""
        result: IdResult = self._call(
            "POST", "/webhooks", "create webhook", IdResult,
            json=webhook.to_body(), timeout=timeout,
        )
        return result.id

    def update_webhook(
        self, webhook: UpdateWebhookInput, *, timeout: float | None = None,
    ) -> str:
        if not webhook.id:
            raise ValidationError("Missing webhook id")
        result: IdResult = self._call(
            "PUT", f"/webhooks/{webhook.id}", "update webhook", IdResult,
            json=webhook.to_body(), timeout=timeout,
        )
        return result.id

    def delete_webhook(self, webhook_id: str, *, timeout: float | None = None) -> str:
        if not webhook_id:
            raise ValidationError("Missing webhook id")
        result: IdResult = self._call(
            "DELETE", f"/webhooks/{webhook_id}", "delete webhook", IdResult,
            timeout=timeout,
        )
        return result.id

    # Achievements

    def list_achievements(self, *, timeout: float | None = None) -> list[Achievement]:
        achievements: list[Achievement] = self._call(
            "GET", "/achievements", "list achievements", list[Achievement],
            timeout=timeout,
        )
        return achievements
