"""Offset/limit pagination over list requests.

The API returns neither a total count nor a next cursor, so the only end of
data signal is a page shorter than the requested limit. A final page that is
exactly ``limit`` long therefore costs one extra request, which comes back
empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from bonusly_cli.config.constants import (
    DEFAULT_REDEMPTIONS_PAGE_SIZE,
    DEFAULT_USERS_PAGE_SIZE,
)
from bonusly_cli.models.common import Page, PageParams
from bonusly_cli.models.redemption import ListRedemptionsParams, Redemption
from bonusly_cli.models.user import ListUsersParams, User

if TYPE_CHECKING:
    from bonusly_cli.client.api import BonuslyClient

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=PageParams)
ParamsT_contra = TypeVar("ParamsT_contra", bound=PageParams, contravariant=True)
ItemT = TypeVar("ItemT")
ItemT_co = TypeVar("ItemT_co", covariant=True)


class ListOperation(Protocol[ParamsT_contra, ItemT_co]):
    """One page fetch, e.g. ``BonuslyClient.list_users``."""

    def __call__(
        self, params: ParamsT_contra, *, timeout: float | None = None,
    ) -> Page[ItemT_co]: ...


class PaginationState(BaseModel):
    """Position of a paginator; replaced, never mutated, after each page."""

    model_config = ConfigDict(frozen=True)

    limit: int = Field(gt=0)
    offset: int = 0
    is_first_page: bool = True
    last_page_item_count: int = 0

    @property
    def has_more_pages(self) -> bool:
        return self.is_first_page or self.last_page_item_count >= self.limit

    def advance(self, item_count: int) -> PaginationState:
        """Return the state after a page of *item_count* items was fetched."""
        return self.model_copy(update={
            "offset": self.offset + item_count,
            "is_first_page": False,
            "last_page_item_count": item_count,
        })


class Paginator(Generic[ParamsT, ItemT]):
    """Forward-only, single-pass sequence of pages from a list operation.

    State only changes after a page was fetched successfully, so a failed
    ``next_page`` call can simply be retried. Not safe for concurrent use.
    """

    def __init__(
        self, operation: ListOperation[ParamsT, ItemT], params: ParamsT,
    ) -> None:
        self._operation = operation
        self._params = params
        self.state = PaginationState(limit=params.limit)

    def has_more_pages(self) -> bool:
        return self.state.has_more_pages

    def next_page(self, *, timeout: float | None = None) -> Page[ItemT]:
        """Fetch the page at the current offset.

        Once exhausted this returns an empty page without sending a request.
        """
        if not self.state.has_more_pages:
            return Page()
        params = self._params.model_copy(update={"skip": self.state.offset})
        page = self._operation(params, timeout=timeout)
        self.state = self.state.advance(page.count)
        logger.debug(
            "Fetched %d items at offset %d (limit %d)",
            page.count, params.skip, self.state.limit,
        )
        return page

    def __iter__(self) -> Iterator[Page[ItemT]]:
        return self.pages()

    def pages(self, *, timeout: float | None = None) -> Iterator[Page[ItemT]]:
        """Iterate over the remaining pages, each fetched with *timeout*."""
        while self.has_more_pages():
            yield self.next_page(timeout=timeout)

    def items(self, *, timeout: float | None = None) -> Iterator[ItemT]:
        """Iterate over every item of every remaining page."""
        for page in self.pages(timeout=timeout):
            yield from page.items


def list_users_paginator(
    client: BonuslyClient, params: ListUsersParams | None = None,
) -> Paginator[ListUsersParams, User]:
    if params is None:
        params = ListUsersParams(limit=DEFAULT_USERS_PAGE_SIZE)
    return Paginator(client.list_users, params)


def list_redemptions_paginator(
    client: BonuslyClient, params: ListRedemptionsParams | None = None,
) -> Paginator[ListRedemptionsParams, Redemption]:
    if params is None:
        params = ListRedemptionsParams(limit=DEFAULT_REDEMPTIONS_PAGE_SIZE)
    return Paginator(client.list_redemptions, params)
