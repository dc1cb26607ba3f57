# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pages returned by list endpoints.

A page holds the coerced items of one response and knows the query that
fetches the page after it. Iterating a page walks the items of every
following page as well, fetching them lazily.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Generic, Self, TypeVar

from dodopayments.core.conversion import coerce
from dodopayments.core.types import ListOf
from dodopayments.request_options import RequestOptions

if TYPE_CHECKING:
    from dodopayments.base_client import AsyncAPIClient, SyncAPIClient

ItemT = TypeVar("ItemT")

# ###############
# Public Interface
# ###############


class BasePage(Generic[ItemT]):
    """State common to every page, independent of the pagination scheme."""

    def __init__(
        self,
        *,
        client: Any,
        path: str,
        model: Any,
        query: Mapping[str, Any],
        options: RequestOptions,
        raw: Any,
    ) -> None:
        self._client = client
        self._path = path
        self._model = model
        self._query = dict(query)
        self._options = options
        if not isinstance(raw, Mapping):
            raw = {}
        self._parse(raw)

    @property
    def items(self) -> list[ItemT]:
        raise NotImplementedError

    def next_page_query(self) -> dict[str, Any] | None:
        """Return the query fetching the next page, or None on the last page."""
        raise NotImplementedError

    def has_next_page(self) -> bool:
        return bool(self.items) and self.next_page_query() is not None

    def _parse(self, raw: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def _coerce_items(self, raw_items: Any) -> list[ItemT]:
        items = coerce(ListOf(self._model), raw_items)
        return items if isinstance(items, list) else []


class SyncPage(BasePage[ItemT]):
    _client: SyncAPIClient

    def get_next_page(self) -> Self:
        """Fetch the page after this one.

        Raises:
            RuntimeError: If this is the last page.
        """
        query = self.next_page_query()
        if query is None or not self.items:
            raise RuntimeError("No next page to fetch")
        return self._client.get_page(type(self), self._path, model=self._model, query=query, options=self._options)

    def iter_pages(self) -> Iterator[Self]:
        page = self
        while True:
            yield page
            if not page.has_next_page():
                return
            page = page.get_next_page()

    def __iter__(self) -> Iterator[ItemT]:
        for page in self.iter_pages():
            yield from page.items


class AsyncPage(BasePage[ItemT]):
    _client: AsyncAPIClient

    async def get_next_page(self) -> Self:
        """Fetch the page after this one.

        Raises:
            RuntimeError: If this is the last page.
        """
        query = self.next_page_query()
        if query is None or not self.items:
            raise RuntimeError("No next page to fetch")
        return await self._client.get_page(
            type(self), self._path, model=self._model, query=query, options=self._options
        )

    async def iter_pages(self) -> AsyncIterator[Self]:
        page = self
        while True:
            yield page
            if not page.has_next_page():
                return
            page = await page.get_next_page()

    async def __aiter__(self) -> AsyncIterator[ItemT]:
        async for page in self.iter_pages():
            for item in page.items:
                yield item


class _CursorPagination(BasePage[ItemT]):
    """Pages addressed by an opaque ``iterator`` token from the previous response."""

    data: list[ItemT]
    iterator: str | None
    done: bool

    def _parse(self, raw: Mapping[str, Any]) -> None:
        self.data = self._coerce_items(raw.get("data") or [])
        iterator = raw.get("iterator")
        self.iterator = iterator if isinstance(iterator, str) and iterator else None
        self.done = raw.get("done") is True

    @property
    def items(self) -> list[ItemT]:
        return self.data

    def next_page_query(self) -> dict[str, Any] | None:
        if self.done or self.iterator is None:
            return None
        return {**self._query, "iterator": self.iterator}


class _PageNumberPagination(BasePage[ItemT]):
    """Pages addressed by a zero-based ``page_number`` query parameter."""

    def _parse(self, raw: Mapping[str, Any]) -> None:
        self._items = self._coerce_items(raw.get("items") or [])

    @property
    def items(self) -> list[ItemT]:
        return self._items

    @property
    def page_number(self) -> int:
        current = self._query.get("page_number")
        if isinstance(current, str) and current.strip().isdigit():
            return int(current)
        return current if isinstance(current, int) and not isinstance(current, bool) else 0

    def next_page_query(self) -> dict[str, Any] | None:
        if not self._items:
            return None
        return {**self._query, "page_number": self.page_number + 1}


class CursorPage(_CursorPagination[ItemT], SyncPage[ItemT]):
    pass


class AsyncCursorPage(_CursorPagination[ItemT], AsyncPage[ItemT]):
    pass


class DefaultPageNumberPage(_PageNumberPagination[ItemT], SyncPage[ItemT]):
    pass


class AsyncDefaultPageNumberPage(_PageNumberPagination[ItemT], AsyncPage[ItemT]):
    pass
