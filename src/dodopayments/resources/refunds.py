# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Refunds of payments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.pagination import AsyncDefaultPageNumberPage, DefaultPageNumberPage
from dodopayments.resources.base import (
    AsyncResource,
    OptionsArg,
    SyncResource,
    parse_response,
    path_param,
    request_params,
)
from dodopayments.types.refunds import Refund, RefundCreateParams, RefundListParams


class RefundsResource(SyncResource):
    def create(
        self,
        params: RefundCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Refund:
        """Refund a payment in full, or the listed items of it."""
        body, options = request_params(RefundCreateParams, params, fields, options)
        return parse_response(Refund, self._client.post("refunds", body=body, options=options))

    def retrieve(self, refund_id: str, *, options: OptionsArg = None) -> Refund:
        path = f"refunds/{path_param('refund_id', refund_id)}"
        return parse_response(Refund, self._client.get(path, options=options))

    def list(
        self,
        params: RefundListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[Refund]:
        query, options = request_params(RefundListParams, params, fields, options)
        return self._client.get_page(DefaultPageNumberPage, "refunds", model=Refund, query=query, options=options)


class AsyncRefundsResource(AsyncResource):
    async def create(
        self,
        params: RefundCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Refund:
        """Refund a payment in full, or the listed items of it."""
        body, options = request_params(RefundCreateParams, params, fields, options)
        return parse_response(Refund, await self._client.post("refunds", body=body, options=options))

    async def retrieve(self, refund_id: str, *, options: OptionsArg = None) -> Refund:
        path = f"refunds/{path_param('refund_id', refund_id)}"
        return parse_response(Refund, await self._client.get(path, options=options))

    async def list(
        self,
        params: RefundListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[Refund]:
        query, options = request_params(RefundListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "refunds", model=Refund, query=query, options=options
        )
