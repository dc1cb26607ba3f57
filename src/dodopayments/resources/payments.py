# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""One-time payments."""

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
from dodopayments.types.payments import (
    Payment,
    PaymentCreateParams,
    PaymentCreateResponse,
    PaymentLineItemsResponse,
    PaymentListParams,
    PaymentListResponse,
)


class PaymentsResource(SyncResource):
    def create(
        self,
        params: PaymentCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> PaymentCreateResponse:
        """Create a one-time payment for a cart of products."""
        body, options = request_params(PaymentCreateParams, params, fields, options)
        return parse_response(PaymentCreateResponse, self._client.post("payments", body=body, options=options))

    def retrieve(self, payment_id: str, *, options: OptionsArg = None) -> Payment:
        path = f"payments/{path_param('payment_id', payment_id)}"
        return parse_response(Payment, self._client.get(path, options=options))

    def list(
        self,
        params: PaymentListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[PaymentListResponse]:
        query, options = request_params(PaymentListParams, params, fields, options)
        return self._client.get_page(
            DefaultPageNumberPage, "payments", model=PaymentListResponse, query=query, options=options
        )

    def retrieve_line_items(self, payment_id: str, *, options: OptionsArg = None) -> PaymentLineItemsResponse:
        path = f"payments/{path_param('payment_id', payment_id)}/line-items"
        return parse_response(PaymentLineItemsResponse, self._client.get(path, options=options))


class AsyncPaymentsResource(AsyncResource):
    async def create(
        self,
        params: PaymentCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> PaymentCreateResponse:
        """Create a one-time payment for a cart of products."""
        body, options = request_params(PaymentCreateParams, params, fields, options)
        return parse_response(PaymentCreateResponse, await self._client.post("payments", body=body, options=options))

    async def retrieve(self, payment_id: str, *, options: OptionsArg = None) -> Payment:
        path = f"payments/{path_param('payment_id', payment_id)}"
        return parse_response(Payment, await self._client.get(path, options=options))

    async def list(
        self,
        params: PaymentListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[PaymentListResponse]:
        query, options = request_params(PaymentListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "payments", model=PaymentListResponse, query=query, options=options
        )

    async def retrieve_line_items(self, payment_id: str, *, options: OptionsArg = None) -> PaymentLineItemsResponse:
        path = f"payments/{path_param('payment_id', payment_id)}/line-items"
        return parse_response(PaymentLineItemsResponse, await self._client.get(path, options=options))
