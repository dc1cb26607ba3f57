# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Payouts to the business."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.pagination import AsyncDefaultPageNumberPage, DefaultPageNumberPage
from dodopayments.resources.base import AsyncResource, OptionsArg, SyncResource, request_params
from dodopayments.types.payouts import Payout, PayoutListParams


class PayoutsResource(SyncResource):
    def list(
        self,
        params: PayoutListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[Payout]:
        query, options = request_params(PayoutListParams, params, fields, options)
        return self._client.get_page(DefaultPageNumberPage, "payouts", model=Payout, query=query, options=options)


class AsyncPayoutsResource(AsyncResource):
    async def list(
        self,
        params: PayoutListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[Payout]:
        query, options = request_params(PayoutListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "payouts", model=Payout, query=query, options=options
        )
