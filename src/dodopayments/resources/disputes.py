# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Payment disputes raised by customers."""

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
from dodopayments.types.disputes import Dispute, DisputeDetail, DisputeListParams


class DisputesResource(SyncResource):
    def retrieve(self, dispute_id: str, *, options: OptionsArg = None) -> DisputeDetail:
        path = f"disputes/{path_param('dispute_id', dispute_id)}"
        return parse_response(DisputeDetail, self._client.get(path, options=options))

    def list(
        self,
        params: DisputeListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[Dispute]:
        query, options = request_params(DisputeListParams, params, fields, options)
        return self._client.get_page(DefaultPageNumberPage, "disputes", model=Dispute, query=query, options=options)


class AsyncDisputesResource(AsyncResource):
    async def retrieve(self, dispute_id: str, *, options: OptionsArg = None) -> DisputeDetail:
        path = f"disputes/{path_param('dispute_id', dispute_id)}"
        return parse_response(DisputeDetail, await self._client.get(path, options=options))

    async def list(
        self,
        params: DisputeListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[Dispute]:
        query, options = request_params(DisputeListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "disputes", model=Dispute, query=query, options=options
        )
