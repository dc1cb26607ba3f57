# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recurring subscriptions."""

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
from dodopayments.types.subscriptions import (
    Subscription,
    SubscriptionChangePlanParams,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionCreateParams,
    SubscriptionCreateResponse,
    SubscriptionListParams,
    SubscriptionUpdateParams,
)


def _path(subscription_id: str, suffix: str = "") -> str:
    return f"subscriptions/{path_param('subscription_id', subscription_id)}{suffix}"


class SubscriptionsResource(SyncResource):
    def create(
        self,
        params: SubscriptionCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> SubscriptionCreateResponse:
        body, options = request_params(SubscriptionCreateParams, params, fields, options)
        raw = self._client.post("subscriptions", body=body, options=options)
        return parse_response(SubscriptionCreateResponse, raw)

    def retrieve(self, subscription_id: str, *, options: OptionsArg = None) -> Subscription:
        return parse_response(Subscription, self._client.get(_path(subscription_id), options=options))

    def update(
        self,
        subscription_id: str,
        params: SubscriptionUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Subscription:
        body, options = request_params(SubscriptionUpdateParams, params, fields, options)
        return parse_response(Subscription, self._client.patch(_path(subscription_id), body=body, options=options))

    def list(
        self,
        params: SubscriptionListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[Subscription]:
        query, options = request_params(SubscriptionListParams, params, fields, options)
        return self._client.get_page(
            DefaultPageNumberPage, "subscriptions", model=Subscription, query=query, options=options
        )

    def change_plan(
        self,
        subscription_id: str,
        params: SubscriptionChangePlanParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        """Move a subscription to another product, prorating as requested."""
        body, options = request_params(SubscriptionChangePlanParams, params, fields, options)
        self._client.post(_path(subscription_id, "/change-plan"), body=body, options=options)

    def charge(
        self,
        subscription_id: str,
        params: SubscriptionChargeParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription."""
        body, options = request_params(SubscriptionChargeParams, params, fields, options)
        raw = self._client.post(_path(subscription_id, "/charge"), body=body, options=options)
        return parse_response(SubscriptionChargeResponse, raw)


class AsyncSubscriptionsResource(AsyncResource):
    async def create(
        self,
        params: SubscriptionCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> SubscriptionCreateResponse:
        body, options = request_params(SubscriptionCreateParams, params, fields, options)
        raw = await self._client.post("subscriptions", body=body, options=options)
        return parse_response(SubscriptionCreateResponse, raw)

    async def retrieve(self, subscription_id: str, *, options: OptionsArg = None) -> Subscription:
        return parse_response(Subscription, await self._client.get(_path(subscription_id), options=options))

    async def update(
        self,
        subscription_id: str,
        params: SubscriptionUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Subscription:
        body, options = request_params(SubscriptionUpdateParams, params, fields, options)
        raw = await self._client.patch(_path(subscription_id), body=body, options=options)
        return parse_response(Subscription, raw)

    async def list(
        self,
        params: SubscriptionListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[Subscription]:
        query, options = request_params(SubscriptionListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "subscriptions", model=Subscription, query=query, options=options
        )

    async def change_plan(
        self,
        subscription_id: str,
        params: SubscriptionChangePlanParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        """Move a subscription to another product, prorating as requested."""
        body, options = request_params(SubscriptionChangePlanParams, params, fields, options)
        await self._client.post(_path(subscription_id, "/change-plan"), body=body, options=options)

    async def charge(
        self,
        subscription_id: str,
        params: SubscriptionChargeParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription."""
        body, options = request_params(SubscriptionChargeParams, params, fields, options)
        raw = await self._client.post(_path(subscription_id, "/charge"), body=body, options=options)
        return parse_response(SubscriptionChargeResponse, raw)
