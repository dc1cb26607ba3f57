# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Hosted checkout sessions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.resources.base import AsyncResource, OptionsArg, SyncResource, parse_response, request_params
from dodopayments.types.checkout_sessions import CheckoutSessionCreateParams, CheckoutSessionResponse


class CheckoutSessionsResource(SyncResource):
    def create(
        self,
        params: CheckoutSessionCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> CheckoutSessionResponse:
        """Create a checkout session and return the URL to send the customer to."""
        body, options = request_params(CheckoutSessionCreateParams, params, fields, options)
        return parse_response(CheckoutSessionResponse, self._client.post("checkouts", body=body, options=options))


class AsyncCheckoutSessionsResource(AsyncResource):
    async def create(
        self,
        params: CheckoutSessionCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> CheckoutSessionResponse:
        """Create a checkout session and return the URL to send the customer to."""
        body, options = request_params(CheckoutSessionCreateParams, params, fields, options)
        raw = await self._client.post("checkouts", body=body, options=options)
        return parse_response(CheckoutSessionResponse, raw)
