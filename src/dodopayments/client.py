# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry points of the SDK: the synchronous and asynchronous API clients."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import httpx

from dodopayments.base_client import AsyncAPIClient, SyncAPIClient
from dodopayments.config import API_KEY_ENV, BASE_URL_ENV, ENVIRONMENTS, ClientConfig
from dodopayments.errors import ConfigError
from dodopayments.request_options import RequestOptions
from dodopayments.resources import (
    AsyncCheckoutSessionsResource,
    AsyncCustomersResource,
    AsyncDisputesResource,
    AsyncLicenseKeysResource,
    AsyncLicensesResource,
    AsyncPaymentsResource,
    AsyncPayoutsResource,
    AsyncProductsResource,
    AsyncRefundsResource,
    AsyncSubscriptionsResource,
    AsyncWebhookEventsResource,
    CheckoutSessionsResource,
    CustomersResource,
    DisputesResource,
    LicenseKeysResource,
    LicensesResource,
    PaymentsResource,
    PayoutsResource,
    ProductsResource,
    RefundsResource,
    SubscriptionsResource,
    WebhookEventsResource,
)

# ###############
# Public Interface
# ###############


class DodoPayments(SyncAPIClient):
    """Blocking client for the Dodo Payments API.

    The API key falls back to ``DODO_PAYMENTS_API_KEY``. The base URL is taken
    from *base_url*, then ``DODO_PAYMENTS_BASE_URL``, then *environment*.

    Raises:
        ConfigError: If *environment* is unknown.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        environment: str | None = None,
        config: ClientConfig | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        settings = _resolve_settings(config, api_key, base_url, environment, timeout, max_retries)
        super().__init__(
            base_url=settings["base_url"],
            api_key=settings["api_key"],
            options=settings["options"],
            default_headers=default_headers,
            http_client=http_client,
        )
        self.payments = PaymentsResource(self)
        self.refunds = RefundsResource(self)
        self.disputes = DisputesResource(self)
        self.subscriptions = SubscriptionsResource(self)
        self.customers = CustomersResource(self)
        self.products = ProductsResource(self)
        self.license_keys = LicenseKeysResource(self)
        self.licenses = LicensesResource(self)
        self.payouts = PayoutsResource(self)
        self.checkout_sessions = CheckoutSessionsResource(self)
        self.webhook_events = WebhookEventsResource(self)


class AsyncDodoPayments(AsyncAPIClient):
    """Non-blocking client for the Dodo Payments API, configured like :class:`DodoPayments`."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        environment: str | None = None,
        config: ClientConfig | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = _resolve_settings(config, api_key, base_url, environment, timeout, max_retries)
        super().__init__(
            base_url=settings["base_url"],
            api_key=settings["api_key"],
            options=settings["options"],
            default_headers=default_headers,
            http_client=http_client,
        )
        self.payments = AsyncPaymentsResource(self)
        self.refunds = AsyncRefundsResource(self)
        self.disputes = AsyncDisputesResource(self)
        self.subscriptions = AsyncSubscriptionsResource(self)
        self.customers = AsyncCustomersResource(self)
        self.products = AsyncProductsResource(self)
        self.license_keys = AsyncLicenseKeysResource(self)
        self.licenses = AsyncLicensesResource(self)
        self.payouts = AsyncPayoutsResource(self)
        self.checkout_sessions = AsyncCheckoutSessionsResource(self)
        self.webhook_events = AsyncWebhookEventsResource(self)


# ################
# Implementation
# ################


def _resolve_settings(
    config: ClientConfig | None,
    api_key: str | None,
    base_url: str | None,
    environment: str | None,
    timeout: float | None,
    max_retries: int | None,
) -> dict[str, Any]:
    """Combine explicit arguments, a loaded config and the environment, in that order."""
    config = config or ClientConfig()
    for name in (environment, config.environment):
        if name is not None and name not in ENVIRONMENTS:
            choices = ", ".join(sorted(ENVIRONMENTS))
            raise ConfigError(f"Unknown environment '{name}', expected one of {choices}")

    if base_url is None:
        if environment is not None:
            base_url = ENVIRONMENTS[environment]
        else:
            base_url = config.base_url or os.environ.get(BASE_URL_ENV) or ENVIRONMENTS[config.environment]

    options = RequestOptions(
        timeout=config.timeout if timeout is None else timeout,
        max_retries=config.max_retries if max_retries is None else max_retries,
    )
    return {
        "api_key": api_key or config.api_key or os.environ.get(API_KEY_ENV),
        "base_url": base_url,
        "options": options,
    }
