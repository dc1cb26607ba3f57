# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Services grouping the API endpoints by resource."""

from dodopayments.resources.checkout_sessions import AsyncCheckoutSessionsResource, CheckoutSessionsResource
from dodopayments.resources.customers import AsyncCustomersResource, CustomersResource
from dodopayments.resources.disputes import AsyncDisputesResource, DisputesResource
from dodopayments.resources.license_keys import AsyncLicenseKeysResource, LicenseKeysResource
from dodopayments.resources.licenses import AsyncLicensesResource, LicensesResource
from dodopayments.resources.payments import AsyncPaymentsResource, PaymentsResource
from dodopayments.resources.payouts import AsyncPayoutsResource, PayoutsResource
from dodopayments.resources.products import AsyncProductsResource, ProductsResource
from dodopayments.resources.refunds import AsyncRefundsResource, RefundsResource
from dodopayments.resources.subscriptions import AsyncSubscriptionsResource, SubscriptionsResource
from dodopayments.resources.webhook_events import AsyncWebhookEventsResource, WebhookEventsResource, unwrap_payload

__all__ = [
    "AsyncCheckoutSessionsResource",
    "AsyncCustomersResource",
    "AsyncDisputesResource",
    "AsyncLicenseKeysResource",
    "AsyncLicensesResource",
    "AsyncPaymentsResource",
    "AsyncPayoutsResource",
    "AsyncProductsResource",
    "AsyncRefundsResource",
    "AsyncSubscriptionsResource",
    "AsyncWebhookEventsResource",
    "CheckoutSessionsResource",
    "CustomersResource",
    "DisputesResource",
    "LicenseKeysResource",
    "LicensesResource",
    "PaymentsResource",
    "PayoutsResource",
    "ProductsResource",
    "RefundsResource",
    "SubscriptionsResource",
    "WebhookEventsResource",
    "unwrap_payload",
]
