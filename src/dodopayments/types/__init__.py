# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed request and response models of the Dodo Payments API."""

from dodopayments.types.checkout_sessions import (
    CheckoutBillingAddress,
    CheckoutProductCartItem,
    CheckoutSessionCreateParams,
    CheckoutSessionResponse,
    Customization,
    FeatureFlags,
    SubscriptionData,
    Theme,
)
from dodopayments.types.customers import (
    AttachExistingCustomer,
    Customer,
    CustomerCreateParams,
    CustomerLimitedDetails,
    CustomerListParams,
    CustomerPortalSession,
    CustomerRequest,
    CustomerUpdateParams,
    NewCustomer,
)
from dodopayments.types.disputes import (
    Dispute,
    DisputeDetail,
    DisputeListParams,
    DisputeStage,
    DisputeStatus,
)
from dodopayments.types.license_keys import (
    LicenseKey,
    LicenseKeyInstance,
    LicenseKeyListParams,
    LicenseKeyStatus,
    LicenseKeyUpdateParams,
)
from dodopayments.types.licenses import (
    LicenseActivateParams,
    LicenseDeactivateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)
from dodopayments.types.payments import (
    IntentStatus,
    OneTimeProductCartItem,
    Payment,
    PaymentCreateParams,
    PaymentCreateResponse,
    PaymentLineItem,
    PaymentLineItemsResponse,
    PaymentListParams,
    PaymentListResponse,
    PaymentMethodTypes,
    ProductCartItem,
)
from dodopayments.types.payouts import Payout, PayoutListParams, PayoutStatus
from dodopayments.types.products import (
    DigitalProductDelivery,
    DigitalProductDeliveryParams,
    LicenseKeyDuration,
    OneTimePrice,
    OneTimePriceType,
    Price,
    Product,
    ProductCreateParams,
    ProductFile,
    ProductListParams,
    ProductListResponse,
    ProductUpdateParams,
    RecurringPrice,
    RecurringPriceType,
)
from dodopayments.types.refunds import (
    Refund,
    RefundCreateParams,
    RefundItem,
    RefundListParams,
    RefundStatus,
)
from dodopayments.types.shared import BillingAddress, CountryCode, Currency, TaxCategory, TimeInterval
from dodopayments.types.subscriptions import (
    AddonCartResponseItem,
    AttachAddon,
    OnDemandSubscription,
    ProrationBillingMode,
    Subscription,
    SubscriptionChangePlanParams,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionCreateParams,
    SubscriptionCreateResponse,
    SubscriptionListParams,
    SubscriptionStatus,
    SubscriptionUpdateParams,
)
from dodopayments.types.webhook_events import (
    DisputeEventData,
    LicenseKeyEventData,
    PaymentEventData,
    RefundEventData,
    SubscriptionEventData,
    WebhookEventType,
    WebhookPayload,
    WebhookPayloadData,
)

__all__ = [
    # Shared
    "BillingAddress",
    "CountryCode",
    "Currency",
    "TaxCategory",
    "TimeInterval",
    # Customers
    "AttachExistingCustomer",
    "Customer",
    "CustomerCreateParams",
    "CustomerLimitedDetails",
    "CustomerListParams",
    "CustomerPortalSession",
    "CustomerRequest",
    "CustomerUpdateParams",
    "NewCustomer",
    # Payments
    "IntentStatus",
    "OneTimeProductCartItem",
    "Payment",
    "PaymentCreateParams",
    "PaymentCreateResponse",
    "PaymentLineItem",
    "PaymentLineItemsResponse",
    "PaymentListParams",
    "PaymentListResponse",
    "PaymentMethodTypes",
    "ProductCartItem",
    # Refunds
    "Refund",
    "RefundCreateParams",
    "RefundItem",
    "RefundListParams",
    "RefundStatus",
    # Disputes
    "Dispute",
    "DisputeDetail",
    "DisputeListParams",
    "DisputeStage",
    "DisputeStatus",
    # Subscriptions
    "AddonCartResponseItem",
    "AttachAddon",
    "OnDemandSubscription",
    "ProrationBillingMode",
    "Subscription",
    "SubscriptionChangePlanParams",
    "SubscriptionChargeParams",
    "SubscriptionChargeResponse",
    "SubscriptionCreateParams",
    "SubscriptionCreateResponse",
    "SubscriptionListParams",
    "SubscriptionStatus",
    "SubscriptionUpdateParams",
    # Products
    "DigitalProductDelivery",
    "DigitalProductDeliveryParams",
    "LicenseKeyDuration",
    "OneTimePrice",
    "OneTimePriceType",
    "Price",
    "Product",
    "ProductCreateParams",
    "ProductFile",
    "ProductListParams",
    "ProductListResponse",
    "ProductUpdateParams",
    "RecurringPrice",
    "RecurringPriceType",
    # License keys
    "LicenseActivateParams",
    "LicenseDeactivateParams",
    "LicenseKey",
    "LicenseKeyInstance",
    "LicenseKeyListParams",
    "LicenseKeyStatus",
    "LicenseKeyUpdateParams",
    "LicenseValidateParams",
    "LicenseValidateResponse",
    # Payouts
    "Payout",
    "PayoutListParams",
    "PayoutStatus",
    # Checkout sessions
    "CheckoutBillingAddress",
    "CheckoutProductCartItem",
    "CheckoutSessionCreateParams",
    "CheckoutSessionResponse",
    "Customization",
    "FeatureFlags",
    "SubscriptionData",
    "Theme",
    # Webhooks
    "DisputeEventData",
    "LicenseKeyEventData",
    "PaymentEventData",
    "RefundEventData",
    "SubscriptionEventData",
    "WebhookEventType",
    "WebhookPayload",
    "WebhookPayloadData",
]
