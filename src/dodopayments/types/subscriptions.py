# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for recurring subscriptions."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.core.types import ListOf, MapOf
from dodopayments.types.customers import CustomerLimitedDetails, CustomerRequest
from dodopayments.types.payments import PaymentMethodTypes
from dodopayments.types.shared import BillingAddress, Currency, TimeInterval


class SubscriptionStatus(str, SdkEnum):
    PENDING = "pending"
    ACTIVE = "active"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"
    FAILED = "failed"
    EXPIRED = "expired"


class ProrationBillingMode(str, SdkEnum):
    PRORATED_IMMEDIATELY = "prorated_immediately"
    FULL_IMMEDIATELY = "full_immediately"
    DIFFERENCE_IMMEDIATELY = "difference_immediately"


class AddonCartResponseItem(SdkModel):
    addon_id = api(str)
    quantity = api(int)


class AttachAddon(SdkModel):
    addon_id = api(str)
    quantity = api(int)


class OnDemandSubscription(SdkModel):
    """Options for subscriptions that are charged on demand instead of on a schedule."""

    mandate_only = api(bool)
    adaptive_currency_fees_inclusive = api(bool, optional=True, nullable=True)
    product_currency = api(enum=Currency, optional=True, nullable=True)
    product_description = api(str, optional=True, nullable=True)
    product_price = api(int, optional=True, nullable=True)


class Subscription(SdkModel):
    addons = api(ListOf(AddonCartResponseItem))
    billing = api(BillingAddress)
    cancel_at_next_billing_date = api(bool)
    created_at = api(datetime)
    currency = api(enum=Currency)
    customer = api(CustomerLimitedDetails)
    metadata = api(MapOf(str))
    next_billing_date = api(datetime)
    on_demand = api(bool)
    payment_frequency_count = api(int)
    payment_frequency_interval = api(enum=TimeInterval)
    previous_billing_date = api(datetime)
    product_id = api(str)
    quantity = api(int)
    recurring_pre_tax_amount = api(int)
    status = api(enum=SubscriptionStatus)
    subscription_id = api(str)
    subscription_period_count = api(int)
    subscription_period_interval = api(enum=TimeInterval)
    tax_inclusive = api(bool)
    trial_period_days = api(int)
    cancelled_at = api(datetime, optional=True, nullable=True)
    discount_cycles_remaining = api(int, optional=True, nullable=True)
    discount_id = api(str, optional=True, nullable=True)


class SubscriptionCreateResponse(SdkModel):
    addons = api(ListOf(AddonCartResponseItem))
    customer = api(CustomerLimitedDetails)
    metadata = api(MapOf(str))
    payment_id = api(str)
    recurring_pre_tax_amount = api(int)
    subscription_id = api(str)
    client_secret = api(str, optional=True, nullable=True)
    discount_id = api(str, optional=True, nullable=True)
    expires_on = api(datetime, optional=True, nullable=True)
    payment_link = api(str, optional=True, nullable=True)


class SubscriptionChargeResponse(SdkModel):
    payment_id = api(str)


class SubscriptionCreateParams(SdkParams):
    billing = api(BillingAddress)
    customer = api(union=CustomerRequest)
    product_id = api(str)
    quantity = api(int)
    addons = api(ListOf(AttachAddon), optional=True, nullable=True)
    allowed_payment_method_types = api(ListOf(PaymentMethodTypes), optional=True, nullable=True)
    billing_currency = api(enum=Currency, optional=True, nullable=True)
    discount_code = api(str, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True)
    on_demand = api(OnDemandSubscription, optional=True, nullable=True)
    payment_link = api(bool, optional=True, nullable=True)
    return_url = api(str, optional=True, nullable=True)
    show_saved_payment_methods = api(bool, optional=True)
    tax_id = api(str, optional=True, nullable=True)
    trial_period_days = api(int, optional=True, nullable=True)


class SubscriptionUpdateParams(SdkParams):
    billing = api(BillingAddress, optional=True, nullable=True)
    cancel_at_next_billing_date = api(bool, optional=True, nullable=True)
    disable_on_demand = api(bool, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True, nullable=True)
    status = api(enum=SubscriptionStatus, optional=True, nullable=True)
    tax_id = api(str, optional=True, nullable=True)


class SubscriptionChangePlanParams(SdkParams):
    product_id = api(str)
    proration_billing_mode = api(enum=ProrationBillingMode)
    quantity = api(int)
    addons = api(ListOf(AttachAddon), optional=True, nullable=True)


class SubscriptionChargeParams(SdkParams):
    product_price = api(int)
    adaptive_currency_fees_inclusive = api(bool, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True, nullable=True)
    product_currency = api(enum=Currency, optional=True, nullable=True)
    product_description = api(str, optional=True, nullable=True)


class SubscriptionListParams(SdkParams):
    brand_id = api(str, optional=True)
    created_at_gte = api(datetime, optional=True)
    created_at_lte = api(datetime, optional=True)
    customer_id = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
    status = api(enum=SubscriptionStatus, optional=True)
