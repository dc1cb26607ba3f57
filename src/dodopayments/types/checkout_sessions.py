# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for hosted checkout sessions."""

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.core.types import ListOf, MapOf
from dodopayments.types.customers import CustomerRequest
from dodopayments.types.payments import PaymentMethodTypes
from dodopayments.types.shared import CountryCode, Currency
from dodopayments.types.subscriptions import AttachAddon, OnDemandSubscription


class Theme(str, SdkEnum):
    DARK = "dark"
    LIGHT = "light"
    SYSTEM = "system"


class CheckoutProductCartItem(SdkModel):
    product_id = api(str)
    quantity = api(int)
    addons = api(ListOf(AttachAddon), optional=True, nullable=True)
    amount = api(int, optional=True, nullable=True)


class CheckoutBillingAddress(SdkModel):
    """A billing address where everything but the country may be left blank."""

    country = api(enum=CountryCode)
    city = api(str, optional=True, nullable=True)
    state = api(str, optional=True, nullable=True)
    street = api(str, optional=True, nullable=True)
    zipcode = api(str, optional=True, nullable=True)


class Customization(SdkModel):
    show_on_demand_tag = api(bool, optional=True)
    show_order_details = api(bool, optional=True)
    theme = api(enum=Theme, optional=True)


class FeatureFlags(SdkModel):
    allow_currency_selection = api(bool, optional=True)
    allow_discount_code = api(bool, optional=True)
    allow_phone_number_collection = api(bool, optional=True)
    allow_tax_id = api(bool, optional=True)
    always_create_new_customer = api(bool, optional=True)


class SubscriptionData(SdkModel):
    on_demand = api(OnDemandSubscription, optional=True, nullable=True)
    trial_period_days = api(int, optional=True, nullable=True)


class CheckoutSessionCreateParams(SdkParams):
    product_cart = api(ListOf(CheckoutProductCartItem))
    allowed_payment_method_types = api(ListOf(PaymentMethodTypes), optional=True, nullable=True)
    billing_address = api(CheckoutBillingAddress, optional=True, nullable=True)
    billing_currency = api(enum=Currency, optional=True, nullable=True)
    confirm = api(bool, optional=True)
    customer = api(union=CustomerRequest, optional=True, nullable=True)
    customization = api(Customization, optional=True)
    discount_code = api(str, optional=True, nullable=True)
    feature_flags = api(FeatureFlags, optional=True)
    metadata = api(MapOf(str), optional=True, nullable=True)
    return_url = api(str, optional=True, nullable=True)
    show_saved_payment_methods = api(bool, optional=True)
    subscription_data = api(SubscriptionData, optional=True, nullable=True)


class CheckoutSessionResponse(SdkModel):
    checkout_url = api(str)
    session_id = api(str)
