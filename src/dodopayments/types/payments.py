# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for one-time payments."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.core.types import ListOf, MapOf
from dodopayments.types.customers import CustomerLimitedDetails, CustomerRequest
from dodopayments.types.disputes import Dispute
from dodopayments.types.refunds import Refund
from dodopayments.types.shared import BillingAddress, CountryCode, Currency


class IntentStatus(str, SdkEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    PROCESSING = "processing"
    REQUIRES_CUSTOMER_ACTION = "requires_customer_action"
    REQUIRES_MERCHANT_ACTION = "requires_merchant_action"
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_CAPTURE = "requires_capture"
    PARTIALLY_CAPTURED = "partially_captured"
    PARTIALLY_CAPTURED_AND_CAPTURABLE = "partially_captured_and_capturable"


class PaymentMethodTypes(str, SdkEnum):
    CREDIT = "credit"
    DEBIT = "debit"
    UPI_COLLECT = "upi_collect"
    UPI_INTENT = "upi_intent"
    APPLE_PAY = "apple_pay"
    CASHAPP = "cashapp"
    GOOGLE_PAY = "google_pay"
    MULTIBANCO = "multibanco"
    BANCONTACT_CARD = "bancontact_card"
    EPS = "eps"
    IDEAL = "ideal"
    PRZELEWY24 = "przelewy24"
    AFFIRM = "affirm"
    KLARNA = "klarna"
    SEPA = "sepa"
    ACH = "ach"
    AMAZON_PAY = "amazon_pay"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"


class OneTimeProductCartItem(SdkModel):
    product_id = api(str)
    quantity = api(int)
    # Only honoured for pay-what-you-want products.
    amount = api(int, optional=True, nullable=True)


class ProductCartItem(SdkModel):
    product_id = api(str)
    quantity = api(int)


class Payment(SdkModel):
    """A one-time payment and everything attached to it."""

    billing = api(BillingAddress)
    brand_id = api(str)
    business_id = api(str)
    created_at = api(datetime)
    currency = api(enum=Currency)
    customer = api(CustomerLimitedDetails)
    digital_products_delivered = api(bool)
    disputes = api(ListOf(Dispute))
    metadata = api(MapOf(str))
    payment_id = api(str)
    refunds = api(ListOf(Refund))
    settlement_amount = api(int)
    settlement_currency = api(enum=Currency)
    total_amount = api(int)
    card_issuing_country = api(enum=CountryCode, optional=True, nullable=True)
    card_last_four = api(str, optional=True, nullable=True)
    card_network = api(str, optional=True, nullable=True)
    card_type = api(str, optional=True, nullable=True)
    discount_id = api(str, optional=True, nullable=True)
    error_code = api(str, optional=True, nullable=True)
    error_message = api(str, optional=True, nullable=True)
    payment_link = api(str, optional=True, nullable=True)
    payment_method = api(str, optional=True, nullable=True)
    payment_method_type = api(str, optional=True, nullable=True)
    product_cart = api(ListOf(ProductCartItem), optional=True, nullable=True)
    settlement_tax = api(int, optional=True, nullable=True)
    status = api(enum=IntentStatus, optional=True, nullable=True)
    subscription_id = api(str, optional=True, nullable=True)
    tax = api(int, optional=True, nullable=True)
    updated_at = api(datetime, optional=True, nullable=True)


class PaymentListResponse(SdkModel):
    brand_id = api(str)
    created_at = api(datetime)
    currency = api(enum=Currency)
    customer = api(CustomerLimitedDetails)
    digital_products_delivered = api(bool)
    metadata = api(MapOf(str))
    payment_id = api(str)
    total_amount = api(int)
    payment_method = api(str, optional=True, nullable=True)
    payment_method_type = api(str, optional=True, nullable=True)
    status = api(enum=IntentStatus, optional=True, nullable=True)
    subscription_id = api(str, optional=True, nullable=True)


class PaymentCreateResponse(SdkModel):
    client_secret = api(str)
    customer = api(CustomerLimitedDetails)
    metadata = api(MapOf(str))
    payment_id = api(str)
    total_amount = api(int)
    discount_id = api(str, optional=True, nullable=True)
    expires_on = api(datetime, optional=True, nullable=True)
    payment_link = api(str, optional=True, nullable=True)
    product_cart = api(ListOf(OneTimeProductCartItem), optional=True, nullable=True)


class PaymentLineItem(SdkModel):
    amount = api(int)
    items_id = api(str)
    refundable_amount = api(int)
    tax = api(int)
    description = api(str, optional=True, nullable=True)
    name = api(str, optional=True, nullable=True)


class PaymentLineItemsResponse(SdkModel):
    currency = api(enum=Currency)
    items = api(ListOf(PaymentLineItem))


class PaymentCreateParams(SdkParams):
    billing = api(BillingAddress)
    customer = api(union=CustomerRequest)
    product_cart = api(ListOf(OneTimeProductCartItem))
    allowed_payment_method_types = api(ListOf(PaymentMethodTypes), optional=True, nullable=True)
    billing_currency = api(enum=Currency, optional=True, nullable=True)
    discount_code = api(str, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True)
    payment_link = api(bool, optional=True, nullable=True)
    return_url = api(str, optional=True, nullable=True)
    show_saved_payment_methods = api(bool, optional=True)
    tax_id = api(str, optional=True, nullable=True)


class PaymentListParams(SdkParams):
    brand_id = api(str, optional=True)
    created_at_gte = api(datetime, optional=True)
    created_at_lte = api(datetime, optional=True)
    customer_id = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
    status = api(enum=IntentStatus, optional=True)
    subscription_id = api(str, optional=True)
