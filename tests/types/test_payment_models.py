# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for payment models and the customer request union."""

from dodopayments.core.conversion import coerce
from dodopayments.types import (
    AttachExistingCustomer,
    BillingAddress,
    CountryCode,
    IntentStatus,
    NewCustomer,
    OneTimeProductCartItem,
    Payment,
    PaymentCreateParams,
    Refund,
)

# ###############
# Helpers
# ###############


PAYMENT = {
    "billing": {"city": "Berlin", "country": "DE", "state": "BE", "street": "Main 1", "zipcode": "10115"},
    "brand_id": "brd_1",
    "business_id": "bus_1",
    "created_at": "2024-04-01T08:00:00Z",
    "currency": "EUR",
    "customer": {"customer_id": "cus_1", "email": "a@example.com", "name": "Ann"},
    "digital_products_delivered": True,
    "disputes": [],
    "metadata": {"order": "42"},
    "payment_id": "pay_1",
    "refunds": [
        {
            "business_id": "bus_1",
            "created_at": "2024-04-02T08:00:00Z",
            "is_partial": True,
            "payment_id": "pay_1",
            "refund_id": "ref_1",
            "status": "pending",
            "amount": 100,
        }
    ],
    "settlement_amount": 1000,
    "settlement_currency": "EUR",
    "total_amount": 1000,
    "status": "succeeded",
    "card_last_four": "4242",
    "error_code": None,
}


# ###############
# Payment
# ###############


def test_payment_decodes_nested_models() -> None:
    payment = coerce(Payment, PAYMENT)

    assert payment.billing.country == CountryCode.DE
    assert payment.customer.email == "a@example.com"
    assert payment.status == IntentStatus.SUCCEEDED
    assert payment.disputes == []
    assert len(payment.refunds) == 1
    assert isinstance(payment.refunds[0], Refund)
    assert payment.refunds[0].is_partial is True


def test_payment_keeps_null_and_unset_apart() -> None:
    payment = coerce(Payment, PAYMENT)
    dumped = payment.to_dict()

    assert dumped["error_code"] is None
    assert "error_message" not in dumped


def test_payment_round_trips() -> None:
    assert Payment.from_dict(PAYMENT).to_dict() == PAYMENT


# ###############
# Customer union
# ###############


def test_existing_customer_reference_is_dumped() -> None:
    params = PaymentCreateParams(
        billing=BillingAddress(city="Berlin", country=CountryCode.DE, state="BE", street="Main 1", zipcode="10115"),
        customer=AttachExistingCustomer(customer_id="cus_1"),
        product_cart=[OneTimeProductCartItem(product_id="pdt_1", quantity=2)],
    )

    body = params.to_dict()

    assert body["customer"] == {"customer_id": "cus_1"}
    assert body["product_cart"] == [{"product_id": "pdt_1", "quantity": 2}]
    assert body["billing"]["country"] == "DE"


def test_new_customer_is_resolved_when_decoding() -> None:
    params = PaymentCreateParams.from_dict(
        {"customer": {"email": "b@example.com", "name": "Bob"}, "product_cart": []}
    )
    assert isinstance(params.customer, NewCustomer)


def test_customer_id_selects_existing_customer() -> None:
    params = PaymentCreateParams.from_dict({"customer": {"customer_id": "cus_9"}})
    assert isinstance(params.customer, AttachExistingCustomer)
