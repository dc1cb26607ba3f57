# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for webhook deliveries.

The ``data`` object of a webhook is one of the resource models extended with a
``payload_type`` key naming the resource, which selects the variant.
"""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkUnion
from dodopayments.core.registry import api
from dodopayments.types.disputes import Dispute
from dodopayments.types.license_keys import LicenseKey
from dodopayments.types.payments import Payment
from dodopayments.types.refunds import Refund
from dodopayments.types.subscriptions import Subscription


class WebhookEventType(str, SdkEnum):
    PAYMENT_SUCCEEDED = "payment.succeeded"
    PAYMENT_FAILED = "payment.failed"
    PAYMENT_PROCESSING = "payment.processing"
    PAYMENT_CANCELLED = "payment.cancelled"
    REFUND_SUCCEEDED = "refund.succeeded"
    REFUND_FAILED = "refund.failed"
    DISPUTE_OPENED = "dispute.opened"
    DISPUTE_EXPIRED = "dispute.expired"
    DISPUTE_ACCEPTED = "dispute.accepted"
    DISPUTE_CANCELLED = "dispute.cancelled"
    DISPUTE_CHALLENGED = "dispute.challenged"
    DISPUTE_WON = "dispute.won"
    DISPUTE_LOST = "dispute.lost"
    SUBSCRIPTION_ACTIVE = "subscription.active"
    SUBSCRIPTION_RENEWED = "subscription.renewed"
    SUBSCRIPTION_ON_HOLD = "subscription.on_hold"
    SUBSCRIPTION_CANCELLED = "subscription.cancelled"
    SUBSCRIPTION_FAILED = "subscription.failed"
    SUBSCRIPTION_EXPIRED = "subscription.expired"
    SUBSCRIPTION_PLAN_CHANGED = "subscription.plan_changed"
    LICENSE_KEY_CREATED = "license_key.created"


class PaymentEventData(Payment):
    payload_type = api(str)


class SubscriptionEventData(Subscription):
    payload_type = api(str)


class RefundEventData(Refund):
    payload_type = api(str)


class DisputeEventData(Dispute):
    payload_type = api(str)


class LicenseKeyEventData(LicenseKey):
    payload_type = api(str)


class WebhookPayloadData(SdkUnion):
    variants = (
        PaymentEventData,
        SubscriptionEventData,
        RefundEventData,
        DisputeEventData,
        LicenseKeyEventData,
    )
    discriminator = "payload_type"
    mapping = {
        "Payment": PaymentEventData,
        "Subscription": SubscriptionEventData,
        "Refund": RefundEventData,
        "Dispute": DisputeEventData,
        "LicenseKey": LicenseKeyEventData,
    }


class WebhookPayload(SdkModel):
    business_id = api(str)
    data = api(union=WebhookPayloadData)
    timestamp = api(datetime)
    type = api(enum=WebhookEventType)
