# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for unwrapping webhook deliveries."""

import json

import pytest

from dodopayments import AsyncDodoPayments, DodoPayments
from dodopayments.resources.webhook_events import unwrap_payload
from dodopayments.types import LicenseKeyEventData, WebhookEventType, WebhookPayload

# ###############
# Helpers
# ###############

DELIVERY = {
    "business_id": "bus_1",
    "timestamp": "2024-05-01T00:00:01Z",
    "type": "license_key.created",
    "data": {
        "payload_type": "LicenseKey",
        "id": "lic_1",
        "business_id": "bus_1",
        "created_at": "2024-05-01T00:00:00Z",
        "customer_id": "cus_1",
        "instances_count": 0,
        "key": "AAAA-BBBB",
        "payment_id": "pay_1",
        "product_id": "pdt_1",
        "status": "active",
    },
}


# ###############
# Normal Cases
# ###############


@pytest.mark.parametrize("encode", [json.dumps, lambda d: json.dumps(d).encode("utf-8"), lambda d: d])
def test_unwrap_accepts_text_bytes_and_mappings(encode) -> None:
    payload = unwrap_payload(encode(DELIVERY))

    assert isinstance(payload, WebhookPayload)
    assert payload.type == WebhookEventType.LICENSE_KEY_CREATED
    assert isinstance(payload.data, LicenseKeyEventData)
    assert payload.data.key == "AAAA-BBBB"


def test_client_resources_unwrap() -> None:
    body = json.dumps(DELIVERY)
    assert DodoPayments().webhook_events.unwrap(body) == AsyncDodoPayments().webhook_events.unwrap(body)


# ###############
# Error Cases
# ###############


def test_non_object_payload_is_rejected() -> None:
    with pytest.raises(ValueError, match="must be a JSON object, got list"):
        unwrap_payload("[1, 2]")


def test_malformed_json_is_rejected() -> None:
    with pytest.raises(ValueError):
        unwrap_payload("{broken")
