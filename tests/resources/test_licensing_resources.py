# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the license key and license activation resources."""

import json
from datetime import UTC, datetime

import httpx
import pytest
import respx

from dodopayments import AsyncDodoPayments, DodoPayments
from dodopayments.types import LicenseKey, LicenseKeyInstance, LicenseKeyStatus, LicenseValidateResponse

BASE = "https://live.dodopayments.com"

# ###############
# Helpers
# ###############

LICENSE_KEY = {
    "id": "lic_1",
    "business_id": "bus_1",
    "created_at": "2024-05-01T00:00:00Z",
    "customer_id": "cus_1",
    "instances_count": 1,
    "key": "AAAA-BBBB",
    "payment_id": "pay_1",
    "product_id": "pdt_1",
    "status": "active",
    "activations_limit": 3,
}

INSTANCE = {
    "id": "lki_1",
    "business_id": "bus_1",
    "created_at": "2024-05-02T00:00:00Z",
    "license_key_id": "lic_1",
    "name": "laptop",
}


@pytest.fixture
def client() -> DodoPayments:
    return DodoPayments(api_key="sk_test")


# ###############
# License keys
# ###############


def test_retrieve_license_key(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    respx_mock.get(f"{BASE}/license_keys/lic_1").mock(return_value=httpx.Response(200, json=LICENSE_KEY))

    key = client.license_keys.retrieve("lic_1")

    assert isinstance(key, LicenseKey)
    assert key.status == LicenseKeyStatus.ACTIVE
    assert key.activations_limit == 3


def test_update_can_clear_fields(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    route = respx_mock.patch(f"{BASE}/license_keys/lic_1").mock(return_value=httpx.Response(200, json=LICENSE_KEY))

    client.license_keys.update("lic_1", activations_limit=None, expires_at=datetime(2025, 1, 1, tzinfo=UTC))

    assert json.loads(route.calls.last.request.content) == {
        "activations_limit": None,
        "expires_at": "2025-01-01T00:00:00Z",
    }


def test_list_license_keys(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    route = respx_mock.get(f"{BASE}/license_keys").mock(
        return_value=httpx.Response(200, json={"items": [LICENSE_KEY]})
    )

    page = client.license_keys.list(product_id="pdt_1")

    assert page.items[0].key == "AAAA-BBBB"
    assert route.calls.last.request.url.params["product_id"] == "pdt_1"


# ###############
# Licenses
# ###############


def test_activate(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    route = respx_mock.post(f"{BASE}/licenses/activate").mock(return_value=httpx.Response(201, json=INSTANCE))

    instance = client.licenses.activate(license_key="AAAA-BBBB", name="laptop")

    assert isinstance(instance, LicenseKeyInstance)
    assert instance.license_key_id == "lic_1"
    assert json.loads(route.calls.last.request.content) == {"license_key": "AAAA-BBBB", "name": "laptop"}


def test_deactivate_returns_none(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    respx_mock.post(f"{BASE}/licenses/deactivate").mock(return_value=httpx.Response(200))
    assert client.licenses.deactivate(license_key="AAAA-BBBB", license_key_instance_id="lki_1") is None


def test_validate(client: DodoPayments, respx_mock: respx.MockRouter) -> None:
    respx_mock.post(f"{BASE}/licenses/validate").mock(return_value=httpx.Response(200, json={"valid": True}))

    result = client.licenses.validate(license_key="AAAA-BBBB")

    assert isinstance(result, LicenseValidateResponse)
    assert result.valid is True


async def test_async_validate(respx_mock: respx.MockRouter) -> None:
    respx_mock.post(f"{BASE}/licenses/validate").mock(return_value=httpx.Response(200, json={"valid": False}))

    async with AsyncDodoPayments(api_key="sk_test") as client:
        result = await client.licenses.validate(license_key="AAAA-BBBB")

    assert result.valid is False
