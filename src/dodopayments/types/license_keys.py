# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for license keys and their activated instances."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api


class LicenseKeyStatus(str, SdkEnum):
    ACTIVE = "active"
    EXPIRED = "expired"
    DISABLED = "disabled"


class LicenseKey(SdkModel):
    id = api(str)
    business_id = api(str)
    created_at = api(datetime)
    customer_id = api(str)
    instances_count = api(int)
    key = api(str)
    payment_id = api(str)
    product_id = api(str)
    status = api(enum=LicenseKeyStatus)
    activations_limit = api(int, optional=True, nullable=True)
    expires_at = api(datetime, optional=True, nullable=True)
    subscription_id = api(str, optional=True, nullable=True)


class LicenseKeyInstance(SdkModel):
    id = api(str)
    business_id = api(str)
    created_at = api(datetime)
    license_key_id = api(str)
    name = api(str)


class LicenseKeyUpdateParams(SdkParams):
    # Setting a field to None clears it on the server.
    activations_limit = api(int, optional=True, nullable=True)
    disabled = api(bool, optional=True, nullable=True)
    expires_at = api(datetime, optional=True, nullable=True)


class LicenseKeyListParams(SdkParams):
    customer_id = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
    product_id = api(str, optional=True)
    status = api(enum=LicenseKeyStatus, optional=True)
