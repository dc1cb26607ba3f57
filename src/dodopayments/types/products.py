# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for products and their prices.

A product carries either a :class:`OneTimePrice` or a :class:`RecurringPrice`.
The two are told apart by their ``type`` field, whose single allowed value
differs between them.
"""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams, SdkUnion
from dodopayments.core.registry import api
from dodopayments.core.types import ListOf, MapOf
from dodopayments.types.shared import Currency, TaxCategory, TimeInterval


class OneTimePriceType(str, SdkEnum):
    ONE_TIME_PRICE = "one_time_price"


class RecurringPriceType(str, SdkEnum):
    RECURRING_PRICE = "recurring_price"


class OneTimePrice(SdkModel):
    currency = api(enum=Currency)
    discount = api(float)
    # Amounts are in the lowest denomination of the currency.
    price = api(int)
    purchasing_power_parity = api(bool)
    type = api(enum=OneTimePriceType)
    pay_what_you_want = api(bool, optional=True)
    suggested_price = api(int, optional=True, nullable=True)
    tax_inclusive = api(bool, optional=True, nullable=True)


class RecurringPrice(SdkModel):
    currency = api(enum=Currency)
    discount = api(float)
    payment_frequency_count = api(int)
    payment_frequency_interval = api(enum=TimeInterval)
    price = api(int)
    purchasing_power_parity = api(bool)
    subscription_period_count = api(int)
    subscription_period_interval = api(enum=TimeInterval)
    type = api(enum=RecurringPriceType)
    tax_inclusive = api(bool, optional=True, nullable=True)
    trial_period_days = api(int, optional=True)


class Price(SdkUnion):
    variants = (OneTimePrice, RecurringPrice)
    discriminator = "type"
    mapping = {
        OneTimePriceType.ONE_TIME_PRICE.value: OneTimePrice,
        RecurringPriceType.RECURRING_PRICE.value: RecurringPrice,
    }


class LicenseKeyDuration(SdkModel):
    count = api(int)
    interval = api(enum=TimeInterval)


class ProductFile(SdkModel):
    file_id = api(str)
    file_name = api(str)
    url = api(str)


class DigitalProductDelivery(SdkModel):
    external_url = api(str, optional=True, nullable=True)
    files = api(ListOf(ProductFile), optional=True, nullable=True)
    instructions = api(str, optional=True, nullable=True)


class Product(SdkModel):
    brand_id = api(str)
    business_id = api(str)
    created_at = api(datetime)
    is_recurring = api(bool)
    license_key_enabled = api(bool)
    metadata = api(MapOf(str))
    price = api(union=Price)
    product_id = api(str)
    tax_category = api(enum=TaxCategory)
    updated_at = api(datetime)
    addons = api(ListOf(str), optional=True, nullable=True)
    description = api(str, optional=True, nullable=True)
    digital_product_delivery = api(DigitalProductDelivery, optional=True, nullable=True)
    image = api(str, optional=True, nullable=True)
    license_key_activation_message = api(str, optional=True, nullable=True)
    license_key_activations_limit = api(int, optional=True, nullable=True)
    license_key_duration = api(LicenseKeyDuration, optional=True, nullable=True)
    name = api(str, optional=True, nullable=True)


class ProductListResponse(SdkModel):
    business_id = api(str)
    created_at = api(datetime)
    is_recurring = api(bool)
    metadata = api(MapOf(str))
    product_id = api(str)
    tax_category = api(enum=TaxCategory)
    updated_at = api(datetime)
    currency = api(enum=Currency, optional=True, nullable=True)
    description = api(str, optional=True, nullable=True)
    image = api(str, optional=True, nullable=True)
    name = api(str, optional=True, nullable=True)
    price = api(int, optional=True, nullable=True)
    price_detail = api(union=Price, optional=True, nullable=True)
    tax_inclusive = api(bool, optional=True, nullable=True)


class DigitalProductDeliveryParams(SdkModel):
    external_url = api(str, optional=True, nullable=True)
    instructions = api(str, optional=True, nullable=True)


class ProductCreateParams(SdkParams):
    price = api(union=Price)
    tax_category = api(enum=TaxCategory)
    addons = api(ListOf(str), optional=True, nullable=True)
    brand_id = api(str, optional=True, nullable=True)
    description = api(str, optional=True, nullable=True)
    digital_product_delivery = api(DigitalProductDeliveryParams, optional=True, nullable=True)
    license_key_activation_message = api(str, optional=True, nullable=True)
    license_key_activations_limit = api(int, optional=True, nullable=True)
    license_key_duration = api(LicenseKeyDuration, optional=True, nullable=True)
    license_key_enabled = api(bool, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True)
    name = api(str, optional=True, nullable=True)


class ProductUpdateParams(SdkParams):
    addons = api(ListOf(str), optional=True, nullable=True)
    brand_id = api(str, optional=True, nullable=True)
    description = api(str, optional=True, nullable=True)
    digital_product_delivery = api(DigitalProductDeliveryParams, optional=True, nullable=True)
    image_id = api(str, optional=True, nullable=True)
    license_key_activation_message = api(str, optional=True, nullable=True)
    license_key_activations_limit = api(int, optional=True, nullable=True)
    license_key_duration = api(LicenseKeyDuration, optional=True, nullable=True)
    license_key_enabled = api(bool, optional=True, nullable=True)
    metadata = api(MapOf(str), optional=True, nullable=True)
    name = api(str, optional=True, nullable=True)
    price = api(union=Price, optional=True, nullable=True)
    tax_category = api(enum=TaxCategory, optional=True, nullable=True)


class ProductListParams(SdkParams):
    archived = api(bool, optional=True)
    brand_id = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
    recurring = api(bool, optional=True)
