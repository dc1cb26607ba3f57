# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for customers."""

from datetime import datetime

from dodopayments.core.model import SdkModel, SdkParams, SdkUnion
from dodopayments.core.registry import api


class Customer(SdkModel):
    business_id = api(str)
    created_at = api(datetime)
    customer_id = api(str)
    email = api(str)
    name = api(str)
    phone_number = api(str, optional=True, nullable=True)


class CustomerLimitedDetails(SdkModel):
    """The customer fields embedded in payments, subscriptions and disputes."""

    customer_id = api(str)
    email = api(str)
    name = api(str)


class AttachExistingCustomer(SdkModel):
    customer_id = api(str)


class NewCustomer(SdkModel):
    email = api(str)
    name = api(str)
    phone_number = api(str, optional=True, nullable=True)


class CustomerRequest(SdkUnion):
    """Either a reference to an existing customer or the details of a new one."""

    variants = (AttachExistingCustomer, NewCustomer)


class CustomerPortalSession(SdkModel):
    link = api(str)


class CustomerCreateParams(SdkParams):
    email = api(str)
    name = api(str)
    phone_number = api(str, optional=True, nullable=True)


class CustomerUpdateParams(SdkParams):
    name = api(str, optional=True, nullable=True)
    phone_number = api(str, optional=True, nullable=True)


class CustomerListParams(SdkParams):
    email = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
