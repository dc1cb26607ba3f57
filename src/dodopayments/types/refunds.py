# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for refunds."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.core.types import ListOf
from dodopayments.types.shared import Currency


class RefundStatus(str, SdkEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    PENDING = "pending"
    REVIEW = "review"


class Refund(SdkModel):
    business_id = api(str)
    created_at = api(datetime)
    is_partial = api(bool)
    payment_id = api(str)
    refund_id = api(str)
    status = api(enum=RefundStatus)
    amount = api(int, optional=True, nullable=True)
    currency = api(enum=Currency, optional=True, nullable=True)
    reason = api(str, optional=True, nullable=True)


class RefundItem(SdkModel):
    """One line item of a partial refund."""

    item_id = api(str)
    amount = api(int, optional=True, nullable=True)
    tax_inclusive = api(bool, optional=True)


class RefundCreateParams(SdkParams):
    payment_id = api(str)
    # Omitting items refunds the full payment.
    items = api(ListOf(RefundItem), optional=True, nullable=True)
    reason = api(str, optional=True, nullable=True)


class RefundListParams(SdkParams):
    created_at_gte = api(datetime, optional=True)
    created_at_lte = api(datetime, optional=True)
    customer_id = api(str, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
    status = api(enum=RefundStatus, optional=True)
