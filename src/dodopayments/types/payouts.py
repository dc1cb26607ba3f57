# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for payouts to the merchant."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.types.shared import Currency


class PayoutStatus(str, SdkEnum):
    NOT_INITIATED = "not_initiated"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    FAILED = "failed"
    SUCCESS = "success"


class Payout(SdkModel):
    amount = api(int)
    business_id = api(str)
    chargebacks = api(int)
    created_at = api(datetime)
    currency = api(enum=Currency)
    fee = api(int)
    payment_method = api(str)
    payout_id = api(str)
    refunds = api(int)
    status = api(enum=PayoutStatus)
    tax = api(int)
    updated_at = api(datetime)
    name = api(str, optional=True, nullable=True)
    payout_document_url = api(str, optional=True, nullable=True)
    remarks = api(str, optional=True, nullable=True)


class PayoutListParams(SdkParams):
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
