# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Models for payment disputes."""

from datetime import datetime

from dodopayments.core.model import SdkEnum, SdkModel, SdkParams
from dodopayments.core.registry import api
from dodopayments.types.customers import CustomerLimitedDetails


class DisputeStage(str, SdkEnum):
    PRE_DISPUTE = "pre_dispute"
    DISPUTE = "dispute"
    PRE_ARBITRATION = "pre_arbitration"


class DisputeStatus(str, SdkEnum):
    DISPUTE_OPENED = "dispute_opened"
    DISPUTE_EXPIRED = "dispute_expired"
    DISPUTE_ACCEPTED = "dispute_accepted"
    DISPUTE_CANCELLED = "dispute_cancelled"
    DISPUTE_CHALLENGED = "dispute_challenged"
    DISPUTE_WON = "dispute_won"
    DISPUTE_LOST = "dispute_lost"


class Dispute(SdkModel):
    # The API reports dispute amounts and currencies as plain strings.
    amount = api(str)
    business_id = api(str)
    created_at = api(datetime)
    currency = api(str)
    dispute_id = api(str)
    dispute_stage = api(enum=DisputeStage)
    dispute_status = api(enum=DisputeStatus)
    payment_id = api(str)
    remarks = api(str, optional=True, nullable=True)


class DisputeDetail(Dispute):
    """A dispute as returned by the retrieve endpoint, with customer and evidence."""

    customer = api(CustomerLimitedDetails)
    reason = api(str, optional=True, nullable=True)


class DisputeListParams(SdkParams):
    created_at_gte = api(datetime, optional=True)
    created_at_lte = api(datetime, optional=True)
    customer_id = api(str, optional=True)
    dispute_stage = api(enum=DisputeStage, optional=True)
    dispute_status = api(enum=DisputeStatus, optional=True)
    page_number = api(int, optional=True)
    page_size = api(int, optional=True)
