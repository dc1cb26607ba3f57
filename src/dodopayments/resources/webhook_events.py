# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Decoding of webhook deliveries."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from dodopayments.core.conversion import coerce
from dodopayments.resources.base import AsyncResource, SyncResource
from dodopayments.types.webhook_events import WebhookPayload


def unwrap_payload(payload: str | bytes | Mapping[str, Any]) -> WebhookPayload:
    """Decode a webhook request body into a :class:`WebhookPayload`.

    Raises:
        ValueError: If *payload* is not a JSON object.
    """
    data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
    if not isinstance(data, Mapping):
        raise ValueError(f"Webhook payload must be a JSON object, got {type(data).__name__}")
    return coerce(WebhookPayload, data)


class WebhookEventsResource(SyncResource):
    def unwrap(self, payload: str | bytes | Mapping[str, Any]) -> WebhookPayload:
        return unwrap_payload(payload)


class AsyncWebhookEventsResource(AsyncResource):
    def unwrap(self, payload: str | bytes | Mapping[str, Any]) -> WebhookPayload:
        return unwrap_payload(payload)
