# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Python client for the Dodo Payments API."""

import logging
import os

from dodopayments.client import AsyncDodoPayments, DodoPayments
from dodopayments.config import ClientConfig, load_client_config
from dodopayments.core.types import UNSET
from dodopayments.errors import (
    APIConnectionError,
    APIError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    BadRequestError,
    ConfigError,
    ConflictError,
    DodoPaymentsError,
    InternalServerError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RegistryError,
    UnprocessableEntityError,
)
from dodopayments.pagination import AsyncCursorPage, AsyncDefaultPageNumberPage, CursorPage, DefaultPageNumberPage
from dodopayments.request_options import RequestOptions
from dodopayments.version import __version__

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Send the SDK's log records to stderr.

    The level defaults to ``DODO_PAYMENTS_LOG``, then ``WARNING``. Calling this
    again only changes the level.
    """
    if level is None:
        level = os.environ.get("DODO_PAYMENTS_LOG") or logging.WARNING
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("dodopayments")
    logger.setLevel(level)
    if not any(getattr(h, "_dodopayments", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._dodopayments = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = [
    "__version__",
    "setup_logging",
    # Clients
    "AsyncDodoPayments",
    "DodoPayments",
    "ClientConfig",
    "load_client_config",
    "RequestOptions",
    "UNSET",
    # Pagination
    "AsyncCursorPage",
    "AsyncDefaultPageNumberPage",
    "CursorPage",
    "DefaultPageNumberPage",
    # Errors
    "APIConnectionError",
    "APIError",
    "APIStatusError",
    "APITimeoutError",
    "AuthenticationError",
    "BadRequestError",
    "ConfigError",
    "ConflictError",
    "DodoPaymentsError",
    "InternalServerError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "RegistryError",
    "UnprocessableEntityError",
]
