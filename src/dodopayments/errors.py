# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy raised by the Dodo Payments SDK.

Conversion between wire JSON and models never raises for shape mismatches;
the only conversion-related error is :class:`RegistryError`, raised when a
model class declares its fields inconsistently. Everything under
:class:`APIError` originates in the HTTP client layer.
"""

from __future__ import annotations

from typing import Any

import httpx

# ###############
# Public Interface
# ###############


class DodoPaymentsError(Exception):
    """Base class for every error raised by the SDK."""


class RegistryError(DodoPaymentsError):
    """Raised when a model class has an inconsistent field declaration."""


class ConfigError(DodoPaymentsError):
    """Raised when the client configuration is invalid or cannot be loaded."""


class APIError(DodoPaymentsError):
    """Raised for any failure while talking to the API.

    Attributes:
        request: The request that failed.
        body: The decoded response body, if one was received.
    """

    def __init__(self, message: str, request: httpx.Request, *, body: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.request = request
        self.body = body


class APIConnectionError(APIError):
    """Raised when the API could not be reached."""

    def __init__(self, request: httpx.Request, message: str = "Connection error.") -> None:
        super().__init__(message, request)


class APITimeoutError(APIConnectionError):
    """Raised when a request timed out."""

    def __init__(self, request: httpx.Request) -> None:
        super().__init__(request, message="Request timed out.")


class APIStatusError(APIError):
    """Raised when the API answers with a 4xx or 5xx status code."""

    def __init__(self, message: str, *, response: httpx.Response, body: Any) -> None:
        super().__init__(message, response.request, body=body)
        self.response = response
        self.status_code = response.status_code


class BadRequestError(APIStatusError):
    """HTTP 400."""


class AuthenticationError(APIStatusError):
    """HTTP 401."""


class PermissionDeniedError(APIStatusError):
    """HTTP 403."""


class NotFoundError(APIStatusError):
    """HTTP 404."""


class ConflictError(APIStatusError):
    """HTTP 409."""


class UnprocessableEntityError(APIStatusError):
    """HTTP 422."""


class RateLimitError(APIStatusError):
    """HTTP 429."""


class InternalServerError(APIStatusError):
    """HTTP 5xx."""


def make_status_error(response: httpx.Response, body: Any) -> APIStatusError:
    """Build the :class:`APIStatusError` subclass matching *response*'s status code."""
    status = response.status_code
    error_class = _STATUS_ERRORS.get(status)
    if error_class is None:
        error_class = InternalServerError if status >= 500 else APIStatusError
    return error_class(_status_message(status, body), response=response, body=body)


# ################
# Implementation
# ################

_STATUS_ERRORS: dict[int, type[APIStatusError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def _status_message(status: int, body: Any) -> str:
    """Derive a readable message, preferring the API's own ``message`` field."""
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return f"Error code: {status} - {message}"
    if body:
        return f"Error code: {status} - {body}"
    return f"Error code: {status}"
