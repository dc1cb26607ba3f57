# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared plumbing of the resource services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from dodopayments.base_client import AsyncAPIClient, SyncAPIClient
from dodopayments.core.conversion import coerce
from dodopayments.core.model import SdkParams
from dodopayments.request_options import RequestOptions

# ###############
# Public Interface
# ###############

# Per-call request options: an instance, a mapping of option names, or None.
OptionsArg = RequestOptions | Mapping[str, Any] | None


class SyncResource:
    def __init__(self, client: SyncAPIClient) -> None:
        self._client = client


class AsyncResource:
    def __init__(self, client: AsyncAPIClient) -> None:
        self._client = client


def request_params(
    params_type: type[SdkParams],
    params: SdkParams | Mapping[str, Any] | None,
    fields: Mapping[str, Any],
    options: OptionsArg = None,
) -> tuple[dict[str, Any], RequestOptions]:
    """Dump call parameters and normalize the call's request options.

    Parameters may be given as a params object, a mapping, keyword fields, or
    a mix; keyword *fields* override entries of *params*.

    Raises:
        TypeError: If *options* names an unknown request option.
    """
    if fields:
        if isinstance(params, SdkParams):
            params = params.copy_with(**fields)
        else:
            params = {**(params or {}), **fields}
    return params_type.parse_request(params, options)


def path_param(name: str, value: Any) -> str:
    """Percent-encode a path segment, rejecting empty identifiers.

    Raises:
        ValueError: If *value* is empty.
    """
    if not value:
        raise ValueError(f"Expected a non-empty value for `{name}` but received {value!r}")
    return quote(str(value), safe="")


def parse_response(model: Any, raw: Any) -> Any:
    return coerce(model, raw)
