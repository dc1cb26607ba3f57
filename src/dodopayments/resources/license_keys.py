# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""License keys issued for products with licensing enabled."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.pagination import AsyncDefaultPageNumberPage, DefaultPageNumberPage
from dodopayments.resources.base import (
    AsyncResource,
    OptionsArg,
    SyncResource,
    parse_response,
    path_param,
    request_params,
)
from dodopayments.types.license_keys import LicenseKey, LicenseKeyListParams, LicenseKeyUpdateParams


class LicenseKeysResource(SyncResource):
    def retrieve(self, license_key_id: str, *, options: OptionsArg = None) -> LicenseKey:
        path = f"license_keys/{path_param('license_key_id', license_key_id)}"
        return parse_response(LicenseKey, self._client.get(path, options=options))

    def update(
        self,
        license_key_id: str,
        params: LicenseKeyUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseKey:
        path = f"license_keys/{path_param('license_key_id', license_key_id)}"
        body, options = request_params(LicenseKeyUpdateParams, params, fields, options)
        return parse_response(LicenseKey, self._client.patch(path, body=body, options=options))

    def list(
        self,
        params: LicenseKeyListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[LicenseKey]:
        query, options = request_params(LicenseKeyListParams, params, fields, options)
        return self._client.get_page(
            DefaultPageNumberPage, "license_keys", model=LicenseKey, query=query, options=options
        )


class AsyncLicenseKeysResource(AsyncResource):
    async def retrieve(self, license_key_id: str, *, options: OptionsArg = None) -> LicenseKey:
        path = f"license_keys/{path_param('license_key_id', license_key_id)}"
        return parse_response(LicenseKey, await self._client.get(path, options=options))

    async def update(
        self,
        license_key_id: str,
        params: LicenseKeyUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseKey:
        path = f"license_keys/{path_param('license_key_id', license_key_id)}"
        body, options = request_params(LicenseKeyUpdateParams, params, fields, options)
        return parse_response(LicenseKey, await self._client.patch(path, body=body, options=options))

    async def list(
        self,
        params: LicenseKeyListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[LicenseKey]:
        query, options = request_params(LicenseKeyListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "license_keys", model=LicenseKey, query=query, options=options
        )
