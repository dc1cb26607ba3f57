# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Public endpoints used by licensed software to activate and check its key."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.resources.base import AsyncResource, OptionsArg, SyncResource, parse_response, request_params
from dodopayments.types.license_keys import LicenseKeyInstance
from dodopayments.types.licenses import (
    LicenseActivateParams,
    LicenseDeactivateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)


class LicensesResource(SyncResource):
    def activate(
        self,
        params: LicenseActivateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseKeyInstance:
        body, options = request_params(LicenseActivateParams, params, fields, options)
        return parse_response(LicenseKeyInstance, self._client.post("licenses/activate", body=body, options=options))

    def deactivate(
        self,
        params: LicenseDeactivateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        body, options = request_params(LicenseDeactivateParams, params, fields, options)
        self._client.post("licenses/deactivate", body=body, options=options)

    def validate(
        self,
        params: LicenseValidateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseValidateResponse:
        body, options = request_params(LicenseValidateParams, params, fields, options)
        return parse_response(
            LicenseValidateResponse, self._client.post("licenses/validate", body=body, options=options)
        )


class AsyncLicensesResource(AsyncResource):
    async def activate(
        self,
        params: LicenseActivateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseKeyInstance:
        body, options = request_params(LicenseActivateParams, params, fields, options)
        raw = await self._client.post("licenses/activate", body=body, options=options)
        return parse_response(LicenseKeyInstance, raw)

    async def deactivate(
        self,
        params: LicenseDeactivateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        body, options = request_params(LicenseDeactivateParams, params, fields, options)
        await self._client.post("licenses/deactivate", body=body, options=options)

    async def validate(
        self,
        params: LicenseValidateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> LicenseValidateResponse:
        body, options = request_params(LicenseValidateParams, params, fields, options)
        raw = await self._client.post("licenses/validate", body=body, options=options)
        return parse_response(LicenseValidateResponse, raw)
