# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Customers of the business."""

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
from dodopayments.types.customers import (
    Customer,
    CustomerCreateParams,
    CustomerListParams,
    CustomerUpdateParams,
)


class CustomersResource(SyncResource):
    def create(
        self,
        params: CustomerCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Customer:
        body, options = request_params(CustomerCreateParams, params, fields, options)
        return parse_response(Customer, self._client.post("customers", body=body, options=options))

    def retrieve(self, customer_id: str, *, options: OptionsArg = None) -> Customer:
        path = f"customers/{path_param('customer_id', customer_id)}"
        return parse_response(Customer, self._client.get(path, options=options))

    def update(
        self,
        customer_id: str,
        params: CustomerUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Customer:
        path = f"customers/{path_param('customer_id', customer_id)}"
        body, options = request_params(CustomerUpdateParams, params, fields, options)
        return parse_response(Customer, self._client.patch(path, body=body, options=options))

    def list(
        self,
        params: CustomerListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[Customer]:
        query, options = request_params(CustomerListParams, params, fields, options)
        return self._client.get_page(DefaultPageNumberPage, "customers", model=Customer, query=query, options=options)


class AsyncCustomersResource(AsyncResource):
    async def create(
        self,
        params: CustomerCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Customer:
        body, options = request_params(CustomerCreateParams, params, fields, options)
        return parse_response(Customer, await self._client.post("customers", body=body, options=options))

    async def retrieve(self, customer_id: str, *, options: OptionsArg = None) -> Customer:
        path = f"customers/{path_param('customer_id', customer_id)}"
        return parse_response(Customer, await self._client.get(path, options=options))

    async def update(
        self,
        customer_id: str,
        params: CustomerUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Customer:
        path = f"customers/{path_param('customer_id', customer_id)}"
        body, options = request_params(CustomerUpdateParams, params, fields, options)
        return parse_response(Customer, await self._client.patch(path, body=body, options=options))

    async def list(
        self,
        params: CustomerListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[Customer]:
        query, options = request_params(CustomerListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "customers", model=Customer, query=query, options=options
        )
