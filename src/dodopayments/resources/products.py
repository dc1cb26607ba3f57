# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Products sold by the business."""

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
from dodopayments.types.products import (
    Product,
    ProductCreateParams,
    ProductListParams,
    ProductListResponse,
    ProductUpdateParams,
)


def _path(product_id: str, suffix: str = "") -> str:
    return f"products/{path_param('product_id', product_id)}{suffix}"


class ProductsResource(SyncResource):
    def create(
        self,
        params: ProductCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Product:
        body, options = request_params(ProductCreateParams, params, fields, options)
        return parse_response(Product, self._client.post("products", body=body, options=options))

    def retrieve(self, product_id: str, *, options: OptionsArg = None) -> Product:
        return parse_response(Product, self._client.get(_path(product_id), options=options))

    def update(
        self,
        product_id: str,
        params: ProductUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        body, options = request_params(ProductUpdateParams, params, fields, options)
        self._client.patch(_path(product_id), body=body, options=options)

    def list(
        self,
        params: ProductListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> DefaultPageNumberPage[ProductListResponse]:
        query, options = request_params(ProductListParams, params, fields, options)
        return self._client.get_page(
            DefaultPageNumberPage, "products", model=ProductListResponse, query=query, options=options
        )

    def archive(self, product_id: str, *, options: OptionsArg = None) -> None:
        self._client.delete(_path(product_id), options=options)

    def unarchive(self, product_id: str, *, options: OptionsArg = None) -> None:
        self._client.post(_path(product_id, "/unarchive"), options=options)


class AsyncProductsResource(AsyncResource):
    async def create(
        self,
        params: ProductCreateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> Product:
        body, options = request_params(ProductCreateParams, params, fields, options)
        return parse_response(Product, await self._client.post("products", body=body, options=options))

    async def retrieve(self, product_id: str, *, options: OptionsArg = None) -> Product:
        return parse_response(Product, await self._client.get(_path(product_id), options=options))

    async def update(
        self,
        product_id: str,
        params: ProductUpdateParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> None:
        body, options = request_params(ProductUpdateParams, params, fields, options)
        await self._client.patch(_path(product_id), body=body, options=options)

    async def list(
        self,
        params: ProductListParams | Mapping[str, Any] | None = None,
        *,
        options: OptionsArg = None,
        **fields: Any,
    ) -> AsyncDefaultPageNumberPage[ProductListResponse]:
        query, options = request_params(ProductListParams, params, fields, options)
        return await self._client.get_page(
            AsyncDefaultPageNumberPage, "products", model=ProductListResponse, query=query, options=options
        )

    async def archive(self, product_id: str, *, options: OptionsArg = None) -> None:
        await self._client.delete(_path(product_id), options=options)

    async def unarchive(self, product_id: str, *, options: OptionsArg = None) -> None:
        await self._client.post(_path(product_id, "/unarchive"), options=options)
