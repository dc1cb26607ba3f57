# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""HTTP transport shared by the synchronous and asynchronous clients.

Requests go through ``httpx``. Failures that may be transient (connection
errors, timeouts, and the status codes in :data:`RETRY_STATUS_CODES`) are
retried with exponential back-off; every other error status raises the
matching :class:`~dodopayments.errors.APIStatusError` immediately.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Self, TypeVar

import anyio
import httpx

from dodopayments.core.conversion import dump_unknown
from dodopayments.errors import APIConnectionError, APITimeoutError, make_status_error
from dodopayments.request_options import RequestOptions
from dodopayments.version import __version__

if TYPE_CHECKING:
    from dodopayments.pagination import AsyncPage, SyncPage

logger = logging.getLogger(__name__)

SyncPageT = TypeVar("SyncPageT", bound="SyncPage[Any]")
AsyncPageT = TypeVar("AsyncPageT", bound="AsyncPage[Any]")

# ###############
# Public Interface
# ###############

RETRY_STATUS_CODES = frozenset({408, 409, 429})
MAX_REDIRECTS = 20


class BaseClient:
    """Request building, retry policy and response decoding without any I/O.

    Attributes:
        base_url: Root URL every request path is joined to.
        api_key: Bearer token, or None to send no ``Authorization`` header.
        options: Defaults for every request; per-call options override them.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        options: RequestOptions | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.options = options or RequestOptions()
        self._default_headers = dict(default_headers or {})

    @property
    def auth_headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {"Authorization": f"Bearer {self.api_key}"}

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"dodopayments-python/{__version__}",
            **self._default_headers,
        }

    def build_request(
        self,
        http: httpx.Client | httpx.AsyncClient,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None,
        body: Any,
        options: RequestOptions,
    ) -> httpx.Request:
        """Assemble the ``httpx`` request for one API call.

        Headers are layered as defaults, auth, then ``extra_headers``; the query
        is merged with ``extra_query`` and a JSON object body with ``extra_body``.
        """
        headers = {**self.default_headers, **self.auth_headers, **options.extra_headers}
        params = {k: v for k, v in dump_unknown({**(query or {}), **options.extra_query}).items() if v is not None}
        if isinstance(body, Mapping) and options.extra_body:
            body = {**body, **options.extra_body}
        elif body is None and options.extra_body:
            body = dict(options.extra_body)
        return http.build_request(
            method,
            f"{self.base_url}/{path.lstrip('/')}",
            params=params,
            json=None if body is None else dump_unknown(body),
            headers=headers,
            timeout=options.timeout,
        )

    def should_retry(self, response: httpx.Response) -> bool:
        return response.status_code in RETRY_STATUS_CODES or response.status_code >= 500

    def retry_delay(self, attempt: int, options: RequestOptions, response: httpx.Response | None) -> float:
        """Seconds to wait before retry number *attempt*, counting from 1."""
        if response is not None and "Retry-After" in response.headers:
            try:
                retry_after = float(response.headers["Retry-After"])
            except ValueError:
                retry_after = -1.0
            if retry_after >= 0:
                return min(retry_after, options.max_retry_delay)
        return min(options.initial_retry_delay * 2 ** (attempt - 1), options.max_retry_delay)

    def process_response(self, response: httpx.Response) -> Any:
        """Decode a response body, raising for error statuses.

        Raises:
            APIStatusError: If the status code is 4xx or 5xx.
        """
        body = _decode_body(response)
        if response.is_error:
            raise make_status_error(response, body)
        return body

    def resolve_options(self, options: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
        return self.options.merge(options)


class SyncAPIClient(BaseClient):
    """Blocking transport built on :class:`httpx.Client`."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        options: RequestOptions | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url=base_url, api_key=api_key, options=options, default_headers=default_headers)
        self._http = http_client or httpx.Client(follow_redirects=True, max_redirects=MAX_REDIRECTS)

    def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one API call and return its decoded JSON body, or None for 204.

        Raises:
            APIStatusError: For error statuses, once retries are exhausted where retryable.
            APIConnectionError: If the API could not be reached after all retries.
        """
        opts = self.resolve_options(options)
        request = self.build_request(self._http, method, path, query=query, body=body, options=opts)
        attempt = 0
        while True:
            logger.debug("%s %s", request.method, request.url)
            try:
                response = self._http.send(request)
            except httpx.TooManyRedirects as exc:
                raise APIConnectionError(request, message=f"Too many redirects: {exc}") from exc
            except httpx.TransportError as exc:
                if attempt >= opts.max_retries:
                    logger.warning("Giving up on %s %s after %d attempts", request.method, request.url, attempt + 1)
                    raise _connection_error(request, exc) from exc
                attempt += 1
                delay = self.retry_delay(attempt, opts, None)
                logger.info("Retrying %s %s in %.2fs after %s", request.method, request.url, delay, type(exc).__name__)
                time.sleep(delay)
                continue

            if self.should_retry(response) and attempt < opts.max_retries:
                attempt += 1
                delay = self.retry_delay(attempt, opts, response)
                logger.info(
                    "Retrying %s %s in %.2fs after status %d", request.method, request.url, delay, response.status_code
                )
                response.close()
                time.sleep(delay)
                continue
            if self.should_retry(response) and opts.max_retries:
                logger.warning("Giving up on %s %s after %d attempts", request.method, request.url, attempt + 1)
            return self.process_response(response)

    def get(self, path: str, *, query: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return self.request("GET", path, query=query, options=options)

    def post(self, path: str, *, body: Any = None, options: Any = None) -> Any:
        return self.request("POST", path, body=body, options=options)

    def patch(self, path: str, *, body: Any = None, options: Any = None) -> Any:
        return self.request("PATCH", path, body=body, options=options)

    def delete(self, path: str, *, options: Any = None) -> Any:
        return self.request("DELETE", path, options=options)

    def get_page(
        self,
        page_type: type[SyncPageT],
        path: str,
        *,
        model: Any,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> SyncPageT:
        """Fetch one page of a list endpoint."""
        opts = self.resolve_options(options)
        query = dict(query or {})
        raw = self.request("GET", path, query=query, options=opts)
        return page_type(client=self, path=path, model=model, query=query, options=opts, raw=raw)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncAPIClient(BaseClient):
    """Non-blocking transport built on :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        options: RequestOptions | None = None,
        default_headers: Mapping[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url=base_url, api_key=api_key, options=options, default_headers=default_headers)
        self._http = http_client or httpx.AsyncClient(follow_redirects=True, max_redirects=MAX_REDIRECTS)

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one API call and return its decoded JSON body, or None for 204.

        Raises:
            APIStatusError: For error statuses, once retries are exhausted where retryable.
            APIConnectionError: If the API could not be reached after all retries.
        """
        opts = self.resolve_options(options)
        request = self.build_request(self._http, method, path, query=query, body=body, options=opts)
        attempt = 0
        while True:
            logger.debug("%s %s", request.method, request.url)
            try:
                response = await self._http.send(request)
            except httpx.TooManyRedirects as exc:
                raise APIConnectionError(request, message=f"Too many redirects: {exc}") from exc
            except httpx.TransportError as exc:
                if attempt >= opts.max_retries:
                    logger.warning("Giving up on %s %s after %d attempts", request.method, request.url, attempt + 1)
                    raise _connection_error(request, exc) from exc
                attempt += 1
                delay = self.retry_delay(attempt, opts, None)
                logger.info("Retrying %s %s in %.2fs after %s", request.method, request.url, delay, type(exc).__name__)
                await anyio.sleep(delay)
                continue

            if self.should_retry(response) and attempt < opts.max_retries:
                attempt += 1
                delay = self.retry_delay(attempt, opts, response)
                logger.info(
                    "Retrying %s %s in %.2fs after status %d", request.method, request.url, delay, response.status_code
                )
                await response.aclose()
                await anyio.sleep(delay)
                continue
            if self.should_retry(response) and opts.max_retries:
                logger.warning("Giving up on %s %s after %d attempts", request.method, request.url, attempt + 1)
            return self.process_response(response)

    async def get(self, path: str, *, query: Mapping[str, Any] | None = None, options: Any = None) -> Any:
        return await self.request("GET", path, query=query, options=options)

    async def post(self, path: str, *, body: Any = None, options: Any = None) -> Any:
        return await self.request("POST", path, body=body, options=options)

    async def patch(self, path: str, *, body: Any = None, options: Any = None) -> Any:
        return await self.request("PATCH", path, body=body, options=options)

    async def delete(self, path: str, *, options: Any = None) -> Any:
        return await self.request("DELETE", path, options=options)

    async def get_page(
        self,
        page_type: type[AsyncPageT],
        path: str,
        *,
        model: Any,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> AsyncPageT:
        """Fetch one page of a list endpoint."""
        opts = self.resolve_options(options)
        query = dict(query or {})
        raw = await self.request("GET", path, query=query, options=opts)
        return page_type(client=self, path=path, model=model, query=query, options=opts, raw=raw)

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


# ################
# Implementation
# ################


def _decode_body(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _connection_error(request: httpx.Request, exc: httpx.TransportError) -> APIConnectionError:
    if isinstance(exc, httpx.TimeoutException):
        return APITimeoutError(request)
    return APIConnectionError(request, message=f"Connection error: {exc}")
