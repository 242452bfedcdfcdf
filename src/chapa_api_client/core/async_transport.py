"""Async HTTP transport: request building, dispatch and envelope decoding."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol, TypeVar

import httpx

from ..config import ChapaConfig
from .errors import ChapaClientClosedError, ChapaDecodeError, ChapaTransportError
from .operations import PreparedCall
from .response_parsing import parse_json_payload
from .transport_shared import (
    build_default_timeout,
    build_headers,
    build_url,
    resolve_method,
    transport_error_cause,
)

logger = logging.getLogger("chapa_api_client")

ResultT = TypeVar("ResultT")


class AsyncTransportClient(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Mapping[str, str] | None = None,
        json: object = None,
    ) -> object: ...

    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the Chapa API.

    One ``httpx.AsyncClient`` is created per transport and shared by every
    call, so concurrent awaits reuse its connection pool.
    """

    def __init__(
        self,
        config: ChapaConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=build_default_timeout(config))

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def execute(self, call: PreparedCall[ResultT]) -> ResultT:
        if self._closed:
            raise ChapaClientClosedError("transport is already closed")

        method = resolve_method(call.method)
        url = build_url(self._config, call.endpoint)
        headers = build_headers(self._config)

        logger.debug("request start method=%s endpoint=%s", method.value, call.endpoint)
        try:
            response = await self._client.request(
                method.value,
                url,
                headers=headers,
                params=call.params,
                json=call.body,
            )
        except httpx.HTTPError as exc:
            cause = transport_error_cause(exc)
            logger.error(
                "request failed method=%s endpoint=%s cause=%s error=%s",
                method.value,
                call.endpoint,
                cause,
                exc.__class__.__name__,
            )
            raise ChapaTransportError("network/transport error", cause=cause) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received endpoint=%s http_status=%s",
            call.endpoint,
            http_status,
        )
        try:
            payload = parse_json_payload(response, http_status=http_status)
            result = call.decode(payload, http_status)
        except ChapaDecodeError as exc:
            if exc.http_status is None:
                exc.http_status = http_status
            logger.error(
                "response decode error endpoint=%s http_status=%s field=%s",
                call.endpoint,
                http_status,
                exc.field,
            )
            raise
        logger.info("request decoded endpoint=%s http_status=%s", call.endpoint, http_status)
        return result


__all__ = [
    "AsyncTransport",
]
