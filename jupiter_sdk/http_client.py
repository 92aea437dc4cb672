from __future__ import annotations

import logging
from typing import Optional

import httpx

from jupiter_sdk.core.exceptions import ConfigurationError, ProtocolError, TransportError
from jupiter_sdk.core.request_spec import RequestSpec, validate_headers

logger = logging.getLogger(__name__)

ERROR_BODY_UNAVAILABLE = "Unable to get error details"
_LOG_BODY_LIMIT = 512


class JupiterHttpClient:
    """Single-attempt HTTP transport.

    ``send`` returns the body of a 2xx response and raises ``TransportError``,
    ``ProtocolError`` or ``ConfigurationError`` otherwise. Nothing is retried.
    """

    def __init__(self, timeout: float = 10.0, async_client: Optional[httpx.AsyncClient] = None) -> None:
        self.timeout = timeout
        self._client = async_client
        self._owns_client = async_client is None

    async def __aenter__(self) -> "JupiterHttpClient":
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(self, spec: RequestSpec) -> str:
        client = self._ensure_client()
        headers = validate_headers(spec.headers)
        query = spec.normalized_query()
        try:
            request = client.build_request(
                spec.method,
                spec.url(),
                params=query or None,
                headers=headers,
                json=spec.json,
            )
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Cannot build Jupiter request for {spec.url()}: {exc}") from exc

        logger.debug("jupiter request %s", spec.fingerprint())
        try:
            resp = await client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"Error sending {spec.method} {spec.url()}: {exc}") from exc

        try:
            if not resp.is_success:
                body = await self._error_body(resp)
                logger.warning(
                    "jupiter %s %s returned %s: %s",
                    spec.method,
                    spec.url(),
                    resp.status_code,
                    body[:_LOG_BODY_LIMIT],
                )
                raise ProtocolError(resp.status_code, body)
            try:
                await resp.aread()
            except httpx.RequestError as exc:
                raise TransportError(f"Error reading {spec.method} {spec.url()} response: {exc}") from exc
            return resp.text
        finally:
            await resp.aclose()

    @staticmethod
    async def _error_body(resp: httpx.Response) -> str:
        try:
            await resp.aread()
            return resp.text
        except (httpx.HTTPError, UnicodeDecodeError, LookupError):
            return ERROR_BODY_UNAVAILABLE


__all__ = ["ERROR_BODY_UNAVAILABLE", "JupiterHttpClient"]
