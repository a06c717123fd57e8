"""Generic resource client shared by every API surface.

Each surface (Buidl, Compliance, Developer, User) subclasses
:class:`ResourceClient` and declares one async method per endpoint, each a
single call to :meth:`ResourceClient._call`.  A call is one independent
round trip: no retry, caching, batching or reordering happens here.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, TypeVar

import httpx

from circle_w3s.codec import WireModel
from circle_w3s.envelope import decode_response
from circle_w3s.errors import TransportError
from circle_w3s.request import DEFAULT_BASE_URL, Endpoint, RequestBuilder

logger = logging.getLogger("circle_w3s.client")

T = TypeVar("T", bound=WireModel)

DEFAULT_TIMEOUT = 30.0


class ResourceClient:
    """Async HTTP client for one Circle Web3 Services API surface.

    Parameters
    ----------
    api_key:
        Circle API key, sent as ``Authorization: Bearer``.
    base_url:
        API root.  Defaults to the Circle production URL; point it at a mock
        server for testing.
    timeout:
        Per-request timeout in seconds.  Must be finite and positive.
    transport:
        Optional ``httpx`` transport (e.g. ``httpx.MockTransport``).
    http_client:
        Optional pre-built ``httpx.AsyncClient``.  A borrowed client is not
        closed by :meth:`aclose`.

    Configuration is fixed at construction.  The underlying connection pool
    is the only shared resource, so any number of calls may run concurrently
    and cancelling one never affects the others.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if timeout is None or not math.isfinite(timeout) or timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        self._timeout = float(timeout)
        self._builder = RequestBuilder(base_url, api_key, self._timeout)
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=transport,
            )
            self._owns_http = True

    @property
    def base_url(self) -> str:
        return self._builder.base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"api_key='<redacted>', timeout={self._timeout})"
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _call(
        self,
        endpoint: Endpoint,
        model: Optional[type[T]],
        params: Optional[WireModel] = None,
        *,
        user_token: Optional[str] = None,
        **path_params: Any,
    ) -> Any:
        """Perform one request and decode its envelope.

        Transport failures surface as :class:`TransportError` before any
        decoding is attempted.
        """
        request = self._builder.build(
            endpoint, params, user_token=user_token, path_params=path_params
        )
        request_id = request.headers["X-Request-Id"]
        logger.debug(
            "%s %s request_id=%s", endpoint.method, endpoint.path, request_id
        )
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as exc:
            logger.warning(
                "%s %s failed (request_id=%s): %s",
                endpoint.method,
                endpoint.path,
                request_id,
                exc,
            )
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        logger.debug(
            "%s %s -> %s request_id=%s",
            endpoint.method,
            endpoint.path,
            response.status_code,
            request_id,
        )
        return decode_response(response.status_code, response.content, model)
