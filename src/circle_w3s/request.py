"""Authenticated request builder.

An :class:`Endpoint` describes one remote operation; :class:`RequestBuilder`
turns an endpoint plus its parameters into an ``httpx.Request`` carrying the
bearer token, a fresh ``X-Request-Id`` and, for user-scoped operations, an
``X-User-Token``.
"""

from __future__ import annotations

import string
import uuid
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from circle_w3s.codec import WireModel

DEFAULT_BASE_URL = "https://api.circle.com"

_FORMATTER = string.Formatter()


@dataclass(frozen=True)
class Endpoint:
    """HTTP method and path template of one API operation.

    ``body`` selects JSON-body encoding of the parameters; otherwise they go
    into the query string.
    """

    method: str
    path: str
    body: bool = False

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in _FORMATTER.parse(self.path) if name
        )

    def render(self, **params: Any) -> str:
        """Substitute path parameters, URL-quoting each value."""
        missing = [name for name in self.path_params if params.get(name) in (None, "")]
        if missing:
            raise ValueError(
                f"Missing path parameter(s) {missing} for {self.method} {self.path}"
            )
        quoted = {name: quote(str(params[name]), safe="") for name in self.path_params}
        return self.path.format(**quoted)


def _query_value(value: Any) -> Any:
    if isinstance(value, list):
        return ",".join(str(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def new_request_id() -> str:
    return str(uuid.uuid4())


class RequestBuilder:
    """Builds authenticated requests against one base URL.

    The API key is held privately and redacted from ``repr()``; it is never
    logged.  When *timeout* is given it is attached to every built request,
    so the transport enforces it regardless of how the request is sent.
    """

    def __init__(
        self, base_url: str, api_key: str, timeout: Optional[float] = None
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"RequestBuilder(base_url={self._base_url!r}, api_key='<redacted>')"

    def headers(self, user_token: Optional[str] = None) -> dict[str, str]:
        """Return the headers for one request, with a fresh request id."""
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "X-Request-Id": new_request_id(),
            "Accept": "application/json",
        }
        if user_token is not None:
            if not user_token:
                raise ValueError("user_token must not be empty")
            headers["X-User-Token"] = user_token
        return headers

    def build(
        self,
        endpoint: Endpoint,
        params: Optional[WireModel] = None,
        *,
        user_token: Optional[str] = None,
        path_params: Optional[dict[str, Any]] = None,
    ) -> httpx.Request:
        """Build the request for *endpoint*.

        Parameters
        ----------
        endpoint:
            Operation descriptor.
        params:
            Query or body model; ``None`` sends neither.
        user_token:
            End-user token for user-scoped operations.  Must be non-empty when
            given.
        path_params:
            Values substituted into the endpoint's path template.
        """
        url = self._base_url + endpoint.render(**(path_params or {}))
        encoded = params.encode() if params is not None else None
        kwargs: dict[str, Any] = {"headers": self.headers(user_token)}
        if endpoint.body:
            kwargs["json"] = encoded if encoded is not None else {}
        elif encoded:
            kwargs["params"] = {k: _query_value(v) for k, v in encoded.items()}
        if self._timeout is not None:
            kwargs["extensions"] = {"timeout": httpx.Timeout(self._timeout).as_dict()}
        return httpx.Request(endpoint.method, url, **kwargs)
