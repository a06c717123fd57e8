"""Exception taxonomy shared by every Circle Web3 Services client.

Every failure a client method can produce is a :class:`CircleError`.  The
three request-level kinds are mutually exclusive for a single call:

* :class:`TransportError` -- no well-formed HTTP response was obtained
  (connection refused, TLS failure, timeout, reset) or a non-2xx response
  body was not JSON at all.
* :class:`ApiError` -- the server answered non-2xx with a well-formed
  ``{"code", "message"}`` error envelope.
* :class:`DecodeError` -- the body was JSON but did not match the expected
  schema.

:class:`InvalidEnumValue` is raised locally, before any request is sent,
when a string does not name a member of a closed wire enumeration.
"""

from __future__ import annotations

# Longest body excerpt kept on an error for diagnostics.
BODY_SNIPPET_LIMIT = 512


def body_snippet(body: bytes | str | None) -> str | None:
    """Return a printable, truncated excerpt of a response body."""
    if body is None:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if len(body) > BODY_SNIPPET_LIMIT:
        return body[:BODY_SNIPPET_LIMIT] + "..."
    return body


class CircleError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(CircleError):
    """The request did not produce a usable HTTP response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: bytes | str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body_snippet(body)
        detail = message
        if status_code is not None:
            detail = f"{detail} (HTTP {status_code})"
        if self.body:
            detail = f"{detail}: {self.body}"
        super().__init__(f"HTTP transport error: {detail}")


class ApiError(CircleError):
    """The Circle API rejected the request with an error envelope.

    ``code`` is the API-defined error code, not the HTTP status; it is
    exposed unchanged so callers can branch on it.
    """

    def __init__(self, code: int, message: str, status_code: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"Circle API error {code}: {message}")


class DecodeError(CircleError):
    """A response body did not match the schema it was decoded against."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: bytes | str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body_snippet(body)
        super().__init__(f"Failed to deserialize response: {message}")


class InvalidEnumValue(CircleError, ValueError):
    """A string is not one of the wire values of a closed enumeration."""

    def __init__(self, enum_name: str, value: str, allowed: list[str]) -> None:
        self.enum_name = enum_name
        self.value = value
        self.allowed = allowed
        shown = ", ".join(repr(a) for a in allowed)
        super().__init__(f"Unrecognised {enum_name} '{value}'. Allowed: {shown}")
