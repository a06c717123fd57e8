"""Envelope decoder: interpret a completed HTTP response.

Successful responses wrap their payload as ``{"data": ...}``; failures carry
``{"code": int, "message": str}``.  :func:`decode_response` is a pure
function of ``(status_code, body)`` that either returns the typed payload or
raises one of the errors in :mod:`circle_w3s.errors`.
"""

from __future__ import annotations

import json
from typing import Any, Optional, TypeVar

from circle_w3s.codec import ErrorEnvelope, WireModel
from circle_w3s.errors import ApiError, DecodeError, TransportError

T = TypeVar("T", bound=WireModel)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _parse_json(body: bytes) -> Any:
    """Parse *body* as JSON, raising ``ValueError`` on failure."""
    if not body:
        raise ValueError("empty body")
    return json.loads(body)


def decode_response(
    status_code: int,
    body: bytes,
    model: Optional[type[T]] = None,
) -> Any:
    """Decode one HTTP response.

    Parameters
    ----------
    status_code:
        HTTP status of the response.
    body:
        Raw response body.
    model:
        Model the ``data`` member is decoded into.  ``None`` returns the raw
        ``data`` value.

    Returns
    -------
    The decoded ``data`` payload.

    Raises
    ------
    DecodeError
        2xx body that is not ``{"data": <model>}``, or a JSON error body that
        is not a valid error envelope.
    ApiError
        Non-2xx response carrying a well-formed error envelope.
    TransportError
        Non-2xx response whose body is not JSON (e.g. an HTML error page
        from a proxy).
    """
    if is_success(status_code):
        try:
            payload = _parse_json(body)
        except ValueError as exc:
            raise DecodeError(f"invalid JSON: {exc}", status_code, body) from exc
        if not isinstance(payload, dict) or "data" not in payload:
            raise DecodeError("missing 'data' envelope", status_code, body)
        if model is None:
            return payload["data"]
        try:
            return model.decode(payload["data"])
        except DecodeError as exc:
            exc.status_code = status_code
            raise

    try:
        payload = _parse_json(body)
    except ValueError as exc:
        raise TransportError("non-JSON error response", status_code, body) from exc
    try:
        envelope = ErrorEnvelope.decode(payload)
    except DecodeError as exc:
        raise DecodeError(
            f"malformed error envelope: {exc}", status_code, body
        ) from exc
    raise ApiError(envelope.code, envelope.message, status_code)
