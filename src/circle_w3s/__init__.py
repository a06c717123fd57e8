"""Typed async clients for the Circle Web3 Services REST APIs.

One client per API surface, all sharing the same request/envelope machinery:

* :class:`BuidlWalletsClient` -- indexed transfers, user operations, balances
* :class:`ComplianceClient` -- address screening
* :class:`DeveloperWalletsClient` -- developer-controlled wallets
* :class:`UserWalletsClient` -- user-controlled wallets

Each method performs exactly one HTTP round trip and returns the unwrapped
``data`` payload, or raises a :class:`CircleError`.
"""

from circle_w3s.buidl import BuidlWalletsClient
from circle_w3s.client import DEFAULT_TIMEOUT, ResourceClient
from circle_w3s.codec import PageParams, WireEnum, WireModel, new_idempotency_key
from circle_w3s.compliance import ComplianceClient
from circle_w3s.developer import DeveloperWalletsClient
from circle_w3s.errors import (
    ApiError,
    CircleError,
    DecodeError,
    InvalidEnumValue,
    TransportError,
)
from circle_w3s.request import DEFAULT_BASE_URL, Endpoint
from circle_w3s.user import UserWalletsClient

__all__ = [
    "BuidlWalletsClient",
    "ComplianceClient",
    "DeveloperWalletsClient",
    "UserWalletsClient",
    "ResourceClient",
    "Endpoint",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "PageParams",
    "WireEnum",
    "WireModel",
    "new_idempotency_key",
    "ApiError",
    "CircleError",
    "DecodeError",
    "InvalidEnumValue",
    "TransportError",
]
