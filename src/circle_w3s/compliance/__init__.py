"""Compliance Engine API: blockchain address screening."""

from circle_w3s.compliance.client import ComplianceClient
from circle_w3s.compliance.models import (
    AddressScreeningDecision,
    BlockchainAddressScreeningResponse,
    Chain,
    RiskSignal,
    ScreenAddressRequest,
    ScreeningResult,
    ScreeningVendorDetail,
    SignalSource,
)

__all__ = [
    "ComplianceClient",
    "AddressScreeningDecision",
    "BlockchainAddressScreeningResponse",
    "Chain",
    "RiskSignal",
    "ScreenAddressRequest",
    "ScreeningResult",
    "ScreeningVendorDetail",
    "SignalSource",
]
