"""Compliance Engine wire types for blockchain address screening."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from circle_w3s.codec import IdempotentRequest, WireEnum, WireModel
from circle_w3s.models import RiskAction, RiskCategory, RiskScore, RiskType


class Chain(WireEnum):
    """Chains the screening service accepts, wider than the wallet catalog."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    ALGO = "ALGO"
    ATOM = "ATOM"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    HBAR = "HBAR"
    SOL = "SOL"
    SOL_DEVNET = "SOL-DEVNET"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    TRX = "TRX"
    XLM = "XLM"
    BCH = "BCH"
    BTC = "BTC"
    BSV = "BSV"
    ETC = "ETC"
    LTC = "LTC"
    XMR = "XMR"
    XRP = "XRP"
    ZRX = "ZRX"
    OP = "OP"
    DOT = "DOT"


class ScreeningResult(WireEnum):
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class ScreenAddressRequest(IdempotentRequest):
    address: str
    chain: Chain


class SignalSource(WireModel):
    row_id: str
    pointer: str


class RiskSignal(WireModel):
    source: str
    source_value: str
    risk_score: RiskScore
    risk_categories: list[RiskCategory]
    risk_type: RiskType = Field(alias="type")
    signal_source: Optional[SignalSource] = None


class AddressScreeningDecision(WireModel):
    screening_date: str
    rule_name: Optional[str] = None
    actions: Optional[list[RiskAction]] = None
    reasons: Optional[list[RiskSignal]] = None


class ScreeningVendorDetail(WireModel):
    """Raw verdict of one screening vendor; ``response`` is vendor-specific."""

    id: str
    vendor: str
    response: Any = None
    create_date: str


class BlockchainAddressScreeningResponse(WireModel):
    result: ScreeningResult
    decision: AddressScreeningDecision
    id: str
    address: str
    chain: Chain
    details: list[ScreeningVendorDetail]
    alert_id: Optional[str] = None
