"""Wire types shared by the wallet API surfaces.

Enumerations here are closed sets mirrored from the Circle Web3 Services
OpenAPI schemas.  Lifecycle enums (:class:`TransactionState`) reflect
server-side state only; nothing in this package computes transitions.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from circle_w3s.codec import WireEnum, WireModel


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Blockchain(WireEnum):
    """Blockchains supported by developer- and user-controlled wallets."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    SOL = "SOL"
    SOL_DEVNET = "SOL-DEVNET"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    NEAR = "NEAR"
    NEAR_TESTNET = "NEAR-TESTNET"
    EVM = "EVM"
    EVM_TESTNET = "EVM-TESTNET"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    BASE = "BASE"
    BASE_SEPOLIA = "BASE-SEPOLIA"
    OP = "OP"
    OP_SEPOLIA = "OP-SEPOLIA"
    APTOS = "APTOS"
    APTOS_TESTNET = "APTOS-TESTNET"
    ARC_TESTNET = "ARC-TESTNET"
    MONAD = "MONAD"
    MONAD_TESTNET = "MONAD-TESTNET"


class CustodyType(WireEnum):
    DEVELOPER = "DEVELOPER"
    ENDUSER = "ENDUSER"


class AccountType(WireEnum):
    """Smart Contract Account or Externally Owned Account."""

    SCA = "SCA"
    EOA = "EOA"


class WalletState(WireEnum):
    LIVE = "LIVE"
    FROZEN = "FROZEN"


class FeeLevel(WireEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class ScaCore(WireEnum):
    """Smart contract account implementation version."""

    CIRCLE_4337_V1 = "circle_4337_v1"
    CIRCLE_6900_SINGLEOWNER_V1 = "circle_6900_singleowner_v1"
    CIRCLE_6900_SINGLEOWNER_V2 = "circle_6900_singleowner_v2"
    CIRCLE_6900_SINGLEOWNER_V3 = "circle_6900_singleowner_v3"


class TokenStandard(WireEnum):
    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"
    FUNGIBLE = "Fungible"
    FUNGIBLE_ASSET = "FungibleAsset"
    NON_FUNGIBLE = "NonFungible"
    NON_FUNGIBLE_EDITION = "NonFungibleEdition"
    PROGRAMMABLE_NON_FUNGIBLE = "ProgrammableNonFungible"
    PROGRAMMABLE_NON_FUNGIBLE_EDITION = "ProgrammableNonFungibleEdition"


class NftStandard(WireEnum):
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


class FtStandard(WireEnum):
    """Fungible token standard filter.

    ``NATIVE`` is the empty string on the wire, which is distinct from
    leaving the filter unset.
    """

    NATIVE = ""
    ERC20 = "ERC20"


class TransactionState(WireEnum):
    CANCELLED = "CANCELLED"
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    DENIED = "DENIED"
    FAILED = "FAILED"
    INITIATED = "INITIATED"
    CLEARED = "CLEARED"
    QUEUED = "QUEUED"
    SENT = "SENT"
    STUCK = "STUCK"


class TransactionType(WireEnum):
    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"


class Operation(WireEnum):
    TRANSFER = "TRANSFER"
    CONTRACT_EXECUTION = "CONTRACT_EXECUTION"
    CONTRACT_DEPLOYMENT = "CONTRACT_DEPLOYMENT"


class RiskScore(WireEnum):
    UNKNOWN = "UNKNOWN"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    SEVERE = "SEVERE"
    BLOCKLIST = "BLOCKLIST"


class RiskCategory(WireEnum):
    """Risk categories reported by address and transaction screening."""

    SANCTIONS = "SANCTIONS"
    SANCTIONS_DESIGNATED_FACILITATOR = "SANCTIONS_DESIGNATED_FACILITATOR"
    SANCTIONS_ADMIN_DESIGNATED = "SANCTIONS_ADMIN_DESIGNATED"
    SANCTIONS_SECTOR = "SANCTIONS_SECTOR"
    CSAM = "CSAM"
    CHILD = "CHILD"
    ILLICIT_BEHAVIOR = "ILLICIT_BEHAVIOR"
    GAMBLING = "GAMBLING"
    TERRORIST_FINANCING = "TERRORIST_FINANCING"
    UNSUPPORTED = "UNSUPPORTED"
    FROZEN = "FROZEN"
    OTHER = "OTHER"
    HIGH_RISK_INDUSTRY = "HIGH_RISK_INDUSTRY"
    PEP = "PEP"
    TRUSTED = "TRUSTED"
    HACKING = "HACKING"
    HUMAN_TRAFFICKING = "HUMAN_TRAFFICKING"
    SPECIAL_MEASURES = "SPECIAL_MEASURES"
    FINANCIAL_SERVICE_PROVIDER = "FINANCIAL_SERVICE_PROVIDER"
    MIXER_OR_PRIVACY_WALLET = "MIXER_OR_PRIVACY_WALLET"
    RANSOMWARE = "RANSOMWARE"
    FRAUD_SHOP = "FRAUD_SHOP"
    EXCHANGE = "EXCHANGE"
    UNHOSTED = "UNHOSTED"
    DARKNET = "DARKNET"


class RiskType(WireEnum):
    OWNERSHIP = "OWNERSHIP"
    COUNTERPARTY = "COUNTERPARTY"
    INDIRECT = "INDIRECT"


class RiskAction(WireEnum):
    APPROVE = "APPROVE"
    REVIEW = "REVIEW"
    FREEZE_WALLET = "FREEZE_WALLET"
    DENY = "DENY"


# ---------------------------------------------------------------------------
# Shared records
# ---------------------------------------------------------------------------


class TransactionFee(WireModel):
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    base_fee: Optional[str] = None
    network_fee: Optional[str] = None
    network_fee_raw: Optional[str] = None
    l1_fee: Optional[str] = None


class WalletMetadata(WireModel):
    name: Optional[str] = None
    ref_id: Optional[str] = None


class RiskSignal(WireModel):
    """One risk signal behind a transaction screening decision."""

    source: Optional[str] = None
    source_value: Optional[str] = None
    risk_score: Optional[RiskScore] = None
    risk_categories: Optional[list[RiskCategory]] = None
    risk_type: Optional[RiskType] = Field(default=None, alias="type")


class TransactionScreeningDecision(WireModel):
    screening_date: Optional[str] = None
    rule_name: Optional[str] = None
    actions: Optional[list[RiskAction]] = None
    reasons: Optional[list[RiskSignal]] = None


class EstimateFeeData(WireModel):
    """Fee estimates at each :class:`FeeLevel`."""

    low: Optional[TransactionFee] = None
    medium: Optional[TransactionFee] = None
    high: Optional[TransactionFee] = None
    call_gas_limit: Optional[str] = None
    verification_gas_limit: Optional[str] = None
    pre_verification_gas: Optional[str] = None


class ValidateAddressRequest(WireModel):
    blockchain: Blockchain
    address: str


class ValidateAddressData(WireModel):
    is_valid: bool


class SignatureData(WireModel):
    signature: str
