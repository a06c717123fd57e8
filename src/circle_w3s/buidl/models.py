"""Buidl Wallets wire types: transfers, user operations, balances and NFTs."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from circle_w3s.codec import PageParams, WireEnum, WireModel
from circle_w3s.models import FtStandard, NftStandard, TokenStandard


class Blockchain(WireEnum):
    """Chains indexed by the Buidl Wallets API."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    BASE = "BASE"
    BASE_SEPOLIA = "BASE-SEPOLIA"
    OP = "OP"
    OP_SEPOLIA = "OP-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    ARC_TESTNET = "ARC-TESTNET"
    MONAD = "MONAD"
    MONAD_TESTNET = "MONAD-TESTNET"


# ---------------------------------------------------------------------------
# Transfers
# ---------------------------------------------------------------------------


class TransferState(WireEnum):
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class TransferType(WireEnum):
    INBOUND_TRANSFER = "INBOUND_TRANSFER"
    OUTBOUND_TRANSFER = "OUTBOUND_TRANSFER"


class TransferErrorReason(WireEnum):
    FAILED_REORG = "FAILED_REORG"


class NftIdMetadata(WireModel):
    metadata: Optional[str] = None
    nft_token_id: Optional[str] = None


class Transfer(WireModel):
    """One indexed on-chain token movement into or out of a wallet."""

    id: str
    wallet_id: str
    amount: str
    blockchain: Blockchain
    from_: str = Field(alias="from")
    state: TransferState
    to: str
    token_id: str
    transfer_type: TransferType
    tx_hash: str
    wallet_address: str
    block_date: Optional[str] = None
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    error_reason: Optional[TransferErrorReason] = None
    nft: Optional[NftIdMetadata] = None
    token_address: Optional[str] = None
    user_op_hash: Optional[str] = None
    create_date: Optional[str] = None
    update_date: Optional[str] = None


class TransfersData(WireModel):
    transfers: list[Transfer]


class TransferIdData(WireModel):
    transfer: Transfer


class ListTransfersParams(PageParams):
    """Query for :meth:`BuidlWalletsClient.list_transfers`.

    ``wallet_addresses`` is required by the API; several addresses are
    passed comma-separated.
    """

    wallet_addresses: str
    blockchain: Optional[Blockchain] = None
    state: Optional[TransferState] = None
    transfer_type: Optional[TransferType] = None
    tx_hash: Optional[str] = None
    user_op_hash: Optional[str] = None


# ---------------------------------------------------------------------------
# User operations (ERC-4337)
# ---------------------------------------------------------------------------


class UserOpState(WireEnum):
    SENT = "SENT"
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class UserOpErrorReason(WireEnum):
    FAILED_ON_CHAIN = "FAILED_ON_CHAIN"
    FAILED_REPLACED = "FAILED_REPLACED"


class UserOperation(WireModel):
    """The raw ERC-4337 user operation as submitted to the bundler."""

    call_data: str
    nonce: str
    sender: str
    call_gas_limit: Optional[str] = None
    factory: Optional[str] = None
    factory_data: Optional[str] = None
    max_fee_per_gas: Optional[str] = None
    max_priority_fee_per_gas: Optional[str] = None
    paymaster: Optional[str] = None
    paymaster_and_data: Optional[str] = None
    paymaster_data: Optional[str] = None
    paymaster_post_op_gas_limit: Optional[str] = None
    paymaster_verification_gas_limit: Optional[str] = None
    pre_verification_gas: Optional[str] = None
    signature: Optional[str] = None
    verification_gas_limit: Optional[str] = None


class UserOp(WireModel):
    id: str
    blockchain: Blockchain
    state: UserOpState
    user_op_hash: str
    user_operation: UserOperation
    ref_id: Optional[str] = None
    actual_gas_cost: Optional[str] = None
    actual_gas_used: Optional[str] = None
    block_date: Optional[str] = None
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    error_reason: Optional[UserOpErrorReason] = None
    revert_reason: Optional[str] = None
    to: Optional[str] = None
    tx_hash: Optional[str] = None
    create_date: Optional[str] = None
    update_date: Optional[str] = None


class UserOpsData(WireModel):
    user_operations: list[UserOp]


class UserOpIdData(WireModel):
    user_operation: UserOp


class ListUserOpsParams(PageParams):
    blockchain: Optional[Blockchain] = None
    ref_id: Optional[str] = None
    senders: Optional[str] = None
    state: Optional[UserOpState] = None
    tx_hash: Optional[str] = None
    user_op_hash: Optional[str] = None


# ---------------------------------------------------------------------------
# Balances and NFTs
# ---------------------------------------------------------------------------


class Token(WireModel):
    blockchain: Blockchain
    is_native: bool
    name: Optional[str] = None
    standard: Optional[TokenStandard] = None
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    token_address: Optional[str] = None


class Balance(WireModel):
    amount: str
    token: Token
    update_date: str


class BalancesData(WireModel):
    token_balances: list[Balance]


class Nft(WireModel):
    amount: str
    token: Token
    update_date: str
    nft_token_id: Optional[str] = None
    metadata: Optional[str] = None


class NftsData(WireModel):
    nfts: list[Nft]


class ListWalletBalancesParams(PageParams):
    """Balance filter; ``standard=FtStandard.NATIVE`` selects native coins."""

    standard: Optional[FtStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None


class ListWalletNftsParams(PageParams):
    standard: Optional[NftStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
