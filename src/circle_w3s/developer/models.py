"""Developer-Controlled Wallets wire types.

Every mutating request carries an ``entity_secret_ciphertext``: an opaque
value the caller produces from its entity secret and Circle's public key.
This package never generates, inspects or logs it.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from circle_w3s.codec import IdempotentRequest, PageParams, WireEnum, WireModel
from circle_w3s.models import (
    AccountType,
    Blockchain,
    CustodyType,
    FeeLevel,
    NftStandard,
    Operation,
    ScaCore,
    TokenStandard,
    TransactionFee,
    TransactionScreeningDecision,
    TransactionState,
    TransactionType,
    WalletMetadata,
    WalletState,
)


class EvmBlockchain(WireEnum):
    """EVM-compatible subset of :class:`~circle_w3s.models.Blockchain`."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
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
    EVM = "EVM"
    EVM_TESTNET = "EVM-TESTNET"
    ARC_TESTNET = "ARC-TESTNET"
    MONAD = "MONAD"
    MONAD_TESTNET = "MONAD-TESTNET"


# ---------------------------------------------------------------------------
# Wallet sets
# ---------------------------------------------------------------------------


class WalletSet(WireModel):
    id: str
    custody_type: CustodyType
    create_date: str
    update_date: str
    name: Optional[str] = None
    user_id: Optional[str] = None


class WalletSetsData(WireModel):
    wallet_sets: list[WalletSet]


class WalletSetData(WireModel):
    wallet_set: WalletSet


class CreateWalletSetRequest(IdempotentRequest):
    entity_secret_ciphertext: str
    name: Optional[str] = None


class UpdateWalletSetRequest(WireModel):
    name: Optional[str] = None


class ListWalletSetsParams(PageParams):
    pass


# ---------------------------------------------------------------------------
# Wallets, balances and NFTs
# ---------------------------------------------------------------------------


class Token(WireModel):
    blockchain: Blockchain
    is_native: bool
    id: Optional[str] = None
    name: Optional[str] = None
    standard: Optional[TokenStandard] = None
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    token_address: Optional[str] = None
    update_date: Optional[str] = None
    create_date: Optional[str] = None


class Balance(WireModel):
    amount: str
    token: Token
    update_date: str


class Wallet(WireModel):
    id: str
    address: str
    blockchain: Blockchain
    create_date: str
    update_date: str
    custody_type: CustodyType
    name: Optional[str] = None
    ref_id: Optional[str] = None
    state: Optional[WalletState] = None
    user_id: Optional[str] = None
    wallet_set_id: Optional[str] = None
    initial_public_key: Optional[str] = None
    account_type: Optional[AccountType] = None
    sca_core: Optional[ScaCore] = None
    token_balances: Optional[list[Balance]] = None


class WalletsData(WireModel):
    wallets: list[Wallet]


class WalletData(WireModel):
    wallet: Wallet


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


class CreateWalletsRequest(IdempotentRequest):
    """Create ``count`` wallets on each of ``blockchains`` in one wallet set."""

    entity_secret_ciphertext: str
    wallet_set_id: str
    blockchains: list[Blockchain]
    account_type: Optional[AccountType] = None
    count: Optional[int] = None
    metadata: Optional[list[WalletMetadata]] = None


class UpdateWalletRequest(WireModel):
    name: Optional[str] = None
    ref_id: Optional[str] = None


class ListWalletsParams(PageParams):
    blockchain: Optional[Blockchain] = None
    address: Optional[str] = None
    wallet_set_id: Optional[str] = None
    ref_id: Optional[str] = None
    state: Optional[WalletState] = None
    custody_type: Optional[CustodyType] = None


class ListWalletBalancesParams(PageParams):
    """Filter for balances across every developer wallet.

    ``wallet_ids`` is comma-separated.  ``include_all`` also returns
    zero balances of monitored tokens.
    """

    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_set_id: Optional[str] = None
    wallet_ids: Optional[str] = None
    custody_type: Optional[CustodyType] = None
    address: Optional[str] = None


class WalletBalancesParams(PageParams):
    """Filter for the balances of a single wallet."""

    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    standard: Optional[TokenStandard] = None


class ListWalletNftsParams(PageParams):
    standard: Optional[NftStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    include_all: Optional[bool] = None


# ---------------------------------------------------------------------------
# Signing
# ---------------------------------------------------------------------------


class SignMessageRequest(WireModel):
    """Sign a plain or hex-encoded message.

    Identify the signer by ``wallet_id`` or by ``blockchain`` plus
    ``wallet_address``.
    """

    message: str
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None
    encoded_by_hex: Optional[bool] = None
    memo: Optional[str] = None


class SignTypedDataRequest(WireModel):
    """Sign EIP-712 typed data, passed as its JSON string."""

    typed_data: str
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None
    memo: Optional[str] = None


class SignTransactionRequest(WireModel):
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None
    raw_transaction: Optional[str] = None
    transaction: Optional[Any] = None
    memo: Optional[str] = None


class SignTransactionData(WireModel):
    signature: str
    signed_transaction: str
    tx_hash: Optional[str] = None


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class Transaction(WireModel):
    id: str
    state: TransactionState
    create_date: str
    update_date: str
    blockchain: Optional[Blockchain] = None
    transaction_type: Optional[TransactionType] = None
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    amounts: Optional[list[str]] = None
    amount_in_usd: Optional[str] = Field(default=None, alias="amountInUSD")
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    contract_address: Optional[str] = None
    custody_type: Optional[CustodyType] = None
    destination_address: Optional[str] = None
    error_reason: Optional[str] = None
    error_details: Optional[str] = None
    estimated_fee: Optional[TransactionFee] = None
    fee_level: Optional[FeeLevel] = None
    first_confirm_date: Optional[str] = None
    network_fee: Optional[str] = None
    network_fee_in_usd: Optional[str] = Field(default=None, alias="networkFeeInUSD")
    nfts: Optional[list[str]] = None
    operation: Optional[Operation] = None
    ref_id: Optional[str] = None
    source_address: Optional[str] = None
    token_id: Optional[str] = None
    tx_hash: Optional[str] = None
    user_id: Optional[str] = None
    wallet_id: Optional[str] = None
    transaction_screening_evaluation: Optional[TransactionScreeningDecision] = None


class TransactionsData(WireModel):
    transactions: list[Transaction]


class TransactionData(WireModel):
    transaction: Transaction


class ListTransactionsParams(PageParams):
    blockchain: Optional[Blockchain] = None
    custody_type: Optional[CustodyType] = None
    destination_address: Optional[str] = None
    include_all: Optional[bool] = None
    operation: Optional[Operation] = None
    ref_id: Optional[str] = None
    source_address: Optional[str] = None
    state: Optional[TransactionState] = None
    token_address: Optional[str] = None
    tx_hash: Optional[str] = None
    tx_type: Optional[TransactionType] = None
    wallet_ids: Optional[str] = None


class CreateTransferTxRequest(IdempotentRequest):
    """Transfer tokens (``amounts``) or NFTs (``nft_token_ids``).

    The token is identified by ``token_id``.  Set either ``fee_level`` or
    explicit gas fields, not both.
    """

    entity_secret_ciphertext: str
    wallet_id: str
    destination_address: str
    blockchain: Optional[Blockchain] = None
    token_id: Optional[str] = None
    amounts: Optional[list[str]] = None
    nft_token_ids: Optional[list[str]] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None


class CreateContractExecutionTxRequest(IdempotentRequest):
    """Call a contract by ABI signature plus parameters, or by raw call data."""

    entity_secret_ciphertext: str
    wallet_id: str
    contract_address: str
    blockchain: Optional[Blockchain] = None
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    ref_id: Optional[str] = None


class CancelTxRequest(IdempotentRequest):
    entity_secret_ciphertext: str


class AccelerateTxRequest(IdempotentRequest):
    entity_secret_ciphertext: str


class EstimateTransferFeeRequest(WireModel):
    source_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    destination_address: Optional[str] = None
    amounts: Optional[list[str]] = None
    nfts: Optional[list[str]] = None
    token_id: Optional[str] = None
    wallet_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TokenData(WireModel):
    token: Token
