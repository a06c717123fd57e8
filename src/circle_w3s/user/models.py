"""User-Controlled Wallets wire types.

Most operations on this surface do not act immediately: they return a
challenge id that the end user completes in Circle's client SDK (entering
their PIN, answering security questions).  Challenge progress is then
polled with :meth:`UserWalletsClient.get_challenge`.
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


# ---------------------------------------------------------------------------
# Users and tokens
# ---------------------------------------------------------------------------


class PinStatus(WireEnum):
    ENABLED = "ENABLED"
    UNSET = "UNSET"
    LOCKED = "LOCKED"


class EndUserStatus(WireEnum):
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class SecurityQuestionStatus(WireEnum):
    ENABLED = "ENABLED"
    UNSET = "UNSET"
    LOCKED = "LOCKED"


class PinSecurityDetails(WireModel):
    failed_attempts: Optional[int] = None
    locked_date: Optional[str] = None
    locked_expiry_date: Optional[str] = None
    last_lock_override_date: Optional[str] = None


class EndUser(WireModel):
    id: Optional[str] = None
    create_date: Optional[str] = None
    pin_status: Optional[PinStatus] = None
    status: Optional[EndUserStatus] = None
    security_question_status: Optional[SecurityQuestionStatus] = None
    pin_details: Optional[PinSecurityDetails] = None
    security_question_details: Optional[PinSecurityDetails] = None


class UsersData(WireModel):
    users: list[EndUser]


class GetUserByIdData(WireModel):
    user: EndUser


class UserTokenData(WireModel):
    """Short-lived (60 minute) token identifying an end user."""

    user_token: str
    encryption_key: Optional[str] = None


class CreateUserRequest(WireModel):
    user_id: str


class GetUserTokenRequest(WireModel):
    user_id: str


class ListUsersParams(PageParams):
    pin_status: Optional[PinStatus] = None


# ---------------------------------------------------------------------------
# Social / email authentication
# ---------------------------------------------------------------------------


class DeviceTokenSocialRequest(IdempotentRequest):
    device_id: str


class DeviceTokenSocialData(WireModel):
    device_token: str
    device_encryption_key: Optional[str] = None


class DeviceTokenEmailRequest(IdempotentRequest):
    device_id: str
    email: str


class DeviceTokenEmailData(WireModel):
    device_token: str
    device_encryption_key: Optional[str] = None
    otp_token: Optional[str] = None


class RefreshUserTokenRequest(IdempotentRequest):
    refresh_token: str
    device_id: str


class RefreshUserTokenData(WireModel):
    user_token: str
    encryption_key: Optional[str] = None
    user_id: Optional[str] = None
    refresh_token: Optional[str] = None


class ResendOtpRequest(IdempotentRequest):
    otp_token: str
    email: str
    device_id: str


class ResendOtpData(WireModel):
    otp_token: str


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------


class ChallengeType(WireEnum):
    INITIALIZE = "INITIALIZE"
    SET_PIN = "SET_PIN"
    CHANGE_PIN = "CHANGE_PIN"
    SET_SECURITY_QUESTIONS = "SET_SECURITY_QUESTIONS"
    CREATE_WALLET = "CREATE_WALLET"
    RESTORE_PIN = "RESTORE_PIN"
    CREATE_TRANSACTION = "CREATE_TRANSACTION"
    ACCELERATE_TRANSACTION = "ACCELERATE_TRANSACTION"
    CANCEL_TRANSACTION = "CANCEL_TRANSACTION"
    CONTRACT_EXECUTION = "CONTRACT_EXECUTION"
    WALLET_UPGRADE = "WALLET_UPGRADE"
    SIGN_MESSAGE = "SIGN_MESSAGE"
    SIGN_TYPEDDATA = "SIGN_TYPEDDATA"
    SIGN_TRANSACTION = "SIGN_TRANSACTION"


class ChallengeStatus(WireEnum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"


class Challenge(WireModel):
    id: str
    challenge_type: ChallengeType = Field(alias="type")
    status: ChallengeStatus
    correlation_ids: Optional[list[str]] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None


class ChallengesData(WireModel):
    challenges: list[Challenge]


class ChallengeData(WireModel):
    challenge: Challenge


class ChallengeIdData(WireModel):
    challenge_id: str


class SetPinAndInitWalletRequest(IdempotentRequest):
    """Set the user's PIN and create their first wallets in one challenge."""

    account_type: Optional[AccountType] = None
    blockchains: Optional[list[Blockchain]] = None
    metadata: Optional[list[WalletMetadata]] = None


class SetPinRequest(IdempotentRequest):
    pass


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------


class Token(WireModel):
    id: str
    blockchain: Blockchain
    is_native: bool
    update_date: str
    create_date: str
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


class NftMetadata(WireModel):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


class Nft(WireModel):
    token: Token
    amount: str
    update_date: str
    nft_token_id: Optional[str] = None
    metadata: Optional[NftMetadata] = None


class NftsData(WireModel):
    nfts: list[Nft]


class Wallet(WireModel):
    id: str
    address: str
    blockchain: Blockchain
    create_date: str
    update_date: str
    custody_type: CustodyType
    state: WalletState
    wallet_set_id: str
    name: Optional[str] = None
    ref_id: Optional[str] = None
    user_id: Optional[str] = None
    initial_public_key: Optional[str] = None
    account_type: Optional[AccountType] = None
    sca_core: Optional[ScaCore] = None


class WalletsData(WireModel):
    wallets: list[Wallet]


class WalletData(WireModel):
    wallet: Wallet


class TokenData(WireModel):
    token: Token


class CreateEndUserWalletRequest(IdempotentRequest):
    blockchains: list[Blockchain]
    account_type: Optional[AccountType] = None
    metadata: Optional[list[WalletMetadata]] = None


class UpdateWalletRequest(WireModel):
    name: Optional[str] = None
    ref_id: Optional[str] = None


class ListWalletsParams(PageParams):
    address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    sca_core: Optional[ScaCore] = None
    wallet_set_id: Optional[str] = None
    ref_id: Optional[str] = None


class ListWalletBalancesParams(PageParams):
    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    standard: Optional[TokenStandard] = None


class ListWalletNftsParams(PageParams):
    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    standard: Optional[TokenStandard] = None


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class Transaction(WireModel):
    id: str
    state: TransactionState
    blockchain: Blockchain
    transaction_type: TransactionType
    create_date: str
    update_date: str
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
    nfts: Optional[list[Nft]] = None
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


class LowestNonceTransactionFeeInfo(WireModel):
    new_high_estimated_fee: TransactionFee
    fee_difference_amount: str


class LowestNonceTransactionData(WireModel):
    """The stuck transaction blocking a nonce, and the fee needed to replace it."""

    transaction: Transaction
    fee_info: LowestNonceTransactionFeeInfo


class ListTransactionsParams(PageParams):
    blockchain: Optional[Blockchain] = None
    destination_address: Optional[str] = None
    include_all: Optional[bool] = None
    operation: Optional[Operation] = None
    state: Optional[TransactionState] = None
    tx_hash: Optional[str] = None
    tx_type: Optional[TransactionType] = None
    user_id: Optional[str] = None
    wallet_ids: Optional[str] = None


class GetLowestNonceTxParams(WireModel):
    blockchain: Optional[Blockchain] = None
    address: Optional[str] = None
    wallet_id: Optional[str] = None


class CreateTransferTxRequest(IdempotentRequest):
    """Initiate a transfer; the user approves it through the returned challenge.

    Identify the token by ``token_id`` or by ``blockchain`` plus
    ``token_address``.
    """

    wallet_id: str
    destination_address: str
    amounts: Optional[list[str]] = None
    nft_token_ids: Optional[list[str]] = None
    token_id: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None


class AccelerateTxRequest(IdempotentRequest):
    pass


class CancelTxRequest(IdempotentRequest):
    pass


class CreateContractExecutionTxRequest(IdempotentRequest):
    wallet_id: str
    contract_address: str
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None


class CreateWalletUpgradeTxRequest(IdempotentRequest):
    """Upgrade an SCA wallet to ``new_sca_core``."""

    wallet_id: str
    new_sca_core: ScaCore
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None


class EstimateTransferFeeRequest(WireModel):
    amounts: list[str]
    destination_address: str
    nft_token_ids: Optional[list[str]] = None
    source_address: Optional[str] = None
    token_id: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_id: Optional[str] = None


class EstimateContractExecFeeRequest(WireModel):
    contract_address: str
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    source_address: Optional[str] = None
    wallet_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Signing
# ---------------------------------------------------------------------------


class SignMessageRequest(WireModel):
    wallet_id: str
    message: str
    encoded_by_hex: Optional[bool] = None
    memo: Optional[str] = None


class SignTypedDataRequest(WireModel):
    """EIP-712 typed data, passed as its JSON string in ``data``."""

    wallet_id: str
    data: str
    memo: Optional[str] = None


class SignTransactionRequest(WireModel):
    wallet_id: str
    raw_transaction: Optional[str] = None
    transaction: Optional[str] = None
    memo: Optional[str] = None
