"""Developer-Controlled Wallets API."""

from circle_w3s.developer.client import DeveloperWalletsClient
from circle_w3s.developer.models import (
    AccelerateTxRequest,
    Balance,
    BalancesData,
    CancelTxRequest,
    CreateContractExecutionTxRequest,
    CreateTransferTxRequest,
    CreateWalletSetRequest,
    CreateWalletsRequest,
    EstimateTransferFeeRequest,
    EvmBlockchain,
    ListTransactionsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    ListWalletSetsParams,
    ListWalletsParams,
    Nft,
    NftsData,
    SignMessageRequest,
    SignTransactionData,
    SignTransactionRequest,
    SignTypedDataRequest,
    Token,
    TokenData,
    Transaction,
    TransactionData,
    TransactionsData,
    UpdateWalletRequest,
    UpdateWalletSetRequest,
    Wallet,
    WalletBalancesParams,
    WalletData,
    WalletsData,
    WalletSet,
    WalletSetData,
    WalletSetsData,
)

__all__ = [
    "DeveloperWalletsClient",
    "AccelerateTxRequest",
    "Balance",
    "BalancesData",
    "CancelTxRequest",
    "CreateContractExecutionTxRequest",
    "CreateTransferTxRequest",
    "CreateWalletSetRequest",
    "CreateWalletsRequest",
    "EstimateTransferFeeRequest",
    "EvmBlockchain",
    "ListTransactionsParams",
    "ListWalletBalancesParams",
    "ListWalletNftsParams",
    "ListWalletSetsParams",
    "ListWalletsParams",
    "Nft",
    "NftsData",
    "SignMessageRequest",
    "SignTransactionData",
    "SignTransactionRequest",
    "SignTypedDataRequest",
    "Token",
    "TokenData",
    "Transaction",
    "TransactionData",
    "TransactionsData",
    "UpdateWalletRequest",
    "UpdateWalletSetRequest",
    "Wallet",
    "WalletBalancesParams",
    "WalletData",
    "WalletsData",
    "WalletSet",
    "WalletSetData",
    "WalletSetsData",
]
