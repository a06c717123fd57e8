"""Buidl Wallets API: indexed transfers, user operations, balances and NFTs."""

from circle_w3s.buidl.client import BuidlWalletsClient
from circle_w3s.buidl.models import (
    Balance,
    BalancesData,
    Blockchain,
    ListTransfersParams,
    ListUserOpsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    Nft,
    NftsData,
    Token,
    Transfer,
    TransferErrorReason,
    TransferIdData,
    TransferState,
    TransfersData,
    TransferType,
    UserOp,
    UserOpErrorReason,
    UserOpIdData,
    UserOperation,
    UserOpsData,
    UserOpState,
)

__all__ = [
    "BuidlWalletsClient",
    "Balance",
    "BalancesData",
    "Blockchain",
    "ListTransfersParams",
    "ListUserOpsParams",
    "ListWalletBalancesParams",
    "ListWalletNftsParams",
    "Nft",
    "NftsData",
    "Token",
    "Transfer",
    "TransferErrorReason",
    "TransferIdData",
    "TransferState",
    "TransfersData",
    "TransferType",
    "UserOp",
    "UserOpErrorReason",
    "UserOpIdData",
    "UserOperation",
    "UserOpsData",
    "UserOpState",
]
