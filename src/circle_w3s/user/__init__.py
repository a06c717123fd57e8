"""User-Controlled Wallets API."""

from circle_w3s.user.client import UserWalletsClient
from circle_w3s.user.models import (
    AccelerateTxRequest,
    CancelTxRequest,
    Challenge,
    ChallengeData,
    ChallengeIdData,
    ChallengesData,
    ChallengeStatus,
    ChallengeType,
    CreateContractExecutionTxRequest,
    CreateEndUserWalletRequest,
    CreateTransferTxRequest,
    CreateUserRequest,
    CreateWalletUpgradeTxRequest,
    DeviceTokenEmailRequest,
    DeviceTokenSocialRequest,
    EndUser,
    EndUserStatus,
    EstimateContractExecFeeRequest,
    EstimateTransferFeeRequest,
    GetLowestNonceTxParams,
    GetUserTokenRequest,
    ListTransactionsParams,
    ListUsersParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    ListWalletsParams,
    PinStatus,
    RefreshUserTokenRequest,
    ResendOtpRequest,
    SecurityQuestionStatus,
    SetPinAndInitWalletRequest,
    SetPinRequest,
    SignMessageRequest,
    SignTransactionRequest,
    SignTypedDataRequest,
    Transaction,
    UpdateWalletRequest,
    Wallet,
)

__all__ = [
    "UserWalletsClient",
    "AccelerateTxRequest",
    "CancelTxRequest",
    "Challenge",
    "ChallengeData",
    "ChallengeIdData",
    "ChallengesData",
    "ChallengeStatus",
    "ChallengeType",
    "CreateContractExecutionTxRequest",
    "CreateEndUserWalletRequest",
    "CreateTransferTxRequest",
    "CreateUserRequest",
    "CreateWalletUpgradeTxRequest",
    "DeviceTokenEmailRequest",
    "DeviceTokenSocialRequest",
    "EndUser",
    "EndUserStatus",
    "EstimateContractExecFeeRequest",
    "EstimateTransferFeeRequest",
    "GetLowestNonceTxParams",
    "GetUserTokenRequest",
    "ListTransactionsParams",
    "ListUsersParams",
    "ListWalletBalancesParams",
    "ListWalletNftsParams",
    "ListWalletsParams",
    "PinStatus",
    "RefreshUserTokenRequest",
    "ResendOtpRequest",
    "SecurityQuestionStatus",
    "SetPinAndInitWalletRequest",
    "SetPinRequest",
    "SignMessageRequest",
    "SignTransactionRequest",
    "SignTypedDataRequest",
    "Transaction",
    "UpdateWalletRequest",
    "Wallet",
]
