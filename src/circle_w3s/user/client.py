"""Client for the User-Controlled Wallets API.

User-scoped methods take the end user's token as their first argument and
send it as ``X-User-Token``.  Tokens are obtained from
:meth:`UserWalletsClient.get_user_token` (or the social/email flows) and
expire after 60 minutes; refreshing them is left to the caller.
"""

from __future__ import annotations

from typing import Optional

from circle_w3s.client import ResourceClient
from circle_w3s.models import (
    EstimateFeeData,
    ValidateAddressData,
    ValidateAddressRequest,
)
from circle_w3s.request import Endpoint
from circle_w3s.user.models import (
    AccelerateTxRequest,
    BalancesData,
    CancelTxRequest,
    ChallengeData,
    ChallengeIdData,
    ChallengesData,
    CreateContractExecutionTxRequest,
    CreateEndUserWalletRequest,
    CreateTransferTxRequest,
    CreateUserRequest,
    CreateWalletUpgradeTxRequest,
    DeviceTokenEmailData,
    DeviceTokenEmailRequest,
    DeviceTokenSocialData,
    DeviceTokenSocialRequest,
    EndUser,
    EstimateContractExecFeeRequest,
    EstimateTransferFeeRequest,
    GetLowestNonceTxParams,
    GetUserByIdData,
    GetUserTokenRequest,
    ListTransactionsParams,
    ListUsersParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    ListWalletsParams,
    LowestNonceTransactionData,
    NftsData,
    RefreshUserTokenData,
    RefreshUserTokenRequest,
    ResendOtpData,
    ResendOtpRequest,
    SetPinAndInitWalletRequest,
    SetPinRequest,
    SignMessageRequest,
    SignTransactionRequest,
    SignTypedDataRequest,
    TokenData,
    TransactionData,
    TransactionsData,
    UpdateWalletRequest,
    UserTokenData,
    UsersData,
    WalletData,
    WalletsData,
)

# Users and authentication
CREATE_USER = Endpoint("POST", "/v1/w3s/users", body=True)
LIST_USERS = Endpoint("GET", "/v1/w3s/users")
GET_USER = Endpoint("GET", "/v1/w3s/users/{id}")
GET_USER_TOKEN = Endpoint("POST", "/v1/w3s/users/token", body=True)
GET_DEVICE_TOKEN_SOCIAL = Endpoint("POST", "/v1/w3s/users/social/token", body=True)
GET_DEVICE_TOKEN_EMAIL = Endpoint("POST", "/v1/w3s/users/email/token", body=True)
REFRESH_USER_TOKEN = Endpoint("POST", "/v1/w3s/users/token/refresh", body=True)
RESEND_OTP = Endpoint("POST", "/v1/w3s/users/email/resendOTP", body=True)
GET_USER_BY_TOKEN = Endpoint("GET", "/v1/w3s/user")

# PIN and challenges
INITIALIZE_USER = Endpoint("POST", "/v1/w3s/user/initialize", body=True)
CREATE_PIN = Endpoint("POST", "/v1/w3s/user/pin", body=True)
UPDATE_PIN = Endpoint("PUT", "/v1/w3s/user/pin", body=True)
RESTORE_PIN = Endpoint("POST", "/v1/w3s/user/pin/restore", body=True)
LIST_CHALLENGES = Endpoint("GET", "/v1/w3s/user/challenges")
GET_CHALLENGE = Endpoint("GET", "/v1/w3s/user/challenges/{id}")

# Wallets
CREATE_WALLET = Endpoint("POST", "/v1/w3s/user/wallets", body=True)
LIST_WALLETS = Endpoint("GET", "/v1/w3s/wallets")
GET_WALLET = Endpoint("GET", "/v1/w3s/wallets/{id}")
UPDATE_WALLET = Endpoint("PUT", "/v1/w3s/wallets/{id}", body=True)
LIST_WALLET_BALANCES = Endpoint("GET", "/v1/w3s/wallets/{wallet_id}/balances")
LIST_WALLET_NFTS = Endpoint("GET", "/v1/w3s/wallets/{wallet_id}/nfts")

# Transactions
CREATE_TRANSFER = Endpoint("POST", "/v1/w3s/user/transactions/transfer", body=True)
ACCELERATE_TRANSACTION = Endpoint(
    "POST", "/v1/w3s/user/transactions/{id}/accelerate", body=True
)
CANCEL_TRANSACTION = Endpoint(
    "POST", "/v1/w3s/user/transactions/{id}/cancel", body=True
)
CREATE_CONTRACT_EXECUTION = Endpoint(
    "POST", "/v1/w3s/user/transactions/contractExecution", body=True
)
CREATE_WALLET_UPGRADE = Endpoint(
    "POST", "/v1/w3s/user/transactions/walletUpgrade", body=True
)
LIST_TRANSACTIONS = Endpoint("GET", "/v1/w3s/transactions")
GET_TRANSACTION = Endpoint("GET", "/v1/w3s/transactions/{id}")
GET_LOWEST_NONCE_TRANSACTION = Endpoint(
    "GET", "/v1/w3s/transactions/lowestNonceTransaction"
)
ESTIMATE_TRANSFER_FEE = Endpoint(
    "POST", "/v1/w3s/transactions/transfer/estimateFee", body=True
)
ESTIMATE_CONTRACT_EXECUTION_FEE = Endpoint(
    "POST", "/v1/w3s/transactions/contractExecution/estimateFee", body=True
)
VALIDATE_ADDRESS = Endpoint("POST", "/v1/w3s/transactions/validateAddress", body=True)
GET_TOKEN = Endpoint("GET", "/v1/w3s/tokens/{id}")

# Signing
SIGN_MESSAGE = Endpoint("POST", "/v1/w3s/user/sign/message", body=True)
SIGN_TYPED_DATA = Endpoint("POST", "/v1/w3s/user/sign/typedData", body=True)
SIGN_TRANSACTION = Endpoint("POST", "/v1/w3s/user/sign/transaction", body=True)


class UserWalletsClient(ResourceClient):
    """End users, their PIN challenges, wallets, transactions and signatures."""

    # -- users --------------------------------------------------------------

    async def create_user(self, req: CreateUserRequest) -> EndUser:
        return await self._call(CREATE_USER, EndUser, req)

    async def list_users(self, params: Optional[ListUsersParams] = None) -> UsersData:
        return await self._call(LIST_USERS, UsersData, params)

    async def get_user(self, id: str) -> GetUserByIdData:
        return await self._call(GET_USER, GetUserByIdData, id=id)

    async def get_user_token(self, req: GetUserTokenRequest) -> UserTokenData:
        """Issue a user token for ``req.user_id``."""
        return await self._call(GET_USER_TOKEN, UserTokenData, req)

    async def get_device_token_social(
        self, req: DeviceTokenSocialRequest
    ) -> DeviceTokenSocialData:
        return await self._call(GET_DEVICE_TOKEN_SOCIAL, DeviceTokenSocialData, req)

    async def get_device_token_email(
        self, req: DeviceTokenEmailRequest
    ) -> DeviceTokenEmailData:
        return await self._call(GET_DEVICE_TOKEN_EMAIL, DeviceTokenEmailData, req)

    async def refresh_user_token(
        self, user_token: str, req: RefreshUserTokenRequest
    ) -> RefreshUserTokenData:
        return await self._call(
            REFRESH_USER_TOKEN, RefreshUserTokenData, req, user_token=user_token
        )

    async def resend_otp(self, user_token: str, req: ResendOtpRequest) -> ResendOtpData:
        return await self._call(RESEND_OTP, ResendOtpData, req, user_token=user_token)

    async def get_user_by_token(self, user_token: str) -> EndUser:
        return await self._call(GET_USER_BY_TOKEN, EndUser, user_token=user_token)

    # -- PIN and challenges ---------------------------------------------------

    async def initialize_user(
        self, user_token: str, req: SetPinAndInitWalletRequest
    ) -> ChallengeIdData:
        """Start the challenge that sets a PIN and creates the first wallets."""
        return await self._call(
            INITIALIZE_USER, ChallengeIdData, req, user_token=user_token
        )

    async def create_pin_challenge(
        self, user_token: str, req: SetPinRequest
    ) -> ChallengeIdData:
        return await self._call(CREATE_PIN, ChallengeIdData, req, user_token=user_token)

    async def update_pin_challenge(
        self, user_token: str, req: SetPinRequest
    ) -> ChallengeIdData:
        return await self._call(UPDATE_PIN, ChallengeIdData, req, user_token=user_token)

    async def restore_pin_challenge(
        self, user_token: str, req: SetPinRequest
    ) -> ChallengeIdData:
        return await self._call(
            RESTORE_PIN, ChallengeIdData, req, user_token=user_token
        )

    async def list_challenges(self, user_token: str) -> ChallengesData:
        return await self._call(LIST_CHALLENGES, ChallengesData, user_token=user_token)

    async def get_challenge(self, user_token: str, id: str) -> ChallengeData:
        return await self._call(
            GET_CHALLENGE, ChallengeData, user_token=user_token, id=id
        )

    # -- wallets --------------------------------------------------------------

    async def create_wallet(
        self, user_token: str, req: CreateEndUserWalletRequest
    ) -> ChallengeIdData:
        return await self._call(
            CREATE_WALLET, ChallengeIdData, req, user_token=user_token
        )

    async def list_wallets(
        self, user_token: str, params: Optional[ListWalletsParams] = None
    ) -> WalletsData:
        return await self._call(LIST_WALLETS, WalletsData, params, user_token=user_token)

    async def get_wallet(self, user_token: str, id: str) -> WalletData:
        return await self._call(GET_WALLET, WalletData, user_token=user_token, id=id)

    async def update_wallet(
        self, user_token: str, id: str, req: UpdateWalletRequest
    ) -> WalletData:
        return await self._call(
            UPDATE_WALLET, WalletData, req, user_token=user_token, id=id
        )

    async def list_wallet_balances(
        self,
        user_token: str,
        wallet_id: str,
        params: Optional[ListWalletBalancesParams] = None,
    ) -> BalancesData:
        return await self._call(
            LIST_WALLET_BALANCES,
            BalancesData,
            params,
            user_token=user_token,
            wallet_id=wallet_id,
        )

    async def list_wallet_nfts(
        self,
        user_token: str,
        wallet_id: str,
        params: Optional[ListWalletNftsParams] = None,
    ) -> NftsData:
        return await self._call(
            LIST_WALLET_NFTS,
            NftsData,
            params,
            user_token=user_token,
            wallet_id=wallet_id,
        )

    # -- transactions ---------------------------------------------------------

    async def create_transfer_transaction(
        self, user_token: str, req: CreateTransferTxRequest
    ) -> ChallengeIdData:
        return await self._call(
            CREATE_TRANSFER, ChallengeIdData, req, user_token=user_token
        )

    async def accelerate_transaction(
        self, user_token: str, id: str, req: AccelerateTxRequest
    ) -> ChallengeIdData:
        return await self._call(
            ACCELERATE_TRANSACTION, ChallengeIdData, req, user_token=user_token, id=id
        )

    async def cancel_transaction(
        self, user_token: str, id: str, req: CancelTxRequest
    ) -> ChallengeIdData:
        return await self._call(
            CANCEL_TRANSACTION, ChallengeIdData, req, user_token=user_token, id=id
        )

    async def create_contract_execution_transaction(
        self, user_token: str, req: CreateContractExecutionTxRequest
    ) -> ChallengeIdData:
        return await self._call(
            CREATE_CONTRACT_EXECUTION, ChallengeIdData, req, user_token=user_token
        )

    async def create_wallet_upgrade_transaction(
        self, user_token: str, req: CreateWalletUpgradeTxRequest
    ) -> ChallengeIdData:
        return await self._call(
            CREATE_WALLET_UPGRADE, ChallengeIdData, req, user_token=user_token
        )

    async def list_transactions(
        self, user_token: str, params: Optional[ListTransactionsParams] = None
    ) -> TransactionsData:
        return await self._call(
            LIST_TRANSACTIONS, TransactionsData, params, user_token=user_token
        )

    async def get_transaction(self, user_token: str, id: str) -> TransactionData:
        return await self._call(
            GET_TRANSACTION, TransactionData, user_token=user_token, id=id
        )

    async def get_lowest_nonce_transaction(
        self, params: GetLowestNonceTxParams
    ) -> LowestNonceTransactionData:
        return await self._call(
            GET_LOWEST_NONCE_TRANSACTION, LowestNonceTransactionData, params
        )

    async def estimate_transfer_fee(
        self, user_token: str, req: EstimateTransferFeeRequest
    ) -> EstimateFeeData:
        return await self._call(
            ESTIMATE_TRANSFER_FEE, EstimateFeeData, req, user_token=user_token
        )

    async def estimate_contract_execution_fee(
        self, user_token: str, req: EstimateContractExecFeeRequest
    ) -> EstimateFeeData:
        return await self._call(
            ESTIMATE_CONTRACT_EXECUTION_FEE,
            EstimateFeeData,
            req,
            user_token=user_token,
        )

    async def validate_address(
        self, req: ValidateAddressRequest
    ) -> ValidateAddressData:
        return await self._call(VALIDATE_ADDRESS, ValidateAddressData, req)

    async def get_token(self, id: str) -> TokenData:
        return await self._call(GET_TOKEN, TokenData, id=id)

    # -- signing --------------------------------------------------------------

    async def sign_message(
        self, user_token: str, req: SignMessageRequest
    ) -> ChallengeIdData:
        return await self._call(
            SIGN_MESSAGE, ChallengeIdData, req, user_token=user_token
        )

    async def sign_typed_data(
        self, user_token: str, req: SignTypedDataRequest
    ) -> ChallengeIdData:
        return await self._call(
            SIGN_TYPED_DATA, ChallengeIdData, req, user_token=user_token
        )

    async def sign_transaction(
        self, user_token: str, req: SignTransactionRequest
    ) -> ChallengeIdData:
        return await self._call(
            SIGN_TRANSACTION, ChallengeIdData, req, user_token=user_token
        )
