"""Client for the Developer-Controlled Wallets API."""

from __future__ import annotations

from typing import Optional

from circle_w3s.client import ResourceClient
from circle_w3s.developer.models import (
    AccelerateTxRequest,
    BalancesData,
    CancelTxRequest,
    CreateContractExecutionTxRequest,
    CreateTransferTxRequest,
    CreateWalletSetRequest,
    CreateWalletsRequest,
    EstimateTransferFeeRequest,
    ListTransactionsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    ListWalletSetsParams,
    ListWalletsParams,
    NftsData,
    SignMessageRequest,
    SignTransactionData,
    SignTransactionRequest,
    SignTypedDataRequest,
    TokenData,
    TransactionData,
    TransactionsData,
    UpdateWalletRequest,
    UpdateWalletSetRequest,
    WalletBalancesParams,
    WalletData,
    WalletsData,
    WalletSetData,
    WalletSetsData,
)
from circle_w3s.models import (
    EstimateFeeData,
    SignatureData,
    ValidateAddressData,
    ValidateAddressRequest,
)
from circle_w3s.request import Endpoint

# Wallet sets
CREATE_WALLET_SET = Endpoint("POST", "/v1/w3s/developer/walletSets", body=True)
GET_WALLET_SET = Endpoint("GET", "/v1/w3s/developer/walletSets/{id}")
UPDATE_WALLET_SET = Endpoint("PUT", "/v1/w3s/developer/walletSets/{id}", body=True)
LIST_WALLET_SETS = Endpoint("GET", "/v1/w3s/walletSets")

# Wallets
CREATE_WALLETS = Endpoint("POST", "/v1/w3s/developer/wallets", body=True)
LIST_WALLETS = Endpoint("GET", "/v1/w3s/wallets")
GET_WALLET = Endpoint("GET", "/v1/w3s/wallets/{id}")
UPDATE_WALLET = Endpoint("PUT", "/v1/w3s/wallets/{id}", body=True)
LIST_WALLET_BALANCES = Endpoint("GET", "/v1/w3s/developer/wallets/balances")
LIST_WALLET_TOKEN_BALANCES = Endpoint("GET", "/v1/w3s/wallets/{wallet_id}/balances")
LIST_WALLET_NFTS = Endpoint("GET", "/v1/w3s/wallets/{wallet_id}/nfts")

# Signing
SIGN_MESSAGE = Endpoint("POST", "/v1/w3s/developer/sign/message", body=True)
SIGN_TYPED_DATA = Endpoint("POST", "/v1/w3s/developer/sign/typedData", body=True)
SIGN_TRANSACTION = Endpoint("POST", "/v1/w3s/developer/sign/transaction", body=True)

# Transactions
LIST_TRANSACTIONS = Endpoint("GET", "/v1/w3s/transactions")
GET_TRANSACTION = Endpoint("GET", "/v1/w3s/transactions/{id}")
CREATE_TRANSFER = Endpoint(
    "POST", "/v1/w3s/developer/transactions/transfer", body=True
)
GET_FEE_PARAMETERS = Endpoint(
    "POST", "/v1/w3s/developer/transactions/feeParameters", body=True
)
CREATE_CONTRACT_EXECUTION = Endpoint(
    "POST", "/v1/w3s/developer/transactions/contractExecution", body=True
)
CANCEL_TRANSACTION = Endpoint(
    "POST", "/v1/w3s/developer/transactions/{id}/cancel", body=True
)
ACCELERATE_TRANSACTION = Endpoint(
    "POST", "/v1/w3s/developer/transactions/{id}/accelerate", body=True
)
ESTIMATE_TRANSFER_FEE = Endpoint(
    "POST", "/v1/w3s/transactions/transfer/estimateFee", body=True
)
VALIDATE_ADDRESS = Endpoint("POST", "/v1/w3s/transactions/validateAddress", body=True)

# Tokens
GET_TOKEN = Endpoint("GET", "/v1/w3s/tokens/{id}")


class DeveloperWalletsClient(ResourceClient):
    """Wallet sets, wallets, signing and transactions under developer custody.

    Methods return the unwrapped ``data`` payload of each response, e.g.
    :meth:`list_wallets` returns :class:`WalletsData` whose ``wallets``
    attribute holds the page of wallets.
    """

    # -- wallet sets --------------------------------------------------------

    async def create_wallet_set(self, req: CreateWalletSetRequest) -> WalletSetData:
        return await self._call(CREATE_WALLET_SET, WalletSetData, req)

    async def get_wallet_set(self, id: str) -> WalletSetData:
        return await self._call(GET_WALLET_SET, WalletSetData, id=id)

    async def update_wallet_set(
        self, id: str, req: UpdateWalletSetRequest
    ) -> WalletSetData:
        return await self._call(UPDATE_WALLET_SET, WalletSetData, req, id=id)

    async def list_wallet_sets(
        self, params: Optional[ListWalletSetsParams] = None
    ) -> WalletSetsData:
        return await self._call(LIST_WALLET_SETS, WalletSetsData, params)

    # -- wallets ------------------------------------------------------------

    async def create_wallets(self, req: CreateWalletsRequest) -> WalletsData:
        return await self._call(CREATE_WALLETS, WalletsData, req)

    async def list_wallets(
        self, params: Optional[ListWalletsParams] = None
    ) -> WalletsData:
        return await self._call(LIST_WALLETS, WalletsData, params)

    async def get_wallet(self, id: str) -> WalletData:
        return await self._call(GET_WALLET, WalletData, id=id)

    async def update_wallet(self, id: str, req: UpdateWalletRequest) -> WalletData:
        return await self._call(UPDATE_WALLET, WalletData, req, id=id)

    async def list_wallet_balances(
        self, params: Optional[ListWalletBalancesParams] = None
    ) -> WalletsData:
        """List developer wallets together with their token balances."""
        return await self._call(LIST_WALLET_BALANCES, WalletsData, params)

    async def list_wallet_token_balances(
        self, wallet_id: str, params: Optional[WalletBalancesParams] = None
    ) -> BalancesData:
        return await self._call(
            LIST_WALLET_TOKEN_BALANCES, BalancesData, params, wallet_id=wallet_id
        )

    async def list_wallet_nfts(
        self, wallet_id: str, params: Optional[ListWalletNftsParams] = None
    ) -> NftsData:
        return await self._call(LIST_WALLET_NFTS, NftsData, params, wallet_id=wallet_id)

    # -- signing ------------------------------------------------------------

    async def sign_message(self, req: SignMessageRequest) -> SignatureData:
        return await self._call(SIGN_MESSAGE, SignatureData, req)

    async def sign_typed_data(self, req: SignTypedDataRequest) -> SignatureData:
        return await self._call(SIGN_TYPED_DATA, SignatureData, req)

    async def sign_transaction(
        self, req: SignTransactionRequest
    ) -> SignTransactionData:
        return await self._call(SIGN_TRANSACTION, SignTransactionData, req)

    # -- transactions -------------------------------------------------------

    async def list_transactions(
        self, params: Optional[ListTransactionsParams] = None
    ) -> TransactionsData:
        return await self._call(LIST_TRANSACTIONS, TransactionsData, params)

    async def get_transaction(self, id: str) -> TransactionData:
        return await self._call(GET_TRANSACTION, TransactionData, id=id)

    async def create_transfer_transaction(
        self, req: CreateTransferTxRequest
    ) -> TransactionData:
        return await self._call(CREATE_TRANSFER, TransactionData, req)

    async def get_fee_parameters(self, req: CreateTransferTxRequest) -> EstimateFeeData:
        """Quote the fee parameters a transfer request would be submitted with."""
        return await self._call(GET_FEE_PARAMETERS, EstimateFeeData, req)

    async def create_contract_execution_transaction(
        self, req: CreateContractExecutionTxRequest
    ) -> TransactionData:
        return await self._call(CREATE_CONTRACT_EXECUTION, TransactionData, req)

    async def cancel_transaction(
        self, id: str, req: CancelTxRequest
    ) -> TransactionData:
        """Request cancellation of a pending transaction.

        Cancellation is best effort: the transaction may still be mined.
        """
        return await self._call(CANCEL_TRANSACTION, TransactionData, req, id=id)

    async def accelerate_transaction(
        self, id: str, req: AccelerateTxRequest
    ) -> TransactionData:
        return await self._call(ACCELERATE_TRANSACTION, TransactionData, req, id=id)

    async def estimate_transfer_fee(
        self, req: EstimateTransferFeeRequest
    ) -> EstimateFeeData:
        return await self._call(ESTIMATE_TRANSFER_FEE, EstimateFeeData, req)

    async def validate_address(
        self, req: ValidateAddressRequest
    ) -> ValidateAddressData:
        return await self._call(VALIDATE_ADDRESS, ValidateAddressData, req)

    # -- tokens -------------------------------------------------------------

    async def get_token(self, id: str) -> TokenData:
        return await self._call(GET_TOKEN, TokenData, id=id)
