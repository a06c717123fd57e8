"""Tests for the Developer-Controlled Wallets client."""

import pytest
import pytest_asyncio

from circle_w3s import DeveloperWalletsClient
from circle_w3s.developer import (
    AccelerateTxRequest,
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
    SignMessageRequest,
    SignTransactionRequest,
    SignTypedDataRequest,
    UpdateWalletRequest,
    UpdateWalletSetRequest,
    WalletBalancesParams,
)
from circle_w3s.errors import ApiError, DecodeError
from circle_w3s.models import (
    AccountType,
    Blockchain,
    CustodyType,
    FeeLevel,
    TokenStandard,
    TransactionState,
    TransactionType,
    ValidateAddressRequest,
    WalletState,
)

TS = "2024-05-01T12:00:00Z"

WALLET_SET = {"id": "ws-1", "custodyType": "DEVELOPER", "createDate": TS, "updateDate": TS, "name": "treasury"}

WALLET = {
    "id": "w-1",
    "address": "0xwallet",
    "blockchain": "ETH-SEPOLIA",
    "createDate": TS,
    "updateDate": TS,
    "custodyType": "DEVELOPER",
    "state": "LIVE",
    "walletSetId": "ws-1",
    "accountType": "SCA",
    "scaCore": "circle_6900_singleowner_v2",
}

TOKEN = {
    "id": "tok-usdc",
    "blockchain": "ETH-SEPOLIA",
    "isNative": False,
    "name": "USD Coin",
    "standard": "ERC20",
    "symbol": "USDC",
    "decimals": 6,
    "tokenAddress": "0xusdc",
}

TRANSACTION = {
    "id": "tx-1",
    "state": "INITIATED",
    "createDate": TS,
    "updateDate": TS,
    "blockchain": "ETH-SEPOLIA",
    "transactionType": "OUTBOUND",
    "amounts": ["1.00"],
}


@pytest_asyncio.fixture
async def developer(make_client):
    async with make_client(DeveloperWalletsClient) as client:
        yield client


class TestWalletSets:
    """Tests for wallet set operations."""

    @pytest.mark.asyncio
    async def test_create_wallet_set(self, api, developer):
        """Test creation posts the ciphertext, name and idempotency key."""
        api.reply_data({"walletSet": WALLET_SET})
        req = CreateWalletSetRequest(
            idempotency_key="idem-ws", entity_secret_ciphertext="cipher", name="treasury"
        )
        data = await developer.create_wallet_set(req)

        assert api.last.method == "POST"
        assert api.last.url.path == "/v1/w3s/developer/walletSets"
        assert api.last_json() == {
            "idempotencyKey": "idem-ws",
            "entitySecretCiphertext": "cipher",
            "name": "treasury",
        }
        assert data.wallet_set.custody_type is CustodyType.DEVELOPER

    @pytest.mark.asyncio
    async def test_get_and_update_wallet_set(self, api, developer):
        """Test get and update address the wallet set by id."""
        api.reply_data({"walletSet": WALLET_SET})
        api.reply_data({"walletSet": dict(WALLET_SET, name="ops")})
        await developer.get_wallet_set("ws-1")
        assert api.last.url.path == "/v1/w3s/developer/walletSets/ws-1"

        data = await developer.update_wallet_set("ws-1", UpdateWalletSetRequest(name="ops"))
        assert api.last.method == "PUT"
        assert api.last_json() == {"name": "ops"}
        assert data.wallet_set.name == "ops"

    @pytest.mark.asyncio
    async def test_list_wallet_sets(self, api, developer):
        """Test listing wallet sets forwards the cursor."""
        api.reply_data({"walletSets": [WALLET_SET]})
        data = await developer.list_wallet_sets(ListWalletSetsParams(page_before="c-0"))

        assert api.last.url.path == "/v1/w3s/walletSets"
        assert dict(api.last.url.params) == {"pageBefore": "c-0"}
        assert [ws.id for ws in data.wallet_sets] == ["ws-1"]


class TestWallets:
    """Tests for wallet operations."""

    @pytest.mark.asyncio
    async def test_create_wallets(self, api, developer):
        """Test wallet creation sends blockchains as wire strings."""
        api.reply_data({"wallets": [WALLET]})
        req = CreateWalletsRequest(
            entity_secret_ciphertext="cipher",
            wallet_set_id="ws-1",
            blockchains=[Blockchain.ETH_SEPOLIA],
            account_type=AccountType.SCA,
            count=1,
        )
        data = await developer.create_wallets(req)

        body = api.last_json()
        assert api.last.url.path == "/v1/w3s/developer/wallets"
        assert body["blockchains"] == ["ETH-SEPOLIA"]
        assert body["accountType"] == "SCA"
        assert body["idempotencyKey"] == req.idempotency_key
        assert data.wallets[0].state is WalletState.LIVE

    @pytest.mark.asyncio
    async def test_list_wallets(self, api, developer):
        """Test wallet filters become query parameters."""
        api.reply_data({"wallets": [WALLET]})
        await developer.list_wallets(
            ListWalletsParams(blockchain=Blockchain.ETH_SEPOLIA, wallet_set_id="ws-1", page_size=10)
        )
        assert api.last.url.path == "/v1/w3s/wallets"
        assert dict(api.last.url.params) == {
            "blockchain": "ETH-SEPOLIA",
            "walletSetId": "ws-1",
            "pageSize": "10",
        }

    @pytest.mark.asyncio
    async def test_get_wallet(self, api, developer):
        """Test get_wallet decodes the wrapped wallet."""
        api.reply_data({"wallet": WALLET})
        data = await developer.get_wallet("w-1")

        assert api.last.url.path == "/v1/w3s/wallets/w-1"
        assert data.wallet.account_type is AccountType.SCA

    @pytest.mark.asyncio
    async def test_update_wallet(self, api, developer):
        """Test update_wallet sends only the fields set."""
        api.reply_data({"wallet": dict(WALLET, name="hot")})
        await developer.update_wallet("w-1", UpdateWalletRequest(name="hot"))

        assert api.last.method == "PUT"
        assert api.last_json() == {"name": "hot"}

    @pytest.mark.asyncio
    async def test_wallet_not_found(self, api, developer):
        """Test the API error code reaches the caller."""
        api.reply(404, {"code": 156001, "message": "Cannot find the wallet"})
        with pytest.raises(ApiError) as exc_info:
            await developer.get_wallet("nope")
        assert exc_info.value.code == 156001
        assert exc_info.value.status_code == 404


class TestBalances:
    """Tests for balance and NFT queries."""

    @pytest.mark.asyncio
    async def test_list_wallet_balances(self, api, developer):
        """Test the cross-wallet balance listing returns wallets with balances."""
        wallet = dict(WALLET, tokenBalances=[{"amount": "5", "token": TOKEN, "updateDate": TS}])
        api.reply_data({"wallets": [wallet]})
        data = await developer.list_wallet_balances(
            ListWalletBalancesParams(include_all=False, wallet_ids="w-1,w-2")
        )

        assert api.last.url.path == "/v1/w3s/developer/wallets/balances"
        assert dict(api.last.url.params) == {"includeAll": "false", "walletIds": "w-1,w-2"}
        assert data.wallets[0].token_balances[0].token.symbol == "USDC"

    @pytest.mark.asyncio
    async def test_list_wallet_token_balances(self, api, developer):
        """Test a single wallet's balances with a standard filter."""
        api.reply_data({"tokenBalances": [{"amount": "5", "token": TOKEN, "updateDate": TS}]})
        data = await developer.list_wallet_token_balances(
            "w-1", WalletBalancesParams(include_all=True, standard=TokenStandard.ERC20)
        )

        assert api.last.url.path == "/v1/w3s/wallets/w-1/balances"
        assert dict(api.last.url.params) == {"includeAll": "true", "standard": "ERC20"}
        assert data.token_balances[0].token.standard is TokenStandard.ERC20

    @pytest.mark.asyncio
    async def test_list_wallet_nfts(self, api, developer):
        """Test NFT listing for one wallet."""
        api.reply_data({"nfts": []})
        data = await developer.list_wallet_nfts("w-1", ListWalletNftsParams(name="Punks"))

        assert api.last.url.path == "/v1/w3s/wallets/w-1/nfts"
        assert dict(api.last.url.params) == {"name": "Punks"}
        assert data.nfts == []


class TestSigning:
    """Tests for signing endpoints."""

    @pytest.mark.asyncio
    async def test_sign_message(self, api, developer):
        """Test message signing returns the signature."""
        api.reply_data({"signature": "0xsig"})
        data = await developer.sign_message(
            SignMessageRequest(
                message="hello", entity_secret_ciphertext="cipher", wallet_id="w-1", encoded_by_hex=False
            )
        )

        assert api.last.url.path == "/v1/w3s/developer/sign/message"
        assert api.last_json() == {
            "message": "hello",
            "entitySecretCiphertext": "cipher",
            "walletId": "w-1",
            "encodedByHex": False,
        }
        assert data.signature == "0xsig"

    @pytest.mark.asyncio
    async def test_sign_typed_data(self, api, developer):
        """Test typed data is posted as its JSON string."""
        api.reply_data({"signature": "0xsig"})
        await developer.sign_typed_data(
            SignTypedDataRequest(typed_data='{"types":{}}', entity_secret_ciphertext="cipher", wallet_id="w-1")
        )
        assert api.last.url.path == "/v1/w3s/developer/sign/typedData"
        assert api.last_json()["typedData"] == '{"types":{}}'

    @pytest.mark.asyncio
    async def test_sign_transaction(self, api, developer):
        """Test transaction signing returns the signed payload."""
        api.reply_data({"signature": "0xsig", "signedTransaction": "0xsigned", "txHash": "0xh"})
        data = await developer.sign_transaction(
            SignTransactionRequest(entity_secret_ciphertext="cipher", wallet_id="w-1", raw_transaction="0xraw")
        )
        assert api.last.url.path == "/v1/w3s/developer/sign/transaction"
        assert data.signed_transaction == "0xsigned"


class TestTransactions:
    """Tests for transaction operations."""

    @pytest.mark.asyncio
    async def test_list_transactions(self, api, developer):
        """Test transaction filters use Circle's query names."""
        api.reply_data({"transactions": [TRANSACTION]})
        data = await developer.list_transactions(
            ListTransactionsParams(
                tx_type=TransactionType.OUTBOUND,
                tx_hash="0xh",
                state=TransactionState.COMPLETE,
            )
        )

        assert api.last.url.path == "/v1/w3s/transactions"
        assert dict(api.last.url.params) == {"txType": "OUTBOUND", "txHash": "0xh", "state": "COMPLETE"}
        assert data.transactions[0].transaction_type is TransactionType.OUTBOUND

    @pytest.mark.asyncio
    async def test_get_transaction(self, api, developer):
        """Test get_transaction decodes the wrapped transaction."""
        api.reply_data({"transaction": TRANSACTION})
        data = await developer.get_transaction("tx-1")

        assert api.last.url.path == "/v1/w3s/transactions/tx-1"
        assert data.transaction.state is TransactionState.INITIATED

    @pytest.mark.asyncio
    async def test_create_transfer(self, api, developer):
        """Test a transfer posts amounts and fee level."""
        api.reply_data({"transaction": dict(TRANSACTION, state="INITIATED")})
        req = CreateTransferTxRequest(
            idempotency_key="idem-tx",
            entity_secret_ciphertext="cipher",
            wallet_id="w-1",
            destination_address="0xdest",
            token_id="tok-usdc",
            amounts=["1.00"],
            fee_level=FeeLevel.MEDIUM,
        )
        await developer.create_transfer_transaction(req)

        assert api.last.url.path == "/v1/w3s/developer/transactions/transfer"
        assert api.last_json() == {
            "idempotencyKey": "idem-tx",
            "entitySecretCiphertext": "cipher",
            "walletId": "w-1",
            "destinationAddress": "0xdest",
            "tokenId": "tok-usdc",
            "amounts": ["1.00"],
            "feeLevel": "MEDIUM",
        }

    @pytest.mark.asyncio
    async def test_get_fee_parameters(self, api, developer):
        """Test fee parameter quotes decode per fee level."""
        api.reply_data({"medium": {"maxFee": "10", "priorityFee": "1"}})
        req = CreateTransferTxRequest(
            entity_secret_ciphertext="cipher", wallet_id="w-1", destination_address="0xdest"
        )
        data = await developer.get_fee_parameters(req)

        assert api.last.url.path == "/v1/w3s/developer/transactions/feeParameters"
        assert data.medium.max_fee == "10"
        assert data.low is None

    @pytest.mark.asyncio
    async def test_contract_execution(self, api, developer):
        """Test contract execution passes ABI parameters through."""
        api.reply_data({"transaction": TRANSACTION})
        req = CreateContractExecutionTxRequest(
            entity_secret_ciphertext="cipher",
            wallet_id="w-1",
            contract_address="0xcontract",
            abi_function_signature="transfer(address,uint256)",
            abi_parameters=["0xdest", 1000],
            fee_level=FeeLevel.HIGH,
        )
        await developer.create_contract_execution_transaction(req)

        body = api.last_json()
        assert api.last.url.path == "/v1/w3s/developer/transactions/contractExecution"
        assert body["abiParameters"] == ["0xdest", 1000]
        assert body["abiFunctionSignature"] == "transfer(address,uint256)"

    @pytest.mark.asyncio
    async def test_cancel_and_accelerate(self, api, developer):
        """Test cancel and accelerate target the transaction id."""
        api.reply_data({"transaction": TRANSACTION})
        api.reply_data({"transaction": TRANSACTION})
        await developer.cancel_transaction("tx-1", CancelTxRequest(entity_secret_ciphertext="cipher"))
        assert api.last.url.path == "/v1/w3s/developer/transactions/tx-1/cancel"
        assert api.last_json()["entitySecretCiphertext"] == "cipher"

        await developer.accelerate_transaction("tx-1", AccelerateTxRequest(entity_secret_ciphertext="cipher"))
        assert api.last.url.path == "/v1/w3s/developer/transactions/tx-1/accelerate"
        assert "idempotencyKey" in api.last_json()

    @pytest.mark.asyncio
    async def test_estimate_transfer_fee(self, api, developer):
        """Test fee estimation posts the transfer shape."""
        api.reply_data({"low": {"gasLimit": "21000"}, "high": {"gasLimit": "21000", "maxFee": "50"}})
        data = await developer.estimate_transfer_fee(
            EstimateTransferFeeRequest(destination_address="0xdest", amounts=["1"], token_id="tok-usdc", wallet_id="w-1")
        )

        assert api.last.url.path == "/v1/w3s/transactions/transfer/estimateFee"
        assert api.last_json() == {
            "destinationAddress": "0xdest",
            "amounts": ["1"],
            "tokenId": "tok-usdc",
            "walletId": "w-1",
        }
        assert data.high.max_fee == "50"

    @pytest.mark.asyncio
    async def test_validate_address(self, api, developer):
        """Test address validation returns the verdict."""
        api.reply_data({"isValid": False})
        data = await developer.validate_address(
            ValidateAddressRequest(blockchain=Blockchain.MATIC_AMOY, address="0xbad")
        )

        assert api.last.url.path == "/v1/w3s/transactions/validateAddress"
        assert api.last_json() == {"blockchain": "MATIC-AMOY", "address": "0xbad"}
        assert data.is_valid is False

    @pytest.mark.asyncio
    async def test_bad_transaction_state(self, api, developer):
        """Test an unknown transaction state fails decoding."""
        api.reply_data({"transaction": dict(TRANSACTION, state="TELEPORTED")})
        with pytest.raises(DecodeError):
            await developer.get_transaction("tx-1")


class TestTokens:
    """Tests for token lookup."""

    @pytest.mark.asyncio
    async def test_get_token(self, api, developer):
        """Test get_token decodes token metadata."""
        api.reply_data({"token": TOKEN})
        data = await developer.get_token("tok-usdc")

        assert api.last.url.path == "/v1/w3s/tokens/tok-usdc"
        assert data.token.decimals == 6
        assert data.token.is_native is False
