"""Client for the Buidl Wallets API (read-only indexer queries)."""

from __future__ import annotations

from typing import Optional

from circle_w3s.buidl.models import (
    BalancesData,
    Blockchain,
    ListTransfersParams,
    ListUserOpsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    NftsData,
    TransferIdData,
    TransfersData,
    UserOpIdData,
    UserOpsData,
)
from circle_w3s.client import ResourceClient
from circle_w3s.request import Endpoint

LIST_TRANSFERS = Endpoint("GET", "/v1/w3s/buidl/transfers")
GET_TRANSFER = Endpoint("GET", "/v1/w3s/buidl/transfers/{id}")
LIST_USER_OPS = Endpoint("GET", "/v1/w3s/buidl/userOps")
GET_USER_OP = Endpoint("GET", "/v1/w3s/buidl/userOps/{id}")
LIST_BALANCES_BY_ID = Endpoint("GET", "/v1/w3s/buidl/wallets/{wallet_id}/balances")
LIST_NFTS_BY_ID = Endpoint("GET", "/v1/w3s/buidl/wallets/{wallet_id}/nfts")
LIST_BALANCES_BY_ADDRESS = Endpoint(
    "GET", "/v1/w3s/buidl/wallets/{blockchain}/{address}/balances"
)
LIST_NFTS_BY_ADDRESS = Endpoint(
    "GET", "/v1/w3s/buidl/wallets/{blockchain}/{address}/nfts"
)


class BuidlWalletsClient(ResourceClient):
    """Transfers, user operations, balances and NFTs indexed by Buidl Wallets."""

    async def list_transfers(self, params: ListTransfersParams) -> TransfersData:
        return await self._call(LIST_TRANSFERS, TransfersData, params)

    async def get_transfer(self, id: str) -> TransferIdData:
        return await self._call(GET_TRANSFER, TransferIdData, id=id)

    async def list_user_ops(
        self, params: Optional[ListUserOpsParams] = None
    ) -> UserOpsData:
        return await self._call(LIST_USER_OPS, UserOpsData, params)

    async def get_user_op(self, id: str) -> UserOpIdData:
        return await self._call(GET_USER_OP, UserOpIdData, id=id)

    async def list_wallet_balances_by_id(
        self, wallet_id: str, params: Optional[ListWalletBalancesParams] = None
    ) -> BalancesData:
        return await self._call(
            LIST_BALANCES_BY_ID, BalancesData, params, wallet_id=wallet_id
        )

    async def list_wallet_nfts_by_id(
        self, wallet_id: str, params: Optional[ListWalletNftsParams] = None
    ) -> NftsData:
        return await self._call(LIST_NFTS_BY_ID, NftsData, params, wallet_id=wallet_id)

    async def list_wallet_balances_by_address(
        self,
        blockchain: Blockchain,
        address: str,
        params: Optional[ListWalletBalancesParams] = None,
    ) -> BalancesData:
        """List fungible balances of the wallet at *address* on *blockchain*."""
        return await self._call(
            LIST_BALANCES_BY_ADDRESS,
            BalancesData,
            params,
            blockchain=blockchain,
            address=address,
        )

    async def list_wallet_nfts_by_address(
        self,
        blockchain: Blockchain,
        address: str,
        params: Optional[ListWalletNftsParams] = None,
    ) -> NftsData:
        return await self._call(
            LIST_NFTS_BY_ADDRESS,
            NftsData,
            params,
            blockchain=blockchain,
            address=address,
        )
