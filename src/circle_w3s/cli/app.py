"""CLI for the Circle Web3 Services APIs - query and manage wallets from the terminal."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, List, NoReturn, Optional

import httpx
import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from circle_w3s.buidl import (
    BuidlWalletsClient,
    ListTransfersParams,
    ListUserOpsParams,
)
from circle_w3s.buidl import ListWalletBalancesParams as BuidlBalancesParams
from circle_w3s.buidl import ListWalletNftsParams as BuidlNftsParams
from circle_w3s.buidl.models import Blockchain as BuidlBlockchain
from circle_w3s.buidl.models import TransferState, TransferType, UserOpState
from circle_w3s.cli.output import OutputFormat, render
from circle_w3s.client import ResourceClient
from circle_w3s.codec import WireEnum
from circle_w3s.compliance import Chain, ComplianceClient, ScreenAddressRequest
from circle_w3s.config import CliConfig, get_config_path, resolve_config, save_config
from circle_w3s.developer import (
    CreateWalletSetRequest,
    DeveloperWalletsClient,
    EstimateTransferFeeRequest,
    WalletBalancesParams,
)
from circle_w3s.developer import ListTransactionsParams as DevTransactionsParams
from circle_w3s.developer import ListWalletSetsParams
from circle_w3s.developer import ListWalletsParams as DevWalletsParams
from circle_w3s.errors import CircleError, InvalidEnumValue
from circle_w3s.models import (
    Blockchain,
    CustodyType,
    FeeLevel,
    FtStandard,
    NftStandard,
    Operation,
    TokenStandard,
    TransactionState,
    TransactionType,
    ValidateAddressRequest,
    WalletState,
)
from circle_w3s.user import (
    CreateUserRequest,
    GetUserTokenRequest,
    ListUsersParams,
    PinStatus,
    UserWalletsClient,
)
from circle_w3s.user import ListTransactionsParams as UserTransactionsParams
from circle_w3s.user import ListWalletsParams as UserWalletsParams

app = typer.Typer(
    name="circle-w3s",
    help="Command-line client for the Circle Web3 Services APIs.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("circle_w3s.cli")

# Global options captured by the callback, applied on top of the config file.
_overrides: dict[str, Any] = {}
_config_path: Optional[Path] = None

# HTTP transport handed to every client; None uses the network.
_transport: Optional[httpx.AsyncBaseTransport] = None


def _version_callback(value: bool):
    if value:
        from importlib.metadata import version
        console.print(f"circle-w3s {version('circle-w3s')}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    pkg_logger = logging.getLogger("circle_w3s")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="Circle API key (default: $CIRCLE_API_KEY or config file)"
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="API root URL (default: https://api.circle.com)"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds"
    ),
    user_token: Optional[str] = typer.Option(
        None, "--user-token", help="End-user token for user-scoped commands"
    ),
    output: Optional[OutputFormat] = typer.Option(
        None, "--output", "-o", case_sensitive=False, help="Output format"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file (default: ~/.circle-w3s/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP calls"),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Command-line client for the Circle Web3 Services APIs."""
    global _config_path
    _setup_logging(verbose)
    _config_path = config
    _overrides.clear()
    _overrides.update(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        user_token=user_token,
        output=output.value if output is not None else None,
    )


def _run(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def _load_config() -> CliConfig:
    try:
        return resolve_config(_config_path, **_overrides)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        _fail(f"Invalid configuration: {exc}")


def _parse_enum(enum_cls: type[WireEnum], value: Optional[str]):
    """Parse a command-line value into *enum_cls*, case-insensitively."""
    if value is None:
        return None
    try:
        return enum_cls.parse(value, ignore_case=True)
    except InvalidEnumValue as exc:
        _fail(str(exc))


def _invoke(
    client_cls: type[ResourceClient],
    call: Callable[[Any], Awaitable[Any]],
    *,
    title: Optional[str] = None,
    needs_user_token: bool = False,
) -> None:
    """Create a client, run one API call and render its result."""
    cfg = _load_config()
    if not cfg.client.api_key:
        _fail(
            "No API key configured. Pass --api-key, set CIRCLE_API_KEY "
            "or run 'circle-w3s config init'."
        )
    if needs_user_token and not cfg.user_token:
        _fail("This command needs an end-user token. Pass --user-token or set CIRCLE_USER_TOKEN.")

    async def _main():
        async with client_cls(
            cfg.client.api_key,
            cfg.client.base_url,
            timeout=cfg.client.timeout,
            transport=_transport,
        ) as client:
            if needs_user_token:
                return await call(client, cfg.user_token)
            return await call(client)

    try:
        result = _run(_main())
    except CircleError as exc:
        logger.debug("Command failed", exc_info=True)
        _fail(str(exc))
    render(result, cfg.output, console, title)


def _page_size_option():
    return typer.Option(None, "--page-size", help="Items per page (1-50)")


def _page_after_option():
    return typer.Option(None, "--page-after", help="Cursor: return items after this id")


def _page_before_option():
    return typer.Option(None, "--page-before", help="Cursor: return items before this id")


# ------------------------------------------------------------------
# buidl sub-commands
# ------------------------------------------------------------------

buidl_app = typer.Typer(
    name="buidl",
    help="Query transfers, user operations, balances and NFTs (Buidl Wallets).",
    no_args_is_help=True,
)
app.add_typer(buidl_app, name="buidl")


@buidl_app.command("list-transfers")
def buidl_list_transfers(
    wallet_addresses: str = typer.Option(
        ..., "--wallet-addresses", help="Comma-separated wallet addresses"
    ),
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    state: Optional[str] = typer.Option(None, "--state"),
    transfer_type: Optional[str] = typer.Option(None, "--transfer-type"),
    tx_hash: Optional[str] = typer.Option(None, "--tx-hash"),
    user_op_hash: Optional[str] = typer.Option(None, "--user-op-hash"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List indexed token transfers of one or more wallets."""
    params = ListTransfersParams(
        wallet_addresses=wallet_addresses,
        blockchain=_parse_enum(BuidlBlockchain, blockchain),
        state=_parse_enum(TransferState, state),
        transfer_type=_parse_enum(TransferType, transfer_type),
        tx_hash=tx_hash,
        user_op_hash=user_op_hash,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(BuidlWalletsClient, lambda c: c.list_transfers(params), title="Transfers")


@buidl_app.command("get-transfer")
def buidl_get_transfer(id: str = typer.Argument(..., help="Transfer id")):
    """Show one transfer."""
    _invoke(BuidlWalletsClient, lambda c: c.get_transfer(id), title="Transfer")


@buidl_app.command("list-user-ops")
def buidl_list_user_ops(
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    ref_id: Optional[str] = typer.Option(None, "--ref-id"),
    senders: Optional[str] = typer.Option(None, "--senders", help="Comma-separated senders"),
    state: Optional[str] = typer.Option(None, "--state"),
    tx_hash: Optional[str] = typer.Option(None, "--tx-hash"),
    user_op_hash: Optional[str] = typer.Option(None, "--user-op-hash"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List ERC-4337 user operations."""
    params = ListUserOpsParams(
        blockchain=_parse_enum(BuidlBlockchain, blockchain),
        ref_id=ref_id,
        senders=senders,
        state=_parse_enum(UserOpState, state),
        tx_hash=tx_hash,
        user_op_hash=user_op_hash,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(BuidlWalletsClient, lambda c: c.list_user_ops(params), title="User Operations")


@buidl_app.command("get-user-op")
def buidl_get_user_op(id: str = typer.Argument(..., help="User operation id")):
    """Show one user operation."""
    _invoke(BuidlWalletsClient, lambda c: c.get_user_op(id), title="User Operation")


def _buidl_wallet_target(
    wallet_id: Optional[str], blockchain: Optional[str], address: Optional[str]
):
    if wallet_id:
        return wallet_id, None, None
    if blockchain and address:
        return None, _parse_enum(BuidlBlockchain, blockchain), address
    raise typer.BadParameter("Give a WALLET_ID, or both --blockchain and --address.")


@buidl_app.command("list-wallet-balances")
def buidl_list_wallet_balances(
    wallet_id: Optional[str] = typer.Argument(None, help="Wallet id"),
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    address: Optional[str] = typer.Option(None, "--address", "-a"),
    standard: Optional[str] = typer.Option(
        None, "--standard", help="ERC20, or NATIVE for native coins"
    ),
    name: Optional[str] = typer.Option(None, "--name"),
    token_address: Optional[str] = typer.Option(None, "--token-address"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List fungible token balances of a wallet, by id or by chain and address."""
    target_id, chain, addr = _buidl_wallet_target(wallet_id, blockchain, address)
    if standard is not None and standard.upper() == "NATIVE":
        ft_standard = FtStandard.NATIVE
    else:
        ft_standard = _parse_enum(FtStandard, standard)
    params = BuidlBalancesParams(
        standard=ft_standard,
        name=name,
        token_address=token_address,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )

    async def _call(client: BuidlWalletsClient):
        if target_id:
            return await client.list_wallet_balances_by_id(target_id, params)
        return await client.list_wallet_balances_by_address(chain, addr, params)

    _invoke(BuidlWalletsClient, _call, title="Token Balances")


@buidl_app.command("list-wallet-nfts")
def buidl_list_wallet_nfts(
    wallet_id: Optional[str] = typer.Argument(None, help="Wallet id"),
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    address: Optional[str] = typer.Option(None, "--address", "-a"),
    standard: Optional[str] = typer.Option(None, "--standard", help="ERC721 or ERC1155"),
    name: Optional[str] = typer.Option(None, "--name"),
    token_address: Optional[str] = typer.Option(None, "--token-address"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List NFTs held by a wallet, by id or by chain and address."""
    target_id, chain, addr = _buidl_wallet_target(wallet_id, blockchain, address)
    params = BuidlNftsParams(
        standard=_parse_enum(NftStandard, standard),
        name=name,
        token_address=token_address,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )

    async def _call(client: BuidlWalletsClient):
        if target_id:
            return await client.list_wallet_nfts_by_id(target_id, params)
        return await client.list_wallet_nfts_by_address(chain, addr, params)

    _invoke(BuidlWalletsClient, _call, title="NFTs")


# ------------------------------------------------------------------
# compliance sub-commands
# ------------------------------------------------------------------

compliance_app = typer.Typer(
    name="compliance",
    help="Screen blockchain addresses (Compliance Engine).",
    no_args_is_help=True,
)
app.add_typer(compliance_app, name="compliance")


@compliance_app.command("screen-address")
def compliance_screen_address(
    chain: str = typer.Option(..., "--chain", help="Chain, e.g. ETH or BTC"),
    address: str = typer.Option(..., "--address", "-a"),
    idempotency_key: Optional[str] = typer.Option(
        None, "--idempotency-key", help="Replay a previous request (default: fresh UUID)"
    ),
):
    """Screen an address and print the compliance decision."""
    fields: dict[str, Any] = {"address": address, "chain": _parse_enum(Chain, chain)}
    if idempotency_key:
        fields["idempotency_key"] = idempotency_key
    req = ScreenAddressRequest(**fields)
    _invoke(ComplianceClient, lambda c: c.screen_address(req), title="Screening Result")


# ------------------------------------------------------------------
# developer sub-commands
# ------------------------------------------------------------------

developer_app = typer.Typer(
    name="developer",
    help="Manage developer-controlled wallet sets, wallets and transactions.",
    no_args_is_help=True,
)
app.add_typer(developer_app, name="developer")


@developer_app.command("list-wallet-sets")
def developer_list_wallet_sets(
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List wallet sets."""
    params = ListWalletSetsParams(
        page_size=page_size, page_after=page_after, page_before=page_before
    )
    _invoke(DeveloperWalletsClient, lambda c: c.list_wallet_sets(params), title="Wallet Sets")


@developer_app.command("get-wallet-set")
def developer_get_wallet_set(id: str = typer.Argument(..., help="Wallet set id")):
    """Show one wallet set."""
    _invoke(DeveloperWalletsClient, lambda c: c.get_wallet_set(id), title="Wallet Set")


@developer_app.command("create-wallet-set")
def developer_create_wallet_set(
    entity_secret_ciphertext: str = typer.Option(
        ...,
        "--entity-secret-ciphertext",
        envvar="CIRCLE_ENTITY_SECRET_CIPHERTEXT",
        help="Freshly encrypted entity secret",
    ),
    name: Optional[str] = typer.Option(None, "--name"),
    idempotency_key: Optional[str] = typer.Option(None, "--idempotency-key"),
):
    """Create a wallet set."""
    fields: dict[str, Any] = {
        "entity_secret_ciphertext": entity_secret_ciphertext,
        "name": name,
    }
    if idempotency_key:
        fields["idempotency_key"] = idempotency_key
    req = CreateWalletSetRequest(**fields)
    _invoke(DeveloperWalletsClient, lambda c: c.create_wallet_set(req), title="Wallet Set")


@developer_app.command("list-wallets")
def developer_list_wallets(
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    address: Optional[str] = typer.Option(None, "--address", "-a"),
    wallet_set_id: Optional[str] = typer.Option(None, "--wallet-set-id"),
    ref_id: Optional[str] = typer.Option(None, "--ref-id"),
    state: Optional[str] = typer.Option(None, "--state", help="LIVE or FROZEN"),
    custody_type: Optional[str] = typer.Option(None, "--custody-type"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List wallets."""
    params = DevWalletsParams(
        blockchain=_parse_enum(Blockchain, blockchain),
        address=address,
        wallet_set_id=wallet_set_id,
        ref_id=ref_id,
        state=_parse_enum(WalletState, state),
        custody_type=_parse_enum(CustodyType, custody_type),
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(DeveloperWalletsClient, lambda c: c.list_wallets(params), title="Wallets")


@developer_app.command("get-wallet")
def developer_get_wallet(id: str = typer.Argument(..., help="Wallet id")):
    """Show one wallet."""
    _invoke(DeveloperWalletsClient, lambda c: c.get_wallet(id), title="Wallet")


@developer_app.command("list-balances")
def developer_list_balances(
    wallet_id: str = typer.Argument(..., help="Wallet id"),
    include_all: bool = typer.Option(False, "--include-all", help="Include zero balances"),
    name: Optional[str] = typer.Option(None, "--name"),
    token_address: Optional[str] = typer.Option(None, "--token-address"),
    standard: Optional[str] = typer.Option(None, "--standard"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List token balances of one wallet."""
    params = WalletBalancesParams(
        include_all=include_all or None,
        name=name,
        token_address=token_address,
        standard=_parse_enum(TokenStandard, standard),
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(
        DeveloperWalletsClient,
        lambda c: c.list_wallet_token_balances(wallet_id, params),
        title="Token Balances",
    )


@developer_app.command("list-transactions")
def developer_list_transactions(
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    wallet_ids: Optional[str] = typer.Option(None, "--wallet-ids", help="Comma-separated"),
    state: Optional[str] = typer.Option(None, "--state"),
    tx_type: Optional[str] = typer.Option(None, "--tx-type", help="INBOUND or OUTBOUND"),
    operation: Optional[str] = typer.Option(None, "--operation"),
    tx_hash: Optional[str] = typer.Option(None, "--tx-hash"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List transactions."""
    params = DevTransactionsParams(
        blockchain=_parse_enum(Blockchain, blockchain),
        wallet_ids=wallet_ids,
        state=_parse_enum(TransactionState, state),
        tx_type=_parse_enum(TransactionType, tx_type),
        operation=_parse_enum(Operation, operation),
        tx_hash=tx_hash,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(DeveloperWalletsClient, lambda c: c.list_transactions(params), title="Transactions")


@developer_app.command("get-transaction")
def developer_get_transaction(id: str = typer.Argument(..., help="Transaction id")):
    """Show one transaction."""
    _invoke(DeveloperWalletsClient, lambda c: c.get_transaction(id), title="Transaction")


@developer_app.command("get-token")
def developer_get_token(id: str = typer.Argument(..., help="Token id")):
    """Show one token."""
    _invoke(DeveloperWalletsClient, lambda c: c.get_token(id), title="Token")


@developer_app.command("validate-address")
def developer_validate_address(
    blockchain: str = typer.Option(..., "--blockchain", "-b"),
    address: str = typer.Option(..., "--address", "-a"),
):
    """Check whether an address is valid on a blockchain."""
    req = ValidateAddressRequest(blockchain=_parse_enum(Blockchain, blockchain), address=address)
    _invoke(DeveloperWalletsClient, lambda c: c.validate_address(req), title="Address")


@developer_app.command("estimate-fee")
def developer_estimate_fee(
    destination_address: str = typer.Option(..., "--destination-address", "-d"),
    amount: Optional[List[str]] = typer.Option(
        None, "--amount", help="Amount to send; repeatable"
    ),
    token_id: Optional[str] = typer.Option(None, "--token-id"),
    source_address: Optional[str] = typer.Option(None, "--source-address"),
    wallet_id: Optional[str] = typer.Option(None, "--wallet-id"),
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    fee_level: Optional[str] = typer.Option(None, "--fee-level", help="LOW, MEDIUM or HIGH"),
):
    """Estimate the network fee of a transfer."""
    req = EstimateTransferFeeRequest(
        destination_address=destination_address,
        amounts=amount or None,
        token_id=token_id,
        source_address=source_address,
        wallet_id=wallet_id,
        blockchain=_parse_enum(Blockchain, blockchain),
        fee_level=_parse_enum(FeeLevel, fee_level),
    )
    _invoke(DeveloperWalletsClient, lambda c: c.estimate_transfer_fee(req), title="Fee Estimate")


# ------------------------------------------------------------------
# user sub-commands
# ------------------------------------------------------------------

user_app = typer.Typer(
    name="user",
    help="Manage end users and their user-controlled wallets.",
    no_args_is_help=True,
)
app.add_typer(user_app, name="user")


@user_app.command("create-user")
def user_create_user(user_id: str = typer.Argument(..., help="Your id for the end user")):
    """Register an end user."""
    req = CreateUserRequest(user_id=user_id)
    _invoke(UserWalletsClient, lambda c: c.create_user(req), title="User")


@user_app.command("get-user")
def user_get_user(id: str = typer.Argument(..., help="User id")):
    """Show one end user."""
    _invoke(UserWalletsClient, lambda c: c.get_user(id), title="User")


@user_app.command("list-users")
def user_list_users(
    pin_status: Optional[str] = typer.Option(None, "--pin-status"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List end users."""
    params = ListUsersParams(
        pin_status=_parse_enum(PinStatus, pin_status),
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(UserWalletsClient, lambda c: c.list_users(params), title="Users")


@user_app.command("get-user-token")
def user_get_user_token(user_id: str = typer.Argument(..., help="User id")):
    """Issue a 60-minute user token."""
    req = GetUserTokenRequest(user_id=user_id)
    _invoke(UserWalletsClient, lambda c: c.get_user_token(req), title="User Token")


@user_app.command("list-wallets")
def user_list_wallets(
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    address: Optional[str] = typer.Option(None, "--address", "-a"),
    ref_id: Optional[str] = typer.Option(None, "--ref-id"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List the wallets of the end user."""
    params = UserWalletsParams(
        blockchain=_parse_enum(Blockchain, blockchain),
        address=address,
        ref_id=ref_id,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(
        UserWalletsClient,
        lambda c, token: c.list_wallets(token, params),
        title="Wallets",
        needs_user_token=True,
    )


@user_app.command("get-wallet")
def user_get_wallet(id: str = typer.Argument(..., help="Wallet id")):
    """Show one wallet of the end user."""
    _invoke(
        UserWalletsClient,
        lambda c, token: c.get_wallet(token, id),
        title="Wallet",
        needs_user_token=True,
    )


@user_app.command("list-transactions")
def user_list_transactions(
    blockchain: Optional[str] = typer.Option(None, "--blockchain", "-b"),
    state: Optional[str] = typer.Option(None, "--state"),
    tx_type: Optional[str] = typer.Option(None, "--tx-type"),
    wallet_ids: Optional[str] = typer.Option(None, "--wallet-ids"),
    page_size: Optional[int] = _page_size_option(),
    page_after: Optional[str] = _page_after_option(),
    page_before: Optional[str] = _page_before_option(),
):
    """List transactions of the end user."""
    params = UserTransactionsParams(
        blockchain=_parse_enum(Blockchain, blockchain),
        state=_parse_enum(TransactionState, state),
        tx_type=_parse_enum(TransactionType, tx_type),
        wallet_ids=wallet_ids,
        page_size=page_size,
        page_after=page_after,
        page_before=page_before,
    )
    _invoke(
        UserWalletsClient,
        lambda c, token: c.list_transactions(token, params),
        title="Transactions",
        needs_user_token=True,
    )


@user_app.command("get-transaction")
def user_get_transaction(id: str = typer.Argument(..., help="Transaction id")):
    """Show one transaction of the end user."""
    _invoke(
        UserWalletsClient,
        lambda c, token: c.get_transaction(token, id),
        title="Transaction",
        needs_user_token=True,
    )


@user_app.command("list-challenges")
def user_list_challenges():
    """List the end user's pending and past challenges."""
    _invoke(
        UserWalletsClient,
        lambda c, token: c.list_challenges(token),
        title="Challenges",
        needs_user_token=True,
    )


@user_app.command("get-challenge")
def user_get_challenge(id: str = typer.Argument(..., help="Challenge id")):
    """Show the status of one challenge."""
    _invoke(
        UserWalletsClient,
        lambda c, token: c.get_challenge(token, id),
        title="Challenge",
        needs_user_token=True,
    )


@user_app.command("validate-address")
def user_validate_address(
    blockchain: str = typer.Option(..., "--blockchain", "-b"),
    address: str = typer.Option(..., "--address", "-a"),
):
    """Check whether an address is valid on a blockchain."""
    req = ValidateAddressRequest(blockchain=_parse_enum(Blockchain, blockchain), address=address)
    _invoke(UserWalletsClient, lambda c: c.validate_address(req), title="Address")


# ------------------------------------------------------------------
# config sub-commands
# ------------------------------------------------------------------

config_app = typer.Typer(
    name="config",
    help="Create and inspect the circle-w3s config file.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


@config_app.command("init")
def config_init(
    api_key: str = typer.Option(
        ..., "--api-key", prompt="Circle API key", hide_input=True, help="Circle API key"
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url"),
    timeout: Optional[float] = typer.Option(None, "--timeout"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a config file holding the API key and connection settings."""
    path = _config_path or get_config_path()
    if path.exists() and not force:
        _fail(f"{path} already exists. Use --force to overwrite.")

    client: dict[str, Any] = {"api_key": api_key}
    if base_url is not None:
        client["base_url"] = base_url
    if timeout is not None:
        client["timeout"] = timeout
    try:
        cfg = CliConfig.model_validate({"client": client})
    except ValidationError as exc:
        _fail(f"Invalid configuration: {exc}")

    save_config(cfg, path)
    console.print(Panel(
        f"[bold green]Config written.[/bold green]\n\n"
        f"Path: [cyan]{path}[/cyan]\n"
        f"Base URL: [cyan]{cfg.client.base_url}[/cyan]",
        title="circle-w3s",
    ))


@config_app.command("show")
def config_show():
    """Print the effective configuration with secrets redacted."""
    cfg = _load_config()
    console.print(Panel(
        yaml.dump(cfg.redacted(), default_flow_style=False, sort_keys=False).rstrip(),
        title=str(_config_path or get_config_path()),
    ))


if __name__ == "__main__":
    app()
