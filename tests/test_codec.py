"""Tests for the field codec: wire naming, omission rules and enums."""

import uuid

import pytest
from pydantic import create_model

from circle_w3s import models as shared_models
from circle_w3s.buidl import models as buidl_models
from circle_w3s.compliance import models as compliance_models
from circle_w3s.developer import models as developer_models
from circle_w3s.user import models as user_models
from circle_w3s.buidl.models import Blockchain as BuidlBlockchain
from circle_w3s.buidl.models import (
    ListTransfersParams,
    ListWalletBalancesParams,
    Transfer,
    TransferState,
    TransfersData,
)
from circle_w3s.codec import PageParams, WireEnum, WireModel, new_idempotency_key
from circle_w3s.compliance.models import Chain, ScreenAddressRequest
from circle_w3s.developer.models import CreateWalletsRequest, Token, Transaction
from circle_w3s.errors import DecodeError, InvalidEnumValue
from circle_w3s.models import (
    AccountType,
    Blockchain,
    FtStandard,
    ScaCore,
    TokenStandard,
    ValidateAddressData,
    WalletMetadata,
)
from circle_w3s.user.models import Challenge, ChallengeStatus, ChallengeType


TRANSFER = {
    "id": "t-1",
    "walletId": "w-1",
    "amount": "1.5",
    "blockchain": "ETH-SEPOLIA",
    "from": "0xfrom",
    "state": "COMPLETE",
    "to": "0xto",
    "tokenId": "tok-1",
    "transferType": "INBOUND_TRANSFER",
    "txHash": "0xhash",
    "walletAddress": "0xto",
}


class TestWireEnum:
    """Tests for closed wire enumerations."""

    def test_kebab_case_wire_value(self):
        """Test kebab-case members encode to their exact wire string."""
        assert Blockchain.ETH_SEPOLIA.value == "ETH-SEPOLIA"
        assert str(Blockchain.ETH_SEPOLIA) == "ETH-SEPOLIA"
        assert f"{Blockchain.ARC_TESTNET}" == "ARC-TESTNET"

    def test_override_spellings(self):
        """Test one-off spellings are preserved."""
        assert ScaCore.CIRCLE_4337_V1.value == "circle_4337_v1"
        assert TokenStandard.FUNGIBLE_ASSET.value == "FungibleAsset"
        assert ChallengeStatus.IN_PROGRESS.value == "IN_PROGRESS"

    def test_parse_exact(self):
        """Test parsing an exact wire string returns the member."""
        assert Blockchain.parse("ETH-SEPOLIA") is Blockchain.ETH_SEPOLIA
        assert ScaCore.parse("circle_6900_singleowner_v2") is ScaCore.CIRCLE_6900_SINGLEOWNER_V2

    def test_parse_is_case_sensitive_by_default(self):
        """Test a differently cased string is rejected without ignore_case."""
        with pytest.raises(InvalidEnumValue):
            Blockchain.parse("eth-sepolia")

    def test_parse_ignore_case(self):
        """Test case-insensitive parsing."""
        assert Blockchain.parse("eth-sepolia", ignore_case=True) is Blockchain.ETH_SEPOLIA
        assert TokenStandard.parse("fungibleasset", ignore_case=True) is TokenStandard.FUNGIBLE_ASSET

    def test_parse_unknown_value(self):
        """Test an unknown string raises InvalidEnumValue listing the allowed set."""
        with pytest.raises(InvalidEnumValue) as exc_info:
            AccountType.parse("MULTISIG")
        err = exc_info.value
        assert isinstance(err, ValueError)
        assert err.enum_name == "AccountType"
        assert err.value == "MULTISIG"
        assert err.allowed == ["SCA", "EOA"]
        assert "MULTISIG" in str(err)

    def test_native_standard_is_empty_string(self):
        """Test the native fungible standard encodes as an empty string."""
        assert FtStandard.NATIVE.value == ""
        assert FtStandard.parse("") is FtStandard.NATIVE

    def test_wire_values_in_declaration_order(self):
        """Test wire_values lists every member."""
        values = Chain.wire_values()
        assert values[0] == "ETH"
        assert "BTC" in values
        assert len(values) == len(set(values))


class TestEncoding:
    """Tests for request encoding."""

    def test_page_params_only_set_fields(self):
        """Test a cursor with only page_size encodes to that key alone."""
        assert PageParams(page_size=10).encode() == {"pageSize": 10}

    def test_page_params_from_alias(self):
        """Test the from cursor uses its reserved-word wire name."""
        params = PageParams(from_="2024-01-01T00:00:00Z", page_after="abc")
        assert params.encode() == {"from": "2024-01-01T00:00:00Z", "pageAfter": "abc"}

    def test_list_params_flatten_cursor(self):
        """Test list params carry cursor fields at the top level."""
        params = ListTransfersParams(wallet_addresses="0xABC", page_size=5)
        assert params.encode() == {"walletAddresses": "0xABC", "pageSize": 5}

    def test_required_only(self):
        """Test a request with every optional unset encodes to required keys."""
        assert ListTransfersParams(wallet_addresses="0xABC").encode() == {
            "walletAddresses": "0xABC"
        }

    def test_enum_fields_encode_wire_value(self):
        """Test enum fields encode to their wire strings."""
        params = ListTransfersParams(
            wallet_addresses="0xABC",
            blockchain=BuidlBlockchain.parse("BASE-SEPOLIA"),
            state=TransferState.COMPLETE,
        )
        assert params.encode() == {
            "walletAddresses": "0xABC",
            "blockchain": "BASE-SEPOLIA",
            "state": "COMPLETE",
        }

    def test_native_standard_distinct_from_unset(self):
        """Test the empty-string standard is sent while an unset one is not."""
        assert ListWalletBalancesParams(standard=FtStandard.NATIVE).encode() == {"standard": ""}
        assert ListWalletBalancesParams().encode() == {}

    def test_nested_lists(self):
        """Test lists of enums and nested models encode recursively."""
        req = CreateWalletsRequest(
            idempotency_key="key-1",
            entity_secret_ciphertext="cipher",
            wallet_set_id="ws-1",
            blockchains=[Blockchain.ETH_SEPOLIA, Blockchain.SOL_DEVNET],
            account_type=AccountType.SCA,
            count=2,
            metadata=[WalletMetadata(name="primary")],
        )
        assert req.encode() == {
            "idempotencyKey": "key-1",
            "entitySecretCiphertext": "cipher",
            "walletSetId": "ws-1",
            "blockchains": ["ETH-SEPOLIA", "SOL-DEVNET"],
            "accountType": "SCA",
            "count": 2,
            "metadata": [{"name": "primary"}],
        }


class TestIdempotencyKey:
    """Tests for idempotency key generation."""

    def test_new_key_is_uuid4(self):
        """Test generated keys are version 4 UUIDs."""
        assert uuid.UUID(new_idempotency_key()).version == 4

    def test_fresh_key_per_request(self):
        """Test each request instance gets its own key."""
        a = ScreenAddressRequest(address="0x1", chain=Chain.ETH)
        b = ScreenAddressRequest(address="0x1", chain=Chain.ETH)
        assert a.idempotency_key != b.idempotency_key
        assert a.encode()["idempotencyKey"] == a.idempotency_key

    def test_explicit_key_is_kept(self):
        """Test an explicit key is sent unchanged for replays."""
        req = ScreenAddressRequest(idempotency_key="replay-me", address="0x1", chain=Chain.ETH)
        assert req.encode()["idempotencyKey"] == "replay-me"


class TestDecoding:
    """Tests for response decoding."""

    def test_decode_transfer_list(self):
        """Test a one-transfer payload decodes with typed fields."""
        data = TransfersData.decode({"transfers": [TRANSFER]})
        assert len(data.transfers) == 1
        transfer = data.transfers[0]
        assert transfer.state is TransferState.COMPLETE
        assert transfer.from_ == "0xfrom"
        assert transfer.blockchain is not None
        assert transfer.block_height is None

    def test_round_trip(self):
        """Test decode(encode(x)) reproduces the value."""
        transfer = Transfer.decode(dict(TRANSFER, blockHeight=123))
        assert Transfer.decode(transfer.encode()) == transfer
        assert transfer.encode()["from"] == "0xfrom"

    def test_unknown_keys_ignored(self):
        """Test extra server fields do not break decoding."""
        transfer = Transfer.decode(dict(TRANSFER, brandNewField={"x": 1}))
        assert transfer.id == "t-1"
        assert "brandNewField" not in transfer.encode()

    def test_missing_required_key(self):
        """Test a missing required key raises DecodeError."""
        incomplete = {k: v for k, v in TRANSFER.items() if k != "txHash"}
        with pytest.raises(DecodeError):
            Transfer.decode(incomplete)

    def test_wrong_json_type(self):
        """Test a value of the wrong JSON type raises DecodeError."""
        with pytest.raises(DecodeError):
            Transfer.decode(dict(TRANSFER, blockHeight="not-a-number"))

    def test_unknown_enum_value(self):
        """Test an unknown enum string from the server raises DecodeError."""
        with pytest.raises(DecodeError):
            Transfer.decode(dict(TRANSFER, state="VANISHED"))

    def test_usd_aliases(self):
        """Test USD amount fields use their upper-case wire names."""
        tx = Transaction.decode(
            {
                "id": "tx-1",
                "state": "COMPLETE",
                "createDate": "2024-01-01T00:00:00Z",
                "updateDate": "2024-01-01T00:00:00Z",
                "amountInUSD": "10.00",
                "networkFeeInUSD": "0.01",
            }
        )
        assert tx.amount_in_usd == "10.00"
        assert tx.network_fee_in_usd == "0.01"
        assert set(tx.encode()) >= {"amountInUSD", "networkFeeInUSD"}

    def test_type_alias(self):
        """Test a field named 'type' on the wire decodes by alias."""
        challenge = Challenge.decode(
            {"id": "c-1", "type": "SET_PIN", "status": "PENDING"}
        )
        assert challenge.challenge_type is ChallengeType.SET_PIN
        assert challenge.encode() == {"id": "c-1", "type": "SET_PIN", "status": "PENDING"}

    def test_bool_from_string_rejected(self):
        """Test a string is not accepted where the wire carries a bool."""
        with pytest.raises(DecodeError):
            ValidateAddressData.decode({"isValid": "yes"})
        assert ValidateAddressData.decode({"isValid": True}).is_valid is True

    @pytest.mark.parametrize("decimals", ["6", 6.0])
    def test_int_from_string_or_float_rejected(self, decimals):
        """Test only a JSON integer is accepted for an integer field."""
        with pytest.raises(DecodeError):
            Token.decode({"blockchain": "ETH", "isNative": False, "decimals": decimals})

    def test_int_field_accepts_integer(self):
        """Test an integer field decodes a JSON integer."""
        token = Token.decode({"blockchain": "ETH", "isNative": False, "decimals": 6})
        assert token.decimals == 6


# ---------------------------------------------------------------------------
# Every closed enumeration
# ---------------------------------------------------------------------------


def _wire_enums() -> list[type[WireEnum]]:
    found = set()
    for module in (shared_models, buidl_models, compliance_models, developer_models, user_models):
        for obj in vars(module).values():
            if isinstance(obj, type) and issubclass(obj, WireEnum) and obj is not WireEnum:
                found.add(obj)
    return sorted(found, key=lambda cls: (cls.__module__, cls.__name__))


WIRE_ENUMS = _wire_enums()


@pytest.mark.parametrize(
    "enum_cls", WIRE_ENUMS, ids=[f"{c.__module__}.{c.__name__}" for c in WIRE_ENUMS]
)
class TestEveryWireEnum:
    """Tests run against every variant of every closed enumeration."""

    def test_field_round_trip(self, enum_cls):
        """Test each member encodes to its wire string and decodes back."""
        holder = create_model(
            f"{enum_cls.__name__}Holder", __base__=WireModel, value=(enum_cls, ...)
        )
        for member in enum_cls:
            encoded = holder(value=member).encode()
            assert encoded == {"value": member.value}
            assert holder.decode(encoded).value is member

    def test_parse_each_value(self, enum_cls):
        """Test parse maps every wire string to its own member."""
        for member in enum_cls:
            assert enum_cls.parse(member.value) is member
            assert enum_cls.parse(member.value, ignore_case=True) is member

    def test_wire_values_unique(self, enum_cls):
        """Test no two members share a wire string."""
        values = enum_cls.wire_values()
        assert values
        assert len(values) == len(set(values))
        assert len(values) == len(enum_cls)
