"""
Tests for request URI assembly.

Tests cover:
- Plain transfers to addresses and ENS names
- Fee field ordering
- Chain id rendering under both profiles
- Function calls decoded from call data
- Invalid targets
"""

import pytest

from web3_url import (
    FULL_PROFILE,
    LEGACY_PROFILE,
    SCHEMA_LONG,
    SCHEMA_SHORT,
    AddressError,
    ChainIdStyle,
    DecodeError,
    TransactionDescriptor,
    UriProfile,
    serialize,
)
from web3_url.serialize import get_transaction_prefix

from .conftest import ENS_NAME, TOKEN_ADDRESS, encode_call


# =============================================================================
# Target Tests
# =============================================================================


class TestTarget:
    """Tests for the target part of the URI."""

    @pytest.mark.parametrize("tx", [{}, {"to": ""}, {"to": None}, {"to": "<invalid>"}])
    def test_invalid(self, tx) -> None:
        """Test missing or invalid targets raise AddressError."""
        with pytest.raises(AddressError):
            serialize(tx)

    def test_target_checked_before_fields(self) -> None:
        """An invalid target wins over an invalid amount."""
        with pytest.raises(AddressError):
            serialize({"to": "<invalid>", "value": -1})

    def test_address(self, address) -> None:
        """Test plain transfer to a raw address."""
        assert serialize({"to": address}) == f"{SCHEMA_LONG}:{address}"

    def test_lowercase_address_checksummed(self) -> None:
        """Test lowercase address checksummed."""
        assert serialize({"to": TOKEN_ADDRESS.lower()}) == f"ethereum:{TOKEN_ADDRESS}"

    def test_ens_gets_pay_prefix(self) -> None:
        """Test ENS targets get the pay- prefix."""
        assert serialize({"to": ENS_NAME}) == "ethereum:pay-cawfree.eth"

    def test_descriptor_input(self, address) -> None:
        """Test descriptor input."""
        assert serialize(TransactionDescriptor(to=address)) == f"ethereum:{address}"


class TestGetTransactionPrefix:
    """Tests for get_transaction_prefix()."""

    def test_ens(self) -> None:
        """Test ENS names get the pay prefix."""
        assert get_transaction_prefix(ENS_NAME) == "pay-"

    def test_address(self) -> None:
        """Test raw addresses never get a prefix."""
        assert get_transaction_prefix(TOKEN_ADDRESS) == ""

    def test_legacy_profile(self) -> None:
        """Test legacy profile never adds a prefix."""
        assert get_transaction_prefix(ENS_NAME, LEGACY_PROFILE) == ""


# =============================================================================
# Field Tests
# =============================================================================


class TestFields:
    """Tests for value and fee fields."""

    def test_value(self, address) -> None:
        """Test value renders in exponential notation."""
        url = serialize({"to": address, "value": 10**18})
        assert url == f"ethereum:{address}?value=1e18"

    def test_all_fee_fields(self, address) -> None:
        """Test fee fields keep their fixed order."""
        url = serialize({
            "to": address,
            "value": 10**18,
            "gasLimit": 5 * 10**17,
            "gasPrice": 25 * 10**16,
            "maxFeePerGas": 125 * 10**15,
            "maxPriorityFeePerGas": 625 * 10**14,
        })

        assert url == (
            f"ethereum:{address}"
            "?value=1e18&gasPrice=2.5e17&gas=5e17&maxFeePerGas=1.25e17&maxPriorityFeePerGas=6.25e16"
        )

    def test_zero_value_omitted(self, address) -> None:
        """Test zero value omitted."""
        assert serialize({"to": address, "value": 0}) == f"ethereum:{address}"

    def test_ens_with_value(self) -> None:
        """Test ENS target combined with a value."""
        assert serialize({"to": ENS_NAME, "value": 2014 * 10**15}) == "ethereum:pay-cawfree.eth?value=2.014e18"


# =============================================================================
# Chain Id Tests
# =============================================================================


class TestChainId:
    """Tests for chain id rendering."""

    def test_path_suffix(self, address) -> None:
        """Test chain id renders as @<id>."""
        assert serialize({"to": address, "chainId": 1}) == f"ethereum:{address}@1"

    def test_path_suffix_before_query(self, address) -> None:
        """Test @<id> comes before the query string."""
        url = serialize({"to": address, "chainId": 137, "value": 10**18})
        assert url == f"ethereum:{address}@137?value=1e18"

    def test_zero_chain_id_in_path(self, address) -> None:
        """Test zero chain id in path."""
        assert serialize({"to": address, "chainId": 0}) == f"ethereum:{address}@0"

    def test_legacy_query_parameter(self, address) -> None:
        """Test legacy profile renders chainId in the query."""
        url = serialize({"to": address, "chainId": 1, "value": 10**18}, profile=LEGACY_PROFILE)
        assert url == f"{SCHEMA_SHORT}:{address}?value=1e18&chainId=1"

    def test_legacy_zero_chain_id_omitted(self, address) -> None:
        """Test legacy zero chain id omitted."""
        assert serialize({"to": address, "chainId": 0}, profile=LEGACY_PROFILE) == f"ethereum:{address}"

    def test_legacy_ens_without_prefix(self) -> None:
        """Test legacy ens without prefix."""
        assert serialize({"to": ENS_NAME}, profile=LEGACY_PROFILE) == "ethereum:cawfree.eth"

    def test_custom_profile(self) -> None:
        """Test custom profile."""
        profile = UriProfile(chain_id_style=ChainIdStyle.QUERY)
        assert serialize({"to": ENS_NAME, "chainId": 5}, profile=profile) == "ethereum:pay-cawfree.eth?chainId=5"


# =============================================================================
# Function Call Tests
# =============================================================================


class TestFunctionCall:
    """Tests for call data rendered as a function path."""

    def test_transfer(self, erc20_abi, recipient) -> None:
        """Test transfer call data renders a function path."""
        data = encode_call("transfer(address,uint256)", ["address", "uint256"], [recipient, 1000])

        url = serialize({"to": TOKEN_ADDRESS, "data": data}, contract=erc20_abi)

        assert url == f"ethereum:{TOKEN_ADDRESS}/transfer?address={recipient}&uint256=1000"

    def test_arguments_before_fields(self, erc20_abi, recipient) -> None:
        """Test ABI arguments precede value and fee fields."""
        data = encode_call("setApprovalForAll(address,bool)", ["address", "bool"], [recipient, False])

        url = serialize(
            {"to": TOKEN_ADDRESS, "data": data, "value": 10**18, "chainId": 1},
            contract=erc20_abi,
        )

        assert url == f"ethereum:{TOKEN_ADDRESS}/setApprovalForAll@1?address={recipient}&bool=0&value=1e18"

    def test_no_contract_is_plain_transfer(self, recipient) -> None:
        """Test no contract is plain transfer."""
        data = encode_call("transfer(address,uint256)", ["address", "uint256"], [recipient, 1000])
        assert serialize({"to": TOKEN_ADDRESS, "data": data}) == f"ethereum:{TOKEN_ADDRESS}"

    def test_unknown_selector_raises(self, erc20_abi) -> None:
        """Test unknown selector raises DecodeError."""
        with pytest.raises(DecodeError):
            serialize({"to": TOKEN_ADDRESS, "data": "0xdeadbeef"}, contract=erc20_abi)

    def test_unknown_selector_lenient(self, erc20_abi) -> None:
        """Test strict=False renders a plain transfer."""
        url = serialize(
            {"to": TOKEN_ADDRESS, "data": "0xdeadbeef", "value": 1},
            contract=erc20_abi,
            strict=False,
        )
        assert url == f"ethereum:{TOKEN_ADDRESS}?value=1e0"

    def test_legacy_profile_ignores_call_data(self, erc20_abi) -> None:
        """Test legacy profile ignores call data."""
        url = serialize(
            {"to": TOKEN_ADDRESS, "data": "0xdeadbeef"},
            contract=erc20_abi,
            profile=LEGACY_PROFILE,
        )
        assert url == f"ethereum:{TOKEN_ADDRESS}"

    def test_full_profile_is_default(self) -> None:
        """Test full profile is default."""
        assert FULL_PROFILE.function_path is True
        assert FULL_PROFILE.chain_id_style is ChainIdStyle.PATH
