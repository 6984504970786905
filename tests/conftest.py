"""
Shared fixtures for web3-url tests.
"""

from typing import Any, Dict, List

import pytest
from eth_abi import encode
from eth_account import Account
from eth_utils import encode_hex, function_signature_to_4byte_selector

# =============================================================================
# Test Constants
# =============================================================================

# USDC on Ethereum mainnet (checksummed)
TOKEN_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"

ENS_NAME = "cawfree.eth"

ERC20_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "approve",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "setApprovalForAll",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "operator", "type": "address"},
            {"name": "approved", "type": "bool"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "deposit",
        "stateMutability": "payable",
        "inputs": [],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"indexed": True, "name": "from", "type": "address"},
            {"indexed": True, "name": "to", "type": "address"},
            {"indexed": False, "name": "value", "type": "uint256"},
        ],
    },
]


def encode_call(signature: str, types: List[str], args: List[Any]) -> str:
    """Build call data for a function signature."""
    return encode_hex(function_signature_to_4byte_selector(signature) + encode(types, args))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def address() -> str:
    """Random checksummed address."""
    return Account.create().address


@pytest.fixture
def recipient() -> str:
    """Second random checksummed address."""
    return Account.create().address


@pytest.fixture
def erc20_abi() -> List[Dict[str, Any]]:
    return ERC20_ABI
