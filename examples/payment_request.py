#!/usr/bin/env python3
"""
Payment Request Example

Prints wallet request URIs for a plain ETH payment and for an ERC-20
transfer built through a wrapped contract. No node is needed.

Run with: python examples/payment_request.py
"""

import asyncio
import logging
import os

from web3 import Web3

from web3_url import LEGACY_PROFILE, serialize, wrap
from web3_url.utils import configure_logging

# Addresses (use environment variables or defaults)
RECIPIENT = os.environ.get("RECIPIENT", "cawfree.eth")
TOKEN_ADDRESS = os.environ.get(
    "TOKEN_ADDRESS",
    "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
)
PAYEE_ADDRESS = os.environ.get(
    "PAYEE_ADDRESS",
    "0x1234567890123456789012345678901234567890",
)

ERC20_ABI = [
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
]


async def main() -> None:
    print("=" * 60)
    print("web3-url - Payment Request")
    print("=" * 60)
    print()

    tx = {"to": RECIPIENT, "value": Web3.to_wei("0.05", "ether"), "chainId": 1}
    print(f"ETH payment:    {serialize(tx)}")
    print(f"Legacy scheme:  {serialize(tx, profile=LEGACY_PROFILE)}")

    token = Web3().eth.contract(address=TOKEN_ADDRESS, abi=ERC20_ABI)
    wrapped = wrap(token)
    url = await wrapped.transfer(PAYEE_ADDRESS, 1_000_000, {"chainId": 1})
    print(f"USDC transfer:  {url}")


if __name__ == "__main__":
    if os.environ.get("DEBUG"):
        configure_logging(logging.DEBUG)
    asyncio.run(main())
