"""
Request URI assembly.

Example:
    >>> from web3_url import serialize
    >>> serialize({"to": "0x...", "value": 10**18, "chainId": 1})
    'ethereum:0x...@1?value=1e18'
    >>> serialize({"to": "cawfree.eth"})
    'ethereum:pay-cawfree.eth'
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from web3_url.abi import decode_invocation
from web3_url.address import is_ens_name, normalize_target
from web3_url.config import FULL_PROFILE, ChainIdStyle, UriProfile
from web3_url.models import TransactionDescriptor, coerce_amount
from web3_url.params import serialize_chain_id_suffix, serialize_parameters
from web3_url.utils.logging import get_logger

__all__ = ["serialize", "get_transaction_prefix"]

_logger = get_logger(__name__)

Transaction = Union[TransactionDescriptor, Mapping[str, Any]]


def get_transaction_prefix(to: str, profile: UriProfile = FULL_PROFILE) -> str:
    """Return ``<prefix>-`` for ENS targets under profiles that carry a prefix."""
    if profile.pay_prefix and is_ens_name(to):
        return f"{profile.pay_prefix}-"
    return ""


def serialize(
    tx: Transaction,
    contract: Optional[Any] = None,
    profile: UriProfile = FULL_PROFILE,
    strict: bool = True,
) -> str:
    """
    Build the request URI for a transaction.

    Args:
        tx: TransactionDescriptor or web3.py style transaction dict
        contract: ContractDescriptor, JSON ABI or contract handle used to
            render ``data`` as a function call
        profile: URI profile (default: FULL_PROFILE)
        strict: Raise DecodeError when ``data`` matches no function of
            ``contract``; False renders a plain transfer instead

    Returns:
        The request URI

    Raises:
        AddressError: If ``to`` is missing or invalid
        InvalidAmountError: If a numeric field is negative or not numeric
        DecodeError: If strict and the call data matches no function
    """
    if not isinstance(tx, TransactionDescriptor):
        tx = TransactionDescriptor.from_mapping(tx)

    to = normalize_target(tx.to)

    invocation = None
    if profile.function_path:
        invocation = decode_invocation(contract, tx.data, strict=strict)

    parameters = list(invocation.fragments) if invocation else []
    parameters.extend(serialize_parameters(tx, profile))

    url = f"{profile.scheme}:{get_transaction_prefix(to, profile)}{to}"
    if invocation:
        url += f"/{invocation.function_name}"
    if profile.chain_id_style is ChainIdStyle.PATH:
        url += serialize_chain_id_suffix(coerce_amount("chain_id", tx.chain_id))
    if parameters:
        url += "?" + "&".join(parameters)

    _logger.debug(
        "Serialized transaction request",
        extra={"to": to, "function": invocation.function_name if invocation else None},
    )
    return url
