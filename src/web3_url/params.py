"""
Query parameter rendering for transaction fields.

Fields are rendered in a fixed order. Unset fields and fields equal to
zero are both omitted.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from web3_url.config import ChainIdStyle, UriProfile
from web3_url.constants import (
    PARAM_CHAIN_ID,
    PARAM_GAS_LIMIT,
    PARAM_GAS_PRICE,
    PARAM_MAX_FEE_PER_GAS,
    PARAM_MAX_PRIORITY_FEE_PER_GAS,
    PARAM_VALUE,
)
from web3_url.models import TransactionDescriptor, coerce_amount
from web3_url.number import to_exponential

__all__ = [
    "FIELD_PARAMS",
    "serialize_param",
    "serialize_parameters",
    "serialize_chain_id_suffix",
]

# (descriptor attribute, query key), in rendering order
FIELD_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("value", PARAM_VALUE),
    ("gas_price", PARAM_GAS_PRICE),
    ("gas_limit", PARAM_GAS_LIMIT),
    ("max_fee_per_gas", PARAM_MAX_FEE_PER_GAS),
    ("max_priority_fee_per_gas", PARAM_MAX_PRIORITY_FEE_PER_GAS),
)


def serialize_param(
    key: str,
    amount: Optional[int],
    render: Callable[[int], str] = to_exponential,
) -> str:
    """
    Render a single ``key=value`` fragment.

    Zero counts as unset: a genuine zero amount cannot be told apart from
    a missing one in the rendered URI.

    Returns:
        The fragment, or an empty string when amount is None or zero
    """
    if amount is None or amount == 0:
        return ""
    return f"{key}={render(amount)}"


def serialize_parameters(tx: TransactionDescriptor, profile: UriProfile) -> List[str]:
    """
    Render the numeric transaction fields as query fragments.

    Args:
        tx: Transaction whose target has already been resolved
        profile: Active URI profile; the query chain-id style appends chainId

    Returns:
        Non-empty fragments in rendering order
    """
    fragments = [
        serialize_param(key, coerce_amount(attr, getattr(tx, attr)))
        for attr, key in FIELD_PARAMS
    ]

    if profile.chain_id_style is ChainIdStyle.QUERY:
        chain_id = coerce_amount("chain_id", tx.chain_id)
        fragments.append(serialize_param(PARAM_CHAIN_ID, chain_id, render=str))

    return [fragment for fragment in fragments if fragment]


def serialize_chain_id_suffix(chain_id: Optional[int]) -> str:
    """Render ``@<chainId>`` for path-suffix profiles; zero is still rendered."""
    if chain_id is None:
        return ""
    return f"@{chain_id}"
