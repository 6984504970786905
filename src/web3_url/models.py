"""Transaction models and wei amount coercion."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple, Union

from web3_url.errors import InvalidAmountError

__all__ = ["TransactionDescriptor", "Invocation", "coerce_amount"]

# Accepted spellings per field; web3.py TxParams calls the gas limit "gas".
_FIELD_ALIASES = {
    "to": ("to",),
    "value": ("value",),
    "gas_price": ("gas_price", "gasPrice"),
    "gas_limit": ("gas_limit", "gasLimit", "gas"),
    "max_fee_per_gas": ("max_fee_per_gas", "maxFeePerGas"),
    "max_priority_fee_per_gas": ("max_priority_fee_per_gas", "maxPriorityFeePerGas"),
    "chain_id": ("chain_id", "chainId"),
    "data": ("data", "input"),
}

Amount = Union[int, str]


@dataclass(frozen=True)
class TransactionDescriptor:
    """Transaction fields rendered into a request URI.

    Numeric fields are kept as given and coerced when rendered, so that an
    invalid target is always reported before an invalid amount.

    Attributes:
        to: Hex address or ENS name
        value: Amount in wei
        gas_price: Legacy gas price in wei
        gas_limit: Gas limit (rendered as ``gas``)
        max_fee_per_gas: EIP-1559 fee cap in wei
        max_priority_fee_per_gas: EIP-1559 tip in wei
        chain_id: Chain the transaction targets
        data: Hex-encoded call data
    """
    to: Any
    value: Optional[Amount] = None
    gas_price: Optional[Amount] = None
    gas_limit: Optional[Amount] = None
    max_fee_per_gas: Optional[Amount] = None
    max_priority_fee_per_gas: Optional[Amount] = None
    chain_id: Optional[Amount] = None
    data: Optional[Union[str, bytes]] = None

    @classmethod
    def from_mapping(cls, tx: Mapping[str, Any]) -> "TransactionDescriptor":
        """Build a descriptor from a web3.py style transaction dict.

        camelCase and snake_case keys are both accepted; unknown keys such
        as ``nonce`` or ``from`` are ignored.
        """
        kwargs = {}
        for name in (f.name for f in fields(cls)):
            for key in _FIELD_ALIASES[name]:
                if tx.get(key) is not None:
                    kwargs[name] = tx[key]
                    break
        kwargs.setdefault("to", None)
        return cls(**kwargs)


@dataclass(frozen=True)
class Invocation:
    """A decoded contract call: the function name and its query fragments."""
    function_name: str
    fragments: Tuple[str, ...]


def coerce_amount(field: str, value: Optional[Amount]) -> Optional[int]:
    """Coerce a wei field to int.

    Args:
        field: Field name for error messages
        value: int, decimal string or 0x-prefixed hex string

    Returns:
        The integer value, or None when unset

    Raises:
        InvalidAmountError: If value is negative or not numeric
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidAmountError(field, value, "must be an integer")
    if isinstance(value, str):
        text = value.strip()
        try:
            amount = int(text, 16) if text.lower().startswith("0x") else int(text, 10)
        except ValueError:
            raise InvalidAmountError(field, value, "must be a valid number")
    elif isinstance(value, int):
        amount = value
    else:
        raise InvalidAmountError(field, value, "must be an integer")

    if amount < 0:
        raise InvalidAmountError(field, value, "cannot be negative")
    return amount
