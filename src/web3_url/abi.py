"""
ABI-driven call decoding.

Turns a call-data payload into the function name and the ``type=value``
query fragments rendered after ``/<functionName>`` in a request URI.

Example:
    >>> descriptor = ContractDescriptor.from_abi(ERC20_ABI)
    >>> invocation = decode_invocation(descriptor, data)
    >>> invocation.function_name, invocation.fragments
    ('transfer', ('address=0x...', 'uint256=1000'))
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError, EncodingError
from eth_utils import (
    decode_hex,
    encode_hex,
    function_signature_to_4byte_selector,
    to_checksum_address,
)
from eth_utils.abi import collapse_if_tuple

from web3_url.constants import ABI_SELECTOR_LENGTH
from web3_url.errors import DecodeError
from web3_url.models import Invocation
from web3_url.utils.logging import get_logger

__all__ = [
    "AbiFunction",
    "ContractDescriptor",
    "as_contract_descriptor",
    "parse_call_data",
    "render_argument",
    "decode_invocation",
]

_logger = get_logger(__name__)

_HEX_PATTERN = re.compile(r"^(0[xX])?[0-9a-fA-F]*$")


@dataclass(frozen=True)
class AbiFunction:
    """A single ``function`` entry of a contract ABI.

    Attributes:
        name: Function name
        inputs: Raw ABI input entries, in declaration order
        types: Canonical parameter type tags (tuples collapsed)
        selector: 4-byte selector
    """
    name: str
    inputs: Tuple[Mapping[str, Any], ...]
    types: Tuple[str, ...]
    selector: bytes

    @classmethod
    def from_abi_entry(cls, entry: Mapping[str, Any]) -> "AbiFunction":
        inputs = tuple(entry.get("inputs", ()))
        types = tuple(collapse_if_tuple(dict(param)) for param in inputs)
        signature = f"{entry['name']}({','.join(types)})"
        return cls(
            name=entry["name"],
            inputs=inputs,
            types=types,
            selector=function_signature_to_4byte_selector(signature),
        )

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.types)})"


@dataclass(frozen=True)
class ContractDescriptor:
    """Read-only view of a contract's callable functions.

    Overloaded functions appear once per signature; name lookups return the
    first declaration.
    """
    functions: Tuple[AbiFunction, ...]

    @classmethod
    def from_abi(cls, abi: Union[str, Sequence[Mapping[str, Any]]]) -> "ContractDescriptor":
        """Build a descriptor from a JSON ABI (list of entries or JSON text)."""
        if isinstance(abi, str):
            abi = json.loads(abi)
        return cls(
            functions=tuple(
                AbiFunction.from_abi_entry(entry)
                for entry in abi
                if entry.get("type", "function") == "function"
            )
        )

    @property
    def function_names(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(fn.name for fn in self.functions))

    @property
    def function_types(self) -> Dict[str, Tuple[str, ...]]:
        """Map each function name to its ordered parameter type tags."""
        types: Dict[str, Tuple[str, ...]] = {}
        for fn in self.functions:
            types.setdefault(fn.name, fn.types)
        return types

    def has_function(self, name: str) -> bool:
        return any(fn.name == name for fn in self.functions)

    def get_function(self, name: str, arity: Optional[int] = None) -> Optional[AbiFunction]:
        """Find a function by name, optionally narrowing overloads by argument count."""
        for fn in self.functions:
            if fn.name == name and (arity is None or len(fn.types) == arity):
                return fn
        return None

    def get_function_by_selector(self, selector: bytes) -> Optional[AbiFunction]:
        for fn in self.functions:
            if fn.selector == selector:
                return fn
        return None

    def decode(self, payload: bytes) -> Tuple[AbiFunction, Tuple[Any, ...]]:
        """
        Decode call data into the matched function and its arguments.

        Args:
            payload: Raw call data, selector included

        Returns:
            Tuple of (function, ordered argument values)

        Raises:
            DecodeError: If the selector is unknown or the arguments do not decode
        """
        selector = payload[:ABI_SELECTOR_LENGTH]
        fn = self.get_function_by_selector(selector)
        if fn is None:
            raise DecodeError(
                f"No function matches selector {encode_hex(selector)}.",
                selector=encode_hex(selector),
            )
        try:
            values = decode(list(fn.types), payload[ABI_SELECTOR_LENGTH:])
        except (DecodingError, UnicodeDecodeError) as e:
            raise DecodeError(
                f"Unable to decode arguments of {fn.signature}: {e}",
                selector=encode_hex(selector),
            ) from e
        return fn, tuple(values)

    def encode(self, name: str, args: Sequence[Any]) -> str:
        """
        Encode a call to ``name`` with the given arguments.

        Returns:
            0x-prefixed call data

        Raises:
            DecodeError: If no function matches name and argument count,
                or the arguments do not fit the declared types
        """
        fn = self.get_function(name, arity=len(args))
        if fn is None:
            raise DecodeError(f"No function {name} accepts {len(args)} argument(s).")
        try:
            return encode_hex(fn.selector + encode(list(fn.types), list(args)))
        except EncodingError as e:
            raise DecodeError(f"Unable to encode arguments of {fn.signature}: {e}") from e


def as_contract_descriptor(contract: Any) -> ContractDescriptor:
    """
    Read a ContractDescriptor from a descriptor, a JSON ABI, or any handle
    exposing ``.abi`` (a web3.py Contract, for instance).

    Raises:
        TypeError: If no ABI can be found
    """
    if isinstance(contract, ContractDescriptor):
        return contract
    if isinstance(contract, (str, list, tuple)):
        return ContractDescriptor.from_abi(contract)
    abi = getattr(contract, "abi", None)
    if abi is None:
        raise TypeError(f"Expected a contract with an ABI, got {type(contract).__name__}")
    return ContractDescriptor.from_abi(abi)


def parse_call_data(data: Union[str, bytes, None]) -> Optional[bytes]:
    """
    Parse a call-data payload.

    Returns:
        The payload bytes, or None if data is not a hex payload carrying
        at least a selector
    """
    if isinstance(data, (bytes, bytearray)):
        payload = bytes(data)
    elif isinstance(data, str) and _HEX_PATTERN.match(data):
        if len(data) % 2:
            return None
        payload = decode_hex(data)
    else:
        return None

    if len(payload) < ABI_SELECTOR_LENGTH:
        return None
    return payload


def render_argument(param: Mapping[str, Any], value: Any) -> str:
    """
    Render a decoded argument in its canonical string form.

    Booleans render as ``1``/``0``, addresses checksummed, integers in
    base 10, bytes as 0x-hex, arrays and tuples as comma-joined elements.
    """
    abi_type = param["type"]

    if abi_type.endswith("]"):
        element = dict(param, type=abi_type[: abi_type.rindex("[")])
        return ",".join(render_argument(element, item) for item in value)
    if abi_type == "tuple":
        components = param.get("components", ())
        return "(" + ",".join(
            render_argument(component, item) for component, item in zip(components, value)
        ) + ")"
    if abi_type == "bool":
        return "1" if value else "0"
    if abi_type == "address":
        return to_checksum_address(value)
    if isinstance(value, (bytes, bytearray)):
        return encode_hex(value)
    return str(value)


def decode_invocation(
    contract: Any,
    data: Union[str, bytes, None],
    strict: bool = True,
) -> Optional[Invocation]:
    """
    Decode the function call a transaction carries.

    Args:
        contract: ContractDescriptor, JSON ABI or contract handle; None for
            plain transfers
        data: Call data
        strict: Raise on payloads no function matches (default). With
            False the failure is logged and treated as a plain transfer.

    Returns:
        Invocation, or None when there is no contract, no data, or the
        data is not a call payload

    Raises:
        DecodeError: If strict and the payload matches no function
    """
    if contract is None or data is None:
        return None

    payload = parse_call_data(data)
    if payload is None:
        _logger.debug("Ignoring malformed call data", extra={"data": str(data)[:10]})
        return None

    descriptor = as_contract_descriptor(contract)
    try:
        fn, values = descriptor.decode(payload)
    except DecodeError as e:
        if strict:
            raise
        _logger.warning(
            "Call data does not match the contract ABI, rendering a plain transfer",
            extra={"selector": e.selector},
        )
        return None

    fragments: List[str] = [
        f"{param_type}={render_argument(param, value)}"
        for param_type, param, value in zip(fn.types, fn.inputs, values)
    ]
    return Invocation(function_name=fn.name, fragments=tuple(fragments))
