"""
Contract wrapper that builds request URIs instead of sending transactions.

Example:
    >>> token = w3.eth.contract(address=USDC, abi=ERC20_ABI)
    >>> wrapped = wrap(token)
    >>> await wrapped.transfer(recipient, 1_000_000)
    'ethereum:0x.../transfer?address=0x...&uint256=1000000'
"""

from __future__ import annotations

import inspect
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from web3_url.abi import ContractDescriptor, as_contract_descriptor
from web3_url.config import FULL_PROFILE, UriProfile
from web3_url.errors import AccessError, MissingAbiError
from web3_url.models import TransactionDescriptor
from web3_url.serialize import serialize
from web3_url.utils.logging import get_logger

__all__ = [
    "PopulateTransaction",
    "WrappedContract",
    "wrap",
    "offline_populator",
    "web3_populator",
]

_logger = get_logger(__name__)

PopulateTransaction = Callable[
    [str, Sequence[Any]],
    Awaitable[Union[TransactionDescriptor, Mapping[str, Any]]],
]


def _split_overrides(
    descriptor: ContractDescriptor, name: str, args: Sequence[Any]
) -> Tuple[List[Any], Dict[str, Any]]:
    """Separate a trailing transaction-overrides dict from the call arguments."""
    args = list(args)
    if (
        args
        and isinstance(args[-1], Mapping)
        and descriptor.get_function(name, arity=len(args)) is None
    ):
        return args[:-1], dict(args[-1])
    return args, {}


def offline_populator(contract: Any) -> PopulateTransaction:
    """
    Populate transactions without a node.

    Call data is ABI-encoded locally and the transaction targets
    ``contract.address``. A trailing dict argument holds overrides such as
    ``value`` or ``gas``.
    """
    descriptor = as_contract_descriptor(contract)
    address = getattr(contract, "address", None)

    async def populate(name: str, args: Sequence[Any]) -> Dict[str, Any]:
        call_args, overrides = _split_overrides(descriptor, name, args)
        return {
            **overrides,
            "to": address,
            "data": descriptor.encode(name, call_args),
        }

    return populate


def web3_populator(contract: Any) -> PopulateTransaction:
    """
    Populate transactions through web3.py's ``build_transaction``.

    Works with both ``Contract`` and ``AsyncContract``; nonce, gas and fee
    fields come from the contract's provider.
    """
    descriptor = as_contract_descriptor(contract)

    async def populate(name: str, args: Sequence[Any]) -> Mapping[str, Any]:
        call_args, overrides = _split_overrides(descriptor, name, args)
        built = contract.functions[name](*call_args).build_transaction(overrides)
        if inspect.isawaitable(built):
            built = await built
        return built

    return populate


class WrappedContract:
    """
    Contract handle whose ABI methods resolve to request URIs.

    The dispatch table is built once from the contract ABI. Other members
    are read from the wrapped handle: plain values pass through, callables
    raise MissingAbiError in strict mode and pass through otherwise.
    """

    def __init__(
        self,
        contract: Any,
        populate_transaction: Optional[PopulateTransaction] = None,
        profile: UriProfile = FULL_PROFILE,
        strict: bool = True,
        decode_strict: bool = True,
    ) -> None:
        self._contract = contract
        self._descriptor = as_contract_descriptor(contract)
        self._populate = populate_transaction or offline_populator(contract)
        self._profile = profile
        self._strict = strict
        self._decode_strict = decode_strict
        self._methods: Dict[str, Callable[..., Awaitable[str]]] = {
            name: self._make_method(name) for name in self._descriptor.function_names
        }

    def _make_method(self, name: str) -> Callable[..., Awaitable[str]]:
        async def method(*args: Any) -> str:
            _logger.debug("Building request URI", extra={"method": name})
            tx = await self._populate(name, args)
            return serialize(
                tx,
                contract=self._descriptor,
                profile=self._profile,
                strict=self._decode_strict,
            )

        method.__name__ = name
        method.__qualname__ = f"{type(self).__name__}.{name}"
        return method

    def _resolve(self, name: str) -> Any:
        if name in self._methods:
            return self._methods[name]

        ref = getattr(self._contract, name)
        if not callable(ref):
            return ref
        if self._strict:
            raise MissingAbiError(name)
        return ref

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not set in __init__.
        if name.startswith("__") or name in (
            "_contract", "_descriptor", "_populate", "_profile",
            "_strict", "_decode_strict", "_methods",
        ):
            raise AttributeError(name)
        return self._resolve(name)

    def __getitem__(self, key: Any) -> Any:
        if not isinstance(key, str):
            raise AccessError(
                f'Unable to access property "{key!r}".',
                details={"key": repr(key)},
            )
        return self._resolve(key)

    def __dir__(self) -> List[str]:
        return sorted(set(dir(self._contract)) | set(self._methods))

    def __repr__(self) -> str:
        return f"WrappedContract({self._contract!r})"


def wrap(
    contract: Any,
    *,
    populate_transaction: Optional[PopulateTransaction] = None,
    profile: UriProfile = FULL_PROFILE,
    strict: bool = True,
    decode_strict: bool = True,
) -> WrappedContract:
    """
    Wrap a contract so that calling its ABI methods returns request URIs.

    Args:
        contract: Handle exposing ``.abi`` and ``.address`` (e.g. a web3.py Contract)
        populate_transaction: Async ``(method_name, args) -> transaction``;
            defaults to offline_populator(contract)
        profile: URI profile used for every call
        strict: Raise MissingAbiError for callables that are not ABI
            functions; False passes them through (legacy behaviour)
        decode_strict: Forwarded to serialize() as ``strict``

    Returns:
        WrappedContract
    """
    wrapped = WrappedContract(
        contract,
        populate_transaction=populate_transaction,
        profile=profile,
        strict=strict,
        decode_strict=decode_strict,
    )
    _logger.debug(
        "Wrapped contract",
        extra={"functions": len(wrapped._methods), "strict": strict},
    )
    return wrapped
