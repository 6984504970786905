"""
web3-url - EIP-681 style transaction request URIs.

Builds ``ethereum:`` URIs that wallets open to pre-fill a transaction,
and wraps contracts so that calling an ABI method returns the URI
instead of sending the call.

Quick Start:
    >>> from web3_url import serialize, wrap
    >>>
    >>> serialize({"to": "cawfree.eth", "value": 10**18})
    'ethereum:pay-cawfree.eth?value=1e18'
    >>>
    >>> token = wrap(w3.eth.contract(address=USDC, abi=ERC20_ABI))
    >>> await token.transfer(recipient, 1_000_000)
    'ethereum:0x.../transfer?address=0x...&uint256=1000000'

Modules:
- `serialize`: URI assembly
- `wrap`: Contract wrapper and transaction populators
- `abi`: Call-data decoding
- `address`: Target validation and checksumming
- `number`: Exponential notation for wei amounts
- `config`: URI profiles
- `errors`: Exception hierarchy
"""

from web3_url.abi import (
    AbiFunction,
    ContractDescriptor,
    as_contract_descriptor,
    decode_invocation,
)
from web3_url.address import is_ens_name, normalize_target
from web3_url.config import FULL_PROFILE, LEGACY_PROFILE, ChainIdStyle, UriProfile
from web3_url.constants import ENS_SUFFIX, PREFIX_PAY, SCHEMA_LONG, SCHEMA_SHORT
from web3_url.errors import (
    AccessError,
    AddressError,
    DecodeError,
    InvalidAmountError,
    MissingAbiError,
    ValidationError,
    Web3UrlError,
)
from web3_url.models import Invocation, TransactionDescriptor
from web3_url.number import to_exponential
from web3_url.params import serialize_parameters
from web3_url.serialize import serialize
from web3_url.wrap import WrappedContract, offline_populator, web3_populator, wrap

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Encoding
    "serialize",
    "serialize_parameters",
    "to_exponential",
    "is_ens_name",
    "normalize_target",
    # ABI
    "AbiFunction",
    "ContractDescriptor",
    "as_contract_descriptor",
    "decode_invocation",
    # Wrapping
    "wrap",
    "WrappedContract",
    "offline_populator",
    "web3_populator",
    # Models
    "TransactionDescriptor",
    "Invocation",
    # Profiles
    "UriProfile",
    "ChainIdStyle",
    "FULL_PROFILE",
    "LEGACY_PROFILE",
    # Constants
    "SCHEMA_SHORT",
    "SCHEMA_LONG",
    "PREFIX_PAY",
    "ENS_SUFFIX",
    # Errors
    "Web3UrlError",
    "ValidationError",
    "AddressError",
    "InvalidAmountError",
    "DecodeError",
    "AccessError",
    "MissingAbiError",
]
