"""Constants for web3-url.

URI scheme tokens, the human-readable intent prefix and the query keys
used when rendering transaction fields.
"""

# URI scheme tokens
SCHEMA_SHORT = "ethereum"
SCHEMA_LONG = "ethereum"

# Human-readable "pay to this name" intent
PREFIX_PAY = "pay"

# ENS names are only pattern-matched, never resolved
ENS_SUFFIX = ".eth"

# ABI Encoding Constants
ABI_SELECTOR_LENGTH = 4

# Query keys, in rendering order. gasLimit is abbreviated to gas.
PARAM_VALUE = "value"
PARAM_GAS_PRICE = "gasPrice"
PARAM_GAS_LIMIT = "gas"
PARAM_MAX_FEE_PER_GAS = "maxFeePerGas"
PARAM_MAX_PRIORITY_FEE_PER_GAS = "maxPriorityFeePerGas"
PARAM_CHAIN_ID = "chainId"

__all__ = [
    "SCHEMA_SHORT",
    "SCHEMA_LONG",
    "PREFIX_PAY",
    "ENS_SUFFIX",
    "ABI_SELECTOR_LENGTH",
    "PARAM_VALUE",
    "PARAM_GAS_PRICE",
    "PARAM_GAS_LIMIT",
    "PARAM_MAX_FEE_PER_GAS",
    "PARAM_MAX_PRIORITY_FEE_PER_GAS",
    "PARAM_CHAIN_ID",
]
