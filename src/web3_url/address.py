"""
Target address resolution.

A transaction target is either an ENS-style name, which is used verbatim,
or a hex address, which is rendered in its EIP-55 checksummed form.
"""

from __future__ import annotations

from typing import Any

from web3 import Web3

from web3_url.constants import ENS_SUFFIX
from web3_url.errors import AddressError

__all__ = ["is_ens_name", "normalize_target"]


def is_ens_name(identifier: Any) -> bool:
    """
    Check whether an identifier looks like an ENS name.

    Only the ``.eth`` suffix is matched; the name is never resolved.

    Args:
        identifier: Candidate target

    Returns:
        True if it ends in ``.eth`` with a non-empty label before it
    """
    return (
        isinstance(identifier, str)
        and identifier.endswith(ENS_SUFFIX)
        and len(identifier) > len(ENS_SUFFIX)
    )


def normalize_target(identifier: Any) -> str:
    """
    Validate and normalize a transaction target.

    Args:
        identifier: ENS name or hex address (``0x`` prefix optional)

    Returns:
        The ENS name unchanged, or the checksummed address

    Raises:
        AddressError: If identifier is missing, not a string, or invalid
    """
    if not isinstance(identifier, str) or not identifier.strip():
        raise AddressError(identifier)

    to = identifier.strip()

    if is_ens_name(to):
        return to

    if not Web3.is_address(to):
        raise AddressError(identifier)

    checksummed = Web3.to_checksum_address(to)

    # Mixed-case input must already carry a valid checksum.
    body = to[2:] if to[:2].lower() == "0x" else to
    if body not in (body.lower(), body.upper()) and body != checksummed[2:]:
        raise AddressError(identifier)

    return checksummed
