"""
URI profiles.

Two schemes exist side by side: the minimal legacy scheme and the full
scheme with pay prefix, function path and path-suffix chain id.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from web3_url.constants import PREFIX_PAY, SCHEMA_LONG, SCHEMA_SHORT

__all__ = ["ChainIdStyle", "UriProfile", "FULL_PROFILE", "LEGACY_PROFILE"]


class ChainIdStyle(str, Enum):
    PATH = "path"
    QUERY = "query"


class UriProfile(BaseModel):
    """
    Rendering rules for a request URI.

    Example:
        ```python
        profile = UriProfile(chain_id_style=ChainIdStyle.QUERY)
        serialize(tx, profile=profile)
        ```
    """

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(
        default=SCHEMA_LONG,
        min_length=1,
        description="URI scheme token",
    )
    pay_prefix: Optional[str] = Field(
        default=PREFIX_PAY,
        description="Prefix placed before ENS targets; None disables it",
    )
    function_path: bool = Field(
        default=True,
        description="Decode call data and render /<functionName> with ABI arguments",
    )
    chain_id_style: ChainIdStyle = Field(
        default=ChainIdStyle.PATH,
        description="Render the chain id as @<id> or as a chainId query parameter",
    )


FULL_PROFILE = UriProfile()

LEGACY_PROFILE = UriProfile(
    scheme=SCHEMA_SHORT,
    pay_prefix=None,
    function_path=False,
    chain_id_style=ChainIdStyle.QUERY,
)
