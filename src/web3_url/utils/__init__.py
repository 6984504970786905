"""
web3-url utilities.
"""

from web3_url.utils.logging import configure_logging, get_logger, set_level

__all__ = [
    "get_logger",
    "configure_logging",
    "set_level",
]
