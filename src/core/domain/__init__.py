"""
Domain models and value objects.

Contains fundamental domain entities like Currency, Market, ChainNode, Chain.
"""

from src.core.domain.chain import (
    HASH_DELIMITER,
    MIN_CHAIN_LENGTH,
    Chain,
    ChainNode,
    walk_currencies,
)
from src.core.domain.currency import Currency
from src.core.domain.market import Market

__all__ = [
    # Chain module
    "HASH_DELIMITER",
    "MIN_CHAIN_LENGTH",
    "Chain",
    "ChainNode",
    "walk_currencies",
    # Currency model
    "Currency",
    # Market model
    "Market",
]
