"""Chain discovery — поиск и канонизация замкнутых торговых цепочек.

Компоненты:
- Quote-Currency Classifier (двухпроходная классификация quote валют)
- Market Graph (adjacency mapping валюта → рынки)
- Chain Builder (depth-bounded перебор простых циклов)
- Chain Canonicalizer (приоритет, направление, ротация, hash)
"""

from .canonicalizer import ChainCanonicalizer
from .chain_builder import ChainBuilder
from .config import DiscoveryConfig
from .errors import (
    ChainDiscoveryError,
    DiscoveryTimeout,
    MainQuoteCurrencyError,
    MissingCurrencyError,
)
from .exchange import ExchangeSnapshot
from .market_graph import MarketGraph
from .quote_classifier import QuoteClassification, classify_quote_currencies

__all__ = [
    "ChainCanonicalizer",
    "ChainBuilder",
    "DiscoveryConfig",
    "ChainDiscoveryError",
    "DiscoveryTimeout",
    "MainQuoteCurrencyError",
    "MissingCurrencyError",
    "ExchangeSnapshot",
    "MarketGraph",
    "QuoteClassification",
    "classify_quote_currencies",
]
