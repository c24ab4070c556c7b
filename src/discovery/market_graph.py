"""Market Graph — неориентированный граф рынков.

Узлы — коды валют, рёбра — рынки. Граф хранится как adjacency mapping
code → tuple символов рынков; валюты и рынки не ссылаются друг на друга,
связь только через ключи.
"""

from typing import Dict, Iterator, List, Mapping, Tuple

from src.core.domain.currency import Currency
from src.core.domain.market import Market
from src.discovery.errors import MissingCurrencyError


class MarketGraph:
    """Adjacency view над снапшотом рынков и валют.

    Граф строится чтением коллекций снапшота; вызывающий обязан гарантировать,
    что коллекции не изменяются во время прохода поиска.
    """

    def __init__(self, markets: Mapping[str, Market], currencies: Mapping[str, Currency]):
        """
        Args:
            markets: symbol → Market
            currencies: code → Currency

        Raises:
            MissingCurrencyError: Если рынок ссылается на валюту вне currencies
        """
        self._markets: Dict[str, Market] = dict(markets)
        adjacency: Dict[str, List[str]] = {code: [] for code in currencies}

        for symbol, market in self._markets.items():
            for code in (market.base_currency, market.quote_currency):
                if code not in adjacency:
                    raise MissingCurrencyError(code, market_symbol=symbol)
                adjacency[code].append(symbol)

        self._adjacency: Dict[str, Tuple[str, ...]] = {
            code: tuple(sorted(symbols)) for code, symbols in adjacency.items()
        }

    @property
    def currencies(self) -> Tuple[str, ...]:
        """Коды валют графа в отсортированном порядке"""
        return tuple(sorted(self._adjacency))

    @property
    def market_count(self) -> int:
        return len(self._markets)

    def __contains__(self, currency: str) -> bool:
        return currency in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self.currencies)

    def market(self, symbol: str) -> Market:
        return self._markets[symbol]

    def incident_symbols(self, currency: str) -> Tuple[str, ...]:
        """
        Символы рынков, инцидентных валюте.

        Raises:
            MissingCurrencyError: Если валюта отсутствует в графе
        """
        try:
            return self._adjacency[currency]
        except KeyError:
            raise MissingCurrencyError(currency) from None

    def degree(self, currency: str) -> int:
        return len(self.incident_symbols(currency))
