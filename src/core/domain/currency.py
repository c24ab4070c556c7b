"""
Currency — Узел графа рынков

Валюта идентифицируется кодом и индексирует рынки, в которых она является
base валютой. Набор рынков заполняется загрузчиком снапшота биржи; для ядра
поиска цепочек валюта доступна только на чтение.
"""

from typing import Dict, Mapping

from src.core.domain.market import Market


class Currency:
    """Валюта биржи (например, 'BTC')."""

    def __init__(self, code: str):
        if not code:
            raise ValueError("Currency code cannot be empty")
        self._code = code
        self._markets: Dict[str, Market] = {}

    @property
    def code(self) -> str:
        return self._code

    @property
    def markets(self) -> Mapping[str, Market]:
        """Копия индекса symbol → Market (рынки, где валюта — base)"""
        return dict(self._markets)

    @property
    def market_count(self) -> int:
        return len(self._markets)

    def add_market(self, market: Market) -> None:
        """
        Индексация рынка, в котором валюта является base.

        Args:
            market: Рынок с base_currency == code

        Raises:
            ValueError: Если валюта не является base валютой рынка
        """
        if market.base_currency != self._code:
            raise ValueError(
                f"Market {market.symbol} has base {market.base_currency}, not {self._code}"
            )
        self._markets[market.symbol] = market

    def __repr__(self) -> str:
        return f"Currency(code={self._code!r}, markets={len(self._markets)})"
