"""
Тесты для Market Graph

Покрытие:
- Adjacency mapping валюта → рынки
- Изолированные валюты
- Ошибка целостности данных (неизвестная валюта)
"""

import pytest

from src.core.domain import Currency, Market
from src.discovery import MarketGraph, MissingCurrencyError


def make_market(symbol: str) -> Market:
    """Helper: рынок из символа 'BASE/QUOTE'."""
    base, quote = symbol.split("/")
    return Market(symbol=symbol, base_currency=base, quote_currency=quote)


def make_graph(symbols, codes):
    """Helper: граф из символов рынков и кодов валют."""
    markets = {symbol: make_market(symbol) for symbol in symbols}
    currencies = {code: Currency(code) for code in codes}
    return MarketGraph(markets, currencies)


@pytest.fixture
def graph():
    return make_graph(["XEM/BTC", "XEM/USD", "BTC/USD"], ["XEM", "BTC", "USD", "DOGE"])


class TestMarketGraph:
    """Тесты графа рынков."""

    def test_incident_symbols(self, graph):
        assert graph.incident_symbols("XEM") == ("XEM/BTC", "XEM/USD")
        assert graph.incident_symbols("BTC") == ("BTC/USD", "XEM/BTC")
        assert graph.incident_symbols("USD") == ("BTC/USD", "XEM/USD")

    def test_isolated_currency(self, graph):
        assert graph.incident_symbols("DOGE") == ()
        assert graph.degree("DOGE") == 0

    def test_currencies_sorted(self, graph):
        assert graph.currencies == ("BTC", "DOGE", "USD", "XEM")
        assert list(graph) == ["BTC", "DOGE", "USD", "XEM"]

    def test_contains(self, graph):
        assert "XEM" in graph
        assert "ETH" not in graph

    def test_market_lookup(self, graph):
        assert graph.market("XEM/BTC").base_currency == "XEM"
        assert graph.market_count == 3

    def test_unknown_currency_lookup(self, graph):
        with pytest.raises(MissingCurrencyError) as exc_info:
            graph.incident_symbols("ETH")
        assert exc_info.value.currency_code == "ETH"
        assert exc_info.value.market_symbol is None

    def test_market_with_unknown_currency(self):
        """Рынок ссылается на валюту вне снапшота → фатальная ошибка."""
        with pytest.raises(MissingCurrencyError) as exc_info:
            make_graph(["XEM/BTC", "ETH/BTC"], ["XEM", "BTC"])

        assert exc_info.value.currency_code == "ETH"
        assert exc_info.value.market_symbol == "ETH/BTC"
        assert "ETH/BTC" in str(exc_info.value)

    def test_missing_currency_is_key_error(self):
        with pytest.raises(KeyError):
            make_graph(["XEM/BTC"], ["XEM"])

    def test_source_mappings_not_retained(self):
        markets = {"XEM/BTC": make_market("XEM/BTC")}
        graph = MarketGraph(markets, {"XEM": Currency("XEM"), "BTC": Currency("BTC")})
        markets.clear()
        assert graph.market_count == 1
