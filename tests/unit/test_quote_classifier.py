"""
Тесты для Quote-Currency Classifier

Покрытие:
- Первый проход: все quote валюты
- Второй проход: исключение валют, котирующих только другие quote валюты
- Фатальная проверка main quote валюты
"""

import pytest

from src.core.domain import Market
from src.discovery import MainQuoteCurrencyError, QuoteClassification, classify_quote_currencies


def make_market(symbol: str) -> Market:
    """Helper: рынок из символа 'BASE/QUOTE'."""
    base, quote = symbol.split("/")
    return Market(symbol=symbol, base_currency=base, quote_currency=quote)


@pytest.fixture
def markets():
    """
    USDC котирует только USDT (quote → quote), поэтому не является якорем.
    """
    return [
        make_market("XEM/BTC"),
        make_market("XEM/USDT"),
        make_market("BTC/USDT"),
        make_market("ETH/BTC"),
        make_market("USDT/USDC"),
    ]


# =============================================================================
# ТЕСТЫ: Classification
# =============================================================================


class TestClassifyQuoteCurrencies:
    """Тесты двухпроходной классификации."""

    def test_first_pass(self, markets):
        result = classify_quote_currencies(markets)
        assert result.all_quote_currencies == frozenset({"BTC", "USDT", "USDC"})

    def test_second_pass_excludes_quote_only_anchors(self, markets):
        result = classify_quote_currencies(markets)
        assert result.quote_currencies == frozenset({"BTC", "USDT"})
        assert "USDC" not in result.quote_currencies

    def test_is_quote(self, markets):
        result = classify_quote_currencies(markets)
        assert result.is_quote("BTC") is True
        assert result.is_quote("XEM") is False
        assert result.is_quote("USDC") is False

    def test_quote_priced_only_against_quotes_excluded(self):
        """BTC котирует только USD-пары с quote base → BTC не якорь."""
        result = classify_quote_currencies(
            [make_market("USD/BTC"), make_market("BTC/USD"), make_market("XEM/USD")]
        )
        assert result.all_quote_currencies == frozenset({"BTC", "USD"})
        assert result.quote_currencies == frozenset({"USD"})

    def test_empty_markets(self):
        result = classify_quote_currencies([])
        assert result.all_quote_currencies == frozenset()
        assert result.quote_currencies == frozenset()

    def test_accepts_iterator(self, markets):
        result = classify_quote_currencies(iter(markets))
        assert result.quote_currencies == frozenset({"BTC", "USDT"})

    def test_deterministic(self, markets):
        assert classify_quote_currencies(markets) == classify_quote_currencies(
            list(reversed(markets))
        )


# =============================================================================
# ТЕСТЫ: Main quote currency
# =============================================================================


class TestMainQuoteCurrency:
    """Тесты фатальной проверки main quote валюты."""

    def test_present(self, markets):
        result = classify_quote_currencies(markets, main_quote_currency="USDT")
        assert result.is_quote("USDT")

    def test_absent_from_all_markets(self, markets):
        with pytest.raises(MainQuoteCurrencyError) as exc_info:
            classify_quote_currencies(markets, main_quote_currency="EUR")

        assert exc_info.value.main_quote_currency == "EUR"
        assert exc_info.value.quote_currencies == frozenset({"BTC", "USDT"})

    def test_filtered_out_by_second_pass(self, markets):
        """USDC есть в первом проходе, но отфильтрована → ошибка, без fallback."""
        with pytest.raises(MainQuoteCurrencyError, match="USDC"):
            classify_quote_currencies(markets, main_quote_currency="USDC")

    def test_require(self):
        classification = QuoteClassification(
            all_quote_currencies=frozenset({"BTC", "USD"}),
            quote_currencies=frozenset({"USD"}),
        )
        classification.require("USD")
        with pytest.raises(MainQuoteCurrencyError):
            classification.require("BTC")
