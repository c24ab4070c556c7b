"""Ошибки поиска цепочек.

Фатальные ошибки прерывают проход поиска целиком:
- MainQuoteCurrencyError — main quote валюта отсутствует после классификации
- MissingCurrencyError — рынок ссылается на неизвестную валюту (несогласованный снапшот)
- DiscoveryTimeout — превышен внешний deadline прохода

Тупиковая ветка DFS ошибкой не является и просто не даёт цикла.
"""

from typing import AbstractSet


class ChainDiscoveryError(Exception):
    """Базовая ошибка поиска цепочек."""
    pass


class MainQuoteCurrencyError(ChainDiscoveryError):
    """
    Конфигурационная ошибка: main_quote_currency не входит в quote_currencies.

    Без якорной валюты оценки поиск не выполняется (без silent fallback).
    """

    def __init__(self, main_quote_currency: str, quote_currencies: AbstractSet[str]):
        self.main_quote_currency = main_quote_currency
        self.quote_currencies = frozenset(quote_currencies)
        super().__init__(
            f"Main quote currency {main_quote_currency!r} is not a quote currency "
            f"(detected: {sorted(self.quote_currencies)})"
        )


class MissingCurrencyError(ChainDiscoveryError, KeyError):
    """
    Ошибка целостности данных: рынок ссылается на валюту, отсутствующую в
    наборе валют биржи.
    """

    def __init__(self, currency_code: str, market_symbol: str | None = None):
        self.currency_code = currency_code
        self.market_symbol = market_symbol
        if market_symbol is None:
            message = f"Currency {currency_code!r} is not known to the exchange"
        else:
            message = (
                f"Market {market_symbol!r} references unknown currency {currency_code!r}"
            )
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ оборачивает сообщение в кавычки
        return self.args[0]


class DiscoveryTimeout(ChainDiscoveryError):
    """Превышен deadline прохода поиска (проверяется между стартовыми валютами)."""

    def __init__(self, timeout_sec: float, chains_found: int):
        self.timeout_sec = timeout_sec
        self.chains_found = chains_found
        super().__init__(
            f"Chain discovery exceeded {timeout_sec:.3f}s ({chains_found} chains found so far)"
        )
