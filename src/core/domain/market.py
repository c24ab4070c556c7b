"""
Market — Модель торговой пары биржи

Immutable Pydantic модель, представляющая рынок (currency pair) как ребро
графа рынков: каждый рынок соединяет ровно две валюты (base, quote).
"""

from typing import AbstractSet

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# MARKET MODEL
# =============================================================================


class Market(BaseModel):
    """
    Модель торговой пары.

    Immutable модель (frozen=True). Символ уникален в пределах биржи
    (например, 'XEM/BTC'), base и quote — коды валют.
    """

    symbol: str = Field(..., min_length=1, description="Символ рынка (например, 'XEM/BTC')")
    base_currency: str = Field(..., min_length=1, description="Код base валюты")
    quote_currency: str = Field(..., min_length=1, description="Код quote валюты")

    model_config = {"frozen": True}

    @field_validator("quote_currency")
    @classmethod
    def validate_distinct_legs(cls, v: str, info) -> str:
        """Проверка, что base и quote различаются (петля на одну валюту невозможна)"""
        if "base_currency" in info.data and info.data["base_currency"] == v:
            raise ValueError(f"quote_currency {v} must differ from base_currency")
        return v

    def opposite(self, currency: str) -> str:
        """
        Вторая валюта пары.

        Args:
            currency: Код одной из валют рынка

        Returns:
            Код другой валюты

        Raises:
            ValueError: Если currency не входит в рынок
        """
        if currency == self.base_currency:
            return self.quote_currency
        if currency == self.quote_currency:
            return self.base_currency
        raise ValueError(f"Currency {currency} is not part of market {self.symbol}")

    def has_currency(self, currency: str) -> bool:
        return currency == self.base_currency or currency == self.quote_currency

    def base_is_quote(self, quote_currencies: AbstractSet[str]) -> bool:
        """
        Является ли base валюта quote валютой.

        Классификация передаётся явно (результат classify_quote_currencies),
        рынок не хранит ссылку на биржу.
        """
        return self.base_currency in quote_currencies

    def shared_currency(self, other: "Market") -> str | None:
        """Общая валюта двух рынков (None если рынки не смежны)"""
        if other.has_currency(self.base_currency):
            return self.base_currency
        if other.has_currency(self.quote_currency):
            return self.quote_currency
        return None

    def __str__(self) -> str:
        return self.symbol
