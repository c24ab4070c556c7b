"""
Chain — Замкнутая цепочка рынков

ChainNode — шаг обхода графа при поиске циклов (рынок + валюта входа).
Chain — каноническое представление цикла: упорядоченные рынки и hash,
построенный из последовательности пройденных валют (например, 'XEM/USD/BTC').

Инвариант Chain: каждый рынок имеет общую валюту с предыдущим, последний
рынок замыкает цикл на валюту старта первого рынка.
"""

from dataclasses import dataclass
from typing import Final, List, Sequence

from pydantic import BaseModel, Field, field_validator

from src.core.domain.market import Market


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальная длина цепочки (треугольный арбитраж). Циклы из 1-2 рынков
# ("туда и обратно") не несут новой ценовой информации.
MIN_CHAIN_LENGTH: Final[int] = 3

# Разделитель кодов валют в hash цепочки
HASH_DELIMITER: Final[str] = "/"


# =============================================================================
# CURRENCY WALK
# =============================================================================


def walk_currencies(markets: Sequence[Market]) -> List[str]:
    """
    Последовательность валют при обходе цикла.

    Стартовая валюта — валюта первого рынка, не общая со вторым рынком.
    После каждого рынка записывается валюта, в которую перешёл обход;
    последняя записанная валюта совпадает со стартовой.

    Args:
        markets: Рынки цикла в порядке обхода

    Returns:
        Коды валют, по одному на рынок

    Raises:
        ValueError: Если рынки не образуют замкнутый цикл

    Examples:
        [XEM/BTC, XEM/USD, BTC/USD] → ['XEM', 'USD', 'BTC']
    """
    if len(markets) < 2:
        raise ValueError(f"A loop needs at least 2 markets, got {len(markets)}")

    shared = markets[0].shared_currency(markets[1])
    if shared is None:
        raise ValueError(
            f"Markets {markets[0].symbol} and {markets[1].symbol} share no currency"
        )

    start = markets[0].opposite(shared)
    current = start
    visited: List[str] = []
    for market in markets:
        if not market.has_currency(current):
            raise ValueError(f"Market {market.symbol} does not continue the loop at {current}")
        current = market.opposite(current)
        visited.append(current)

    if current != start:
        raise ValueError(
            f"Loop does not close: started at {start}, ended at {current}"
        )
    return visited


# =============================================================================
# CHAIN NODE
# =============================================================================


@dataclass(frozen=True)
class ChainNode:
    """Шаг обхода: рынок и валюта, из которой в него вошли."""

    market: Market
    entered_from: str

    @property
    def exited_to(self) -> str:
        return self.market.opposite(self.entered_from)


# =============================================================================
# CHAIN MODEL
# =============================================================================


class Chain(BaseModel):
    """
    Каноническая цепочка рынков.

    Immutable модель (frozen=True). Создаётся один раз канонизатором,
    hash используется как ключ дедупликации.
    """

    markets: tuple[Market, ...] = Field(
        ..., min_length=MIN_CHAIN_LENGTH, description="Рынки в каноническом порядке"
    )
    hash: str = Field(..., min_length=1, description="Последовательность валют через '/'")

    model_config = {"frozen": True}

    @field_validator("markets")
    @classmethod
    def validate_markets_unique(cls, v: tuple[Market, ...]) -> tuple[Market, ...]:
        """Проверка, что рынок не используется в цепочке дважды"""
        symbols = [market.symbol for market in v]
        if len(set(symbols)) != len(symbols):
            raise ValueError(f"Chain reuses a market: {symbols}")
        return v

    @field_validator("hash")
    @classmethod
    def validate_hash_matches_loop(cls, v: str, info) -> str:
        """Проверка замкнутости цикла и соответствия hash обходу валют"""
        if "markets" not in info.data:
            return v
        expected = HASH_DELIMITER.join(walk_currencies(info.data["markets"]))
        if v != expected:
            raise ValueError(f"hash {v!r} does not match loop currencies {expected!r}")
        return v

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(market.symbol for market in self.markets)

    @property
    def currencies(self) -> tuple[str, ...]:
        return tuple(self.hash.split(HASH_DELIMITER))

    @property
    def start_currency(self) -> str:
        """Валюта, с которой начинается и на которой замыкается обход"""
        return self.currencies[-1]

    def __len__(self) -> int:
        return len(self.markets)
