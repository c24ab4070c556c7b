"""Chain Canonicalizer — каноническая форма цикла рынков.

Один и тот же экономический цикл находится поиском многократно: с каждой
валюты цикла и в обоих направлениях. Канонизатор приводит любой сырой цикл к
единственной форме:

1. Приоритет рынков: рынок с base НЕ quote валютой выше рынка с quote base;
   при равенстве — лексикографически меньший symbol выше
2. Направление: если предшественник pivot рынка приоритетнее преемника —
   цикл разворачивается (обход идёт к более приоритетным рынкам)
3. Ротация: pivot рынок становится первым
4. Hash: последовательность пройденных валют через '/'

Функция канонизации чистая и идемпотентная.
"""

from typing import AbstractSet, List, Sequence, Union

from src.core.domain.chain import HASH_DELIMITER, Chain, ChainNode, walk_currencies
from src.core.domain.market import Market
from src.core.math.cyclic_index import (
    change_first_index,
    next_loopable_index,
    prev_loopable_index,
    reverse_loop,
)

RawCycle = Sequence[Union[Market, ChainNode]]


class ChainCanonicalizer:
    """Канонизатор циклов для фиксированной классификации quote валют."""

    def __init__(self, quote_currencies: AbstractSet[str]):
        """
        Args:
            quote_currencies: Результат классификации (QuoteClassification.quote_currencies)
        """
        self._quote_currencies = frozenset(quote_currencies)

    @property
    def quote_currencies(self) -> frozenset:
        return self._quote_currencies

    # -------------------------------------------------------------------------
    # Step 1: priority
    # -------------------------------------------------------------------------

    def priority_key(self, market: Market) -> tuple[bool, str]:
        """Ключ сортировки: (base является quote, symbol); меньше — приоритетнее"""
        return (market.base_is_quote(self._quote_currencies), market.symbol)

    def priority_order(self, markets: Sequence[Market]) -> List[str]:
        """
        Символы рынков цикла по убыванию приоритета.

        Returns:
            Символы; индекс в списке — ранг (0 — наивысший приоритет)
        """
        return [market.symbol for market in sorted(markets, key=self.priority_key)]

    # -------------------------------------------------------------------------
    # Step 2: direction
    # -------------------------------------------------------------------------

    def needs_reversal(self, markets: Sequence[Market], priority: Sequence[str]) -> bool:
        """
        Нужно ли развернуть цикл.

        Сравниваются ранги рынка после pivot и рынка перед pivot (циклически).
        Разворот, если предшественник строго приоритетнее преемника.
        Для цикла из 1-2 рынков соседи совпадают, разворот не нужен.
        """
        symbols = [market.symbol for market in markets]
        pivot = symbols.index(priority[0])
        next_index = next_loopable_index(pivot, len(symbols))
        prev_index = prev_loopable_index(pivot, len(symbols))
        if next_index == prev_index:
            return False

        # Меньший ранг = выше приоритет
        next_rank = priority.index(symbols[next_index])
        prev_rank = priority.index(symbols[prev_index])
        return prev_rank < next_rank

    # -------------------------------------------------------------------------
    # Step 3: rotation
    # -------------------------------------------------------------------------

    def canonical_order(self, markets: Sequence[Market]) -> List[Market]:
        """Рынки цикла в каноническом направлении, начиная с pivot рынка"""
        if not markets:
            raise ValueError("Cannot canonicalize an empty cycle")

        ordered = list(markets)
        priority = self.priority_order(ordered)
        pivot = [market.symbol for market in ordered].index(priority[0])

        if self.needs_reversal(ordered, priority):
            ordered, pivot = reverse_loop(ordered, pivot)

        return change_first_index(ordered, pivot)

    # -------------------------------------------------------------------------
    # Step 4: hash
    # -------------------------------------------------------------------------

    @staticmethod
    def chain_hash(markets: Sequence[Market]) -> str:
        """
        Hash цикла: пройденные валюты через HASH_DELIMITER.

        Raises:
            ValueError: Если рынки не образуют замкнутый цикл
        """
        return HASH_DELIMITER.join(walk_currencies(markets))

    def canonicalize(self, raw_cycle: RawCycle) -> Chain:
        """
        Каноническая Chain для сырого цикла.

        Args:
            raw_cycle: Рынки (или ChainNode) в порядке обнаружения

        Returns:
            Chain; циклы, отличающиеся ротацией или направлением, дают
            одинаковые markets и hash

        Raises:
            ValueError: Если цикл пуст или не замкнут
            pydantic.ValidationError: Если цикл короче MIN_CHAIN_LENGTH
        """
        markets = [
            item.market if isinstance(item, ChainNode) else item for item in raw_cycle
        ]
        ordered = self.canonical_order(markets)
        return Chain(markets=tuple(ordered), hash=self.chain_hash(ordered))
