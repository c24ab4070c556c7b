"""Chain Builder — перебор простых циклов графа рынков.

Depth-bounded DFS от стартовой валюты:
- путь — упорядоченные рынки, рынок не используется в пути повторно
- промежуточные валюты не повторяются, возврат к старту раньше целевой
  глубины запрещён
- при max_depth - 1 использованных рынках кандидаты — только рынки,
  ведущие обратно в стартовую валюту; если таких нет, ветка тупиковая
- цикл выдаётся только при замыкании ровно на целевой глубине

Избыточность (один цикл с каждой валюты и в обоих направлениях) не
отсекается поиском и снимается канонизацией.
"""

import logging
import time
from typing import Dict, Iterable, List, Optional, Set, Tuple

from src.core.domain.chain import MIN_CHAIN_LENGTH, Chain, ChainNode
from src.discovery.canonicalizer import ChainCanonicalizer
from src.discovery.errors import DiscoveryTimeout, MissingCurrencyError
from src.discovery.market_graph import MarketGraph

logger = logging.getLogger(__name__)

RawChain = Tuple[ChainNode, ...]


class ChainBuilder:
    """Поиск циклов и сборка канонических цепочек по графу рынков."""

    def __init__(self, graph: MarketGraph, canonicalizer: ChainCanonicalizer):
        self._graph = graph
        self._canonicalizer = canonicalizer

    def enumerate(self, start_currency: str, max_depth: int) -> List[RawChain]:
        """
        Все циклы длины ровно max_depth, начинающиеся и заканчивающиеся в start_currency.

        Args:
            start_currency: Код стартовой валюты
            max_depth: Целевое число рынков в цикле

        Returns:
            Сырые циклы (ChainNode в порядке обхода); пустой список, если
            замкнуть цикл нельзя

        Raises:
            MissingCurrencyError: Если стартовая валюта отсутствует в графе
        """
        if start_currency not in self._graph:
            raise MissingCurrencyError(start_currency)

        if max_depth < MIN_CHAIN_LENGTH:
            logger.debug(
                "Skipping depth %d for %s: below minimum chain length %d",
                max_depth,
                start_currency,
                MIN_CHAIN_LENGTH,
            )
            return []

        cycles: List[RawChain] = []
        self._extend(
            start=start_currency,
            current=start_currency,
            path=[],
            visited={start_currency},
            max_depth=max_depth,
            cycles=cycles,
        )
        return cycles

    def _extend(
        self,
        start: str,
        current: str,
        path: List[ChainNode],
        visited: Set[str],
        max_depth: int,
        cycles: List[RawChain],
    ) -> None:
        used = {node.market.symbol for node in path}
        closing = len(path) == max_depth - 1

        for symbol in self._graph.incident_symbols(current):
            if symbol in used:
                continue

            market = self._graph.market(symbol)
            node = ChainNode(market=market, entered_from=current)
            reached = node.exited_to

            if closing:
                # Последний шаг: только рынки обратно в стартовую валюту
                if reached == start:
                    cycles.append(tuple(path) + (node,))
                continue

            if reached in visited:
                continue

            path.append(node)
            visited.add(reached)
            self._extend(start, reached, path, visited, max_depth, cycles)
            visited.remove(reached)
            path.pop()

    def create_chains(
        self,
        lengths: Iterable[int],
        timeout_sec: Optional[float] = None,
    ) -> Dict[str, Chain]:
        """
        Канонические цепочки всех заданных длин со всех стартовых валют.

        Args:
            lengths: Целевые длины цепочек
            timeout_sec: Deadline прохода; проверяется между стартовыми валютами

        Returns:
            hash → Chain без дубликатов

        Raises:
            DiscoveryTimeout: Если deadline превышен
        """
        deadline = None if timeout_sec is None else time.monotonic() + timeout_sec
        chains: Dict[str, Chain] = {}

        for length in lengths:
            raw_count = 0
            for currency in self._graph.currencies:
                if deadline is not None and time.monotonic() > deadline:
                    raise DiscoveryTimeout(timeout_sec, len(chains))

                for raw in self.enumerate(currency, length):
                    raw_count += 1
                    chain = self._canonicalizer.canonicalize(raw)
                    chains.setdefault(chain.hash, chain)

            logger.debug("Length %d: %d raw cycles", length, raw_count)

        return chains
