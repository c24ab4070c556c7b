"""ExchangeSnapshot — снапшот биржи и проход поиска цепочек.

Снапшот хранит рынки и валюты одной биржи (заполняются внешним загрузчиком
или из ccxt-совместимого payload) и выполняет один синхронный проход:

    классификация quote валют → проверка main quote валюты →
    граф рынков → перебор циклов → канонизация → дедупликация по hash

Классификация вычисляется на каждый проход и передаётся явно; снапшот не
должен изменяться во время прохода.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from src.core.contracts import validate_exchange_snapshot
from src.core.domain.chain import Chain
from src.core.domain.currency import Currency
from src.core.domain.market import Market
from src.discovery.canonicalizer import ChainCanonicalizer
from src.discovery.chain_builder import ChainBuilder
from src.discovery.config import DiscoveryConfig
from src.discovery.errors import MissingCurrencyError
from src.discovery.logging_utils import log_step
from src.discovery.market_graph import MarketGraph
from src.discovery.quote_classifier import QuoteClassification, classify_quote_currencies

logger = logging.getLogger(__name__)


class ExchangeSnapshot:
    """Рынки и валюты одной биржи на момент времени."""

    def __init__(
        self,
        markets: Mapping[str, Market],
        currencies: Mapping[str, Currency],
        name: Optional[str] = None,
    ):
        """
        Args:
            markets: symbol → Market (только активные рынки)
            currencies: code → Currency
            name: Имя биржи для логов
        """
        self.name = name or "exchange"
        self._markets: Dict[str, Market] = dict(markets)
        self._currencies: Dict[str, Currency] = dict(currencies)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ExchangeSnapshot":
        """
        Снапшот из ccxt-совместимого payload.

        Payload валидируется по contracts/schema/exchange_snapshot.json.
        Рынки с active=False пропускаются, каждый рынок индексируется в своей
        base валюте.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует схеме
            MissingCurrencyError: Если рынок ссылается на неизвестную валюту
        """
        validate_exchange_snapshot(payload)
        name = payload.get("exchange")

        with log_step(f"Storing currencies for {name or 'exchange'}") as step:
            currencies = {item["code"]: Currency(item["code"]) for item in payload["currencies"]}
            step.result = f"{len(currencies)} loaded"

        with log_step(f"Storing market pairs for {name or 'exchange'}") as step:
            markets: Dict[str, Market] = {}
            skipped = 0
            for item in payload["markets"]:
                if item.get("active") is False:
                    skipped += 1
                    continue
                market = Market(
                    symbol=item["symbol"],
                    base_currency=item["base"],
                    quote_currency=item["quote"],
                )
                base = currencies.get(market.base_currency)
                if base is None:
                    raise MissingCurrencyError(market.base_currency, market_symbol=market.symbol)
                if market.quote_currency not in currencies:
                    raise MissingCurrencyError(market.quote_currency, market_symbol=market.symbol)
                base.add_market(market)
                markets[market.symbol] = market
            step.result = f"{len(markets)} loaded, {skipped} inactive skipped"

        return cls(markets=markets, currencies=currencies, name=name)

    @property
    def markets(self) -> Dict[str, Market]:
        return dict(self._markets)

    @property
    def currencies(self) -> Dict[str, Currency]:
        return dict(self._currencies)

    def determine_quote_currencies(self) -> QuoteClassification:
        """Классификация quote валют по текущему набору рынков"""
        with log_step("Determining quote currencies") as step:
            classification = classify_quote_currencies(self._markets.values())
            step.result = f"{len(classification.quote_currencies)} detected"
        return classification

    def create_chains(self, config: DiscoveryConfig) -> Dict[str, Chain]:
        """
        Один проход поиска цепочек.

        Args:
            config: Конфигурация прохода

        Returns:
            hash → Chain

        Raises:
            MainQuoteCurrencyError: Если main_quote_currency не является quote валютой
            MissingCurrencyError: Если рынок ссылается на неизвестную валюту
            DiscoveryTimeout: Если превышен config.timeout_sec
        """
        classification = self.determine_quote_currencies()
        # Фатально до начала перебора
        classification.require(config.main_quote_currency)

        graph = MarketGraph(self._markets, self._currencies)
        builder = ChainBuilder(graph, ChainCanonicalizer(classification.quote_currencies))

        with log_step(f"Building chains for {self.name}") as step:
            chains = builder.create_chains(
                config.chain_lengths(), timeout_sec=config.timeout_sec
            )
            step.result = f"{len(chains)} generated"
        return chains
