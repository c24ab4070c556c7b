"""Quote-Currency Classifier — классификация quote валют биржи.

Двухпроходный фильтр по набору активных рынков:
1. all_quote_currencies — все валюты, встречающиеся как quote хотя бы в одном рынке
2. quote_currencies — подмножество, которое является quote хотя бы для одного
   рынка, чья base валюта сама НЕ входит в all_quote_currencies

Валюта, котирующаяся только против других quote валют (например, стейблкоин
с парами только к стейблкоинам), не считается якорем оценки.

Классификация — чистая функция набора рынков на момент прохода; она
пересчитывается на каждый проход и передаётся явно.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from src.core.domain.market import Market
from src.discovery.errors import MainQuoteCurrencyError

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class QuoteClassification:
    """Результат классификации quote валют."""

    all_quote_currencies: FrozenSet[str]
    quote_currencies: FrozenSet[str]

    def is_quote(self, currency: str) -> bool:
        return currency in self.quote_currencies

    def require(self, main_quote_currency: str) -> None:
        """
        Проверка наличия главной quote валюты.

        Raises:
            MainQuoteCurrencyError: Если main_quote_currency не является quote валютой
        """
        if main_quote_currency not in self.quote_currencies:
            raise MainQuoteCurrencyError(main_quote_currency, self.quote_currencies)


# =============================================================================
# CLASSIFIER
# =============================================================================


def classify_quote_currencies(
    markets: Iterable[Market],
    main_quote_currency: Optional[str] = None,
) -> QuoteClassification:
    """
    Двухпроходная классификация quote валют.

    Args:
        markets: Активные рынки биржи
        main_quote_currency: Если задана — обязана попасть в quote_currencies

    Returns:
        QuoteClassification

    Raises:
        MainQuoteCurrencyError: Если main_quote_currency задана и не является quote валютой
    """
    markets = list(markets)

    # Pass 1: все валюты, встречающиеся как quote
    all_quote = frozenset(market.quote_currency for market in markets)

    # Pass 2: исключаем валюты, которые котируют только другие quote валюты
    quote = frozenset(
        market.quote_currency
        for market in markets
        if market.base_currency not in all_quote
    )

    classification = QuoteClassification(
        all_quote_currencies=all_quote,
        quote_currencies=quote,
    )
    logger.debug(
        "Quote classification: %d quote-legged, %d anchors %s",
        len(all_quote),
        len(quote),
        sorted(quote),
    )

    if main_quote_currency is not None:
        classification.require(main_quote_currency)

    return classification
