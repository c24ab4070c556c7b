"""
Тесты для DiscoveryConfig

Покрытие:
- Значения по умолчанию
- Границы длины цепочки
- Перебираемые длины
"""

import pytest
from pydantic import ValidationError

from src.discovery import DiscoveryConfig
from src.discovery.config import MAX_CHAIN_LENGTH_LIMIT


class TestDiscoveryConfig:
    """Тесты конфигурации прохода поиска."""

    def test_defaults(self):
        config = DiscoveryConfig(main_quote_currency="USDT")
        assert config.max_chain_length == 3
        assert config.min_chain_length == 3
        assert config.timeout_sec is None
        assert list(config.chain_lengths()) == [3]

    def test_chain_lengths_range(self):
        config = DiscoveryConfig(main_quote_currency="USDT", max_chain_length=5)
        assert list(config.chain_lengths()) == [3, 4, 5]

    def test_custom_min(self):
        config = DiscoveryConfig(
            main_quote_currency="USDT", max_chain_length=5, min_chain_length=4
        )
        assert list(config.chain_lengths()) == [4, 5]

    def test_main_quote_required(self):
        with pytest.raises(ValidationError):
            DiscoveryConfig()

    def test_empty_main_quote(self):
        with pytest.raises(ValidationError):
            DiscoveryConfig(main_quote_currency="")

    @pytest.mark.parametrize("length", [0, 1, 2])
    def test_degenerate_max_length_rejected(self, length):
        with pytest.raises(ValidationError):
            DiscoveryConfig(main_quote_currency="USDT", max_chain_length=length)

    def test_max_length_limit(self):
        DiscoveryConfig(main_quote_currency="USDT", max_chain_length=MAX_CHAIN_LENGTH_LIMIT)
        with pytest.raises(ValidationError):
            DiscoveryConfig(main_quote_currency="USDT", max_chain_length=MAX_CHAIN_LENGTH_LIMIT + 1)

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError, match="must be <="):
            DiscoveryConfig(main_quote_currency="USDT", max_chain_length=3, min_chain_length=4)

    def test_degenerate_min_length_rejected(self):
        with pytest.raises(ValidationError):
            DiscoveryConfig(main_quote_currency="USDT", min_chain_length=2)

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            DiscoveryConfig(main_quote_currency="USDT", timeout_sec=0)

    def test_frozen(self):
        config = DiscoveryConfig(main_quote_currency="USDT")
        with pytest.raises(ValidationError):
            config.max_chain_length = 4
