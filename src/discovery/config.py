"""
DiscoveryConfig — Конфигурация прохода поиска цепочек

Immutable Pydantic модель: якорная quote валюта и границы длины цепочек.
"""

from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.domain.chain import MIN_CHAIN_LENGTH


# =============================================================================
# CONSTANTS
# =============================================================================

# Верхняя граница длины цепочки (глубина рекурсии DFS)
MAX_CHAIN_LENGTH_LIMIT: Final[int] = 8

DEFAULT_CHAIN_LENGTH: Final[int] = 3


# =============================================================================
# CONFIG MODEL
# =============================================================================


class DiscoveryConfig(BaseModel):
    """
    Конфигурация поиска цепочек.

    Перебираются все длины в [min_chain_length, max_chain_length].
    """

    main_quote_currency: str = Field(
        ..., min_length=1, description="Главная quote валюта биржи (например, 'USDT')"
    )
    max_chain_length: int = Field(
        DEFAULT_CHAIN_LENGTH,
        ge=MIN_CHAIN_LENGTH,
        le=MAX_CHAIN_LENGTH_LIMIT,
        description="Максимальная длина цепочки (число рынков)",
    )
    min_chain_length: int = Field(
        MIN_CHAIN_LENGTH,
        ge=MIN_CHAIN_LENGTH,
        description="Минимальная длина цепочки (число рынков)",
    )
    timeout_sec: Optional[float] = Field(
        None, gt=0, description="Deadline прохода (секунды), None — без ограничения"
    )

    model_config = {"frozen": True}

    @field_validator("min_chain_length")
    @classmethod
    def validate_min_not_above_max(cls, v: int, info) -> int:
        """Проверка, что min_chain_length <= max_chain_length"""
        if "max_chain_length" in info.data:
            max_length = info.data["max_chain_length"]
            if v > max_length:
                raise ValueError(
                    f"min_chain_length {v} must be <= max_chain_length {max_length}"
                )
        return v

    def chain_lengths(self) -> range:
        """Все целевые длины цепочек для перебора"""
        return range(self.min_chain_length, self.max_chain_length + 1)
