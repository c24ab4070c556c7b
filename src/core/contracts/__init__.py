"""
Contract Validation Module

Модуль для валидации JSON контрактов входных данных.
"""

from .validators import (
    ContractValidator,
    ExchangeSnapshotValidator,
    SchemaLoader,
    validate_exchange_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ExchangeSnapshotValidator",
    # Functions
    "validate_exchange_snapshot",
]
