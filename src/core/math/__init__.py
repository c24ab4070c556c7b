"""
Core math modules

Индексная арифметика на циклических последовательностях.
"""

from src.core.math.cyclic_index import (
    change_first_index,
    next_loopable_index,
    prev_loopable_index,
    reverse_index,
    reverse_loop,
)

__all__ = [
    "change_first_index",
    "next_loopable_index",
    "prev_loopable_index",
    "reverse_index",
    "reverse_loop",
]
