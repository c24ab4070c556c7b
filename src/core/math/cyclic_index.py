"""
Cyclic Index — Индексная арифметика на замкнутых последовательностях

Цикл рынков хранится как обычный список, но смежность в нём циклическая:
после последнего элемента идёт первый. Модуль содержит чистые функции для
навигации по такому списку, разворота и ротации.

ИНВАРИАНТЫ:
1. Ротация и разворот сохраняют циклическую смежность элементов
2. Все функции детерминированы и не мутируют входные данные
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _validate_index(index: int, length: int) -> None:
    if length <= 0:
        raise ValueError(f"length must be positive, got {length}")
    if not 0 <= index < length:
        raise ValueError(f"index must be in [0, {length}), got {index}")


# =============================================================================
# НАВИГАЦИЯ
# =============================================================================


def next_loopable_index(index: int, length: int) -> int:
    """
    Следующий индекс в цикле.

    Examples:
        >>> next_loopable_index(0, 3)
        1
        >>> next_loopable_index(2, 3)
        0
    """
    _validate_index(index, length)
    return (index + 1) % length


def prev_loopable_index(index: int, length: int) -> int:
    """
    Предыдущий индекс в цикле.

    Examples:
        >>> prev_loopable_index(1, 3)
        0
        >>> prev_loopable_index(0, 3)
        2
    """
    _validate_index(index, length)
    return (index - 1) % length


def reverse_index(index: int, length: int) -> int:
    """
    Позиция элемента после разворота последовательности.

    Examples:
        >>> reverse_index(0, 4)
        3
        >>> reverse_index(1, 3)
        1
    """
    _validate_index(index, length)
    return length - 1 - index


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def change_first_index(items: Sequence[T], first_index: int) -> List[T]:
    """
    Ротация: элемент first_index становится первым.

    Args:
        items: Циклическая последовательность
        first_index: Индекс нового первого элемента

    Returns:
        Новый список той же длины

    Examples:
        >>> change_first_index(["a", "b", "c"], 1)
        ['b', 'c', 'a']
    """
    _validate_index(first_index, len(items))
    return list(items[first_index:]) + list(items[:first_index])


def reverse_loop(items: Sequence[T], index: int) -> tuple[List[T], int]:
    """
    Разворот цикла с пересчётом отслеживаемого индекса.

    Returns:
        (развёрнутый список, новая позиция элемента index)
    """
    _validate_index(index, len(items))
    return list(reversed(items)), reverse_index(index, len(items))
