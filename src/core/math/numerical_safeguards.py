"""
Numerical Safeguards — float-сравнения и проверки размерностей

Модуль содержит примитивы, общие для всех матричных алгоритмов:
- Epsilon-параметры для сравнения float и детекции вырожденных pivot
- Проверка валидности float (NaN/Inf)
- Epsilon-сравнения с учётом машинной точности
- Валидация размерностей и индексов (с доменными исключениями)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Проверки индексов выполняются ДО обращения к буферу entries
2. NaN/Inf не санитизируются: IEEE-семантика пропагирует их естественно
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.errors import OutOfRange

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float (is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float (is_close, is_zero)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Порог вырожденного pivot в LU-разложении
# Если |pivot| <= EPS_PIVOT → det_lu возвращает 0.0
EPS_PIVOT: Final[float] = 1e-300


# =============================================================================
# FLOAT ПРОВЕРКИ И СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol"""
    return abs(value) <= tol


def entries_close(
    left: list[float],
    right: list[float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух последовательностей float.

    Returns:
        False если длины различаются или хотя бы одна пара не близка
    """
    if len(left) != len(right):
        return False
    return all(is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol) for a, b in zip(left, right))


# =============================================================================
# ВАЛИДАЦИЯ РАЗМЕРНОСТЕЙ И ИНДЕКСОВ
# =============================================================================


def validate_dimension(value: int, name: str) -> None:
    """
    Валидация размерности матрицы (m или n).

    Args:
        value: Проверяемая размерность
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        OutOfRange: Если value < 0
        TypeError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise OutOfRange(f"{name} must be non-negative, got {value}")


def validate_index(value: int, upper: int, name: str) -> None:
    """
    Валидация индекса: 0 <= value < upper.

    Args:
        value: Проверяемый индекс
        upper: Исключающая верхняя граница (m, n или m*n)
        name: Имя индекса (для сообщения об ошибке)

    Raises:
        OutOfRange: Если индекс вне [0, upper)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0 or value >= upper:
        raise OutOfRange(f"{name}={value} out of range [0, {upper})")
