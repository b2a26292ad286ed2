"""
Random Matrix Generator

Источник случайности передаётся явно (random.Random), без глобального
состояния: при фиксированном seed генерация детерминирована.
"""

import random

from src.core.domain.matrix import Matrix
from src.demo.config import DEFAULT_ENTRY_HIGH, DEFAULT_ENTRY_LOW


def random_matrix(
    m: int,
    n: int,
    rng: random.Random,
    low: float = DEFAULT_ENTRY_LOW,
    high: float = DEFAULT_ENTRY_HIGH,
) -> Matrix:
    """
    Матрица m x n с элементами из равномерного распределения [low, high).

    Args:
        m: Количество строк
        n: Количество столбцов
        rng: Источник случайности
        low: Нижняя граница (включительно)
        high: Верхняя граница (исключительно)

    Returns:
        Новая Matrix

    Raises:
        ValueError: Если low >= high
        OutOfRange: Если m или n отрицательные
    """
    if not low < high:
        raise ValueError(f"low must be < high, got [{low}, {high})")

    mat = Matrix.new(m, n)
    for idx in range(m * n):
        mat.entries[idx] = low + (high - low) * rng.random()
    return mat
