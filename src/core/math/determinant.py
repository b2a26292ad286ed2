"""
Determinant — вычисление определителя квадратной матрицы

Два явно разделённых алгоритма:

1. det_cofactor — Laplace (cofactor) expansion по строке 0:
       det(A) = Σ_col (-1)^col * A[0, col] * det(sub_matrix(0, col))
   Базовые случаи: m == 0 → 0.0, m == 1 → единственный элемент,
   m == 2 → a*d - b*c.
   Сложность O(n!): приемлемо только для малых матриц. Без pivoting.

2. det_lu — Gaussian elimination с partial pivoting и учётом знака
   перестановок. Сложность O(n³). Используется как независимая reference
   для cross-check и как быстрая альтернатива; НЕ заменяет det_cofactor.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба алгоритма требуют m == n, иначе DimensionMismatch
2. Исходная матрица не изменяется (det_lu работает на копии строк)
3. NaN/Inf пропагируют по IEEE-семантике
"""

import logging
from typing import TYPE_CHECKING

from src.core.errors import DimensionMismatch
from src.core.math.numerical_safeguards import EPS_PIVOT, is_zero

if TYPE_CHECKING:
    from src.core.domain.matrix import Matrix

logger = logging.getLogger("densemat.determinant")


def require_square(matrix: "Matrix", operation: str) -> None:
    """
    Проверка, что матрица квадратная.

    Raises:
        DimensionMismatch: Если m != n
    """
    if matrix.m != matrix.n:
        raise DimensionMismatch(
            f"{operation} requires a square matrix, got {matrix.m}x{matrix.n}"
        )


# =============================================================================
# COFACTOR EXPANSION
# =============================================================================


def det_cofactor(matrix: "Matrix") -> float:
    """
    Определитель через рекурсивное cofactor expansion по строке 0.

    Args:
        matrix: Квадратная матрица

    Returns:
        Определитель (float)

    Raises:
        DimensionMismatch: Если матрица не квадратная

    Examples:
        >>> det_cofactor(Matrix.from_rows([[1, 2], [3, 4]]))
        -2.0
    """
    require_square(matrix, "det")
    logger.debug("det: cofactor expansion, size=%d", matrix.m)
    return _cofactor(matrix)


def _cofactor(matrix: "Matrix") -> float:
    size = matrix.m
    entries = matrix.entries

    if size == 0:
        # Вырожденный терминал рекурсии
        return 0.0

    if size == 1:
        return entries[0]

    if size == 2:
        a, b, c, d = entries
        return a * d - b * c

    det = 0.0
    for col in range(size):
        entry = entries[matrix.get_index(0, col)]
        coef = -1.0 if col % 2 else 1.0
        det += coef * entry * _cofactor(matrix.sub_matrix(0, col))

    return det


# =============================================================================
# LU (GAUSSIAN ELIMINATION)
# =============================================================================


def det_lu(matrix: "Matrix") -> float:
    """
    Определитель через Gaussian elimination с partial pivoting.

    Алгоритм:
        1. Для каждого столбца k выбирается строка с max |a[r][k]|, r >= k
        2. Перестановка строк меняет знак определителя
        3. Элиминация ниже pivot
        4. det = sign * Π pivot_k

    Args:
        matrix: Квадратная матрица

    Returns:
        Определитель (float); 0.0 для вырожденной матрицы и для m == 0

    Raises:
        DimensionMismatch: Если матрица не квадратная
    """
    require_square(matrix, "det_lu")

    size = matrix.m
    if size == 0:
        return 0.0

    rows = [matrix.get_row_vec(i) for i in range(size)]
    sign = 1.0
    det = 1.0

    for k in range(size):
        pivot_row = max(range(k, size), key=lambda r: abs(rows[r][k]))
        pivot = rows[pivot_row][k]

        if is_zero(pivot, tol=EPS_PIVOT):
            logger.debug("det_lu: singular pivot at column %d (size=%d)", k, size)
            return 0.0

        if pivot_row != k:
            rows[k], rows[pivot_row] = rows[pivot_row], rows[k]
            sign = -sign

        det *= pivot
        for r in range(k + 1, size):
            factor = rows[r][k] / pivot
            if factor == 0.0:
                continue
            row_r = rows[r]
            row_k = rows[k]
            for c in range(k, size):
                row_r[c] -= factor * row_k[c]

    return sign * det
