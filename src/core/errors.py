"""
Matrix Errors — таксономия ошибок матричных операций

Все ошибки размерностей и индексов проходят через этот модуль:
- DimensionMismatch: несовместимые формы операндов (add, mul, matmul, det)
- OutOfRange: индекс вне [0, m) / [0, n), sub_matrix на пустой матрице

Исключения наследуются от стандартных ValueError / IndexError, чтобы
вызывающий код мог ловить их как обычные ошибки Python.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Тип ошибки для result-значений (см. safe_ops)"""

    DIMENSION_MISMATCH = "dimension_mismatch"
    OUT_OF_RANGE = "out_of_range"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовая ошибка матричных операций."""

    kind: ErrorKind


class DimensionMismatch(MatrixError, ValueError):
    """
    Формы операндов несовместимы с операцией.

    Возникает:
    - add: m или n операндов различаются
    - mul: нарушено strict-соотношение self.m == other.n, self.n == other.m
    - matmul: self.n != other.m
    - det / det_lu: матрица не квадратная
    """

    kind = ErrorKind.DIMENSION_MISMATCH


class OutOfRange(MatrixError, IndexError):
    """
    Индекс вне допустимого диапазона.

    Возникает при обращении к (i, j) вне [0, m) x [0, n), при flat-индексе
    вне [0, m*n), при отрицательных размерах и при sub_matrix на матрице
    с нулевой размерностью.
    """

    kind = ErrorKind.OUT_OF_RANGE
