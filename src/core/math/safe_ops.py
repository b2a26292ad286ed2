"""
Safe Ops — матричные операции с result-значением вместо исключения

Методы Matrix бросают DimensionMismatch / OutOfRange. Этот модуль
оборачивает их в MatrixOpResult, чтобы вызывающий код мог решить сам:
восстановиться или прервать выполнение.

    result = safe_add(a, b)
    if not result.ok:
        print(result.error_kind, result.details)

Модуль не реэкспортируется из src.core.math, так как зависит от
src.core.domain.matrix.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from src.core.errors import ErrorKind, MatrixError
from src.core.domain.matrix import Matrix

logger = logging.getLogger("densemat.safe_ops")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class MatrixOpResult:
    """Результат матричной операции: success-with-value или failure-with-kind."""

    ok: bool
    operation: str

    # Matrix для add/mul/matmul, float для det/det_lu
    value: Union[Matrix, float, None]

    # Диагностика при ошибке
    error_kind: Optional[ErrorKind]
    details: str

    def unwrap(self) -> Union[Matrix, float]:
        """
        Значение успешного результата.

        Raises:
            ValueError: Если операция завершилась ошибкой
        """
        if not self.ok:
            raise ValueError(f"{self.operation} failed ({self.error_kind}): {self.details}")
        return self.value


def _run(operation: str, fn: Callable[[], Union[Matrix, float]]) -> MatrixOpResult:
    try:
        value = fn()
    except MatrixError as e:
        logger.warning("%s failed: %s", operation, e)
        return MatrixOpResult(
            ok=False,
            operation=operation,
            value=None,
            error_kind=e.kind,
            details=str(e),
        )

    return MatrixOpResult(
        ok=True,
        operation=operation,
        value=value,
        error_kind=None,
        details="",
    )


# =============================================================================
# OPERATIONS
# =============================================================================


def safe_add(a: Matrix, b: Matrix) -> MatrixOpResult:
    return _run("add", lambda: a.add(b))


def safe_mul(a: Matrix, b: Matrix) -> MatrixOpResult:
    """Strict-произведение (см. Matrix.mul)"""
    return _run("mul", lambda: a.mul(b))


def safe_matmul(a: Matrix, b: Matrix) -> MatrixOpResult:
    """Произведение по обычному правилу (см. Matrix.matmul)"""
    return _run("matmul", lambda: a.matmul(b))


def safe_det(a: Matrix, method: str = "cofactor") -> MatrixOpResult:
    """
    Определитель с выбором алгоритма.

    Args:
        a: Матрица
        method: "cofactor" (Laplace expansion) или "lu"

    Raises:
        ValueError: Если method неизвестен (ошибка вызывающего кода,
            не размерности матрицы)
    """
    if method == "cofactor":
        return _run("det", a.det)
    if method == "lu":
        return _run("det_lu", a.det_lu)
    raise ValueError(f"Unknown determinant method: {method!r}")
