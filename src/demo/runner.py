"""
Demo Runner — генерация, печать и вычисления над случайными матрицами

Вывод (stdout):
    <матрица A>
    <пустая строка>
    det(mat) = <значение>

В extended-режиме дополнительно:
    <матрица B>, сумма A + B и произведение mul(A, B).

Ошибки размерностей не прерывают запуск: операции выполняются через
safe_ops, а причина отказа печатается вместо результата.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, TextIO

from src.core.domain.matrix import Matrix
from src.core.math.numerical_safeguards import is_close, is_valid_float
from src.core.math.rendering import format_entry
from src.core.math.safe_ops import MatrixOpResult, safe_add, safe_det, safe_mul
from src.demo.config import DET_CROSS_CHECK_ABS_TOL, DET_CROSS_CHECK_REL_TOL, DemoConfig
from src.demo.generator import random_matrix

logger = logging.getLogger("densemat.demo")


@dataclass(frozen=True)
class DemoReport:
    """Результаты одного запуска драйвера."""

    first: Matrix
    det: MatrixOpResult

    # det_lu для сверки, если det вычислен cofactor expansion
    det_reference: Optional[float] = None

    # Только в extended-режиме
    second: Optional[Matrix] = None
    sum: Optional[MatrixOpResult] = None
    product: Optional[MatrixOpResult] = None

    @property
    def ok(self) -> bool:
        results = [self.det, self.sum, self.product]
        return all(r.ok for r in results if r is not None)


def _write_result(out: TextIO, label: str, result: MatrixOpResult) -> None:
    if result.ok:
        out.write(f"{label} =\n{result.value}\n")
    else:
        out.write(f"{label} undefined: {result.details}\n")


def _cross_check_det(matrix: Matrix, det: MatrixOpResult) -> Optional[float]:
    """
    Сверка cofactor expansion с det_lu.

    Расхождение не считается ошибкой запуска, только логируется.

    Returns:
        det_lu(matrix) или None, если сверка неприменима
    """
    if not det.ok or not is_valid_float(det.value):
        return None

    reference = matrix.det_lu()
    if not is_close(
        det.value,
        reference,
        rel_tol=DET_CROSS_CHECK_REL_TOL,
        abs_tol=DET_CROSS_CHECK_ABS_TOL,
    ):
        logger.warning(
            "det mismatch: cofactor=%r, lu=%r (%dx%d)",
            det.value,
            reference,
            matrix.m,
            matrix.n,
        )
    return reference


def run_demo(config: DemoConfig, rng: random.Random, out: TextIO) -> DemoReport:
    """
    Один запуск драйвера.

    Args:
        config: Параметры запуска
        rng: Источник случайности (создаётся вызывающим кодом)
        out: Поток вывода

    Returns:
        DemoReport со всеми вычисленными результатами
    """
    logger.info(
        "Generating %dx%d matrix, entries in [%s, %s)",
        config.rows,
        config.cols,
        config.low,
        config.high,
    )
    first = random_matrix(config.rows, config.cols, rng, config.low, config.high)

    out.write(f"{first}\n")

    det = safe_det(first, method=config.method)
    if det.ok:
        out.write(f"det(mat) = {format_entry(det.value)}\n")
    else:
        out.write(f"det(mat) undefined: {det.details}\n")

    det_reference = _cross_check_det(first, det) if config.method == "cofactor" else None

    if not config.extended:
        return DemoReport(first=first, det=det, det_reference=det_reference)

    # mul использует strict-соотношение: второй операнд имеет форму cols x rows
    second = random_matrix(config.cols, config.rows, rng, config.low, config.high)
    out.write(f"\n{second}\n")

    total = safe_add(first, second)
    product = safe_mul(first, second)
    _write_result(out, "mat + mat2", total)
    _write_result(out, "mat * mat2", product)

    return DemoReport(
        first=first,
        det=det,
        det_reference=det_reference,
        second=second,
        sum=total,
        product=product,
    )
