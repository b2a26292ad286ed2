"""
Тесты для Determinant — cofactor expansion и LU

Проверяемые инварианты:
1. Базовые случаи cofactor expansion (0x0, 1x1, 2x2)
2. Известные значения для 3x3 и 4x4
3. DimensionMismatch для неквадратных матриц
4. Cross-check: det_cofactor ≈ det_lu ≈ numpy.linalg.det
5. Исходная матрица не изменяется
"""

import math
import random

import numpy as np
import pytest

from src.core.domain import DimensionMismatch, Matrix
from src.core.math.determinant import det_cofactor, det_lu, require_square


def _random_square(size: int, seed: int) -> Matrix:
    rng = random.Random(seed)
    return Matrix.from_rows(
        [[rng.uniform(-10.0, 10.0) for _ in range(size)] for _ in range(size)]
    )


# =============================================================================
# ТЕСТЫ: Cofactor Expansion
# =============================================================================


class TestDetCofactor:
    """Тесты Matrix.det (Laplace expansion по строке 0)."""

    def test_empty_matrix_is_zero(self):
        """Вырожденный терминал: 0x0 → 0.0"""
        assert Matrix.new(0, 0).det() == 0.0

    def test_one_by_one(self):
        assert Matrix.from_rows([[7.5]]).det() == 7.5

    def test_two_by_two(self):
        """det([[1,2],[3,4]]) = 1*4 - 2*3 = -2"""
        assert Matrix.from_rows([[1, 2], [3, 4]]).det() == -2.0

    def test_identity(self):
        assert Matrix.identity(3).det() == 1.0
        assert Matrix.identity(5).det() == 1.0

    def test_known_three_by_three(self):
        mat = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert mat.det() == pytest.approx(-306.0)

    def test_triangular_four_by_four(self):
        """Определитель треугольной матрицы — произведение диагонали"""
        mat = Matrix.from_rows(
            [[2, 1, 3, 4], [0, 3, 5, 6], [0, 0, 4, 7], [0, 0, 0, 5]]
        )
        assert mat.det() == pytest.approx(120.0)

    def test_singular(self):
        mat = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert mat.det() == pytest.approx(0.0, abs=1e-9)

    def test_row_swap_flips_sign(self):
        a = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        b = Matrix.from_rows([[4, -2, 5], [6, 1, 1], [2, 8, 7]])
        assert b.det() == pytest.approx(-a.det())

    def test_non_square_raises(self):
        with pytest.raises(DimensionMismatch, match="square matrix, got 2x3"):
            Matrix.new(2, 3).det()

    def test_matrix_unchanged(self):
        mat = Matrix.from_rows([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        before = list(mat.entries)
        mat.det()
        assert mat.entries == before

    def test_nan_propagates(self):
        mat = Matrix.from_rows([[float("nan"), 1.0], [2.0, 3.0]])
        assert math.isnan(mat.det())

    def test_function_matches_method(self):
        mat = _random_square(4, seed=3)
        assert det_cofactor(mat) == mat.det()


# =============================================================================
# ТЕСТЫ: LU
# =============================================================================


class TestDetLU:
    """Тесты det_lu (Gaussian elimination с partial pivoting)."""

    def test_two_by_two(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).det_lu() == pytest.approx(-2.0)

    def test_empty_matrix_is_zero(self):
        assert det_lu(Matrix.new(0, 0)) == 0.0

    def test_singular_returns_zero(self):
        assert Matrix.from_rows([[1, 2], [2, 4]]).det_lu() == 0.0

    def test_pivot_below_threshold_is_singular(self):
        """Pivot не больше EPS_PIVOT считается нулём"""
        mat = Matrix.from_rows([[1e-301, 0.0], [0.0, 1.0]])
        assert mat.det_lu() == 0.0
        assert mat.det() == 1e-301

    def test_small_pivot_above_threshold_kept(self):
        mat = Matrix.from_rows([[1e-200, 0.0], [0.0, 2.0]])
        assert mat.det_lu() == pytest.approx(2e-200, rel=1e-12, abs=0.0)

    def test_zero_leading_entry_needs_pivot(self):
        """a[0][0] == 0 требует перестановки строк"""
        mat = Matrix.from_rows([[0, 1], [1, 0]])
        assert mat.det_lu() == pytest.approx(-1.0)

    def test_non_square_raises(self):
        with pytest.raises(DimensionMismatch, match="det_lu"):
            Matrix.new(3, 2).det_lu()

    def test_matrix_unchanged(self):
        mat = _random_square(4, seed=11)
        before = list(mat.entries)
        mat.det_lu()
        assert mat.entries == before


# =============================================================================
# ТЕСТЫ: Cross-check
# =============================================================================


class TestCrossCheck:
    """Сравнение cofactor expansion с независимыми методами."""

    @pytest.mark.parametrize("size", [1, 2, 3, 4, 5, 6])
    @pytest.mark.parametrize("seed", [0, 1, 42])
    def test_cofactor_matches_lu(self, size, seed):
        mat = _random_square(size, seed)
        assert mat.det() == pytest.approx(mat.det_lu(), rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("size", [2, 3, 4, 5])
    def test_cofactor_matches_numpy(self, size):
        mat = _random_square(size, seed=size * 7)
        reference = np.linalg.det(np.array(mat.entries).reshape(size, size))
        assert mat.det() == pytest.approx(float(reference), rel=1e-9, abs=1e-9)


class TestRequireSquare:
    def test_square_passes(self):
        require_square(Matrix.new(2, 2), "det")

    def test_non_square_raises(self):
        with pytest.raises(DimensionMismatch, match="trace requires a square matrix"):
            require_square(Matrix.new(1, 2), "trace")
