"""
Matrix — плотная матрица вещественных чисел фиксированного размера

Pydantic модель m x n матрицы с row-major буфером entries:
    элемент (i, j) хранится по flat-индексу i*n + j

Операции:
- Конструирование: new (zero-filled), from_rows, identity, parse
- Индексация: get_index, get_coords, get / set, mat[i, j]
- Производные представления: get_row_vec, get_col_vec, sub_matrix
- Арифметика: det, det_lu, add, mul (strict), matmul (conventional)
- Рендеринг: str(mat) / render()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(entries) == m * n (проверяется при создании)
2. Размеры не меняются после создания (нет in-place resize)
3. sub_matrix и результаты арифметики — независимые копии, без aliasing
4. Все ошибки размерностей → DimensionMismatch, индексов → OutOfRange
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.errors import DimensionMismatch, OutOfRange
from src.core.math.determinant import det_cofactor, det_lu
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    entries_close,
    validate_dimension,
    validate_index,
)
from src.core.math.rendering import parse_matrix_text, render_entries


def _dot(row: list[float], col: list[float]) -> float:
    """Скалярное произведение: левая свёртка попарных произведений от 0.0"""
    acc = 0.0
    for a, b in zip(row, col):
        acc += a * b
    return acc


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Плотная m x n матрица float в row-major порядке.

    Mutable модель: элементы можно присваивать напрямую
    (mat.entries[k] = x) или через set(i, j, x). Размеры фиксированы.
    """

    m: int = Field(..., ge=0, description="Количество строк")
    n: int = Field(..., ge=0, description="Количество столбцов")
    entries: list[float] = Field(
        default_factory=list, description="Row-major буфер длины m*n"
    )

    @model_validator(mode="after")
    def validate_entries_length(self) -> "Matrix":
        """Инвариант буфера: len(entries) == m * n"""
        expected = self.m * self.n
        if len(self.entries) != expected:
            raise ValueError(
                f"entries length {len(self.entries)} does not match "
                f"{self.m}x{self.n} (expected {expected})"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, m: int, n: int) -> "Matrix":
        """
        Создание m x n матрицы, заполненной 0.0.

        Нулевая размерность допустима (пустая матрица).

        Raises:
            OutOfRange: Если m или n отрицательные
        """
        validate_dimension(m, "m")
        validate_dimension(n, "n")
        return cls(m=m, n=n, entries=[0.0] * (m * n))

    @classmethod
    def from_rows(cls, rows: list[list[float]]) -> "Matrix":
        """
        Создание матрицы из списка строк одинаковой длины (копия данных).

        Raises:
            DimensionMismatch: Если строки разной длины
        """
        if not rows:
            return cls.new(0, 0)

        n = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != n:
                raise DimensionMismatch(
                    f"Ragged rows: row {i} has {len(row)} entries, expected {n}"
                )

        return cls(m=len(rows), n=n, entries=[float(x) for row in rows for x in row])

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size x size"""
        mat = cls.new(size, size)
        for i in range(size):
            mat.entries[mat.get_index(i, i)] = 1.0
        return mat

    @classmethod
    def parse(cls, text: str) -> "Matrix":
        """
        Восстановление матрицы из текстового формата render().

        Raises:
            DimensionMismatch: Если строки разной длины
            ValueError: Если токен не является числом
        """
        m, n, entries = parse_matrix_text(text)
        return cls(m=m, n=n, entries=entries)

    # -------------------------------------------------------------------------
    # Индексация
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return (self.m, self.n)

    def is_square(self) -> bool:
        return self.m == self.n

    def get_index(self, i: int, j: int) -> int:
        """
        Отображение (i, j) → flat-индекс i*n + j.

        Raises:
            OutOfRange: Если i вне [0, m) или j вне [0, n)
        """
        validate_index(i, self.m, "i")
        validate_index(j, self.n, "j")
        return i * self.n + j

    def get_coords(self, idx: int) -> tuple[int, int]:
        """
        Обратное отображение flat-индекса → (idx // n, idx % n).

        Raises:
            OutOfRange: Если idx вне [0, m*n)
        """
        validate_index(idx, self.m * self.n, "idx")
        return divmod(idx, self.n)

    def get(self, i: int, j: int) -> float:
        return self.entries[self.get_index(i, j)]

    def set(self, i: int, j: int, value: float) -> None:
        self.entries[self.get_index(i, j)] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = key
        self.set(i, j, value)

    def get_row_vec(self, i: int) -> list[float]:
        """Строка i как новый список из n элементов (в порядке столбцов)"""
        validate_index(i, self.m, "i")
        start = i * self.n
        return self.entries[start : start + self.n]

    def get_col_vec(self, j: int) -> list[float]:
        """Столбец j как новый список из m элементов (в порядке строк)"""
        validate_index(j, self.n, "j")
        return self.entries[j :: self.n]

    def sub_matrix(self, i: int, j: int) -> "Matrix":
        """
        Минор-матрица (m-1) x (n-1) без строки i и столбца j.

        Относительный row-major порядок оставшихся элементов сохраняется.

        Raises:
            OutOfRange: Если m == 0 или n == 0, либо i / j вне диапазона
        """
        if self.m == 0 or self.n == 0:
            raise OutOfRange(f"sub_matrix on empty {self.m}x{self.n} matrix")
        validate_index(i, self.m, "i")
        validate_index(j, self.n, "j")

        entries = []
        for idx, value in enumerate(self.entries):
            row, col = self.get_coords(idx)
            if row != i and col != j:
                entries.append(value)

        return Matrix(m=self.m - 1, n=self.n - 1, entries=entries)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def det(self) -> float:
        """
        Определитель через cofactor expansion по строке 0.

        Сложность O(n!) — только для малых матриц. Для быстрого
        вычисления см. det_lu().

        Raises:
            DimensionMismatch: Если матрица не квадратная
        """
        return det_cofactor(self)

    def det_lu(self) -> float:
        """Определитель через Gaussian elimination с partial pivoting, O(n³)"""
        return det_lu(self)

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatch: Если формы операндов различаются
        """
        if self.m != other.m or self.n != other.n:
            raise DimensionMismatch(
                f"add requires equal shapes, got {self.m}x{self.n} and {other.m}x{other.n}"
            )
        entries = [a + b for a, b in zip(self.entries, other.entries)]
        return Matrix(m=self.m, n=self.n, entries=entries)

    def mul(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение со strict-соотношением форм.

        Требует self.m == other.n и self.n == other.m (операнды —
        transposable-shape партнёры). Это строже обычного правила
        self.n == other.m; для обычного правила см. matmul().

        Returns:
            Матрица self.m x other.n, элемент (i, j) = row_i(self) · col_j(other)

        Raises:
            DimensionMismatch: Если соотношение форм не выполняется
        """
        if self.m != other.n or self.n != other.m:
            raise DimensionMismatch(
                f"mul requires transposable shapes (self.m == other.n and "
                f"self.n == other.m), got {self.m}x{self.n} and {other.m}x{other.n}"
            )
        return self._product(other)

    def matmul(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение по обычному правилу self.n == other.m.

        Raises:
            DimensionMismatch: Если self.n != other.m
        """
        if self.n != other.m:
            raise DimensionMismatch(
                f"matmul requires self.n == other.m, got {self.m}x{self.n} "
                f"and {other.m}x{other.n}"
            )
        return self._product(other)

    def _product(self, other: "Matrix") -> "Matrix":
        rows = [self.get_row_vec(i) for i in range(self.m)]
        cols = [other.get_col_vec(j) for j in range(other.n)]
        entries = [_dot(row, col) for row in rows for col in cols]
        return Matrix(m=self.m, n=other.n, entries=entries)

    def allclose(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение с другой матрицей с учётом машинной точности.

        Returns:
            False если формы различаются или хотя бы одна пара элементов не близка
        """
        if self.shape != other.shape:
            return False
        return entries_close(self.entries, other.entries, rel_tol=rel_tol, abs_tol=abs_tol)

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Текстовое представление: строки через '\\n', элементы через пробел"""
        return render_entries(self.entries, self.n)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix(m={self.m}, n={self.n})"
