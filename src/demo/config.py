"""Конфигурация демонстрационного драйвера."""

from dataclasses import dataclass
from typing import Final, Optional

# Размер матрицы по умолчанию (3x3)
DEFAULT_SIZE: Final[int] = 3

# Диапазон элементов случайной матрицы: [low, high)
DEFAULT_ENTRY_LOW: Final[float] = 1.0
DEFAULT_ENTRY_HIGH: Final[float] = 20.0

DET_METHODS: Final[tuple[str, ...]] = ("cofactor", "lu")

# Допуск сверки cofactor expansion с det_lu в драйвере
DET_CROSS_CHECK_REL_TOL: Final[float] = 1e-9
DET_CROSS_CHECK_ABS_TOL: Final[float] = 1e-9


@dataclass(frozen=True)
class DemoConfig:
    """Параметры запуска драйвера.

    - rows / cols: размеры генерируемых матриц
    - low / high: диапазон элементов [low, high)
    - seed: seed для random.Random (None — недетерминированный запуск)
    - extended: дополнительно печатать вторую матрицу, сумму и произведение
    - method: алгоритм определителя ("cofactor" или "lu")
    """
    rows: int = DEFAULT_SIZE
    cols: int = DEFAULT_SIZE
    low: float = DEFAULT_ENTRY_LOW
    high: float = DEFAULT_ENTRY_HIGH
    seed: Optional[int] = None
    extended: bool = False
    method: str = "cofactor"

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(
                f"rows and cols must be non-negative, got {self.rows}x{self.cols}"
            )
        if not self.low < self.high:
            raise ValueError(f"low must be < high, got [{self.low}, {self.high})")
        if self.method not in DET_METHODS:
            raise ValueError(f"method must be one of {DET_METHODS}, got {self.method!r}")
