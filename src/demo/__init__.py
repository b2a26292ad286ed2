"""Demo driver — случайные матрицы, печать и вычисления из командной строки."""

from .config import DemoConfig
from .generator import random_matrix
from .runner import DemoReport, run_demo

__all__ = [
    "DemoConfig",
    "DemoReport",
    "random_matrix",
    "run_demo",
]
